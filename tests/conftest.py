"""Shared fixtures for linproj tests."""

import numpy as np
import pandas as pd
import pytest


@pytest.fixture
def separated_data():
    """2 features, 2 classes, 6 samples with clearly separated class means."""
    X = np.array([
        [0.0, 0.0],
        [0.2, 0.1],
        [0.1, 0.3],
        [5.0, 5.0],
        [5.3, 5.1],
        [5.1, 4.8],
    ])
    y = np.array(['a', 'a', 'a', 'b', 'b', 'b'])
    return X, y


@pytest.fixture
def flower_frame():
    """Iris-like table: four feature columns followed by a 'Species' column."""
    rng = np.random.default_rng(0)
    means = {
        'setosa': [5.0, 3.4, 1.5, 0.2],
        'versicolor': [5.9, 2.8, 4.3, 1.3],
        'virginica': [6.6, 3.0, 5.6, 2.0],
    }
    frames = []
    for species, mu in means.items():
        values = rng.normal(mu, 0.3, size=(20, 4))
        frame = pd.DataFrame(
            values, columns=['Sepal.Length', 'Sepal.Width', 'Petal.Length', 'Petal.Width']
        )
        frame['Species'] = species
        frames.append(frame)
    return pd.concat(frames, ignore_index=True)
