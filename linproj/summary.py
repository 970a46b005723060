"""Tidy summaries of fitted LDA models

tidy() lists the component loadings per feature, glance() gives a one-row
summary of the eigenvalues (variance quotients), and augment() appends the
projections to the data.
"""

# Import
import numpy as np
import pandas as pd

from linproj.utilities import load_config


def tidy(model):
    """Component loadings as a DataFrame with a leading 'Feature' column.

    Example:
          Feature      LDA1        LDA2
    0  Sepal.Length  0.626970 -0.01449191
    1   Sepal.Width  1.181041 -2.14917074
    """
    X = model.loadings
    X.insert(0, 'Feature', X.index)
    return X.reset_index(drop=True)


def glance(model, prefix=None):
    """One-row DataFrame of eigenvalues named VQ1, VQ2, ..."""
    if prefix is None:
        prefix = load_config()['quality_prefix']
    columns = [f'{prefix}{i + 1}' for i in range(len(model.eigenvalues))]
    return pd.DataFrame([model.eigenvalues], columns=columns)


def augment(model, new_data):
    """Append projections onto the LDA components to a copy of new_data."""
    if not isinstance(new_data, pd.DataFrame):
        new_data = pd.DataFrame(np.atleast_2d(np.asarray(new_data)))
    Xp = model.project(new_data)
    return pd.concat([new_data, Xp], axis=1)
