"""Projection model module

This module contains the fitted LDA artifact. A ProjectionModel is created
once per fit and is not modified afterwards; all accessors return read-only or
copied data.
"""

# Import
import numpy as np
import pandas as pd

from linproj.errors import (
    DimensionMismatchError, InvalidFeatureError, MissingFeatureError
)


class ProjectionModel:
    """Fitted LDA projection.

    Attributes:
    :eigenvalues -- Separation quality of each component, decreasing
    :loadings -- DataFrame (features x components) of projection directions
    :classes -- Distinct class labels seen during fitting
    :lam -- Regularization coefficient used during fitting
    """

    def __init__(self, eigenvalues, loadings, classes=None, lam=None):
        eigenvalues = np.array(eigenvalues, dtype=np.float64).ravel()
        if loadings.shape[1] != eigenvalues.shape[0]:
            raise DimensionMismatchError(
                f'Number of eigenvalues ({eigenvalues.shape[0]}) does not match '
                f'number of loading columns ({loadings.shape[1]})'
            )
        eigenvalues.setflags(write=False)
        self._eigenvalues = eigenvalues
        self._loadings = loadings.astype(np.float64).copy()
        self._classes = None if classes is None else tuple(classes)
        self._lam = lam

    def __repr__(self):
        return (
            f'ProjectionModel(n_features={self.n_features}, '
            f'n_components={self.n_components}, lam={self._lam})'
        )

    @property
    def eigenvalues(self):
        return self._eigenvalues

    @property
    def loadings(self):
        return self._loadings.copy()

    @property
    def classes(self):
        return self._classes

    @property
    def lam(self):
        return self._lam

    @property
    def feature_names(self) -> list:
        return list(self._loadings.index)

    @property
    def component_names(self) -> list:
        return list(self._loadings.columns)

    @property
    def n_features(self) -> int:
        return self._loadings.shape[0]

    @property
    def n_components(self) -> int:
        return self._loadings.shape[1]

    def project(self, new_data):
        """Project data onto the LDA components.

        Features are matched by name for DataFrames and by position for
        arrays. Extra columns are ignored.

        Inputs:
        :new_data -- DataFrame or array (n_samples x n_features)

        Outputs:
        :Xp -- DataFrame (n_samples x n_components), indexed like new_data
        """
        if not isinstance(new_data, pd.DataFrame):
            try:
                new_data = np.asarray(new_data, dtype=np.float64)
            except (TypeError, ValueError) as err:
                raise InvalidFeatureError(f'Features must be numeric: {err}') from err
            if new_data.ndim == 1:
                new_data = new_data[np.newaxis, :]
            new_data = pd.DataFrame(new_data)

        # Ensure the new data contains all the required features
        missing = [f for f in self._loadings.index if f not in new_data.columns]
        if missing:
            raise MissingFeatureError(missing)

        # Extract the relevant columns in training order and project
        selected = new_data.loc[:, self._loadings.index]
        try:
            X = selected.to_numpy(dtype=np.float64)
        except (TypeError, ValueError) as err:
            raise InvalidFeatureError(f'Features must be numeric: {err}') from err
        if X.shape[1] != self.n_features:
            raise DimensionMismatchError('New data contains duplicated feature columns')
        Xp = X @ self._loadings.to_numpy()

        return pd.DataFrame(Xp, index=new_data.index, columns=self._loadings.columns)
