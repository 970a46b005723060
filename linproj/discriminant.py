"""Discriminant analysis module

This module fits regularized LDA models. The within-class scatter is slightly
whitened so that it is positive definite, and the projection directions are
obtained from the generalized eigenvalue problem SB v = lambda SW v.
"""

# Import
import logging

import numpy as np
import pandas as pd

from linproj.errors import DimensionMismatchError, EigenSolveError, FitError
from linproj.inputs import as_input, normalize
from linproj.linalg import generalized_eigh
from linproj.model import ProjectionModel
from linproj.scatter import cross_class_scatter, encode_labels
from linproj.utilities import load_config

logger = logging.getLogger(__name__)


def whiten(SW, lam):
    """Add a multiple of the identity scaled by the largest absolute entry."""
    SW = np.asarray(SW, dtype=np.float64)
    return SW + lam * np.max(np.abs(SW)) * np.eye(SW.shape[0])


def _as_feature_matrix(X):
    """Return the data as a float array along with its feature names."""
    if isinstance(X, pd.DataFrame):
        feature_names = X.columns
        values = X.to_numpy()
    else:
        values = np.asarray(X)
        feature_names = None

    try:
        values = values.astype(np.float64)
    except (TypeError, ValueError) as err:
        raise FitError(f'Features must be numeric: {err}') from err
    if values.ndim != 2:
        raise DimensionMismatchError(f'X must be a 2-D matrix; got {values.ndim} dimension(s)')
    if not np.all(np.isfinite(values)):
        raise FitError('Features must be finite (no NaN or infinite values)')

    # Features without names are identified by position
    if feature_names is None:
        feature_names = pd.RangeIndex(values.shape[1])

    return values, feature_names


def fit(X, y, lam=0.1, abstol=1e-5, component_prefix='LDA'):
    """Fit a regularized LDA model.

    Inputs:
    :X -- Data matrix (n_samples x n_features); DataFrame column names are
        kept as feature names
    :y -- Class labels (n_samples,)
    :lam -- Regularization coefficient (>= 0). Higher values lead to less
        overfitting at the cost of poorer separation between the classes.
    :abstol -- Convergence tolerance passed to the eigenvalue solver

    Outputs:
    :model -- ProjectionModel with K - 1 components, where K is the number of
        classes
    """
    X, feature_names = _as_feature_matrix(X)
    n, p = X.shape
    y = np.asarray(y).ravel()
    if len(y) != n:
        raise DimensionMismatchError(
            f'Number of labels ({len(y)}) does not match number of samples ({n})'
        )
    classes, _ = encode_labels(y)
    K = len(classes)
    if K - 1 > p:
        raise DimensionMismatchError(
            f'{K} classes require {K - 1} components but there are only {p} features'
        )
    if not lam >= 0:
        raise FitError(f'lam must be non-negative; got {lam}')

    # Compute the scatter matrices
    SB, SW = cross_class_scatter(X, y)

    # The within-class scatter has to be full rank. Slightly whiten the matrix
    # as necessary.
    logger.info('Whitening within-class scatter with lambda = %g', lam)
    SW = whiten(SW, lam)

    # Compute the bases
    logger.info('Solving the generalized eigenvalue problem')
    w, v = generalized_eigh(SB, SW, K - 1, abstol=abstol)
    if len(w) < K - 1:
        raise EigenSolveError(
            f'Only {len(w)} of {K - 1} eigenpairs converged; '
            'consider increasing lam'
        )

    component_names = [f'{component_prefix}{i + 1}' for i in range(K - 1)]
    loadings = pd.DataFrame(v, index=feature_names, columns=component_names)

    return ProjectionModel(w, loadings, classes=classes, lam=lam)


def lda(X, y=None, lam=None, config_path=None):
    """Linear Discriminant Analysis.

    All of the following are equivalent ways to fit a model on a DataFrame
    with four feature columns followed by a 'Species' column:

        lda(df, 'Species')
        lda(df, 4)
        lda(df.iloc[:, :4], df['Species'])
        lda(df.iloc[:, :4].to_numpy(), df['Species'])
        lda('Species ~ .', df)
        lda('Species ~ Sepal.Length + Sepal.Width + Petal.Length + Petal.Width', df)

    The last form expects the formula first and the DataFrame second. If lam
    is not given, the configured default is used.
    """
    config = load_config(config_path)
    if lam is None:
        lam = config['lambda']

    features, labels = normalize(as_input(X, y))
    return fit(
        features, labels, lam=lam,
        abstol=config['abstol'],
        component_prefix=config['component_prefix']
    )


class LDA:
    """Linear Discriminant Analysis (LDA)

    Thin estimator interface around fit(), consistent with the scikit-learn
    decomposition module.
    """

    def __init__(self, lam=0.1, abstol=1e-5):
        self.lam = lam
        self.abstol = abstol

        # Placeholder for fitted model
        self.model = None

    def fit(self, X, y):
        """Fit the projection directions."""
        self.model = fit(X, y, lam=self.lam, abstol=self.abstol)
        return self

    def transform(self, X):
        """Project samples onto the LDA components (n_samples x n_components)."""
        if self.model is None:
            raise RuntimeError('LDA not fitted')
        return self.model.project(X).to_numpy()

    def fit_transform(self, X, y):
        """Fit and transform."""
        self.fit(X, y)
        return self.transform(X)
