"""Scatter module

This module computes the cross-class scatter matrices used by LDA. Inputs use
the scikit-learn convention (samples x features); internally the data is
transposed to features x samples, consistent with the way the scatter
matrices are usually written.
"""

# Import
import logging

import numpy as np
import pandas as pd

from linproj.errors import DimensionMismatchError, FitError, InsufficientClassesError

logger = logging.getLogger(__name__)


def encode_labels(y):
    """Encode class labels as integer codes.

    Inputs:
    :y -- Class label for each sample (n,)

    Outputs:
    :classes -- Sorted distinct labels (k,)
    :codes -- Index into classes for each sample (n,)
    """
    y = np.asarray(y).ravel()
    codes, classes = pd.factorize(y, sort=True)
    if np.any(codes < 0):
        raise FitError('Class labels must not contain missing values')
    return np.asarray(classes), codes


def _centered_transpose(X, y):
    """Validate inputs and return mean-centered data (p x n) and label codes."""
    X = np.asarray(X, dtype=np.float64)
    if X.ndim != 2:
        raise DimensionMismatchError(f'X must be a 2-D matrix; got {X.ndim} dimension(s)')
    n = X.shape[0]
    classes, codes = encode_labels(y)
    if len(codes) != n:
        raise DimensionMismatchError(
            f'Number of labels ({len(codes)}) does not match number of samples ({n})'
        )
    if len(classes) < 2:
        raise InsufficientClassesError(
            f'At least 2 distinct classes are required; got {len(classes)}'
        )

    # Transpose input data to column-vector form (columns are now samples)
    logger.info('Mean-centering the data')
    X = X.T
    m = np.mean(X, axis=1, keepdims=True)
    return X - m, classes, codes


def _class_deviations(Xc, codes, n_classes):
    """Subtract each sample's class mean from the centered data (p x n)."""
    logger.info('Computing the mean for each class')
    mc = np.zeros((Xc.shape[0], n_classes))
    for i in range(n_classes):
        mc[:, i] = np.mean(Xc[:, codes == i], axis=1)
    return Xc - mc[:, codes]


def within_class_deviations(X, y):
    """Deviation of each sample from its own class mean.

    Inputs:
    :X -- Data matrix (n_samples x n_features)
    :y -- Class labels (n_samples,)

    Outputs:
    :D -- Deviations (n_samples x n_features). Rows for a class with a single
        sample are exactly zero.
    """
    Xc, classes, codes = _centered_transpose(X, y)
    return _class_deviations(Xc, codes, len(classes)).T


def cross_class_scatter(X, y):
    """Compute between-class and within-class scatter.

    Both matrices are normalized by the number of samples, so that SB + SW is
    the (biased) total covariance of X.

    Inputs:
    :X -- Data matrix (n_samples x n_features)
    :y -- Class labels (n_samples,)

    Outputs:
    :SB -- Between-class scatter (n_features x n_features)
    :SW -- Within-class scatter (n_features x n_features)
    """
    Xc, classes, codes = _centered_transpose(X, y)
    n = Xc.shape[1]
    D = _class_deviations(Xc, codes, len(classes))

    logger.info('Computing within-class scatter')
    SW = D @ D.T / n

    logger.info('Computing between-class scatter')
    SB = Xc @ Xc.T / n - SW

    return SB, SW
