"""Linear algebra module

This module wraps the LAPACK symmetric-definite generalized eigenvalue routine
(?sygvx) used to find LDA projection directions. Only the upper tail of the
spectrum is requested, which avoids computing the full decomposition when the
number of components is much smaller than the number of features.
"""

# Import
import logging

import numpy as np
from scipy.linalg import get_lapack_funcs

from linproj.errors import DimensionMismatchError, EigenSolveError

logger = logging.getLogger(__name__)


def generalized_eigh(A, B, n_components=None, abstol=1e-5):
    """Top eigenpairs of the generalized problem A v = lambda B v.

    A and B are assumed to be symmetric (only the upper triangle is read) and
    B must be positive definite.

    Inputs:
    :A -- Symmetric matrix (n x n)
    :B -- Symmetric positive definite matrix (n x n)
    :n_components -- Number of eigenpairs to obtain (defaults to n)
    :abstol -- Absolute convergence tolerance for the eigenvalues

    Outputs:
    :w -- Eigenvalues in decreasing order (M,)
    :v -- Corresponding eigenvectors, one per column (n x M)

    M is the number of converged eigenpairs reported by LAPACK. It normally
    equals n_components; callers that rely on a fixed count must check it.
    """
    A = np.asarray(A, dtype=np.float64)
    B = np.asarray(B, dtype=np.float64)

    # Verify dimensionality
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise DimensionMismatchError(f'A must be a square matrix; got shape {A.shape}')
    if B.shape != A.shape:
        raise DimensionMismatchError(
            f'B must have the same shape as A {A.shape}; got shape {B.shape}'
        )
    n = A.shape[0]
    if n_components is None:
        n_components = n
    if not 1 <= n_components <= n:
        raise ValueError(f'n_components must be between 1 and {n}; got {n_components}')

    # Request eigenvalues by rank index: positions n - n_components + 1 to n
    # (1-based) are the n_components largest
    sygvx, = get_lapack_funcs(('sygvx',), (A, B))
    w, z, m, ifail, info = sygvx(
        A, B,
        itype=1, jobz='V', range='I', uplo='U',
        il=n - n_components + 1, iu=n,
        abstol=abstol
    )

    if info < 0:
        raise EigenSolveError(
            f'Call to {sygvx.typecode}sygvx failed with error code {info}: '
            f'illegal value in argument {-info}',
            info=info
        )
    elif 0 < info <= n:
        failed = [int(i) for i in ifail if i != 0]
        raise EigenSolveError(
            f'Call to {sygvx.typecode}sygvx failed with error code {info}: '
            f'{info} eigenvectors failed to converge',
            info=info, failed=failed
        )
    elif info > n:
        raise EigenSolveError(
            f'Call to {sygvx.typecode}sygvx failed with error code {info}: '
            f'the leading minor of order {info - n} of B is not positive definite',
            info=info
        )
    logger.debug('sygvx converged on %d of %d requested eigenpairs', m, n_components)

    # LAPACK returns ascending eigenvalues; reverse to highest-to-lowest
    w = np.ascontiguousarray(w[:m][::-1])
    v = np.ascontiguousarray(z[:, :m][:, ::-1])

    return w, v
