"""Unit tests for the generalized symmetric eigenvalue solver."""

import numpy as np
import pytest
from scipy import linalg

from linproj.errors import DimensionMismatchError, EigenSolveError
from linproj.linalg import generalized_eigh


def _random_pair(n, seed=0):
    rng = np.random.default_rng(seed)
    R = rng.standard_normal((n, n))
    S = rng.standard_normal((n, n))
    A = (R + R.T) / 2
    B = S @ S.T + n * np.eye(n)
    return A, B


@pytest.mark.parametrize('k', [1, 2, 4, 6])
def test_top_eigenpairs_decreasing(k):
    A, B = _random_pair(6)
    w, v = generalized_eigh(A, B, k)
    assert w.shape == (k,)
    assert v.shape == (6, k)
    assert np.all(np.diff(w) < 0)


@pytest.mark.parametrize('k', [1, 3, 6])
def test_eigenpairs_satisfy_problem(k):
    A, B = _random_pair(6, seed=1)
    w, v = generalized_eigh(A, B, k)
    for i in range(k):
        np.testing.assert_allclose(A @ v[:, i], w[i] * (B @ v[:, i]), atol=1e-4)


def test_matches_full_decomposition():
    A, B = _random_pair(8, seed=2)
    w, _ = generalized_eigh(A, B, 3)
    w_full = linalg.eigh(A, B, eigvals_only=True)[::-1]
    np.testing.assert_allclose(w, w_full[:3], atol=1e-4)


def test_default_requests_full_spectrum():
    A, B = _random_pair(5, seed=3)
    w, v = generalized_eigh(A, B)
    assert len(w) == 5
    assert v.shape == (5, 5)


def test_inputs_not_modified():
    A, B = _random_pair(4)
    A_copy, B_copy = A.copy(), B.copy()
    generalized_eigh(A, B, 2)
    np.testing.assert_array_equal(A, A_copy)
    np.testing.assert_array_equal(B, B_copy)


def test_non_positive_definite_b():
    A, _ = _random_pair(4)
    B = -np.eye(4)
    with pytest.raises(EigenSolveError) as excinfo:
        generalized_eigh(A, B, 2)
    # LAPACK reports n + i when the leading minor of order i of B fails
    assert excinfo.value.info == 4 + 1
    assert 'not positive definite' in str(excinfo.value)


def test_shape_mismatch():
    A, _ = _random_pair(4)
    with pytest.raises(DimensionMismatchError):
        generalized_eigh(A, np.eye(3), 1)
    with pytest.raises(DimensionMismatchError):
        generalized_eigh(np.ones((3, 4)), np.ones((3, 4)), 1)


@pytest.mark.parametrize('k', [0, 5])
def test_invalid_component_count(k):
    A, B = _random_pair(4)
    with pytest.raises(ValueError):
        generalized_eigh(A, B, k)
