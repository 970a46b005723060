"""Exceptions module

This module contains the exceptions raised by the linproj package. Fitting
errors share the FitError base so callers can catch every failure of a fit
call at once.
"""


class LinprojError(Exception):
    """Base class for all linproj errors."""


class FitError(LinprojError):
    """Fitting an LDA model failed."""


class DimensionMismatchError(FitError, ValueError):
    """Input dimensions are inconsistent (labels vs. samples, matrix shapes)."""


class InsufficientClassesError(FitError, ValueError):
    """Fewer than two distinct class labels were provided."""


class EigenSolveError(FitError):
    """Generalized eigenvalue solve failed.

    Attributes:
    :info -- Status code returned by LAPACK (None if the failure was detected
        after a successful call, e.g. too few converged eigenpairs)
    :failed -- 1-based indices of eigenvectors that failed to converge
    """

    def __init__(self, message, info=None, failed=None):
        super().__init__(message)
        self.info = info
        self.failed = [] if failed is None else list(failed)


class MissingFeatureError(LinprojError, ValueError):
    """New data does not contain all features the model was trained on."""

    def __init__(self, missing):
        self.missing = list(missing)
        names = ' '.join(str(m) for m in self.missing)
        super().__init__(
            f'The following features are missing from new data: {names}'
        )


class InputSpecError(LinprojError, ValueError):
    """Training data specification could not be resolved."""


class InvalidFeatureError(LinprojError, ValueError):
    """New data contains feature values that cannot be used for projection."""
