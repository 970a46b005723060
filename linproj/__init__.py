"""linproj

Linear projections of labelled data. Implements regularized Linear
Discriminant Analysis via the generalized symmetric eigenvalue problem.

"""

import logging

# Import top-level modules
from linproj.errors import (
    LinprojError, FitError, DimensionMismatchError, InsufficientClassesError,
    EigenSolveError, MissingFeatureError, InvalidFeatureError, InputSpecError
)
from linproj.linalg import generalized_eigh
from linproj.scatter import cross_class_scatter
from linproj.model import ProjectionModel
from linproj.discriminant import fit, lda, whiten, LDA
from linproj.summary import tidy, glance, augment

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = '0.1'
