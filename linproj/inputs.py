"""Input specification module

Training data can be given in three forms:

    MatrixInput   -- feature matrix (array or DataFrame) and a labels vector
    TableInput    -- DataFrame and a reference (name or position) to its label
                     column
    FormulaInput  -- model formula such as 'Species ~ .' and a DataFrame

Each form is resolved once by normalize() into a (features, labels) pair.
Column resolution problems are reported here, before any fitting is done.
"""

# Import
import re
from typing import Any, NamedTuple

import numpy as np
import pandas as pd

from linproj.errors import InputSpecError


class MatrixInput(NamedTuple):
    features: Any
    labels: Any


class TableInput(NamedTuple):
    data: pd.DataFrame
    column: Any


class FormulaInput(NamedTuple):
    formula: str
    data: pd.DataFrame


def as_input(X, y):
    """Wrap the arguments of lda() in the matching input specification."""
    if isinstance(X, str):
        if not isinstance(y, pd.DataFrame):
            raise InputSpecError('A formula must be accompanied by a DataFrame')
        return FormulaInput(X, y)
    if isinstance(X, pd.DataFrame) and (isinstance(y, str) or np.ndim(y) == 0):
        return TableInput(X, y)
    if y is None:
        raise InputSpecError('y must be a column name, column index, or a labels vector')
    return MatrixInput(X, y)


def resolve_column(data, column):
    """Return the label of a DataFrame column given its name or position.

    Integers are positions. Strings are matched exactly first; otherwise the
    string is used as a regular expression searched against the column names
    and must match exactly one column.
    """
    if isinstance(column, (bool, np.bool_)):
        raise InputSpecError('y must be a column name, column index, or a labels vector')

    # Column index
    if isinstance(column, (int, np.integer)):
        n_cols = data.shape[1]
        if not -n_cols <= column < n_cols:
            raise InputSpecError(
                f'Column index {column} is out of range for {n_cols} columns'
            )
        return data.columns[column]

    # Column name
    if isinstance(column, str):
        names = [str(c) for c in data.columns]
        if column in names:
            return data.columns[names.index(column)]
        try:
            pattern = re.compile(column)
        except re.error as err:
            raise InputSpecError(f'No such column {column}') from err
        matches = [c for c, name in zip(data.columns, names) if pattern.search(name)]
        if len(matches) < 1:
            raise InputSpecError(f'No such column {column}')
        if len(matches) > 1:
            raise InputSpecError(f'Multiple columns match {column}')
        return matches[0]

    # All other objects are unrecognized
    raise InputSpecError('y must be a column name, column index, or a labels vector')


def _formula_terms(rhs, names):
    """Split the right-hand side of a formula into (sign, name) pairs.

    Terms are '.', a backtick-quoted name, or the longest column name found at
    the current position, so hyphenated names need no quoting. Terms are
    separated by '+' or '-', with or without surrounding spaces.
    """
    candidates = sorted({n for n in names if n} | {'.'}, key=len, reverse=True)
    terms = []
    sign = '+'
    expect_term = True
    pos = 0
    while pos < len(rhs):
        if rhs[pos].isspace():
            pos += 1
        elif not expect_term:
            if rhs[pos] not in '+-':
                token = re.match(r'\S+', rhs[pos:]).group()
                raise InputSpecError(f'Expected + or - before {token} in formula')
            sign = rhs[pos]
            expect_term = True
            pos += 1
        elif rhs[pos] == '`':
            end = rhs.find('`', pos + 1)
            if end < 0:
                raise InputSpecError('Unterminated backtick in formula')
            terms.append((sign, rhs[pos + 1:end]))
            expect_term = False
            pos = end + 1
        else:
            name = next((c for c in candidates if rhs.startswith(c, pos)), None)
            if name is None:
                token = re.match(r'\S+', rhs[pos:]).group()
                raise InputSpecError(f'Variable {token} not found in data')
            terms.append((sign, name))
            expect_term = False
            pos += len(name)

    if expect_term and terms:
        raise InputSpecError('Formula ends with a dangling + or -')
    return terms


def parse_formula(formula, data):
    """Parse a model formula against a DataFrame.

    Supported syntax: 'response ~ a + b', 'response ~ .', and removal of terms
    with '-', e.g. 'response ~ . - a' or 'response ~ .-a'. Names that are not
    columns of data can be quoted with backticks.

    Outputs:
    :response -- Label of the response column
    :terms -- Labels of the feature columns, in formula order
    """
    if '~' not in formula:
        raise InputSpecError('Please provide a response variable')
    lhs, rhs = formula.split('~', 1)
    names = [str(c) for c in data.columns]

    def lookup(name):
        name = name.strip().strip('`')
        if name not in names:
            raise InputSpecError(f'Variable {name} not found in data')
        return data.columns[names.index(name)]

    # Identify the response variable
    if not lhs.strip():
        raise InputSpecError('Please provide a response variable')
    response = lookup(lhs)

    # Collect terms, keeping the order in which they are added
    terms = []
    for sign, name in _formula_terms(rhs, names):
        if name == '.' and '.' not in names:
            added = [c for c in data.columns if c != response]
        else:
            added = [lookup(name)]
        if sign == '+':
            terms.extend(c for c in added if c not in terms)
        else:
            terms = [c for c in terms if c not in added]

    if not terms:
        raise InputSpecError(f'Formula {formula!r} has no feature terms')

    return response, terms


def normalize(spec):
    """Resolve an input specification into (features, labels)."""
    if isinstance(spec, FormulaInput):
        response, terms = parse_formula(spec.formula, spec.data)
        return spec.data.loc[:, terms], spec.data[response]

    if isinstance(spec, TableInput):
        column = resolve_column(spec.data, spec.column)
        return spec.data.drop(columns=column), spec.data[column]

    if isinstance(spec, MatrixInput):
        features = spec.features
        if not isinstance(features, pd.DataFrame):
            features = np.asarray(features)
        labels = spec.labels
        if isinstance(labels, pd.DataFrame):
            if labels.shape[1] != 1:
                raise InputSpecError('Labels must be a single column')
            labels = labels.iloc[:, 0]
        return features, labels

    raise InputSpecError(f'Unrecognized input specification: {type(spec).__name__}')
