#!/usr/bin/env python3
# =============================================================================
#     File: _sparse.py
#  Created: 2025-06-02 10:20
#   Author: Bernie Roesler
#
"""
Coordinate-format (COO) sparse matrices with a configurable index base.

A `SparseMatrix` stores the nonzero entries of a square matrix as three
parallel arrays of (row, column, value) triplets, together with the matrix
dimensions and the convention used for the indices: 0-based (as in numpy and
scipy) or 1-based (as in the edge-lists of a graph). It is the interchange
format between dense arrays, `scipy.sparse` arrays and `EdgeList` graphs.

Example usage:
    from sparsebn import SparseMatrix
    A = SparseMatrix(rows=[1, 3], cols=[2, 2], vals=[0.5, 1.5], dim=(3, 3))
    print(A)
    B = A.to_zero_based()
"""
# =============================================================================

import warnings

from pprint import pformat

import numpy as np
import pandas as pd

from ._errors import InternalInvariantError, ShapeError, ValidationError

__all__ = ['FIELDS', 'ZERO_THRESHOLD', 'SparseMatrix', 'zero_threshold']


FIELDS = ('rows', 'cols', 'vals', 'dim', 'index_base')


def zero_threshold(eps=np.finfo(float).eps):
    r"""Return the tolerance below which a value is treated as zero.

    .. math:: \tau = \sqrt{\varepsilon}

    Parameters
    ----------
    eps : float, optional
        The machine precision. Defaults to the float64 epsilon.

    Returns
    -------
    result : float
        The zero threshold.
    """
    return float(np.sqrt(eps))


ZERO_THRESHOLD = zero_threshold()


def _as_vector(x):
    """Flatten an array_like into a 1D ndarray."""
    return np.asarray(x).reshape(-1)


def _is_index_base(x):
    """Return True if `x` is the integer 0 or 1 (not a bool or a float)."""
    return (isinstance(x, (int, np.integer))
            and not isinstance(x, bool)
            and x in (0, 1))


class SparseMatrix:
    """A square sparse matrix in coordinate (COO) format.

    The component arrays are copied on construction and marked read-only, so
    instances behave as values: every transformation returns a new matrix.

    A value of NaN is a legitimate entry, and marks an edge whose weight is
    unknown (as opposed to an edge that is absent).

    Parameters
    ----------
    rows : (nnz,) array_like of int
        The row index of each stored entry.
    cols : (nnz,) array_like of int
        The column index of each stored entry.
    vals : (nnz,) array_like of float
        The value of each stored entry.
    dim : 2-tuple of int
        The dimensions of the matrix.
    index_base : int in {0, 1}, optional
        The smallest valid index. Defaults to 1.

    Raises
    ------
    ValidationError
        If the components are inconsistent with one another.
    ShapeError
        If `dim` does not describe a square matrix.
    """

    def __init__(self, rows, cols, vals, dim, index_base=1):
        rows = _as_vector(rows)
        cols = _as_vector(cols)
        vals = _as_vector(vals)

        if not (rows.size == cols.size == vals.size):
            raise ValidationError(
                "rows / cols / vals have different sizes "
                f"({rows.size}, {cols.size}, {vals.size}); "
                "they must all have the same length."
            )

        dim = _as_vector(dim)

        if dim.size != 2:
            raise ValidationError(
                f"dim must have exactly 2 components, got {dim.size}."
            )

        if (not np.issubdtype(dim.dtype, np.number)
                or np.any(dim < 0)
                or np.any(dim != np.round(dim))):
            raise ValidationError(
                f"dim must hold non-negative integers, got {dim.tolist()}."
            )

        if dim[0] != dim[1]:
            raise ShapeError(
                f"dim must describe a square matrix, got {dim.tolist()}."
            )

        if not _is_index_base(index_base):
            raise ValidationError(
                f"index_base must be 0 or 1, got {index_base!r}."
            )

        for name, idx in [('rows', rows), ('cols', cols)]:
            if idx.size > 0 and idx.dtype.kind not in 'iu':
                raise ValidationError(
                    f"{name} must hold integers, got dtype '{idx.dtype}'."
                )

        if vals.size > 0 and vals.dtype.kind not in 'iuf':
            raise ValidationError(
                f"vals must hold real numbers, got dtype '{vals.dtype}'."
            )

        self._dim = (int(dim[0]), int(dim[1]))
        self._index_base = int(index_base)

        for name, idx, N in [('rows', rows, self._dim[0]),
                             ('cols', cols, self._dim[1])]:
            lo, hi = self._index_base, N - 1 + self._index_base
            if idx.size > 0 and (idx.min() < lo or idx.max() > hi):
                raise ValidationError(
                    f"{name} must lie in [{lo}, {hi}] for a matrix of "
                    f"shape {self._dim} with index_base={self._index_base}."
                )

        self._rows = rows.astype(np.int64)
        self._cols = cols.astype(np.int64)
        self._vals = vals.astype(np.float64)

        for a in (self._rows, self._cols, self._vals):
            a.setflags(write=False)

    @classmethod
    def from_dict(cls, x):
        """Create a matrix from a mapping of its five named components.

        Parameters
        ----------
        x : dict
            A mapping with exactly the keys 'rows', 'cols', 'vals', 'dim',
            and 'index_base'.

        Returns
        -------
        result : SparseMatrix
            The new matrix.
        """
        if not isinstance(x, dict):
            raise ValidationError(
                f"Input must be a dict, got {type(x).__name__}."
            )

        if set(x) != set(FIELDS) or len(x) != len(FIELDS):
            raise ValidationError(
                "Input is not coercible to a SparseMatrix; it must have "
                f"exactly the keys {FIELDS}, got {tuple(x)}."
            )

        return cls(**x)

    # -------------------------------------------------------------------------
    #         Attributes
    # -------------------------------------------------------------------------
    @property
    def rows(self):
        """The row indices of the stored entries."""
        return self._rows

    @property
    def cols(self):
        """The column indices of the stored entries."""
        return self._cols

    @property
    def vals(self):
        """The values of the stored entries."""
        return self._vals

    @property
    def dim(self):
        """The dimensions of the matrix."""
        return self._dim

    shape = dim

    @property
    def index_base(self):
        """The smallest valid index, 0 or 1."""
        return self._index_base

    @property
    def nnz(self):
        """The number of stored entries."""
        return self._vals.size

    # -------------------------------------------------------------------------
    #         Re-indexing
    # -------------------------------------------------------------------------
    def _reindex(self, index_base):
        """Return a copy of the matrix using `index_base`, without warning."""
        if not _is_index_base(index_base):
            raise ValidationError(
                f"index_base must be 0 or 1, got {index_base!r}."
            )

        if index_base == self._index_base:
            return self

        shift = index_base - self._index_base
        return SparseMatrix(
            self._rows + shift,
            self._cols + shift,
            self._vals,
            self._dim,
            index_base
        )

    def to_zero_based(self):
        """Return the matrix with 0-based indices.

        If the matrix is already 0-based, a warning is issued and the matrix
        itself is returned.
        """
        if self._index_base == 0:
            warnings.warn(
                "This matrix already uses 0-based indexing.",
                UserWarning,
                stacklevel=2
            )
        return self._reindex(0)

    def to_one_based(self):
        """Return the matrix with 1-based indices.

        If the matrix is already 1-based, a warning is issued and the matrix
        itself is returned.
        """
        if self._index_base == 1:
            warnings.warn(
                "This matrix already uses 1-based indexing.",
                UserWarning,
                stacklevel=2
            )
        return self._reindex(1)

    # -------------------------------------------------------------------------
    #         Queries
    # -------------------------------------------------------------------------
    def is_zero(self):
        """Return True if the matrix has no stored entries."""
        return self.nnz == 0

    def num_nodes(self):
        """Return the number of nodes of the graph encoded by the matrix.

        Edges are indexed by their child (column), so this is the number of
        columns.
        """
        return self._dim[1]

    def num_edges(self, threshold=False):
        """Return the number of edges of the graph encoded by the matrix.

        Parameters
        ----------
        threshold : bool, optional
            If True, count only the entries whose magnitude exceeds
            `zero_threshold()`. Every stored entry is expected to pass the
            threshold, so the two counts must agree.

        Returns
        -------
        result : int
            The number of edges.

        Raises
        ------
        InternalInvariantError
            If `threshold` is True and some stored entry is negligible.
        """
        if not threshold:
            return self.nnz

        # NaN entries compare False, so unknown weights are not counted
        with np.errstate(invalid='ignore'):
            is_edge = np.abs(self._vals) > zero_threshold()

        N_above = int(np.count_nonzero(is_edge))

        if N_above != self.nnz:
            raise InternalInvariantError(
                f"Thresholded edge count ({N_above}) does not match the "
                f"number of stored entries ({self.nnz})."
            )

        return N_above

    def transpose(self):
        """Return the transpose of the matrix by swapping rows and columns."""
        return SparseMatrix(
            self._cols,
            self._rows,
            self._vals,
            self._dim[::-1],
            self._index_base
        )

    @property
    def T(self):
        """The transpose of the matrix."""
        return self.transpose()

    # -------------------------------------------------------------------------
    #         Conversion and display
    # -------------------------------------------------------------------------
    def to_dict(self):
        """Return the five components of the matrix as a dict."""
        return dict(
            rows=self._rows.tolist(),
            cols=self._cols.tolist(),
            vals=self._vals.tolist(),
            dim=self._dim,
            index_base=self._index_base
        )

    def toarray(self):
        """Return the matrix as a dense ndarray."""
        from .utils import to_ndarray
        return to_ndarray(self)

    def display(self, pretty=True):
        """Format the matrix as a string.

        Parameters
        ----------
        pretty : bool, optional
            If True, format the entries as a table with columns
            ``cols | rows | vals``, one edge per line. Otherwise, format the
            raw components as a dict.

        Returns
        -------
        result : str
            The formatted matrix.
        """
        if pretty:
            df = pd.DataFrame({
                'cols': self._cols,
                'rows': self._rows,
                'vals': self._vals
            })
            return df.to_string()
        else:
            return pformat(self.to_dict(), sort_dicts=False)

    def __str__(self):
        return self.display(pretty=True)

    def __repr__(self):
        M, N = self._dim
        return (f"<{M}x{N} SparseMatrix with {self.nnz} stored elements "
                f"and index_base={self._index_base}>")

    def __eq__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return (
            self._dim == other._dim
            and self._index_base == other._index_base
            and np.array_equal(self._rows, other._rows)
            and np.array_equal(self._cols, other._cols)
            and np.array_equal(self._vals, other._vals, equal_nan=True)
        )

    __hash__ = None


# =============================================================================
# =============================================================================
