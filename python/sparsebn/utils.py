#!/usr/bin/env python3
# =============================================================================
#     File: utils.py
#  Created: 2025-06-03 14:13
#   Author: Bernie Roesler
#
"""
Conversions between SparseMatrix and dense arrays, scipy.sparse arrays, and
edge-lists.
"""
# =============================================================================

import numpy as np
import pandas as pd

from scipy import sparse

from ._edgelist import EdgeList
from ._errors import InternalInvariantError, ShapeError, ValidationError
from ._sparse import SparseMatrix, _is_index_base, zero_threshold

__all__ = [
    'as_sparse',
    'format_matrix',
    'from_edge_list',
    'from_ndarray',
    'from_scipy_sparse',
    'to_dataframe',
    'to_edge_list',
    'to_ndarray',
    'to_scipy_sparse',
]


def _check_square(shape):
    """Raise a ShapeError if `shape` is not that of a square matrix."""
    if len(shape) != 2:
        raise ShapeError(
            f"Input matrix must be 2-dimensional, got shape {shape}."
        )

    M, N = shape

    if M != N:
        raise ShapeError(f"Input matrix must be square, got shape {shape}.")


def _check_index_base(index_base):
    if not _is_index_base(index_base):
        raise ValidationError(
            f"Invalid index_base {index_base!r}; must be either 0 or 1."
        )


# -----------------------------------------------------------------------------
#         Conversions to SparseMatrix
# -----------------------------------------------------------------------------
def from_ndarray(A, index_base=1):
    r"""Convert a dense square matrix to a SparseMatrix.

    An entry is stored if it is NaN, or if its magnitude exceeds
    `zero_threshold()`. Entries are stored in column-major order.

    Parameters
    ----------
    A : (N, N) array_like
        The matrix to convert.
    index_base : int in {0, 1}, optional
        The index base of the result.

    Returns
    -------
    result : SparseMatrix
        The matrix in coordinate format.

    Raises
    ------
    ShapeError
        If `A` is not a square, 2-dimensional matrix.
    ValidationError
        If `index_base` is not 0 or 1.

    Examples
    --------
    >>> A = from_ndarray([[0, 2], [0, 0]])
    >>> A.rows, A.cols, A.vals
    (array([1]), array([2]), array([2.]))
    """
    try:
        A = np.asarray(A, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise TypeError(
            "Input matrix must be a NumPy array or convertible to a 2D NumPy "
            f"array. Error: {e}"
        ) from e

    _check_square(A.shape)
    _check_index_base(index_base)

    N = A.shape[0]

    with np.errstate(invalid='ignore'):
        is_nz = np.isnan(A) | (np.abs(A) > zero_threshold())

    # NOTE the positions and the values must be taken in the same order, or
    # the rows, cols, and vals will not line up. We use column-major ('F')
    # order throughout.
    idx = np.flatnonzero(is_nz.ravel(order='F'))
    rows, cols = np.unravel_index(idx, A.shape, order='F')
    vals = A.ravel(order='F')[idx]

    S = SparseMatrix(rows + 1, cols + 1, vals, dim=(N, N), index_base=1)

    return S._reindex(index_base)


def from_scipy_sparse(A, index_base=1):
    r"""Convert a square scipy.sparse matrix to a SparseMatrix.

    The triplets of `A` are copied directly, without thresholding. Duplicate
    entries are summed, explicit zeros are dropped, and the entries are sorted
    in column-major order, so the result is identical to that of
    `from_ndarray` on the same matrix.

    Parameters
    ----------
    A : (N, N) sparse array or matrix
        The matrix to convert.
    index_base : int in {0, 1}, optional
        The index base of the result.

    Returns
    -------
    result : SparseMatrix
        The matrix in coordinate format.
    """
    if not sparse.issparse(A):
        raise TypeError(
            f"Input matrix must be a scipy.sparse matrix, got {type(A)}."
        )

    _check_square(A.shape)
    _check_index_base(index_base)

    N = A.shape[0]

    A = sparse.coo_array(A, copy=True)
    A.sum_duplicates()
    A.eliminate_zeros()

    p = np.lexsort((A.row, A.col))  # sort by column, then row

    # scipy uses 0-based indexing
    S = SparseMatrix(
        A.row[p],
        A.col[p],
        A.data[p].astype(np.float64),
        dim=(N, N),
        index_base=0
    )

    return S._reindex(index_base)


def from_edge_list(graph):
    r"""Convert an edge-list to a SparseMatrix.

    Each edge ``parent -> child`` is stored at ``(row=parent, col=child)``.
    Edge-lists carry no weights, so all values are NaN. The result always uses
    1-based indexing.

    Parameters
    ----------
    graph : EdgeList or mapping
        The graph to convert. A mapping is first converted to an EdgeList.

    Returns
    -------
    result : (N, N) SparseMatrix
        The matrix in coordinate format, with ``index_base == 1``.
    """
    if not isinstance(graph, EdgeList):
        graph = EdgeList(graph)

    N = graph.num_nodes()
    rows = []
    cols = []

    for child, parents in graph.items():
        rows.extend(parents)
        cols.extend([child] * len(parents))

    if len(rows) != len(cols):
        raise InternalInvariantError(
            f"Edge-list produced {len(rows)} rows but {len(cols)} columns."
        )

    return SparseMatrix(
        np.array(rows, dtype=np.int64),
        np.array(cols, dtype=np.int64),
        np.full(len(cols), np.nan),
        dim=(N, N),
        index_base=1
    )


def as_sparse(x, index_base=1):
    r"""Convert any supported object to a SparseMatrix.

    The conversion is chosen from the type of `x`:

    ==========================  ========================
    type of `x`                 conversion
    ==========================  ========================
    SparseMatrix                re-indexed copy
    EdgeList                    `from_edge_list`
    scipy.sparse array          `from_scipy_sparse`
    dict                        `SparseMatrix.from_dict`
    ndarray, list, or tuple     `from_ndarray`
    ==========================  ========================

    Parameters
    ----------
    x : object
        The object to convert.
    index_base : int in {0, 1}, optional
        The index base of the result. Edge-lists only support 1.

    Returns
    -------
    result : SparseMatrix
        The matrix in coordinate format.
    """
    _check_index_base(index_base)

    match x:
        case SparseMatrix():
            return x._reindex(index_base)
        case EdgeList():
            if index_base != 1:
                raise ValidationError("Edge-lists always use 1-based indexing.")
            return from_edge_list(x)
        case _ if sparse.issparse(x):
            return from_scipy_sparse(x, index_base=index_base)
        case dict():
            return SparseMatrix.from_dict(x)._reindex(index_base)
        case np.ndarray() | list() | tuple():
            return from_ndarray(x, index_base=index_base)
        case _:
            raise TypeError(f"Cannot convert {type(x)} to a SparseMatrix.")


# -----------------------------------------------------------------------------
#         Conversions from SparseMatrix
# -----------------------------------------------------------------------------
def to_ndarray(A, order='C'):
    r"""Convert a SparseMatrix to a dense ndarray.

    Parameters
    ----------
    A : (M, N) SparseMatrix
        The matrix to convert.
    order : str, optional in {'C', 'F'}
        The memory layout of the output array.

    Returns
    -------
    result : (M, N) ndarray
        The matrix as a numpy array. Unstored entries are zero.
    """
    A = A._reindex(1)
    X = np.zeros(A.dim, order=order)
    X[A.rows - 1, A.cols - 1] = A.vals
    return X


def to_dataframe(A):
    """Convert a SparseMatrix to a labelled dense DataFrame.

    Rows and columns are labelled by the string form of their 1-based
    position.

    Parameters
    ----------
    A : (M, N) SparseMatrix
        The matrix to convert.

    Returns
    -------
    result : (M, N) pandas.DataFrame
        The dense matrix.
    """
    M, N = A.dim
    return pd.DataFrame(
        to_ndarray(A),
        index=[str(i) for i in range(1, M + 1)],
        columns=[str(j) for j in range(1, N + 1)]
    )


def to_scipy_sparse(A, format='coo'):
    r"""Convert a SparseMatrix to a scipy.sparse array.

    Parameters
    ----------
    A : (M, N) SparseMatrix
        The matrix to convert.
    format : str, optional in {'bsr', 'coo', 'csc', 'csr', 'dia', 'dok', 'lil'}
        The format of the output matrix.

    Returns
    -------
    result : (M, N) sparse array
        The matrix in the specified format, with 0-based indices.
    """
    A = A._reindex(0)
    A_sparse = sparse.coo_array((A.vals, (A.rows, A.cols)), shape=A.dim)
    format_method_name = f"to{format}"
    try:
        format_method = getattr(A_sparse, format_method_name)
    except AttributeError:
        raise ValueError(f"Invalid format '{format}'")
    return format_method()


def to_edge_list(A):
    r"""Convert a SparseMatrix to an edge-list.

    Each stored entry ``(row, col)`` becomes the edge ``row -> col``. Parents
    are listed in storage order. The values are discarded.

    Parameters
    ----------
    A : (N, N) SparseMatrix
        The matrix to convert.

    Returns
    -------
    result : EdgeList
        The graph with ``N`` nodes.
    """
    _check_square(A.dim)
    A = A._reindex(1)
    N = A.num_nodes()
    parents = {j: A.rows[A.cols == j].tolist() for j in range(1, N + 1)}
    return EdgeList(parents)


def format_matrix(A, format):
    """Convert a SparseMatrix to the specified format.

    Parameters
    ----------
    A : SparseMatrix
        The matrix to convert.
    format : str
        One of 'sparse', 'ndarray', 'dataframe', 'edgelist', or a
        scipy.sparse format name.

    Returns
    -------
    result : object
        The matrix in the specified format.
    """
    assert isinstance(A, SparseMatrix), "A must be a SparseMatrix"
    match format:
        case 'sparse':
            return A
        case 'ndarray':
            return to_ndarray(A)
        case 'dataframe':
            return to_dataframe(A)
        case 'edgelist':
            return to_edge_list(A)
        case 'bsr' | 'coo' | 'csc' | 'csr' | 'dia' | 'dok' | 'lil':
            return to_scipy_sparse(A, format=format)
        case _:
            raise ValueError(f"Invalid format '{format}'")


# =============================================================================
# =============================================================================
