#!/usr/bin/env python3
# =============================================================================
#     File: _generate.py
#  Created: 2025-06-04 16:02
#   Author: Bernie Roesler
#
"""
Random graphs, DAGs, and positive definite matrices for synthetic benchmarks.

Every generator takes an `rng` argument, which may be a
`numpy.random.Generator`, a seed, or None. The global numpy random state is
never used.
"""
# =============================================================================

from functools import reduce

import numpy as np
from scipy import linalg as la

from ._edgelist import EdgeList
from ._errors import ValidationError
from .utils import from_edge_list, to_ndarray

__all__ = [
    'all_blocks',
    'random_dag',
    'random_graph',
    'random_householder',
    'random_params',
    'random_spd',
]


def all_blocks(nodes):
    """Return every off-diagonal ``(row, col)`` pair of a square matrix.

    Pairs are listed column by column.

    Parameters
    ----------
    nodes : (N,) array_like of int
        The labels of the rows and columns.

    Returns
    -------
    result : (N * (N-1), 2) ndarray of int
        The ``(row, col)`` pairs with ``row != col``.
    """
    nodes = np.asarray(nodes, dtype=int)
    N = nodes.size
    rows = np.tile(nodes, N)
    cols = np.repeat(nodes, N)
    off_diag = rows != cols
    return np.column_stack([rows[off_diag], cols[off_diag]])


def _sample(sampler, n, rng):
    """Draw `n` values from `sampler`, or from U(0, 1) if it is None."""
    if sampler is None:
        return rng.random(n)

    x = np.asarray(sampler(n), dtype=np.float64).reshape(-1)

    if x.size != n:
        raise ValidationError(
            f"Sampler returned {x.size} values when {n} were requested."
        )

    return x


def random_graph(
    num_nodes,
    num_edges,
    acyclic=True,
    allow_loops=False,
    permute=True,
    rng=None
):
    r"""Generate a random graph with a fixed number of edges.

    The edges are sampled uniformly without replacement from the off-diagonal
    entries of the adjacency matrix. If `acyclic` is True, only the strictly
    lower triangle is used, i.e. every edge points from a higher-numbered node
    to a lower-numbered one, which guarantees that the graph is acyclic.

    Parameters
    ----------
    num_nodes : int
        The number of nodes in the graph.
    num_edges : int
        The number of edges in the graph. At most
        ``num_nodes * (num_nodes - 1) / 2``.
    acyclic : bool, optional
        If True, the output is a DAG.
    allow_loops : bool, optional
        If True, the output may include self-loops. The candidate pairs are
        always off-diagonal, so no self-loops are drawn in either case.
    permute : bool, optional
        If True, the nodes are randomly relabelled. Otherwise the nodes are
        ordered by a topological sort, so the adjacency matrix is lower
        triangular. In both cases, `EdgeList.names` gives the topological
        position of each node as ``'V1', ..., 'VN'``.
    rng : numpy.random.Generator or int, optional
        The random number generator, or a seed for one.

    Returns
    -------
    result : EdgeList
        The parents of each node.

    Raises
    ------
    ValidationError
        If `num_edges` is larger than the maximum number of edges of a DAG.
    """
    if num_nodes < 1:
        raise ValidationError(f"num_nodes must be positive, got {num_nodes}.")

    max_nnz = num_nodes * (num_nodes - 1) // 2

    if num_edges < 0 or num_edges > max_nnz:
        raise ValidationError(
            f"A DAG with p = {num_nodes} nodes can have at most "
            f"p*(p-1)/2 = {max_nnz} edges, got num_edges = {num_edges}."
        )

    rng = np.random.default_rng(rng)

    if num_nodes == 1:
        return EdgeList({1: []})

    nodes = np.arange(1, num_nodes + 1)
    indices = all_blocks(nodes)

    if not allow_loops:
        indices = indices[indices[:, 0] != indices[:, 1]]

    if acyclic:
        indices = indices[indices[:, 0] > indices[:, 1]]

    edges = rng.choice(len(indices), size=num_edges, replace=False)
    indices = indices[edges]

    # Group by child (column) to get the parents of each node
    parents = {
        int(j): indices[indices[:, 1] == j, 0].tolist()
        for j in nodes
    }

    graph = EdgeList(parents)

    if permute:
        graph = graph.permute(rng.permutation(num_nodes) + 1)

    return graph


def random_dag(
    num_nodes,
    num_edges,
    weight_sampler=None,
    permute=True,
    rng=None
):
    r"""Generate a random weighted DAG with a fixed number of edges.

    Parameters
    ----------
    num_nodes : int
        The number of nodes in the DAG.
    num_edges : int
        The number of edges in the DAG.
    weight_sampler : callable, optional
        A function called as ``weight_sampler(n)`` that returns `n` edge
        weights. Defaults to U(0, 1).
    permute : bool, optional
        If False, the adjacency matrix is lower triangular.
    rng : numpy.random.Generator or int, optional
        The random number generator, or a seed for one.

    Returns
    -------
    result : (num_nodes, num_nodes) ndarray
        The weighted adjacency matrix, with ``A[i, j] != 0`` for each edge
        ``i -> j``.

    See Also
    --------
    random_graph : Generate the underlying edge-list.
    """
    rng = np.random.default_rng(rng)

    graph = random_graph(
        num_nodes,
        num_edges,
        acyclic=True,
        permute=permute,
        rng=rng
    )

    # Edge-lists carry no weights, so the edges are NaN
    A = to_ndarray(from_edge_list(graph))
    is_edge = A != 0
    A[is_edge] = _sample(weight_sampler, num_edges, rng)

    return A


def random_params(graph, weight_sampler=None, rng=None):
    r"""Generate parameters for a linear Gaussian model on a graph.

    Parameters
    ----------
    graph : EdgeList or mapping
        The graph structure.
    weight_sampler : callable, optional
        A function called as ``weight_sampler(n)`` that returns `n` values.
        Defaults to U(0, 1).
    rng : numpy.random.Generator or int, optional
        The random number generator, or a seed for one.

    Returns
    -------
    weights : (num_edges,) ndarray
        One coefficient per edge, in the order the edge-list stores them.
    variances : (num_nodes,) ndarray
        One variance per node, in node order.
    """
    if not isinstance(graph, EdgeList):
        graph = EdgeList(graph)

    rng = np.random.default_rng(rng)

    weights = _sample(weight_sampler, graph.num_edges(), rng)
    variances = _sample(weight_sampler, graph.num_nodes(), rng)

    return weights, variances


# -----------------------------------------------------------------------------
#         Positive Definite Matrices
# -----------------------------------------------------------------------------
def random_householder(N, rng=None):
    r"""Generate a random Householder reflection.

    .. math:: H = I - 2 v v^T

    where :math:`v` is a unit vector drawn uniformly from the sphere.

    Parameters
    ----------
    N : int
        The dimension of the reflection.
    rng : numpy.random.Generator or int, optional
        The random number generator, or a seed for one.

    Returns
    -------
    H : (N, N) ndarray
        The symmetric, orthogonal reflection matrix.
    """
    rng = np.random.default_rng(rng)
    v = rng.standard_normal(N)
    v /= la.norm(v)
    return np.eye(N) - 2 * np.outer(v, v)


def random_spd(num_nodes, eigenvalues=None, num_reflections=10, rng=None):
    r"""Generate a random symmetric positive (semi-)definite matrix.

    The matrix is computed as :math:`Q \Lambda Q^T`, where :math:`\Lambda` is
    the diagonal matrix of `eigenvalues` and :math:`Q = H_1 \dots H_k` is a
    product of `num_reflections` random Householder reflections.

    .. note:: The eigenvalues are not checked. Negative eigenvalues give a
        symmetric, indefinite matrix.

    Parameters
    ----------
    num_nodes : int
        The dimension of the matrix. Must be greater than 1.
    eigenvalues : array_like, optional
        The eigenvalues of the output. If there are fewer than `num_nodes`
        values, the remainder are zero. Defaults to `num_nodes` draws from
        U(0, 1).
    num_reflections : int, optional
        The number of Householder reflections to compose.
    rng : numpy.random.Generator or int, optional
        The random number generator, or a seed for one.

    Returns
    -------
    result : (num_nodes, num_nodes) ndarray
        The symmetric matrix.

    Raises
    ------
    ValidationError
        If `num_nodes` < 2, or there are more than `num_nodes` eigenvalues.
    """
    if num_nodes <= 1:
        raise ValidationError(f"num_nodes must be > 1, got {num_nodes}.")

    if num_reflections < 0:
        raise ValidationError(
            f"num_reflections must be non-negative, got {num_reflections}."
        )

    N = num_nodes

    if eigenvalues is not None:
        eigenvalues = np.asarray(eigenvalues, dtype=np.float64).reshape(-1)
        if eigenvalues.size > N:
            raise ValidationError(
                f"A {N}x{N} matrix cannot have more than {N} eigenvalues, "
                f"got {eigenvalues.size}."
            )
        eigenvalues = np.r_[eigenvalues, np.zeros(N - eigenvalues.size)]

    rng = np.random.default_rng(rng)

    Hs = [random_householder(N, rng) for _ in range(num_reflections)]
    Q = reduce(np.matmul, Hs, np.eye(N))

    if eigenvalues is None:
        eigenvalues = rng.random(N)

    S = Q @ np.diag(eigenvalues) @ Q.T

    return 0.5 * (S + S.T)  # remove round-off asymmetry


# =============================================================================
# =============================================================================
