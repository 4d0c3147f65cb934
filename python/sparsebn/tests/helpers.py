#!/usr/bin/env python3
# =============================================================================
#     File: helpers.py
#  Created: 2025-06-05 11:02
#   Author: Bernie Roesler
#
"""Helper functions for the sparsebn python tests."""
# =============================================================================

import pytest

import numpy as np

from scipy import sparse
from scipy.sparse.csgraph import connected_components

import sparsebn


# -----------------------------------------------------------------------------
#         Matrix Generators
# -----------------------------------------------------------------------------
def _random_dense(rng, N, density, nan_density=0.0):
    """Create a random dense (N, N) matrix with the given density."""
    A = rng.normal(size=(N, N))
    A[rng.random((N, N)) >= density] = 0.0
    A[rng.random((N, N)) < nan_density] = np.nan
    return A


def generate_random_matrices(seed=565656, N_trials=50, N_max=10, nan=False):
    """Generate a list of random, dense, square matrices of maximum size N."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        N = rng.integers(1, N_max, endpoint=True)
        d = rng.random()  # density ∈ [0, 1]
        A = _random_dense(rng, N, d, nan_density=0.1 if nan else 0.0)
        yield pytest.param(
            A,
            id=f"random_{trial:02d}::{A.shape}::{np.count_nonzero(A)}",
            marks=pytest.mark.random
        )


def generate_random_sparse_matrices(seed=565656, N_trials=50, N_max=10):
    """Generate a list of random scipy.sparse arrays in various formats."""
    rng = np.random.default_rng(seed)
    formats = ['coo', 'csc', 'csr', 'lil']
    for trial in range(N_trials):
        N = rng.integers(1, N_max, endpoint=True)
        d = rng.random()
        fmt = formats[trial % len(formats)]
        A = sparse.coo_array(_random_dense(rng, N, d)).asformat(fmt)
        yield pytest.param(
            A,
            id=f"random_{trial:02d}::{fmt}::{A.shape}::{A.nnz}",
            marks=pytest.mark.random
        )


def generate_graph_sizes(seed=565656, N_trials=50, N_max=20):
    """Generate random (num_nodes, num_edges) pairs that admit a DAG."""
    rng = np.random.default_rng(seed)
    for trial in range(N_trials):
        N = int(rng.integers(1, N_max, endpoint=True))
        E = int(rng.integers(0, N * (N - 1) // 2, endpoint=True))
        yield pytest.param(
            N, E,
            id=f"trial_{trial:02d}::{N}_nodes::{E}_edges",
            marks=pytest.mark.random
        )


# -----------------------------------------------------------------------------
#         Graph Checking
# -----------------------------------------------------------------------------
def adjacency(graph):
    """Return the binary (N, N) adjacency matrix of an edge-list."""
    A = sparsebn.to_scipy_sparse(sparsebn.from_edge_list(graph), format='csr')
    A.data[:] = 1.0  # edge-lists are NaN-valued
    return A


def is_acyclic(graph):
    """Check if a graph is a DAG.

    A directed graph is acyclic if and only if it has no self-loops and each
    strongly-connected component is a single node.

    Parameters
    ----------
    graph : EdgeList
        The graph to check.

    Returns
    -------
    bool
        True if the graph has no directed cycles, False otherwise.
    """
    A = adjacency(graph)
    N = A.shape[0]

    if A.diagonal().sum() != 0:
        return False

    n_components, _ = connected_components(A, directed=True,
                                           connection='strong')

    return n_components == N


def topological_position(graph):
    """Return the topological position of each node from its name.

    Nodes generated by `random_graph` are named ``'V1', ..., 'VN'`` by their
    position in the lower-triangular ordering.
    """
    return {j: int(graph.names[j - 1][1:]) for j in graph}

# =============================================================================
# =============================================================================
