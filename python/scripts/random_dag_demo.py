#!/usr/bin/env python3
# =============================================================================
#     File: random_dag_demo.py
#  Created: 2025-06-09 14:20
#   Author: Bernie Roesler
#
"""
Description: Generate a random DAG and walk it through each representation.

Usage: python random_dag_demo.py [num_nodes] [num_edges] [seed]
"""
# =============================================================================

import sys

import numpy as np
import scipy.linalg as la

import sparsebn


args = [int(x) for x in sys.argv[1:]]
N, E, seed = args + [6, 8, 565656][len(args):]

rng = np.random.default_rng(seed)

# Build the graph and convert to each format
g = sparsebn.random_graph(N, E, rng=rng)
print("Edge list:")
print(g)
print(f"Topological order: {g.names}")

A = sparsebn.from_edge_list(g)
print("\nSparse (1-based):")
print(A)

Ac = A.to_zero_based()
print("\nSparse (0-based), raw:")
print(Ac.display(pretty=False))

# A new weighted DAG of the same size
W = sparsebn.random_dag(N, E, rng=rng)
print("\nWeighted adjacency matrix:")
print(sparsebn.to_dataframe(sparsebn.from_ndarray(W)).round(3))

weights, variances = sparsebn.random_params(g, rng=rng)
print(f"\nEdge weights: {weights.round(3)}")
print(f"Variances:    {variances.round(3)}")

# A random covariance matrix with chosen eigenvalues
S = sparsebn.random_spd(N, eigenvalues=np.arange(1, N), rng=rng)
print(f"\nSPD eigenvalues: {la.eigvalsh(S).round(6)}")
print(f"Symmetry error:  {la.norm(S - S.T):.2e}")

# =============================================================================
# =============================================================================
