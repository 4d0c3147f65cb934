#!/usr/bin/env python3
# =============================================================================
#     File: __init__.py
#  Created: 2025-06-02 09:58
#   Author: Bernie Roesler
#
"""
sparsebn: Sparse matrix and graph utilities for Bayesian network structures.

This module provides a coordinate-format sparse matrix, conversions between
dense arrays, scipy.sparse arrays, and edge-lists, and generators of random
DAGs and positive definite matrices.

Example usage:
    import sparsebn
    g = sparsebn.random_graph(5, 4, rng=565656)
    A = sparsebn.from_edge_list(g)
    print(A)
    X = sparsebn.to_ndarray(A.to_zero_based())

Author: Bernie Roesler
Date: 2025-06-02
Version: 0.1
"""
# =============================================================================

from ._errors import *
from ._sparse import *
from ._edgelist import *
from .utils import *
from ._generate import *

from . import _errors, _sparse, _edgelist, utils, _generate


__all__ = (
    _errors.__all__ +
    _sparse.__all__ +
    _edgelist.__all__ +
    utils.__all__ +
    _generate.__all__
)

# =============================================================================
# =============================================================================
