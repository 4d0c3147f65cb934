#!/usr/bin/env python3
# =============================================================================
#     File: _edgelist.py
#  Created: 2025-06-03 09:41
#   Author: Bernie Roesler
#
"""
Edge-list representation of a directed graph.
"""
# =============================================================================

from collections.abc import Mapping

import numpy as np

from ._errors import ValidationError

__all__ = ['EdgeList']


class EdgeList(Mapping):
    """A directed graph stored as the list of parents of each node.

    Nodes are always numbered ``1, ..., N``. The edge-list is never converted
    to 0-based indexing.

    Parameters
    ----------
    parents : mapping or sequence
        Either a mapping from node ``j`` to the parents of ``j``, with keys
        exactly ``1, ..., N``, or a sequence whose ``j``-th element (counting
        from 1) holds the parents of node ``j``.
    names : sequence of str, optional
        A label for each node. Defaults to ``'V1', ..., 'VN'``.

    Examples
    --------
    >>> g = EdgeList({1: [], 2: [1], 3: [1, 2]})
    >>> g[3]
    (1, 2)
    >>> g.num_edges()
    3
    """

    def __init__(self, parents, names=None):
        if isinstance(parents, Mapping):
            N = len(parents)
            if set(parents) != set(range(1, N + 1)):
                raise ValidationError(
                    f"Nodes must be numbered 1, ..., {N}, got "
                    f"{sorted(parents)}."
                )
            parent_sets = [parents[j] for j in range(1, N + 1)]
        else:
            parent_sets = list(parents)
            N = len(parent_sets)

        self._parents = {}
        for j, ps in enumerate(parent_sets, start=1):
            ps = np.asarray(ps).reshape(-1)
            if ps.size > 0 and ps.dtype.kind not in 'iu':
                raise ValidationError(
                    f"Parents of node {j} must be integers, got dtype "
                    f"'{ps.dtype}'."
                )
            ps = tuple(int(p) for p in ps)
            if any(p < 1 or p > N for p in ps):
                raise ValidationError(
                    f"Parents of node {j} must lie in [1, {N}], got {ps}."
                )
            self._parents[j] = ps

        if names is None:
            names = [f"V{j}" for j in range(1, N + 1)]
        elif len(names) != N:
            raise ValidationError(
                f"Expected {N} node names, got {len(names)}."
            )
        self._names = tuple(str(x) for x in names)

    @property
    def names(self):
        """The labels of the nodes, in node order."""
        return self._names

    def num_nodes(self):
        """Return the number of nodes in the graph."""
        return len(self._parents)

    def num_edges(self):
        """Return the total number of parent entries in the graph."""
        return sum(len(ps) for ps in self._parents.values())

    def permute(self, perm):
        """Relabel the nodes of the graph.

        Node ``j`` of the original graph becomes node ``perm[j-1]`` of the
        result. The node names move with the nodes, so the original order can
        be recovered from `names`.

        Parameters
        ----------
        perm : (N,) array_like of int
            A permutation of ``1, ..., N``.

        Returns
        -------
        result : EdgeList
            The relabelled graph.
        """
        N = self.num_nodes()
        perm = np.asarray(perm, dtype=int).reshape(-1)

        if not np.array_equal(np.sort(perm), np.arange(1, N + 1)):
            raise ValidationError(
                f"perm must be a permutation of 1, ..., {N}."
            )

        parents = {}
        names = [None] * N
        for j, ps in self._parents.items():
            k = int(perm[j - 1])
            parents[k] = [int(perm[p - 1]) for p in ps]
            names[k - 1] = self._names[j - 1]

        return EdgeList(parents, names=names)

    def to_dict(self):
        """Return the graph as a dict of parent lists."""
        return {j: list(ps) for j, ps in self._parents.items()}

    def __getitem__(self, node):
        return self._parents[node]

    def __iter__(self):
        return iter(self._parents)

    def __len__(self):
        return len(self._parents)

    def __eq__(self, other):
        if isinstance(other, EdgeList):
            return self._parents == other._parents
        return super().__eq__(other)

    __hash__ = None

    def __repr__(self):
        return (f"<EdgeList with {self.num_nodes()} nodes and "
                f"{self.num_edges()} edges>")

    def __str__(self):
        lines = []
        for j, ps in self._parents.items():
            pstr = ' '.join(str(p) for p in ps) if ps else '<Empty>'
            lines.append(f"[{j}] {pstr}")
        return '\n'.join(lines)


# =============================================================================
# =============================================================================
