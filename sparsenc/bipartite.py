"""Bipartite graphs for LDPC precoding, using the circulant Raptor construction."""

from __future__ import annotations

import math
import os
import random
from collections.abc import Iterator


class BipartiteGraph:
    """Graph linking left (source) nodes to right (check) nodes with coefficients."""

    def __init__(self, nleft: int, nright: int, binary: bool = True) -> None:
        if nleft < 0 or nright < 0:
            raise ValueError("node counts must not be negative")
        self.nleft = nleft
        self.nright = nright
        self.binary = binary
        self.left_neighbors: list[list[tuple[int, int]]] = [[] for _ in range(nright)]
        self.right_neighbors: list[list[tuple[int, int]]] = [[] for _ in range(nleft)]
        self._edges: set[tuple[int, int]] = set()

    def add_edge(self, left: int, right: int, ce: int) -> bool:
        """Connect ``left`` and ``right`` with coefficient ``ce``; False if already linked."""
        if not 0 <= left < self.nleft or not 0 <= right < self.nright:
            raise IndexError("node index out of range")
        if not 0 <= ce <= 0xFF:
            raise ValueError("coefficient must be a byte")
        if (left, right) in self._edges:
            return False
        self._edges.add((left, right))
        self.left_neighbors[right].append((left, ce))
        self.right_neighbors[left].append((right, ce))
        return True

    def has_edge(self, left: int, right: int) -> bool:
        """Whether ``left`` and ``right`` are neighbours."""
        return (left, right) in self._edges

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(left, right, ce)`` for every edge, grouped by right node."""
        for right, nbrs in enumerate(self.left_neighbors):
            for left, ce in nbrs:
                yield left, right, ce


def _include(graph: BipartiteGraph, left: int, right: int, rng: random.Random) -> None:
    if graph.has_edge(left, right):
        return
    ce = 1 if graph.binary else rng.getrandbits(32) % 255 + 1
    graph.add_edge(left, right, ce)


def _wrap(value: int, size: int) -> int:
    rem = value % size
    return size if rem == 0 else rem


def build_ldpc_graph(
    nleft: int,
    nright: int,
    binary: bool = True,
    rng: random.Random | None = None,
    dense: bool | None = None,
) -> BipartiteGraph:
    """Build the LDPC precode graph with ``nleft`` source and ``nright`` check nodes.

    By default each source node joins three check nodes in circulant blocks.
    With ``dense`` (or ``SNC_PRECODE=HDPC`` in the environment when ``dense`` is
    None) a random, highly dense reference graph is built instead.
    """
    graph = BipartiteGraph(nleft, nright, binary)
    if nright == 0:
        return graph
    rng = rng if rng is not None else random.Random()
    if dense is None:
        dense = os.environ.get("SNC_PRECODE") == "HDPC"
    s = nright

    if dense:
        for right in range(s):
            for left in range(nleft):
                draw = rng.getrandbits(32)
                if (draw % 2 if binary else draw % 256) != 0:
                    _include(graph, left, right, rng)
        return graph

    for i in range(math.ceil(nleft / s)):
        base = i * s
        _include(graph, base, 0, rng)
        _include(graph, base, _wrap(i + 2, s) - 1, rng)
        _include(graph, base, _wrap(2 * (i + 1) + 1, s) - 1, rng)
        for j in range(1, s):
            if base + j >= nleft:
                return graph
            _include(graph, base + j, j, rng)
            _include(graph, base + j, _wrap(i + 2 + j, s) - 1, rng)
            _include(graph, base + j, _wrap(2 * (i + 1) + 1 + j, s) - 1, rng)
    return graph