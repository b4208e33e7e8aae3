"""Weighted directed and undirected graphs stored as adjacency lists."""

from __future__ import annotations

import enum
import warnings
from dataclasses import dataclass
from typing import TextIO


class GraphType(enum.IntEnum):
    """Kind of graph; the numeric value is the one used in graph files."""

    UNDIRECTED = 0
    DIRECTED = 1


@dataclass(frozen=True)
class Edge:
    """An edge from ``src`` to ``dst`` carrying a weight."""

    src: int
    dst: int
    weight: float


class GraphFormatError(ValueError):
    """Raised when a graph description cannot be parsed."""


class Graph:
    """A graph with a fixed number of nodes numbered from 0."""

    def __init__(self, n: int, kind: GraphType) -> None:
        if n <= 0:
            raise ValueError(f"a graph needs at least one node, got {n}")
        self.kind = GraphType(kind)
        self._edges: list[list[Edge]] = [[] for _ in range(n)]
        self._in_deg = [0] * n
        self._out_deg = [0] * n
        self._m = 0

    def _check(self, v: int) -> None:
        if not 0 <= v < len(self._edges):
            raise ValueError(f"node {v} out of range 0..{len(self._edges) - 1}")

    def _insert(self, src: int, dst: int, weight: float) -> bool:
        if any(edge.dst == dst for edge in self._edges[src]):
            return False
        # New edges go to the front of the adjacency list.
        self._edges[src].insert(0, Edge(src, dst, weight))
        self._in_deg[dst] += 1
        self._out_deg[src] += 1
        return True

    def add_edge(self, src: int, dst: int, weight: float) -> bool:
        """Add an edge; return False and warn if it already existed."""
        self._check(src)
        self._check(dst)
        added = self._insert(src, dst, weight)
        if self.kind is GraphType.UNDIRECTED:
            added = self._insert(dst, src, weight) and added
        if added:
            self._m += 1
            return True
        warnings.warn(
            f"ignored the duplicate edge ({src},{dst})", RuntimeWarning, stacklevel=2
        )
        return False

    def adj(self, v: int) -> tuple[Edge, ...]:
        """Edges leaving ``v``, most recently added first."""
        self._check(v)
        return tuple(self._edges[v])

    def n_nodes(self) -> int:
        return len(self._edges)

    def n_edges(self) -> int:
        return self._m

    def out_degree(self, v: int) -> int:
        self._check(v)
        return self._out_deg[v]

    def in_degree(self, v: int) -> int:
        self._check(v)
        return self._in_deg[v]

    def format(self) -> str:
        """Human-readable listing of the adjacency lists."""
        lines = ["UNDIRECTED" if self.kind is GraphType.UNDIRECTED else "DIRECTED"]
        for i, edges in enumerate(self._edges):
            chain = "".join(f"({e.src}, {e.dst}, {e.weight:f}) -> " for e in edges)
            lines.append(f"[{i:2d}] -> {chain}NULL")
        return "\n".join(lines) + "\n"


def read_graph(stream: TextIO) -> Graph:
    """Read a graph: header ``n m type`` followed by ``src dst weight`` triples."""
    tokens = stream.read().split()
    try:
        n, m, kind = (int(tok) for tok in tokens[:3])
    except ValueError:
        raise GraphFormatError("error when reading the graph header") from None
    if len(tokens) < 3:
        raise GraphFormatError("error when reading the graph header")
    if n <= 0:
        raise GraphFormatError(f"invalid number of nodes {n}")
    if m < 0:
        raise GraphFormatError(f"invalid number of edges {m}")
    if kind not in (GraphType.UNDIRECTED, GraphType.DIRECTED):
        raise GraphFormatError(f"invalid graph type {kind}")

    graph = Graph(n, GraphType(kind))
    count = 0
    pos = 3
    while pos + 3 <= len(tokens):
        try:
            src = int(tokens[pos])
            dst = int(tokens[pos + 1])
            weight = float(tokens[pos + 2])
        except ValueError:
            break
        try:
            graph.add_edge(src, dst, weight)
        except ValueError as exc:
            raise GraphFormatError(str(exc)) from None
        count += 1
        pos += 3
    if count != m:
        warnings.warn(
            f"read {count} edges, but the header states {m} of them",
            RuntimeWarning,
            stacklevel=2,
        )
    return graph


def write_graph(stream: TextIO, graph: Graph) -> None:
    """Write ``graph`` in the format read by :func:`read_graph`."""
    directed = graph.kind is GraphType.DIRECTED
    stream.write(f"{graph.n_nodes()} {graph.n_edges()} {int(graph.kind)}\n")
    for v in range(graph.n_nodes()):
        for edge in graph.adj(v):
            if directed or edge.src < edge.dst:
                stream.write(f"{edge.src} {edge.dst} {edge.weight:f}\n")