"""Breadth-first search with shortest-path reporting."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from typing import Sequence

from algolab.graph import Graph, GraphFormatError, read_graph

NODE_UNDEF = -1


@dataclass
class BfsResult:
    """Distances, predecessors and the number of visited nodes."""

    dist: list[int]
    pred: list[int]
    visited: int


def bfs(graph: Graph, source: int) -> BfsResult:
    """Visit ``graph`` breadth-first from ``source``."""
    n = graph.n_nodes()
    if not 0 <= source < n:
        raise ValueError(f"source node {source} out of range 0..{n - 1}")
    dist = [-1] * n
    pred = [NODE_UNDEF] * n
    dist[source] = 0
    queue = deque([source])
    visited = 0
    while queue:
        u = queue.popleft()
        visited += 1
        for edge in graph.adj(u):
            v = edge.dst
            if dist[v] == -1:
                dist[v] = dist[u] + 1
                pred[v] = u
                queue.append(v)
    return BfsResult(dist, pred, visited)


def format_path(source: int, dest: int, pred: Sequence[int]) -> str:
    """Render the path from ``source`` to ``dest`` following ``pred``."""
    tail: list[int] = []
    node = dest
    head = str(source)
    while node != source:
        if pred[node] < 0:
            head = "Unreachable"
            break
        tail.append(node)
        node = pred[node]
    return "->".join([head, *(str(v) for v in reversed(tail))])


def format_bfs(graph: Graph, source: int, result: BfsResult) -> str:
    """Table of distance and path from ``source`` to every node."""
    lines = [
        "  src | dest | distance | path",
        "------+------+----------+-------------------------",
    ]
    for v in range(graph.n_nodes()):
        path = format_path(source, v, result.pred)
        lines.append(f" {source:4d} | {v:4d} | {result.dist[v]:8d} | {path}")
    return "\n".join(lines) + "\n"


def _load(path: str) -> Graph:
    if path == "-":
        return read_graph(sys.stdin)
    with open(path, encoding="utf-8") as stream:
        return read_graph(stream)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("Invoke the program with: bfs src_node file_graph", file=sys.stderr)
        return 1
    try:
        source = int(args[0])
    except ValueError:
        print(f"Invalid source node {args[0]}", file=sys.stderr)
        return 1
    try:
        graph = _load(args[1])
    except OSError:
        print(f"Cannot open {args[1]}", file=sys.stderr)
        return 1
    except GraphFormatError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    n = graph.n_nodes()
    if not 0 <= source < n:
        print(f"Source node {source} out of range 0..{n - 1}", file=sys.stderr)
        return 1
    result = bfs(graph, source)
    print(format_bfs(graph, source, result), end="")
    print(f"# {result.visited} nodes on {n} reachable from source {source}")
    return 0


if __name__ == "__main__":
    sys.exit(main())