"""Depth-first search recording discovery and finish times."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterator, Sequence

from algolab.graph import Edge, Graph, GraphFormatError, read_graph

NODE_UNDEF = -1


@dataclass
class DfsResult:
    """Predecessors and discovery/finish times of every node."""

    pred: list[int]
    discover: list[int]
    finish: list[int]


def dfs(graph: Graph) -> DfsResult:
    """Visit every node of ``graph`` depth-first, roots in increasing order."""
    n = graph.n_nodes()
    pred = [NODE_UNDEF] * n
    discover = [-1] * n
    finish = [-1] * n
    time = 0
    for root in range(n):
        if discover[root] != -1:
            continue
        time += 1
        discover[root] = time
        stack: list[tuple[int, Iterator[Edge]]] = [(root, iter(graph.adj(root)))]
        while stack:
            u, edges = stack[-1]
            for edge in edges:
                v = edge.dst
                if discover[v] == -1:
                    pred[v] = u
                    time += 1
                    discover[v] = time
                    stack.append((v, iter(graph.adj(v))))
                    break
            else:
                stack.pop()
                time += 1
                finish[u] = time
    return DfsResult(pred, discover, finish)


def format_dfs(result: DfsResult) -> str:
    """Table of predecessor, discovery and finish time per node."""
    lines = [
        "     v |   p[v] | discover |   finish",
        "-------+--------+----------+----------",
    ]
    for v, (p, d, f) in enumerate(zip(result.pred, result.discover, result.finish)):
        lines.append(f"{v:6d} | {p:6d} | {d:8d} | {f:8d}")
    return "\n".join(lines) + "\n"


def _load(path: str) -> Graph:
    if path == "-":
        return read_graph(sys.stdin)
    with open(path, encoding="utf-8") as stream:
        return read_graph(stream)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Invoke the program with: dfs file_grafo", file=sys.stderr)
        return 1
    try:
        graph = _load(args[0])
    except OSError:
        print(f"Cannot open {args[0]}", file=sys.stderr)
        return 1
    except GraphFormatError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    print(format_dfs(dfs(graph)), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())