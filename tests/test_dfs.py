import pytest

from algolab.dfs import dfs, format_dfs, main
from algolab.graph import Graph, GraphType


def _chain(n):
    g = Graph(n, GraphType.DIRECTED)
    for v in range(n - 1):
        g.add_edge(v, v + 1, 1.0)
    return g


def test_chain_predecessors():
    r = dfs(_chain(3))
    assert r.pred == [-1, 0, 1]
    assert r.discover[0] == 1


def test_times_are_a_permutation():
    g = Graph(5, GraphType.DIRECTED)
    for src, dst in [(0, 1), (1, 2), (2, 0), (3, 4)]:
        g.add_edge(src, dst, 1.0)
    r = dfs(g)
    n = g.n_nodes()
    assert sorted(r.discover + r.finish) == list(range(1, 2 * n + 1))
    assert all(d < f for d, f in zip(r.discover, r.finish))


def test_descendants_nest_inside_ancestors():
    r = dfs(_chain(4))
    for v in range(1, 4):
        p = r.pred[v]
        assert r.discover[p] < r.discover[v] < r.finish[v] < r.finish[p]


def test_follows_adjacency_order():
    g = Graph(3, GraphType.DIRECTED)
    g.add_edge(0, 1, 1.0)
    g.add_edge(0, 2, 1.0)
    r = dfs(g)
    assert r.discover[2] < r.discover[1]
    assert r.pred == [-1, 0, 0]


def test_disconnected_nodes_are_roots():
    g = Graph(3, GraphType.DIRECTED)
    g.add_edge(2, 0, 1.0)
    r = dfs(g)
    assert r.pred == [-1, -1, -1]


def test_long_chain_does_not_overflow():
    n = 5000
    r = dfs(_chain(n))
    assert r.finish[0] == 2 * n
    assert r.pred[n - 1] == n - 2


def test_format_dfs():
    r = dfs(_chain(2))
    lines = format_dfs(r).splitlines()
    assert lines[0] == "     v |   p[v] | discover |   finish"
    assert lines[1] == "-------+--------+----------+----------"
    assert len(lines) == 4
    assert lines[2].split("|")[1].strip() == "-1"


def test_main(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("3 2 1\n0 1 1.0\n1 2 1.0\n", encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 5


@pytest.mark.parametrize("args", [[], ["a", "b"]])
def test_main_usage(args, capsys):
    assert main(args) == 1
    assert "Invoke the program" in capsys.readouterr().err


def test_main_bad_header(tmp_path, capsys):
    path = tmp_path / "g.txt"
    path.write_text("garbage", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "ERROR" in capsys.readouterr().err