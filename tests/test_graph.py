import io

import pytest

from algolab.graph import (
    Edge,
    Graph,
    GraphFormatError,
    GraphType,
    read_graph,
    write_graph,
)


def _edge_set(graph):
    return {e for v in range(graph.n_nodes()) for e in graph.adj(v)}


def test_directed_edge_updates_degrees():
    g = Graph(3, GraphType.DIRECTED)
    assert g.add_edge(0, 1, 2.5) is True
    assert g.n_edges() == 1
    assert g.out_degree(0) == 1
    assert g.in_degree(1) == 1
    assert g.in_degree(0) == 0
    assert g.adj(0) == (Edge(0, 1, 2.5),)
    assert g.adj(1) == ()


def test_undirected_edge_is_symmetric():
    g = Graph(2, GraphType.UNDIRECTED)
    g.add_edge(0, 1, 3.0)
    assert g.adj(0) == (Edge(0, 1, 3.0),)
    assert g.adj(1) == (Edge(1, 0, 3.0),)
    assert g.n_edges() == 1


def test_new_edges_come_first():
    g = Graph(3, GraphType.DIRECTED)
    g.add_edge(0, 1, 1.0)
    g.add_edge(0, 2, 1.0)
    assert [e.dst for e in g.adj(0)] == [2, 1]


def test_duplicate_edge_is_ignored_with_warning():
    g = Graph(2, GraphType.DIRECTED)
    g.add_edge(0, 1, 1.0)
    with pytest.warns(RuntimeWarning, match="duplicate"):
        assert g.add_edge(0, 1, 5.0) is False
    assert g.n_edges() == 1
    assert g.adj(0) == (Edge(0, 1, 1.0),)


def test_degrees_sum_to_edges_in_directed_graph():
    g = Graph(4, GraphType.DIRECTED)
    for src, dst in [(0, 1), (0, 2), (1, 2), (2, 3), (3, 0)]:
        g.add_edge(src, dst, 1.0)
    assert sum(g.out_degree(v) for v in range(4)) == g.n_edges()
    assert sum(g.in_degree(v) for v in range(4)) == g.n_edges()


@pytest.mark.parametrize("src,dst", [(-1, 0), (0, 3), (3, 3)])
def test_out_of_range_edge(src, dst):
    g = Graph(3, GraphType.DIRECTED)
    with pytest.raises(ValueError):
        g.add_edge(src, dst, 1.0)


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        Graph(0, GraphType.DIRECTED)


def test_adj_out_of_range():
    with pytest.raises(ValueError):
        Graph(2, GraphType.DIRECTED).adj(2)


def test_format_lists_edges():
    g = Graph(2, GraphType.DIRECTED)
    g.add_edge(0, 1, 1.5)
    lines = g.format().splitlines()
    assert lines[0] == "DIRECTED"
    assert lines[1] == "[ 0] -> (0, 1, 1.500000) -> NULL"
    assert lines[2] == "[ 1] -> NULL"


def test_format_undirected_header():
    g = Graph(1, GraphType.UNDIRECTED)
    assert g.format().splitlines()[0] == "UNDIRECTED"


@pytest.mark.parametrize("kind", [GraphType.DIRECTED, GraphType.UNDIRECTED])
def test_write_read_round_trip(kind):
    g = Graph(4, kind)
    g.add_edge(0, 1, 1.5)
    g.add_edge(2, 0, 2.0)
    g.add_edge(3, 2, 0.25)
    buf = io.StringIO()
    write_graph(buf, g)
    again = read_graph(io.StringIO(buf.getvalue()))
    assert again.kind is kind
    assert again.n_nodes() == g.n_nodes()
    assert again.n_edges() == g.n_edges()
    assert _edge_set(again) == _edge_set(g)


def test_write_undirected_emits_each_edge_once():
    g = Graph(3, GraphType.UNDIRECTED)
    g.add_edge(0, 1, 1.0)
    g.add_edge(2, 1, 1.0)
    buf = io.StringIO()
    write_graph(buf, g)
    lines = buf.getvalue().splitlines()
    assert len(lines) == g.n_edges() + 1
    assert lines[0] == "3 2 0"


def test_read_header_mismatch_warns():
    with pytest.warns(RuntimeWarning, match="header"):
        g = read_graph(io.StringIO("2 5 1\n0 1 1.0\n"))
    assert g.n_edges() == 1


@pytest.mark.parametrize(
    "text", ["", "x y z", "0 0 1", "2 -1 1", "2 0 7", "2 1 1\n0 9 1.0\n"]
)
def test_read_invalid(text):
    with pytest.raises(GraphFormatError):
        read_graph(io.StringIO(text))


def test_read_stops_at_malformed_triple():
    with pytest.warns(RuntimeWarning):
        g = read_graph(io.StringIO("3 2 1\n0 1 1.0\nfoo 2 1.0\n"))
    assert _edge_set(g) == {Edge(0, 1, 1.0)}