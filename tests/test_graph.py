import math

import pytest

from minpath.exceptions import GraphFormatError
from minpath.graph import Graph, all_nodes, iter_edges


def test_from_edges_registers_heads():
    g = Graph.from_edges([("a", "b", 1), ("b", "c", 2.5)])
    assert g.nodes() == ["a", "b", "c"]
    assert dict(g["a"]) == {"b": 1}
    assert dict(g["c"]) == {}
    assert g.num_edges() == 2
    assert len(g) == 3


def test_add_edge_replaces_weight():
    g = Graph()
    g.add_edge("a", "b", 5)
    g.add_edge("a", "b", 2)
    assert g["a"]["b"] == 2
    assert g.out_degree("a") == 1


def test_out_degree_unknown_node():
    assert Graph().out_degree("nope") == 0


def test_from_mapping_keeps_isolated_nodes(weighted):
    g = Graph.from_mapping({**weighted, "lonely": {}})
    assert "lonely" in g
    assert g.to_dict()["lonely"] == {}
    assert g.to_dict()["a"] == weighted["a"]


def test_mapping_protocol(weighted):
    g = Graph.from_mapping(weighted)
    assert g.get("zzz") is None
    assert set(g.keys()) == set(all_nodes(weighted))
    assert sorted(g.edges()) == sorted(iter_edges(weighted))
    assert "edges=9" in repr(g)


@pytest.mark.parametrize(
    "weight, match",
    [(-1, "negative"), (math.nan, "NaN"), ("3", "non-numeric"), (None, "non-numeric"), (True, "non-numeric")],
)
def test_rejects_bad_weights(weight, match):
    with pytest.raises(GraphFormatError, match=match):
        Graph().add_edge("u", "v", weight)


def test_error_cites_edge():
    with pytest.raises(GraphFormatError, match=r"\('u', 'v'\)"):
        Graph.from_edges([("u", "v", -0.5)])


def test_all_nodes_includes_heads():
    assert all_nodes({"b": {"c": 1}, "a": {"b": 1}}) == ["b", "c", "a"]
