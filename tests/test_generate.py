import pytest

from minpath import single_source_shortest_paths
from minpath.exceptions import InputError
from minpath.generate import GRAPH_TYPES, WEIGHT_DISTS, generate_graph


@pytest.mark.parametrize("graph_type", GRAPH_TYPES)
@pytest.mark.parametrize("weight_dist", WEIGHT_DISTS)
def test_weights_in_range(graph_type, weight_dist):
    g = generate_graph(30, 60, graph_type=graph_type, weight_dist=weight_dist, w_min=1, w_max=5)
    assert len(g) == 30
    assert all(1 <= w <= 5 for _, _, w in g.edges())
    assert all(u != v for u, v, _ in g.edges())


def test_edge_count():
    assert generate_graph(20, 50).num_edges() == 50


def test_edge_count_capped():
    assert generate_graph(4, 1000).num_edges() == 12


def test_dag_edges_go_forward():
    g = generate_graph(25, 80, graph_type="dag")
    assert all(int(u) < int(v) for u, v, _ in g.edges())


def test_grid_is_symmetric():
    g = generate_graph(9, graph_type="grid")
    # 3x3 grid: 12 undirected neighbour pairs
    assert g.num_edges() == 24
    for u, v, _ in g.edges():
        assert u in g[v]


def test_seed_is_deterministic():
    assert generate_graph(15, 40, seed=3).to_dict() == generate_graph(15, 40, seed=3).to_dict()
    assert generate_graph(15, 40, seed=3).to_dict() != generate_graph(15, 40, seed=4).to_dict()


def test_backbone_reaches_everything():
    g = generate_graph(40, 40, backbone=True, seed=1)
    assert len(single_source_shortest_paths(g, "0")) == 39


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 0},
        {"n": 5, "m": -1},
        {"n": 5, "w_min": -1.0},
        {"n": 5, "w_min": 3.0, "w_max": 2.0},
        {"n": 5, "graph_type": "tree"},
        {"n": 5, "weight_dist": "zipf"},
        {"n": 5, "weight_dist": "small_int", "w_min": 1.2, "w_max": 1.5},
    ],
)
def test_bad_parameters(kwargs):
    with pytest.raises(InputError):
        generate_graph(**kwargs)


def test_small_int_respects_fractional_bounds():
    g = generate_graph(20, 60, weight_dist="small_int", w_min=1.5, w_max=6, seed=2)
    weights = {w for _, _, w in g.edges()}
    assert weights <= {2.0, 3.0, 4.0}
    assert all(w == int(w) for w in weights)
