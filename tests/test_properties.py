"""Property tests against networkx as a reference oracle."""

import networkx as nx
from hypothesis import given, settings
from hypothesis import strategies as st

from minpath import (
    SolverConfig,
    UnreachableDestination,
    find_path,
    path_cost,
    single_source_shortest_paths,
)
from minpath.solver import DijkstraSolver

NODES = st.sampled_from(list("abcdefgh"))

graphs = st.dictionaries(
    NODES,
    st.dictionaries(NODES, st.integers(min_value=0, max_value=20), max_size=5),
    max_size=8,
)


def _reference(graph):
    G = nx.DiGraph()
    G.add_nodes_from(graph)
    for u, nbrs in graph.items():
        for v, w in nbrs.items():
            G.add_edge(u, v, weight=w)
    return G


def _reachable(graph, source):
    G = _reference(graph)
    if source not in G:
        return {source}
    return nx.descendants(G, source) | {source}


@settings(max_examples=150, deadline=None)
@given(graph=graphs, source=NODES)
def test_predecessors_cover_exactly_reachable_nodes(graph, source):
    preds = single_source_shortest_paths(graph, source)
    assert set(preds) == _reachable(graph, source) - {source}


@settings(max_examples=150, deadline=None)
@given(graph=graphs, source=NODES, destination=NODES)
def test_find_path_is_minimal_or_raises(graph, source, destination):
    reachable = _reachable(graph, source)
    if destination not in reachable:
        try:
            find_path(graph, source, destination)
        except UnreachableDestination:
            return
        raise AssertionError("expected UnreachableDestination")

    path = find_path(graph, source, destination)
    assert path[0] == source
    assert path[-1] == destination
    expected = 0 if source == destination else nx.dijkstra_path_length(
        _reference(graph), source, destination
    )
    assert path_cost(graph, path) == expected


@settings(max_examples=100, deadline=None)
@given(graph=graphs, source=NODES)
def test_queue_strategies_agree_on_costs(graph, source):
    heap = DijkstraSolver(graph, source, SolverConfig(queue="heap")).solve()
    ordered = DijkstraSolver(graph, source, SolverConfig(queue="sorted")).solve()
    lazy = DijkstraSolver(graph, source, SolverConfig(skip_stale=False)).solve()
    assert heap.costs == ordered.costs == lazy.costs


@settings(max_examples=50, deadline=None)
@given(graph=graphs, source=NODES)
def test_repeated_calls_are_identical(graph, source):
    assert single_source_shortest_paths(graph, source) == single_source_shortest_paths(
        graph, source
    )
