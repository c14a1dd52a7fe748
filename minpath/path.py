"""Utilities for reconstructing paths from predecessor maps."""

from __future__ import annotations

from typing import List, Mapping, Sequence

from .exceptions import AlgorithmError, InputError
from .graph import Cost, GraphLike, NodeId


def extract_shortest_path_from_predecessor_list(
    predecessors: Mapping[NodeId, NodeId],
    destination: NodeId,
) -> List[NodeId]:
    """Return the path ending at ``destination`` by walking predecessor links.

    The walk stops at the first node without a predecessor entry, which is
    the source of the search. A destination with no entry is its own source,
    so the result is ``[destination]``.

    Args:
        predecessors: Map from each reached node to the node before it on its
            best known path.
        destination: Last node of the path.

    Returns:
        Nodes from source to destination (inclusive).

    Raises:
        AlgorithmError: If the walk takes more than ``len(predecessors) + 1``
            steps, which only happens on a cyclic predecessor chain.
    """
    nodes: List[NodeId] = [destination]
    limit = len(predecessors) + 1
    u = destination
    while u in predecessors:
        if len(nodes) > limit:
            raise AlgorithmError(f"predecessor chain from {destination!r} does not reach a source")
        u = predecessors[u]
        nodes.append(u)
    nodes.reverse()
    return nodes


def path_cost(graph: GraphLike, path: Sequence[NodeId]) -> Cost:
    """Return the sum of edge weights along consecutive nodes of ``path``.

    Raises:
        InputError: If some hop ``(u, v)`` is not an edge of ``graph``.
    """
    total: Cost = 0
    for u, v in zip(path, path[1:]):
        neighbours = graph.get(u, {})
        if v not in neighbours:
            raise InputError(f"({u!r}, {v!r}) is not an edge of the graph")
        total += neighbours[v]
    return total


__all__ = ["extract_shortest_path_from_predecessor_list", "path_cost"]
