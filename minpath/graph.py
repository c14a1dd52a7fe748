"""Typed adjacency-mapping graph used by the solver."""

from __future__ import annotations

import math
from typing import Dict, Hashable, Iterable, Iterator, List, Mapping, Tuple, Union

from .exceptions import GraphFormatError

NodeId = Hashable
Cost = Union[int, float]
Edge = Tuple[NodeId, NodeId, Cost]
GraphLike = Mapping[NodeId, Mapping[NodeId, Cost]]


def check_weight(u: NodeId, v: NodeId, w: object) -> Cost:
    """Return ``w`` if it is a usable edge weight.

    Args:
        u: Tail node, used in the error message.
        v: Head node, used in the error message.
        w: Candidate weight.

    Returns:
        The weight unchanged.

    Raises:
        GraphFormatError: If ``w`` is not a real number, is NaN or is negative.
    """
    if isinstance(w, bool) or not isinstance(w, (int, float)):
        raise GraphFormatError(f"non-numeric weight {w!r} on edge ({u!r}, {v!r})")
    if math.isnan(w):
        raise GraphFormatError(f"NaN weight on edge ({u!r}, {v!r})")
    if w < 0:
        raise GraphFormatError(f"negative weight {w} on edge ({u!r}, {v!r})")
    return w


class Graph(Mapping[NodeId, Mapping[NodeId, Cost]]):
    """Directed graph with non-negative edge weights.

    Behaves as a read-only mapping from node to ``{neighbour: weight}`` so it
    can be passed anywhere a plain dict-of-dicts graph is accepted. Nodes that
    only appear as edge heads are registered with an empty adjacency.

    Examples:
        ```python
        >>> g = Graph.from_edges([("a", "b", 1), ("b", "c", 2.5)])
        >>> dict(g["a"])
        {'b': 1}
        >>> sorted(g.nodes())
        ['a', 'b', 'c']
        ```
    """

    def __init__(self) -> None:
        self._adj: Dict[NodeId, Dict[NodeId, Cost]] = {}

    def __getitem__(self, node: NodeId) -> Mapping[NodeId, Cost]:
        return self._adj[node]

    def __iter__(self) -> Iterator[NodeId]:
        return iter(self._adj)

    def __len__(self) -> int:
        return len(self._adj)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._adj)}, edges={self.num_edges()})"

    def add_node(self, node: NodeId) -> None:
        """Register ``node`` without adding any edge."""
        self._adj.setdefault(node, {})

    def add_edge(self, u: NodeId, v: NodeId, w: Cost) -> None:
        """Add or replace the directed edge ``u -> v``.

        Args:
            u: Tail node.
            v: Head node.
            w: Non-negative edge weight.

        Raises:
            GraphFormatError: If ``w`` is negative, NaN or non-numeric.
        """
        check_weight(u, v, w)
        self._adj.setdefault(u, {})[v] = w
        self._adj.setdefault(v, {})

    @classmethod
    def from_edges(cls, edges: Iterable[Edge]) -> "Graph":
        """Create a graph from an iterable of ``(u, v, w)`` edges."""
        g = cls()
        for u, v, w in edges:
            g.add_edge(u, v, w)
        return g

    @classmethod
    def from_mapping(cls, graph: GraphLike) -> "Graph":
        """Copy and validate a dict-of-dicts graph.

        Keys without outgoing edges are kept as isolated nodes.
        """
        g = cls()
        for u, neighbours in graph.items():
            g.add_node(u)
            for v, w in neighbours.items():
                g.add_edge(u, v, w)
        return g

    def nodes(self) -> List[NodeId]:
        """Return all nodes, in insertion order."""
        return list(self._adj)

    def edges(self) -> Iterator[Edge]:
        """Yield every edge as ``(u, v, w)``."""
        for u, neighbours in self._adj.items():
            for v, w in neighbours.items():
                yield u, v, w

    def out_degree(self, u: NodeId) -> int:
        """Return the number of outgoing edges of ``u`` (0 if unknown)."""
        return len(self._adj.get(u, ()))

    def num_edges(self) -> int:
        """Return the total number of edges."""
        return sum(len(nbrs) for nbrs in self._adj.values())

    def to_dict(self) -> Dict[NodeId, Dict[NodeId, Cost]]:
        """Return a plain dict-of-dicts copy."""
        return {u: dict(nbrs) for u, nbrs in self._adj.items()}


def iter_edges(graph: GraphLike) -> Iterator[Edge]:
    """Yield every edge of any graph mapping as ``(u, v, w)``."""
    for u, neighbours in graph.items():
        for v, w in neighbours.items():
            yield u, v, w


def all_nodes(graph: GraphLike) -> List[NodeId]:
    """Return nodes appearing as keys or as edge heads, in first-seen order."""
    nodes: Dict[NodeId, None] = {}
    for u, neighbours in graph.items():
        nodes.setdefault(u)
        for v in neighbours:
            nodes.setdefault(v)
    return list(nodes)


__all__ = ["Graph", "GraphLike", "NodeId", "Cost", "Edge", "check_weight", "iter_edges", "all_nodes"]
