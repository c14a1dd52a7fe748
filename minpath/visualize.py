"""Draw a graph with a shortest path highlighted.

Requires the ``viz`` extra (``networkx`` and ``matplotlib``).

Example usage:

```
python -m minpath.visualize graph.json a i --show-weights
```
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence

import matplotlib.pyplot as plt
import networkx as nx

from .graph import GraphLike, NodeId, iter_edges
from .io import read_graph
from .solver import find_path

LAYOUTS = ("spring", "kamada_kawai", "shell")


def path_edges(path: Sequence[NodeId]) -> List[tuple]:
    """Return the consecutive ``(u, v)`` hops of ``path``."""
    return list(zip(path, path[1:]))


def draw_path(
    graph: GraphLike,
    path: Sequence[NodeId] = (),
    *,
    layout: str = "spring",
    show_weights: bool = False,
    node_size: int = 300,
    ax: Optional[plt.Axes] = None,
) -> plt.Axes:
    """Render ``graph`` with NetworkX + Matplotlib, highlighting ``path``.

    The first node of ``path`` is drawn in red, the rest of the path in
    orange, other nodes in blue.
    """
    G = nx.DiGraph()
    G.add_nodes_from(graph)
    for u, v, w in iter_edges(graph):
        G.add_edge(u, v, weight=w)

    if layout == "spring":
        pos = nx.spring_layout(G, seed=42)
    elif layout == "kamada_kawai":
        pos = nx.kamada_kawai_layout(G)
    elif layout == "shell":
        pos = nx.shell_layout(G)
    else:
        raise ValueError(f"Unknown layout: {layout}")

    if ax is None:
        _, ax = plt.subplots(figsize=(10, 8))

    on_path = set(path)
    start = path[0] if path else None
    node_colors = [
        "tab:red" if node == start else "tab:orange" if node in on_path else "tab:blue"
        for node in G.nodes
    ]
    hops = set(path_edges(path))
    edge_colors = ["tab:orange" if e in hops else "tab:gray" for e in G.edges]
    widths = [2.5 if e in hops else 1.0 for e in G.edges]

    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=node_colors, node_size=node_size, alpha=0.9)
    nx.draw_networkx_edges(
        G, pos, ax=ax, edge_color=edge_colors, width=widths, arrowstyle="->", arrowsize=12
    )
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=8)
    if show_weights:
        labels = {(u, v): w for u, v, w in iter_edges(graph)}
        nx.draw_networkx_edge_labels(G, pos, ax=ax, edge_labels=labels, font_size=7)

    title = " -> ".join(str(n) for n in path) if path else "graph"
    ax.set_title(title)
    ax.axis("off")
    return ax


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Draw a graph and its shortest path")
    parser.add_argument("path", help="Graph file (csv, jsonl, json or graphml)")
    parser.add_argument("source")
    parser.add_argument("target")
    parser.add_argument("--layout", choices=LAYOUTS, default="spring")
    parser.add_argument("--show-weights", action="store_true")
    parser.add_argument("--out", help="Save to this image file instead of showing a window")
    args = parser.parse_args(argv)

    graph = read_graph(args.path)
    route = find_path(graph, args.source, args.target)
    draw_path(graph, route, layout=args.layout, show_weights=args.show_weights)
    plt.tight_layout()
    if args.out:
        plt.savefig(args.out)
    else:
        plt.show()


if __name__ == "__main__":  # pragma: no cover - manual invocation
    main()
