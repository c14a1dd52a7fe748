"""Export utilities for shortest-path trees."""

from __future__ import annotations

import json
from typing import List, Mapping, Tuple

from .graph import NodeId
from .solver import ShortestPaths


def shortest_path_tree(predecessors: Mapping[NodeId, NodeId]) -> List[Tuple[NodeId, NodeId]]:
    """Return the tree edges ``(predecessor, node)`` of a predecessor map."""
    return [(u, v) for v, u in predecessors.items()]


def export_tree_json(result: ShortestPaths) -> str:
    """Return a JSON string with reached nodes, their costs and tree edges."""
    data = {
        "source": str(result.source),
        "nodes": [{"id": str(n), "cost": c} for n, c in result.costs.items()],
        "edges": [
            {"source": str(u), "target": str(v)}
            for (u, v) in shortest_path_tree(result.predecessors)
        ],
    }
    return json.dumps(data)


def export_tree_graphml(result: ShortestPaths) -> str:
    """Return a minimal GraphML string for the shortest-path tree."""
    lines: List[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append('<graphml xmlns="http://graphml.graphdrawing.org/xmlns">')
    lines.append('  <key id="cost" for="node" attr.name="cost" attr.type="double"/>')
    lines.append('  <graph id="T" edgedefault="directed">')
    for n, c in result.costs.items():
        lines.append(f'    <node id="{_xml_attr(n)}"><data key="cost">{c}</data></node>')
    for u, v in shortest_path_tree(result.predecessors):
        lines.append(f'    <edge source="{_xml_attr(u)}" target="{_xml_attr(v)}"/>')
    lines.append("  </graph>")
    lines.append("</graphml>")
    return "\n".join(lines)


def _xml_attr(value: NodeId) -> str:
    return (
        str(value)
        .replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
