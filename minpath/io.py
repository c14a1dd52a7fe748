"""Graph input/output helpers.

Node identifiers are read and written as strings in every format.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from .exceptions import GraphFormatError, InputError
from .graph import Graph, GraphLike, all_nodes, iter_edges

GRAPHML_NS = "http://graphml.graphdrawing.org/xmlns"


def _parse_weight(raw: object, where: str) -> float:
    try:
        return float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        raise GraphFormatError(f"{where}: weight {raw!r} is not a number") from None


def _add(g: Graph, u: str, v: str, w: float, where: str) -> None:
    try:
        g.add_edge(u, v, w)
    except GraphFormatError as exc:
        raise GraphFormatError(f"{where}: {exc}") from None


def _read_csv(path: Path) -> Graph:
    """Read ``u,v,w`` rows; commas or tabs separate columns.

    Lines starting with ``#`` and blank lines are skipped. A row with fewer
    than three columns or a non-numeric weight is an error.
    """
    g = Graph()
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row or row.startswith("#"):
                continue
            parts = [p.strip() for p in row.replace("\t", ",").split(",")]
            where = f"{path.name}:{lineno}"
            if len(parts) < 3 or not parts[0] or not parts[1]:
                raise GraphFormatError(f"{where}: expected 'u,v,w', got {row!r}")
            _add(g, parts[0], parts[1], _parse_weight(parts[2], where), where)
    return g


def _csv_id(node: object, column: str) -> str:
    """Return ``node`` as a CSV cell that :func:`_read_csv` parses back unchanged."""
    text = str(node)
    if not text or text != text.strip() or any(c in text for c in ",\t\r\n"):
        raise GraphFormatError(f"node id {text!r} cannot be written as a csv {column} column")
    if column == "u" and text.startswith("#"):
        raise GraphFormatError(f"node id {text!r} would be read back as a comment")
    return text


def _write_csv(path: Path, graph: GraphLike) -> None:
    rows = [f"{_csv_id(u, 'u')},{_csv_id(v, 'v')},{w}\n" for u, v, w in iter_edges(graph)]
    with path.open("w", encoding="utf-8") as fh:
        fh.write("# u,v,w\n")
        fh.writelines(rows)


def _read_jsonl(path: Path) -> Graph:
    """Read one ``{"u": ..., "v": ..., "w": ...}`` object per line."""
    g = Graph()
    with path.open("r", encoding="utf-8") as fh:
        for lineno, raw in enumerate(fh, start=1):
            row = raw.strip()
            if not row:
                continue
            where = f"{path.name}:{lineno}"
            try:
                obj = json.loads(row)
                u, v, w = obj["u"], obj["v"], obj["w"]
            except (json.JSONDecodeError, KeyError, TypeError) as exc:
                raise GraphFormatError(f"{where}: bad edge record ({exc})") from None
            _add(g, str(u), str(v), _parse_weight(w, where), where)
    return g


def _write_jsonl(path: Path, graph: GraphLike) -> None:
    with path.open("w", encoding="utf-8") as fh:
        for u, v, w in iter_edges(graph):
            fh.write(json.dumps({"u": str(u), "v": str(v), "w": w}) + "\n")


def _read_json(path: Path) -> Graph:
    """Read an adjacency object such as ``{"a": {"b": 1}, "b": {}}``."""
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise GraphFormatError(f"{path.name}: invalid JSON ({exc})") from None
    if not isinstance(data, dict):
        raise GraphFormatError(f"{path.name}: expected an object of adjacency objects")
    g = Graph()
    for u, neighbours in data.items():
        if not isinstance(neighbours, dict):
            raise GraphFormatError(f"{path.name}: adjacency of {u!r} is not an object")
        g.add_node(str(u))
        for v, w in neighbours.items():
            where = f"{path.name}[{u!r}][{v!r}]"
            _add(g, str(u), str(v), _parse_weight(w, where), where)
    return g


def _write_json(path: Path, graph: GraphLike) -> None:
    data = {str(u): {str(v): w for v, w in nbrs.items()} for u, nbrs in graph.items()}
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def _read_graphml(path: Path) -> Graph:
    """Parse ``<node>`` and ``<edge>`` elements of a GraphML document.

    The weight comes from a ``weight`` attribute or a ``<data key="w">``
    child; edges without either get weight ``1.0``.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise GraphFormatError(f"{path.name}: invalid GraphML ({exc})") from None
    ns = f"{{{GRAPHML_NS}}}"
    g = Graph()
    for node in root.iter(f"{ns}node"):
        node_id = node.attrib.get("id")
        if node_id:
            g.add_node(node_id)
    for edge in root.iter(f"{ns}edge"):
        u = edge.attrib.get("source", "")
        v = edge.attrib.get("target", "")
        where = f"{path.name}: edge {u!r}->{v!r}"
        if not u or not v:
            raise GraphFormatError(f"{where}: missing source or target")
        w_attr = edge.attrib.get("weight")
        if w_attr is None:
            data = edge.find(f"{ns}data[@key='w']")
            w_attr = data.text if (data is not None and data.text is not None) else "1.0"
        _add(g, u, v, _parse_weight(w_attr, where), where)
    return g


def _write_graphml(path: Path, graph: GraphLike) -> None:
    root = ET.Element("graphml", xmlns=GRAPHML_NS)
    gel = ET.SubElement(root, "graph", id="G", edgedefault="directed")
    for node in all_nodes(graph):
        ET.SubElement(gel, "node", id=str(node))
    for u, v, w in iter_edges(graph):
        ET.SubElement(gel, "edge", source=str(u), target=str(v), weight=str(w))
    ET.indent(root)
    ET.ElementTree(root).write(path, encoding="UTF-8", xml_declaration=True)


_FMT_READERS: Dict[str, Callable[[Path], Graph]] = {
    "csv": _read_csv,
    "jsonl": _read_jsonl,
    "json": _read_json,
    "graphml": _read_graphml,
}

_FMT_WRITERS: Dict[str, Callable[[Path, GraphLike], None]] = {
    "csv": _write_csv,
    "jsonl": _write_jsonl,
    "json": _write_json,
    "graphml": _write_graphml,
}

FORMATS: List[str] = list(_FMT_READERS)


def detect_format(path: Path) -> Optional[str]:
    """Return the format implied by ``path``'s extension, or ``None``."""
    ext = path.suffix.lower()
    if ext in {".csv", ".tsv"}:
        return "csv"
    if ext == ".jsonl":
        return "jsonl"
    if ext == ".json":
        return "json"
    if ext == ".graphml":
        return "graphml"
    return None


def _resolve_format(p: Path, fmt: Optional[str], known: Iterable[str]) -> str:
    fmt = fmt or detect_format(p)
    if fmt is None or fmt not in known:
        raise GraphFormatError(f"unknown graph format for {p.name!r}: {fmt!r}")
    return fmt


def read_graph(path: str | Path, fmt: Optional[str] = None) -> Graph:
    """Read a graph from a file.

    Args:
        path: Path to the graph file.
        fmt: One of :data:`FORMATS`; detected from the extension when omitted.

    Returns:
        The parsed graph with string node ids.

    Raises:
        InputError: If the file does not exist.
        GraphFormatError: If the format is unknown or the content is invalid.
    """
    p = Path(path)
    fmt = _resolve_format(p, fmt, _FMT_READERS)
    if not p.exists():
        raise InputError(f"graph file not found: {p}")
    return _FMT_READERS[fmt](p)


def write_graph(graph: GraphLike, path: str | Path, fmt: Optional[str] = None) -> None:
    """Write ``graph`` to a file.

    Args:
        graph: Graph to serialize; node ids are written with ``str``.
        path: Destination path.
        fmt: One of :data:`FORMATS`; detected from the extension when omitted.

    Raises:
        GraphFormatError: If the format is unknown.
    """
    p = Path(path)
    fmt = _resolve_format(p, fmt, _FMT_WRITERS)
    _FMT_WRITERS[fmt](p, graph)


__all__ = ["FORMATS", "detect_format", "read_graph", "write_graph"]
