"""Public package exports for :mod:`minpath`."""

from __future__ import annotations

from .exceptions import (
    AlgorithmError,
    ConfigError,
    GraphFormatError,
    InputError,
    MinpathError,
    UnreachableDestination,
)
from .generate import generate_graph
from .graph import Graph
from .io import read_graph, write_graph
from .logger import Logger, NoopLogger, StdLogger
from .path import extract_shortest_path_from_predecessor_list, path_cost
from .priority_queue import HeapQueue, PriorityQueue, QueueEntry, SortedQueue, make_queue
from .solver import (
    DijkstraSolver,
    ShortestPaths,
    SolverConfig,
    SolverMetrics,
    find_path,
    single_source_shortest_paths,
)

__version__ = "0.1.0"

__all__ = [
    "find_path",
    "single_source_shortest_paths",
    "extract_shortest_path_from_predecessor_list",
    "path_cost",
    "DijkstraSolver",
    "ShortestPaths",
    "SolverConfig",
    "SolverMetrics",
    "Graph",
    "PriorityQueue",
    "QueueEntry",
    "HeapQueue",
    "SortedQueue",
    "make_queue",
    "generate_graph",
    "read_graph",
    "write_graph",
    "Logger",
    "NoopLogger",
    "StdLogger",
    "MinpathError",
    "InputError",
    "GraphFormatError",
    "ConfigError",
    "AlgorithmError",
    "UnreachableDestination",
]
