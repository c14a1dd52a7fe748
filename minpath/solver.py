"""Dijkstra single-source shortest paths over a weighted directed graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from .exceptions import AlgorithmError, ConfigError, UnreachableDestination
from .graph import Cost, GraphLike, NodeId, check_weight
from .logger import Logger, NoopLogger
from .path import extract_shortest_path_from_predecessor_list
from .priority_queue import QUEUES, PriorityQueue, make_queue


@dataclass(frozen=True)
class ShortestPaths:
    """Costs and predecessors produced by one solve."""

    source: NodeId
    costs: Dict[NodeId, Cost]
    predecessors: Dict[NodeId, NodeId]

    def reached(self, node: NodeId) -> bool:
        """Return ``True`` if ``node`` was assigned a cost."""
        return node in self.costs


@dataclass(frozen=True)
class SolverMetrics:
    """Performance metrics collected from a solver run."""

    nodes_reached: int
    queue: str
    skip_stale: bool
    counters: Dict[str, int]
    wall_ms: float
    peak_mib: float | None = None


@dataclass(frozen=True)
class SolverConfig:
    """Configuration knobs for the solver.

    Attributes:
        queue: Priority queue strategy, ``"heap"`` (binary heap) or
            ``"sorted"`` (sort-on-insert).
        skip_stale: Skip popped entries whose cost is above the best cost
            already recorded for their node. Only affects the amount of work.
        validate_weights: Reject negative, NaN or non-numeric edge weights as
            they are met during relaxation.
    """

    queue: str = "heap"
    skip_stale: bool = True
    validate_weights: bool = True

    def __post_init__(self) -> None:
        if self.queue not in QUEUES:
            raise ConfigError(f"unknown queue '{self.queue}' (expected one of {sorted(QUEUES)})")


class DijkstraSolver:
    """Dijkstra search from one source (directed, non-negative weights).

    Every call to :meth:`solve` builds its own queue, cost map and predecessor
    map, so a solver can be re-run and nothing leaks between runs.
    """

    def __init__(
        self,
        graph: GraphLike,
        source: NodeId,
        config: Optional[SolverConfig] = None,
        logger: Logger | None = None,
    ) -> None:
        """Initialize the solver.

        Args:
            graph: Mapping of node to ``{neighbour: weight}``. The source does
                not need to be a key.
            source: Node the search starts from.
            config: Optional solver configuration.
            logger: Optional event logger.
        """
        self.graph = graph
        self.source = source
        self.cfg = config or SolverConfig()
        self.logger = logger or NoopLogger()
        self.counters: Dict[str, int] = {}
        self._result: Optional[ShortestPaths] = None
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.counters = {
            "pops": 0,
            "stale_pops": 0,
            "pushes": 0,
            "edges_relaxed": 0,
            "improvements": 0,
            "max_queue_size": 0,
        }

    def _push(self, queue: PriorityQueue, node: NodeId, cost: Cost) -> None:
        queue.push(node, cost)
        self.counters["pushes"] += 1
        if len(queue) > self.counters["max_queue_size"]:
            self.counters["max_queue_size"] = len(queue)

    def solve(self) -> ShortestPaths:
        """Run the relaxation loop and return costs and predecessors.

        Raises:
            GraphFormatError: If an invalid edge weight is met and
                ``validate_weights`` is enabled.
        """
        self._reset_counters()
        self.logger.debug("solve.start", source=self.source, queue=self.cfg.queue)

        graph = self.graph
        validate = self.cfg.validate_weights
        costs: Dict[NodeId, Cost] = {self.source: 0}
        predecessors: Dict[NodeId, NodeId] = {}
        open_ = make_queue(self.cfg.queue)
        self._push(open_, self.source, 0)

        while not open_.empty():
            u, cost_u = open_.pop()
            self.counters["pops"] += 1
            if cost_u > costs[u]:
                self.counters["stale_pops"] += 1
                if self.cfg.skip_stale:
                    continue

            for v, w in graph.get(u, {}).items():
                if validate:
                    check_weight(u, v, w)
                self.counters["edges_relaxed"] += 1
                cand = cost_u + w
                if v not in costs or cand < costs[v]:
                    costs[v] = cand
                    predecessors[v] = u
                    self.counters["improvements"] += 1
                    self._push(open_, v, cand)

        self._result = ShortestPaths(source=self.source, costs=costs, predecessors=predecessors)
        self.logger.debug("solve.done", source=self.source, reached=len(costs), **self.counters)
        return self._result

    def _require(self, destination: NodeId) -> ShortestPaths:
        if self._result is None:
            raise AlgorithmError("Call solve() before requesting paths or costs.")
        if destination not in self._result.costs:
            raise UnreachableDestination(self.source, destination)
        return self._result

    def path(self, destination: NodeId) -> List[NodeId]:
        """Return the nodes of a shortest path from the source to ``destination``.

        Raises:
            AlgorithmError: If :meth:`solve` has not been called.
            UnreachableDestination: If ``destination`` was not reached.
        """
        result = self._require(destination)
        return extract_shortest_path_from_predecessor_list(result.predecessors, destination)

    def cost(self, destination: NodeId) -> Cost:
        """Return the minimum cost from the source to ``destination``.

        Raises:
            AlgorithmError: If :meth:`solve` has not been called.
            UnreachableDestination: If ``destination`` was not reached.
        """
        return self._require(destination).costs[destination]

    # ---------- counters --------------------------------------------------

    def summary(self) -> Dict[str, int]:
        """Return a copy of the counters from the most recent run."""
        return dict(self.counters)

    def metrics(self, wall_ms: float, peak_mib: float | None = None) -> SolverMetrics:
        """Return performance metrics for the most recent run.

        Args:
            wall_ms: Wall-clock time spent in :meth:`solve` in milliseconds.
            peak_mib: Optional peak memory usage in MiB.
        """
        reached = len(self._result.costs) if self._result is not None else 0
        return SolverMetrics(
            nodes_reached=reached,
            queue=self.cfg.queue,
            skip_stale=self.cfg.skip_stale,
            counters=self.summary(),
            wall_ms=wall_ms,
            peak_mib=peak_mib,
        )


def single_source_shortest_paths(
    graph: GraphLike,
    source: NodeId,
    destination: Optional[NodeId] = None,
    *,
    config: Optional[SolverConfig] = None,
    logger: Logger | None = None,
) -> Dict[NodeId, NodeId]:
    """Return the predecessor map of every node reachable from ``source``.

    Args:
        graph: Mapping of node to ``{neighbour: weight}``.
        source: Start node.
        destination: If given, the search fails unless this node is reached.
        config: Optional solver configuration.
        logger: Optional event logger.

    Returns:
        Map from each reached node (other than ``source``) to its predecessor.

    Raises:
        UnreachableDestination: If ``destination`` is given and never reached,
            including when it does not occur in ``graph`` at all.
    """
    result = DijkstraSolver(graph, source, config=config, logger=logger).solve()
    if destination is not None and not result.reached(destination):
        raise UnreachableDestination(source, destination)
    return result.predecessors


def find_path(
    graph: GraphLike,
    source: NodeId,
    destination: NodeId,
    *,
    config: Optional[SolverConfig] = None,
    logger: Logger | None = None,
) -> List[NodeId]:
    """Return the nodes of a minimum-cost path from ``source`` to ``destination``.

    Examples:
        ```python
        >>> find_path({"a": {"b": 1, "c": 5}, "b": {"c": 1}}, "a", "c")
        ['a', 'b', 'c']
        ```
    """
    predecessors = single_source_shortest_paths(
        graph, source, destination, config=config, logger=logger
    )
    return extract_shortest_path_from_predecessor_list(predecessors, destination)


__all__ = [
    "ShortestPaths",
    "SolverMetrics",
    "SolverConfig",
    "DijkstraSolver",
    "single_source_shortest_paths",
    "find_path",
]
