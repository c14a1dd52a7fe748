"""Micro-benchmark for the priority queue strategies.

Runs the solver with every queue strategy on random graphs and checks the
resulting costs against :func:`networkx.single_source_dijkstra_path_length`.

Example:
```bash
python -m minpath.bench --trials 5 --sizes 1000,5000 2000,10000 --out-csv out.csv
```

Use ``--mem`` to record peak memory usage during solver runs.
"""

from __future__ import annotations

import argparse
import csv
import math
import statistics
import time
import tracemalloc
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Tuple

import networkx as nx

from .generate import generate_graph
from .graph import Cost, Graph, NodeId
from .priority_queue import QUEUES
from .solver import DijkstraSolver, SolverConfig, SolverMetrics


@dataclass
class BenchResult:
    """Result of a single benchmarking run."""

    n: int
    m: int
    metrics: SolverMetrics
    reference_ms: float
    max_abs_err: float


def to_networkx(graph: Graph) -> nx.DiGraph:
    """Return ``graph`` as a :class:`networkx.DiGraph` with ``weight`` attributes."""
    G = nx.DiGraph()
    G.add_nodes_from(graph.nodes())
    G.add_weighted_edges_from(graph.edges())
    return G


def max_cost_error(ours: Dict[NodeId, Cost], reference: Dict[NodeId, Cost]) -> float:
    """Return the largest absolute cost difference; ``inf`` if reachability differs."""
    if ours.keys() != reference.keys():
        return math.inf
    return max((abs(ours[k] - reference[k]) for k in ours), default=0.0)


def run_once(
    n: int,
    m: int,
    queue: str,
    seed: int = 0,
    track_mem: bool = False,
) -> BenchResult:
    """Run the solver once and compare against networkx.

    Args:
        n: Number of nodes.
        m: Number of edges.
        queue: Queue strategy name (``"heap"`` or ``"sorted"``).
        seed: Seed for the random graph generator.
        track_mem: Record peak memory with :mod:`tracemalloc`.

    Returns:
        Timing information and maximum absolute cost error.
    """
    graph = generate_graph(n, m, seed=seed)
    source = "0"
    solver = DijkstraSolver(graph, source, SolverConfig(queue=queue))

    if track_mem:
        tracemalloc.start()
    t0 = time.perf_counter()
    res = solver.solve()
    t1 = time.perf_counter()
    peak = None
    if track_mem:
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

    G = to_networkx(graph)
    t2 = time.perf_counter()
    ref = nx.single_source_dijkstra_path_length(G, source)
    t3 = time.perf_counter()

    peak_mib = (peak / (1024 * 1024)) if peak is not None else None
    return BenchResult(
        n=n,
        m=graph.num_edges(),
        metrics=solver.metrics(wall_ms=(t1 - t0) * 1000.0, peak_mib=peak_mib),
        reference_ms=(t3 - t2) * 1000.0,
        max_abs_err=max_cost_error(res.costs, ref),
    )


def _p95(values: List[float]) -> float:
    if len(values) == 1:
        return values[0]
    return statistics.quantiles(values, n=100, method="inclusive")[94]


def main(argv: List[str] | None = None) -> int:
    """Run benchmarking trials and optionally record results.

    Args:
        argv: Optional argument list for testing.

    Returns:
        ``0`` if every run agreed with the reference, ``1`` otherwise.
    """
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--trials", type=int, default=1, help="Number of trials per configuration")
    parser.add_argument(
        "--sizes",
        nargs="+",
        default=["10,20", "20,40"],
        help="Size pairs as n,m (e.g. 1000,5000). Defaults to a small demo.",
    )
    parser.add_argument("--seed-base", type=int, default=0, help="Base seed for random graphs")
    parser.add_argument("--out-csv", type=Path, help="Optional path to write per-trial CSV data")
    parser.add_argument(
        "--mem",
        action="store_true",
        help="Profile peak memory usage (MiB) using tracemalloc",
    )
    args = parser.parse_args(argv)

    sizes: List[Tuple[int, int]] = []
    for spec in args.sizes:
        try:
            n_str, m_str = spec.split(",")
            sizes.append((int(n_str), int(m_str)))
        except ValueError:
            parser.error(f"invalid size specification '{spec}'")

    rows: List[List[object]] = []
    runs: Dict[Tuple[int, int, str], List[BenchResult]] = {}
    for n, m in sizes:
        for queue in QUEUES:
            for trial in range(args.trials):
                res = run_once(n, m, queue, seed=args.seed_base + trial, track_mem=args.mem)
                runs.setdefault((n, m, queue), []).append(res)
                mtx = res.metrics
                row: List[object] = [
                    n,
                    res.m,
                    queue,
                    trial,
                    f"{mtx.wall_ms:.6f}",
                    f"{res.reference_ms:.6f}",
                    mtx.counters["edges_relaxed"],
                    mtx.counters["stale_pops"],
                    mtx.counters["max_queue_size"],
                    res.max_abs_err,
                ]
                if args.mem:
                    row.append(f"{(mtx.peak_mib or 0.0):.6f}")
                rows.append(row)

    if args.out_csv:
        with args.out_csv.open("w", newline="") as fh:
            writer = csv.writer(fh)
            header_row = [
                "n",
                "m",
                "queue",
                "trial",
                "minpath_ms",
                "networkx_ms",
                "edges_relaxed",
                "stale_pops",
                "max_queue_size",
                "max_abs_err",
            ]
            if args.mem:
                header_row.append("peak_mib")
            writer.writerow(header_row)
            writer.writerows(rows)

    print(
        f"{'n':>6} {'m':>7} {'queue':>6} {'edges':>10} {'stale':>8}"
        f" {'ours_med':>10} {'ours_p95':>10} {'nx_med':>10} {'nx_p95':>10} {'max_err':>9}"
    )
    worst = 0.0
    for (n, m, queue), results in runs.items():
        ours = [r.metrics.wall_ms for r in results]
        ref = [r.reference_ms for r in results]
        err = max(r.max_abs_err for r in results)
        worst = max(worst, err)
        print(
            f"{n:6d} {m:7d} {queue:>6}"
            f" {int(statistics.median(r.metrics.counters['edges_relaxed'] for r in results)):10d}"
            f" {int(statistics.median(r.metrics.counters['stale_pops'] for r in results)):8d}"
            f" {statistics.median(ours):10.2f} {_p95(ours):10.2f}"
            f" {statistics.median(ref):10.2f} {_p95(ref):10.2f} {err:9.2g}"
        )
    return 0 if worst <= 1e-9 else 1


if __name__ == "__main__":  # pragma: no cover - manual invocation
    raise SystemExit(main())
