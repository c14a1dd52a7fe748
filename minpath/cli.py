"""Command-line interface for running the solver."""

from __future__ import annotations

import argparse
import json
import sys
import time
import traceback
import tracemalloc
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from .exceptions import ConfigError, InputError, MinpathError, UnreachableDestination
from .export import export_tree_graphml, export_tree_json
from .generate import generate_graph
from .graph import Graph
from .io import FORMATS, read_graph
from .logger import StdLogger
from .priority_queue import QUEUES
from .solver import DijkstraSolver, SolverConfig

EXIT_OK = 0
EXIT_UNREACHABLE = 1
EXIT_INPUT = 64
EXIT_INTERNAL = 70

EXAMPLE_CSV = """# u,v,w
a,b,10
a,d,1
b,a,1
b,c,1
b,e,1
c,b,1
c,f,1
d,a,1
d,e,1
d,g,1
e,b,1
e,d,1
e,f,1
e,h,1
f,c,1
f,e,1
f,i,1
g,d,1
g,h,1
h,e,1
h,g,1
h,i,1
i,f,1
i,h,1
"""


def _load_graph(args: argparse.Namespace) -> Graph:
    if args.random:
        return generate_graph(args.n, args.m, seed=args.seed, backbone=True)
    return read_graph(args.edges, args.format)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``minpath`` command-line tool."""
    examples = (
        "Examples:\n"
        "  minpath --example > grid.csv\n"
        "  minpath --edges grid.csv --source a --target i\n"
        "  minpath --random --n 100 --m 500 --source 0 --target 42\n"
        "  minpath --edges graph.json --source a --export-json tree.json\n"
    )
    p = argparse.ArgumentParser(
        prog="minpath",
        description="Dijkstra shortest paths on a weighted directed graph",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines as JSON")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to graph file")
    src.add_argument("--random", action="store_true", help="Use a random graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )

    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Graph file format (auto-detected from extension)",
    )
    p.add_argument("--n", type=int, default=10, help="Nodes (random mode)")
    p.add_argument("--m", type=int, default=20, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random graph generation")

    p.add_argument("--source", type=str, default=None, help="Source node id")
    p.add_argument("--target", type=str, default=None, help="Target node id for path output")
    p.add_argument("--queue", choices=sorted(QUEUES), default="heap", help="Priority queue strategy")
    p.add_argument(
        "--keep-stale",
        action="store_true",
        help="Relax stale queue entries instead of skipping them",
    )

    p.add_argument("--export-json", type=str, default=None, help="Write shortest-path tree as JSON")
    p.add_argument(
        "--export-graphml",
        type=str,
        default=None,
        help="Write shortest-path tree as GraphML",
    )
    p.add_argument(
        "--metrics-out",
        type=str,
        default=None,
        help="Write run metrics to this JSON file",
    )

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return EXIT_OK

    logger = StdLogger(level=args.log_level, json_fmt=args.log_json, stream=sys.stderr)

    try:
        graph = _load_graph(args)
        if args.source is None:
            if not graph:
                raise InputError("graph is empty")
            source = graph.nodes()[0]
        else:
            source = args.source

        cfg = SolverConfig(queue=args.queue, skip_stale=not args.keep_stale)
        if args.verbose:
            sys.stderr.write(
                f"config: nodes={len(graph)} edges={graph.num_edges()} queue={cfg.queue} "
                f"skip_stale={cfg.skip_stale} source={source!r}\n"
            )

        solver = DijkstraSolver(graph, source, config=cfg, logger=logger)
        if args.metrics_out:
            tracemalloc.start()
        t0 = time.perf_counter()
        res = solver.solve()
        wall_ms = (time.perf_counter() - t0) * 1000.0
        peak_mib = None
        if args.metrics_out:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            peak_mib = peak / (1024 * 1024)

        out: Dict[str, Any] = {
            "source": source,
            "queue": cfg.queue,
            "costs": res.costs,
        }
        # Resolve the target before writing any output file.
        if args.target is not None:
            out["target"] = args.target
            out["path"] = solver.path(args.target)
            out["cost"] = solver.cost(args.target)

        if args.export_json:
            with open(args.export_json, "w", encoding="utf-8") as fh:
                fh.write(export_tree_json(res))
        if args.export_graphml:
            with open(args.export_graphml, "w", encoding="utf-8") as fh:
                fh.write(export_tree_graphml(res))
        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(solver.metrics(wall_ms=wall_ms, peak_mib=peak_mib)), fh)

        logger.info(
            "run",
            nodes=len(graph),
            edges=graph.num_edges(),
            queue=cfg.queue,
            source=source,
            wall_ms=round(wall_ms, 3),
            **solver.summary(),
        )
        print(json.dumps(out))
        return EXIT_OK

    except UnreachableDestination as exc:
        sys.stderr.write(f"error: {exc}\n")
        return EXIT_UNREACHABLE
    except (InputError, ConfigError, OSError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return EXIT_INPUT
    except MinpathError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    except Exception as exc:  # pragma: no cover - unexpected
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return EXIT_INTERNAL
    finally:
        if args.metrics_out and tracemalloc.is_tracing():
            tracemalloc.stop()


if __name__ == "__main__":
    sys.exit(main())
