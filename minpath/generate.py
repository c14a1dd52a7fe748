"""Seeded random graph families for tests and benchmarks.

Supported families:

- ``erdos_renyi``: uniformly sampled directed edges.
- ``dag``: edges only from lower- to higher-index nodes.
- ``grid``: 2D grid with edges between neighbours in both directions, the
  layout with many equal-cost shortest paths.

All weights are non-negative. Node ids are the strings ``"0"`` .. ``"n-1"``.
"""

from __future__ import annotations

import math
import random
from typing import Literal, Optional

from .exceptions import InputError
from .graph import Graph

GraphType = Literal["erdos_renyi", "dag", "grid"]
WeightDist = Literal["uniform", "small_int", "exp"]

GRAPH_TYPES = ("erdos_renyi", "dag", "grid")
WEIGHT_DISTS = ("uniform", "small_int", "exp")


def _sample_weight(rng: random.Random, dist: WeightDist, w_min: float, w_max: float) -> float:
    if dist == "uniform":
        return rng.uniform(w_min, w_max)
    if dist == "small_int":
        # Many exact ties, which exercises queue tie handling.
        return float(rng.randint(math.ceil(w_min), math.floor(min(w_max, w_min + 3))))
    if dist == "exp":
        if w_max == w_min:
            return w_min
        lam = 1.0 / max(1.0, (w_max - w_min) / 4.0)
        return w_min + min(w_max - w_min, rng.expovariate(lam))
    raise InputError(f"unknown weight distribution: {dist}")


def generate_graph(
    n: int,
    m: Optional[int] = None,
    *,
    graph_type: GraphType = "erdos_renyi",
    weight_dist: WeightDist = "uniform",
    w_min: float = 0.0,
    w_max: float = 10.0,
    seed: Optional[int] = 0,
    backbone: bool = False,
) -> Graph:
    """Generate a directed graph with non-negative weights.

    Args:
        n: Number of nodes.
        m: Target number of edges. Defaults to ``4 * n`` (capped by the
            family's maximum). Ignored for ``grid``.
        graph_type: Graph family.
        weight_dist: Weight distribution.
        w_min: Smallest weight, must be ``>= 0``.
        w_max: Largest weight.
        seed: Seed for the random generator.
        backbone: Add the chain ``0 -> 1 -> ... -> n-1`` first so every node
            is reachable from ``"0"``.

    Returns:
        The generated graph; every node is present as a key.

    Raises:
        InputError: If a parameter is out of range.
    """
    if n <= 0:
        raise InputError("n must be > 0.")
    if w_min < 0:
        raise InputError("w_min must be >= 0.")
    if w_max < w_min:
        raise InputError("w_max must be >= w_min.")
    if m is not None and m < 0:
        raise InputError("m must be >= 0.")
    if graph_type not in GRAPH_TYPES:
        raise InputError(f"unknown graph type: {graph_type}")
    if weight_dist == "small_int" and math.ceil(w_min) > math.floor(w_max):
        raise InputError(f"no integer weight between w_min={w_min} and w_max={w_max}.")

    rng = random.Random(seed)
    g = Graph()
    for i in range(n):
        g.add_node(str(i))

    def add_edge(u: int, v: int) -> bool:
        if u == v or str(v) in g[str(u)]:
            return False
        g.add_edge(str(u), str(v), _sample_weight(rng, weight_dist, w_min, w_max))
        return True

    if backbone:
        for i in range(n - 1):
            add_edge(i, i + 1)

    if graph_type == "grid":
        rows = max(1, math.isqrt(n))
        cols = (n + rows - 1) // rows
        for r in range(rows):
            for c in range(cols):
                u = r * cols + c
                if u >= n:
                    continue
                for v in (u + 1 if c + 1 < cols else n, u + cols):
                    if v < n:
                        add_edge(u, v)
                        add_edge(v, u)
        return g

    max_m = n * (n - 1) if graph_type == "erdos_renyi" else n * (n - 1) // 2
    target = min(4 * n if m is None else m, max_m)
    edges = g.num_edges()
    while edges < target:
        u = rng.randrange(n)
        v = rng.randrange(n)
        if graph_type == "dag" and u > v:
            u, v = v, u
        if add_edge(u, v):
            edges += 1
    return g


__all__ = ["GRAPH_TYPES", "WEIGHT_DISTS", "generate_graph"]
