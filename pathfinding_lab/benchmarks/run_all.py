# pathfinding_lab/benchmarks/run_all.py
# Seeded benchmark: builds a random directed graph, runs Dijkstra and bidirectional Dijkstra on random
# source/target pairs and reports timings and whether the two agree on the path cost.
from __future__ import annotations

import argparse
import json
import math
import os
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from ..algorithms.bidirectional import bidirectional_shortest_path
from ..algorithms.dijkstra import dijkstra_shortest_path
from ..core.metrics import SearchResult, measure_search
from ..logging_config import get_logger, setup_logging
from ..problems.digraph import DirectedGraph
from ..problems.random_graph import random_graph, random_node

logger = get_logger(__name__)

# ---- Tunables (overridable via environment variables) -----------------------
NODES      = int(os.getenv("BENCH_NODES", "100000"))       # graph order
ARCS       = int(os.getenv("BENCH_ARCS", "1000000"))       # distinct arcs
TRIALS     = int(os.getenv("BENCH_TRIALS", "1"))           # source/target pairs
MAX_WEIGHT = float(os.getenv("BENCH_MAX_WEIGHT", "100.0")) # arc weights in [0, MAX_WEIGHT)

DEFAULT_OUT = Path(__file__).with_name("results.json")


# ---- Helpers ----------------------------------------------------------------
def parse_seed(value: Optional[str]) -> int:
    """Integer seed from the command line, or the current time in ms when missing or unparsable."""
    if value is None:
        return int(time.time() * 1000)
    try:
        return int(value)
    except ValueError:
        seed = int(time.time() * 1000)
        logger.warning(f"Could not parse {value!r} as an integer seed, using {seed}")
        return seed


def costs_agree(a: SearchResult, b: SearchResult) -> bool:
    if a.success != b.success:
        return False
    if not a.success:
        return True
    return math.isclose(a.cost, b.cost, rel_tol=1e-9, abs_tol=1e-6)


def _row(trial: int, r: SearchResult) -> Dict[str, Any]:
    return {
        "trial": trial,
        "algo": r.algo,
        "success": r.success,
        "cost": r.cost,
        "path_length": r.path_length,
        "time_s": r.time_s,   # canonical field
        "peak_kb": r.peak_kb,
        "error": r.error,
    }


def run_trial(graph: DirectedGraph, source, target, trace_memory: bool = False) -> List[SearchResult]:
    weights = graph.weight_function()
    children = graph.children_expander()
    parents = graph.parents_expander()

    uni = measure_search(
        "Dijkstra",
        lambda: dijkstra_shortest_path(source, target, children, weights),
        weights, trace_memory)
    bi = measure_search(
        "Bidirectional Dijkstra",
        lambda: bidirectional_shortest_path(source, target, children, parents, weights),
        weights, trace_memory)
    return [uni, bi]


def run_benchmark(seed: int,
                  nodes: int = NODES,
                  arcs: int = ARCS,
                  trials: int = TRIALS,
                  max_weight: float = MAX_WEIGHT,
                  trace_memory: bool = False) -> Dict[str, Any]:
    rng = np.random.default_rng(seed)

    t0 = time.perf_counter()
    graph = random_graph(nodes, arcs, rng, max_weight=max_weight)
    build_s = time.perf_counter() - t0
    logger.info(f"Built the graph ({nodes} nodes, {arcs} arcs) in {build_s * 1000:.0f} ms")

    rows = []
    disagreements = 0
    for trial in range(1, trials + 1):
        source = random_node(graph, rng)
        target = random_node(graph, rng)
        logger.info(f"Trial {trial}: source={source} target={target}")

        uni, bi = run_trial(graph, source, target, trace_memory)
        for r in (uni, bi):
            status = f"cost={r.cost:.3f} hops={r.path_length - 1}" if r.success else "unreachable"
            logger.info(f"  {r.algo}: {status} in {r.time_s * 1000:.1f} ms")

        if not costs_agree(uni, bi):
            disagreements += 1
            logger.error(f"  Trial {trial}: searches disagree (Dijkstra {uni.cost}, bidirectional {bi.cost})")
        elif uni.path == bi.path:
            logger.info("  Paths agree")
        else:
            logger.info("  Costs agree, paths differ (equal-cost alternatives)")

        rows.extend(_row(trial, r) for r in (uni, bi))

    return {
        "seed": seed,
        "nodes": nodes,
        "arcs": arcs,
        "build_time_s": build_s,
        "disagreements": disagreements,
        "results": rows,
        "ts": time.time(),
    }


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Compare Dijkstra and bidirectional Dijkstra on a random graph.")
    ap.add_argument("--seed", default=None, help="random seed (default: current time)")
    ap.add_argument("--nodes", type=int, default=NODES, help="number of nodes")
    ap.add_argument("--arcs", type=int, default=ARCS, help="number of distinct arcs")
    ap.add_argument("--trials", type=int, default=TRIALS, help="number of source/target pairs")
    ap.add_argument("--trace-memory", action="store_true", help="record peak memory with tracemalloc (slow)")
    ap.add_argument("--log-level", default="INFO", help="DEBUG, INFO, WARNING or ERROR")
    ap.add_argument("--plain-logs", action="store_true", help="plain log lines instead of Rich output")
    ap.add_argument("--out", default=str(DEFAULT_OUT), help="where to write results.json")
    args = ap.parse_args(argv)

    setup_logging(level=args.log_level, use_rich=not args.plain_logs)

    seed = parse_seed(args.seed)
    logger.info(f"Seed = {seed}")

    out = run_benchmark(seed, nodes=args.nodes, arcs=args.arcs, trials=args.trials,
                        trace_memory=args.trace_memory)

    out_path = Path(args.out)
    out_path.write_text(json.dumps(out, indent=2))
    logger.info(f"Wrote {out_path}")

    return 1 if out["disagreements"] else 0


if __name__ == "__main__":
    raise SystemExit(main())
