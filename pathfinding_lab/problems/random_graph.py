# pathfinding_lab/problems/random_graph.py
from __future__ import annotations
from typing import Dict, Tuple

import numpy as np

from .digraph import DirectedGraph, Node


def random_graph(nodes: int,
                 arcs: int,
                 rng: np.random.Generator,
                 max_weight: float = 100.0,
                 integer_weights: bool = False) -> DirectedGraph:
    """
    Directed graph on nodes 0..nodes-1 with exactly `arcs` distinct arcs.

    Tails and heads are drawn uniformly (self loops included), then every arc
    gets a weight uniform in [0, max_weight), truncated to int when
    `integer_weights` is set.
    """
    if nodes <= 0:
        raise ValueError(f"nodes must be positive, got {nodes}")
    if arcs < 0 or arcs > nodes * nodes:
        raise ValueError(f"cannot place {arcs} distinct arcs on {nodes} nodes")

    g = DirectedGraph()
    for i in range(nodes):
        g.add_node(i)

    pairs: Dict[Tuple[int, int], None] = {}
    while len(pairs) < arcs:
        missing = arcs - len(pairs)
        tails = rng.integers(0, nodes, size=missing)
        heads = rng.integers(0, nodes, size=missing)
        for t, h in zip(tails.tolist(), heads.tolist()):
            pairs[(t, h)] = None
            if len(pairs) == arcs:
                break

    if integer_weights:
        weights = rng.integers(0, int(max_weight), size=arcs).tolist()
    else:
        weights = (max_weight * rng.random(size=arcs)).tolist()

    for (tail, head), w in zip(pairs, weights):
        g.add_arc(tail, head, w)
    return g


def random_node(graph: DirectedGraph, rng: np.random.Generator) -> Node:
    nodes = graph.nodes
    return nodes[int(rng.integers(0, len(nodes)))]
