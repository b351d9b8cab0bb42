# This code implements bidirectional Dijkstra: one search grows from the source along forward arcs,
# the other from the target along reversed arcs, and the two advance in lockstep (one settled node each per round).
# pathfinding_lab/algorithms/bidirectional.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Set, Tuple

from ..core.exceptions import TargetUnreachableError
from ..core.expanders import NodeExpander
from ..core.frontiers import PriorityQueue
from ..core.utils import NO_PARENT, reconstruct_bidirectional_path
from ..core.weights import Comparator, Node, Weight, WeightFunction, natural_order

logger = logging.getLogger(__name__)


class _SearchSide:
    """Frontier, distances, parents and settled set of one search direction."""
    def __init__(self, origin: Node, weights: WeightFunction, compare: Comparator):
        self.weights = weights
        self.compare = compare
        self.frontier = PriorityQueue(compare)
        self.distances: Dict[Node, Weight] = {origin: weights.zero()}
        self.parents: Dict[Node, Node] = {origin: NO_PARENT}
        self.settled: Set[Node] = set()
        self.frontier.push(origin, weights.zero())

    def has_unsettled(self) -> bool:
        # Superseded entries are only discarded once they reach the top of the heap.
        while self.frontier and self.frontier.peek().node in self.settled:
            self.frontier.pop()
        return bool(self.frontier)

    def settle_next(self) -> Node:
        node = self.frontier.pop().node
        self.settled.add(node)
        return node

    def relax(self, node: Node, neighbour: Node, arc_weight: Weight) -> None:
        tentative = self.weights.sum(self.distances[node], arc_weight)
        if neighbour not in self.distances or self.compare(self.distances[neighbour], tentative) > 0:
            self.distances[neighbour] = tentative
            self.parents[neighbour] = node
            self.frontier.push(neighbour, tentative)


def bidirectional_shortest_path(
    source: Node,
    target: Node,
    forward: NodeExpander,
    backward: NodeExpander,
    weights: WeightFunction,
    compare: Comparator = natural_order,
) -> List[Node]:
    """
    Shortest source -> target path as a list of nodes, both ends included.

    `forward` expands a node to the heads of its outgoing arcs and `backward`
    to the tails of its incoming arcs; the two must describe the same graph.
    Stops once the distances of the two nodes settled in a round add up to
    more than mu, the cheapest source -> target connection seen so far.
    Raises TargetUnreachableError when no connection exists.
    """
    if source == target:
        return [source]

    fwd = _SearchSide(source, weights, compare)
    bwd = _SearchSide(target, weights, compare)

    mu = weights.infinity()
    touch: Optional[Tuple[Node, Node]] = None
    rounds = 0

    while fwd.has_unsettled() and bwd.has_unsettled():
        rounds += 1
        cur_f = fwd.settle_next()
        cur_b = bwd.settle_next()

        for child in forward.expand(cur_f):
            if child in fwd.settled:
                continue
            w = weights.weight(cur_f, child)
            fwd.relax(cur_f, child, w)
            # Meet check
            if child in bwd.settled:
                total = weights.sum3(fwd.distances[cur_f], w, bwd.distances[child])
                if compare(mu, total) > 0:
                    mu = total
                    touch = (cur_f, child)

        for parent in backward.expand(cur_b):
            if parent in bwd.settled:
                continue
            w = weights.weight(parent, cur_b)
            bwd.relax(cur_b, parent, w)
            # Meet check
            if parent in fwd.settled:
                total = weights.sum3(fwd.distances[parent], w, bwd.distances[cur_b])
                if compare(mu, total) > 0:
                    mu = total
                    touch = (parent, cur_b)

        if touch is not None and compare(weights.sum(fwd.distances[cur_f], bwd.distances[cur_b]), mu) > 0:
            logger.debug(f"Bidirectional Dijkstra: stopped after {rounds} rounds, mu={mu!r}")
            return reconstruct_bidirectional_path(fwd.parents, bwd.parents, *touch)

    # One side settled everything it can reach, so every connection has been seen.
    if touch is not None:
        logger.debug(f"Bidirectional Dijkstra: frontier exhausted after {rounds} rounds, mu={mu!r}")
        return reconstruct_bidirectional_path(fwd.parents, bwd.parents, *touch)

    logger.debug(f"Bidirectional Dijkstra: no connection after {rounds} rounds")
    raise TargetUnreachableError(source, target)
