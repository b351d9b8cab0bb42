# This code implements (unidirectional) Dijkstra's algorithm over an abstract graph given by an expander.
# It is the reference the bidirectional search is checked against.
# pathfinding_lab/algorithms/dijkstra.py
from __future__ import annotations
import logging
from typing import Dict, List, Set

from ..core.exceptions import TargetUnreachableError
from ..core.expanders import NodeExpander
from ..core.frontiers import PriorityQueue
from ..core.utils import NO_PARENT, reconstruct_path
from ..core.weights import Comparator, Node, Weight, WeightFunction, natural_order

logger = logging.getLogger(__name__)


def dijkstra_shortest_path(
    source: Node,
    target: Node,
    expander: NodeExpander,
    weights: WeightFunction,
    compare: Comparator = natural_order,
) -> List[Node]:
    """
    Shortest source -> target path as a list of nodes, both ends included.

    Raises TargetUnreachableError if the frontier runs out before `target`
    is popped.
    """
    frontier = PriorityQueue(compare)
    distances: Dict[Node, Weight] = {source: weights.zero()}
    parents: Dict[Node, Node] = {source: NO_PARENT}
    closed: Set[Node] = set()

    frontier.push(source, weights.zero())

    while frontier:
        node = frontier.pop().node
        if node in closed:
            continue  # stale entry
        if node == target:
            logger.debug(f"Dijkstra: reached target after settling {len(closed)} nodes")
            return reconstruct_path(parents, target)

        closed.add(node)
        for child in expander.expand(node):
            if child in closed:
                continue
            tentative = weights.sum(distances[node], weights.weight(node, child))
            if child not in distances or compare(distances[child], tentative) > 0:
                distances[child] = tentative
                parents[child] = node
                frontier.push(child, tentative)

    logger.debug(f"Dijkstra: frontier exhausted after settling {len(closed)} nodes")
    raise TargetUnreachableError(source, target)
