# Path reconstruction from parent maps, and path cost recomputation for reporting.
# pathfinding_lab/core/utils.py
from __future__ import annotations
from typing import Dict, List, Sequence

from .weights import Node, Weight, WeightFunction


class _NoParent:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_PARENT"


# Parent of a search origin. Never equal to a caller node, None included.
NO_PARENT = _NoParent()


def reconstruct_path(parents: Dict[Node, Node], end: Node) -> List[Node]:
    """Follows parent links from `end` back to the origin, returned origin first."""
    path = []
    cur = end
    while cur is not NO_PARENT:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    return path


def reconstruct_bidirectional_path(parents_f: Dict[Node, Node],
                                   parents_b: Dict[Node, Node],
                                   touch_f: Node,
                                   touch_b: Node) -> List[Node]:
    # source .. touch_f from the forward tree, then touch_b .. target from the backward tree
    path = reconstruct_path(parents_f, touch_f)
    cur = touch_b
    while cur is not NO_PARENT:
        path.append(cur)
        cur = parents_b[cur]
    return path


def path_cost(path: Sequence[Node], weights: WeightFunction) -> Weight:
    cost = weights.zero()
    for tail, head in zip(path, path[1:]):
        cost = weights.sum(cost, weights.weight(tail, head))
    return cost
