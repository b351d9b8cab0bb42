# pathfinding_lab/core/frontiers.py
from __future__ import annotations
import heapq
from functools import cmp_to_key
from typing import List, NamedTuple, Tuple, Any

from .weights import Comparator, Node, Weight, natural_order


class FrontierEntry(NamedTuple):
    node: Node
    distance: Weight  # snapshot taken at push time, not a live reference


class PriorityQueue:
    """
    Min-heap of frontier entries ordered by distance under `compare`.

    There is no decrease-key: improving a node's distance pushes a second
    entry and the superseded one stays in the heap. Consumers drop stale
    entries themselves (see the settled sets in the searches).
    """
    def __init__(self, compare: Comparator = natural_order):
        self.key = cmp_to_key(compare)
        self.h: List[Tuple[Any, int, FrontierEntry]] = []
        self.counter = 0  # tie-breaker for stability

    def push(self, node: Node, distance: Weight) -> None:
        self.counter += 1
        heapq.heappush(self.h, (self.key(distance), self.counter, FrontierEntry(node, distance)))

    def pop(self) -> FrontierEntry:
        return heapq.heappop(self.h)[2]

    def peek(self) -> FrontierEntry:
        return self.h[0][2]

    def __len__(self) -> int: return len(self.h)
