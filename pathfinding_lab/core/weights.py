# Defines the weight algebra every search needs (arc weights, zero, infinity, sums) and the comparator type.
# pathfinding_lab/core/weights.py
from __future__ import annotations
import math
import operator
from typing import Any, Callable, Hashable, Protocol

Node = Hashable
Weight = Any

# Three-way comparison: negative if a < b, zero if equal, positive if a > b.
Comparator = Callable[[Weight, Weight], int]


def natural_order(a: Weight, b: Weight) -> int:
    """Comparator for values that already support < and >."""
    return (a > b) - (a < b)


class WeightFunction(Protocol):
    """Weight algebra consumed by the searches.

    sum() must be associative and monotonic, and infinity() must compare
    greater than or equal to every finite sum, otherwise the stopping
    criteria of the searches are not valid.
    """
    def weight(self, tail: Node, head: Node) -> Weight: ...
    def zero(self) -> Weight: ...
    def infinity(self) -> Weight: ...
    def sum(self, a: Weight, b: Weight) -> Weight: ...

    def sum3(self, a: Weight, b: Weight, c: Weight) -> Weight:
        return self.sum(a, self.sum(b, c))


class AdditiveWeights(WeightFunction):
    """
    Numeric weight algebra over a caller-supplied arc weight function.

    - weight(tail, head): delegated to `arc_weight`
    - zero(): 0
    - infinity(): math.inf (any int or float sum compares below it)
    - sum(a, b): a + b
    """
    def __init__(self,
                 arc_weight: Callable[[Node, Node], Weight],
                 zero: Weight = 0,
                 infinity: Weight = math.inf,
                 add: Callable[[Weight, Weight], Weight] = operator.add):
        self._arc_weight = arc_weight
        self._zero = zero
        self._infinity = infinity
        self._add = add

    def weight(self, tail: Node, head: Node) -> Weight:
        return self._arc_weight(tail, head)

    def zero(self) -> Weight:
        return self._zero

    def infinity(self) -> Weight:
        return self._infinity

    def sum(self, a: Weight, b: Weight) -> Weight:
        return self._add(a, b)
