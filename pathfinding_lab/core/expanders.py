# pathfinding_lab/core/expanders.py
from __future__ import annotations
from typing import Callable, Iterable, Protocol

from .weights import Node


class NodeExpander(Protocol):
    """Produces the one-arc neighbors of a node in one direction.

    A forward expander yields heads of outgoing arcs, a backward expander
    yields tails of incoming arcs. For bidirectional search the two must be
    exact inverses: B in forward.expand(A) iff A in backward.expand(B).
    """
    def expand(self, node: Node) -> Iterable[Node]: ...


class FunctionExpander(NodeExpander):
    """Wraps a plain callable so it can be passed where a NodeExpander is expected."""
    def __init__(self, fn: Callable[[Node], Iterable[Node]]):
        self.fn = fn

    def expand(self, node: Node) -> Iterable[Node]:
        return self.fn(node)
