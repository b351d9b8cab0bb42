from __future__ import annotations
from typing import Iterable

from ..core.expanders import NodeExpander
from ..core.weights import Node


def check_expanders_inverse(nodes: Iterable[Node], forward: NodeExpander, backward: NodeExpander) -> str:
    """Checks that forward and backward expanders describe the same arcs over `nodes`.

    Bidirectional search silently returns wrong paths when they don't, so run
    this on a new graph adapter before trusting its results.
    """
    seen = 0
    arcs = 0
    for u in nodes:
        seen += 1
        for v in forward.expand(u):
            arcs += 1
            if u not in set(backward.expand(v)):
                raise AssertionError(f"arc {u!r} -> {v!r} is missing from backward.expand({v!r})")
        for p in backward.expand(u):
            if u not in set(forward.expand(p)):
                raise AssertionError(f"arc {p!r} -> {u!r} is missing from forward.expand({p!r})")
    return f"OK: checked {seen} nodes and {arcs} arcs; expanders are inverse."
