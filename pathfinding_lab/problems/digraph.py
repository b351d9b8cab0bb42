# A concrete weighted directed graph the searches can run on.
# It owns a forward and a backward adjacency view and hands out expanders and a weight function reading from them.
# pathfinding_lab/problems/digraph.py
from __future__ import annotations
from typing import Dict, Hashable, Iterable, Iterator, List

from ..core.expanders import NodeExpander
from ..core.weights import AdditiveWeights, Weight

Node = Hashable


class DirectedGraph:
    """
    Weighted directed graph keyed by node identity.

    - forward view: tail -> {head: weight}
    - backward view: head -> {tail: weight}
    At most one arc per (tail, head) pair; adding it again replaces the weight.
    """
    def __init__(self) -> None:
        self._out: Dict[Node, Dict[Node, Weight]] = {}
        self._in: Dict[Node, Dict[Node, Weight]] = {}

    def add_node(self, node: Node) -> None:
        self._out.setdefault(node, {})
        self._in.setdefault(node, {})

    def add_arc(self, tail: Node, head: Node, weight: Weight) -> None:
        self.add_node(tail)
        self.add_node(head)
        self._out[tail][head] = weight
        self._in[head][tail] = weight

    def children(self, node: Node) -> List[Node]:
        return list(self._out.get(node, ()))

    def parents(self, node: Node) -> List[Node]:
        return list(self._in.get(node, ()))

    def weight(self, tail: Node, head: Node) -> Weight:
        try:
            return self._out[tail][head]
        except KeyError:
            raise KeyError(f"No arc {tail!r} -> {head!r}") from None

    def has_arc(self, tail: Node, head: Node) -> bool:
        return head in self._out.get(tail, ())

    @property
    def nodes(self) -> List[Node]:
        return list(self._out)

    def arcs(self) -> Iterator[tuple]:
        for tail, heads in self._out.items():
            for head, w in heads.items():
                yield tail, head, w

    @property
    def arc_count(self) -> int:
        return sum(len(heads) for heads in self._out.values())

    def __contains__(self, node: object) -> bool:
        return node in self._out

    def __len__(self) -> int:
        return len(self._out)

    # --- search adapters ------------------------------------------------------

    def children_expander(self) -> NodeExpander:
        return ChildrenExpander(self)

    def parents_expander(self) -> NodeExpander:
        return ParentsExpander(self)

    def weight_function(self, zero: Weight = 0) -> AdditiveWeights:
        return AdditiveWeights(self.weight, zero=zero)

    @classmethod
    def from_arcs(cls, arcs: Iterable[tuple]) -> "DirectedGraph":
        """Build from (tail, head, weight) triples."""
        g = cls()
        for tail, head, w in arcs:
            g.add_arc(tail, head, w)
        return g


class ChildrenExpander(NodeExpander):
    def __init__(self, graph: DirectedGraph):
        self.graph = graph

    def expand(self, node: Node) -> List[Node]:
        return self.graph.children(node)


class ParentsExpander(NodeExpander):
    def __init__(self, graph: DirectedGraph):
        self.graph = graph

    def expand(self, node: Node) -> List[Node]:
        return self.graph.parents(node)
