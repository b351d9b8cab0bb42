import numpy as np
import pytest

from pathfinding_lab.core.expanders import FunctionExpander
from pathfinding_lab.problems.checks import check_expanders_inverse
from pathfinding_lab.problems.digraph import DirectedGraph
from pathfinding_lab.problems.random_graph import random_graph, random_node


class TestDirectedGraph:

    def test_views_are_inverse(self, five_node_graph):
        g = five_node_graph
        assert sorted(g.children("s")) == ["a", "b"]
        assert sorted(g.parents("t")) == ["a", "c"]
        assert g.parents("s") == []
        assert g.children("t") == []

    def test_add_arc_replaces_weight(self):
        g = DirectedGraph()
        g.add_arc(1, 2, 5)
        g.add_arc(1, 2, 3)
        assert g.weight(1, 2) == 3
        assert g.arc_count == 1
        assert g.parents(2) == [1]

    def test_missing_arc(self, two_node_graph):
        assert not two_node_graph.has_arc("t", "s")
        with pytest.raises(KeyError, match="No arc"):
            two_node_graph.weight("t", "s")

    def test_nodes_and_membership(self, disconnected_graph):
        g = disconnected_graph
        assert len(g) == 5
        assert 3 in g
        assert 99 not in g
        assert g.children(99) == []
        assert sorted(g.arcs()) == [(0, 1, 1), (1, 2, 1), (2, 0, 1), (3, 4, 1), (4, 3, 1)]

    def test_isolated_node(self):
        g = DirectedGraph()
        g.add_node("x")
        assert g.nodes == ["x"]
        assert g.arc_count == 0

    def test_adapters(self, two_node_graph):
        g = two_node_graph
        assert g.children_expander().expand("s") == ["t"]
        assert g.parents_expander().expand("t") == ["s"]
        w = g.weight_function()
        assert w.weight("s", "t") == 2
        assert w.zero() == 0

    def test_romania_is_symmetric(self, romania):
        assert len(romania) == 20
        for tail, head, km in romania.arcs():
            assert romania.weight(head, tail) == km


class TestChecks:

    def test_graph_expanders_pass(self, romania):
        msg = check_expanders_inverse(romania.nodes, romania.children_expander(), romania.parents_expander())
        assert msg.startswith("OK")

    def test_missing_backward_arc_is_reported(self, two_node_graph):
        g = two_node_graph
        no_parents = FunctionExpander(lambda n: [])
        with pytest.raises(AssertionError, match="missing from backward"):
            check_expanders_inverse(g.nodes, g.children_expander(), no_parents)

    def test_extra_backward_arc_is_reported(self, two_node_graph):
        g = two_node_graph
        wrong = FunctionExpander(lambda n: ["t"] if n == "s" else ["s"])
        with pytest.raises(AssertionError):
            check_expanders_inverse(g.nodes, g.children_expander(), wrong)


class TestRandomGraph:

    def test_exact_arc_count(self, rng):
        g = random_graph(50, 400, rng)
        assert len(g) == 50
        assert g.arc_count == 400

    def test_float_weights_in_range(self, rng):
        g = random_graph(30, 200, rng, max_weight=5.0)
        assert all(0.0 <= w < 5.0 for _, _, w in g.arcs())
        assert all(isinstance(w, float) for _, _, w in g.arcs())

    def test_integer_weights(self, rng):
        g = random_graph(30, 200, rng, max_weight=100, integer_weights=True)
        assert all(isinstance(w, int) and 0 <= w < 100 for _, _, w in g.arcs())

    def test_complete_graph_with_self_loops(self, rng):
        g = random_graph(4, 16, rng)
        assert g.arc_count == 16
        assert all(g.has_arc(u, v) for u in range(4) for v in range(4))

    def test_same_seed_same_graph(self):
        g1 = random_graph(100, 500, np.random.default_rng(5))
        g2 = random_graph(100, 500, np.random.default_rng(5))
        assert list(g1.arcs()) == list(g2.arcs())

    @pytest.mark.parametrize("nodes,arcs", [(0, 0), (-1, 0), (3, 10), (3, -1)])
    def test_invalid_sizes(self, rng, nodes, arcs):
        with pytest.raises(ValueError):
            random_graph(nodes, arcs, rng)

    def test_random_node(self, rng):
        g = random_graph(10, 20, rng)
        picks = {random_node(g, rng) for _ in range(200)}
        assert picks <= set(range(10))
        assert len(picks) > 5
