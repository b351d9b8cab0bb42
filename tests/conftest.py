"""
Pytest configuration and shared fixtures.
"""

import logging

import numpy as np
import pytest

from pathfinding_lab.algorithms.bidirectional import bidirectional_shortest_path
from pathfinding_lab.algorithms.dijkstra import dijkstra_shortest_path
from pathfinding_lab.problems.digraph import DirectedGraph
from pathfinding_lab.problems.romania import romania_graph

logging.basicConfig(level=logging.INFO)


def run_dijkstra(graph: DirectedGraph, source, target):
    return dijkstra_shortest_path(source, target,
                                  graph.children_expander(),
                                  graph.weight_function())


def run_bidirectional(graph: DirectedGraph, source, target):
    return bidirectional_shortest_path(source, target,
                                       graph.children_expander(),
                                       graph.parents_expander(),
                                       graph.weight_function())


@pytest.fixture(params=[run_dijkstra, run_bidirectional], ids=["dijkstra", "bidirectional"])
def search(request):
    """Runs one of the two searches on a DirectedGraph: search(graph, source, target)."""
    return request.param


@pytest.fixture
def two_node_graph() -> DirectedGraph:
    return DirectedGraph.from_arcs([("s", "t", 2)])


@pytest.fixture
def five_node_graph() -> DirectedGraph:
    """s-a-t costs 10 in two hops, s-b-c-t costs 9 in three."""
    return DirectedGraph.from_arcs([
        ("s", "a", 6),
        ("a", "t", 4),
        ("s", "b", 3),
        ("b", "c", 3),
        ("c", "t", 3),
    ])


@pytest.fixture
def disconnected_graph() -> DirectedGraph:
    """Two components: {0, 1, 2} and {3, 4}."""
    return DirectedGraph.from_arcs([
        (0, 1, 1), (1, 2, 1), (2, 0, 1),
        (3, 4, 1), (4, 3, 1),
    ])


@pytest.fixture
def romania() -> DirectedGraph:
    return romania_graph()


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(13)
