"""
Unit tests for heuristic and cost functions.
"""

import numpy as np
import pytest

from pathgraph import Graph
from pathgraph.heuristics import EuclideanDistance, ManhattanDistance, payload_cost, zero

POINTS = {
    "origin": (0, 0),
    "east": (3, 0),
    "corner": (3, 4),
    "space": (1, 2, 2),
}


class TestZero:
    def test_always_zero(self):
        """zero ignores its arguments."""
        assert zero("a", "b") == 0
        assert zero(None, object()) == 0


class TestEuclideanDistance:
    """Test straight-line distance."""

    def test_3_4_5(self):
        """Classic right triangle."""
        distance = EuclideanDistance(POINTS.__getitem__)
        assert distance("origin", "corner") == pytest.approx(5.0)

    def test_symmetric(self):
        """Distance is the same both ways."""
        distance = EuclideanDistance(POINTS.__getitem__)
        assert distance("east", "corner") == distance("corner", "east") == pytest.approx(4.0)

    def test_same_node(self):
        """Distance to self is zero."""
        assert EuclideanDistance(POINTS.__getitem__)("corner", "corner") == 0.0

    def test_returns_python_float(self):
        """Result is a plain float, not a numpy scalar."""
        result = EuclideanDistance(POINTS.__getitem__)("origin", "east")
        assert type(result) is float

    def test_three_dimensions(self):
        """Works for any coordinate length."""
        distance = EuclideanDistance(lambda node: POINTS[node] if node != "origin" else (0, 0, 0))
        assert distance("origin", "space") == pytest.approx(3.0)

    def test_numpy_positions(self):
        """Accepts numpy arrays as coordinates."""
        coords = np.array([[0.0, 0.0], [6.0, 8.0]])
        assert EuclideanDistance(lambda i: coords[i])(0, 1) == pytest.approx(10.0)


class TestManhattanDistance:
    """Test grid distance."""

    def test_grid_distance(self):
        """Sum of absolute coordinate differences."""
        distance = ManhattanDistance(POINTS.__getitem__)
        assert distance("origin", "corner") == pytest.approx(7.0)
        assert distance("corner", "origin") == pytest.approx(7.0)

    def test_never_below_euclidean(self):
        """L1 distance is at least L2 distance."""
        for a in ("origin", "east", "corner"):
            for b in ("origin", "east", "corner"):
                l1 = ManhattanDistance(POINTS.__getitem__)(a, b)
                l2 = EuclideanDistance(POINTS.__getitem__)(a, b)
                assert l1 >= l2 - 1e-9


class TestPayloadCost:
    """Test the payload-as-cost default."""

    def test_numeric_payload(self):
        """Numbers (including numpy scalars) are returned as-is."""
        graph = Graph()
        graph.add_nodes("a", "b", "c")
        graph.add_edge("a", "b", 2.5)
        graph.add_edge("b", "c", np.float64(1.5))
        cost = payload_cost(graph)
        assert cost("a", "b") == 2.5
        assert cost("b", "a") == 2.5
        assert cost("c", "b") == 1.5

    def test_non_numeric_payload(self):
        """Non-numeric payloads raise TypeError naming the edge."""
        graph = Graph()
        graph.add_nodes("a", "b")
        graph.add_edge("a", "b", "heavy")
        with pytest.raises(TypeError, match="non-numeric"):
            payload_cost(graph)("a", "b")

    def test_missing_edge(self):
        """A missing edge has no numeric payload either."""
        graph = Graph()
        graph.add_nodes("a", "b")
        with pytest.raises(TypeError):
            payload_cost(graph)("a", "b")
