"""
Distance functions usable as A* heuristics or as edge cost functions.

The coordinate-based distances take a position accessor, since the graph
never looks inside node handles:

    position = lambda node: coords[node]
    graph.search(a, b, EuclideanDistance(position), EuclideanDistance(position))
"""

from __future__ import annotations

import numbers
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from pathgraph.graph.store import Graph


def zero(a: Any, b: Any) -> float:
    """Heuristic that always returns 0 (A* degrades to Dijkstra)."""
    return 0.0


class _CoordinateDistance:
    """Base for distances computed from node coordinates."""

    def __init__(self, position: Callable[[Any], Sequence[float]]) -> None:
        """
        Args:
            position: Maps a node to its coordinates (any length, same for all nodes)
        """
        self._position = position

    def _delta(self, a: Any, b: Any) -> np.ndarray:
        pos_a = np.asarray(self._position(a), dtype=np.float64)
        pos_b = np.asarray(self._position(b), dtype=np.float64)
        return pos_b - pos_a

    def __call__(self, a: Any, b: Any) -> float:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(position={self._position!r})"


class EuclideanDistance(_CoordinateDistance):
    """
    Straight-line (L2) distance between two nodes.

    Admissible and consistent whenever edge costs are at least the
    straight-line distance between their endpoints.
    """

    def __call__(self, a: Any, b: Any) -> float:
        return float(np.linalg.norm(self._delta(a, b)))


class ManhattanDistance(_CoordinateDistance):
    """Grid (L1) distance; admissible for 4-connected unit grids."""

    def __call__(self, a: Any, b: Any) -> float:
        return float(np.abs(self._delta(a, b)).sum())


def payload_cost(graph: Graph) -> Callable[[Any, Any], float]:
    """
    Build a cost function that reads the edge payload as a number.

    Used by the search engine when no cost function is given.

    Raises:
        TypeError: (from the returned function) if the payload is not a real number
    """

    def cost(a: Any, b: Any) -> float:
        payload = graph.get_edge(a, b)
        if not isinstance(payload, numbers.Real):
            raise TypeError(
                f"Edge {a!r} -> {b!r} has non-numeric payload {payload!r}; "
                "pass a cost function to search()"
            )
        return payload

    return cost
