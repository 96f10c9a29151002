"""
Heuristics module.

Provides functions for guiding and costing path searches:
- zero: Always 0 (turns A* into Dijkstra)
- EuclideanDistance: Straight-line distance between node coordinates
- ManhattanDistance: Grid (L1) distance between node coordinates
- payload_cost: Uses the numeric edge payload as the cost
"""

from pathgraph.heuristics.distance import (
    EuclideanDistance,
    ManhattanDistance,
    payload_cost,
    zero,
)

__all__ = [
    "zero",
    "EuclideanDistance",
    "ManhattanDistance",
    "payload_cost",
]
