"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathgraph import Graph


@pytest.fixture
def line_graph() -> Graph:
    """Undirected A - B - C with unit-cost edge payloads."""
    graph = Graph(directed=False)
    graph.add_nodes("A", "B", "C")
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    return graph


@pytest.fixture
def directed_graph() -> Graph:
    """Directed A -> B -> C plus a shortcut A -> C."""
    graph = Graph(directed=True)
    graph.add_nodes("A", "B", "C")
    graph.add_edge("A", "B", 1)
    graph.add_edge("B", "C", 1)
    graph.add_edge("A", "C", 5)
    return graph


@pytest.fixture
def grid_points() -> dict[str, tuple[float, float]]:
    """Coordinates of a 3x3 grid, nodes named by (column, row)."""
    return {f"{x}{y}": (float(x), float(y)) for x in range(3) for y in range(3)}


@pytest.fixture
def grid_graph(grid_points) -> Graph:
    """Undirected 4-connected 3x3 grid with unit edge payloads."""
    graph = Graph(directed=False)
    graph.add_node_list(grid_points)
    for name, (x, y) in grid_points.items():
        right = f"{int(x) + 1}{int(y)}"
        up = f"{int(x)}{int(y) + 1}"
        if right in grid_points:
            graph.add_edge(name, right, 1)
        if up in grid_points:
            graph.add_edge(name, up, 1)
    return graph
