"""
pathgraph - generic graph container with A* shortest-path search.

A small in-memory graph store supporting directed and undirected
topologies, plus an informed shortest-path search (A*, with Dijkstra
as the zero-heuristic special case).
"""

from pathgraph.graph import Graph, SearchResult, astar, dijkstra

__version__ = "0.1.0"

__all__ = [
    "Graph",
    "SearchResult",
    "astar",
    "dijkstra",
]
