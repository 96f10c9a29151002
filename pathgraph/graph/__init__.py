"""
Graph module.

Provides the graph store and pathfinding over it:
- Graph: Directed or undirected node/edge container
- astar: Heuristic-guided shortest path
- dijkstra: A* with a zero heuristic
"""

from pathgraph.graph.search import SearchResult, astar, dijkstra
from pathgraph.graph.store import Graph

__all__ = [
    "Graph",
    "SearchResult",
    "astar",
    "dijkstra",
]
