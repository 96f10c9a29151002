"""
A* shortest-path search over a Graph, with Dijkstra as the
zero-heuristic special case.

f(n) = g(n) + h(n, goal)

The frontier is a binary heap keyed by (f, node key). Node keys follow
insertion order, so among equal f scores the earliest-inserted node is
expanded first, which keeps results reproducible.
"""

from __future__ import annotations

import heapq
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from pathgraph.heuristics import payload_cost, zero

if TYPE_CHECKING:
    from pathgraph.graph.store import Graph

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    """
    A path found by the search engine.

    Attributes:
        path: Interleaved nodes and edge payloads [n0, e01, n1, ..., nk]
        cost: Summed traversal cost from start to goal
        expanded: Number of nodes fully expanded during the search
    """

    path: list[Any] = field(default_factory=list)
    cost: float = 0.0
    expanded: int = 0

    @property
    def nodes(self) -> list[Any]:
        """Nodes along the path (even positions of path)."""
        return self.path[0::2]

    @property
    def edges(self) -> list[Any]:
        """Edge payloads along the path (odd positions of path)."""
        return self.path[1::2]

    def __len__(self) -> int:
        """Number of hops (edges) in the path."""
        return len(self.path) // 2


def astar(
    graph: Graph,
    start: Any,
    goal: Any,
    heuristic: Callable[[Any, Any], float],
    cost_fn: Callable[[Any, Any], float] | None = None,
) -> SearchResult | None:
    """
    Find the cheapest path from start to goal with A*.

    The heuristic is not checked for admissibility; an overestimating
    heuristic still returns a path, just not necessarily the cheapest.

    Args:
        graph: Graph to search (read only)
        start: Start node
        goal: Goal node
        heuristic: h(node, goal) estimated remaining cost
        cost_fn: cost(a, b) for adjacent nodes; defaults to the numeric
            edge payload

    Returns:
        SearchResult, or None if either node is missing or no path exists

    Raises:
        TypeError: If cost_fn is omitted and a traversed payload is not a number
    """
    start_key = graph._key_of(start)
    goal_key = graph._key_of(goal)
    if start_key is None or goal_key is None:
        logger.debug(f"Search aborted: {start!r} or {goal!r} not in graph")
        return None

    cost = cost_fn if cost_fn is not None else payload_cost(graph)

    g_score: dict[int, float] = {start_key: 0}
    f_score: dict[int, float] = {start_key: heuristic(start, goal)}
    came_from: dict[int, int] = {}
    closed: set[int] = set()
    frontier = [(f_score[start_key], start_key)]

    while frontier:
        f, current = heapq.heappop(frontier)

        # Skip entries superseded by a cheaper push of the same node
        if current in closed or f > f_score[current]:
            continue

        if current == goal_key:
            result = _build_result(graph, came_from, goal_key)
            result.cost = g_score[goal_key]
            result.expanded = len(closed)
            logger.debug(
                f"Search {start!r} -> {goal!r}: {len(result)} hops, "
                f"cost {result.cost}, {result.expanded} expanded"
            )
            return result

        closed.add(current)
        current_node = graph._node_at(current)

        for neighbor in graph._neighbor_keys(current):
            if neighbor in closed:
                continue

            neighbor_node = graph._node_at(neighbor)
            tentative = g_score[current] + cost(current_node, neighbor_node)

            if neighbor not in g_score or tentative < g_score[neighbor]:
                came_from[neighbor] = current
                g_score[neighbor] = tentative
                f_score[neighbor] = tentative + heuristic(neighbor_node, goal)
                heapq.heappush(frontier, (f_score[neighbor], neighbor))

    logger.debug(f"Search {start!r} -> {goal!r}: no path ({len(closed)} expanded)")
    return None


def dijkstra(
    graph: Graph,
    start: Any,
    goal: Any,
    cost_fn: Callable[[Any, Any], float] | None = None,
) -> SearchResult | None:
    """Find the cheapest path with Dijkstra's algorithm (A* with h = 0)."""
    return astar(graph, start, goal, zero, cost_fn)


def _build_result(graph: Graph, came_from: dict[int, int], goal_key: int) -> SearchResult:
    """Walk predecessor links back from the goal and interleave edge payloads."""
    keys = [goal_key]
    while keys[-1] in came_from:
        keys.append(came_from[keys[-1]])
    keys.reverse()

    nodes = [graph._node_at(k) for k in keys]
    path = [nodes[0]]
    for prev, nxt in zip(nodes, nodes[1:]):
        path.append(graph.get_edge(prev, nxt))
        path.append(nxt)

    return SearchResult(path=path)
