"""
Graph store: an ordered set of nodes plus a sparse adjacency relation
carrying edge payloads.

Usage:
    from pathgraph.graph import Graph

    graph = Graph(directed=False)
    graph.add_nodes("a", "b", "c")
    graph.add_edge("a", "b", 1.0)
    graph.add_edge("b", "c", 2.5)

    graph.get_edge("b", "a")        # 1.0 (undirected lookup)
    graph.get_neighbors("b")        # ["a", "c"]
    graph.search_dijkstra("a", "c") # SearchResult(path=["a", 1.0, "b", 2.5, "c"], ...)
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pathgraph.config import DEFAULT_DIRECTED

if TYPE_CHECKING:
    from pathgraph.graph.search import SearchResult

logger = logging.getLogger(__name__)

N = TypeVar("N")
E = TypeVar("E")


class Graph(Generic[N, E]):
    """
    In-memory graph over caller-supplied node handles.

    Nodes are opaque hashable handles; the graph never inspects them.
    Each node is assigned an internal integer key when inserted. Keys
    grow monotonically and are never reused, so ascending key order is
    always the node insertion order, and adjacency keyed by them stays
    valid when other nodes are removed.

    For undirected graphs an edge is stored once, in the row of the node
    that was passed first to add_edge, and looked up in both directions.

    Attributes:
        nodes: Copy of the node sequence, in insertion order
        directed: Whether edges are one-way (fixed at construction)
    """

    def __init__(self, directed: bool = DEFAULT_DIRECTED) -> None:
        """
        Create an empty graph.

        Args:
            directed: If True, an edge a->b does not imply b->a
        """
        self._directed = bool(directed)
        self._next_key = 0

        # node -> key, and key -> node (both in insertion order)
        self._keys: dict[N, int] = {}
        self._by_key: dict[int, N] = {}

        # key -> {target key: payload}, and key -> set of source keys
        self._out: dict[int, dict[int, E]] = {}
        self._in: dict[int, set[int]] = {}

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def nodes(self) -> list[N]:
        return list(self._by_key.values())

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def node_count(self) -> int:
        return len(self._by_key)

    @property
    def edge_count(self) -> int:
        """Number of stored edges (an undirected edge counts once)."""
        return sum(len(row) for row in self._out.values())

    # =========================================================================
    # Node Operations
    # =========================================================================

    def contains_node(self, node: N) -> bool:
        return node in self._keys

    def add_node(self, node: N) -> bool:
        """
        Append a node to the graph.

        Returns:
            True if added, False if the node is already present

        Raises:
            ValueError: If node is None
        """
        if node is None:
            raise ValueError("Graph.add_node: None is not a valid node")
        if node in self._keys:
            return False

        key = self._next_key
        self._next_key += 1

        self._keys[node] = key
        self._by_key[key] = node
        self._out[key] = {}
        self._in[key] = set()
        return True

    def add_node_list(self, nodes: Iterable[N]) -> list[bool]:
        """Add every node from an iterable, returning add_node's result for each."""
        return [self.add_node(node) for node in nodes]

    def add_nodes(self, *nodes: N) -> list[bool]:
        return self.add_node_list(nodes)

    def remove_node(self, node: N) -> bool:
        """
        Remove a node and every edge incident to it.

        Returns:
            True if removed, False if the node was not in the graph
        """
        key = self._keys.pop(node, None)
        if key is None:
            return False

        del self._by_key[key]

        # Drop outgoing edges, then every row that points at this node
        for target in self._out.pop(key):
            self._in[target].discard(key)
        incoming = self._in.pop(key)
        for source in incoming:
            del self._out[source][key]

        logger.debug(f"Removed node {node!r} (key {key}, {len(incoming)} incoming edges)")
        return True

    # =========================================================================
    # Edge Operations
    # =========================================================================

    def add_edge(self, a: N, b: N, payload: E | None = None) -> bool:
        """
        Join two nodes with an edge carrying payload.

        Args:
            a: Source node (the row the edge is stored in)
            b: Target node
            payload: Data attached to the edge (default: a new empty dict)

        Returns:
            False if either node is missing, a == b, or the nodes are
            already joined; True otherwise
        """
        key_a = self._keys.get(a)
        key_b = self._keys.get(b)
        if key_a is None or key_b is None or key_a == key_b:
            return False
        if self._find_edge(key_a, key_b) is not None:
            return False

        self._out[key_a][key_b] = {} if payload is None else payload
        self._in[key_b].add(key_a)
        return True

    def get_edge(self, a: N, b: N) -> E | None:
        """
        Get the payload of the edge between two nodes.

        Directed graphs only look at a->b. Undirected graphs try a->b,
        then b->a. Returns None if there is no such edge or either node
        is missing.
        """
        key_a = self._keys.get(a)
        key_b = self._keys.get(b)
        if key_a is None or key_b is None:
            return None
        return self._find_edge(key_a, key_b)

    def contains_edge(self, a: N, b: N) -> bool:
        return self.get_edge(a, b) is not None

    def remove_edge(self, a: N, b: N) -> bool:
        """Remove the edge between a and b, using get_edge's lookup order."""
        key_a = self._keys.get(a)
        key_b = self._keys.get(b)
        if key_a is None or key_b is None:
            return False

        if key_b in self._out[key_a]:
            del self._out[key_a][key_b]
            self._in[key_b].discard(key_a)
            return True
        if not self._directed and key_a in self._out[key_b]:
            del self._out[key_b][key_a]
            self._in[key_a].discard(key_b)
            return True
        return False

    def get_neighbors(self, node: N) -> list[N] | None:
        """
        Get nodes one edge away, in insertion order.

        For undirected graphs an edge stored in either row counts.
        Returns None if the node is not in the graph.
        """
        key = self._keys.get(node)
        if key is None:
            return None
        return [self._by_key[k] for k in self._neighbor_keys(key)]

    def get_edges(self, node: N) -> list[E] | None:
        """Get edge payloads parallel to get_neighbors(node), or None if absent."""
        key = self._keys.get(node)
        if key is None:
            return None
        return [self._find_edge(key, k) for k in self._neighbor_keys(key)]

    # =========================================================================
    # Search
    # =========================================================================

    def search(
        self,
        start: N,
        goal: N,
        heuristic: Callable[[N, N], float],
        cost_fn: Callable[[N, N], float] | None = None,
    ) -> SearchResult | None:
        """A* search from start to goal. See pathgraph.graph.search.astar."""
        from pathgraph.graph.search import astar

        return astar(self, start, goal, heuristic, cost_fn)

    def search_dijkstra(
        self,
        start: N,
        goal: N,
        cost_fn: Callable[[N, N], float] | None = None,
    ) -> SearchResult | None:
        """Dijkstra search (A* with a zero heuristic)."""
        from pathgraph.graph.search import dijkstra

        return dijkstra(self, start, goal, cost_fn)

    # =========================================================================
    # Internal Accessors (used by the search engine)
    # =========================================================================

    def _key_of(self, node: Any) -> int | None:
        return self._keys.get(node)

    def _node_at(self, key: int) -> N:
        return self._by_key[key]

    def _neighbor_keys(self, key: int) -> list[int]:
        """Keys of adjacent nodes, ascending (i.e. insertion order)."""
        keys = set(self._out[key])
        if not self._directed:
            keys.update(self._in[key])
        return sorted(keys)

    def _find_edge(self, key_a: int, key_b: int) -> E | None:
        row = self._out[key_a]
        if key_b in row:
            return row[key_b]
        if not self._directed:
            return self._out[key_b].get(key_a)
        return None

    # =========================================================================
    # Dunder Methods
    # =========================================================================

    def __contains__(self, node: object) -> bool:
        return node in self._keys

    def __iter__(self) -> Iterator[N]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(directed={self._directed!r}, "
            f"nodes={self.node_count}, edges={self.edge_count})"
        )
