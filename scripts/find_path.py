#!/usr/bin/env python3
"""
Shortest-path demo on a random geometric graph.

Scatters points on a square canvas, joins every pair closer than a radius,
then routes from the point nearest the bottom-left corner to the point
nearest the top-right corner with Dijkstra and with A* (Euclidean
heuristic). Edge cost is the straight-line distance between endpoints.

Usage:
    python scripts/find_path.py
    python scripts/find_path.py --nodes 200 --radius 12 --seed 7
    python scripts/find_path.py --directed -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from dotenv import load_dotenv

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Environment must be loaded before config is imported
load_dotenv(project_root / ".env")

from pathgraph import Graph  # noqa: E402
from pathgraph.config import (  # noqa: E402
    DEMO_CANVAS_SIZE,
    DEMO_CONNECT_RADIUS,
    DEMO_NODE_COUNT,
    DEMO_SEED,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
)
from pathgraph.heuristics import EuclideanDistance  # noqa: E402

logger = logging.getLogger(__name__)


def build_graph(
    points: np.ndarray, radius: float, directed: bool
) -> Graph[int, float]:
    """
    Join every pair of points closer than radius.

    Nodes are point indices; edge payloads are the edge lengths. In a
    directed graph edges only run left-to-right (by x coordinate).
    """
    graph: Graph[int, float] = Graph(directed=directed)
    graph.add_node_list(range(len(points)))

    # Pairwise distance matrix
    deltas = points[:, np.newaxis, :] - points[np.newaxis, :, :]
    distances = np.linalg.norm(deltas, axis=-1)

    for i, j in zip(*np.nonzero(distances < radius)):
        i, j = int(i), int(j)
        if i >= j:
            continue
        if directed and points[i, 0] > points[j, 0]:
            i, j = j, i
        graph.add_edge(i, j, float(distances[i, j]))

    logger.info(f"Built {graph!r}")
    return graph


def nearest(points: np.ndarray, target: tuple[float, float]) -> int:
    """Index of the point closest to target."""
    return int(np.argmin(np.linalg.norm(points - np.asarray(target), axis=1)))


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Route across a random geometric graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--nodes",
        type=int,
        default=DEMO_NODE_COUNT,
        help=f"Number of random points (default: {DEMO_NODE_COUNT})",
    )
    parser.add_argument(
        "--radius",
        type=float,
        default=DEMO_CONNECT_RADIUS,
        help=f"Connect points closer than this (default: {DEMO_CONNECT_RADIUS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=int(DEMO_SEED) if DEMO_SEED else None,
        help="RNG seed for a reproducible graph (default: random)",
    )
    parser.add_argument(
        "--directed",
        action="store_true",
        help="Only allow edges that run left-to-right",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args()


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )

    if args.nodes < 2:
        print("Error: need at least 2 nodes", file=sys.stderr)
        return 1

    rng = np.random.default_rng(args.seed)
    points = rng.uniform(0.0, DEMO_CANVAS_SIZE, size=(args.nodes, 2))

    graph = build_graph(points, args.radius, args.directed)
    start = nearest(points, (0.0, 0.0))
    goal = nearest(points, (DEMO_CANVAS_SIZE, DEMO_CANVAS_SIZE))

    distance = EuclideanDistance(lambda node: points[node])

    print("\n" + "=" * 60)
    print("Shortest Path Demo")
    print("=" * 60)
    print(f"  Graph: {graph.node_count} nodes, {graph.edge_count} edges")
    print(f"  Start: {start} at ({points[start, 0]:.1f}, {points[start, 1]:.1f})")
    print(f"  Goal:  {goal} at ({points[goal, 0]:.1f}, {points[goal, 1]:.1f})")
    print("=" * 60 + "\n")

    results = {
        "Dijkstra": graph.search_dijkstra(start, goal, distance),
        "A*": graph.search(start, goal, distance, distance),
    }

    for name, result in results.items():
        if result is None:
            print(f"{name}: no path found")
            continue
        print(f"{name}: {len(result)} hops, cost {result.cost:.2f}, {result.expanded} nodes expanded")
        print(f"  {' -> '.join(str(n) for n in result.nodes)}")

    return 0 if all(r is not None for r in results.values()) else 1


if __name__ == "__main__":
    sys.exit(main())
