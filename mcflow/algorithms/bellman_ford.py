"""Negative-cycle detection with Bellman-Ford.

Runs the classic ``|V| - 1`` relaxation rounds over a residual graph plus one
extra round; any distance that still improves on the extra round proves a
negative cycle, which is then extracted from the parent pointers.
"""

from __future__ import annotations

import math
from typing import List, Optional

from mcflow.algorithms.paths import retrieve_path
from mcflow.algorithms.types import NO_PARENT, BellmanFordResult
from mcflow.errors import InvalidGraphMutation
from mcflow.graph.flow_graph import FlowGraph, NodeID
from mcflow.logging import get_logger

logger = get_logger(__name__)


def bellman_ford(graph: FlowGraph, source: Optional[NodeID]) -> BellmanFordResult:
    """Compute shortest distances by cost and look for a negative cycle.

    With a ``source`` node, only that node starts at distance 0; nodes it
    cannot reach keep ``math.inf`` and never relax, so only negative cycles
    reachable from ``source`` are found. With ``source=None`` every node
    starts at distance 0, as if a virtual super-source had a zero-cost edge to
    each of them, and a negative cycle anywhere in the graph is found.

    When the extra round still relaxes an edge ``u -> v``, ``v`` lies on or
    downstream of a negative cycle. Walking ``num_nodes`` parent steps back
    from ``v`` is guaranteed to land on the cycle, from where
    ``retrieve_path`` returns it closed (first node repeated last).

    Args:
        graph: Residual graph; every edge present has positive capacity.
        source: Start node, or None to search the whole graph.

    Returns:
        BellmanFordResult: Distances, parents, and the negative cycle if any.

    Raises:
        InvalidGraphMutation: If ``source`` is not a node of ``graph``.
    """
    num_nodes = graph.num_nodes
    parent: List[NodeID] = [NO_PARENT] * num_nodes
    if source is None:
        distances: List[float] = [0] * num_nodes
    else:
        if source not in graph:
            raise InvalidGraphMutation(f"Node {source} does not exist.")
        distances = [math.inf] * num_nodes
        distances[source] = 0

    edges = [
        (u, v, attr["cost"])
        for u in range(num_nodes)
        for v, attr in graph.succ[u].items()
        if attr["capacity"] > 0
    ]

    for _ in range(num_nodes - 1):
        updated = False
        for u, v, cost in edges:
            if distances[u] + cost < distances[v]:
                distances[v] = distances[u] + cost
                parent[v] = u
                updated = True
        if not updated:  # early exit if nothing relaxed
            break

    for u, v, cost in edges:
        if distances[u] + cost < distances[v]:
            parent[v] = u
            node = v
            for _ in range(num_nodes):
                node = parent[node]
            cycle = retrieve_path(parent, node)
            logger.debug("Negative cycle found: %s", cycle)
            return BellmanFordResult(distances, parent, cycle)

    return BellmanFordResult(distances, parent)
