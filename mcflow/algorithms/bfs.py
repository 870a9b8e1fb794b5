"""Breadth-first search over the residual graph, used to find augmenting paths."""

from collections import deque
from typing import List, Optional

from mcflow.algorithms.types import NO_PARENT
from mcflow.graph.flow_graph import FlowGraph, NodeID


def bfs(
    graph: FlowGraph,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
) -> List[NodeID]:
    """
    Breadth-first search over edges with positive residual capacity.

    Neighbors are expanded in adjacency (insertion) order, so the tree found is
    deterministic and every node is reached over the fewest possible edges.
    The search stops as soon as ``dst_node`` is discovered.

    Returns a parent list indexed by node id: ``NO_PARENT`` for the source and
    for every node that was not discovered.
    """
    parent = [NO_PARENT] * graph.num_nodes
    G_succ = graph.succ
    visited_nodes = {src_node}
    queue = deque([src_node])
    while queue:
        node_id = queue.popleft()
        for neighbor_id, attr in G_succ[node_id].items():
            if neighbor_id in visited_nodes or attr["capacity"] <= 0:
                continue
            visited_nodes.add(neighbor_id)
            parent[neighbor_id] = node_id
            if neighbor_id == dst_node:
                return parent
            queue.append(neighbor_id)
    return parent
