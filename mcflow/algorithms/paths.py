"""Path and cycle operations on residual graphs.

Path reconstruction from a parent map, bottleneck capacity along a node
sequence, and flow augmentation. ``augment`` is the only routine that changes
residual capacities; it serves augmenting paths (maximum flow) and negative
cycles (cost canceling) alike.
"""

from __future__ import annotations

from typing import Mapping, Sequence, Union

from mcflow.algorithms.types import NO_PARENT, Path
from mcflow.errors import FlowExceedsResidualCapacity, InvalidGraphMutation
from mcflow.graph.flow_graph import FlowGraph, NodeID

ParentMap = Union[Sequence[NodeID], Mapping[NodeID, NodeID]]


def retrieve_path(parent: ParentMap, start: NodeID) -> Path:
    """Walk the parent chain from ``start`` and return it root-first.

    The walk stops when the ``NO_PARENT`` sentinel is reached or when the next
    node is already in the collected sequence. In the second case that node is
    appended as well, so a walk started on a cycle comes back as a closed
    sequence (first node == last node). Starting off the cycle yields the
    cycle followed by the tail leading to ``start``.

    Args:
        parent: Predecessor of each node id (BFS tree or Bellman-Ford parents).
        start: Node the walk starts from.

    Returns:
        Node ids ordered from the root (or cycle entry) towards ``start``.

    Examples:
        >>> retrieve_path([-1, 0, 1], 2)
        [0, 1, 2]
        >>> retrieve_path([2, 0, 1], 0)
        [0, 1, 2, 0]
    """
    path = [start]
    seen = {start}
    node = parent[start]
    while node != NO_PARENT:
        path.append(node)
        if node in seen:
            break
        seen.add(node)
        node = parent[node]
    path.reverse()
    return path


def bottleneck_capacity(graph: FlowGraph, path: Sequence[NodeID]) -> int:
    """Return the smallest residual capacity along ``path``.

    Args:
        graph: Residual graph.
        path: Node sequence; consecutive nodes must be joined by an edge.

    Returns:
        The minimum capacity over consecutive pairs, or 0 for paths with fewer
        than two nodes.

    Raises:
        MissingEdge: If a consecutive pair has no edge.
    """
    if len(path) < 2:
        return 0
    return min(
        graph.get_edge(source, sink).capacity for source, sink in zip(path, path[1:])
    )


def augment(graph: FlowGraph, path: Sequence[NodeID], flow: int) -> None:
    """Push ``flow`` units along ``path`` and update the residual graph.

    For every traversed edge ``a -> b`` the residual capacity drops by
    ``flow`` (the edge is removed when it reaches exactly 0) and the
    counterpart ``b -> a`` gains ``flow``; a missing counterpart is created
    with cost ``-cost(a -> b)`` and the opposite ``reverse`` tag. Traversing a
    reverse edge therefore hands back flow previously sent over the forward
    edge.

    All edges are checked before any capacity changes, so a rejected
    augmentation leaves the graph untouched.

    Args:
        graph: Residual graph, mutated in place.
        path: Node sequence of a path or closed cycle.
        flow: Non-negative amount of flow to push.

    Raises:
        InvalidGraphMutation: If ``flow`` is negative.
        MissingEdge: If a consecutive pair has no edge.
        FlowExceedsResidualCapacity: If ``flow`` exceeds an edge's capacity.
    """
    if flow < 0:
        raise InvalidGraphMutation(f"Flow cannot be negative, got {flow}.")

    hops = list(zip(path, path[1:]))
    for source, sink in hops:
        capacity = graph.get_edge(source, sink).capacity
        if flow > capacity:
            raise FlowExceedsResidualCapacity(
                f"Flow {flow} exceeds the residual capacity {capacity} of edge "
                f"{source} -> {sink}."
            )
    if flow == 0:
        return

    for source, sink in hops:
        edge = graph.get_edge(source, sink)
        reverse = graph.is_reverse_edge(source, sink)

        remaining = edge.capacity - flow
        if remaining == 0:
            graph.remove_edge(source, sink)
        else:
            graph.set_edge_capacity(source, sink, remaining)

        if graph.has_edge(sink, source):
            counter = graph.get_edge(sink, source)
            graph.set_edge_capacity(sink, source, counter.capacity + flow)
        else:
            graph.add_edge(sink, source, flow, -edge.cost, reverse=not reverse)
