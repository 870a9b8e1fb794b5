"""Maximum-flow computation via Edmonds-Karp.

Repeatedly augments along a fewest-edges source-sink path found by
breadth-first search in the residual graph until the sink is unreachable.
"""

from mcflow.algorithms.bfs import bfs
from mcflow.algorithms.paths import augment, bottleneck_capacity, retrieve_path
from mcflow.algorithms.residual import build_residual_graph
from mcflow.algorithms.types import NO_PARENT, FlowResult
from mcflow.errors import InvalidGraphMutation
from mcflow.graph.flow_graph import FlowGraph, NodeID
from mcflow.logging import get_logger

logger = get_logger(__name__)


def edmonds_karp(graph: FlowGraph, source: NodeID, sink: NodeID) -> FlowResult:
    """Compute a maximum flow from ``source`` to ``sink``.

    Builds the residual graph of ``graph`` (which is left unmodified), then
    loops:
      1. BFS from ``source`` over positive-capacity residual edges.
      2. Stop if ``sink`` was not reached.
      3. Rebuild the path from the BFS parents, push its bottleneck capacity
         along it with ``augment`` and add it to the total.

    Choosing a fewest-edges path each round bounds the number of
    augmentations by O(V * E).

    Args:
        graph: Capacitated input graph with non-negative costs.
        source: The source node.
        sink: The sink node.

    Returns:
        FlowResult: The residual graph, in which ``sink`` is unreachable from
        ``source``, and the maximum flow value.

    Raises:
        InvalidGraphMutation: If ``source`` or ``sink`` is not a node of ``graph``.

    Examples:
        >>> g = FlowGraph(3)
        >>> g.add_edge(0, 1, 5, 1)
        >>> g.add_edge(1, 2, 3, 1)
        >>> residual, max_flow = edmonds_karp(g, 0, 2)
        >>> max_flow
        3
    """
    for node in (source, sink):
        if node not in graph:
            raise InvalidGraphMutation(f"Node {node} does not exist.")

    residual_graph = build_residual_graph(graph)

    # Degenerate case (source == sink): conservation forces a zero flow value.
    if source == sink:
        return FlowResult(residual_graph, 0)

    max_flow = 0
    augmentations = 0
    while True:
        parent = bfs(residual_graph, source, sink)
        if parent[sink] == NO_PARENT:
            break

        path = retrieve_path(parent, sink)
        path_flow = bottleneck_capacity(residual_graph, path)
        augment(residual_graph, path, path_flow)

        max_flow += path_flow
        augmentations += 1
        logger.debug("Augmented %d along %s", path_flow, path)

    logger.debug(
        "Edmonds-Karp %s -> %s: max flow %d after %d augmentations",
        source,
        sink,
        max_flow,
        augmentations,
    )
    return FlowResult(residual_graph, max_flow)
