"""Residual graph construction and flow extraction.

``build_residual_graph`` turns a capacitated graph into the residual graph the
flow algorithms mutate, splitting anti-parallel edge pairs through artificial
nodes. ``extract_optimal_graph`` maps a final residual graph back onto the
original edges, reporting the flow each one carries.
"""

from __future__ import annotations

from mcflow.errors import InvalidGraphMutation
from mcflow.graph.flow_graph import FlowGraph, NodeID
from mcflow.logging import get_logger

logger = get_logger(__name__)


def build_residual_graph(graph: FlowGraph) -> FlowGraph:
    """Build the residual graph of ``graph`` before any flow is sent.

    Every positive-capacity edge is copied, by node id and then adjacency
    order. When both ``u -> v`` and ``v -> u`` exist with ``u < v``, the edge
    ``u -> v`` is rerouted as ``u -> w -> v`` through a fresh artificial node
    ``w`` and ``w`` is recorded in the artificial-node map. Both halves keep the
    capacity; the cost sits on ``u -> w`` only and ``w -> v`` costs 0, so a
    unit routed through ``w`` is charged the edge cost once. The result has no
    anti-parallel pair of ordinary nodes, so a reverse edge added during
    augmentation never collides with a forward edge. Self-loops carry no
    source-sink flow and are skipped.

    Args:
        graph: Capacitated input graph with non-negative costs. Not modified.

    Returns:
        FlowGraph: A new residual graph whose ``starting_num_nodes`` equals the
        input's node count.

    Raises:
        InvalidGraphMutation: If an input edge has a negative cost.
    """
    residual_graph = FlowGraph(graph.num_nodes)

    for edge in graph.iter_edges():
        source, sink, capacity, cost = edge
        if cost < 0:
            raise InvalidGraphMutation(
                f"Edge {source} -> {sink} has negative cost {cost}; "
                "input costs must be non-negative."
            )
        # the residual graph contains only the edges with positive capacity
        if capacity <= 0 or source == sink:
            continue

        if source < sink and graph.has_edge(sink, source):
            artificial_node = residual_graph.num_nodes
            residual_graph.add_edge(source, artificial_node, capacity, cost)
            residual_graph.add_edge(artificial_node, sink, capacity, 0)
            residual_graph.add_artificial_node(artificial_node, edge)
        else:
            residual_graph.add_edge(source, sink, capacity, cost)

    logger.debug(
        "Built residual graph: %d nodes (%d artificial), %d edges",
        residual_graph.num_nodes,
        len(residual_graph.get_artificial_nodes_map()),
        residual_graph.number_of_edges(),
    )
    return residual_graph


def extract_optimal_graph(residual_graph: FlowGraph, graph: FlowGraph) -> FlowGraph:
    """Map a final residual graph back onto the edges of ``graph``.

    Each reverse edge ``b -> a`` of the residual graph records the flow sent
    over ``a -> b``; with positive costs these are exactly the negative-cost
    residual edges. A reverse edge ending at an artificial node stands for the
    second half of a split edge, whose true source comes from the
    artificial-node map. Costs are read from ``graph``, since the second half
    of a split edge carries cost 0. Edges of ``graph`` that carry no flow are
    added with flow 0.

    Args:
        residual_graph: Residual graph returned by a flow algorithm.
        graph: The original capacitated graph.

    Returns:
        FlowGraph: Graph over the original nodes whose edge ``capacity`` holds
        the flow carried and whose ``cost`` is the original cost.
    """
    starting_num_nodes = residual_graph.starting_num_nodes
    artificial_nodes = residual_graph.get_artificial_nodes_map()
    optimal_graph = FlowGraph(starting_num_nodes)

    for node in range(starting_num_nodes):
        for edge in residual_graph.get_node_adj_list(node):
            if not residual_graph.is_reverse_edge(node, edge.sink):
                continue
            if edge.sink >= starting_num_nodes:
                true_source: NodeID = artificial_nodes[edge.sink].source
            else:
                true_source = edge.sink
            cost = graph.get_edge(true_source, node).cost
            optimal_graph.add_edge(true_source, node, edge.capacity, cost)

    for edge in graph.iter_edges():
        if not optimal_graph.has_edge(edge.source, edge.sink):
            optimal_graph.add_edge(edge.source, edge.sink, 0, edge.cost)

    return optimal_graph


def flow_value(flow_graph: FlowGraph, source: NodeID) -> int:
    """Return the net flow leaving ``source`` in an extracted flow graph."""
    outgoing = sum(edge.capacity for edge in flow_graph.get_node_adj_list(source))
    incoming = sum(
        attr["capacity"] for _, _, attr in flow_graph.in_edges(source, data=True)
    )
    return outgoing - incoming


def flow_cost(flow_graph: FlowGraph) -> int:
    """Return the total cost (flow times cost summed over edges) of a flow graph."""
    return sum(edge.capacity * edge.cost for edge in flow_graph.iter_edges())
