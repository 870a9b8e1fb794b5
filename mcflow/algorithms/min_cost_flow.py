"""Minimum-cost flow via cycle canceling.

Starts from an Edmonds-Karp maximum flow and cancels negative-cost cycles in
its residual graph until none is left. A flow is of minimum cost among flows
of the same value exactly when its residual graph has no negative cycle.
"""

from __future__ import annotations

from typing import Optional

from mcflow.algorithms.bellman_ford import bellman_ford
from mcflow.algorithms.max_flow import edmonds_karp
from mcflow.algorithms.paths import augment, bottleneck_capacity
from mcflow.algorithms.types import CycleSearch, FlowResult
from mcflow.config import SOLVER_CONFIG, SolverConfig
from mcflow.graph.flow_graph import FlowGraph, NodeID
from mcflow.logging import get_logger

logger = get_logger(__name__)


def cancel_negative_cycles(
    residual_graph: FlowGraph,
    source: NodeID,
    cycle_search: CycleSearch = CycleSearch.GRAPH,
    progress_log_interval: int = 0,
) -> int:
    """Cancel negative cycles in ``residual_graph`` until none remains.

    Each round runs Bellman-Ford, pushes the cycle's bottleneck capacity
    around the cycle found and starts over. The flow value between any two
    nodes is unchanged; only its cost drops.

    Args:
        residual_graph: Residual graph, mutated in place.
        source: Node the search starts from when ``cycle_search`` is SOURCE.
        cycle_search: SOURCE cancels cycles reachable from ``source`` only;
            GRAPH cancels every negative cycle.
        progress_log_interval: Emit an INFO line every this many cancellations;
            0 disables progress lines.

    Returns:
        int: Number of cycles cancelled (0 if the flow was already optimal).
    """
    search_root = source if cycle_search == CycleSearch.SOURCE else None

    cancellations = 0
    result = bellman_ford(residual_graph, search_root)
    while result.negative_cycle is not None:
        cycle = result.negative_cycle
        flow = bottleneck_capacity(residual_graph, cycle)
        augment(residual_graph, cycle, flow)
        cancellations += 1
        if progress_log_interval and cancellations % progress_log_interval == 0:
            logger.info(
                "Cancelled %d negative cycles, residual cost %d",
                cancellations,
                residual_cost(residual_graph),
            )
        result = bellman_ford(residual_graph, search_root)

    return cancellations


def residual_cost(residual_graph: FlowGraph) -> int:
    """Return the cost of the flow recorded in ``residual_graph``.

    Sums ``-cost * capacity`` over the negative-cost residual edges. With
    non-negative input costs these are the reverse edges of flow-carrying
    edges, whose capacity is the flow carried.
    """
    return sum(
        -edge.cost * edge.capacity
        for edge in residual_graph.iter_edges()
        if edge.cost < 0
    )


def cycle_canceling(
    graph: FlowGraph,
    source: Optional[NodeID] = None,
    sink: Optional[NodeID] = None,
    config: Optional[SolverConfig] = None,
) -> FlowResult:
    """Compute a minimum-cost maximum flow with the cycle-canceling method.

    By default, this function:
      1. Takes ``source`` and ``sink`` from ``config`` (node 0 and the last
         node unless configured otherwise).
      2. Runs ``edmonds_karp`` to get a feasible maximum flow and its
         residual graph.
      3. Cancels negative cycles (``cancel_negative_cycles``) until none is
         left.
      4. Computes the minimum cost from the remaining negative-cost residual
         edges (``residual_cost``).

    Args:
        graph: Capacitated input graph with non-negative costs. Not modified.
        source: Source node; overrides ``config.source``.
        sink: Sink node; overrides ``config.sink``.
        config: Solver configuration; defaults to ``SOLVER_CONFIG``.

    Returns:
        FlowResult: The final residual graph and the minimum cost.

    Raises:
        ValueError: If the graph has no nodes.
        InvalidGraphMutation: If a terminal is not a node of ``graph`` or an
            edge has a negative cost.

    Examples:
        >>> g = FlowGraph(4)
        >>> g.add_edge(0, 1, 2, 1)
        >>> g.add_edge(0, 2, 1, 2)
        >>> g.add_edge(1, 3, 1, 2)
        >>> g.add_edge(2, 3, 2, 1)
        >>> residual, min_cost = cycle_canceling(g)
        >>> min_cost
        6
    """
    config = config or SOLVER_CONFIG
    default_source, default_sink = config.resolve_terminals(graph.num_nodes)
    source = default_source if source is None else source
    sink = default_sink if sink is None else sink

    # get the maximum flow using Edmonds-Karp (feasible flow)
    residual_graph, max_flow = edmonds_karp(graph, source, sink)

    cancellations = cancel_negative_cycles(
        residual_graph,
        source,
        cycle_search=config.cycle_search,
        progress_log_interval=config.progress_log_interval,
    )

    minimum_cost = residual_cost(residual_graph)
    logger.info(
        "Cycle canceling %s -> %s: max flow %d, minimum cost %d, "
        "%d negative cycles cancelled",
        source,
        sink,
        max_flow,
        minimum_cost,
        cancellations,
    )
    return FlowResult(residual_graph, minimum_cost)
