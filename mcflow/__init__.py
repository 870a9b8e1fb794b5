"""mcflow: minimum-cost flow by cycle canceling.

Computes a maximum flow with Edmonds-Karp, then cancels negative-cost cycles in
its residual graph (found with Bellman-Ford) until the flow is of minimum cost
among all maximum flows. Capacities and costs are integers throughout.

Primary API:
    FlowGraph - Capacitated directed graph with integer node ids
    cycle_canceling() - Minimum-cost maximum flow, returns (residual, cost)
    edmonds_karp() - Maximum flow, returns (residual, flow value)
    extract_optimal_graph() - Per-edge flows from a final residual graph
    load_graph() - Read a graph from a JSON or YAML file

Example:
    from mcflow import FlowGraph, cycle_canceling, extract_optimal_graph

    g = FlowGraph(4)
    g.add_edge(0, 1, 2, 1)
    g.add_edge(0, 2, 1, 2)
    g.add_edge(1, 3, 1, 2)
    g.add_edge(2, 3, 2, 1)

    residual, min_cost = cycle_canceling(g)
    flows = extract_optimal_graph(residual, g)
"""

from __future__ import annotations

from mcflow import cli, logging
from mcflow.algorithms import (
    CycleSearch,
    FlowResult,
    bellman_ford,
    build_residual_graph,
    cycle_canceling,
    edmonds_karp,
    extract_optimal_graph,
)
from mcflow.config import SOLVER_CONFIG, SolverConfig
from mcflow.errors import (
    FlowExceedsResidualCapacity,
    GraphError,
    InvalidGraphMutation,
    MissingEdge,
)
from mcflow.graph import Edge, FlowGraph
from mcflow.loader import load_graph

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph
    "Edge",
    "FlowGraph",
    "load_graph",
    # Algorithms
    "bellman_ford",
    "build_residual_graph",
    "cycle_canceling",
    "edmonds_karp",
    "extract_optimal_graph",
    # Types and configuration
    "CycleSearch",
    "FlowResult",
    "SolverConfig",
    "SOLVER_CONFIG",
    # Errors
    "GraphError",
    "InvalidGraphMutation",
    "MissingEdge",
    "FlowExceedsResidualCapacity",
    # Utilities
    "cli",
    "logging",
]
