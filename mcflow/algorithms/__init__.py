"""Flow algorithms over residual graphs.

Leaf-first: residual construction and flow extraction (`residual`), path
operations (`paths`), breadth-first search (`bfs`), Edmonds-Karp maximum flow
(`max_flow`), Bellman-Ford negative-cycle detection (`bellman_ford`) and
cycle-canceling minimum-cost flow (`min_cost_flow`).
"""

from mcflow.algorithms.bellman_ford import bellman_ford
from mcflow.algorithms.bfs import bfs
from mcflow.algorithms.max_flow import edmonds_karp
from mcflow.algorithms.min_cost_flow import (
    cancel_negative_cycles,
    cycle_canceling,
    residual_cost,
)
from mcflow.algorithms.paths import augment, bottleneck_capacity, retrieve_path
from mcflow.algorithms.residual import (
    build_residual_graph,
    extract_optimal_graph,
    flow_cost,
    flow_value,
)
from mcflow.algorithms.types import (
    NO_PARENT,
    BellmanFordResult,
    CycleSearch,
    FlowResult,
)

__all__ = [
    "NO_PARENT",
    "BellmanFordResult",
    "CycleSearch",
    "FlowResult",
    "augment",
    "bellman_ford",
    "bfs",
    "bottleneck_capacity",
    "build_residual_graph",
    "cancel_negative_cycles",
    "cycle_canceling",
    "edmonds_karp",
    "extract_optimal_graph",
    "flow_cost",
    "flow_value",
    "residual_cost",
    "retrieve_path",
]
