"""Configuration classes for mcflow solvers."""

from dataclasses import dataclass
from typing import Optional, Tuple

from mcflow.algorithms.types import CycleSearch


@dataclass
class SolverConfig:
    """Configuration for the cycle-canceling minimum-cost flow solver."""

    # Source node id
    source: int = 0

    # Sink node id; None selects the last node of the graph
    sink: Optional[int] = None

    # Where negative cycles are searched for
    cycle_search: CycleSearch = CycleSearch.GRAPH

    # Cancelled cycles between INFO progress messages
    progress_log_interval: int = 100

    def resolve_terminals(self, num_nodes: int) -> Tuple[int, int]:
        """Return ``(source, sink)`` for a graph with ``num_nodes`` nodes."""
        if num_nodes <= 0:
            raise ValueError("Cannot pick source and sink in a graph without nodes.")
        sink = num_nodes - 1 if self.sink is None else self.sink
        return self.source, sink


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
