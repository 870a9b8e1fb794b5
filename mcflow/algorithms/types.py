"""Types and data structures for flow algorithm results.

Defines immutable result containers, the parent-map sentinel and the
negative-cycle search scope used by cycle canceling.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, NamedTuple, Optional

from mcflow.graph.flow_graph import FlowGraph, NodeID

#: Parent-map entry for nodes with no predecessor (the root or undiscovered).
NO_PARENT = -1

#: Ordered node ids; a closed cycle repeats its first node at the end.
Path = List[NodeID]


class FlowResult(NamedTuple):
    """Residual graph left by a flow algorithm and the value it computed.

    Unpacks as ``(graph, value)``: for ``edmonds_karp`` the value is the
    maximum flow, for ``cycle_canceling`` it is the minimum cost.
    """

    graph: FlowGraph
    value: int


@dataclass(frozen=True)
class BellmanFordResult:
    """Outcome of a Bellman-Ford pass over a residual graph.

    Attributes:
        distances: Shortest distance per node id; ``math.inf`` if unreachable.
        parent: Predecessor per node id, ``NO_PARENT`` when there is none.
        negative_cycle: Closed node sequence of a negative cycle, or None.
    """

    distances: List[float]
    parent: List[NodeID]
    negative_cycle: Optional[Path] = None

    @property
    def has_negative_cycle(self) -> bool:
        return self.negative_cycle is not None


class CycleSearch(IntEnum):
    """Where cycle canceling looks for negative cycles."""

    #: Only cycles reachable from the source node.
    SOURCE = 1
    #: Any cycle in the residual graph (Bellman-Ford from a virtual super-source).
    GRAPH = 2

    @classmethod
    def from_string(cls, value: str) -> "CycleSearch":
        """Parse a case-insensitive name into a CycleSearch member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid cycle_search '{value}'. Valid values are: {valid}"
            ) from None
