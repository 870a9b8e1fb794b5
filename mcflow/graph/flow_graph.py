"""Directed capacitated graph with integer node ids and validated mutation.

`FlowGraph` extends `networkx.DiGraph` to hold at most one edge per ordered
node pair, each edge carrying an integer ``capacity`` and ``cost``. Nodes are
dense integer ids created up front; further ids may only be appended
contiguously (artificial nodes used to split anti-parallel edges). Every
mutation validates its arguments before touching the graph and raises one of
the errors from `mcflow.errors`.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Dict, Iterator, List, NamedTuple

import networkx as nx

from mcflow.errors import InvalidGraphMutation, MissingEdge

NodeID = int


class Edge(NamedTuple):
    """Immutable snapshot of a directed edge."""

    source: NodeID
    sink: NodeID
    capacity: int
    cost: int


def _check_int(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidGraphMutation(f"{name} must be an integer, got {value!r}.")


class FlowGraph(nx.DiGraph):
    """Adjacency-list graph of directed, capacitated, weighted edges.

    This class enforces:
      - At most one edge per ordered pair ``(source, sink)``.
      - Edge endpoints are existing node ids; new ids are accepted only when
        they equal the current node count (contiguous growth).
      - Capacities are non-negative integers; costs are integers.
      - Removing, reading or updating a missing edge raises ``MissingEdge``.

    ``starting_num_nodes`` is fixed at construction. Ids at or above it are
    artificial nodes; the ones created to split an anti-parallel edge pair are
    recorded in the artificial-node map together with the edge they replace.

    Inherits from:
        networkx.DiGraph
    """

    def __init__(self, num_nodes: int = 0, **attr: Any) -> None:
        """Initialize a graph with nodes ``0..num_nodes-1`` and no edges.

        Args:
            num_nodes: Starting number of nodes.
            **attr: Graph attributes forwarded to the DiGraph constructor.

        Raises:
            InvalidGraphMutation: If ``num_nodes`` is negative or not an integer.
        """
        _check_int(num_nodes, "num_nodes")
        if num_nodes < 0:
            raise InvalidGraphMutation(
                f"Number of nodes cannot be negative, got {num_nodes}."
            )
        super().__init__(**attr)
        self.add_nodes_from(range(num_nodes))
        self._starting_num_nodes: int = num_nodes
        # Artificial node id -> edge it substitutes in the graph it was built from.
        self._artificial_nodes: Dict[NodeID, Edge] = {}

    @property
    def starting_num_nodes(self) -> int:
        """Number of nodes the graph was created with."""
        return self._starting_num_nodes

    @property
    def num_nodes(self) -> int:
        """Current number of nodes, artificial ones included."""
        return len(self._node)

    def copy(self, as_view: bool = False, pickle: bool = True) -> FlowGraph:
        """Create a copy of this graph.

        By default, use pickle-based deep copying so the artificial-node map
        and starting node count travel with the edges. If ``pickle=False``,
        call the parent class's copy, which supports views.

        Args:
            as_view: If True, return a view instead of a full copy; only used
                if ``pickle=False``.
            pickle: If True, perform a pickle-based deep copy.

        Returns:
            FlowGraph: A new instance (or view) of the graph.
        """
        if not pickle:
            return super().copy(as_view=as_view)  # type: ignore[return-value]
        return loads(dumps(self))

    #
    # Validation helpers
    #
    def _check_node(self, node: NodeID) -> None:
        if node not in self._node:
            raise InvalidGraphMutation(f"Node {node} does not exist.")

    def _check_edge(self, source: NodeID, sink: NodeID) -> None:
        self._check_node(source)
        self._check_node(sink)
        if sink not in self._succ[source]:
            raise MissingEdge(f"Edge {source} -> {sink} does not exist.")

    @staticmethod
    def _check_capacity(capacity: int) -> None:
        _check_int(capacity, "capacity")
        if capacity < 0:
            raise InvalidGraphMutation(f"Capacity cannot be negative, got {capacity}.")

    #
    # Node management
    #
    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Append a node, which must be the next contiguous id.

        Args:
            node_for_adding: The node id; must equal the current node count.
            **attr: Arbitrary attributes for this node.

        Raises:
            InvalidGraphMutation: If the id is not the next free id.
        """
        _check_int(node_for_adding, "node")
        if node_for_adding != self.num_nodes:
            raise InvalidGraphMutation(
                f"Node {node_for_adding} cannot be added; the next node id is "
                f"{self.num_nodes}."
            )
        super().add_node(node_for_adding, **attr)

    #
    # Edge management
    #
    def add_edge(  # type: ignore[override]
        self,
        source: NodeID,
        sink: NodeID,
        capacity: int,
        cost: int,
        reverse: bool = False,
    ) -> None:
        """Add the directed edge ``source -> sink``.

        An endpoint equal to the current node count creates that node. The
        source is handled first, so both endpoints may be new as long as they
        are the next two ids.

        Args:
            source: The source node.
            sink: The sink node.
            capacity: Non-negative edge capacity.
            cost: Cost per unit of flow; negative values are allowed here
                because residual graphs need them.
            reverse: Marks a residual edge created as the counterpart of a
                traversed edge.

        Raises:
            InvalidGraphMutation: If a node id is negative or leaves a gap, the
                edge already exists, or the capacity is negative.
        """
        _check_int(source, "source")
        _check_int(sink, "sink")
        _check_int(cost, "cost")
        self._check_capacity(capacity)
        if source < 0 or sink < 0:
            raise InvalidGraphMutation(
                f"Node ids cannot be negative, got {source} -> {sink}."
            )

        new_nodes = []
        next_id = self.num_nodes
        for node in (source, sink):
            if node < self.num_nodes or node in new_nodes:
                continue
            if node != next_id:
                raise InvalidGraphMutation(
                    f"Node {node} does not exist and is not the next node id "
                    f"{next_id}."
                )
            new_nodes.append(node)
            next_id += 1

        if not new_nodes and sink in self._succ[source]:
            raise InvalidGraphMutation(f"Edge {source} -> {sink} already exists.")

        for node in new_nodes:
            super().add_node(node)
        super().add_edge(source, sink, capacity=capacity, cost=cost, reverse=reverse)

    def remove_edge(self, source: NodeID, sink: NodeID) -> None:  # type: ignore[override]
        """Remove the directed edge ``source -> sink``.

        Raises:
            InvalidGraphMutation: If a node does not exist.
            MissingEdge: If the edge does not exist.
        """
        self._check_edge(source, sink)
        super().remove_edge(source, sink)

    def get_edge(self, source: NodeID, sink: NodeID) -> Edge:
        """Return the edge ``source -> sink``.

        Raises:
            InvalidGraphMutation: If a node does not exist.
            MissingEdge: If the edge does not exist.
        """
        self._check_edge(source, sink)
        attr = self._succ[source][sink]
        return Edge(source, sink, attr["capacity"], attr["cost"])

    def set_edge_capacity(self, source: NodeID, sink: NodeID, capacity: int) -> None:
        """Replace the capacity of an existing edge.

        Raises:
            InvalidGraphMutation: If a node does not exist or capacity is negative.
            MissingEdge: If the edge does not exist.
        """
        self._check_edge(source, sink)
        self._check_capacity(capacity)
        self._succ[source][sink]["capacity"] = capacity

    def set_edge_cost(self, source: NodeID, sink: NodeID, cost: int) -> None:
        """Replace the cost of an existing edge.

        Raises:
            InvalidGraphMutation: If a node does not exist or cost is negative.
            MissingEdge: If the edge does not exist.
        """
        self._check_edge(source, sink)
        _check_int(cost, "cost")
        if cost < 0:
            raise InvalidGraphMutation(f"Cost cannot be negative, got {cost}.")
        self._succ[source][sink]["cost"] = cost

    def is_reverse_edge(self, source: NodeID, sink: NodeID) -> bool:
        """Return True if the edge was created as a residual counterpart."""
        self._check_edge(source, sink)
        return bool(self._succ[source][sink].get("reverse", False))

    #
    # Convenience methods
    #
    def get_node_adj_list(self, node: NodeID) -> List[Edge]:
        """Return the outgoing edges of ``node`` in insertion order.

        Raises:
            InvalidGraphMutation: If the node does not exist.
        """
        self._check_node(node)
        return [
            Edge(node, sink, attr["capacity"], attr["cost"])
            for sink, attr in self._succ[node].items()
        ]

    def iter_edges(self) -> Iterator[Edge]:
        """Yield every edge, by node id and then adjacency order."""
        for node in sorted(self._node):
            for sink, attr in self._succ[node].items():
                yield Edge(node, sink, attr["capacity"], attr["cost"])

    def get_artificial_nodes_map(self) -> Dict[NodeID, Edge]:
        """Return the artificial-node map.

        Artificial nodes split an anti-parallel edge pair ``u -> v`` /
        ``v -> u`` (``u < v``) in a residual graph: ``u -> v`` becomes
        ``u -> w -> v``. Ids are always ``>= starting_num_nodes`` and never
        reused.

        Returns:
            Dict[NodeID, Edge]: artificial node id -> the edge it replaces.
        """
        return self._artificial_nodes

    def add_artificial_node(self, node: NodeID, edge: Edge) -> None:
        """Record ``node`` as the artificial node standing in for ``edge``.

        Raises:
            InvalidGraphMutation: If the node does not exist, is below
                ``starting_num_nodes`` or is already recorded.
        """
        self._check_node(node)
        if node < self._starting_num_nodes:
            raise InvalidGraphMutation(
                f"Node {node} is an original node and cannot be artificial."
            )
        if node in self._artificial_nodes:
            raise InvalidGraphMutation(f"Artificial node {node} already recorded.")
        self._artificial_nodes[node] = edge

    def to_dict(self) -> Dict[str, Any]:
        """Convert the graph to a dictionary suitable for JSON serialization."""
        # Import here to avoid circular import
        from mcflow.graph.io import graph_to_dict

        return graph_to_dict(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlowGraph):
            return NotImplemented
        return set(self.iter_edges()) == set(other.iter_edges())

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"FlowGraph(num_nodes={self.num_nodes}, "
            f"edges={self.number_of_edges()})"
        )
