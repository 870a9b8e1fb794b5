from __future__ import annotations

from typing import Any, Dict, List

from mcflow.graph.flow_graph import FlowGraph

EDGE_FIELDS = ("source", "sink", "capacity", "cost")

# Capitalised spelling of the same fields; "Weight" is the edge cost.
GRAPH_KEY_ALIASES = {"Num_nodes": "num_nodes", "Edges": "edges"}
EDGE_KEY_ALIASES = {
    "Source": "source",
    "Sink": "sink",
    "Capacity": "capacity",
    "Weight": "cost",
}


def _normalize_keys(data: Dict[str, Any], aliases: Dict[str, str]) -> Dict[str, Any]:
    """Return a copy of ``data`` with aliased keys renamed to their field name."""
    normalized = {}
    for key, value in data.items():
        field = aliases.get(key, key)
        if field in normalized:
            raise ValueError(f"Field '{field}' is given more than once.")
        normalized[field] = value
    return normalized


def graph_to_dict(graph: FlowGraph) -> Dict[str, Any]:
    """
    Converts a FlowGraph into a plain dict representation.

    The returned dict has the following structure:
        {
            "num_nodes": <current node count>,
            "starting_num_nodes": <node count at construction>,
            "edges": [
                {"source": u, "sink": v, "capacity": c, "cost": w},
                ...
            ],
            "artificial_nodes": {
                "<artificial id>": {"source": u, "sink": v, "capacity": c, "cost": w},
                ...
            }
        }

    Edges are listed by source node id and then adjacency order. Artificial node
    ids become string keys so the result survives a JSON round trip.

    Args:
        graph: The FlowGraph to convert.

    Returns:
        A dict with 'num_nodes', 'starting_num_nodes', 'edges' and 'artificial_nodes'.
    """
    return {
        "num_nodes": graph.num_nodes,
        "starting_num_nodes": graph.starting_num_nodes,
        "edges": [edge._asdict() for edge in graph.iter_edges()],
        "artificial_nodes": {
            str(node): edge._asdict()
            for node, edge in graph.get_artificial_nodes_map().items()
        },
    }


def graph_from_dict(data: Dict[str, Any]) -> FlowGraph:
    """
    Builds a FlowGraph from its dict representation.

    Expected input format:
        {
            "num_nodes": <int>,
            "edges": [
                {"source": <int>, "sink": <int>, "capacity": <int>, "cost": <int>},
                ...
            ]
        }

    Only ``num_nodes`` and ``edges`` are read; output-only keys written by
    ``graph_to_dict`` are ignored. Edge costs must be non-negative.

    The capitalised spelling ``Num_nodes``/``Edges`` with edges keyed
    ``Source``/``Sink``/``Capacity``/``Weight`` is accepted as well, where
    ``Weight`` is the edge cost.

    Args:
        data: A dict describing the graph.

    Returns:
        A FlowGraph with ``num_nodes`` nodes and the given edges.

    Raises:
        ValueError: If a required field is missing or has the wrong type, or if
            an edge is rejected by the graph.
    """
    if not isinstance(data, dict):
        raise ValueError("Graph data must be a mapping.")
    data = _normalize_keys(data, GRAPH_KEY_ALIASES)
    for field in ("num_nodes", "edges"):
        if field not in data:
            raise ValueError(f"Missing required field '{field}'.")

    num_nodes = data["num_nodes"]
    if isinstance(num_nodes, bool) or not isinstance(num_nodes, int):
        raise ValueError(f"'num_nodes' must be an integer, got {num_nodes!r}.")
    edges: List[Any] = data["edges"]
    if not isinstance(edges, list):
        raise ValueError("'edges' must be a list.")

    graph = FlowGraph(num_nodes)
    for idx, entry in enumerate(edges):
        if not isinstance(entry, dict):
            raise ValueError(f"Edge #{idx} must be a mapping.")
        entry = _normalize_keys(entry, EDGE_KEY_ALIASES)
        missing = [field for field in EDGE_FIELDS if field not in entry]
        if missing:
            raise ValueError(
                f"Edge #{idx} is missing required field(s): {', '.join(missing)}."
            )
        if not isinstance(entry["cost"], bool) and isinstance(entry["cost"], int):
            if entry["cost"] < 0:
                raise ValueError(
                    f"Edge #{idx} has negative cost {entry['cost']}; "
                    "costs must be non-negative."
                )
        # Node growth beyond num_nodes is not allowed in input graphs.
        for field in ("source", "sink"):
            node = entry[field]
            if isinstance(node, int) and not isinstance(node, bool):
                if node >= num_nodes:
                    raise ValueError(
                        f"Edge #{idx} references node {node} but the graph has "
                        f"{num_nodes} nodes."
                    )
        graph.add_edge(
            entry["source"], entry["sink"], entry["capacity"], entry["cost"]
        )

    return graph
