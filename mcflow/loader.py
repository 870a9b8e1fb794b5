"""Graph file loader.

Reads a graph description from a JSON or YAML file and returns a validated
`FlowGraph`. The expected document shape is:

    num_nodes: 4
    edges:
      - {source: 0, sink: 1, capacity: 2, cost: 1}
      - {source: 0, sink: 2, capacity: 1, cost: 2}

The capitalised keys `Num_nodes`, `Edges`, `Source`, `Sink`, `Capacity` and
`Weight` (the edge cost) are read as well.

The flow algorithms never parse files themselves; this module is the single
entrypoint that turns a file into a graph.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from mcflow.graph.flow_graph import FlowGraph
from mcflow.graph.io import graph_from_dict
from mcflow.logging import get_logger

logger = get_logger(__name__)

JSON_SUFFIXES = (".json",)
YAML_SUFFIXES = (".yaml", ".yml")


def parse_graph_text(text: str, suffix: str) -> Dict[str, Any]:
    """Parse a JSON or YAML document into a dictionary.

    Args:
        text: Raw file contents.
        suffix: File extension selecting the parser, e.g. ``".json"``.

    Returns:
        The parsed top-level mapping.

    Raises:
        ValueError: If the extension is not supported, the text is not valid
            JSON/YAML, or the document is not a mapping.
    """
    suffix = suffix.lower()
    if suffix in JSON_SUFFIXES:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON: {exc}") from exc
    elif suffix in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML: {exc}") from exc
    else:
        valid = ", ".join(JSON_SUFFIXES + YAML_SUFFIXES)
        raise ValueError(
            f"Unsupported file extension '{suffix}'. Valid extensions are: {valid}"
        )

    if not isinstance(data, dict):
        raise ValueError("The graph document must map to a dictionary at top-level.")
    return data


def load_graph(path: Union[str, Path]) -> FlowGraph:
    """Load a graph from a ``.json``, ``.yaml`` or ``.yml`` file.

    Args:
        path: Path to the graph file.

    Returns:
        FlowGraph: The validated input graph.

    Raises:
        FileNotFoundError: If the file does not exist.
        OSError: If the file cannot be read.
        ValueError: If the extension is unsupported, the contents are malformed,
            or required fields are missing or invalid.
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in JSON_SUFFIXES + YAML_SUFFIXES:
        valid = ", ".join(JSON_SUFFIXES + YAML_SUFFIXES)
        raise ValueError(
            f"Unsupported file extension '{path.suffix}' for {path}. "
            f"Valid extensions are: {valid}"
        )

    text = path.read_text(encoding="utf-8")
    try:
        graph = graph_from_dict(parse_graph_text(text, suffix))
    except ValueError as exc:
        raise ValueError(f"File {path} is not a valid graph file: {exc}") from exc

    logger.debug(
        "Loaded %s: %d nodes, %d edges",
        path,
        graph.num_nodes,
        graph.number_of_edges(),
    )
    return graph
