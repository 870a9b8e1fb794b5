"""Exceptions raised by mcflow graphs and flow algorithms.

All errors derive from ``ValueError`` so callers that treat graph misuse as a
bad argument keep working without importing this module.
"""

from __future__ import annotations


class GraphError(ValueError):
    """Base class for graph and flow errors."""


class InvalidGraphMutation(GraphError):
    """A mutation or query references an invalid node, edge or value.

    Raised for negative or unknown node ids, node-id gaps, duplicate edges,
    negative capacities, negative costs where they are not allowed, and
    non-integer capacities or costs.
    """


class MissingEdge(GraphError):
    """The requested edge does not exist between two existing nodes."""


class FlowExceedsResidualCapacity(GraphError):
    """An augmentation tried to push more flow than an edge can carry.

    Bottleneck computation always bounds augmentations, so seeing this error
    means the path handed to ``augment`` was inconsistent with the graph.
    """
