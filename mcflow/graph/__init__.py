"""Graph primitives and helpers.

This package provides the capacitated graph type `FlowGraph`, its `Edge`
snapshot tuple, and dict conversion helpers (`io`).
"""

from mcflow.graph.flow_graph import Edge, FlowGraph, NodeID

__all__ = ["Edge", "FlowGraph", "NodeID"]
