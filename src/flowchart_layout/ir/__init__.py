"""Intermediate representation: validated, index-based view of the input graph."""

from flowchart_layout.ir.graph import EdgeData, GraphIR, NodeData, estimate_node_size, resolve_node_size

__all__ = [
    "EdgeData",
    "GraphIR",
    "NodeData",
    "estimate_node_size",
    "resolve_node_size",
]
