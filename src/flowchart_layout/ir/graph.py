"""Graph IR: validates an abstract Graph and indexes it for the layout phases.

This module owns the canonical, validated view of the input: every node gets
a stable small-integer index in declaration order, every edge keeps its
declaration index, and node sizes are resolved once. A networkx
MultiDiGraph keyed by edge index keeps the topology (parallel edges and
self-loops are preserved) for the ranking phase.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass

import networkx as nx

from flowchart_layout.config import LayoutStyle
from flowchart_layout.errors import DuplicateNodeError, InvalidNodeSizeError, UnknownNodeError
from flowchart_layout.types import Direction, EdgeArrow, EdgeStyle, Graph, Node, NodeShape


@dataclass
class NodeData:
    index: int
    id: str
    label: str | None
    shape: NodeShape
    width: float
    height: float


@dataclass
class EdgeData:
    index: int
    from_index: int
    to_index: int
    label: str | None
    style: EdgeStyle
    arrow: EdgeArrow


class GraphIR:
    """The validated graph intermediate representation built from a Graph.

    The networkx MultiDiGraph is keyed by edge index; ranking reads its
    edges and orients them by each edge's reversed flag.
    """

    def __init__(self, nodes: list[NodeData], edges: list[EdgeData], direction: Direction) -> None:
        self.nodes = nodes
        self.edges = edges
        self.direction = direction
        self.node_index: dict[str, int] = {n.id: n.index for n in nodes}
        self.digraph: nx.MultiDiGraph = nx.MultiDiGraph()
        for node in nodes:
            self.digraph.add_node(node.index, data=node)
        for edge in edges:
            self.digraph.add_edge(edge.from_index, edge.to_index, key=edge.index, data=edge)

    @classmethod
    def from_graph(cls, graph: Graph, style: LayoutStyle | None = None) -> GraphIR:
        """Validate ``graph`` and build its IR.

        Raises:
            DuplicateNodeError: a node id is declared twice.
            InvalidNodeSizeError: an explicit width or height is not a finite positive number.
            UnknownNodeError: an edge endpoint was never declared.
        """
        style = style or LayoutStyle()
        nodes: list[NodeData] = []
        seen: set[str] = set()
        for node in graph.nodes:
            if node.id in seen:
                raise DuplicateNodeError(f"node '{node.id}' is declared more than once", node_id=node.id)
            seen.add(node.id)
            width, height = resolve_node_size(node, style)
            nodes.append(
                NodeData(
                    index=len(nodes),
                    id=node.id,
                    label=node.label,
                    shape=node.shape,
                    width=width,
                    height=height,
                )
            )

        index = {n.id: n.index for n in nodes}
        edges: list[EdgeData] = []
        for edge_index, edge in enumerate(graph.edges):
            for endpoint in (edge.from_id, edge.to_id):
                if endpoint not in index:
                    raise UnknownNodeError(
                        f"edge {edge_index} ({edge.from_id} -> {edge.to_id}) references undeclared node '{endpoint}'",
                        node_id=endpoint,
                        edge_index=edge_index,
                    )
            edges.append(
                EdgeData(
                    index=edge_index,
                    from_index=index[edge.from_id],
                    to_index=index[edge.to_id],
                    label=edge.label,
                    style=edge.style,
                    arrow=edge.arrow,
                )
            )

        return cls(nodes=nodes, edges=edges, direction=graph.direction)


def resolve_node_size(node: Node, style: LayoutStyle) -> tuple[float, float]:
    """Explicit size if given (a finite positive number), else estimated from the label; floored at the minimum."""
    for name, value in (("width", node.width), ("height", node.height)):
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidNodeSizeError(f"node '{node.id}' has non-numeric {name} {value!r}", node_id=node.id)
        if not math.isfinite(value) or value <= 0:
            raise InvalidNodeSizeError(f"node '{node.id}' has invalid {name} {value}", node_id=node.id)
    est_w, est_h = estimate_node_size(node.text, style)
    width = node.width if node.width is not None else est_w
    height = node.height if node.height is not None else est_h
    return (max(float(width), style.min_width), max(float(height), style.min_height))


def estimate_node_size(label: str, style: LayoutStyle) -> tuple[float, float]:
    lines = label.split("\n") if label else [""]
    longest = max(len(line) for line in lines)
    width = longest * style.char_width + 2 * style.node_padding_x
    height = len(lines) * style.char_height + 2 * style.node_padding_y
    return (width, height)
