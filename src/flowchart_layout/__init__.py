"""flowchart-layout: deterministic layered layout for directed flowchart graphs."""

from flowchart_layout.config import LayoutStyle
from flowchart_layout.errors import (
    DuplicateNodeError,
    InvalidGraphError,
    InvalidNodeSizeError,
    InvalidStyleError,
    LayoutError,
    LayoutInvariantError,
    UnknownNodeError,
)
from flowchart_layout.layout import (
    Bounds,
    LayoutGraph,
    LayoutNode,
    Point,
    RoutedEdge,
    group_bounds,
    layout_flowchart,
    layout_with_groups,
    suggest_canvas_size,
)
from flowchart_layout.types import Direction, Edge, EdgeArrow, EdgeStyle, Graph, Node, NodeShape

__all__ = [
    "Bounds",
    "Direction",
    "DuplicateNodeError",
    "Edge",
    "EdgeArrow",
    "EdgeStyle",
    "Graph",
    "InvalidGraphError",
    "InvalidNodeSizeError",
    "InvalidStyleError",
    "LayoutError",
    "LayoutGraph",
    "LayoutInvariantError",
    "LayoutNode",
    "LayoutStyle",
    "Node",
    "NodeShape",
    "Point",
    "RoutedEdge",
    "UnknownNodeError",
    "group_bounds",
    "layout_flowchart",
    "layout_with_groups",
    "suggest_canvas_size",
]
