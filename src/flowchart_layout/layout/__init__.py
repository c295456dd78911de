"""Layered layout pipeline: phases, state arena, output types and public entry points."""

from __future__ import annotations

from flowchart_layout.layout.acyclic import break_cycles
from flowchart_layout.layout.coordinates import assign_coordinates, layer_gaps, widen_for_ports
from flowchart_layout.layout.engine import layout_flowchart, layout_with_groups
from flowchart_layout.layout.groups import group_bounds, suggest_canvas_size
from flowchart_layout.layout.normalize import insert_dummy_nodes
from flowchart_layout.layout.ordering import DEFAULT_CROSSING_PASSES, build_layers, count_crossings, reduce_crossings
from flowchart_layout.layout.ranking import assign_ranks, ranking_graph
from flowchart_layout.layout.routing import port_offsets, route_edges
from flowchart_layout.layout.state import EdgeChain, EdgeMeta, LayoutState, WorkNode
from flowchart_layout.layout.sugiyama import SugiyamaLayout
from flowchart_layout.layout.types import DUMMY_PREFIX, Bounds, LayoutGraph, LayoutNode, Point, RoutedEdge

__all__ = [
    "DEFAULT_CROSSING_PASSES",
    "DUMMY_PREFIX",
    "Bounds",
    "EdgeChain",
    "EdgeMeta",
    "LayoutGraph",
    "LayoutNode",
    "LayoutState",
    "Point",
    "RoutedEdge",
    "SugiyamaLayout",
    "WorkNode",
    "assign_coordinates",
    "assign_ranks",
    "break_cycles",
    "build_layers",
    "count_crossings",
    "group_bounds",
    "insert_dummy_nodes",
    "layer_gaps",
    "layout_flowchart",
    "layout_with_groups",
    "port_offsets",
    "ranking_graph",
    "reduce_crossings",
    "route_edges",
    "suggest_canvas_size",
    "widen_for_ports",
]
