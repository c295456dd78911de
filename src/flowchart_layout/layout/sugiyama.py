"""Sugiyama-style layered graph layout engine.

Phases:
  1. Cycle breaking (DFS back-edges)
  2. Rank assignment (longest path)
  3. Dummy node insertion
  4. Crossing reduction (barycenter)
  5. Coordinate assignment (+ optional compaction)
  6. Edge routing (ports + dummy waypoints)
"""

from __future__ import annotations

import logging

from flowchart_layout.config import LayoutStyle
from flowchart_layout.ir.graph import GraphIR
from flowchart_layout.layout.acyclic import break_cycles
from flowchart_layout.layout.coordinates import assign_coordinates
from flowchart_layout.layout.invariants import check_acyclic, check_chains, check_layers, check_ranks, check_routes
from flowchart_layout.layout.normalize import insert_dummy_nodes
from flowchart_layout.layout.ordering import build_layers, reduce_crossings
from flowchart_layout.layout.ranking import assign_ranks
from flowchart_layout.layout.routing import route_edges
from flowchart_layout.layout.state import LayoutState
from flowchart_layout.layout.types import LayoutGraph
from flowchart_layout.types import Graph

logger = logging.getLogger(__name__)


class SugiyamaLayout:
    """Sugiyama layered layout engine.

    One instance may be reused; every call builds its own LayoutState, so
    concurrent calls on separate graphs do not share anything mutable.
    """

    def __init__(self, style: LayoutStyle | None = None) -> None:
        self.style = style or LayoutStyle()

    def prepare(self, graph: Graph) -> LayoutState:
        """Validate ``graph`` and run every phase up to (not including) coordinate assignment."""
        self.style.validate()
        gir = GraphIR.from_graph(graph, self.style)
        state = LayoutState.from_ir(gir)

        break_cycles(state)
        check_acyclic(state)

        assign_ranks(state)
        check_ranks(state)

        insert_dummy_nodes(state, self.style)
        check_chains(state)

        build_layers(state)
        check_layers(state, "layering")

        reduce_crossings(state, self.style.crossing_passes)
        check_layers(state, "crossing reduction")
        return state

    def layout(self, graph: Graph) -> LayoutGraph:
        state = self.prepare(graph)
        if not state.nodes:
            return LayoutGraph.empty(graph.direction)

        assign_coordinates(state, self.style)
        routes = route_edges(state, self.style)
        check_routes(state, routes)

        logger.debug(
            "laid out %d nodes (%d dummies) in %d layers, %d edges",
            state.real_count,
            state.dummy_count,
            len(state.layers),
            len(routes),
        )
        return state.to_layout_graph(routes)
