"""Post-phase consistency checks.

Each check raises LayoutInvariantError naming the phase and the broken
invariant; none of them can fail on valid input unless a phase has a bug.
"""

from __future__ import annotations

import networkx as nx

from flowchart_layout.errors import LayoutInvariantError
from flowchart_layout.layout.ranking import ranking_graph
from flowchart_layout.layout.state import LayoutState
from flowchart_layout.layout.types import RoutedEdge


def check_acyclic(state: LayoutState) -> None:
    g = ranking_graph(state)
    if not nx.is_directed_acyclic_graph(g):
        cycle = nx.find_cycle(g)
        names = " -> ".join(state.nodes[u].id for u, _v in cycle)
        raise LayoutInvariantError("cycle breaking", "reversed edges must leave the graph acyclic", names)


def check_ranks(state: LayoutState) -> None:
    for edge in state.edges:
        if edge.is_self_loop:
            continue
        src = state.nodes[edge.rank_source]
        tgt = state.nodes[edge.rank_target]
        if tgt.layer <= src.layer:
            raise LayoutInvariantError(
                "ranking",
                "rank(target) must exceed rank(source)",
                f"edge {edge.index} {src.id}@{src.layer} -> {tgt.id}@{tgt.layer}",
            )


def check_chains(state: LayoutState) -> None:
    for chain in state.chains:
        if state.edges[chain.edge_index].is_self_loop:
            continue
        layers = [state.nodes[i].layer for i in chain.nodes]
        if any(b != a + 1 for a, b in zip(layers, layers[1:])):
            raise LayoutInvariantError(
                "normalization", "every chain link must span exactly one layer", f"edge {chain.edge_index}: {layers}"
            )


def check_layers(state: LayoutState, phase: str) -> None:
    placed = 0
    for layer_idx, layer in enumerate(state.layers):
        if not layer:
            raise LayoutInvariantError(phase, "layers must be contiguous", f"layer {layer_idx} is empty")
        orders = sorted(state.nodes[i].order for i in layer)
        if orders != list(range(len(layer))):
            raise LayoutInvariantError(phase, "order values must be dense", f"layer {layer_idx}: {orders}")
        for idx in layer:
            if state.nodes[idx].layer != layer_idx:
                raise LayoutInvariantError(phase, "layer membership must match node rank", state.nodes[idx].id)
        placed += len(layer)
    if placed != len(state.nodes):
        raise LayoutInvariantError(phase, "every node must sit in exactly one layer", f"{placed}/{len(state.nodes)}")


def check_routes(state: LayoutState, routes: list[RoutedEdge]) -> None:
    if len(routes) != len(state.edges):
        raise LayoutInvariantError("routing", "one route per edge", f"{len(routes)} routes for {len(state.edges)} edges")
    for chain, route in zip(state.chains, routes):
        expected = 2 if state.edges[chain.edge_index].is_self_loop else len(chain.nodes)
        if len(route.waypoints) != expected:
            raise LayoutInvariantError(
                "routing",
                "route must visit both ports and every dummy",
                f"edge {chain.edge_index} has {len(route.waypoints)} waypoints, expected {expected}",
            )
