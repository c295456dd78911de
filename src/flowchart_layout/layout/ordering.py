"""Layer construction and barycenter crossing reduction."""

from __future__ import annotations

import logging

from flowchart_layout.layout.state import LayoutState

logger = logging.getLogger(__name__)

DEFAULT_CROSSING_PASSES: int = 6


def build_layers(state: LayoutState) -> list[list[int]]:
    """Group nodes by layer and number them; real nodes first, then dummies, each by index."""
    layer_count = (max(n.layer for n in state.nodes) + 1) if state.nodes else 0
    layers: list[list[int]] = [[] for _ in range(layer_count)]
    for idx, node in enumerate(state.nodes):
        layers[node.layer].append(idx)
    for layer in layers:
        for order, idx in enumerate(layer):
            state.nodes[idx].order = order
    state.layers = layers
    return layers


def reduce_crossings(state: LayoutState, passes: int = DEFAULT_CROSSING_PASSES) -> int:
    """Reorder layers with the barycenter heuristic. Returns the number of passes run.

    Even passes sweep downward (each layer sorted against the one above),
    odd passes sweep upward. Stops early once two consecutive passes leave
    every layer unchanged.
    """
    if not state.layers:
        return 0

    up, down = state.neighbor_lists()
    verbose = logger.isEnabledFor(logging.DEBUG)
    before = count_crossings(state) if verbose else 0
    unchanged = 0
    ran = 0

    for pass_idx in range(passes):
        ran += 1
        changed = False
        if pass_idx % 2 == 0:
            for layer_idx in range(1, len(state.layers)):
                changed |= _reorder_layer(state, layer_idx, up)
        else:
            for layer_idx in range(len(state.layers) - 2, -1, -1):
                changed |= _reorder_layer(state, layer_idx, down)

        unchanged = 0 if changed else unchanged + 1
        if unchanged >= 2:
            break

    if verbose:
        logger.debug("crossing reduction: %d passes, crossings %d -> %d", ran, before, count_crossings(state))
    return ran


def _reorder_layer(state: LayoutState, layer_idx: int, neighbors: list[list[int]]) -> bool:
    layer = state.layers[layer_idx]
    nodes = state.nodes

    def barycenter(idx: int) -> float:
        refs = neighbors[idx]
        if not refs:
            return float(nodes[idx].order)
        return sum(nodes[r].order for r in refs) / len(refs)

    reordered = sorted(layer, key=lambda idx: (barycenter(idx), nodes[idx].order))
    if reordered == layer:
        return False
    state.layers[layer_idx] = reordered
    for order, idx in enumerate(reordered):
        nodes[idx].order = order
    return True


def count_crossings(state: LayoutState) -> int:
    """Number of pairwise crossings between links of adjacent layers."""
    by_layer: dict[int, list[tuple[int, int]]] = {}
    for a, b in state.unit_edges():
        na, nb = state.nodes[a], state.nodes[b]
        by_layer.setdefault(na.layer, []).append((na.order, nb.order))

    total = 0
    for edges in by_layer.values():
        for i in range(len(edges)):
            for j in range(i + 1, len(edges)):
                ei, ej = edges[i], edges[j]
                if (ei[0] < ej[0] and ei[1] > ej[1]) or (ei[0] > ej[0] and ei[1] < ej[1]):
                    total += 1
    return total
