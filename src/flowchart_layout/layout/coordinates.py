"""Coordinate assignment: (layer, order) -> node centre (x, y).

Positions are first computed in a canonical frame where the main axis
carries the rank and the cross axis the order within a layer; the frame is
then mapped onto x/y for the layout direction, mirroring the main axis for
BT and RL.
"""

from __future__ import annotations

import logging

from flowchart_layout.config import LayoutStyle
from flowchart_layout.layout.state import LayoutState, WorkNode
from flowchart_layout.types import Direction

logger = logging.getLogger(__name__)


def _main_size(node: WorkNode, direction: Direction) -> float:
    return node.height if direction.is_vertical else node.width


def _cross_size(node: WorkNode, direction: Direction) -> float:
    return node.width if direction.is_vertical else node.height


def assign_coordinates(state: LayoutState, style: LayoutStyle) -> tuple[float, float]:
    """Write ``x``/``y`` for every node and the overall extent. Returns (width, height).

    Reads only the layers, node sizes and the direction, so running it twice
    gives the same positions.
    """
    direction = state.direction
    nodes = state.nodes
    if not nodes:
        state.width, state.height = 0.0, 0.0
        return (0.0, 0.0)

    if style.widen_for_ports:
        widen_for_ports(state, style)
    gaps = layer_gaps(state, style)

    main = [0.0] * len(nodes)
    cross = [0.0] * len(nodes)

    cursor = 0.0
    for layer_idx, layer in enumerate(state.layers):
        extent = max((_main_size(nodes[i], direction) for i in layer), default=0.0)
        for idx in layer:
            main[idx] = cursor + extent / 2
        if layer_idx < len(gaps):
            cursor += extent + gaps[layer_idx]

    layer_widths: list[float] = []
    for layer in state.layers:
        x = 0.0
        for idx in layer:
            size = _cross_size(nodes[idx], direction)
            cross[idx] = x + size / 2
            x += size + style.node_gap
        layer_widths.append(x - style.node_gap if layer else 0.0)

    widest = max(layer_widths, default=0.0)
    for layer, width in zip(state.layers, layer_widths):
        offset = (widest - width) / 2
        for idx in layer:
            cross[idx] += offset

    if style.compaction:
        _compact(state, cross, style)

    low = min(cross[i] - _cross_size(nodes[i], direction) / 2 for i in range(len(nodes)))
    shift = style.margin - low
    cross = [c + shift for c in cross]
    main = [m + style.margin for m in main]

    cross_extent = max(cross[i] + _cross_size(nodes[i], direction) / 2 for i in range(len(nodes))) + style.margin
    main_extent = max(main[i] + _main_size(nodes[i], direction) / 2 for i in range(len(nodes))) + style.margin

    if direction.is_mirrored:
        main = [main_extent - m for m in main]

    for idx, node in enumerate(nodes):
        if direction.is_vertical:
            node.x, node.y = cross[idx], main[idx]
        else:
            node.x, node.y = main[idx], cross[idx]

    if direction.is_vertical:
        state.width, state.height = cross_extent, main_extent
    else:
        state.width, state.height = main_extent, cross_extent

    logger.debug("coordinates: extent %.1f x %.1f", state.width, state.height)
    return (state.width, state.height)


def widen_for_ports(state: LayoutState, style: LayoutStyle) -> None:
    """Grow real nodes along the cross axis so ports spread on their busiest face sit ``port_gap`` apart.

    The busiest face carries max(outgoing, incoming) ranking edges; self-loops
    do not count. Nodes only ever grow, so calling this twice is harmless.
    """
    direction = state.direction
    outgoing = [0] * state.real_count
    incoming = [0] * state.real_count
    for edge in state.edges:
        if edge.is_self_loop:
            continue
        outgoing[edge.rank_source] += 1
        incoming[edge.rank_target] += 1

    padding = style.node_padding_x if direction.is_vertical else style.node_padding_y
    for idx in range(state.real_count):
        ports = max(outgoing[idx], incoming[idx], 1)
        needed = (ports - 1) * style.port_gap + 2 * padding
        node = state.nodes[idx]
        if direction.is_vertical:
            node.width = max(node.width, needed)
        else:
            node.height = max(node.height, needed)


def layer_gaps(state: LayoutState, style: LayoutStyle) -> list[float]:
    """Main-axis gap after each layer but the last.

    With ``expand_layer_gaps`` every edge beyond the first whose ranking
    source sits on a layer widens the following gap by ``lane_gap``.
    Reversed edges and self-loops are not counted.
    """
    count = max(len(state.layers) - 1, 0)
    gaps = [style.layer_gap] * count
    if not style.expand_layer_gaps:
        return gaps

    lanes = [0] * len(state.layers)
    for edge in state.edges:
        if edge.reversed or edge.is_self_loop:
            continue
        lanes[state.nodes[edge.orig_from].layer] += 1
    for layer_idx in range(count):
        gaps[layer_idx] += max(lanes[layer_idx] - 1, 0) * style.lane_gap
    return gaps


def _compact(state: LayoutState, cross: list[float], style: LayoutStyle) -> None:
    """Pull nodes toward the mean cross position of their neighbours in the adjacent layer.

    Layers are swept top-down then bottom-up ``compaction_passes`` times.
    Within a layer nodes are visited in order and never placed closer than
    ``node_gap`` to their predecessor, so order is preserved.
    """
    up, down = state.neighbor_lists()
    count = len(state.layers)
    for _pass in range(style.compaction_passes):
        for layer_idx in range(1, count):
            _pull_layer(state, state.layers[layer_idx], cross, up, style)
        for layer_idx in range(count - 2, -1, -1):
            _pull_layer(state, state.layers[layer_idx], cross, down, style)


def _pull_layer(
    state: LayoutState,
    layer: list[int],
    cross: list[float],
    neighbors: list[list[int]],
    style: LayoutStyle,
) -> None:
    direction = state.direction
    prev_edge: float | None = None
    for idx in layer:
        half = _cross_size(state.nodes[idx], direction) / 2
        refs = neighbors[idx]
        desired = sum(cross[r] for r in refs) / len(refs) if refs else cross[idx]
        if prev_edge is not None:
            desired = max(desired, prev_edge + style.node_gap + half)
        cross[idx] = desired
        prev_edge = desired + half
