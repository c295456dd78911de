"""Edge routing through committed node and dummy positions.

Each declared edge becomes one polyline: the exit port of ``from_id``, the
centre of every dummy node on its chain, then the entry port of ``to_id``.
Ports sit on the node side that faces the neighbouring chain node along the
main axis; no smoothing is applied.
"""

from __future__ import annotations

import logging

from flowchart_layout.config import LayoutStyle
from flowchart_layout.layout.state import EdgeChain, LayoutState, WorkNode
from flowchart_layout.layout.types import Point, RoutedEdge

logger = logging.getLogger(__name__)

# (node index, side) where side is +1 for the bottom/right face and -1 for the top/left face
_PortKey = tuple[int, int]


def _semantic_path(state: LayoutState, chain: EdgeChain) -> list[int]:
    """Chain nodes ordered from the edge's declared source to its declared target."""
    edge = state.edges[chain.edge_index]
    return list(reversed(chain.nodes)) if edge.reversed and not edge.is_self_loop else list(chain.nodes)


def _side(state: LayoutState, node: WorkNode, toward: WorkNode) -> int:
    if state.direction.is_vertical:
        return 1 if toward.y > node.y else -1
    return 1 if toward.x > node.x else -1


def _cross_of(state: LayoutState, node: WorkNode) -> float:
    return node.x if state.direction.is_vertical else node.y


def _port(state: LayoutState, node: WorkNode, side: int, offset: float) -> Point:
    if state.direction.is_vertical:
        return Point(x=node.x + offset, y=node.y + side * node.height / 2)
    return Point(x=node.x + side * node.width / 2, y=node.y + offset)


def port_offsets(state: LayoutState, paths: dict[int, list[int]], style: LayoutStyle) -> dict[tuple[int, int], float]:
    """Spread the ports sharing one node side evenly across that side.

    Keys are ``(edge_index, end)`` with ``end`` 0 for the start port and 1 for
    the end port. Ports on a side are ordered by the cross position of the
    node at the other end of their first segment, then by edge index.
    """
    groups: dict[_PortKey, list[tuple[float, int, int]]] = {}
    for edge_index, path in paths.items():
        for end, (here, there) in enumerate(((path[0], path[1]), (path[-1], path[-2]))):
            node, other = state.nodes[here], state.nodes[there]
            key = (here, _side(state, node, other))
            groups.setdefault(key, []).append((_cross_of(state, other), edge_index, end))

    offsets: dict[tuple[int, int], float] = {}
    for (node_idx, _side_sign), members in groups.items():
        members.sort()
        node = state.nodes[node_idx]
        if state.direction.is_vertical:
            reach = max(node.width / 2 - style.node_padding_x, 0.0)
        else:
            reach = max(node.height / 2 - style.node_padding_y, 0.0)
        n = len(members)
        for i, (_cross, edge_index, end) in enumerate(members):
            offsets[(edge_index, end)] = 0.0 if n == 1 else -reach + 2 * reach * i / (n - 1)
    return offsets


def _self_loop(state: LayoutState, node: WorkNode) -> list[Point]:
    """Two points on the trailing cross-axis face; renderers draw the loop outward from there."""
    if state.direction.is_vertical:
        right = node.x + node.width / 2
        return [Point(right, node.y - node.height / 4), Point(right, node.y + node.height / 4)]
    bottom = node.y + node.height / 2
    return [Point(node.x - node.width / 4, bottom), Point(node.x + node.width / 4, bottom)]


def route_edges(state: LayoutState, style: LayoutStyle) -> list[RoutedEdge]:
    """Produce one RoutedEdge per declared edge, in declaration order."""
    paths: dict[int, list[int]] = {}
    for chain in state.chains:
        if not state.edges[chain.edge_index].is_self_loop:
            paths[chain.edge_index] = _semantic_path(state, chain)

    offsets = port_offsets(state, paths, style) if style.spread_ports else {}

    routes: list[RoutedEdge] = []
    for chain in state.chains:
        edge = state.edges[chain.edge_index]
        if edge.is_self_loop:
            waypoints = _self_loop(state, state.nodes[edge.orig_from])
        else:
            path = paths[edge.index]
            first, last = state.nodes[path[0]], state.nodes[path[-1]]
            start = _port(
                state, first, _side(state, first, state.nodes[path[1]]), offsets.get((edge.index, 0), 0.0)
            )
            end = _port(state, last, _side(state, last, state.nodes[path[-2]]), offsets.get((edge.index, 1), 0.0))
            waypoints = [start] + [Point(state.nodes[i].x, state.nodes[i].y) for i in path[1:-1]] + [end]

        routes.append(
            RoutedEdge(
                from_id=state.nodes[edge.orig_from].id,
                to_id=state.nodes[edge.orig_to].id,
                label=edge.label,
                style=edge.style,
                arrow=edge.arrow,
                reversed=edge.reversed,
                waypoints=waypoints,
            )
        )

    logger.debug("routing produced %d edges", len(routes))
    return routes
