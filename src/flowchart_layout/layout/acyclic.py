"""Cycle breaking by depth-first search.

Edges pointing at a node that is still on the DFS stack are back-edges; they
are flagged ``reversed`` so ranking treats them as running from target to
source. Endpoints are left untouched so routing keeps the real direction.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from flowchart_layout.layout.state import LayoutState

logger = logging.getLogger(__name__)

_UNVISITED = 0
_ON_STACK = 1
_DONE = 2


def break_cycles(state: LayoutState) -> list[int]:
    """Flag back-edges as reversed. Returns the reversed edge indices in discovery order.

    Roots are tried in node declaration order and outgoing edges in edge
    declaration order, so the result is reproducible. Self-loops always end
    up reversed since their target is on the stack.
    """
    adjacency: list[list[int]] = [[] for _ in range(state.real_count)]
    for edge in state.edges:
        edge.reversed = False
        adjacency[edge.orig_from].append(edge.index)

    marks = [_UNVISITED] * state.real_count
    reversed_edges: list[int] = []

    for root in range(state.real_count):
        if marks[root] != _UNVISITED:
            continue
        marks[root] = _ON_STACK
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency[root]))]
        while stack:
            node, pending = stack[-1]
            descended = False
            for edge_idx in pending:
                target = state.edges[edge_idx].orig_to
                if marks[target] == _UNVISITED:
                    marks[target] = _ON_STACK
                    stack.append((target, iter(adjacency[target])))
                    descended = True
                    break
                if marks[target] == _ON_STACK:
                    state.edges[edge_idx].reversed = True
                    reversed_edges.append(edge_idx)
            if not descended:
                marks[node] = _DONE
                stack.pop()

    logger.debug("cycle breaking reversed %d of %d edges", len(reversed_edges), len(state.edges))
    return reversed_edges
