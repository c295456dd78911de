"""Longest-path rank assignment over the cycle-broken graph."""

from __future__ import annotations

import logging

import networkx as nx

from flowchart_layout.errors import LayoutInvariantError
from flowchart_layout.layout.state import LayoutState

logger = logging.getLogger(__name__)


def ranking_graph(state: LayoutState) -> nx.DiGraph:
    """Collapse the input MultiDiGraph into the DiGraph ranking sees.

    Reversed edges are flipped, self-loops dropped and parallel edges merged.
    """
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(state.ir.digraph.nodes)
    for u, v, key in state.ir.digraph.edges(keys=True):
        if u == v:
            continue
        if state.edges[key].reversed:
            u, v = v, u
        g.add_edge(u, v)
    return g


def assign_ranks(state: LayoutState) -> list[int]:
    """Give every real node the length of the longest ranking path reaching it.

    Nodes are visited in topological order with ties broken by declaration
    index; rank(v) = max(rank(u) + 1) over logical predecessors u, or 0.
    Self-loops impose no constraint.
    """
    g = ranking_graph(state)
    try:
        order = list(nx.lexicographical_topological_sort(g, key=lambda i: i))
    except nx.NetworkXUnfeasible:
        raise LayoutInvariantError(
            "ranking", "ranking graph must be acyclic", "a cycle survived cycle breaking"
        ) from None

    ranks = [0] * state.real_count
    for node in order:
        for succ in g.successors(node):
            if ranks[succ] < ranks[node] + 1:
                ranks[succ] = ranks[node] + 1

    for idx, rank in enumerate(ranks):
        state.nodes[idx].layer = rank

    logger.debug("ranking produced %d layers", (max(ranks) + 1) if ranks else 0)
    return ranks
