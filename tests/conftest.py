"""Shared fixtures: small graph builders used across the test suite."""

from __future__ import annotations

import random

import pytest

from flowchart_layout.ir.graph import GraphIR
from flowchart_layout.layout.state import LayoutState
from flowchart_layout.types import Direction, Graph


def build_graph(*edges: tuple[str, str], nodes: tuple[str, ...] = (), direction: Direction = Direction.TB) -> Graph:
    """Graph with ``nodes`` declared first, then any edge endpoint not yet declared."""
    graph = Graph(direction=direction)
    declared: list[str] = list(nodes)
    for src, tgt in edges:
        for node_id in (src, tgt):
            if node_id not in declared:
                declared.append(node_id)
    for node_id in declared:
        graph.add_node(node_id)
    for src, tgt in edges:
        graph.add_edge(src, tgt)
    return graph


@pytest.fixture
def make_graph():
    return build_graph


@pytest.fixture
def make_state():
    def _make(*edges: tuple[str, str], nodes: tuple[str, ...] = (), direction: Direction = Direction.TB) -> LayoutState:
        return LayoutState.from_ir(GraphIR.from_graph(build_graph(*edges, nodes=nodes, direction=direction)))

    return _make


@pytest.fixture
def random_graph():
    """Reproducible random multigraph (self-loops and parallel edges allowed)."""

    def _make(seed: int, node_count: int = 8, edge_count: int = 14, direction: Direction = Direction.TB) -> Graph:
        rng = random.Random(seed)
        graph = Graph(direction=direction)
        ids = [f"n{i}" for i in range(node_count)]
        for node_id in ids:
            graph.add_node(node_id)
        for _ in range(edge_count):
            graph.add_edge(rng.choice(ids), rng.choice(ids))
        return graph

    return _make
