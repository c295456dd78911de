"""Mutable layout state shared by the pipeline phases.

Nodes and edges live in flat lists and refer to each other by index only:
edges hold node indices, layers hold node index lists, dummy nodes hold the
index of the logical edge they belong to. Real nodes occupy indices
``0..real_count-1`` in declaration order; dummies are appended after them.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from flowchart_layout.ir.graph import GraphIR
from flowchart_layout.layout.types import LayoutGraph, LayoutNode, RoutedEdge
from flowchart_layout.types import Direction, EdgeArrow, EdgeStyle, NodeShape


@dataclass
class WorkNode:
    id: str
    width: float
    height: float
    label: str | None = None
    shape: NodeShape = NodeShape.Plain
    layer: int = 0
    order: int = 0
    x: float = 0.0
    y: float = 0.0
    is_dummy: bool = False
    edge_index: int | None = None


@dataclass
class EdgeMeta:
    """One declared edge. ``orig_from``/``orig_to`` are never rewritten."""

    index: int
    orig_from: int
    orig_to: int
    label: str | None = None
    style: EdgeStyle = EdgeStyle.Solid
    arrow: EdgeArrow = EdgeArrow.Forward
    reversed: bool = False

    @property
    def is_self_loop(self) -> bool:
        return self.orig_from == self.orig_to

    @property
    def rank_source(self) -> int:
        """Tail of the edge as seen by ranking (flipped when reversed)."""
        return self.orig_to if self.reversed else self.orig_from

    @property
    def rank_target(self) -> int:
        return self.orig_from if self.reversed else self.orig_to


@dataclass
class EdgeChain:
    """Nodes visited by one logical edge, in increasing rank order."""

    edge_index: int
    nodes: list[int]

    @property
    def dummies(self) -> list[int]:
        return self.nodes[1:-1]


@dataclass
class LayoutState:
    direction: Direction
    nodes: list[WorkNode]
    edges: list[EdgeMeta]
    real_count: int
    ir: GraphIR = field(repr=False)
    chains: list[EdgeChain] = field(default_factory=list)
    layers: list[list[int]] = field(default_factory=list)
    width: float = 0.0
    height: float = 0.0

    @classmethod
    def from_ir(cls, gir: GraphIR) -> LayoutState:
        nodes = [
            WorkNode(id=n.id, width=n.width, height=n.height, label=n.label, shape=n.shape) for n in gir.nodes
        ]
        edges = [
            EdgeMeta(
                index=e.index,
                orig_from=e.from_index,
                orig_to=e.to_index,
                label=e.label,
                style=e.style,
                arrow=e.arrow,
            )
            for e in gir.edges
        ]
        return cls(direction=gir.direction, nodes=nodes, edges=edges, real_count=len(nodes), ir=gir)

    @property
    def dummy_count(self) -> int:
        return len(self.nodes) - self.real_count

    def unit_edges(self) -> list[tuple[int, int]]:
        """Consecutive chain links, each joining layer ``r`` to layer ``r + 1``."""
        links: list[tuple[int, int]] = []
        for chain in self.chains:
            for a, b in zip(chain.nodes, chain.nodes[1:]):
                if a != b:
                    links.append((a, b))
        return links

    def neighbor_lists(self) -> tuple[list[list[int]], list[list[int]]]:
        """Per node: (neighbours in the layer above, neighbours in the layer below)."""
        up: list[list[int]] = [[] for _ in self.nodes]
        down: list[list[int]] = [[] for _ in self.nodes]
        for a, b in self.unit_edges():
            if self.nodes[b].layer == self.nodes[a].layer + 1:
                down[a].append(b)
                up[b].append(a)
        return up, down

    def to_layout_graph(self, routes: list[RoutedEdge]) -> LayoutGraph:
        return LayoutGraph(
            nodes=[
                LayoutNode(
                    id=n.id,
                    layer=n.layer,
                    order=n.order,
                    x=n.x,
                    y=n.y,
                    width=n.width,
                    height=n.height,
                    label=n.label,
                    shape=n.shape,
                )
                for n in self.nodes[: self.real_count]
            ],
            edges=routes,
            width=self.width,
            height=self.height,
            direction=self.direction,
        )
