"""Layout types handed to renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flowchart_layout.types import Direction, EdgeArrow, EdgeStyle, NodeShape


@dataclass
class Point:
    """A 2D point in layout units."""

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass
class Bounds:
    """Axis-aligned rectangle given by its edges."""

    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    def union(self, other: Bounds) -> Bounds:
        return Bounds(
            left=min(self.left, other.left),
            top=min(self.top, other.top),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    def grow(self, padding: float) -> Bounds:
        return Bounds(self.left - padding, self.top - padding, self.right + padding, self.bottom + padding)


@dataclass
class LayoutNode:
    """A positioned node in the layout. ``x``/``y`` are the centre of its box."""

    id: str
    layer: int
    order: int
    x: float
    y: float
    width: float
    height: float
    label: str | None = None
    shape: NodeShape = NodeShape.Plain

    @property
    def bounds(self) -> Bounds:
        return Bounds(
            left=self.x - self.width / 2,
            top=self.y - self.height / 2,
            right=self.x + self.width / 2,
            bottom=self.y + self.height / 2,
        )


@dataclass
class RoutedEdge:
    """A routed edge. Waypoints run from ``from_id`` to ``to_id``."""

    from_id: str
    to_id: str
    label: str | None
    style: EdgeStyle
    arrow: EdgeArrow
    reversed: bool
    waypoints: list[Point]


@dataclass
class LayoutGraph:
    """Self-contained layout output with everything renderers need."""

    nodes: list[LayoutNode]
    edges: list[RoutedEdge]
    width: float
    height: float
    direction: Direction
    groups: dict[str, Bounds] = field(default_factory=dict)

    @classmethod
    def empty(cls, direction: Direction) -> LayoutGraph:
        return cls(nodes=[], edges=[], width=0.0, height=0.0, direction=direction)

    def node(self, node_id: str) -> LayoutNode:
        for n in self.nodes:
            if n.id == node_id:
                return n
        raise KeyError(node_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "direction": self.direction.name,
            "width": self.width,
            "height": self.height,
            "nodes": [
                {
                    "id": n.id,
                    "label": n.label,
                    "shape": n.shape.name,
                    "layer": n.layer,
                    "order": n.order,
                    "x": n.x,
                    "y": n.y,
                    "width": n.width,
                    "height": n.height,
                }
                for n in self.nodes
            ],
            "edges": [
                {
                    "from": e.from_id,
                    "to": e.to_id,
                    "label": e.label,
                    "style": e.style.name,
                    "arrow": e.arrow.name.rstrip("_"),
                    "reversed": e.reversed,
                    "points": [p.to_tuple() for p in e.waypoints],
                }
                for e in self.edges
            ],
            "groups": {
                name: {"left": b.left, "top": b.top, "right": b.right, "bottom": b.bottom}
                for name, b in self.groups.items()
            },
        }


# Prefix for synthetic node ids
DUMMY_PREFIX = "__dummy_"
