"""Shared type definitions for flowchart-layout.

Enums and the abstract input graph handed to the layout engine by an
upstream parser (or built directly by callers).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any

from flowchart_layout.errors import InvalidGraphError


class Direction(Enum):
    TB = auto()
    BT = auto()
    LR = auto()
    RL = auto()

    @classmethod
    def default(cls) -> Direction:
        return cls.TB

    @classmethod
    def parse(cls, value: str) -> Direction:
        """Parse a direction name; ``TD`` is accepted as an alias of ``TB``."""
        key = value.strip().upper()
        if key == "TD":
            key = "TB"
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown direction '{value}'; use TB, TD, BT, LR, or RL") from None

    @property
    def is_vertical(self) -> bool:
        """True when ranks run along the y axis."""
        return self in (Direction.TB, Direction.BT)

    @property
    def is_mirrored(self) -> bool:
        """True when rank increases toward the top or the left."""
        return self in (Direction.BT, Direction.RL)


class NodeShape(Enum):
    Plain = auto()  # id
    Bracket = auto()  # id[Label]
    Round = auto()  # id(Label)
    Circle = auto()  # id((Label))
    Diamond = auto()  # id{Label}
    Hexagon = auto()  # id{{Label}}

    @classmethod
    def default(cls) -> NodeShape:
        return cls.Plain


class EdgeStyle(Enum):
    Solid = auto()  # -->
    Dotted = auto()  # -.->
    Thick = auto()  # ==>


class EdgeArrow(Enum):
    None_ = auto()  # ---
    Forward = auto()  # -->


def _enum_member(enum_cls: type[Enum], value: Any, what: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    wanted = str(value).strip().lower().rstrip("_")
    for member in enum_cls:
        if member.name.lower().rstrip("_") == wanted:
            return member
    raise InvalidGraphError(f"unknown {what} '{value}'")


@dataclass
class Node:
    """A declared node. ``width``/``height`` of None means "estimate from the label"."""

    id: str
    label: str | None = None
    shape: NodeShape = field(default_factory=NodeShape.default)
    width: float | None = None
    height: float | None = None

    @property
    def text(self) -> str:
        return self.label if self.label is not None else self.id

    @classmethod
    def from_dict(cls, data: Any) -> Node:
        if isinstance(data, str):
            return cls(id=data)
        if not isinstance(data, dict) or "id" not in data:
            raise InvalidGraphError(f"node entry must be a string or an object with an 'id': {data!r}")
        return cls(
            id=str(data["id"]),
            label=data.get("label"),
            shape=_enum_member(NodeShape, data.get("shape", "plain"), "node shape"),
            width=data.get("width"),
            height=data.get("height"),
        )


@dataclass
class Edge:
    from_id: str
    to_id: str
    label: str | None = None
    style: EdgeStyle = EdgeStyle.Solid
    arrow: EdgeArrow = EdgeArrow.Forward

    @classmethod
    def from_dict(cls, data: Any) -> Edge:
        if isinstance(data, (list, tuple)) and len(data) == 2:
            return cls(from_id=str(data[0]), to_id=str(data[1]))
        if not isinstance(data, dict) or "from" not in data or "to" not in data:
            raise InvalidGraphError(f"edge entry must be a pair or an object with 'from' and 'to': {data!r}")
        return cls(
            from_id=str(data["from"]),
            to_id=str(data["to"]),
            label=data.get("label"),
            style=_enum_member(EdgeStyle, data.get("style", "solid"), "edge style"),
            arrow=_enum_member(EdgeArrow, data.get("arrow", "forward"), "edge arrow"),
        )


@dataclass
class Graph:
    """Abstract flowchart: declared nodes, directed edges and a layout direction."""

    direction: Direction = field(default_factory=Direction.default)
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def add_node(self, id: str, label: str | None = None, **kwargs: Any) -> Node:
        node = Node(id=id, label=label, **kwargs)
        self.nodes.append(node)
        return node

    def add_edge(self, from_id: str, to_id: str, **kwargs: Any) -> Edge:
        edge = Edge(from_id=from_id, to_id=to_id, **kwargs)
        self.edges.append(edge)
        return edge

    @classmethod
    def from_dict(cls, data: Any) -> Graph:
        """Build a graph from a JSON-like mapping (``direction``, ``nodes``, ``edges``)."""
        if not isinstance(data, dict):
            raise InvalidGraphError("graph document must be an object")
        direction = Direction.default()
        if data.get("direction") is not None:
            try:
                direction = Direction.parse(str(data["direction"]))
            except ValueError as e:
                raise InvalidGraphError(str(e)) from None
        return cls(
            direction=direction,
            nodes=[Node.from_dict(n) for n in data.get("nodes", [])],
            edges=[Edge.from_dict(e) for e in data.get("edges", [])],
        )
