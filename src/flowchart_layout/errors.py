"""Exceptions raised by the layout pipeline.

Caller mistakes (bad graphs, bad style options) derive from ``ValueError``;
internal consistency failures derive from ``RuntimeError`` and indicate a
bug in one of the layout phases.
"""

from __future__ import annotations


class LayoutError(Exception):
    """Base class for every error raised by flowchart-layout."""


class InvalidGraphError(LayoutError, ValueError):
    """The input graph cannot be laid out."""

    def __init__(self, message: str, *, node_id: str | None = None, edge_index: int | None = None) -> None:
        super().__init__(message)
        self.node_id = node_id
        self.edge_index = edge_index


class UnknownNodeError(InvalidGraphError):
    """An edge endpoint refers to a node that was never declared."""


class DuplicateNodeError(InvalidGraphError):
    """The same node id was declared more than once."""


class InvalidNodeSizeError(InvalidGraphError):
    """A node was given a zero or negative size."""


class InvalidStyleError(LayoutError, ValueError):
    """A layout style option is out of range or unknown."""


class LayoutInvariantError(LayoutError, RuntimeError):
    """A layout phase produced state that breaks one of the pipeline invariants."""

    def __init__(self, phase: str, invariant: str, detail: str = "") -> None:
        message = f"{phase}: {invariant}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.phase = phase
        self.invariant = invariant
        self.detail = detail
