"""Layout engine convenience functions."""

from __future__ import annotations

from flowchart_layout.config import LayoutStyle
from flowchart_layout.layout.groups import group_bounds
from flowchart_layout.layout.sugiyama import SugiyamaLayout
from flowchart_layout.layout.types import LayoutGraph
from flowchart_layout.types import Graph


def layout_flowchart(graph: Graph, style: LayoutStyle | None = None) -> LayoutGraph:
    """Run the full layout pipeline on ``graph``.

    Args:
        graph: Nodes, edges and direction to lay out.
        style: Spacing and heuristic options; defaults to ``LayoutStyle()``.

    Returns:
        Positioned real nodes, one routed edge per declared edge and the extent.

    Raises:
        InvalidGraphError: If an edge names an undeclared node, a node id is
            declared twice, or a node size is not positive.
        InvalidStyleError: If a style option is out of range.
        LayoutInvariantError: If a phase breaks a pipeline invariant (a bug).
    """
    return SugiyamaLayout(style).layout(graph)


def layout_with_groups(
    graph: Graph,
    groups: dict[str, list[str]],
    style: LayoutStyle | None = None,
    padding: float = 0.0,
) -> LayoutGraph:
    """Lay out ``graph`` and attach the bounding box of each group."""
    result = layout_flowchart(graph, style)
    result.groups = group_bounds(result, groups, padding)
    return result
