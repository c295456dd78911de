"""Post-processing over a finished layout: group bounding boxes and canvas sizing."""

from __future__ import annotations

import math

from flowchart_layout.layout.types import Bounds, LayoutGraph


def group_bounds(layout: LayoutGraph, groups: dict[str, list[str]], padding: float = 0.0) -> dict[str, Bounds]:
    """Bounding box of each group's member rectangles, grown by ``padding``.

    Member ids missing from the layout are ignored; a group with no known
    member is left out of the result. The layout is not modified.
    """
    by_id = {n.id: n for n in layout.nodes}
    result: dict[str, Bounds] = {}
    for name, members in groups.items():
        box: Bounds | None = None
        for member in members:
            node = by_id.get(member)
            if node is None:
                continue
            box = node.bounds if box is None else box.union(node.bounds)
        if box is not None:
            result[name] = box.grow(padding)
    return result


def suggest_canvas_size(layout: LayoutGraph, padding: float = 0.0, scale: float = 1.0) -> tuple[int, int]:
    """Integer canvas size holding the scaled layout plus ``padding`` on every side."""
    width = max(layout.width, 1.0) * scale + padding * 2
    height = max(layout.height, 1.0) * scale + padding * 2
    return (max(math.ceil(width), 1), max(math.ceil(height), 1))
