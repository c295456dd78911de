"""Centralized configuration for flowchart-layout."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any

from flowchart_layout.errors import InvalidStyleError

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class LayoutStyle:
    """Spacing, sizing and heuristic knobs for the layout pipeline.

    All sizes are abstract units: character cells for text renderers,
    pixels (or points) for raster renderers.
    """

    node_gap: float = 4.0
    layer_gap: float = 3.0
    min_width: float = 3.0
    min_height: float = 3.0
    char_width: float = 1.0
    char_height: float = 1.0
    node_padding_x: float = 1.0
    node_padding_y: float = 1.0
    dummy_size: float = 1.0
    margin: float = 0.0
    crossing_passes: int = 6
    compaction: bool = True
    compaction_passes: int = 2
    spread_ports: bool = True
    widen_for_ports: bool = False  # grow busy nodes so spread ports sit port_gap apart
    port_gap: float = 2.0
    expand_layer_gaps: bool = False  # add lane_gap per extra edge leaving a layer
    lane_gap: float = 1.0

    def validate(self) -> None:
        for name in ("node_gap", "layer_gap", "margin", "node_padding_x", "node_padding_y", "port_gap", "lane_gap"):
            if getattr(self, name) < 0:
                raise InvalidStyleError(f"{name} must not be negative, got {getattr(self, name)}")
        for name in ("min_width", "min_height", "char_width", "char_height", "dummy_size"):
            if getattr(self, name) <= 0:
                raise InvalidStyleError(f"{name} must be positive, got {getattr(self, name)}")
        if self.crossing_passes < 1:
            raise InvalidStyleError(f"crossing_passes must be at least 1, got {self.crossing_passes}")
        if self.compaction_passes < 0:
            raise InvalidStyleError(f"compaction_passes must not be negative, got {self.compaction_passes}")

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> LayoutStyle:
        """Build a style from plain (possibly string) values, e.g. CLI ``KEY=VALUE`` pairs."""
        defaults = cls()
        known = {f.name for f in fields(cls)}
        changes: dict[str, Any] = {}
        for key, raw in values.items():
            name = key.replace("-", "_")
            if name not in known:
                raise InvalidStyleError(f"unknown style option '{key}'")
            changes[name] = _coerce(name, raw, getattr(defaults, name))
        style = replace(defaults, **changes)
        style.validate()
        return style


def _coerce(name: str, raw: Any, default: Any) -> Any:
    if isinstance(default, bool):
        if isinstance(raw, bool):
            return raw
        text = str(raw).strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
        raise InvalidStyleError(f"{name} expects a boolean, got '{raw}'")
    try:
        if isinstance(default, int):
            return int(raw)
        return float(raw)
    except (TypeError, ValueError):
        raise InvalidStyleError(f"{name} expects a number, got '{raw}'") from None
