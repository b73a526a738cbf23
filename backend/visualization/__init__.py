"""
Visualization - Dependencies view layout.

Takes a fetched dependency payload, validates it, computes layout and grid,
returns them for render. The fetch itself happens elsewhere.
"""

from typing import Any, Dict, Optional, Union

import orjson

from layout import SprintOverflow, build_dependency_grid, compute_dependency_layout
from layout.dependency_layout import DependencyLayout
from layout.models import DependencyPayload

__all__ = [
    "build_layout_from_payload",
    "compute_layout_from_payload",
    "parse_dependency_payload",
    "parse_overflow",
]


def parse_overflow(value: Optional[Union[str, SprintOverflow]]) -> SprintOverflow:
    """None -> keep. Unknown names raise ValueError."""
    if value is None or value == "":
        return SprintOverflow.KEEP
    try:
        return SprintOverflow(value)
    except ValueError:
        raise ValueError(f"Unknown sprint overflow policy: {value!r}")


def parse_dependency_payload(payload: Any) -> DependencyPayload:
    """Accepts a DependencyPayload, a dict, or raw JSON (str / bytes)."""
    if isinstance(payload, DependencyPayload):
        return payload
    if isinstance(payload, (str, bytes, bytearray)):
        try:
            payload = orjson.loads(payload)
        except orjson.JSONDecodeError:
            raise ValueError("Invalid dependency payload format")
    if not isinstance(payload, dict):
        raise ValueError("Invalid dependency payload format")
    return DependencyPayload.model_validate(payload)


def compute_layout_from_payload(
    payload: Any, overflow: Optional[Union[str, SprintOverflow]] = None
) -> DependencyLayout:
    data = parse_dependency_payload(payload)
    return compute_dependency_layout(data.deps, data.max_sprint, parse_overflow(overflow))


def build_layout_from_payload(
    payload: Any, overflow: Optional[Union[str, SprintOverflow]] = None
) -> Dict[str, Any]:
    """Build layout from payload. Returns { layout, grid } for the Dependencies view."""
    layout = compute_layout_from_payload(payload, overflow)
    return {"layout": layout.to_dict(), "grid": build_dependency_grid(layout)}
