"""
Where each field is drawn on the template.

Coordinates are PDF points. ``y_from_top`` is measured from the top edge of
the target page, so the drawn baseline is ``page_height - y_from_top``.
A placement only applies when the template has a page at ``page``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Sequence, Tuple

from .schemas import FIELD_KEYS

BLACK: Tuple[float, float, float] = (0.0, 0.0, 0.0)
DEFAULT_FONT = "Helvetica"
DEFAULT_FONT_SIZE = 11.0


@dataclass(frozen=True)
class FieldMapping:
    page: int
    key: str
    x: float
    y_from_top: float
    font_size: float = DEFAULT_FONT_SIZE
    color: Tuple[float, float, float] = BLACK


OVERLAY_PLACEMENTS: Tuple[FieldMapping, ...] = (
    # Page 2: property address
    FieldMapping(page=1, key="address", x=190, y_from_top=135),
    # Page 3: price and signature block
    FieldMapping(page=2, key="price", x=70, y_from_top=487),
    FieldMapping(page=2, key="fullName", x=220, y_from_top=603),
    FieldMapping(page=2, key="date", x=400, y_from_top=637),
    # Page 4
    FieldMapping(page=3, key="address", x=190, y_from_top=137),
    FieldMapping(page=3, key="fullName", x=225, y_from_top=630),
    FieldMapping(page=3, key="date", x=410, y_from_top=665),
    # Page 5
    FieldMapping(page=4, key="fullName", x=143, y_from_top=443),
    FieldMapping(page=4, key="date", x=120, y_from_top=512),
)


def load_field_mappings(mapping_path: Path) -> List[FieldMapping]:
    """
    Load a placement table from a JSON list of entries.

    Each entry needs ``page``, ``key``, ``x`` and ``y_from_top``; ``font_size``
    and ``color`` (an RGB triple of 0-1 floats) are optional.
    """
    with mapping_path.open("r", encoding="utf-8") as handle:
        raw = json.load(handle)
    if not isinstance(raw, list):
        raise ValueError(f"Field mapping JSON must be a list in {mapping_path}")
    mappings: List[FieldMapping] = []
    for entry in raw:
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid mapping entry in {mapping_path}")
        key = str(entry["key"])
        if key not in FIELD_KEYS:
            raise ValueError(f"Unknown field '{key}' in {mapping_path}")
        mappings.append(
            FieldMapping(
                page=int(entry["page"]),
                key=key,
                x=float(entry["x"]),
                y_from_top=float(entry["y_from_top"]),
                font_size=float(entry.get("font_size", DEFAULT_FONT_SIZE)),
                color=_parse_color(entry.get("color", BLACK), mapping_path),
            )
        )
    return mappings


def _parse_color(value: Any, mapping_path: Path) -> Tuple[float, float, float]:
    if not isinstance(value, (list, tuple)) or len(value) != 3:
        raise ValueError(f"Color must be an RGB triple in {mapping_path}: {value!r}")
    red, green, blue = (float(component) for component in value)
    return (red, green, blue)


def applicable_placements(
    placements: Sequence[FieldMapping], page_count: int
) -> List[FieldMapping]:
    """Placements whose target page exists in a template of ``page_count`` pages."""
    return [mapping for mapping in placements if 0 <= mapping.page < page_count]
