"""Compact string encoding for launcher widget locations."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from lightcycle.core.models import ExcludedRegion

logger = logging.getLogger(__name__)

RECTANGLE_LENGTH = 4


def decode_widget_locations(text: str) -> tuple[ExcludedRegion, ...]:
    """Parse consecutive ``LTRB`` digit groups into excluded regions.

    Groups containing anything other than digits are skipped.
    """
    raw = text.strip()
    if len(raw) % RECTANGLE_LENGTH != 0:
        raise ValueError(f"widget location string length must be a multiple of {RECTANGLE_LENGTH}")

    regions: list[ExcludedRegion] = []
    for start in range(0, len(raw), RECTANGLE_LENGTH):
        chunk = raw[start : start + RECTANGLE_LENGTH]
        if not (chunk.isascii() and chunk.isdigit()):
            logger.warning("invalid_widget_rectangle chunk=%r offset=%d", chunk, start)
            continue
        left, top, right, bottom = (int(ch) for ch in chunk)
        regions.append(ExcludedRegion(left, top, right, bottom))
    return tuple(regions)


def encode_widget_locations(regions: Iterable[ExcludedRegion]) -> str:
    """Serialize regions back into the ``LTRB`` digit-group form."""
    parts: list[str] = []
    for region in regions:
        values = (region.left, region.top, region.right, region.bottom)
        if any(value > 9 for value in values):
            raise ValueError("widget location coordinates must be single digits")
        parts.append("".join(str(value) for value in values))
    return "".join(parts)
