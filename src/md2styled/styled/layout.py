#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/styled/layout.py
"""Layout metrics for nested lists and block quotes.

All functions here are pure arithmetic over nesting depth and measured
widths. Every nesting level moves content ``nesting_indent`` points to the
right of a fixed ``base_margin``. List items use two tab stops: a
right-aligned one that ends the marker column and a left-aligned one where
the item text starts. Block quotes use a single left-aligned stop.

Marker widths come from a ``TextMeasurer``. The default measurer reads the
standard PostScript font metrics that ship with ReportLab, so no font files
or display connection are needed.

"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, Protocol

from md2styled.constants import (
    DEFAULT_BASE_LEFT_MARGIN,
    DEFAULT_NESTING_INDENT,
    DEFAULT_TAB_SPACING,
    DEPS_METRICS,
)
from md2styled.exceptions import RenderingError
from md2styled.styled.attributes import Font, ParagraphLayout, TabStop
from md2styled.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


class TextMeasurer(Protocol):
    """Anything that can report the advance width of a string in a font."""

    def measure(self, text: str, font: Font) -> float:
        """Return the width of ``text`` drawn in ``font``, in points."""
        ...


class ReportLabTextMeasurer:
    """Measure text with ReportLab's built-in font metrics.

    Font families are mapped to PostScript face names with
    ``reportlab.lib.fonts.tt2ps`` so bold and italic fonts measure with the
    matching face (e.g. "Helvetica" bold italic becomes "Helvetica-BoldOblique").

    Raises
    ------
    RenderingError
        From ``measure`` when a family is not known to ReportLab

    """

    @requires_dependencies("metrics", DEPS_METRICS)
    def __init__(self) -> None:
        from reportlab.lib.fonts import tt2ps
        from reportlab.pdfbase import pdfmetrics

        self._tt2ps = tt2ps
        self._pdfmetrics = pdfmetrics
        self._face_names: dict[tuple[str, bool, bool], str] = {}

    def _face_name(self, font: Font) -> str:
        key = (font.family, font.bold, font.italic)
        cached = self._face_names.get(key)
        if cached is not None:
            return cached

        try:
            face_name = self._tt2ps(font.family, int(font.bold), int(font.italic))
        except ValueError:
            # Not a registered family; the name may already be a face name
            logger.debug("No face mapping for font family %r, measuring with it directly", font.family)
            face_name = font.family

        try:
            self._pdfmetrics.getFont(face_name)
        except Exception as exc:
            raise RenderingError(
                f"Unknown font for text measurement: {font.family!r}",
                rendering_stage="measurement",
                original_error=exc,
            ) from exc

        self._face_names[key] = face_name
        return face_name

    def measure(self, text: str, font: Font) -> float:
        """Return the width of ``text`` in ``font`` in points."""
        return float(self._pdfmetrics.stringWidth(text, self._face_name(font), font.size))


class ListColumns(NamedTuple):
    """Tab positions of a list item's marker and text columns."""

    first_tab: float
    second_tab: float
    head_indent: float


def nesting_offset(
    depth: int,
    base_margin: float = DEFAULT_BASE_LEFT_MARGIN,
    nesting_indent: float = DEFAULT_NESTING_INDENT,
) -> float:
    """Return the left offset for content ``depth`` levels deep."""
    return base_margin + nesting_indent * depth


def list_indent(
    depth: int,
    base_margin: float = DEFAULT_BASE_LEFT_MARGIN,
    nesting_indent: float = DEFAULT_NESTING_INDENT,
) -> float:
    """Left edge of a list's marker column at nesting ``depth``."""
    return nesting_offset(depth, base_margin, nesting_indent)


def quote_indent(
    depth: int,
    base_margin: float = DEFAULT_BASE_LEFT_MARGIN,
    nesting_indent: float = DEFAULT_NESTING_INDENT,
) -> float:
    """Text indent of a block quote at nesting ``depth``."""
    return nesting_offset(depth, base_margin, nesting_indent)


def column_width(measurer: TextMeasurer, text: str, font: Font) -> float:
    """Measured width of ``text`` rounded up to a whole point."""
    return float(math.ceil(measurer.measure(text, font)))


def bullet_column_width(measurer: TextMeasurer, glyph: str, font: Font) -> float:
    """Width of the bullet column: the bullet glyph at the body font."""
    return column_width(measurer, glyph, font)


def numeral_column_width(measurer: TextMeasurer, widest_number: int, font: Font) -> float:
    """Width of the numeral column, sized for the label ``"{widest_number}."``.

    Every item in a list shares this width so the numerals right-align in one
    column; item 1 of an eleven-item list is sized as ``"11."``.
    """
    return column_width(measurer, f"{widest_number}.", font)


def list_columns(
    depth: int,
    marker_width: float,
    base_margin: float = DEFAULT_BASE_LEFT_MARGIN,
    nesting_indent: float = DEFAULT_NESTING_INDENT,
    tab_spacing: float = DEFAULT_TAB_SPACING,
) -> ListColumns:
    """Compute the tab positions for a list item at ``depth``."""
    first_tab = list_indent(depth, base_margin, nesting_indent) + marker_width
    second_tab = first_tab + tab_spacing
    return ListColumns(first_tab=first_tab, second_tab=second_tab, head_indent=second_tab)


def list_item_layout(
    depth: int,
    marker_width: float,
    base_margin: float = DEFAULT_BASE_LEFT_MARGIN,
    nesting_indent: float = DEFAULT_NESTING_INDENT,
    tab_spacing: float = DEFAULT_TAB_SPACING,
) -> ParagraphLayout:
    """Paragraph layout for the marker run of a list item."""
    columns = list_columns(depth, marker_width, base_margin, nesting_indent, tab_spacing)
    return ParagraphLayout(
        tab_stops=(
            TabStop(alignment="right", location=columns.first_tab),
            TabStop(alignment="left", location=columns.second_tab),
        ),
        head_indent=columns.head_indent,
        nesting_depth=depth,
    )


def quote_layout(
    depth: int,
    base_margin: float = DEFAULT_BASE_LEFT_MARGIN,
    nesting_indent: float = DEFAULT_NESTING_INDENT,
) -> ParagraphLayout:
    """Paragraph layout for the leading tab run of a block-quote child."""
    indent = quote_indent(depth, base_margin, nesting_indent)
    return ParagraphLayout(
        tab_stops=(TabStop(alignment="left", location=indent),),
        head_indent=indent,
        nesting_depth=depth,
    )
