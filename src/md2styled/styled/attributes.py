#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/styled/attributes.py
"""Attribute types carried by styled-text runs.

A run's attribute set is a frozen ``TextAttributes`` value. Fields left as
``None`` (or ``False`` for flags) are unset, so a rendering surface can tell
"not styled" apart from "styled with the default". ``as_mapping`` exposes the
set as a plain key/value mapping for surfaces that prefer dictionaries.

"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Optional

from md2styled.constants import (
    DEFAULT_BASE_FONT_SIZE,
    DEFAULT_BODY_FONT,
    ColorRole,
    FontSlant,
    FontWeight,
    TabAlignment,
)


@dataclass(frozen=True)
class Font:
    """Font description attached to a run.

    Parameters
    ----------
    family : str
        Font family name (e.g. "Helvetica")
    size : float
        Point size
    weight : {"normal", "bold"}, default "normal"
        Font weight
    slant : {"normal", "italic"}, default "normal"
        Font slant
    monospace : bool, default False
        True for code text drawn in a fixed-width face
    monospaced_digits : bool, default False
        True when digits must share one advance width, as in list numerals

    """

    family: str
    size: float
    weight: FontWeight = "normal"
    slant: FontSlant = "normal"
    monospace: bool = False
    monospaced_digits: bool = False

    @property
    def bold(self) -> bool:
        return self.weight == "bold"

    @property
    def italic(self) -> bool:
        return self.slant == "italic"

    @classmethod
    def body(cls, size: float = DEFAULT_BASE_FONT_SIZE, family: str = DEFAULT_BODY_FONT) -> Font:
        """Return the regular body font at the given size."""
        return cls(family=family, size=size)


@dataclass(frozen=True)
class TabStop:
    """A tab stop: text after the tab aligns to ``location`` by ``alignment``."""

    alignment: TabAlignment
    location: float


@dataclass(frozen=True)
class ParagraphLayout:
    """Paragraph layout attached to the run that starts an indented line.

    Parameters
    ----------
    tab_stops : tuple of TabStop
        Tab stops in increasing location order
    head_indent : float
        Indent of wrapped lines after the first one
    nesting_depth : int
        Depth of the list or block quote that produced this layout (0 = top level)

    """

    tab_stops: tuple[TabStop, ...] = ()
    head_indent: float = 0.0
    nesting_depth: int = 0


@dataclass(frozen=True)
class TextAttributes:
    """The attribute set of one run.

    Parameters
    ----------
    font : Font or None, default None
        Font of the run; None means the surface default
    color : {"default", "muted", "link"} or None, default None
        Foreground color category
    strikethrough : bool, default False
        Whether a single strike line is drawn
    link : str or None, default None
        Navigable link target
    paragraph : ParagraphLayout or None, default None
        Layout for the line this run begins

    """

    font: Optional[Font] = None
    color: Optional[ColorRole] = None
    strikethrough: bool = False
    link: Optional[str] = None
    paragraph: Optional[ParagraphLayout] = field(default=None)

    def updated(self, **changes: Any) -> TextAttributes:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def as_mapping(self) -> dict[str, Any]:
        """Return the set attributes keyed by name, omitting unset ones."""
        mapping: dict[str, Any] = {}
        if self.font is not None:
            mapping["font_family"] = self.font.family
            mapping["font_weight"] = self.font.weight
            mapping["font_slant"] = self.font.slant
            mapping["point_size"] = self.font.size
            mapping["monospace"] = self.font.monospace
        if self.color is not None:
            mapping["foreground_color"] = self.color
        if self.strikethrough:
            mapping["strikethrough"] = True
        if self.link is not None:
            mapping["link"] = self.link
        if self.paragraph is not None:
            mapping["paragraph_layout"] = self.paragraph
        return mapping
