#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/styled/traits.py
"""Trait application for styled-text fragments.

Each function returns a new fragment in which every run gains one trait
while keeping every attribute it already had. Only the targeted key changes:
bold applied to an italic gray run yields a bold italic gray run. Point size
is the one numeric key, and it is replaced rather than combined.

Runs without a font get the body font at ``base_size`` before a font trait is
applied, so traits never fail on bare runs.

"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from md2styled.constants import (
    DEFAULT_BASE_FONT_SIZE,
    DEFAULT_BODY_FONT,
    HEADING_SIZE_OFFSET,
    HEADING_SIZE_STEP,
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    ColorRole,
)
from md2styled.styled.attributes import Font, TextAttributes
from md2styled.styled.fragment import StyledText


def _font_or_default(attributes: TextAttributes, base_size: float, family: str) -> Font:
    return attributes.font if attributes.font is not None else Font.body(base_size, family)


def _apply_font_traits(
    fragment: StyledText,
    base_size: float,
    family: str,
    **font_changes: object,
) -> StyledText:
    def update(attributes: TextAttributes) -> TextAttributes:
        font = replace(_font_or_default(attributes, base_size, family), **font_changes)
        return attributes.updated(font=font)

    return fragment.map_attributes(update)


def apply_italic(
    fragment: StyledText, base_size: float = DEFAULT_BASE_FONT_SIZE, family: str = DEFAULT_BODY_FONT
) -> StyledText:
    """Set the italic slant on every run."""
    return _apply_font_traits(fragment, base_size, family, slant="italic")


def apply_bold(
    fragment: StyledText, base_size: float = DEFAULT_BASE_FONT_SIZE, family: str = DEFAULT_BODY_FONT
) -> StyledText:
    """Set the bold weight on every run."""
    return _apply_font_traits(fragment, base_size, family, weight="bold")


def apply_strikethrough(fragment: StyledText) -> StyledText:
    """Turn strikethrough on for every run."""
    return fragment.map_attributes(lambda attributes: attributes.updated(strikethrough=True))


def apply_color(fragment: StyledText, color: ColorRole) -> StyledText:
    """Set the foreground color category of every run, replacing any previous one."""
    return fragment.map_attributes(lambda attributes: attributes.updated(color=color))


def apply_link(fragment: StyledText, target: Optional[str] = None) -> StyledText:
    """Color every run as a link and, when ``target`` is given, make it navigable.

    Parameters
    ----------
    fragment : StyledText
        Link text
    target : str or None, default None
        Resolved destination. When None the runs keep any existing target and
        only receive the link color.

    """

    def update(attributes: TextAttributes) -> TextAttributes:
        if target is None:
            return attributes.updated(color="link")
        return attributes.updated(color="link", link=target)

    return fragment.map_attributes(update)


def heading_point_size(level: int, base_size: float = DEFAULT_BASE_FONT_SIZE) -> float:
    """Return the point size for a heading level.

    Levels are clamped to 1..6; level 1 is ``base_size + 12`` and each
    following level is two points smaller.
    """
    level = max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, level))
    return base_size + (HEADING_SIZE_OFFSET - HEADING_SIZE_STEP * level)


def apply_heading(
    fragment: StyledText,
    level: int,
    base_size: float = DEFAULT_BASE_FONT_SIZE,
    family: str = DEFAULT_BODY_FONT,
) -> StyledText:
    """Make every run bold and replace its point size with the heading size."""
    return _apply_font_traits(fragment, base_size, family, weight="bold", size=heading_point_size(level, base_size))
