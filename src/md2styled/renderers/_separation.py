#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/renderers/_separation.py
"""Block separation rules for the styled-text renderer.

A block adds line breaks after itself only when another sibling follows it;
the last child of any container ends flush. How many breaks it adds depends
on its kind and on whether it sits inside a list:

=================  ===============  ==============
Block              Top level        Inside a list
=================  ===============  ==============
paragraph          two              one
heading            two              two
code block         one              one
block quote        two              two
list item          one              one
unordered list     two              two
ordered list       two              one
=================  ===============  ==============

Unordered lists keep two breaks even when nested while ordered lists drop to
one. Both behaviors are deliberate and covered by tests.
"""

from __future__ import annotations

from typing import Literal

from md2styled.constants import DOUBLE_NEWLINE, SINGLE_NEWLINE

BlockKind = Literal[
    "paragraph",
    "heading",
    "code_block",
    "block_quote",
    "list_item",
    "unordered_list",
    "ordered_list",
]

# (top level, inside a list)
_BREAKS: dict[str, tuple[str, str]] = {
    "paragraph": (DOUBLE_NEWLINE, SINGLE_NEWLINE),
    "heading": (DOUBLE_NEWLINE, DOUBLE_NEWLINE),
    "code_block": (SINGLE_NEWLINE, SINGLE_NEWLINE),
    "block_quote": (DOUBLE_NEWLINE, DOUBLE_NEWLINE),
    "list_item": (SINGLE_NEWLINE, SINGLE_NEWLINE),
    "unordered_list": (DOUBLE_NEWLINE, DOUBLE_NEWLINE),
    "ordered_list": (DOUBLE_NEWLINE, SINGLE_NEWLINE),
}


def trailing_breaks(kind: BlockKind, *, has_successor: bool, in_list: bool) -> str:
    """Return the line breaks that follow a block, or "" when none do.

    Parameters
    ----------
    kind : BlockKind
        Kind of block that just ended
    has_successor : bool
        Whether a sibling follows the block in its container
    in_list : bool
        Whether the block is nested inside a list

    Returns
    -------
    str
        "", "\\n" or "\\n\\n"

    """
    if not has_successor:
        return ""
    top_level, nested = _BREAKS[kind]
    return nested if in_list else top_level
