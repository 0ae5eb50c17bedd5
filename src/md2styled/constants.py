#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2styled.

This module centralizes the typographic and layout numbers used when turning
a Markdown tree into styled text. Keeping them in one place makes the layout
arithmetic easy to audit against the rendering surface.

Constants are organized by category:
1. Type Definitions - Literal types shared by the styled-text model
2. Typography - Fonts and point sizes
3. Layout - Margins, indentation steps and tab spacing
4. Block Separation - Line-break strings
5. Dependencies - Optional package specifications
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

FontWeight = Literal["normal", "bold"]
FontSlant = Literal["normal", "italic"]
ColorRole = Literal["default", "muted", "link"]
TabAlignment = Literal["left", "right"]

# =============================================================================
# Typography
# =============================================================================

DEFAULT_BASE_FONT_SIZE = 15.0
DEFAULT_BODY_FONT = "Helvetica"
DEFAULT_MONOSPACE_FONT = "Courier"
DEFAULT_NUMERAL_FONT = "Courier"

# Inline code and code blocks are drawn one point below body text
DEFAULT_CODE_SIZE_DELTA = 1.0

# Heading size is base + (HEADING_SIZE_OFFSET - HEADING_SIZE_STEP * level)
HEADING_SIZE_OFFSET = 14.0
HEADING_SIZE_STEP = 2.0
MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6

DEFAULT_BULLET_GLYPH = "•"

# =============================================================================
# Layout
# =============================================================================

DEFAULT_BASE_LEFT_MARGIN = 15.0
DEFAULT_NESTING_INDENT = 20.0
DEFAULT_TAB_SPACING = 8.0

# =============================================================================
# Block Separation
# =============================================================================

SINGLE_NEWLINE = "\n"
DOUBLE_NEWLINE = "\n\n"

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_METRICS = [("reportlab", "reportlab", ">=4.0")]
