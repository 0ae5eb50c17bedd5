#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the node tree into output objects."""

from md2styled.renderers.base import BaseRenderer
from md2styled.renderers.styled_text import StyledTextRenderer

__all__ = ["BaseRenderer", "StyledTextRenderer"]
