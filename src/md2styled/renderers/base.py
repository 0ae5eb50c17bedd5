#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that renderers inherit from. It
keeps the options handling shared by every renderer in one place.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from md2styled.ast import Document
from md2styled.exceptions import InvalidOptionsError
from md2styled.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainRenderer(BaseRenderer):
        ...     def render(self, doc):
        ...         return "rendered output"

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document) -> Any:
        """Render the AST and return the renderer's output object.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
