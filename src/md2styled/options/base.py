"""Base classes for parser and renderer options.

This module defines the foundation classes for the option objects passed to
md2styled parsers and renderers.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2styled.constants import DEFAULT_BASE_FONT_SIZE


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    base_font_size : float, default 15.0
        Point size of body text. Code, heading and line-break sizes derive from it.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    base_font_size: float = field(
        default=DEFAULT_BASE_FONT_SIZE,
        metadata={"help": "Point size of body text", "type": float, "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for base renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.base_font_size <= 0:
            raise ValueError(f"base_font_size must be positive, got {self.base_font_size}")


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Hook for subclass validation."""
        pass
