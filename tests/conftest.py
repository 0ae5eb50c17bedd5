"""Pytest configuration and shared fixtures for md2styled test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from md2styled.options import StyledTextRendererOptions
from md2styled.renderers.styled_text import StyledTextRenderer
from md2styled.styled.attributes import Font

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


class FixedWidthMeasurer:
    """Text measurer where every character is ``char_width`` points wide.

    Keeps layout assertions independent of real font metrics.
    """

    def __init__(self, char_width: float = 10.0):
        self.char_width = char_width
        self.calls: list[tuple[str, Font]] = []

    def measure(self, text: str, font: Font) -> float:
        self.calls.append((text, font))
        return len(text) * self.char_width


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")


@pytest.fixture
def fixed_measurer() -> FixedWidthMeasurer:
    """Provide a measurer with 10-point characters."""
    return FixedWidthMeasurer()


@pytest.fixture
def renderer(fixed_measurer: FixedWidthMeasurer) -> StyledTextRenderer:
    """Provide a renderer with default options and the fixed-width measurer."""
    return StyledTextRenderer(StyledTextRendererOptions(), measurer=fixed_measurer)


@pytest.fixture
def body_font() -> Font:
    """The default body font at the default size."""
    return Font(family="Helvetica", size=15.0)


@pytest.fixture
def sample_markdown() -> str:
    """Provide a Markdown document exercising every supported block kind.

    Returns
    -------
    str
        Standard sample text used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

- Item 1
- Item 2

1. First item
2. Second item

> Quoted text

```python
print("Hello")
```
"""
