#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2styled/styled/fragment.py
"""Styled-text fragments: ordered sequences of attributed runs.

A ``StyledText`` is immutable. Concatenation is the only way fragments are
combined; it never reorders, merges or drops runs, and the empty fragment is
its identity. The model knows nothing about Markdown nodes.

Examples
--------
    >>> from md2styled.styled import Font, TextAttributes, concat, single_run
    >>> attrs = TextAttributes(font=Font.body())
    >>> text = concat(single_run("Hello, ", attrs), single_run("world", attrs))
    >>> text.plain_text
    'Hello, world'
    >>> len(text)
    2

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator

from md2styled.styled.attributes import TextAttributes


@dataclass(frozen=True)
class Run:
    """A contiguous span of text sharing one attribute set."""

    text: str
    attributes: TextAttributes = TextAttributes()

    def with_attributes(self, attributes: TextAttributes) -> Run:
        return Run(self.text, attributes)


@dataclass(frozen=True)
class StyledText:
    """An ordered, immutable sequence of runs.

    Parameters
    ----------
    runs : tuple of Run, default ()
        The runs in display order

    """

    runs: tuple[Run, ...] = ()

    @classmethod
    def empty(cls) -> StyledText:
        return cls()

    @classmethod
    def single_run(cls, text: str, attributes: TextAttributes | None = None) -> StyledText:
        return cls((Run(text, attributes or TextAttributes()),))

    def __add__(self, other: object) -> StyledText:
        if not isinstance(other, StyledText):
            return NotImplemented
        if not other.runs:
            return self
        if not self.runs:
            return other
        return StyledText(self.runs + other.runs)

    def __len__(self) -> int:
        return len(self.runs)

    def __iter__(self) -> Iterator[Run]:
        return iter(self.runs)

    def __bool__(self) -> bool:
        return bool(self.runs)

    @property
    def plain_text(self) -> str:
        """The text of all runs joined, without attributes."""
        return "".join(run.text for run in self.runs)

    def insert_at_start(self, run: Run) -> StyledText:
        """Return a new fragment with ``run`` placed before every existing run."""
        return StyledText((run,) + self.runs)

    def map_attributes(self, update: Callable[[TextAttributes], TextAttributes]) -> StyledText:
        """Return a new fragment with ``update`` applied to every run's attributes."""
        return StyledText(tuple(run.with_attributes(update(run.attributes)) for run in self.runs))

    def coalesced(self) -> StyledText:
        """Merge adjacent runs with equal attribute sets.

        Useful for surfaces that pay per run. The plain text is unchanged.
        """
        merged: list[Run] = []
        for run in self.runs:
            if merged and merged[-1].attributes == run.attributes:
                merged[-1] = Run(merged[-1].text + run.text, run.attributes)
            else:
                merged.append(run)
        return StyledText(tuple(merged))


def empty() -> StyledText:
    """Return the empty fragment (identity of concatenation)."""
    return StyledText.empty()


def single_run(text: str, attributes: TextAttributes | None = None) -> StyledText:
    """Return a one-run fragment."""
    return StyledText.single_run(text, attributes)


def concat(*fragments: StyledText) -> StyledText:
    """Concatenate fragments in order.

    Runs are collected once, so joining many fragments stays linear in the
    total number of runs.
    """
    runs: list[Run] = []
    for fragment in fragments:
        runs.extend(fragment.runs)
    return StyledText(tuple(runs))


def insert_at_start(fragment: StyledText, run: Run) -> StyledText:
    """Return ``fragment`` with ``run`` prepended."""
    return fragment.insert_at_start(run)
