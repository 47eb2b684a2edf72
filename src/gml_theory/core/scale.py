"""
Scale primitives - ScalePattern and scale walking.

A scale pattern is an ordered sequence of semitone steps from one degree
to the next (not cumulative). A major scale is W W H W W W H
(2 2 1 2 2 2 1 semitones). Patterns need not span exactly one octave:
pentatonic and blues scales have fewer steps, chromatic has twelve.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .pitch import MAX_PITCH, Interval


@dataclass(frozen=True)
class ScalePattern:
    """
    A named scale defined by its step pattern.

    Immutable and hashable.
    """

    name: str
    steps: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.steps:
            raise ValueError(f"Scale '{self.name}' has no steps")
        if any(step <= 0 for step in self.steps):
            raise ValueError(f"Scale '{self.name}' steps must be positive: {self.steps}")

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Steps as Interval objects."""
        return tuple(Interval(step) for step in self.steps)

    @property
    def span(self) -> int:
        """Total semitones covered by one pass of the pattern."""
        return sum(self.steps)

    def walk(self, root: int) -> Iterator[int]:
        """
        Yield the root pitch, then each pitch reached by the steps.

        Stops before the first pitch above 127 instead of failing.
        """
        current = root
        yield current
        for step in self.steps:
            current += step
            if current > MAX_PITCH:
                return
            yield current

    def __str__(self) -> str:
        return self.name
