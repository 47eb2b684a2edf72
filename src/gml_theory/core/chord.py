"""
Chord primitives - ChordPattern and Chord.

Chords are stacks of offsets measured from the root, not stacked thirds.
A major triad is root + M3 + P5 (0, 4, 7 semitones). Extended chords
reach past the octave (a dominant 13th goes up to 21).
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .pitch import MAX_PITCH, Interval, pitch_to_note


@dataclass(frozen=True)
class ChordPattern:
    """
    A named chord quality defined by ascending offsets from the root.

    Offsets are kept in order: the chord analyzer compares them
    element-for-element, so (0, 4, 7) and (0, 7, 4) are different keys.

    Immutable and hashable.
    """

    name: str
    offsets: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.offsets or self.offsets[0] != 0:
            raise ValueError(f"Chord '{self.name}' offsets must start at 0: {self.offsets}")
        if list(self.offsets) != sorted(self.offsets):
            raise ValueError(f"Chord '{self.name}' offsets must ascend: {self.offsets}")

    @property
    def intervals(self) -> tuple[Interval, ...]:
        """Offsets as Interval objects."""
        return tuple(Interval(offset) for offset in self.offsets)

    def matches(self, offsets: tuple[int, ...] | list[int]) -> bool:
        """Exact element-wise match against a root-relative offset sequence."""
        return len(offsets) == len(self.offsets) and all(
            a == b for a, b in zip(offsets, self.offsets, strict=True)
        )

    def stack(self, root: int) -> Iterator[int]:
        """
        Yield root + each offset.

        Stops at the first member above 127; members never wrap.
        """
        for offset in self.offsets:
            pitch = root + offset
            if pitch > MAX_PITCH:
                return
            yield pitch

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Chord:
    """
    A concrete chord: a root pitch plus ordered member pitches.

    This is the resolved form of a note list, before any matching.
    """

    root: int
    members: tuple[int, ...]

    @classmethod
    def from_pitches(cls, pitches: list[int] | tuple[int, ...]) -> Chord:
        """Sort ascending and take the lowest pitch as the root."""
        ordered = tuple(sorted(pitches))
        if not ordered:
            raise ValueError("A chord needs at least one pitch")
        return cls(root=ordered[0], members=ordered)

    @property
    def intervals(self) -> tuple[int, ...]:
        """
        Each member minus the root, ascending.

        Duplicates are kept, so a doubled note never matches a triad.
        """
        return tuple(member - self.root for member in self.members)

    def get_note_names(self) -> list[str]:
        """Spell all members as note names."""
        return [name for name in (pitch_to_note(p) for p in self.members) if name is not None]

    def __str__(self) -> str:
        return " ".join(self.get_note_names())
