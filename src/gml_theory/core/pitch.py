"""
Pitch primitives - PitchClass, Interval, and pitch conversions.

A pitch is an integer semitone number in [0, 127] (MIDI note numbers).
Note names like 'C#4' are a display encoding: letter, optional sharp, octave.
Every conversion here is pure and returns None for malformed input
instead of raising, so callers check for the sentinel.
"""

from __future__ import annotations

import math
import re
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar

MIN_PITCH = 0
MAX_PITCH = 127
A4_PITCH = 69
A4_FREQUENCY = 440.0

# Display names (module level to avoid IntEnum member issues)
_NAMES: list[str] = [
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
]

_NOTE_RE = re.compile(r"([A-G]#?)(-?\d+)")


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Note names are always spelled with sharps.
    """

    C = 0
    Cs = 1
    D = 2
    Ds = 3
    E = 4
    F = 5
    Fs = 6
    G = 7
    Gs = 8
    A = 9
    As = 10
    B = 11

    def transpose(self, semitones: int) -> PitchClass:
        """Transpose by a number of semitones (positive or negative)."""
        return PitchClass((self.value + semitones) % 12)

    def to_pitch(self, octave: int = 4) -> int:
        """Convert to a pitch number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self) -> str:
        """Sharp spelling ('C#', never 'Db')."""
        return _NAMES[self.value]

    @classmethod
    def from_pitch(cls, pitch: int) -> PitchClass:
        """Extract pitch class from a pitch number."""
        return cls(pitch % 12)

    @classmethod
    def parse(cls, name: str) -> PitchClass:
        """Parse a sharp spelling like 'C' or 'C#'. 'E#', 'B#' and flats are rejected."""
        name = name.strip()
        if name not in _NAMES:
            raise ValueError(f"Unknown pitch class: {name}")
        return cls(_NAMES.index(name))


@total_ordering
class Interval:
    """
    Distance between pitches in semitones.

    Scales are step patterns, chords are offset stacks, and counterpoint
    rules compare interval classes (the distance folded into one octave).

    Immutable and hashable.
    """

    __slots__ = ("_semitones",)
    _semitones: int

    UNISON: ClassVar[Interval]
    MINOR_SECOND: ClassVar[Interval]
    MAJOR_SECOND: ClassVar[Interval]
    MINOR_THIRD: ClassVar[Interval]
    MAJOR_THIRD: ClassVar[Interval]
    PERFECT_FOURTH: ClassVar[Interval]
    TRITONE: ClassVar[Interval]
    PERFECT_FIFTH: ClassVar[Interval]
    MINOR_SIXTH: ClassVar[Interval]
    MAJOR_SIXTH: ClassVar[Interval]
    MINOR_SEVENTH: ClassVar[Interval]
    MAJOR_SEVENTH: ClassVar[Interval]
    OCTAVE: ClassVar[Interval]

    def __init__(self, semitones: int) -> None:
        """Create an interval with the given number of semitones."""
        object.__setattr__(self, "_semitones", semitones)

    @classmethod
    def between(cls, first: int, second: int) -> Interval:
        """Unsigned interval between two pitches."""
        return cls(abs(second - first))

    @property
    def semitones(self) -> int:
        """Number of semitones in this interval."""
        return self._semitones

    @property
    def simple(self) -> int:
        """
        Interval class: semitones folded into a single octave (0-11).

        Compound intervals collapse onto their simple form, so a
        twelfth (19) and a fifth (7) share class 7.
        """
        return abs(self._semitones) % 12

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones == other._semitones)

    def __lt__(self, other: Interval) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return bool(self._semitones < other._semitones)

    def __hash__(self) -> int:
        return hash(self._semitones)

    def __repr__(self) -> str:
        return f"Interval({self._semitones})"

    def __str__(self) -> str:
        """Human-readable interval name."""
        names = {
            0: "P1",
            1: "m2",
            2: "M2",
            3: "m3",
            4: "M3",
            5: "P4",
            6: "TT",
            7: "P5",
            8: "m6",
            9: "M6",
            10: "m7",
            11: "M7",
        }
        octaves = self._semitones // 12
        base = names[self._semitones % 12]
        if octaves == 0:
            return base
        if octaves == 1 and self._semitones % 12 == 0:
            return "P8"
        return f"{base}+{octaves}oct" if octaves > 0 else f"{base}{octaves}oct"


Interval.UNISON = Interval(0)
Interval.MINOR_SECOND = Interval(1)
Interval.MAJOR_SECOND = Interval(2)
Interval.MINOR_THIRD = Interval(3)
Interval.MAJOR_THIRD = Interval(4)
Interval.PERFECT_FOURTH = Interval(5)
Interval.TRITONE = Interval(6)
Interval.PERFECT_FIFTH = Interval(7)
Interval.MINOR_SIXTH = Interval(8)
Interval.MAJOR_SIXTH = Interval(9)
Interval.MINOR_SEVENTH = Interval(10)
Interval.MAJOR_SEVENTH = Interval(11)
Interval.OCTAVE = Interval(12)


def is_valid_pitch(pitch: object) -> bool:
    """True for an int (not bool) in [0, 127]."""
    if isinstance(pitch, bool) or not isinstance(pitch, int):
        return False
    return MIN_PITCH <= pitch <= MAX_PITCH


def note_to_pitch(name: object) -> int | None:
    """
    Parse a note name like 'C4', 'F#-1' or 'G9' into a pitch number.

    Returns:
        Pitch in [0, 127], or None for malformed or out-of-range names
    """
    if not isinstance(name, str) or not name:
        return None
    match = _NOTE_RE.fullmatch(name.strip())
    if match is None:
        return None

    try:
        pitch_class = PitchClass.parse(match.group(1))
    except ValueError:
        return None

    pitch = pitch_class.to_pitch(int(match.group(2)))
    return pitch if MIN_PITCH <= pitch <= MAX_PITCH else None


def pitch_to_note(pitch: object) -> str | None:
    """Spell a pitch number as a sharp note name (60 -> 'C4')."""
    if not isinstance(pitch, int) or not is_valid_pitch(pitch):
        return None
    octave = pitch // 12 - 1
    return f"{PitchClass.from_pitch(pitch).spell()}{octave}"


def pitch_to_frequency(pitch: object) -> float | None:
    """Equal-tempered frequency in Hz, A4 (69) = 440."""
    if not isinstance(pitch, int) or not is_valid_pitch(pitch):
        return None
    return A4_FREQUENCY * 2 ** ((pitch - A4_PITCH) / 12)


def frequency_to_pitch(frequency: object) -> int | None:
    """
    Nearest pitch number for a frequency in Hz.

    Halfway frequencies round up to the higher pitch. Returns None for
    non-positive or non-numeric frequencies, and for frequencies that
    round outside the pitch range.
    """
    if isinstance(frequency, bool) or not isinstance(frequency, int | float):
        return None
    if not math.isfinite(frequency) or frequency <= 0:
        return None
    pitch = math.floor(12 * math.log2(frequency / A4_FREQUENCY) + A4_PITCH + 0.5)
    return pitch if MIN_PITCH <= pitch <= MAX_PITCH else None


def note_to_frequency(name: object) -> float | None:
    """Frequency in Hz for a note name."""
    pitch = note_to_pitch(name)
    if pitch is None:
        return None
    return pitch_to_frequency(pitch)


def frequency_to_note(frequency: object) -> str | None:
    """Nearest note name for a frequency in Hz."""
    pitch = frequency_to_pitch(frequency)
    if pitch is None:
        return None
    return pitch_to_note(pitch)


def resolve_pitch(note: str | int) -> int | None:
    """Accept either a note name or a pitch number."""
    if isinstance(note, str):
        return note_to_pitch(note)
    return note if is_valid_pitch(note) else None
