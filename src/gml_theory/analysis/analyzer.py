"""
Chord analyzer - names a set of notes.

The notes are converted to pitches, sorted, and reduced to offsets from
the lowest pitch. Those offsets are compared element-for-element against
every chord pattern of the same length, in table order; the first exact
match names the chord. No match is a normal outcome and is reported as
type 'unknown' together with the offsets, not as an error.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from gml_theory.core.chord import Chord
from gml_theory.core.pitch import note_to_pitch, pitch_to_note
from gml_theory.tables import TheoryTables, default_tables

UNKNOWN_CHORD = "unknown"


@dataclass(frozen=True)
class ChordAnalysis:
    """
    Result of analyzing a note set.

    A matched chord carries the input notes; an unknown chord carries the
    root-relative offsets that failed to match.
    """

    root: str
    type: str
    notes: tuple[str, ...] | None = None
    intervals: tuple[int, ...] | None = None

    @property
    def is_known(self) -> bool:
        """True if a chord pattern matched."""
        return self.type != UNKNOWN_CHORD

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the {root, type, notes} / {root, type, intervals} shape."""
        data: dict[str, Any] = {"root": self.root, "type": self.type}
        if self.is_known:
            data["notes"] = list(self.notes or ())
        else:
            data["intervals"] = list(self.intervals or ())
        return data


class ChordAnalyzer:
    """Matches note sets against the chord patterns of a TheoryTables."""

    def __init__(self, tables: TheoryTables | None = None) -> None:
        self.tables = tables or default_tables()

    def analyze(self, notes: Sequence[str]) -> ChordAnalysis | None:
        """
        Analyze a list of note names.

        Args:
            notes: Two or more note names, in any order

        Returns:
            ChordAnalysis, or None if fewer than two notes are given or
            any note name is invalid
        """
        if len(notes) < 2:
            return None

        pitches = [note_to_pitch(n) for n in notes]
        if any(p is None for p in pitches):
            return None

        chord = Chord.from_pitches([p for p in pitches if p is not None])
        root_name = pitch_to_note(chord.root) or ""
        offsets = chord.intervals

        for name, pattern in self.tables.chords.items():
            if pattern.matches(offsets):
                return ChordAnalysis(root=root_name, type=name, notes=tuple(notes))

        return ChordAnalysis(root=root_name, type=UNKNOWN_CHORD, intervals=offsets)


def analyze_chord(
    notes: Sequence[str],
    tables: TheoryTables | None = None,
) -> ChordAnalysis | None:
    """
    Convenience function to analyze a chord.

    Args:
        notes: Two or more note names
        tables: Theory tables (defaults to the built-in library)

    Returns:
        ChordAnalysis, or None for invalid input
    """
    return ChordAnalyzer(tables).analyze(notes)
