"""
Scale and chord generators.

Both walk upward from a root note using a named pattern from the
theory tables and spell the results as note names. Patterns that run
past pitch 127 are truncated, never wrapped.
"""

from __future__ import annotations

from gml_theory.core.pitch import note_to_pitch, pitch_to_note
from gml_theory.tables import TheoryTables, default_tables


def generate_scale(
    root: str,
    pattern_name: str = "major",
    tables: TheoryTables | None = None,
) -> list[str] | None:
    """
    Generate a scale from a root note.

    The root is emitted first, then one note per step in the pattern
    (so a seven-step major scale yields eight notes, ending on the octave).

    Args:
        root: Root note name (e.g., 'C4')
        pattern_name: Scale pattern name (e.g., 'major', 'dorian', 'blues')
        tables: Theory tables (defaults to the built-in library)

    Returns:
        List of note names, or None if the root or pattern is invalid

    Example:
        generate_scale("C4", "major")
        # ['C4', 'D4', 'E4', 'F4', 'G4', 'A4', 'B4', 'C5']
    """
    tables = tables or default_tables()
    pattern = tables.get_scale(pattern_name)
    root_pitch = note_to_pitch(root)
    if pattern is None or root_pitch is None:
        return None

    return [_spell(p) for p in pattern.walk(root_pitch)]


def build_chord(
    root: str,
    pattern_name: str = "major",
    tables: TheoryTables | None = None,
) -> list[str] | None:
    """
    Build a chord on a root note.

    Args:
        root: Root note name (e.g., 'C4')
        pattern_name: Chord pattern name (e.g., 'major', 'maj7', 'dom13')
        tables: Theory tables (defaults to the built-in library)

    Returns:
        List of note names, or None if the root or pattern is invalid
    """
    tables = tables or default_tables()
    pattern = tables.get_chord(pattern_name)
    root_pitch = note_to_pitch(root)
    if pattern is None or root_pitch is None:
        return None

    return [_spell(p) for p in pattern.stack(root_pitch)]


def _spell(pitch: int) -> str:
    name = pitch_to_note(pitch)
    if name is None:
        raise ValueError(f"Pitch out of range: {pitch}")
    return name
