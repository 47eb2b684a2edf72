"""
Core music primitives - the Radix layer.

These are the mathematical invariants that everything else composes on:
- PitchClass: The 12 chromatic pitch classes (0-11)
- Interval: Distance between pitches in semitones
- Pitch conversions: note name <-> pitch number <-> frequency
- ScalePattern: Step pattern defining a scale
- ChordPattern: Offset stack defining a chord quality
- Chord: Concrete root + member pitches
- Adapters: sibling app formats (frequencies, pitch numbers)
"""

from gml_theory.core.adapters import from_quartet, from_riff_gen, to_quartet, to_riff_gen
from gml_theory.core.chord import Chord, ChordPattern
from gml_theory.core.pitch import (
    MAX_PITCH,
    MIN_PITCH,
    Interval,
    PitchClass,
    frequency_to_note,
    frequency_to_pitch,
    is_valid_pitch,
    note_to_frequency,
    note_to_pitch,
    pitch_to_frequency,
    pitch_to_note,
    resolve_pitch,
)
from gml_theory.core.scale import ScalePattern

__all__ = [
    # Pitch
    "MAX_PITCH",
    "MIN_PITCH",
    "PitchClass",
    "Interval",
    "frequency_to_note",
    "frequency_to_pitch",
    "is_valid_pitch",
    "note_to_frequency",
    "note_to_pitch",
    "pitch_to_frequency",
    "pitch_to_note",
    "resolve_pitch",
    # Scale
    "ScalePattern",
    # Chord
    "Chord",
    "ChordPattern",
    # Adapters
    "from_quartet",
    "from_riff_gen",
    "to_quartet",
    "to_riff_gen",
]
