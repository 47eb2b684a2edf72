"""
Rendering to MIDI for audition.

    note names → NoteEvent (absolute ticks, per-voice channel) → MIDI File
"""

from gml_theory.compiler.midi import (
    TICKS_PER_BEAT,
    NoteEvent,
    events_to_midi,
    notes_to_events,
    voices_to_midi,
)

__all__ = [
    "TICKS_PER_BEAT",
    "NoteEvent",
    "events_to_midi",
    "notes_to_events",
    "voices_to_midi",
]
