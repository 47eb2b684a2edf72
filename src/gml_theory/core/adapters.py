"""
Adapters for sibling GML app data formats.

RiffGen speaks frequencies (Hz), QuartetEngine speaks pitch numbers.
Everything in this library speaks note names, so these convert at the edge.
Missing input yields None; entries that cannot be converted become None
in place so positions line up with the source list.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .pitch import frequency_to_note, note_to_frequency, note_to_pitch, pitch_to_note


def from_riff_gen(riff_data: Mapping[str, Any] | None) -> list[str | None] | None:
    """Convert a RiffGen payload ({'frequencies': [...]}) to note names."""
    if not riff_data or not riff_data.get("frequencies"):
        return None
    return [frequency_to_note(f) for f in riff_data["frequencies"]]


def from_quartet(quartet_data: Mapping[str, Any] | None) -> list[str | None] | None:
    """Convert a QuartetEngine payload ({'notes': [...]}) to note names."""
    if not quartet_data or not quartet_data.get("notes"):
        return None
    return [pitch_to_note(_whole(p)) for p in quartet_data["notes"]]


def to_riff_gen(notes: Sequence[str] | None) -> list[float | None] | None:
    """Convert note names to RiffGen frequencies."""
    if notes is None:
        return None
    return [note_to_frequency(n) for n in notes]


def to_quartet(notes: Sequence[str] | None) -> list[int | None] | None:
    """Convert note names to QuartetEngine pitch numbers."""
    if notes is None:
        return None
    return [note_to_pitch(n) for n in notes]


def _whole(value: Any) -> Any:
    """JSON may carry 60 as 60.0; integral floats become ints."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value
