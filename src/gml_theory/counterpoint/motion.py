"""
Voice motion - parallel fifths/octaves and nearest-note voice leading.

The parallel check compares interval classes only. It does not look at the
direction each voice moves, so contrary or oblique motion from one fifth
into another fifth is flagged as well.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from gml_theory.core.pitch import Interval, pitch_to_note, resolve_pitch
from gml_theory.counterpoint.rules import CounterpointRule, MotionCheck, RuleSource

Note = str | int


def check_parallel_motion(
    voice1_start: Note,
    voice1_end: Note,
    voice2_start: Note,
    voice2_end: Note,
) -> MotionCheck:
    """
    Check two voices moving between two positions for parallel perfect intervals.

    Args:
        voice1_start: First voice, earlier note (name or pitch)
        voice1_end: First voice, later note
        voice2_start: Second voice, earlier note
        voice2_end: Second voice, later note

    Returns:
        MotionCheck - invalid with PARALLEL_FIFTHS if both intervals are
        class 7, invalid with PARALLEL_OCTAVES if both are class 0,
        otherwise valid. Unparseable notes give a valid result.
    """
    pitches = [resolve_pitch(n) for n in (voice1_start, voice1_end, voice2_start, voice2_end)]
    v1_start, v1_end, v2_start, v2_end = pitches
    if v1_start is None or v1_end is None or v2_start is None or v2_end is None:
        return MotionCheck(valid=True)

    start = Interval.between(v1_start, v2_start).simple
    end = Interval.between(v1_end, v2_end).simple

    fifth = Interval.PERFECT_FIFTH.semitones
    unison = Interval.UNISON.semitones

    if start == fifth and end == fifth:
        return MotionCheck(valid=False, rule=CounterpointRule.PARALLEL_FIFTHS)
    if start == unison and end == unison:
        return MotionCheck(valid=False, rule=CounterpointRule.PARALLEL_OCTAVES)
    return MotionCheck(valid=True)


@dataclass(frozen=True)
class VoiceLeadingSuggestion:
    """Destination notes chosen for each source note."""

    from_notes: tuple[str, ...]
    to_notes: tuple[str, ...]
    method: str = "closest"
    source: str = RuleSource.SCHOENBERG.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": list(self.from_notes),
            "to": list(self.to_notes),
            "method": self.method,
            "source": self.source,
        }


def suggest_voice_leading(
    chord_from: Sequence[str],
    chord_to: Sequence[str],
    source: str = RuleSource.SCHOENBERG.value,
) -> VoiceLeadingSuggestion | None:
    """
    Move each note of one chord to the nearest note of the next.

    For every source note, the destination pitch with the smallest absolute
    semitone distance wins; on a tie the earlier destination note is kept.
    Several source notes may land on the same destination note.

    Args:
        chord_from: Source chord note names
        chord_to: Destination chord note names
        source: Book tag recorded on the suggestion

    Returns:
        VoiceLeadingSuggestion in source-note order, or None if either
        chord is empty or holds an invalid note name
    """
    if not chord_from or not chord_to:
        return None

    sources = [p for p in (resolve_pitch(n) for n in chord_from) if p is not None]
    targets = [p for p in (resolve_pitch(n) for n in chord_to) if p is not None]
    if len(sources) != len(chord_from) or len(targets) != len(chord_to):
        return None

    voicing: list[str] = []
    for pitch in sources:
        closest = targets[0]
        for candidate in targets[1:]:
            if abs(candidate - pitch) < abs(closest - pitch):
                closest = candidate
        voicing.append(pitch_to_note(closest) or "")

    return VoiceLeadingSuggestion(
        from_notes=tuple(chord_from),
        to_notes=tuple(voicing),
        source=source,
    )
