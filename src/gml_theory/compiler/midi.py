"""
MIDI rendering - audition scales, chords and counterpoint lines.

Note names go in, a mido MidiFile comes out. Each voice gets its own
channel, each note (or chord) lasts a fixed number of beats, and the
output is deterministic: same input, same file.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mido import Message, MetaMessage, MidiFile, MidiTrack

from gml_theory.core.pitch import note_to_pitch

# Standard ticks per beat (quarter note)
TICKS_PER_BEAT = 480

DEFAULT_VELOCITY = 90


@dataclass(frozen=True)
class NoteEvent:
    """
    One sounding pitch, in absolute ticks from the start.
    """

    pitch: int  # 0-127
    start_ticks: int
    duration_ticks: int
    velocity: int = DEFAULT_VELOCITY
    channel: int = 0  # 0-15

    def __post_init__(self) -> None:
        """Validate MIDI ranges."""
        if not 0 <= self.pitch <= 127:
            raise ValueError(f"Pitch must be 0-127, got {self.pitch}")
        if not 0 <= self.velocity <= 127:
            raise ValueError(f"Velocity must be 0-127, got {self.velocity}")
        if not 0 <= self.channel <= 15:
            raise ValueError(f"Channel must be 0-15, got {self.channel}")
        if self.start_ticks < 0 or self.duration_ticks < 0:
            raise ValueError("Start and duration ticks must be >= 0")


def notes_to_events(
    notes: Sequence[str | Sequence[str]],
    channel: int = 0,
    beats_per_note: float = 1.0,
    velocity: int = DEFAULT_VELOCITY,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> list[NoteEvent]:
    """
    Lay notes end to end on one channel.

    Each item is a note name or a list of names sounding together (a chord).

    Raises:
        ValueError: If a note name is invalid
    """
    step = int(beats_per_note * ticks_per_beat)
    events: list[NoteEvent] = []

    for index, item in enumerate(notes):
        names = [item] if isinstance(item, str) else list(item)
        for name in names:
            pitch = note_to_pitch(name)
            if pitch is None:
                raise ValueError(f"Invalid note name at position {index}: {name!r}")
            events.append(
                NoteEvent(
                    pitch=pitch,
                    start_ticks=index * step,
                    duration_ticks=step,
                    velocity=velocity,
                    channel=channel,
                )
            )

    return events


def events_to_midi(
    events: Sequence[NoteEvent],
    tempo_bpm: int = 120,
    ticks_per_beat: int = TICKS_PER_BEAT,
) -> MidiFile:
    """
    Convert note events to a single-track MidiFile.

    Note-offs sort before note-ons at the same tick, so repeated pitches
    in a line re-articulate cleanly.
    """
    mid = MidiFile(ticks_per_beat=ticks_per_beat)
    track = MidiTrack()
    mid.tracks.append(track)

    track.append(MetaMessage("set_tempo", tempo=int(60_000_000 / tempo_bpm), time=0))

    timed: list[tuple[int, Message]] = []
    for event in events:
        timed.append(
            (
                event.start_ticks,
                Message(
                    "note_on",
                    channel=event.channel,
                    note=event.pitch,
                    velocity=event.velocity,
                    time=0,
                ),
            )
        )
        timed.append(
            (
                event.start_ticks + event.duration_ticks,
                Message("note_off", channel=event.channel, note=event.pitch, velocity=0, time=0),
            )
        )

    timed.sort(key=lambda x: (x[0], x[1].type != "note_off"))

    current = 0
    for abs_time, msg in timed:
        msg.time = abs_time - current
        track.append(msg)
        current = abs_time

    track.append(MetaMessage("end_of_track", time=0))
    return mid


def voices_to_midi(
    voices: Sequence[Sequence[str | Sequence[str]]],
    tempo_bpm: int = 120,
    beats_per_note: float = 1.0,
) -> MidiFile:
    """
    Render several voices (e.g., cantus firmus and counterpoint) together.

    Voice i plays on channel i.

    Args:
        voices: One note list per voice
        tempo_bpm: Tempo in beats per minute
        beats_per_note: Length of every note

    Returns:
        A mido MidiFile ready to be saved
    """
    if len(voices) > 16:
        raise ValueError(f"At most 16 voices fit on MIDI channels, got {len(voices)}")

    events: list[NoteEvent] = []
    for channel, voice in enumerate(voices):
        events.extend(notes_to_events(voice, channel=channel, beats_per_note=beats_per_note))

    return events_to_midi(events, tempo_bpm=tempo_bpm)
