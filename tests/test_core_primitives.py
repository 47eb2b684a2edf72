"""
Tests for core music primitives.

Tests cover:
- PitchClass and Interval (pitch.py)
- Note name / pitch / frequency conversions (pitch.py)
- ScalePattern (scale.py)
- ChordPattern, Chord (chord.py)
- Sibling app adapters (adapters.py)
"""

import pytest

from gml_theory.core import (
    MAX_PITCH,
    MIN_PITCH,
    Chord,
    ChordPattern,
    Interval,
    PitchClass,
    ScalePattern,
    from_quartet,
    from_riff_gen,
    frequency_to_note,
    frequency_to_pitch,
    is_valid_pitch,
    note_to_frequency,
    note_to_pitch,
    pitch_to_frequency,
    pitch_to_note,
    resolve_pitch,
    to_quartet,
    to_riff_gen,
)


class TestPitchClass:
    """Tests for PitchClass enum."""

    def test_pitch_values(self) -> None:
        """Pitch classes have correct values."""
        assert PitchClass.C == 0
        assert PitchClass.D == 2
        assert PitchClass.E == 4
        assert PitchClass.F == 5
        assert PitchClass.G == 7
        assert PitchClass.A == 9
        assert PitchClass.B == 11

    def test_transpose_wraps(self) -> None:
        """Transposing wraps around the octave in both directions."""
        assert PitchClass.B.transpose(1) == PitchClass.C
        assert PitchClass.G.transpose(7) == PitchClass.D
        assert PitchClass.C.transpose(-1) == PitchClass.B

    def test_to_pitch(self) -> None:
        """C4 is pitch 60."""
        assert PitchClass.C.to_pitch(4) == 60
        assert PitchClass.A.to_pitch(4) == 69
        assert PitchClass.C.to_pitch(-1) == 0

    def test_spell(self) -> None:
        """Black keys are spelled with sharps."""
        assert PitchClass.Cs.spell() == "C#"
        assert PitchClass.As.spell() == "A#"
        assert PitchClass.from_pitch(70).spell() == "A#"

    def test_parse(self) -> None:
        """Parse accepts sharp spellings only."""
        assert PitchClass.parse("F#") == PitchClass.Fs
        assert PitchClass.parse(" C ") == PitchClass.C
        for name in ("H", "Bb", "Db", "E#", "B#"):
            with pytest.raises(ValueError, match="Unknown pitch class"):
                PitchClass.parse(name)


class TestInterval:
    """Tests for Interval."""

    def test_between_is_unsigned(self) -> None:
        """Interval between two pitches ignores order."""
        assert Interval.between(60, 67) == Interval.PERFECT_FIFTH
        assert Interval.between(67, 60) == Interval.PERFECT_FIFTH

    def test_simple_folds_compound_intervals(self) -> None:
        """A twelfth has the same interval class as a fifth."""
        assert Interval(19).simple == 7
        assert Interval(24).simple == 0
        assert Interval.OCTAVE.simple == Interval.UNISON.simple

    def test_ordering_and_hashing(self) -> None:
        """Intervals compare by size and can be used in sets."""
        assert Interval.MINOR_THIRD < Interval.MAJOR_THIRD
        assert Interval.OCTAVE > Interval.MAJOR_SEVENTH
        assert len({Interval(7), Interval.PERFECT_FIFTH}) == 1

    def test_str(self) -> None:
        """Human-readable names."""
        assert str(Interval.PERFECT_FIFTH) == "P5"
        assert str(Interval.OCTAVE) == "P8"
        assert str(Interval(19)) == "P5+1oct"


class TestNoteConversion:
    """Tests for note name <-> pitch conversion."""

    def test_reference_pitches(self) -> None:
        """Known anchors."""
        assert note_to_pitch("C4") == 60
        assert note_to_pitch("A4") == 69
        assert note_to_pitch("C-1") == MIN_PITCH
        assert note_to_pitch("G9") == MAX_PITCH
        assert note_to_pitch("C#4") == 61

    def test_round_trip_all_pitches(self) -> None:
        """name -> pitch -> name is stable for every pitch."""
        for pitch in range(MIN_PITCH, MAX_PITCH + 1):
            name = pitch_to_note(pitch)
            assert name is not None
            assert note_to_pitch(name) == pitch

    def test_surrounding_whitespace_is_ignored(self) -> None:
        """Leading and trailing spaces don't matter."""
        assert note_to_pitch("  D4 ") == 62

    @pytest.mark.parametrize(
        "name",
        ["", "H4", "Db4", "E#4", "B#3", "c4", "C", "4", "C#", "G#9", "C10", "C4x", None, 60],
    )
    def test_invalid_names(self, name) -> None:
        """Malformed or out-of-range names give None."""
        assert note_to_pitch(name) is None

    @pytest.mark.parametrize("pitch", [-1, 128, 60.0, True, "60", None])
    def test_invalid_pitches(self, pitch) -> None:
        """Out-of-range or non-int pitches give None."""
        assert pitch_to_note(pitch) is None
        assert not is_valid_pitch(pitch)

    def test_resolve_pitch(self) -> None:
        """Names and pitch numbers are both accepted."""
        assert resolve_pitch("E4") == 64
        assert resolve_pitch(64) == 64
        assert resolve_pitch(200) is None
        assert resolve_pitch("nope") is None


class TestFrequencyConversion:
    """Tests for pitch <-> frequency conversion."""

    def test_a440(self) -> None:
        """A4 is 440 Hz."""
        assert pitch_to_frequency(69) == pytest.approx(440.0)
        assert note_to_frequency("A4") == pytest.approx(440.0)
        assert note_to_frequency("A5") == pytest.approx(880.0)

    def test_middle_c(self) -> None:
        """C4 is about 261.63 Hz."""
        assert pitch_to_frequency(60) == pytest.approx(261.6256, rel=1e-5)

    def test_round_trip_all_pitches(self) -> None:
        """pitch -> frequency -> pitch is stable for every pitch."""
        for pitch in range(MIN_PITCH, MAX_PITCH + 1):
            assert frequency_to_pitch(pitch_to_frequency(pitch)) == pitch

    def test_nearest_note(self) -> None:
        """Slightly detuned frequencies snap to the nearest note."""
        assert frequency_to_note(445.0) == "A4"
        assert frequency_to_note(262.0) == "C4"

    def test_halfway_rounds_up(self) -> None:
        """A frequency exactly between two pitches goes to the higher one."""
        assert frequency_to_pitch(440.0 * 2 ** (0.5 / 12)) == 70
        assert frequency_to_pitch(440.0 * 2 ** (1.5 / 12)) == 71
        assert frequency_to_pitch(440.0 * 2 ** (-0.5 / 12)) == 69

    @pytest.mark.parametrize("frequency", [0, -440.0, float("nan"), float("inf"), 1e6, "440"])
    def test_invalid_frequencies(self, frequency) -> None:
        """Non-positive, non-finite, non-numeric or out-of-range frequencies give None."""
        assert frequency_to_pitch(frequency) is None
        assert frequency_to_note(frequency) is None


class TestScalePattern:
    """Tests for ScalePattern."""

    def test_span(self) -> None:
        """Heptatonic patterns span an octave."""
        major = ScalePattern("major", (2, 2, 1, 2, 2, 2, 1))
        assert major.span == 12
        assert major.intervals[2] == Interval.MINOR_SECOND

    def test_walk(self) -> None:
        """Walk yields the root then each step."""
        major = ScalePattern("major", (2, 2, 1, 2, 2, 2, 1))
        assert list(major.walk(60)) == [60, 62, 64, 65, 67, 69, 71, 72]

    def test_walk_truncates_at_top(self) -> None:
        """Pitches above 127 are left off, never wrapped."""
        major = ScalePattern("major", (2, 2, 1, 2, 2, 2, 1))
        assert list(major.walk(120)) == [120, 122, 124, 125, 127]

    def test_validation(self) -> None:
        """Empty or non-positive steps are rejected."""
        with pytest.raises(ValueError, match="no steps"):
            ScalePattern("empty", ())
        with pytest.raises(ValueError, match="positive"):
            ScalePattern("stuck", (2, 0, 2))

    def test_immutable(self) -> None:
        """Patterns are frozen."""
        pattern = ScalePattern("blues", (3, 2, 1, 1, 3, 2))
        with pytest.raises(AttributeError):
            pattern.steps = (1,)  # type: ignore[misc]


class TestChordPattern:
    """Tests for ChordPattern."""

    def test_stack(self) -> None:
        """Stack adds each offset to the root."""
        major = ChordPattern("major", (0, 4, 7))
        assert list(major.stack(60)) == [60, 64, 67]

    def test_stack_truncates_at_top(self) -> None:
        """Members above 127 are dropped."""
        dom7 = ChordPattern("dom7", (0, 4, 7, 10))
        assert list(dom7.stack(120)) == [120, 124, 127]

    def test_matches_exactly(self) -> None:
        """Matching is element-wise and length-sensitive."""
        major = ChordPattern("major", (0, 4, 7))
        assert major.matches((0, 4, 7))
        assert major.matches([0, 4, 7])
        assert not major.matches((0, 4, 7, 11))
        assert not major.matches((0, 3, 7))

    def test_validation(self) -> None:
        """Offsets must start at 0 and ascend."""
        with pytest.raises(ValueError, match="start at 0"):
            ChordPattern("rootless", (4, 7))
        with pytest.raises(ValueError, match="ascend"):
            ChordPattern("scrambled", (0, 7, 4))


class TestChord:
    """Tests for Chord."""

    def test_from_pitches_sorts(self) -> None:
        """Lowest pitch becomes the root."""
        chord = Chord.from_pitches([67, 60, 64])
        assert chord.root == 60
        assert chord.members == (60, 64, 67)
        assert chord.intervals == (0, 4, 7)

    def test_duplicates_kept(self) -> None:
        """Doubled notes stay in the interval list."""
        chord = Chord.from_pitches([60, 60, 64, 67])
        assert chord.intervals == (0, 0, 4, 7)

    def test_note_names(self) -> None:
        """Members spell as sharp note names."""
        chord = Chord.from_pitches([61, 65, 68])
        assert chord.get_note_names() == ["C#4", "F4", "G#4"]
        assert str(chord) == "C#4 F4 G#4"

    def test_empty_rejected(self) -> None:
        """A chord needs a pitch."""
        with pytest.raises(ValueError):
            Chord.from_pitches([])


class TestAdapters:
    """Tests for sibling app adapters."""

    def test_from_riff_gen(self) -> None:
        """Frequencies become nearest note names."""
        assert from_riff_gen({"frequencies": [440.0, 261.63, 0]}) == ["A4", "C4", None]

    def test_from_quartet(self) -> None:
        """Pitch numbers become note names, positions preserved."""
        assert from_quartet({"notes": [60, 200, 67]}) == ["C4", None, "G4"]

    def test_from_quartet_whole_floats(self) -> None:
        """Whole-number floats from JSON are pitch numbers; fractional ones are not."""
        assert from_quartet({"notes": [60.0, 64.5, 67]}) == ["C4", None, "G4"]

    def test_missing_input(self) -> None:
        """Absent or empty payloads give None."""
        assert from_riff_gen(None) is None
        assert from_riff_gen({}) is None
        assert from_quartet({"notes": []}) is None
        assert to_riff_gen(None) is None
        assert to_quartet(None) is None

    def test_to_riff_gen(self) -> None:
        """Note names become frequencies."""
        freqs = to_riff_gen(["A4", "bad"])
        assert freqs is not None
        assert freqs[0] == pytest.approx(440.0)
        assert freqs[1] is None

    def test_to_quartet(self) -> None:
        """Note names become pitch numbers."""
        assert to_quartet(["C4", "E4", "G4"]) == [60, 64, 67]
