"""
Counterpoint Validator - checks a counterpoint voice against a cantus firmus.

Walks both lines position by position:
- Species 1: dissonant interval classes are forbidden on every note
- All species: parallel fifths/octaves between consecutive positions

Species 2-5 currently receive only the parallel-motion check.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from gml_theory.core.pitch import Interval, resolve_pitch
from gml_theory.counterpoint.motion import Note, check_parallel_motion
from gml_theory.counterpoint.rules import (
    DISSONANT_INTERVAL_CLASSES,
    CounterpointResult,
    CounterpointRule,
    RuleSource,
    Species,
    Violation,
)

logger = logging.getLogger(__name__)


class CounterpointValidator:
    """Validates two-voice counterpoint for one species."""

    def __init__(self, species: int | Species = Species.NOTE_AGAINST_NOTE) -> None:
        """
        Initialize the validator.

        Args:
            species: Species number 1-5

        Raises:
            ValueError: If species is not 1-5
        """
        self.species = Species(species)

    def validate(
        self,
        cantus: Sequence[Note],
        counterpoint: Sequence[Note],
    ) -> CounterpointResult:
        """
        Validate a counterpoint line against a cantus firmus.

        Lines of different length are compared up to the shorter one.

        Args:
            cantus: Cantus firmus notes (names or pitches)
            counterpoint: Counterpoint voice notes

        Returns:
            CounterpointResult with violations in discovery order
        """
        result = CounterpointResult(species=self.species)
        length = min(len(cantus), len(counterpoint))

        if len(cantus) != len(counterpoint):
            logger.debug(
                f"Line lengths differ ({len(cantus)} vs {len(counterpoint)}), "
                f"checking first {length} positions"
            )

        for i in range(length):
            self._check_position(cantus, counterpoint, i, result)

        return result

    def _check_position(
        self,
        cantus: Sequence[Note],
        counterpoint: Sequence[Note],
        i: int,
        result: CounterpointResult,
    ) -> None:
        """Run the vertical check, then the motion check, at one position."""
        lower = resolve_pitch(cantus[i])
        upper = resolve_pitch(counterpoint[i])

        if lower is None or upper is None:
            result.violations.append(
                Violation(i, CounterpointRule.INVALID_NOTE, RuleSource.INPUT)
            )
            return

        if self.species == Species.NOTE_AGAINST_NOTE:
            interval_class = Interval.between(lower, upper).simple
            if interval_class in DISSONANT_INTERVAL_CLASSES:
                result.violations.append(Violation(i, CounterpointRule.DISSONANCE_ON_STRONG_BEAT))

        if i > 0:
            motion = check_parallel_motion(
                cantus[i - 1], cantus[i], counterpoint[i - 1], counterpoint[i]
            )
            if not motion.valid and motion.rule is not None:
                result.violations.append(Violation(i, motion.rule, motion.source))


def validate_counterpoint(
    cantus: Sequence[Note],
    counterpoint: Sequence[Note],
    species: int | Species = Species.NOTE_AGAINST_NOTE,
) -> CounterpointResult:
    """
    Convenience function to validate a counterpoint line.

    Args:
        cantus: Cantus firmus notes
        counterpoint: Counterpoint voice notes
        species: Species number 1-5 (default 1)

    Returns:
        CounterpointResult with any violations found
    """
    validator = CounterpointValidator(species)
    return validator.validate(cantus, counterpoint)
