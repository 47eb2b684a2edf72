"""
Counterpoint vocabulary - species, rule identifiers, violations, results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any

from gml_theory.core.pitch import Interval

# Interval classes treated as dissonant on a strong beat:
# m2, M2, P4, TT, m7, M7
DISSONANT_INTERVAL_CLASSES: frozenset[int] = frozenset(
    {
        Interval.MINOR_SECOND.semitones,
        Interval.MAJOR_SECOND.semitones,
        Interval.PERFECT_FOURTH.semitones,
        Interval.TRITONE.semitones,
        Interval.MINOR_SEVENTH.semitones,
        Interval.MAJOR_SEVENTH.semitones,
    }
)

PARALLEL_CATEGORY = "parallel_octaves_or_fifths"


class Species(IntEnum):
    """Fux's five species of counterpoint."""

    NOTE_AGAINST_NOTE = 1
    TWO_AGAINST_ONE = 2
    FOUR_AGAINST_ONE = 3
    SYNCOPATION = 4
    FLORID = 5

    @property
    def label(self) -> str:
        """Snake-case name ('note_against_note', ...)."""
        return self.name.lower()


class RuleSource(str, Enum):
    """Where a rule comes from."""

    FUX = "fux"  # Gradus ad Parnassum
    SCHOENBERG = "schoenberg"  # Fundamentals of Musical Composition
    INPUT = "input"  # Malformed input, not a musical rule


class CounterpointRule(str, Enum):
    """Rule identifiers carried by violations."""

    PARALLEL_FIFTHS = "parallel_fifths"
    PARALLEL_OCTAVES = "parallel_octaves"
    DISSONANCE_ON_STRONG_BEAT = "dissonance_on_strong_beat"
    INVALID_NOTE = "invalid_note"

    @property
    def category(self) -> str:
        """Parallel fifths and octaves share one category."""
        if self in (CounterpointRule.PARALLEL_FIFTHS, CounterpointRule.PARALLEL_OCTAVES):
            return PARALLEL_CATEGORY
        return self.value


@dataclass(frozen=True)
class Violation:
    """A single rule violation at a position in the line."""

    position: int
    rule: CounterpointRule
    source: RuleSource = RuleSource.FUX

    @property
    def category(self) -> str:
        """Rule category (parallel fifths/octaves are grouped)."""
        return self.rule.category

    def to_dict(self) -> dict[str, Any]:
        return {
            "position": self.position,
            "type": self.rule.value,
            "category": self.category,
            "source": self.source.value,
        }

    def __str__(self) -> str:
        return f"[{self.source.value}] {self.rule.value} at {self.position}"


@dataclass(frozen=True)
class MotionCheck:
    """Result of checking one pair of voice movements."""

    valid: bool
    rule: CounterpointRule | None = None
    source: RuleSource = RuleSource.FUX

    def to_dict(self) -> dict[str, Any]:
        if self.valid:
            return {"valid": True}
        rule = self.rule.value if self.rule else None
        return {"valid": False, "error": rule, "source": self.source.value}


@dataclass
class CounterpointResult:
    """
    Result of validating a counterpoint line.

    Violations keep discovery order: ascending position, and within a
    position the dissonance check precedes the parallel-motion check.
    """

    species: Species
    violations: list[Violation] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        """True iff no violations were found."""
        return not self.violations

    def by_rule(self, rule: CounterpointRule) -> list[Violation]:
        """Violations of one rule."""
        return [v for v in self.violations if v.rule == rule]

    def __bool__(self) -> bool:
        """Boolean conversion returns valid."""
        return self.valid

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "species": int(self.species),
            "violations": [v.to_dict() for v in self.violations],
        }

    def __str__(self) -> str:
        if not self.violations:
            return "Counterpoint valid: no violations"
        return "\n".join(str(v) for v in self.violations)
