"""
Counterpoint and voice leading.

This module provides:
- check_parallel_motion: Parallel fifths/octaves between two voice moves
- suggest_voice_leading: Nearest-note motion from one chord to the next
- CounterpointValidator / validate_counterpoint: Species rules over two lines
"""

from gml_theory.counterpoint.motion import (
    VoiceLeadingSuggestion,
    check_parallel_motion,
    suggest_voice_leading,
)
from gml_theory.counterpoint.rules import (
    DISSONANT_INTERVAL_CLASSES,
    PARALLEL_CATEGORY,
    CounterpointResult,
    CounterpointRule,
    MotionCheck,
    RuleSource,
    Species,
    Violation,
)
from gml_theory.counterpoint.validator import CounterpointValidator, validate_counterpoint

__all__ = [
    "DISSONANT_INTERVAL_CLASSES",
    "PARALLEL_CATEGORY",
    "CounterpointResult",
    "CounterpointRule",
    "CounterpointValidator",
    "MotionCheck",
    "RuleSource",
    "Species",
    "VoiceLeadingSuggestion",
    "Violation",
    "check_parallel_motion",
    "suggest_voice_leading",
    "validate_counterpoint",
]
