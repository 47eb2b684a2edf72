"""
Harmony analysis and generation over the theory tables.

This module provides:
- generate_scale: Root + scale pattern -> note names
- build_chord: Root + chord pattern -> note names
- ChordAnalyzer / analyze_chord: Note names -> chord type (or 'unknown')
"""

from gml_theory.analysis.analyzer import (
    UNKNOWN_CHORD,
    ChordAnalysis,
    ChordAnalyzer,
    analyze_chord,
)
from gml_theory.analysis.generators import build_chord, generate_scale

__all__ = [
    "UNKNOWN_CHORD",
    "ChordAnalysis",
    "ChordAnalyzer",
    "analyze_chord",
    "build_chord",
    "generate_scale",
]
