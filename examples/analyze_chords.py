#!/usr/bin/env python3
"""
Example: Build scales and chords, then name them back.

Usage:
    python examples/analyze_chords.py
"""

from gml_theory.analysis import analyze_chord, build_chord, generate_scale
from gml_theory.tables import default_tables


def main() -> None:
    """Walk the built-in tables."""
    tables = default_tables()
    print(tables)

    print("\nScales from D4:")
    for name in tables.scale_names():
        print(f"  {name:18} {' '.join(generate_scale('D4', name, tables) or [])}")

    print("\nChords on C4, analyzed back:")
    for name in tables.chord_names():
        notes = build_chord("C4", name, tables) or []
        analysis = analyze_chord(notes, tables)
        found = analysis.type if analysis else "?"
        print(f"  {name:8} {' '.join(notes):32} -> {found}")

    print("\nSomething not in the table:")
    analysis = analyze_chord(["C4", "F#4", "B4"], tables)
    if analysis:
        print(f"  {analysis.to_dict()}")


if __name__ == "__main__":
    main()
