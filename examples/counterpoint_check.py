#!/usr/bin/env python3
"""
Example: Check a first-species line and render it to MIDI.

Usage:
    python examples/counterpoint_check.py
    # Creates: examples/output/first_species.mid
"""

from pathlib import Path

from gml_theory.compiler import voices_to_midi
from gml_theory.counterpoint import suggest_voice_leading, validate_counterpoint

CANTUS = ["D4", "F4", "E4", "D4", "G4", "F4", "A4", "G4", "F4", "E4", "D4"]
GOOD = ["A4", "A4", "G4", "A4", "B4", "C5", "C5", "B4", "D5", "C#5", "D5"]
FAULTY = ["A4", "C5", "B4", "A4", "D5", "C5", "E5", "D5", "A4", "A4", "D5"]


def main() -> None:
    """Validate two counterpoints against the same cantus."""
    for label, line in (("good", GOOD), ("faulty", FAULTY)):
        result = validate_counterpoint(CANTUS, line, species=1)
        print(f"{label}: {'valid' if result.valid else 'invalid'}")
        for violation in result.violations:
            print(f"  {violation}")

    suggestion = suggest_voice_leading(["C4", "E4", "G4"], ["F4", "A4", "C5"])
    if suggestion:
        print(f"\nI -> IV voice leading: {suggestion.to_dict()}")

    output_dir = Path(__file__).parent / "output"
    output_dir.mkdir(exist_ok=True)
    midi = voices_to_midi([CANTUS, GOOD], tempo_bpm=80)
    midi.save(str(output_dir / "first_species.mid"))
    print(f"\nCreated: {output_dir / 'first_species.mid'}")


if __name__ == "__main__":
    main()
