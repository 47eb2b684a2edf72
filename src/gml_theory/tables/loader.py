"""
Theory tables - the scale and chord registries.

Tables are loaded once from YAML files in the built-in library and then
frozen: lookups go through read-only mappings, and the same TheoryTables
instance is handed to every consumer instead of living in a mutable global.
Iteration order follows the YAML file, so chord matching is deterministic.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from gml_theory.core.chord import ChordPattern
from gml_theory.core.scale import ScalePattern

LIBRARY_PATH = Path(__file__).parent / "library"


class TheoryTables:
    """
    Immutable registry of named scale and chord patterns.

    Build one with `load_tables()` (or `default_tables()` for the shipped
    library) and pass it by reference to generators and analyzers.
    """

    __slots__ = ("_scales", "_chords")

    def __init__(
        self,
        scales: Mapping[str, ScalePattern],
        chords: Mapping[str, ChordPattern],
    ) -> None:
        object.__setattr__(self, "_scales", MappingProxyType(dict(scales)))
        object.__setattr__(self, "_chords", MappingProxyType(dict(chords)))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("TheoryTables is immutable")

    @property
    def scales(self) -> Mapping[str, ScalePattern]:
        """Read-only view of scale patterns, in table order."""
        return self._scales

    @property
    def chords(self) -> Mapping[str, ChordPattern]:
        """Read-only view of chord patterns, in table order."""
        return self._chords

    def get_scale(self, name: str) -> ScalePattern | None:
        """Look up a scale pattern by name."""
        return self._scales.get(name)

    def get_chord(self, name: str) -> ChordPattern | None:
        """Look up a chord pattern by name."""
        return self._chords.get(name)

    def scale_names(self) -> list[str]:
        """Scale names in table order."""
        return list(self._scales)

    def chord_names(self) -> list[str]:
        """Chord names in table order."""
        return list(self._chords)

    def __repr__(self) -> str:
        return f"TheoryTables({len(self._scales)} scales, {len(self._chords)} chords)"


def load_tables(library_path: Path | None = None) -> TheoryTables:
    """
    Load scale and chord tables from a library directory.

    The directory must hold `scales.yaml` and `chords.yaml`.

    Args:
        library_path: Directory to read (defaults to the built-in library)

    Returns:
        A frozen TheoryTables

    Raises:
        ValueError: If a file is missing its table or holds a malformed pattern
    """
    base = library_path or LIBRARY_PATH

    scales_data = _read_table(base / "scales.yaml", "scales")
    chords_data = _read_table(base / "chords.yaml", "chords")

    scales = {
        name: ScalePattern(name, _as_steps(name, steps)) for name, steps in scales_data.items()
    }
    chords = {
        name: ChordPattern(name, _as_steps(name, offsets)) for name, offsets in chords_data.items()
    }
    return TheoryTables(scales, chords)


@lru_cache(maxsize=1)
def default_tables() -> TheoryTables:
    """The built-in tables, loaded on first use and shared afterwards."""
    return load_tables(LIBRARY_PATH)


def _read_table(path: Path, key: str) -> dict[str, Any]:
    """Read one YAML table file and return its mapping under `key`."""
    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get(key), dict):
        raise ValueError(f"{path.name}: expected a '{key}' mapping")
    return data[key]


def _as_steps(name: str, values: Any) -> tuple[int, ...]:
    """Coerce a YAML list into a tuple of ints."""
    if not isinstance(values, list) or not all(
        isinstance(v, int) and not isinstance(v, bool) for v in values
    ):
        raise ValueError(f"Pattern '{name}' must be a list of integers, got {values!r}")
    return tuple(values)
