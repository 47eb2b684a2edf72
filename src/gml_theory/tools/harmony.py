"""
Harmony tools - MCP tools for scales, chords and chord analysis.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from gml_theory.analysis import ChordAnalyzer, build_chord, generate_scale
from gml_theory.constants import ErrorMessages
from gml_theory.tables import TheoryTables

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_harmony_tools(mcp: ChukMCPServer, tables: TheoryTables) -> dict[str, Any]:
    """
    Register scale and chord tools with the MCP server.

    Args:
        mcp: The MCP server instance
        tables: The scale/chord tables shared by all tools

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    analyzer = ChordAnalyzer(tables)

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_patterns() -> str:
        """
        List available scale and chord patterns.

        Returns:
            JSON string with scale and chord names, steps and offsets

        Example:
            theory_list_patterns()
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "scales": {name: list(s.steps) for name, s in tables.scales.items()},
                    "chords": {name: list(c.offsets) for name, c in tables.chords.items()},
                }
            )
        except Exception as e:
            logger.exception("Failed to list patterns")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_patterns"] = theory_list_patterns

    @mcp.tool  # type: ignore[arg-type]
    async def theory_generate_scale(root: str, scale: str = "major") -> str:
        """
        Generate a scale from a root note.

        Notes that would go above G9 (pitch 127) are left off.

        Args:
            root: Root note (e.g., 'D4')
            scale: Scale name (e.g., 'major', 'dorian', 'pentatonic_minor', 'blues')

        Returns:
            JSON string with the scale's note names

        Example:
            theory_generate_scale(root="A3", scale="minor")
        """
        try:
            notes = generate_scale(root, scale, tables)
            if notes is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_SCALE.format(name=scale, root=root),
                    }
                )

            return json.dumps(
                {"status": "success", "root": root, "scale": scale, "notes": notes}
            )
        except Exception as e:
            logger.exception("Failed to generate scale")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_generate_scale"] = theory_generate_scale

    @mcp.tool  # type: ignore[arg-type]
    async def theory_build_chord(root: str, chord: str = "major") -> str:
        """
        Build a chord on a root note.

        Args:
            root: Root note (e.g., 'C4')
            chord: Chord name (e.g., 'major', 'min7', 'dom9', 'maj13')

        Returns:
            JSON string with the chord's note names

        Example:
            theory_build_chord(root="G3", chord="dom7")
        """
        try:
            notes = build_chord(root, chord, tables)
            if notes is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_CHORD.format(name=chord, root=root),
                    }
                )

            return json.dumps({"status": "success", "root": root, "chord": chord, "notes": notes})
        except Exception as e:
            logger.exception("Failed to build chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_build_chord"] = theory_build_chord

    @mcp.tool  # type: ignore[arg-type]
    async def theory_analyze_chord(notes: list[str]) -> str:
        """
        Name the chord formed by a set of notes.

        The lowest note is taken as the root. Unrecognized note sets come
        back with type 'unknown' and their intervals above the root.

        Args:
            notes: Two or more note names

        Returns:
            JSON string with root, type, and notes or intervals

        Example:
            theory_analyze_chord(notes=["C4", "E4", "G4", "B4"])
        """
        try:
            analysis = analyzer.analyze(notes)
            if analysis is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_CHORD_NOTES}
                )

            return json.dumps({"status": "success", "analysis": analysis.to_dict()})
        except Exception as e:
            logger.exception("Failed to analyze chord")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_analyze_chord"] = theory_analyze_chord

    return tools
