"""
Counterpoint tools - MCP tools for voice leading, species checks and audition.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from gml_theory.compiler import voices_to_midi
from gml_theory.constants import ErrorMessages, SuccessMessages
from gml_theory.counterpoint import (
    check_parallel_motion,
    suggest_voice_leading,
    validate_counterpoint,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_counterpoint_tools(mcp: ChukMCPServer, output_dir: Path) -> dict[str, Any]:
    """
    Register counterpoint tools with the MCP server.

    Args:
        mcp: The MCP server instance
        output_dir: Directory for rendered MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_check_parallels(
        voice1_start: str,
        voice1_end: str,
        voice2_start: str,
        voice2_end: str,
    ) -> str:
        """
        Check two voices for parallel fifths or octaves.

        Only the interval class matters: a fifth moving to a twelfth counts,
        and the direction each voice moves is not considered.

        Args:
            voice1_start: First voice, first note (e.g., 'C4')
            voice1_end: First voice, second note
            voice2_start: Second voice, first note
            voice2_end: Second voice, second note

        Returns:
            JSON string with valid flag and the rule broken, if any

        Example:
            theory_check_parallels("C4", "D4", "G4", "A4")
        """
        try:
            check = check_parallel_motion(voice1_start, voice1_end, voice2_start, voice2_end)
            return json.dumps({"status": "success", "result": check.to_dict()})
        except Exception as e:
            logger.exception("Failed to check parallels")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_check_parallels"] = theory_check_parallels

    @mcp.tool  # type: ignore[arg-type]
    async def theory_suggest_voice_leading(
        chord_from: list[str],
        chord_to: list[str],
    ) -> str:
        """
        Suggest where each note of a chord should move in the next chord.

        Each note moves to the nearest note of the destination chord.

        Args:
            chord_from: Current chord notes
            chord_to: Next chord notes

        Returns:
            JSON string with the destination note for each source note

        Example:
            theory_suggest_voice_leading(["C4", "E4", "G4"], ["F4", "A4", "C5"])
        """
        try:
            suggestion = suggest_voice_leading(chord_from, chord_to)
            if suggestion is None:
                return json.dumps({"status": "error", "message": ErrorMessages.INVALID_VOICING})

            return json.dumps({"status": "success", "voice_leading": suggestion.to_dict()})
        except Exception as e:
            logger.exception("Failed to suggest voice leading")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_suggest_voice_leading"] = theory_suggest_voice_leading

    @mcp.tool  # type: ignore[arg-type]
    async def theory_validate_counterpoint(
        cantus: list[str],
        counterpoint: list[str],
        species: int = 1,
    ) -> str:
        """
        Validate a counterpoint line against a cantus firmus.

        Species 1 forbids dissonant intervals (2nds, 4ths, tritones, 7ths)
        at every position; all species forbid parallel fifths and octaves.

        Args:
            cantus: Cantus firmus notes
            counterpoint: Counterpoint notes, aligned with the cantus
            species: Species 1-5 (default 1)

        Returns:
            JSON string with valid flag and violations by position

        Example:
            theory_validate_counterpoint(
                cantus=["D4", "F4", "E4", "D4"],
                counterpoint=["A4", "A4", "C5", "D5"],
            )
        """
        try:
            result = validate_counterpoint(cantus, counterpoint, species)
            return json.dumps({"status": "success", **result.to_dict()})
        except Exception as e:
            logger.exception("Failed to validate counterpoint")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_validate_counterpoint"] = theory_validate_counterpoint

    @mcp.tool  # type: ignore[arg-type]
    async def theory_render_midi(
        voices: list[list[str]],
        output_name: str = "theory",
        tempo: int = 90,
    ) -> str:
        """
        Render one or more note lines to a MIDI file for listening.

        Each voice plays on its own channel, one beat per note.

        Args:
            voices: Note lists, one per voice (e.g., cantus and counterpoint)
            output_name: Output filename without .mid extension
            tempo: Tempo in BPM

        Returns:
            JSON string with the written file path

        Example:
            theory_render_midi(voices=[["D4", "F4", "E4", "D4"], ["A4", "A4", "C5", "D5"]])
        """
        try:
            midi = voices_to_midi(voices, tempo_bpm=tempo)

            output_dir.mkdir(parents=True, exist_ok=True)
            output_path = output_dir / f"{output_name}.mid"
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "message": SuccessMessages.MIDI_WRITTEN.format(
                        voices=len(voices), path=output_path
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to render MIDI")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_render_midi"] = theory_render_midi

    return tools
