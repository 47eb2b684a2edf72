"""
Pitch tools - MCP tools for note, pitch and frequency conversion.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from gml_theory.constants import ErrorMessages
from gml_theory.core import (
    from_quartet,
    from_riff_gen,
    frequency_to_pitch,
    note_to_pitch,
    pitch_to_frequency,
    pitch_to_note,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_pitch_tools(mcp: ChukMCPServer) -> dict[str, Any]:
    """
    Register pitch conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_note_info(note: str) -> str:
        """
        Convert a note name to its pitch number and frequency.

        Args:
            note: Note name like 'C4', 'F#3' or 'A-1' (sharps only)

        Returns:
            JSON string with pitch and frequency

        Example:
            theory_note_info(note="A4")
        """
        try:
            pitch = note_to_pitch(note)
            if pitch is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_NOTE.format(note=note)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "note": pitch_to_note(pitch),
                    "pitch": pitch,
                    "frequency": pitch_to_frequency(pitch),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert note")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_note_info"] = theory_note_info

    @mcp.tool  # type: ignore[arg-type]
    async def theory_pitch_to_note(pitch: int) -> str:
        """
        Spell a pitch number (0-127) as a note name.

        Args:
            pitch: Pitch number, 60 = C4

        Returns:
            JSON string with note name and frequency

        Example:
            theory_pitch_to_note(pitch=61)
        """
        try:
            note = pitch_to_note(pitch)
            if note is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.INVALID_PITCH.format(pitch=pitch)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "note": note,
                    "pitch": pitch,
                    "frequency": pitch_to_frequency(pitch),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert pitch")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_pitch_to_note"] = theory_pitch_to_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_frequency_to_note(frequency: float) -> str:
        """
        Find the nearest note to a frequency.

        Args:
            frequency: Frequency in Hz (must be positive)

        Returns:
            JSON string with nearest note, its pitch and exact frequency

        Example:
            theory_frequency_to_note(frequency=445.0)
        """
        try:
            pitch = frequency_to_pitch(frequency)
            if pitch is None:
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.INVALID_FREQUENCY.format(frequency=frequency),
                    }
                )

            return json.dumps(
                {
                    "status": "success",
                    "note": pitch_to_note(pitch),
                    "pitch": pitch,
                    "frequency": pitch_to_frequency(pitch),
                }
            )
        except Exception as e:
            logger.exception("Failed to convert frequency")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_frequency_to_note"] = theory_frequency_to_note

    @mcp.tool  # type: ignore[arg-type]
    async def theory_convert_app_data(
        app_format: str,
        values: list[float],
    ) -> str:
        """
        Convert sibling app data to note names.

        Args:
            app_format: 'riffgen' (values are frequencies) or 'quartet' (pitch numbers)
            values: The frequencies or pitch numbers

        Returns:
            JSON string with note names (null where a value does not convert)

        Example:
            theory_convert_app_data(app_format="quartet", values=[60, 64, 67])
        """
        try:
            if app_format == "riffgen":
                notes = from_riff_gen({"frequencies": values})
            elif app_format == "quartet":
                notes = from_quartet({"notes": [int(v) for v in values]})
            else:
                return json.dumps(
                    {"status": "error", "message": f"Unknown app format: {app_format}"}
                )

            return json.dumps({"status": "success", "notes": notes or []})
        except Exception as e:
            logger.exception("Failed to convert app data")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_convert_app_data"] = theory_convert_app_data

    return tools
