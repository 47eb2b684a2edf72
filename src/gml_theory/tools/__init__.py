"""
MCP tool implementations.

Tools are organized by domain:
- pitch - Note name, pitch number and frequency conversion
- harmony - Scales, chords and chord analysis
- counterpoint - Parallel motion, voice leading, species validation, MIDI audition
- knowledge - Theory book queries and recommendations
- exchange - Export to and import from sibling GML apps
"""

from gml_theory.tools.counterpoint import register_counterpoint_tools
from gml_theory.tools.exchange import register_exchange_tools
from gml_theory.tools.harmony import register_harmony_tools
from gml_theory.tools.knowledge import register_knowledge_tools
from gml_theory.tools.pitch import register_pitch_tools

__all__ = [
    "register_counterpoint_tools",
    "register_exchange_tools",
    "register_harmony_tools",
    "register_knowledge_tools",
    "register_pitch_tools",
]
