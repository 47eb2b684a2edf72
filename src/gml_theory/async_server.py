#!/usr/bin/env python3
"""
Async GML Theory MCP Server using chuk-mcp-server

This server exposes a small music theory library and the GML exchange
convention as MCP tools.

The server provides tools for:
- Converting between note names, pitch numbers and frequencies
- Generating scales, building chords and naming chords
- Checking parallel motion and validating species counterpoint
- Querying the theory book table (Fux, Schoenberg, Rimsky-Korsakov)
- Exporting to and importing from sibling GML apps
- Rendering note lines to MIDI for listening

Exchange settings come from the environment, which `server.py` fills in
from its command line:
- GML_THEORY_CONFIG: path to a YAML file with an `exchange:` mapping
- GML_THEORY_LOCAL: "1" to target localhost dev ports
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from gml_theory.config import ExchangeConfig
from gml_theory.exchange import AppRegistry, ImportHandler, MemoryStore, UniversalExporter
from gml_theory.knowledge import default_knowledge
from gml_theory.tables import LIBRARY_PATH, default_tables
from gml_theory.tools import (
    register_counterpoint_tools,
    register_exchange_tools,
    register_harmony_tools,
    register_knowledge_tools,
    register_pitch_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("gml-theory")

# Paths - use standard project structure
BASE_PATH = Path.cwd()
OUTPUT_DIR = BASE_PATH / "output"

config_path = os.environ.get("GML_THEORY_CONFIG")
exchange_config = ExchangeConfig.load(
    Path(config_path) if config_path else None,
    local=True if os.environ.get("GML_THEORY_LOCAL") == "1" else None,
)

# Shared state
tables = default_tables()
knowledge = default_knowledge()
app_registry = AppRegistry.load(config=exchange_config)
store = MemoryStore()
exporter = UniversalExporter(app_registry, store, exchange_config)
importer = ImportHandler()

# Register all tools
pitch_tools = register_pitch_tools(mcp)
harmony_tools = register_harmony_tools(mcp, tables)
counterpoint_tools = register_counterpoint_tools(mcp, OUTPUT_DIR)
knowledge_tools = register_knowledge_tools(mcp, knowledge)
exchange_tools = register_exchange_tools(mcp, exporter, importer)

# Export tool functions for direct access
theory_note_info = pitch_tools["theory_note_info"]
theory_pitch_to_note = pitch_tools["theory_pitch_to_note"]
theory_frequency_to_note = pitch_tools["theory_frequency_to_note"]
theory_convert_app_data = pitch_tools["theory_convert_app_data"]

theory_list_patterns = harmony_tools["theory_list_patterns"]
theory_generate_scale = harmony_tools["theory_generate_scale"]
theory_build_chord = harmony_tools["theory_build_chord"]
theory_analyze_chord = harmony_tools["theory_analyze_chord"]

theory_check_parallels = counterpoint_tools["theory_check_parallels"]
theory_suggest_voice_leading = counterpoint_tools["theory_suggest_voice_leading"]
theory_validate_counterpoint = counterpoint_tools["theory_validate_counterpoint"]
theory_render_midi = counterpoint_tools["theory_render_midi"]

theory_list_books = knowledge_tools["theory_list_books"]
theory_ask = knowledge_tools["theory_ask"]
theory_recommend = knowledge_tools["theory_recommend"]

theory_list_apps = exchange_tools["theory_list_apps"]
theory_export_to_app = exchange_tools["theory_export_to_app"]
theory_import_query = exchange_tools["theory_import_query"]
theory_import_payload = exchange_tools["theory_import_payload"]
theory_list_imports = exchange_tools["theory_list_imports"]

logger.info("GML Theory MCP Server initialized")
logger.info(f"  Library path: {LIBRARY_PATH}")
logger.info(f"  Apps: {len(app_registry)} ({'local' if exchange_config.local else 'production'})")
logger.info(f"  Output dir: {OUTPUT_DIR}")
