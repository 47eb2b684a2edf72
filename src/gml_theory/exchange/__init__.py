"""
GML exchange - moving musical data between sibling apps.

This module provides:
- AppRegistry: Where sibling apps live (typed found / not-found lookups)
- UniversalExporter: Validate, wrap and route a payload by size
- KeyValueStore / MemoryStore: Out-of-band storage for large payloads
- QueryStringSource / StaticSource: Inbound sources the host injects
- ImportHandler: Queue, listeners and per-content-type processing
"""

from gml_theory.exchange.apps import AppRegistry
from gml_theory.exchange.exporter import (
    UniversalExporter,
    encode_uri_component,
    iso_timestamp,
    standardize_content,
    validate_export_data,
)
from gml_theory.exchange.importer import ImportHandler
from gml_theory.exchange.sources import InboundMessageSource, QueryStringSource, StaticSource
from gml_theory.exchange.storage import KeyValueStore, MemoryStore

__all__ = [
    "AppRegistry",
    "ImportHandler",
    "InboundMessageSource",
    "KeyValueStore",
    "MemoryStore",
    "QueryStringSource",
    "StaticSource",
    "UniversalExporter",
    "encode_uri_component",
    "iso_timestamp",
    "standardize_content",
    "validate_export_data",
]
