"""
Pydantic models for the theory library.

This module provides:
- Envelope / ExportPayload: The GML universal exchange wrapper
- AppEntry / AppLookup: Sibling app registry entries and lookups
- ExportValidation / ExportResult / ImportRecord: Exchange outcomes
- Book / KnowledgeEntry / Recommendation: Knowledge table
"""

from gml_theory.models.envelope import (
    Envelope,
    EnvelopeContent,
    EnvelopeMetadata,
    ExportPayload,
)
from gml_theory.models.exchange import (
    AppEntry,
    AppLookup,
    ExportResult,
    ExportValidation,
    ImportRecord,
)
from gml_theory.models.knowledge import Book, KnowledgeEntry, Recommendation

__all__ = [
    "AppEntry",
    "AppLookup",
    "Book",
    "Envelope",
    "EnvelopeContent",
    "EnvelopeMetadata",
    "ExportPayload",
    "ExportResult",
    "ExportValidation",
    "ImportRecord",
    "KnowledgeEntry",
    "Recommendation",
]
