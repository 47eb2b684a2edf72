"""
Envelope models - the GML universal wrapper for moving musical data.

An ExportPayload travels between apps; its `data` is the Envelope:

    {
      "timestamp", "source", "target", "format": "GML_UNIVERSAL_v1",
      "protocolTag": "9x3",
      "data": {
        "version": "1.0.0", "schema": "GML_UNIVERSAL",
        "metadata": {"created", "modified", "author", "tags", "protocolTag"},
        "content": {"type": "riff_collection", "riffs": [...]}
      }
    }

JSON keys use the camelCase names other apps expect; Python attributes
are snake_case and both spellings are accepted on input.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field, SerializerFunctionWrapHandler, model_serializer

from gml_theory.constants import (
    ENVELOPE_VERSION,
    PAYLOAD_FORMAT,
    PROTOCOL_TAG,
    PROTOCOL_VERIFIED_TAG,
    SCHEMA_TAG,
    ContentType,
)


class EnvelopeMetadata(BaseModel):
    """Authoring metadata for an envelope."""

    created: str = Field(..., description="ISO timestamp of first creation")
    modified: str = Field(..., description="ISO timestamp of this export")
    author: str = Field(..., description="Author or producing app")
    tags: list[str] = Field(default_factory=list, description="Free-form tags")
    protocol_tag: str = Field(
        PROTOCOL_VERIFIED_TAG, alias="protocolTag", description="Convention marker"
    )

    model_config = {"populate_by_name": True, "frozen": True}


class EnvelopeContent(BaseModel):
    """
    Typed musical content.

    Exactly one payload field is set, chosen by `type`; the importing app
    owns the shape of that payload.
    """

    type: ContentType = Field(..., description="Content type tag")
    riffs: Any = Field(None, description="Payload for riff_collection")
    triads: Any = Field(None, description="Payload for triad_progression")
    quartet: Any = Field(None, description="Payload for quartet_score")
    data: Any = Field(None, description="Payload for generic content")

    model_config = {"frozen": True}

    @model_serializer(mode="wrap")
    def _drop_unset_payloads(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        """Only the populated payload field is serialized."""
        data = handler(self)
        return {k: v for k, v in data.items() if v is not None}

    @property
    def payload(self) -> Any:
        """The payload field matching `type`."""
        field_for_type = {
            ContentType.RIFF_COLLECTION: self.riffs,
            ContentType.TRIAD_PROGRESSION: self.triads,
            ContentType.QUARTET_SCORE: self.quartet,
            ContentType.GENERIC: self.data,
        }
        return field_for_type[self.type]


class Envelope(BaseModel):
    """Standardized wrapper around one piece of musical content."""

    version: str = Field(ENVELOPE_VERSION, description="Envelope version")
    schema_tag: str = Field(SCHEMA_TAG, alias="schema", description="Fixed schema tag")
    metadata: EnvelopeMetadata
    content: EnvelopeContent

    model_config = {"populate_by_name": True, "frozen": True}


class ExportPayload(BaseModel):
    """What actually travels between apps: routing fields plus the envelope."""

    timestamp: str = Field(..., description="ISO timestamp of the export")
    source: str = Field(..., description="Producing app")
    target: str = Field(..., description="Target app name")
    format: str = Field(PAYLOAD_FORMAT, description="Payload format tag")
    protocol_tag: str = Field(PROTOCOL_TAG, alias="protocolTag", description="Convention marker")
    data: Envelope

    model_config = {"populate_by_name": True, "frozen": True}

    def to_wire_dict(self) -> dict[str, Any]:
        """JSON-ready dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Compact JSON, the form whose length decides the transport."""
        return json.dumps(self.to_wire_dict(), separators=(",", ":"), ensure_ascii=False)
