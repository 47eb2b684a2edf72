"""
Universal exporter - packages musical data for another GML app.

An export runs in four steps:
1. Validate the input (refused before any storage or URL work)
2. Resolve the target app (unknown apps are refused the same way)
3. Wrap the data in a standardized envelope and export payload
4. Pick the transport by serialized size: inline URL parameter below the
   limit, otherwise a store entry whose key travels in the URL

The store entry is consumed (deleted) by the importing side. If that side
never runs, the entry stays behind.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any
from urllib.parse import quote

from gml_theory.config import ExchangeConfig
from gml_theory.constants import (
    CONTENT_FIELDS,
    IMPORT_KEY_PARAM,
    IMPORT_PARAM,
    STORAGE_KEY_PREFIX,
    ContentType,
    ErrorMessages,
    ExportStatus,
    SuccessMessages,
    TransportMethod,
)
from gml_theory.exchange.apps import AppRegistry
from gml_theory.exchange.storage import KeyValueStore
from gml_theory.models.envelope import (
    Envelope,
    EnvelopeContent,
    EnvelopeMetadata,
    ExportPayload,
)
from gml_theory.models.exchange import ExportResult, ExportValidation

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# Characters encodeURIComponent leaves alone, beyond letters, digits and "_.-~"
_URI_COMPONENT_SAFE = "!*'()"


def iso_timestamp(moment: datetime) -> str:
    """ISO 8601 in UTC with milliseconds and a 'Z' suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def encode_uri_component(value: str) -> str:
    """Percent-encode a string the way a browser's encodeURIComponent does."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def validate_export_data(data: Any) -> ExportValidation:
    """
    Check that export data is a mapping with recognizable musical content.

    Content is any truthy riffs, triads, quartet, patterns or motifs field,
    or a truthy `content` field.

    Args:
        data: Candidate export data

    Returns:
        ExportValidation with valid=False and error messages on failure
    """
    if not isinstance(data, Mapping):
        return ExportValidation(
            valid=False,
            errors=[ErrorMessages.NOT_AN_OBJECT, ErrorMessages.NO_CONTENT],
        )

    has_content = any(data.get(name) for name in CONTENT_FIELDS) or bool(data.get("content"))
    if not has_content:
        return ExportValidation(valid=False, errors=[ErrorMessages.NO_CONTENT])
    return ExportValidation(valid=True)


def standardize_content(data: Mapping[str, Any]) -> EnvelopeContent:
    """
    Pick the content type and payload for export data.

    riffs -> riff_collection, triads -> triad_progression,
    quartet -> quartet_score; anything else is generic and carries the
    whole input as its payload.
    """
    if data.get("riffs"):
        return EnvelopeContent(type=ContentType.RIFF_COLLECTION, riffs=data["riffs"])
    if data.get("triads"):
        return EnvelopeContent(type=ContentType.TRIAD_PROGRESSION, triads=data["triads"])
    if data.get("quartet"):
        return EnvelopeContent(type=ContentType.QUARTET_SCORE, quartet=data["quartet"])
    return EnvelopeContent(type=ContentType.GENERIC, data=dict(data))


class UniversalExporter:
    """
    Exports musical data to sibling apps.

    The store is only touched for payloads at or above the inline limit.
    """

    def __init__(
        self,
        registry: AppRegistry,
        store: KeyValueStore,
        config: ExchangeConfig | None = None,
        clock: Clock | None = None,
    ):
        """
        Initialize the exporter.

        Args:
            registry: Sibling app registry
            store: Key-value store for large payloads
            config: Exchange config (defaults to the registry's)
            clock: Returns the current time (defaults to UTC now)
        """
        self.registry = registry
        self.store = store
        self.config = config or registry.config
        self._clock = clock or (lambda: datetime.now(UTC))

    def standardize(self, data: Mapping[str, Any]) -> Envelope:
        """Wrap export data in a GML universal envelope."""
        now = iso_timestamp(self._clock())
        metadata = EnvelopeMetadata(
            created=_text(data.get("created")) or now,
            modified=now,
            author=_text(data.get("author")) or self.config.author,
            tags=_tags(data.get("tags")),
        )
        return Envelope(metadata=metadata, content=standardize_content(data))

    def build_payload(self, data: Mapping[str, Any], target_app: str) -> ExportPayload:
        """Build the routed payload for a target app."""
        return ExportPayload(
            timestamp=iso_timestamp(self._clock()),
            source=_text(data.get("source")) or self.config.source_name,
            target=target_app,
            data=self.standardize(data),
        )

    def export_to_app(self, data: Any, target_app: str) -> ExportResult:
        """
        Export data to a sibling app.

        Args:
            data: Mapping with riffs, triads, quartet, patterns, motifs or content
            target_app: Registered app name (e.g., 'QuintetComposer')

        Returns:
            ExportResult - READY with an inline URL, SECURED with a key URL and
            storage_key, or a failure (FAILED_VALIDATION / UNKNOWN_APP) with errors
        """
        validation = validate_export_data(data)
        if not validation.valid:
            logger.info(f"Export to {target_app} refused: {'; '.join(validation.errors)}")
            return ExportResult(
                success=False,
                status=ExportStatus.FAILED_VALIDATION,
                errors=validation.errors,
            )

        lookup = self.registry.lookup(target_app)
        if not lookup.found or lookup.url is None:
            logger.warning(lookup.message)
            return ExportResult(
                success=False,
                status=ExportStatus.UNKNOWN_APP,
                errors=[lookup.message or ErrorMessages.UNKNOWN_APP.format(app=target_app)],
            )

        try:
            serialized = self.build_payload(data, target_app).to_json()
        except ValueError as e:
            logger.warning(f"Export to {target_app} refused: {e}")
            return ExportResult(
                success=False,
                status=ExportStatus.FAILED_VALIDATION,
                errors=[ErrorMessages.NOT_SERIALIZABLE.format(error=e)],
            )

        if len(serialized) < self.config.inline_limit:
            logger.info(SuccessMessages.EXPORT_INLINE.format(app=target_app))
            return ExportResult(
                success=True,
                status=ExportStatus.READY,
                method=TransportMethod.URL_PARAMS,
                url=f"{lookup.url}?{IMPORT_PARAM}={encode_uri_component(serialized)}",
            )

        key = self._new_storage_key()
        self.store.set(key, serialized)
        logger.info(SuccessMessages.EXPORT_STORED.format(app=target_app, key=key))
        return ExportResult(
            success=True,
            status=ExportStatus.SECURED,
            method=TransportMethod.STORAGE,
            url=f"{lookup.url}?{IMPORT_KEY_PARAM}={key}",
            storage_key=key,
        )

    def _new_storage_key(self) -> str:
        """Timestamped key with a random suffix so same-millisecond exports differ."""
        millis = int(self._clock().timestamp() * 1000)
        return f"{STORAGE_KEY_PREFIX}{millis}_{uuid.uuid4().hex[:9]}"


def _text(value: Any) -> str | None:
    """Metadata scalar as a string; empty values stay empty."""
    if value is None or value == "":
        return None
    return value if isinstance(value, str) else str(value)


def _tags(value: Any) -> list[str]:
    """A single tag or a list of tags, as strings."""
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list | tuple | set | frozenset):
        return [t if isinstance(t, str) else str(t) for t in value]
    return [str(value)]
