"""
Import handler - receives payloads exported by sibling apps.

Each payload becomes an ImportRecord in the queue. Listeners are told
about every record, then the record is routed by its envelope's
content.type to whichever processor the host registered for that type.
Content types have no shared schema beyond the envelope; each app owns
its own post-processing.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from gml_theory.constants import PROTOCOL_TAG, ContentType, ImportStatus
from gml_theory.exchange.exporter import Clock, iso_timestamp
from gml_theory.exchange.sources import InboundMessageSource
from gml_theory.models.exchange import ImportRecord

logger = logging.getLogger(__name__)

ImportListener = Callable[[ImportRecord], None]
ContentProcessor = Callable[[ImportRecord], None]

_CONTENT_TYPES = frozenset(t.value for t in ContentType)


class ImportHandler:
    """
    Queue of received imports with listeners and per-type processors.

    Call `receive_from(source)` once at startup with the host's inbound
    source, or `handle_import(payload)` for payloads obtained some other way.
    """

    def __init__(self, clock: Clock | None = None):
        self.import_queue: list[ImportRecord] = []
        self._listeners: list[ImportListener] = []
        self._processors: dict[ContentType, ContentProcessor] = {}
        self._clock = clock or (lambda: datetime.now(UTC))

    def on_import(self, callback: ImportListener) -> None:
        """Register a listener called for every received import."""
        self._listeners.append(callback)

    def register_processor(
        self, content_type: ContentType | str, processor: ContentProcessor
    ) -> None:
        """Register the post-processing step for one content type."""
        self._processors[ContentType(content_type)] = processor

    def receive_from(self, source: InboundMessageSource) -> list[ImportRecord]:
        """
        Drain an inbound source.

        Payloads that cannot become a record are logged and dropped.

        Returns:
            Records created, in arrival order
        """
        records: list[ImportRecord] = []
        for payload in source.messages():
            try:
                records.append(self.handle_import(payload))
            except (ValidationError, ValueError):
                logger.exception("Dropping import that could not be recorded")
        return records

    def handle_import(self, payload: Mapping[str, Any]) -> ImportRecord:
        """
        Accept one export payload.

        A missing or unexpected protocol tag is logged as a warning;
        the payload is still accepted.

        Args:
            payload: Decoded export payload ({source, target, data, ...})

        Returns:
            The ImportRecord, already processed

        Raises:
            ValueError: If the payload is not a mapping
        """
        if not isinstance(payload, Mapping):
            raise ValueError(f"Import payload must be an object, got {type(payload).__name__}")

        if payload.get("protocolTag") != PROTOCOL_TAG:
            logger.warning(f"Import data missing protocol tag {PROTOCOL_TAG!r}")

        record = ImportRecord(
            id=f"import_{int(self._clock().timestamp() * 1000)}_{uuid.uuid4().hex[:9]}",
            timestamp=iso_timestamp(self._clock()),
            source=_routing_name(payload.get("source")),
            target=_routing_name(payload.get("target")),
            data=payload.get("data"),
        )

        self.import_queue.append(record)
        self._notify_listeners(record)
        self._auto_process(record)
        return record

    def get_pending_imports(self) -> list[ImportRecord]:
        """Imports not yet processed."""
        return [r for r in self.import_queue if r.status == ImportStatus.RECEIVED]

    def _notify_listeners(self, record: ImportRecord) -> None:
        for listener in self._listeners:
            try:
                listener(record)
            except Exception:
                logger.exception("Import listener error")

    def _auto_process(self, record: ImportRecord) -> None:
        """Route by content type, then mark the record processed."""
        content_type = record.content_type
        processor = None
        if content_type in _CONTENT_TYPES:
            processor = self._processors.get(ContentType(content_type))

        if processor is not None:
            logger.info(f"Auto-processing {content_type} import {record.id}")
            try:
                processor(record)
            except Exception:
                logger.exception(f"Processor for {content_type} failed on {record.id}")
        else:
            logger.debug(f"No processor for content type {content_type!r}")

        record.status = ImportStatus.PROCESSED


def _routing_name(value: Any) -> str | None:
    """Senders are other apps; anything that is not already a name is stringified."""
    if value is None or isinstance(value, str):
        return value
    return str(value)
