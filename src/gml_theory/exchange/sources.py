"""
Inbound message sources - where imports come from.

The library never reads a URL or a store on its own. The host builds a
source from whatever it was started with (a query string and a store, in
the browser-style convention) and hands it to the ImportHandler.

Faults at this boundary (a malformed parameter, a failing store, JSON that
does not parse) are logged and the message is dropped.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any, Protocol
from urllib.parse import parse_qs

from gml_theory.constants import IMPORT_KEY_PARAM, IMPORT_PARAM
from gml_theory.exchange.storage import KeyValueStore

logger = logging.getLogger(__name__)


class InboundMessageSource(Protocol):
    """Anything that can yield decoded export payloads."""

    def messages(self) -> Iterator[dict[str, Any]]: ...


class QueryStringSource:
    """
    Reads `import` (inline JSON) and `importKey` (store key) parameters.

    A stored payload is deleted right after it parses, so a key can be
    picked up at most once.
    """

    def __init__(self, query: str, store: KeyValueStore | None = None):
        """
        Initialize the source.

        Args:
            query: Raw query string, with or without the leading '?'
            store: Store to resolve importKey against
        """
        self.query = query.lstrip("?")
        self.store = store

    def messages(self) -> Iterator[dict[str, Any]]:
        """Yield the inline payload, then the stored one, skipping any that fail."""
        params = parse_qs(self.query, keep_blank_values=True)

        for raw in params.get(IMPORT_PARAM, [])[:1]:
            payload = _decode(raw, "URL import data")
            if payload is not None:
                yield payload

        for key in params.get(IMPORT_KEY_PARAM, [])[:1]:
            payload = self._take(key)
            if payload is not None:
                yield payload

    def _take(self, key: str) -> dict[str, Any] | None:
        """Read, decode and delete a stored payload."""
        if self.store is None:
            logger.error(f"Import key {key!r} given but no store is available")
            return None

        try:
            raw = self.store.get(key)
        except Exception:
            logger.exception(f"Failed to read stored import {key!r}")
            return None

        if not raw:
            logger.warning(f"No stored import under key {key!r}")
            return None

        payload = _decode(raw, "stored import data")
        if payload is None:
            return None

        try:
            self.store.delete(key)
        except Exception:
            logger.exception(f"Failed to delete consumed import {key!r}")
        return payload


class StaticSource:
    """A fixed list of already-decoded payloads."""

    def __init__(self, payloads: list[dict[str, Any]]):
        self.payloads = list(payloads)

    def messages(self) -> Iterator[dict[str, Any]]:
        yield from self.payloads


def _decode(raw: str, what: str) -> dict[str, Any] | None:
    """Parse JSON into a dict, logging and returning None on failure."""
    try:
        payload = json.loads(raw)
    except ValueError:
        logger.exception(f"Failed to parse {what}")
        return None

    if not isinstance(payload, dict):
        logger.error(f"Ignoring {what}: expected a JSON object, got {type(payload).__name__}")
        return None
    return payload
