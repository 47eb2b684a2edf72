"""
Knowledge base - keyword lookup over a small table of theory books.

This is static configuration, not an inference engine: a question is
split into lowercase words, and every entry whose keywords all appear
among those words contributes its answer under its book id.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from gml_theory.models.knowledge import Book, KnowledgeEntry, Recommendation

logger = logging.getLogger(__name__)

LIBRARY_PATH = Path(__file__).parent / "library"

_WORD_RE = re.compile(r"[a-z0-9_]+")


class KnowledgeBase:
    """
    Books, keyword entries and per-context recommendations.

    Loaded once from YAML and read-only afterwards.
    """

    def __init__(
        self,
        books: dict[str, Book],
        entries: list[KnowledgeEntry],
        recommendations: dict[str, list[Recommendation]],
    ):
        self._books = dict(books)
        self._entries = tuple(entries)
        self._recommendations = {k: tuple(v) for k, v in recommendations.items()}

    @classmethod
    def load(cls, path: Path | None = None) -> KnowledgeBase:
        """
        Load a knowledge base from a YAML file.

        Args:
            path: YAML file (defaults to the built-in books.yaml)

        Returns:
            A KnowledgeBase
        """
        path = path or (LIBRARY_PATH / "books.yaml")
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        books = {
            book_id: Book(id=book_id, **book_data)
            for book_id, book_data in data.get("books", {}).items()
        }
        entries = [KnowledgeEntry(**e) for e in data.get("entries", [])]
        recommendations = {
            context: [Recommendation(**r) for r in recs]
            for context, recs in data.get("recommendations", {}).items()
        }

        for entry in entries:
            if entry.book not in books:
                raise ValueError(f"Knowledge entry references unknown book: {entry.book}")

        logger.debug(f"Loaded {len(books)} books, {len(entries)} entries from {path}")
        return cls(books, entries, recommendations)

    def list_books(self) -> list[Book]:
        """All books, in file order."""
        return list(self._books.values())

    def get_book(self, book_id: str) -> Book | None:
        """Get a book by id."""
        return self._books.get(book_id)

    def ask(self, question: str, books: Iterable[str] | None = None) -> dict[str, Any]:
        """
        Answer a question by keyword matching.

        Args:
            question: Free text (e.g., 'What is the violin range?')
            books: Restrict answers to these book ids (default: all)

        Returns:
            Mapping of book id to answer; the first matching entry per
            book wins. Empty if nothing matched.

        Example:
            kb.ask("parallel fifths?")
            # {'fux': 'Forbidden: parallel fifths destroy independence of voices'}
        """
        allowed = set(books) if books is not None else set(self._books)
        words = set(_WORD_RE.findall(question.lower()))

        results: dict[str, Any] = {}
        for entry in self._entries:
            if entry.book in allowed and entry.book not in results and entry.matches(words):
                results[entry.book] = entry.answer
        return results

    def recommend(
        self, context_type: str, books: Iterable[str] | None = None
    ) -> list[Recommendation]:
        """
        Get advice for a kind of task ('voice_leading', 'orchestration').

        Unknown context types yield an empty list.
        """
        allowed = set(books) if books is not None else None
        return [
            r
            for r in self._recommendations.get(context_type, ())
            if allowed is None or r.book in allowed
        ]

    def context_types(self) -> list[str]:
        """Context types that have recommendations."""
        return list(self._recommendations)


@lru_cache(maxsize=1)
def default_knowledge() -> KnowledgeBase:
    """The built-in knowledge base, loaded on first use."""
    return KnowledgeBase.load()
