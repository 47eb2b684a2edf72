"""
Knowledge models - theory books, keyword entries, recommendations.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class Book(BaseModel):
    """A theory book and whatever structured knowledge it contributes."""

    id: str = Field(..., description="Book identifier (e.g., 'fux')")
    name: str = Field(..., description="Title")
    author: str = Field(..., description="Author")
    rules: dict[str, Any] = Field(default_factory=dict, description="Rule sets by topic")
    concepts: dict[str, Any] = Field(default_factory=dict, description="Named concepts")
    ranges: dict[str, dict[str, str]] = Field(
        default_factory=dict, description="Instrument ranges (low/high note names)"
    )

    model_config = {"frozen": True}


class KnowledgeEntry(BaseModel):
    """An answer reachable by keyword match."""

    book: str = Field(..., description="Book that supplies the answer")
    keywords: tuple[str, ...] = Field(..., min_length=1, description="All must appear")
    answer: Any = Field(..., description="Answer payload (text or structured)")

    model_config = {"frozen": True}

    @field_validator("keywords")
    @classmethod
    def lowercase_keywords(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Keywords match case-insensitively."""
        return tuple(k.lower() for k in v)

    def matches(self, words: set[str]) -> bool:
        """True if every keyword is in the word set."""
        return all(k in words for k in self.keywords)


class Recommendation(BaseModel):
    """Advice from a book for a kind of task."""

    book: str = Field(..., description="Book giving the advice")
    advice: str = Field(..., description="Advice text")

    model_config = {"frozen": True}
