"""
Tests for the theory book knowledge base.
"""

from pathlib import Path

import pytest

from gml_theory.knowledge import KnowledgeBase, default_knowledge


class TestBooks:
    """Tests for book listing."""

    def test_list_books(self, knowledge: KnowledgeBase) -> None:
        """Three books, in file order."""
        assert [b.id for b in knowledge.list_books()] == ["fux", "schoenberg", "rimsky"]

    def test_get_book(self, knowledge: KnowledgeBase) -> None:
        """Books carry their structured knowledge."""
        fux = knowledge.get_book("fux")
        assert fux is not None
        assert fux.author == "Johann Joseph Fux"
        assert "parallel_fifths" in fux.rules["counterpoint"]["forbidden"]

        rimsky = knowledge.get_book("rimsky")
        assert rimsky is not None
        assert rimsky.ranges["violin"] == {"low": "G3", "high": "E7"}

        assert knowledge.get_book("piston") is None

    def test_default_cached(self) -> None:
        """The built-in knowledge base is loaded once."""
        assert default_knowledge() is default_knowledge()


class TestAsk:
    """Tests for keyword questions."""

    def test_violin_range(self, knowledge: KnowledgeBase) -> None:
        """Range questions are answered by Rimsky-Korsakov."""
        answers = knowledge.ask("What is the violin range?")
        assert answers == {"rimsky": {"low": "G3", "high": "E7"}}

    def test_parallel_fifths(self, knowledge: KnowledgeBase) -> None:
        """Parallel fifths are answered by Fux."""
        answers = knowledge.ask("Are Parallel Fifths allowed?")
        assert answers["fux"].startswith("Forbidden")

    def test_several_books(self, knowledge: KnowledgeBase) -> None:
        """A question can hit more than one book."""
        answers = knowledge.ask("parallel fifths in a motif")
        assert set(answers) == {"fux", "schoenberg"}
        assert answers["schoenberg"] == "smallest_musical_idea"

    def test_first_entry_per_book_wins(self, knowledge: KnowledgeBase) -> None:
        """Only one answer per book."""
        answers = knowledge.ask("violin and cello range")
        assert answers == {"rimsky": {"low": "G3", "high": "E7"}}

    def test_all_keywords_required(self, knowledge: KnowledgeBase) -> None:
        """'violin' alone is not a range question."""
        assert knowledge.ask("Who plays violin?") == {}

    def test_restrict_books(self, knowledge: KnowledgeBase) -> None:
        """Answers can be limited to some books."""
        answers = knowledge.ask("parallel fifths in a motif", books=["schoenberg"])
        assert set(answers) == {"schoenberg"}

    def test_no_match(self, knowledge: KnowledgeBase) -> None:
        """Unrelated questions give an empty mapping."""
        assert knowledge.ask("what time is it") == {}


class TestRecommend:
    """Tests for recommendations."""

    def test_voice_leading(self, knowledge: KnowledgeBase) -> None:
        """Voice leading advice comes from Fux and Schoenberg."""
        recs = knowledge.recommend("voice_leading")
        assert [r.book for r in recs] == ["fux", "schoenberg"]
        assert "parallel fifths" in recs[0].advice

    def test_orchestration(self, knowledge: KnowledgeBase) -> None:
        """Orchestration advice comes from Rimsky-Korsakov."""
        recs = knowledge.recommend("orchestration")
        assert [r.book for r in recs] == ["rimsky"]

    def test_restrict_books(self, knowledge: KnowledgeBase) -> None:
        """Recommendations can be limited to some books."""
        recs = knowledge.recommend("voice_leading", books=["schoenberg"])
        assert [r.book for r in recs] == ["schoenberg"]

    def test_unknown_context(self, knowledge: KnowledgeBase) -> None:
        """Unknown contexts give no advice."""
        assert knowledge.recommend("mixing") == []
        assert knowledge.context_types() == ["voice_leading", "orchestration"]


class TestLoad:
    """Tests for loading custom knowledge files."""

    def test_unknown_book_rejected(self, temp_dir: Path) -> None:
        """Entries must name a known book."""
        path = temp_dir / "books.yaml"
        path.write_text(
            "books:\n"
            "  fux: {name: Gradus, author: Fux}\n"
            "entries:\n"
            "  - {book: piston, keywords: [harmony], answer: text}\n"
        )
        with pytest.raises(ValueError, match="unknown book"):
            KnowledgeBase.load(path)

    def test_keywords_lowercased(self, temp_dir: Path) -> None:
        """Keywords match case-insensitively."""
        path = temp_dir / "books.yaml"
        path.write_text(
            "books:\n"
            "  fux: {name: Gradus, author: Fux}\n"
            "entries:\n"
            "  - {book: fux, keywords: [Cantus], answer: fixed melody}\n"
        )
        kb = KnowledgeBase.load(path)
        assert kb.ask("what is a cantus firmus") == {"fux": "fixed melody"}
        assert kb.recommend("voice_leading") == []
