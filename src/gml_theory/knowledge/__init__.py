"""
Theory knowledge - a small keyword-indexed table of book knowledge.

This module provides:
- KnowledgeBase: Books, keyword entries, recommendations
- default_knowledge: The shipped table, cached
"""

from gml_theory.knowledge.base import KnowledgeBase, default_knowledge

__all__ = [
    "KnowledgeBase",
    "default_knowledge",
]
