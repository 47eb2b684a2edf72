"""
Knowledge tools - MCP tools for querying the theory book table.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from gml_theory.constants import ErrorMessages
from gml_theory.knowledge import KnowledgeBase

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_knowledge_tools(mcp: ChukMCPServer, knowledge: KnowledgeBase) -> dict[str, Any]:
    """
    Register knowledge tools with the MCP server.

    Args:
        mcp: The MCP server instance
        knowledge: The knowledge base

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_books() -> str:
        """
        List the theory books the library draws on.

        Returns:
            JSON string with book ids, titles and authors

        Example:
            theory_list_books()
        """
        try:
            books = knowledge.list_books()
            return json.dumps(
                {
                    "status": "success",
                    "books": [{"id": b.id, "name": b.name, "author": b.author} for b in books],
                    "count": len(books),
                }
            )
        except Exception as e:
            logger.exception("Failed to list books")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_books"] = theory_list_books

    @mcp.tool  # type: ignore[arg-type]
    async def theory_ask(question: str, books: list[str] | None = None) -> str:
        """
        Ask the book table a question.

        Matching is by keyword: 'violin range', 'parallel fifths', 'motif'.

        Args:
            question: Free-text question
            books: Optional book ids to consult ('fux', 'schoenberg', 'rimsky')

        Returns:
            JSON string with answers keyed by book id

        Example:
            theory_ask(question="What is the violin range?")
        """
        try:
            answers = knowledge.ask(question, books)
            return json.dumps({"status": "success", "answers": answers, "count": len(answers)})
        except Exception as e:
            logger.exception("Failed to answer question")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_ask"] = theory_ask

    @mcp.tool  # type: ignore[arg-type]
    async def theory_recommend(context_type: str) -> str:
        """
        Get book advice for a kind of task.

        Args:
            context_type: 'voice_leading' or 'orchestration'

        Returns:
            JSON string with recommendations

        Example:
            theory_recommend(context_type="voice_leading")
        """
        try:
            if context_type not in knowledge.context_types():
                return json.dumps(
                    {
                        "status": "error",
                        "message": ErrorMessages.UNKNOWN_CONTEXT.format(context=context_type),
                        "available": knowledge.context_types(),
                    }
                )

            recommendations = knowledge.recommend(context_type)
            return json.dumps(
                {
                    "status": "success",
                    "context": context_type,
                    "recommendations": [r.model_dump() for r in recommendations],
                }
            )
        except Exception as e:
            logger.exception("Failed to recommend")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_recommend"] = theory_recommend

    return tools
