"""
Exchange tools - MCP tools for exporting to and importing from sibling apps.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from gml_theory.exchange import (
    AppRegistry,
    ImportHandler,
    QueryStringSource,
    UniversalExporter,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_exchange_tools(
    mcp: ChukMCPServer,
    exporter: UniversalExporter,
    importer: ImportHandler,
) -> dict[str, Any]:
    """
    Register exchange tools with the MCP server.

    The exporter and importer share one store, so a large export can be
    picked up again by `theory_import_query` with its importKey URL.

    Args:
        mcp: The MCP server instance
        exporter: Exporter (carries the app registry and store)
        importer: Import handler

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}
    registry: AppRegistry = exporter.registry

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_apps() -> str:
        """
        List sibling apps that can receive exports.

        Returns:
            JSON string with app names, URLs and export categories

        Example:
            theory_list_apps()
        """
        try:
            apps = []
            for app in registry.list_apps():
                lookup = registry.lookup(app.name)
                apps.append(
                    {
                        "name": app.name,
                        "url": lookup.url,
                        "port": app.port,
                        "exports": app.exports,
                    }
                )
            return json.dumps({"status": "success", "apps": apps, "count": len(apps)})
        except Exception as e:
            logger.exception("Failed to list apps")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_apps"] = theory_list_apps

    @mcp.tool  # type: ignore[arg-type]
    async def theory_export_to_app(data: dict[str, Any], target_app: str) -> str:
        """
        Export musical data to a sibling app.

        Small payloads travel inline as ?import=<json>. Larger ones are
        stored and the URL carries ?importKey=<key> instead.

        Args:
            data: Object with riffs, triads, quartet, patterns or motifs
            target_app: App name (e.g., 'QuintetComposer', 'RiffGen')

        Returns:
            JSON string with transport method, URL and storage key if stored

        Example:
            theory_export_to_app(
                data={"triads": [["C4", "E4", "G4"]]},
                target_app="QuintetComposer",
            )
        """
        try:
            result = exporter.export_to_app(data, target_app)
            if not result.success:
                return json.dumps(
                    {
                        "status": "error",
                        "message": result.error,
                        "export_status": result.status.value,
                        "errors": result.errors,
                    }
                )

            return json.dumps(
                {"status": "success", "export": result.model_dump(mode="json", exclude_none=True)}
            )
        except Exception as e:
            logger.exception("Failed to export")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_export_to_app"] = theory_export_to_app

    @mcp.tool  # type: ignore[arg-type]
    async def theory_import_query(query: str) -> str:
        """
        Receive imports from a URL query string.

        Accepts either ?import=<json> or ?importKey=<key>. A stored payload
        is removed from the store once it has been read.

        Args:
            query: The query string, with or without the leading '?'

        Returns:
            JSON string with the import records created

        Example:
            theory_import_query(query="?importKey=gml_export_1700000000000_ab12cd34e")
        """
        try:
            records = importer.receive_from(QueryStringSource(query, exporter.store))
            return json.dumps(
                {
                    "status": "success",
                    "imports": [r.model_dump(mode="json") for r in records],
                    "count": len(records),
                }
            )
        except Exception as e:
            logger.exception("Failed to import from query")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_import_query"] = theory_import_query

    @mcp.tool  # type: ignore[arg-type]
    async def theory_import_payload(payload: dict[str, Any]) -> str:
        """
        Receive one export payload directly.

        Args:
            payload: Export payload ({source, target, protocolTag, data})

        Returns:
            JSON string with the import record

        Example:
            theory_import_payload(payload={"source": "RiffGen", "protocolTag": "9x3", "data": {}})
        """
        try:
            record = importer.handle_import(payload)
            return json.dumps({"status": "success", "import": record.model_dump(mode="json")})
        except Exception as e:
            logger.exception("Failed to import payload")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_import_payload"] = theory_import_payload

    @mcp.tool  # type: ignore[arg-type]
    async def theory_list_imports() -> str:
        """
        List imports received so far.

        Returns:
            JSON string with import ids, sources, content types and status

        Example:
            theory_list_imports()
        """
        try:
            imports = [
                {
                    "id": r.id,
                    "source": r.source,
                    "content_type": r.content_type,
                    "status": r.status.value,
                }
                for r in importer.import_queue
            ]
            return json.dumps({"status": "success", "imports": imports, "count": len(imports)})
        except Exception as e:
            logger.exception("Failed to list imports")
            return json.dumps({"status": "error", "message": str(e)})

    tools["theory_list_imports"] = theory_list_imports

    return tools
