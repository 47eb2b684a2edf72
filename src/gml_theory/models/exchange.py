"""
Exchange models - sibling apps, lookups, export results, import records.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from gml_theory.constants import ExportStatus, ImportStatus, TransportMethod


class AppEntry(BaseModel):
    """
    A sibling application in the GML ecosystem.

    `path` names the production host (`<path>.<domain>`), `port` the local
    development server. Nothing here is checked against a live network.
    """

    name: str = Field(..., description="Symbolic app name (e.g., 'RiffGen')")
    path: str = Field(..., description="Production subdomain")
    port: int = Field(..., gt=0, le=65535, description="Local development port")
    exports: list[str] = Field(default_factory=list, description="Export categories")

    model_config = {"frozen": True}

    @field_validator("path")
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Ensure path is a usable hostname label."""
        if not v or not v.replace("-", "").isalnum():
            raise ValueError(f"Invalid app path: {v}")
        return v.lower()

    def url(self, local: bool, domain: str) -> str:
        """Base URL for this app."""
        if local:
            return f"http://localhost:{self.port}"
        return f"https://{self.path}.{domain}"


class AppLookup(BaseModel):
    """Typed result of resolving an app name: found or not found."""

    name: str
    found: bool
    app: AppEntry | None = None
    url: str | None = None
    message: str | None = None

    model_config = {"frozen": True}


class ExportValidation(BaseModel):
    """Outcome of checking export data before any transport work."""

    valid: bool
    errors: list[str] = Field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid


class ExportResult(BaseModel):
    """Outcome of an export attempt."""

    success: bool
    status: ExportStatus
    method: TransportMethod | None = None
    url: str | None = None
    storage_key: str | None = None
    errors: list[str] = Field(default_factory=list)

    @property
    def error(self) -> str | None:
        """First error, if any."""
        return self.errors[0] if self.errors else None


class ImportRecord(BaseModel):
    """One received import, as kept in the import queue."""

    id: str = Field(..., description="Generated import id")
    timestamp: str = Field(..., description="ISO timestamp of receipt")
    source: str | None = Field(None, description="Producing app")
    target: str | None = Field(None, description="Addressed app")
    data: Any = Field(None, description="The envelope as received")
    status: ImportStatus = Field(ImportStatus.RECEIVED, description="Processing state")

    @property
    def content_type(self) -> str | None:
        """The envelope's content.type, if present."""
        if not isinstance(self.data, dict):
            return None
        content = self.data.get("content")
        if not isinstance(content, dict):
            return None
        value = content.get("type")
        return value if isinstance(value, str) else None
