"""
Exchange configuration.

Settings are fixed once at startup and passed to the exporter, the app
registry and the tools. They can come from defaults, a YAML file, or the
server command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from gml_theory.constants import DEFAULT_DOMAIN, DEFAULT_SOURCE, INLINE_PAYLOAD_LIMIT


class ExchangeConfig(BaseModel):
    """Settings for moving payloads between GML apps."""

    local: bool = Field(False, description="Target local dev ports instead of production hosts")
    domain: str = Field(DEFAULT_DOMAIN, description="Production domain for app hosts")
    inline_limit: int = Field(
        INLINE_PAYLOAD_LIMIT, gt=0, description="Max JSON length sent inline in the URL"
    )
    source_name: str = Field(DEFAULT_SOURCE, description="Default export source")
    author: str = Field(DEFAULT_SOURCE, description="Default envelope author")

    model_config = {"frozen": True}

    @classmethod
    def load(cls, path: Path | None = None, **overrides: Any) -> ExchangeConfig:
        """
        Build a config from an optional YAML file plus overrides.

        Args:
            path: YAML file with an `exchange:` mapping (optional)
            **overrides: Field values that win over the file (None is ignored)

        Returns:
            ExchangeConfig
        """
        data: dict[str, Any] = {}
        if path is not None:
            with open(path) as f:
                loaded = yaml.safe_load(f) or {}
            data.update(loaded.get("exchange", {}))

        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**data)
