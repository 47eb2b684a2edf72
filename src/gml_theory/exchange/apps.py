"""
App registry - where sibling GML apps live.

Loaded once from YAML. Resolving an app never raises: an unknown name
comes back as an AppLookup with found=False.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

import yaml

from gml_theory.config import ExchangeConfig
from gml_theory.constants import ErrorMessages
from gml_theory.models.exchange import AppEntry, AppLookup

LIBRARY_PATH = Path(__file__).parent / "library"


class AppRegistry:
    """Static table of sibling apps and their URLs."""

    def __init__(self, apps: list[AppEntry], config: ExchangeConfig | None = None):
        """
        Initialize the registry.

        Args:
            apps: App entries, in display order
            config: Exchange config (decides local vs production URLs)
        """
        self.config = config or ExchangeConfig()
        self._apps = MappingProxyType({app.name: app for app in apps})

    @classmethod
    def load(cls, path: Path | None = None, config: ExchangeConfig | None = None) -> AppRegistry:
        """Load app entries from a YAML file (defaults to the built-in apps.yaml)."""
        path = path or (LIBRARY_PATH / "apps.yaml")
        with open(path) as f:
            data = yaml.safe_load(f) or {}

        apps = [AppEntry(name=name, **entry) for name, entry in data.get("apps", {}).items()]
        return cls(apps, config)

    def list_apps(self) -> list[AppEntry]:
        """All registered apps."""
        return list(self._apps.values())

    def lookup(self, name: str) -> AppLookup:
        """
        Resolve an app name to its entry and base URL.

        Args:
            name: Symbolic app name (e.g., 'QuartetEngine')

        Returns:
            AppLookup with found=True and url set, or found=False and a message
        """
        app = self._apps.get(name)
        if app is None:
            return AppLookup(
                name=name,
                found=False,
                message=ErrorMessages.UNKNOWN_APP.format(app=name),
            )
        return AppLookup(
            name=name,
            found=True,
            app=app,
            url=app.url(local=self.config.local, domain=self.config.domain),
        )

    def apps_accepting(self, category: str) -> list[AppEntry]:
        """Apps that declare an export category."""
        return [app for app in self._apps.values() if category in app.exports]

    def __contains__(self, name: object) -> bool:
        return name in self._apps

    def __len__(self) -> int:
        return len(self._apps)
