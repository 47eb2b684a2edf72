#!/usr/bin/env python3
"""
Example: Export to a sibling app and import on the other side.

One small export travels inline in the URL, one large export goes
through the store and can only be picked up once.

Usage:
    python examples/export_roundtrip.py
"""

import logging

from gml_theory.analysis import build_chord
from gml_theory.constants import ContentType
from gml_theory.exchange import (
    AppRegistry,
    ImportHandler,
    MemoryStore,
    QueryStringSource,
    UniversalExporter,
)

logging.basicConfig(level=logging.INFO)


def main() -> None:
    """Export twice, import twice."""
    store = MemoryStore()
    exporter = UniversalExporter(AppRegistry.load(), store)
    importer = ImportHandler()
    importer.on_import(lambda r: print(f"  received {r.id} from {r.source}"))
    importer.register_processor(
        ContentType.TRIAD_PROGRESSION,
        lambda r: print(f"  {len(r.data['content']['triads'])} triads to voice"),
    )

    progression = [build_chord(root, "major") for root in ("C4", "F4", "G4", "C4")]
    small = exporter.export_to_app({"triads": progression}, "QuartetEngine")
    print(f"small export: {small.status.value} via {small.method.value}")

    large = exporter.export_to_app({"triads": progression * 40}, "QuartetEngine")
    print(f"large export: {large.status.value} via {large.method.value} ({large.storage_key})")

    for result in (small, large):
        query = (result.url or "").split("?", 1)[1]
        importer.receive_from(QueryStringSource(query, store))

    print(f"store now holds {len(store)} entries")
    again = importer.receive_from(QueryStringSource(f"importKey={large.storage_key}", store))
    print(f"second pickup of the stored export: {len(again)} records")


if __name__ == "__main__":
    main()
