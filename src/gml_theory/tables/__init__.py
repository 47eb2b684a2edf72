"""
Scale and chord tables - immutable configuration loaded once.

This module provides:
- TheoryTables: Read-only scale/chord registry
- load_tables: Load tables from a YAML library directory
- default_tables: The shipped library, cached
"""

from gml_theory.tables.loader import LIBRARY_PATH, TheoryTables, default_tables, load_tables

__all__ = [
    "LIBRARY_PATH",
    "TheoryTables",
    "default_tables",
    "load_tables",
]
