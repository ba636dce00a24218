"""Syntax tree elements for IEC 61131-3 programs: literals, types, variables, statements and diagnostics."""

__version__ = "0.1.0"