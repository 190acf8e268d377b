"""Lex and parse comment markers, and keep option definitions in a registry."""

__version__ = "0.1.0"