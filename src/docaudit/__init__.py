"""Conformance checks for modular AsciiDoc and DocBook sources."""

__version__ = "0.1.0"
