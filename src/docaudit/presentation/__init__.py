"""Presentation layer."""
