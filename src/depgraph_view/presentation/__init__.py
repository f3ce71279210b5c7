"""Presentation layer - human-readable rendering of component results."""

from .human_formatter import format_component_summary

__all__ = ["format_component_summary"]
