"""Whole-graph analysis operations."""

from .components import ComponentAnalysis

__all__ = ["ComponentAnalysis"]
