"""Shared utilities for layout consumers (API, visualization)."""

from .graph import build_relation_graph, find_circular_dependencies

__all__ = ["build_relation_graph", "find_circular_dependencies"]
