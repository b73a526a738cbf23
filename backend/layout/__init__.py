"""Layout module - computes the team x sprint grid for cross-team dependencies."""

from .dependency_grid import build_dependency_grid
from .dependency_layout import (
    AnchoredRelation,
    DependencyLayout,
    SprintOverflow,
    assign_anchors,
    compute_dependency_layout,
    extract_teams,
    group_relations,
    node_id,
    resolve_column,
)
from .models import DependencyEdge, DependencyPayload, StoryRef

__all__ = [
    "AnchoredRelation",
    "DependencyEdge",
    "DependencyLayout",
    "DependencyPayload",
    "SprintOverflow",
    "StoryRef",
    "assign_anchors",
    "build_dependency_grid",
    "compute_dependency_layout",
    "extract_teams",
    "group_relations",
    "node_id",
    "resolve_column",
]
