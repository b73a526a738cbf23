"""
Cross-team dependency layout for the Dependencies view.

Places every (team, sprint) pair that takes part in a dependency on a grid:
  - rows:    teams, in first-seen order (edge `from` before `to`)
  - columns: sprints 1..max_sprint, plus a backlog column at max_sprint + 1

Each dependency edge becomes one relation between two node ids, tagged with
the side of the source cell the arrow leaves from and the side of the target
cell it arrives at:
  - same column:     vertical (bottom -> top, or top -> bottom when pointing up)
  - later -> earlier: left -> right
  - earlier -> later: right -> left

Pure: no input mutation, no shared state, same input -> same output.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from loguru import logger

from .constants import (
    ANCHOR_BOTTOM,
    ANCHOR_LEFT,
    ANCHOR_RIGHT,
    ANCHOR_TOP,
    NODE_ID_PREFIX,
)


class SprintOverflow(str, Enum):
    """What to do with a scheduled sprint number greater than max_sprint."""

    KEEP = "keep"        # use the sprint as-is; the node lies outside the grid
    BACKLOG = "backlog"  # clamp to the backlog column


@dataclass(frozen=True)
class AnchoredRelation:
    source_node_id: str
    target_node_id: str
    source_anchor: str
    target_anchor: str
    source_column: int
    target_column: int

    def to_dict(self) -> Dict[str, str]:
        """Relation in the renderer's shape (targetId + anchors)."""
        return {
            "targetId": self.target_node_id,
            "targetNodeId": self.target_node_id,
            "sourceAnchor": self.source_anchor,
            "targetAnchor": self.target_anchor,
        }


@dataclass(frozen=True)
class DependencyLayout:
    """Renderer-ready result of compute_dependency_layout.

    Attributes:
        teams: Team names; a team's row is its index.
        rows: Team name -> row, built once alongside teams.
        max_sprint: Number of real sprint columns.
        backlog_column: Column index of the backlog lane (max_sprint + 1).
        relations_by_source: Source node id -> relations leaving that node,
            in the order the edges were given.
    """

    teams: Tuple[str, ...]
    rows: Dict[str, int]
    max_sprint: int
    backlog_column: int
    relations_by_source: Dict[str, Tuple[AnchoredRelation, ...]] = field(default_factory=dict)

    @property
    def relations(self) -> List[AnchoredRelation]:
        return [rel for rels in self.relations_by_source.values() for rel in rels]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "teams": list(self.teams),
            "maxSprint": self.max_sprint,
            "backlogColumn": self.backlog_column,
            "relationsBySourceNodeId": {
                src: [rel.to_dict() for rel in rels]
                for src, rels in self.relations_by_source.items()
            },
        }


# ---------------------------------------------------------------------------
# Edge access: plain dicts ({"from": ..., "to": ...}) or DependencyEdge models
# ---------------------------------------------------------------------------

def _endpoints(edge: Any) -> Tuple[Any, Any]:
    if isinstance(edge, Mapping):
        return edge["from"], edge["to"]
    return edge.source, edge.target


def _ref_name(ref: Any) -> str:
    if isinstance(ref, Mapping):
        return ref["name"]
    return ref.name


def _ref_sprint(ref: Any) -> Optional[int]:
    if isinstance(ref, Mapping):
        return ref.get("sprint")
    return ref.sprint


# ---------------------------------------------------------------------------
# 1. Teams -> rows
# ---------------------------------------------------------------------------

def extract_teams(deps: Iterable[Any]) -> List[str]:
    """Deduplicated team names in first-seen order (from, then to, per edge)."""
    teams: List[str] = []
    seen = set()
    for edge in deps:
        for ref in _endpoints(edge):
            name = _ref_name(ref)
            if name not in seen:
                seen.add(name)
                teams.append(name)
    return teams


def index_teams(teams: Sequence[str]) -> Dict[str, int]:
    return {team: row for row, team in enumerate(teams)}


# ---------------------------------------------------------------------------
# 2. Sprints -> columns
# ---------------------------------------------------------------------------

def backlog_column(max_sprint: int) -> int:
    return max_sprint + 1


def resolve_column(
    sprint: Optional[int],
    max_sprint: int,
    overflow: SprintOverflow = SprintOverflow.KEEP,
) -> int:
    """Column for an endpoint. Missing, null or 0 sprint means backlog."""
    if not sprint:
        return backlog_column(max_sprint)
    if sprint > max_sprint and SprintOverflow(overflow) is SprintOverflow.BACKLOG:
        return backlog_column(max_sprint)
    return sprint


# ---------------------------------------------------------------------------
# 3. Node ids
# ---------------------------------------------------------------------------

def node_id(row: int, column: int) -> str:
    """Grid cell id, e.g. (0, 3) -> 'board-0-3'."""
    return f"{NODE_ID_PREFIX}-{row}-{column}"


# ---------------------------------------------------------------------------
# 4. Anchors
# ---------------------------------------------------------------------------

def assign_anchors(from_row: int, from_col: int, to_row: int, to_col: int) -> Tuple[str, str]:
    """Return (source_anchor, target_anchor) for one edge."""
    if from_col == to_col:
        # Same lane; a self loop (equal rows) goes bottom -> top.
        if from_row > to_row:
            return ANCHOR_TOP, ANCHOR_BOTTOM
        return ANCHOR_BOTTOM, ANCHOR_TOP
    if from_col > to_col:
        return ANCHOR_LEFT, ANCHOR_RIGHT
    return ANCHOR_RIGHT, ANCHOR_LEFT


def anchor_edge(
    edge: Any,
    rows: Mapping[str, int],
    max_sprint: int,
    overflow: SprintOverflow = SprintOverflow.KEEP,
) -> AnchoredRelation:
    src, dst = _endpoints(edge)
    from_row = rows[_ref_name(src)]
    to_row = rows[_ref_name(dst)]
    from_col = resolve_column(_ref_sprint(src), max_sprint, overflow)
    to_col = resolve_column(_ref_sprint(dst), max_sprint, overflow)
    source_anchor, target_anchor = assign_anchors(from_row, from_col, to_row, to_col)
    return AnchoredRelation(
        source_node_id=node_id(from_row, from_col),
        target_node_id=node_id(to_row, to_col),
        source_anchor=source_anchor,
        target_anchor=target_anchor,
        source_column=from_col,
        target_column=to_col,
    )


# ---------------------------------------------------------------------------
# 5. Grouping by source node
# ---------------------------------------------------------------------------

def group_relations(relations: Iterable[AnchoredRelation]) -> Dict[str, Tuple[AnchoredRelation, ...]]:
    """Source node id -> relations, keeping encounter order within each group."""
    grouped: Dict[str, List[AnchoredRelation]] = {}
    for rel in relations:
        grouped.setdefault(rel.source_node_id, []).append(rel)
    return {src: tuple(rels) for src, rels in grouped.items()}


def _count_overflow(deps: Sequence[Any], max_sprint: int) -> int:
    count = 0
    for edge in deps:
        for ref in _endpoints(edge):
            sprint = _ref_sprint(ref)
            if sprint and sprint > max_sprint:
                count += 1
    return count


def compute_dependency_layout(
    deps: Sequence[Any],
    max_sprint: int,
    overflow: SprintOverflow = SprintOverflow.KEEP,
) -> DependencyLayout:
    """
    Lay out cross-team dependencies on the team x sprint grid.

    deps: edges as {"from": {"name", "sprint"?}, "to": {...}} or DependencyEdge.
    max_sprint: number of real sprint columns (>= 0); backlog is max_sprint + 1.
    overflow: policy for scheduled sprints beyond max_sprint.
    """
    deps = list(deps or [])
    overflow = SprintOverflow(overflow)

    teams = extract_teams(deps)
    rows = index_teams(teams)

    overflowed = _count_overflow(deps, max_sprint)
    if overflowed:
        logger.warning(
            "{} dependency endpoint(s) reference a sprint beyond max_sprint={} (policy: {})",
            overflowed, max_sprint, overflow.value,
        )

    relations = [anchor_edge(edge, rows, max_sprint, overflow) for edge in deps]
    grouped = group_relations(relations)

    logger.debug(
        "Dependency layout: {} edges, {} teams, {} source nodes",
        len(relations), len(teams), len(grouped),
    )
    return DependencyLayout(
        teams=tuple(teams),
        rows=rows,
        max_sprint=max_sprint,
        backlog_column=backlog_column(max_sprint),
        relations_by_source=grouped,
    )
