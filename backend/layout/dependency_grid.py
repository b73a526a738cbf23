"""
Grid (table) data for the Dependencies view.

One header per column (Sprint 1..N, Backlog), one row per team, one cell per
(team, column). Each cell carries its node id and the relations leaving it, so
the renderer can attach arrows without recomputing anything.
"""

from typing import Any, Dict, List

from .constants import BACKLOG_LABEL, SPRINT_LABEL
from .dependency_layout import DependencyLayout, node_id


def build_dependency_grid(layout: DependencyLayout) -> Dict[str, Any]:
    """
    Returns {columns, rows, outOfGrid, empty}.
    outOfGrid lists relations touching a column outside 1..backlog_column.
    """
    backlog = layout.backlog_column
    columns = [
        {"column": col, "label": f"{SPRINT_LABEL} {col}"}
        for col in range(1, layout.max_sprint + 1)
    ]
    columns.append({"column": backlog, "label": BACKLOG_LABEL})

    rows: List[Dict[str, Any]] = []
    for row, team in enumerate(layout.teams):
        cells = []
        for col in range(1, backlog + 1):
            nid = node_id(row, col)
            label = f"{team} backlog" if col == backlog else f"{team} sprint {col}"
            rels = layout.relations_by_source.get(nid, ())
            cells.append({
                "id": nid,
                "column": col,
                "label": label,
                "relations": [rel.to_dict() for rel in rels],
            })
        rows.append({"team": team, "row": row, "cells": cells})

    out_of_grid = []
    for rel in layout.relations:
        if not (1 <= rel.source_column <= backlog and 1 <= rel.target_column <= backlog):
            out_of_grid.append({"sourceId": rel.source_node_id, **rel.to_dict()})

    return {
        "columns": columns,
        "rows": rows,
        "outOfGrid": out_of_grid,
        "empty": not layout.teams,
    }
