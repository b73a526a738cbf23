"""Tests for layout/dependency_grid.py — headers, rows, cells, out-of-grid report."""

from layout import SprintOverflow, build_dependency_grid, compute_dependency_layout


def dep(src, src_sprint, dst, dst_sprint=None):
    return {"from": {"name": src, "sprint": src_sprint}, "to": {"name": dst, "sprint": dst_sprint}}


class TestColumns:
    def test_sprints_then_backlog(self):
        grid = build_dependency_grid(compute_dependency_layout([dep("A", 1, "B", 2)], 2))
        assert grid["columns"] == [
            {"column": 1, "label": "Sprint 1"},
            {"column": 2, "label": "Sprint 2"},
            {"column": 3, "label": "Backlog"},
        ]

    def test_zero_sprints(self):
        grid = build_dependency_grid(compute_dependency_layout([dep("A", None, "B")], 0))
        assert grid["columns"] == [{"column": 1, "label": "Backlog"}]
        assert [c["label"] for c in grid["rows"][0]["cells"]] == ["A backlog"]


class TestRows:
    def test_one_row_per_team_one_cell_per_column(self):
        grid = build_dependency_grid(compute_dependency_layout([dep("A", 1, "B", 2)], 2))
        assert [r["team"] for r in grid["rows"]] == ["A", "B"]
        assert [r["row"] for r in grid["rows"]] == [0, 1]
        for r in grid["rows"]:
            assert [c["column"] for c in r["cells"]] == [1, 2, 3]

    def test_cell_ids_and_labels(self):
        grid = build_dependency_grid(compute_dependency_layout([dep("A", 1, "B", 2)], 2))
        cells = grid["rows"][1]["cells"]
        assert [c["id"] for c in cells] == ["board-1-1", "board-1-2", "board-1-3"]
        assert [c["label"] for c in cells] == ["B sprint 1", "B sprint 2", "B backlog"]

    def test_relations_attached_to_source_cell(self):
        grid = build_dependency_grid(compute_dependency_layout([dep("A", 1, "B", 2)], 2))
        a_cells = grid["rows"][0]["cells"]
        assert a_cells[0]["relations"] == [
            {"targetId": "board-1-2", "targetNodeId": "board-1-2", "sourceAnchor": "right", "targetAnchor": "left"}
        ]
        assert a_cells[1]["relations"] == []
        assert all(c["relations"] == [] for c in grid["rows"][1]["cells"])


class TestEmptyAndOverflow:
    def test_empty(self):
        grid = build_dependency_grid(compute_dependency_layout([], 3))
        assert grid["empty"] is True
        assert grid["rows"] == []
        assert grid["outOfGrid"] == []

    def test_not_empty(self):
        grid = build_dependency_grid(compute_dependency_layout([dep("A", 1, "B", 1)], 1))
        assert grid["empty"] is False

    def test_overflow_keep_reported(self):
        layout = compute_dependency_layout([dep("A", 1, "B", 9)], 2)
        grid = build_dependency_grid(layout)
        assert grid["outOfGrid"] == [
            {
                "sourceId": "board-0-1",
                "targetId": "board-1-9",
                "targetNodeId": "board-1-9",
                "sourceAnchor": "right",
                "targetAnchor": "left",
            }
        ]

    def test_negative_sprint_reported(self):
        """A negative sprint is outside the grid even though its id ends in a digit."""
        layout = compute_dependency_layout([dep("A", -1, "B", 1)], 2)
        grid = build_dependency_grid(layout)
        assert [r["sourceId"] for r in grid["outOfGrid"]] == ["board-0--1"]
        assert all(c["relations"] == [] for r in grid["rows"] for c in r["cells"])

    def test_overflow_backlog_stays_in_grid(self):
        layout = compute_dependency_layout([dep("A", 1, "B", 9)], 2, SprintOverflow.BACKLOG)
        grid = build_dependency_grid(layout)
        assert grid["outOfGrid"] == []
        assert grid["rows"][0]["cells"][0]["relations"][0]["targetId"] == "board-1-3"
