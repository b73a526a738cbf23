"""
Shared constants for the Dependencies view grid.
Node ids and labels must match what the frontend renderer looks up.
"""

# Node id: f"{NODE_ID_PREFIX}-{row}-{column}"
NODE_ID_PREFIX = "board"

# Anchor sides an arrow can leave from / arrive at
ANCHOR_TOP = "top"
ANCHOR_BOTTOM = "bottom"
ANCHOR_LEFT = "left"
ANCHOR_RIGHT = "right"
ANCHORS = (ANCHOR_TOP, ANCHOR_BOTTOM, ANCHOR_LEFT, ANCHOR_RIGHT)

# Column header / cell labels
SPRINT_LABEL = "Sprint"
BACKLOG_LABEL = "Backlog"
