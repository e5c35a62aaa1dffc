"""Layout constants of the block grid."""

MODULE_WIDTH = 68
MODULE_HEIGHT = 35
GRID_DOT_SIZE = 4
ROWS = 7
COLUMNS = 5
GRID_EDGE_SPACING = GRID_DOT_SIZE - 1
MODULE_SPACING = 2
TAB_HEIGHT = 22
MODULE_GRID_SNAP_THRESHOLD = 0.25


def grid_width() -> float:
    """Total width of the block grid including edge spacing."""
    return float(
        COLUMNS * MODULE_WIDTH
        + (COLUMNS - 1) * MODULE_SPACING
        + GRID_EDGE_SPACING * 2
    )


def tab_width() -> int:
    """Width of a single column tab."""
    return int(int(grid_width() + 1) / float(COLUMNS))