# typefall_layout.py
from dataclasses import dataclass
from typefall_config import CONFIG

COLS, ROWS = 80, 23
STATUS_ROWS = 2
PLAY_ROWS = ROWS - STATUS_ROWS
# Extra text lines below the status line: pause banner and help.
FOOTER_ROWS = 4

@dataclass
class Dims:
    cell_w: int
    cell_h: int
    margin: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    status_y: int

def compute_dims(window_w: int = 0, window_h: int = 0) -> Dims:
    """Fit the grid into the window, or use CONFIG["CELL_SIZE"] when no window size is known."""
    margin = 8
    cell_h = int(CONFIG["CELL_SIZE"])
    if window_w > 0 and window_h > 0:
        fit_w = (window_w - 2 * margin) * 2 // COLS
        fit_h = (window_h - 2 * margin) // (ROWS + FOOTER_ROWS)
        cell_h = max(8, min(fit_w, fit_h))
    # Monospace glyphs are roughly half as wide as they are tall
    cell_w = max(4, cell_h // 2)

    board_w = COLS * cell_w
    board_h = PLAY_ROWS * cell_h

    total_w = margin + board_w + margin
    total_h = margin + (ROWS + FOOTER_ROWS) * cell_h + margin

    board_x = margin
    board_y = margin
    status_y = board_y + board_h

    return Dims(
        cell_w=cell_w, cell_h=cell_h, margin=margin,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        status_y=status_y
    )
