# io_utils.py
"""
Console helpers shared by the game orchestrator and the placement wizard
–––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––––
• grid_rows()    – grid view → ["A ~ ~ O …", …] lines with row labels
• render_grid()  – header + grid_rows() joined into printable text
• clear_screen() – ANSI clear, honouring the CLEAR_SCREEN setting
"""

import logging
from typing import Callable, List, Sequence

from .config import CLEAR_SEQUENCE

logger = logging.getLogger("broadside.io_utils")


def header_row(columns: int) -> str:
    return "  " + "".join(f"{i} " for i in range(1, columns + 1))


def grid_rows(grid: Sequence[Sequence[str]]) -> List[str]:
    rows: list[str] = []
    for r, cells in enumerate(grid):
        label = chr(ord("A") + r)
        rows.append(f"{label} " + "".join(f"{cell} " for cell in cells))
    logger.debug("grid_rows() result – rows_count=%d", len(rows))
    return rows


def render_grid(grid: Sequence[Sequence[str]]) -> str:
    columns = len(grid[0]) if grid else 0
    return "\n".join([header_row(columns), *grid_rows(grid)])


def clear_screen(write: Callable[[str], None], enabled: bool = True) -> None:
    if enabled:
        write(CLEAR_SEQUENCE)
