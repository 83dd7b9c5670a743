"""
canvas.py — SVG Renderers
==========================
Pure rendering functions:

  • render_grid(grid)          → SVG string of the pathfinding board
  • render_bars(values, step)  → SVG string of the array as a bar chart

Design decisions:
  - NO mutation.  The caller passes in everything it needs and gets back
    a string.
  - Cell colouring is a dict lookup: CellType value → hex color.  A run's
    visited cells and path are already written into the grid, so the
    board is drawn straight from cell types.  Each cell <rect> carries
    id="cell-x-y" so the page script can recolour cells during an
    animated run without a round trip.
  - Bars are scaled to the largest value in the snapshot.
"""

from typing import Dict, List, Optional

from grid import Grid, Cell
from algorithms.step import Step


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    bg:     str = "#0d1117"

    # grid
    cell_size:  int = 26
    cell_gap:   int = 1
    cell_colors: Dict[str, str] = {
        "empty":    "#f8fafc",   # near white
        "wall":     "#1f2937",   # dark grey
        "start":    "#22c55e",   # green
        "end":      "#ef4444",   # red
        "path":     "#fde047",   # yellow
        "visited":  "#bfdbfe",   # light blue
    }

    # bars
    bars_width:   int = 900
    bars_height:  int = 260
    bar_gap:      int = 2
    bar_color:    str = "#3b82f6"
    swap_color:   str = "#f59e0b"
    pivot_color:  str = "#a855f7"
    sorted_color: str = "#10b981"


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------
def render_grid(grid: Grid, config: CanvasConfig = CONFIG) -> str:
    pitch  = config.cell_size + config.cell_gap
    width  = grid.cols * pitch + config.cell_gap
    height = grid.rows * pitch + config.cell_gap

    parts = [
        f'<svg id="grid-svg" width="{width}" height="{height}" '
        f'viewBox="0 0 {width} {height}" xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{width}" height="{height}" fill="{config.bg}"/>',
    ]
    for cell in grid.iter_cells():
        parts.append(_render_cell(cell, config))
    parts.append("</svg>")
    return "\n".join(parts)


def _render_cell(cell: Cell, config: CanvasConfig) -> str:
    state_key = cell.type.value
    fill  = config.cell_colors[state_key]
    pitch = config.cell_size + config.cell_gap
    x     = config.cell_gap + cell.x * pitch
    y     = config.cell_gap + cell.y * pitch

    return (
        f'<rect id="cell-{cell.x}-{cell.y}" class="cell {state_key}" '
        f'data-x="{cell.x}" data-y="{cell.y}" x="{x}" y="{y}" '
        f'width="{config.cell_size}" height="{config.cell_size}" rx="3" fill="{fill}"/>'
    )


# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------
def render_bars(
    values: List[int],
    step: Optional[Step] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    One bar per value, height proportional to value / max(values).
    Swapped bars and the pivot are highlighted when a step is given;
    the final step paints every bar as sorted.
    """
    w, h = config.bars_width, config.bars_height
    parts = [
        f'<svg id="bars-svg" width="{w}" height="{h}" viewBox="0 0 {w} {h}" '
        f'xmlns="http://www.w3.org/2000/svg">',
        f'<rect width="{w}" height="{h}" fill="{config.bg}"/>',
    ]
    if values:
        top     = max(max(values), 1)
        slot    = w / len(values)
        bar_w   = max(slot - config.bar_gap, 1)
        swapped = set(step.swapped) if step else set()
        pivot   = step.pivot if step else None

        for i, v in enumerate(values):
            bar_h = max(v, 0) / top * (h - 10)
            color = config.bar_color
            if step and step.is_final:
                color = config.sorted_color
            elif i == pivot:
                color = config.pivot_color
            elif i in swapped:
                color = config.swap_color
            parts.append(
                f'<rect class="bar" data-index="{i}" x="{i * slot:.2f}" y="{h - bar_h:.2f}" '
                f'width="{bar_w:.2f}" height="{bar_h:.2f}" fill="{color}"><title>{v}</title></rect>'
            )
    parts.append("</svg>")
    return "\n".join(parts)
