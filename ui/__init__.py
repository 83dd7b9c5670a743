"""
ui/
---
Presentation layer.

    from ui import render_grid, render_bars
    from ui import sort_controls, path_controls, …
"""

from ui.canvas import render_grid, render_bars

from ui.controls import (
    sort_controls,
    path_controls,
    history_panel,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
)

__all__ = [
    "render_grid",
    "render_bars",
    "sort_controls",
    "path_controls",
    "history_panel",
    "analytics_panel",
    "pseudocode_viewer",
    "explanation_panel",
]
