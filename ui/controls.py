"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • sort_controls           – array input, random array, algorithm, Sort
  • path_controls           – algorithm, Find Path, new maze, set start / end
  • history_panel           – one line per finished sort
  • analytics_panel         – cells visited, path length, swaps, …
  • pseudocode_viewer       – with live line highlighting
  • explanation_panel       – "why this step happened"

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import List, Optional

from algorithms import AlgoInfo
from engine import RunMetrics
from sorting import HistoryEntry


def _escape(text: str) -> str:
    return (
        str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def _options(algorithms: List[AlgoInfo], selected_key: str) -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {_escape(algo.complexity_time)}</option>'
        )
    return "".join(options)


# ---------------------------------------------------------------------------
# Sorting Controls
# ---------------------------------------------------------------------------
def sort_controls(
    algorithms: List[AlgoInfo],
    selected_key: str = "bubble",
    input_text: str = "",
) -> str:
    return f"""
    <div class="panel sort-controls">
      <h3>📶 Array</h3>
      <input type="text" id="array-input" value="{_escape(input_text)}"
             placeholder="Enter numbers separated by commas">
      <div class="button-row">
        <button id="btn-set-array" class="btn-secondary run-lock">Set Array</button>
        <button id="btn-random-array" class="btn-secondary run-lock">Random Array</button>
      </div>
      <label>Algorithm:</label>
      <select id="sort-selector" class="run-lock">
        {_options(algorithms, selected_key)}
      </select>
      <button id="btn-sort" class="btn-primary run-lock">▶ Sort</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Pathfinding Controls
# ---------------------------------------------------------------------------
def path_controls(
    algorithms: List[AlgoInfo],
    selected_key: str = "dfs",
    selecting: Optional[str] = None,
    has_endpoints: bool = False,
) -> str:
    hint = "Click cells to toggle walls."
    if selecting == "start":
        hint = "Click a cell to place the START."
    elif selecting == "end":
        hint = "Click a cell to place the END."

    return f"""
    <div class="panel path-controls">
      <h3>🧭 Pathfinding</h3>
      <label>Algorithm:</label>
      <select id="path-selector" class="run-lock">
        {_options(algorithms, selected_key)}
      </select>
      <div class="button-row">
        <button id="btn-find-path" class="btn-primary run-lock" {'' if has_endpoints else 'disabled'}>▶ Find Path</button>
        <button id="btn-new-maze" class="btn-secondary run-lock">Generate New Maze</button>
      </div>
      <div class="button-row">
        <button id="btn-set-start" class="btn-secondary run-lock">Set Start</button>
        <button id="btn-set-end" class="btn-secondary run-lock">Set End</button>
      </div>
      <p class="hint" id="select-hint">{hint}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# History
# ---------------------------------------------------------------------------
def history_panel(entries: List[HistoryEntry]) -> str:
    if not entries:
        return """
        <div class="panel history-panel">
          <h3>🗂 Sorting History</h3>
          <p class="placeholder">No sorts yet.</p>
        </div>
        """

    items = "".join(
        f"<li><strong>{_escape(e.algorithm)}</strong>: [{', '.join(str(v) for v in e.array)}]</li>"
        for e in entries
    )
    return f"""
    <div class="panel history-panel">
      <h3>🗂 Sorting History</h3>
      <ul>{items}</ul>
    </div>
    """


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Run an algorithm to see metrics.</p>
        </div>
        """

    if metrics.domain == "sorting":
        rows = f"""
        <tr><td>Swaps:</td><td><strong>{metrics.swaps}</strong></td></tr>
        """
    else:
        path_status = "✅ Found" if metrics.path_found else "❌ No path"
        rows = f"""
        <tr><td>Cells Visited:</td><td><strong>{metrics.cells_visited}</strong></td></tr>
        <tr><td>Path Cells:</td><td><strong>{metrics.path_length}</strong></td></tr>
        <tr><td>Path:</td><td><strong>{path_status}</strong></td></tr>
        """

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {metrics.algo_label}</h3>
      <table>
        {rows}
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Compute Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{_escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        explanation = "▶ Run an algorithm to see what happened at its last step."

    return f"""<div class="explanation-text">{_escape(explanation)}</div>"""
