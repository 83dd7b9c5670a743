"""
main.py — Sorting & Pathfinding Visualizer Flask App
=====================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI (Sorting and Pathfinding tabs)
  POST /api/array/random       – new random array
  POST /api/array/set          – array from comma-separated text
  POST /api/sort/config        – pick bubble / quick
  POST /api/sort/run           – run the sort, return its frames
  GET  /api/history            – every finished sort
  POST /api/grid/generate      – new random maze
  POST /api/grid/select        – arm "set start" / "set end"
  POST /api/grid/cell          – click a cell
  POST /api/path/config        – pick dfs / bfs
  POST /api/path/run           – run the search, return its frames

State management:
  Per-user state lives in the Flask session:
    • grid            – serialised Grid (one character per cell)
    • selecting       – "start" / "end" / None
    • path_algo / sort_algo
    • array           – the values the next sort will use
  The sorting history is app-wide and owned by `history_store`.

Runs are computed in one go on the server (Recorder) and the page
animates the returned frames with the configured per-step delay.
"""

from flask import Flask, render_template_string, request, jsonify, session
import logging
import secrets
import sys
import os

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from grid import Grid
from sorting import ArrayModel, InvalidArrayInput, HistoryStore, HistoryEntry
from algorithms import (
    UnknownAlgorithm,
    get_sort,
    get_traversal,
    list_sorts,
    list_traversals,
)
from engine import Recorder, MissingEndpointError
from ui import (
    render_grid,
    render_bars,
    sort_controls,
    path_controls,
    history_panel,
    analytics_panel,
    pseudocode_viewer,
    explanation_panel,
)

logger = logging.getLogger("main")

app = Flask(__name__)
app.secret_key = secrets.token_hex(32)

history_store = HistoryStore(config.HISTORY_PATH)


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def get_grid() -> Grid:
    """Deserialise grid from session, or generate a fresh maze."""
    if "grid" not in session:
        save_grid(_new_maze())
    return Grid.from_dict(session["grid"])


def save_grid(grid: Grid):
    session["grid"] = grid.to_dict()


def get_array() -> ArrayModel:
    if "array" not in session:
        model = ArrayModel()
        model.randomize(config.DEFAULT_ARRAY_LENGTH, config.ARRAY_MIN_VALUE, config.ARRAY_MAX_VALUE)
        save_array(model)
    return ArrayModel(session["array"])


def save_array(model: ArrayModel):
    session["array"] = list(model.values)


def get_state():
    """Return current app state as a dict."""
    return {
        "path_algo": session.get("path_algo", config.DEFAULT_TRAVERSAL),
        "sort_algo": session.get("sort_algo", config.DEFAULT_SORT),
        "selecting": session.get("selecting"),
    }


def set_state(**kwargs):
    for k, v in kwargs.items():
        session[k] = v


def _new_maze(seed=None) -> Grid:
    return Grid.generate(
        rows=config.GRID_ROWS,
        cols=config.GRID_COLS,
        wall_probability=config.WALL_PROBABILITY,
        seed=seed,
    )


def _payload() -> dict:
    """JSON object body of the request; empty for anything else."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _grid_payload(grid: Grid) -> dict:
    return {
        "svg": render_grid(grid),
        "has_endpoints": grid.start is not None and grid.end is not None,
        "selecting": session.get("selecting"),
    }


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    grid  = get_grid()
    model = get_array()
    state = get_state()

    sort_info = get_sort(state["sort_algo"])
    path_info = get_traversal(state["path_algo"])
    has_endpoints = grid.start is not None and grid.end is not None

    html = render_template_string(INDEX_TEMPLATE,
        sort_controls=sort_controls(list_sorts(), state["sort_algo"], model.as_text()),
        bars=render_bars(model.current_step),
        history=history_panel(history_store.entries()),
        sort_pseudocode=pseudocode_viewer(sort_info.pseudocode),
        path_controls=path_controls(
            list_traversals(), state["path_algo"], state["selecting"], has_endpoints,
        ),
        has_endpoints=has_endpoints,
        grid_svg=render_grid(grid),
        path_pseudocode=pseudocode_viewer(path_info.pseudocode),
        analytics=analytics_panel(),
        explanation=explanation_panel(),
        sort_delay=config.SORT_DELAY_MS,
        path_delay=config.TRAVERSAL_DELAY_MS,
    )
    return html


# ---------------------------------------------------------------------------
# API: Array
# ---------------------------------------------------------------------------
@app.route("/api/array/random", methods=["POST"])
def api_array_random():
    model = ArrayModel()
    model.randomize(config.DEFAULT_ARRAY_LENGTH, config.ARRAY_MIN_VALUE, config.ARRAY_MAX_VALUE)
    save_array(model)
    return jsonify({"values": model.values, "text": model.as_text(), "svg": render_bars(model.values)})


@app.route("/api/array/set", methods=["POST"])
def api_array_set():
    text  = _payload().get("text", "")
    model = get_array()

    try:
        model.apply_input(text)
    except InvalidArrayInput as e:
        return jsonify({"error": str(e)}), 400

    save_array(model)
    return jsonify({"values": model.values, "text": model.as_text(), "svg": render_bars(model.values)})


# ---------------------------------------------------------------------------
# API: Sorting
# ---------------------------------------------------------------------------
@app.route("/api/sort/config", methods=["POST"])
def api_sort_config():
    algo_key = _payload().get("algo_key", config.DEFAULT_SORT)
    try:
        info = get_sort(algo_key)
    except UnknownAlgorithm as e:
        return jsonify({"error": str(e)}), 400

    set_state(sort_algo=algo_key)
    return jsonify({"algo_key": algo_key, "pseudocode": pseudocode_viewer(info.pseudocode)})


@app.route("/api/sort/run", methods=["POST"])
def api_sort_run():
    state  = get_state()
    model  = get_array()
    values = list(model.values)

    rec = Recorder()
    try:
        rec.start_sort(state["sort_algo"], values)
    except UnknownAlgorithm as e:
        return jsonify({"error": str(e)}), 400
    rec.run_to_completion()

    history_store.append(HistoryEntry(array=list(values), algorithm=state["sort_algo"]))
    model.set_values(values)
    save_array(model)

    final = rec.final_step
    info  = get_sort(state["sort_algo"])
    return jsonify({
        "frames":      rec.sort_frames(),
        "final":       values,
        "delay_ms":    config.SORT_DELAY_MS,
        "svg":         render_bars(values, final),
        "text":        model.as_text(),
        "analytics":   analytics_panel(rec.metrics),
        "history":     history_panel(history_store.entries()),
        "pseudocode":  pseudocode_viewer(info.pseudocode, final.pseudocode_line),
        "explanation": explanation_panel(final.explanation),
    })


@app.route("/api/history", methods=["GET"])
def api_history():
    return jsonify({"history": [e.to_dict() for e in history_store.entries()]})


# ---------------------------------------------------------------------------
# API: Grid Editing
# ---------------------------------------------------------------------------
@app.route("/api/grid/generate", methods=["POST"])
def api_grid_generate():
    seed = _payload().get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return jsonify({"error": "Maze seed must be an integer"}), 400
    grid = _new_maze(seed)
    save_grid(grid)
    set_state(selecting=None)
    return jsonify(_grid_payload(grid))


@app.route("/api/grid/select", methods=["POST"])
def api_grid_select():
    mode = _payload().get("mode")
    if mode not in ("start", "end", None):
        return jsonify({"error": f"Unknown selection mode: {mode!r}"}), 400
    set_state(selecting=mode)
    return jsonify({"selecting": mode})


@app.route("/api/grid/cell", methods=["POST"])
def api_grid_cell():
    data = _payload()
    grid = get_grid()

    try:
        x, y = int(data["x"]), int(data["y"])
    except (KeyError, TypeError, ValueError):
        return jsonify({"error": "Cell coordinates x and y are required"}), 400
    if not grid.in_bounds(x, y):
        return jsonify({"error": f"Cell ({x}, {y}) is outside the grid"}), 400

    mode = session.get("selecting")
    if mode == "start":
        grid.set_start(x, y)
    elif mode == "end":
        grid.set_end(x, y)
    else:
        grid.toggle_wall(x, y)

    save_grid(grid)
    set_state(selecting=None)
    return jsonify(_grid_payload(grid))


# ---------------------------------------------------------------------------
# API: Pathfinding
# ---------------------------------------------------------------------------
@app.route("/api/path/config", methods=["POST"])
def api_path_config():
    algo_key = _payload().get("algo_key", config.DEFAULT_TRAVERSAL)
    try:
        info = get_traversal(algo_key)
    except UnknownAlgorithm as e:
        return jsonify({"error": str(e)}), 400

    set_state(path_algo=algo_key)
    # a run drawn for the previous algorithm no longer applies
    grid = get_grid()
    grid.reset_path()
    save_grid(grid)

    payload = _grid_payload(grid)
    payload.update({"algo_key": algo_key, "pseudocode": pseudocode_viewer(info.pseudocode)})
    return jsonify(payload)


@app.route("/api/path/run", methods=["POST"])
def api_path_run():
    grid  = get_grid()
    state = get_state()

    grid.reset_path()
    reset_svg = render_grid(grid)

    rec = Recorder()
    try:
        rec.start_traversal(state["path_algo"], grid, grid.start, grid.end)
    except (MissingEndpointError, UnknownAlgorithm) as e:
        logger.warning("Pathfinding run refused: %s", e)
        return jsonify({"error": str(e)}), 400
    rec.run_to_completion()

    frames = rec.visit_frames()
    final  = rec.final_step
    for pos in frames:
        grid.mark_visited(grid.cell(*pos))
    grid.apply_path([grid.cell(*pos) for pos in final.path])
    save_grid(grid)

    info = get_traversal(state["path_algo"])
    return jsonify({
        "reset_svg":   reset_svg,
        "frames":      [list(p) for p in frames],
        "path":        [list(p) for p in final.path],
        "delay_ms":    config.TRAVERSAL_DELAY_MS,
        "svg":         render_grid(grid),
        "analytics":   analytics_panel(rec.metrics),
        "pseudocode":  pseudocode_viewer(info.pseudocode, final.pseudocode_line),
        "explanation": explanation_panel(final.explanation),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting and Pathfinding Visualizer</title>
  <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600&family=Fira+Code&display=swap" rel="stylesheet">
  <style>
    *, *::before, *::after { box-sizing: border-box; margin: 0; }

    :root {
      --page: #f1f5f9;
      --card: #ffffff;
      --line: #cbd5e1;
      --ink: #0f172a;
      --ink-soft: #475569;
      --ink-faint: #94a3b8;
      --blue: #3b82f6;
      --blue-dark: #1d4ed8;
      --green: #10b981;
      --red: #e11d48;
    }

    body { font: 14px/1.5 'Inter', system-ui, sans-serif; background: var(--page); color: var(--ink); padding: 24px; }
    h1 { font-size: 24px; font-weight: 600; margin-bottom: 16px; }
    h3 { font-size: 12px; letter-spacing: .06em; text-transform: uppercase; color: var(--ink-soft); margin-bottom: 10px; }

    .tabs { display: inline-flex; border: 1px solid var(--line); border-radius: 6px; overflow: hidden; margin-bottom: 12px; }
    .tab-btn { border-radius: 0; background: var(--card); color: var(--ink-soft); }
    .tab-btn.active { background: var(--blue); color: #fff; }

    .tab-content { display: none; gap: 20px; align-items: flex-start; }
    .tab-content.active { display: flex; }
    .sidebar { flex: 0 0 320px; }
    .stage { flex: 1; display: grid; gap: 14px; }

    .panel, .canvas-box { background: var(--card); border: 1px solid var(--line); border-radius: 8px; padding: 14px; margin-bottom: 14px; }
    .canvas-box { width: max-content; }
    .cell { cursor: pointer; }

    button { font: inherit; font-weight: 600; padding: 8px 14px; border: 0; border-radius: 6px; cursor: pointer; background: var(--blue); color: #fff; }
    button:hover:not(:disabled) { background: var(--blue-dark); }
    button:disabled { opacity: .4; cursor: default; }
    .btn-primary { background: var(--green); }
    .btn-secondary { background: #e2e8f0; color: var(--ink); }
    .button-row { display: flex; gap: 8px; margin: 8px 0; }

    label { display: block; font-size: 12px; color: var(--ink-soft); margin-top: 8px; }
    select, input[type="text"] { width: 100%; font: inherit; padding: 7px 9px; margin: 4px 0; border: 1px solid var(--line); border-radius: 6px; }

    .code-block { font: 12px/1.7 'Fira Code', monospace; white-space: pre; background: #f8fafc; border-radius: 6px; padding: 8px; }
    .code-line { padding: 0 6px; }
    .code-line.highlight { background: #dbeafe; box-shadow: inset 3px 0 var(--blue); }

    .explanation-text { color: var(--ink-soft); }
    .hint, .placeholder { color: var(--ink-faint); font-style: italic; font-size: 12px; }
    table { width: 100%; border-collapse: collapse; }
    td { padding: 3px 0; }
    td:last-child { text-align: right; font-family: 'Fira Code', monospace; }

    .history-panel ul { list-style: none; padding: 0; max-height: 200px; overflow-y: auto; font: 12px 'Fira Code', monospace; }
    .history-panel li { padding: 3px 0; border-bottom: 1px dashed var(--line); overflow-wrap: anywhere; }

    #notice { color: var(--red); min-height: 20px; }
  </style>
</head>
<body>
  <h1>Sorting and Pathfinding Visualizer</h1>

  <div class="tabs">
    <button class="tab-btn active" data-tab="sorting">Sorting</button>
    <button class="tab-btn" data-tab="pathfinding">Pathfinding</button>
  </div>
  <div id="notice"></div>

  <div class="tab-content active" data-tab="sorting">
    <div class="sidebar">
      {{ sort_controls|safe }}
      <div id="sort-analytics">{{ analytics|safe }}</div>
    </div>
    <div class="stage">
      <div class="canvas-box" id="bars-container">{{ bars|safe }}</div>
      <div class="panel"><h3>Pseudocode</h3><div id="sort-pseudocode">{{ sort_pseudocode|safe }}</div></div>
      <div class="panel"><h3>Last Step</h3><div id="sort-explanation">{{ explanation|safe }}</div></div>
      <div id="history">{{ history|safe }}</div>
    </div>
  </div>

  <div class="tab-content" data-tab="pathfinding">
    <div class="sidebar">
      {{ path_controls|safe }}
      <div id="path-analytics">{{ analytics|safe }}</div>
    </div>
    <div class="stage">
      <div class="canvas-box" id="grid-container">{{ grid_svg|safe }}</div>
      <div class="panel"><h3>Pseudocode</h3><div id="path-pseudocode">{{ path_pseudocode|safe }}</div></div>
      <div class="panel"><h3>Last Step</h3><div id="path-explanation">{{ explanation|safe }}</div></div>
    </div>
  </div>

  <script>
    const SORT_DELAY = {{ sort_delay }};
    const PATH_DELAY = {{ path_delay }};
    const COLORS = {visited: '#bfdbfe', path: '#fde047', swap: '#f59e0b', bar: '#3b82f6'};
    let running = false;

    const $ = (id) => document.getElementById(id);
    const sleep = (ms) => new Promise(r => setTimeout(r, ms));

    function notice(msg) { $('notice').textContent = msg || ''; }

    function lock(on) {
      running = on;
      document.querySelectorAll('.run-lock').forEach(el => el.disabled = on);
      if (!on) refreshFindPath();
    }

    let hasEndpoints = {{ 'true' if has_endpoints else 'false' }};
    function refreshFindPath() { $('btn-find-path').disabled = running || !hasEndpoints; }

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      const body = await res.json();
      if (!res.ok) { notice(body.error); alert(body.error); return null; }
      notice('');
      return body;
    }

    // Tabs
    document.querySelectorAll('.tab-btn').forEach(btn => {
      btn.addEventListener('click', () => {
        if (running) return;
        document.querySelectorAll('.tab-btn').forEach(b => b.classList.remove('active'));
        btn.classList.add('active');
        document.querySelectorAll('.tab-content').forEach(c =>
          c.classList.toggle('active', c.dataset.tab === btn.dataset.tab));
      });
    });

    // ---------------- Sorting ----------------
    function drawBars(values, swapped) {
      const bars = document.querySelectorAll('#bars-svg .bar');
      if (bars.length !== values.length) return;
      const svg = $('bars-svg');
      const h = +svg.getAttribute('height');
      const top = Math.max(...values, 1);
      values.forEach((v, i) => {
        const barH = Math.max(v, 0) / top * (h - 10);
        bars[i].setAttribute('y', h - barH);
        bars[i].setAttribute('height', barH);
        bars[i].setAttribute('fill', swapped && swapped.includes(i) ? COLORS.swap : COLORS.bar);
      });
    }

    function showArray(data) {
      $('bars-container').innerHTML = data.svg;
      $('array-input').value = data.text;
    }

    $('btn-set-array').addEventListener('click', async () => {
      const data = await post('/api/array/set', {text: $('array-input').value});
      if (data) showArray(data);
    });

    $('btn-random-array').addEventListener('click', async () => {
      const data = await post('/api/array/random');
      if (data) showArray(data);
    });

    $('sort-selector').addEventListener('change', async (e) => {
      const data = await post('/api/sort/config', {algo_key: e.target.value});
      if (data) $('sort-pseudocode').innerHTML = data.pseudocode;
    });

    $('btn-sort').addEventListener('click', async () => {
      lock(true);
      try {
        const data = await post('/api/sort/run');
        if (!data) return;
        let prev = null;
        for (const frame of data.frames) {
          const swapped = prev ? frame.map((v, i) => v !== prev[i] ? i : -1).filter(i => i >= 0) : [];
          drawBars(frame, swapped);
          prev = frame;
          await sleep(data.delay_ms);
        }
        $('bars-container').innerHTML = data.svg;
        $('array-input').value = data.text;
        $('sort-analytics').innerHTML = data.analytics;
        $('sort-pseudocode').innerHTML = data.pseudocode;
        $('sort-explanation').innerHTML = data.explanation;
        $('history').innerHTML = data.history;
      } finally {
        lock(false);
      }
    });

    // ---------------- Pathfinding ----------------
    let selectHints = {start: 'Click a cell to place the START.', end: 'Click a cell to place the END.'};

    function showGrid(data) {
      $('grid-container').innerHTML = data.svg;
      hasEndpoints = data.has_endpoints;
      $('select-hint').textContent = selectHints[data.selecting] || 'Click cells to toggle walls.';
      refreshFindPath();
    }

    $('grid-container').addEventListener('click', async (e) => {
      const cell = e.target.closest('.cell');
      if (!cell || running) return;
      const data = await post('/api/grid/cell', {x: +cell.dataset.x, y: +cell.dataset.y});
      if (data) showGrid(data);
    });

    $('btn-new-maze').addEventListener('click', async () => {
      const data = await post('/api/grid/generate');
      if (data) showGrid(data);
    });

    for (const mode of ['start', 'end']) {
      $('btn-set-' + mode).addEventListener('click', async () => {
        const data = await post('/api/grid/select', {mode});
        if (data) $('select-hint').textContent = selectHints[data.selecting];
      });
    }

    $('path-selector').addEventListener('change', async (e) => {
      const data = await post('/api/path/config', {algo_key: e.target.value});
      if (data) {
        showGrid(data);
        $('path-pseudocode').innerHTML = data.pseudocode;
      }
    });

    function paint(pos, color) {
      const rect = $('cell-' + pos[0] + '-' + pos[1]);
      if (rect && rect.classList.contains('empty')) rect.setAttribute('fill', color);
    }

    $('btn-find-path').addEventListener('click', async () => {
      lock(true);
      try {
        const data = await post('/api/path/run');
        if (!data) return;
        $('grid-container').innerHTML = data.reset_svg;
        for (const pos of data.frames) {
          paint(pos, COLORS.visited);
          await sleep(data.delay_ms);
        }
        $('grid-container').innerHTML = data.svg;
        if (!data.path.length) notice('No path found.');
        $('path-analytics').innerHTML = data.analytics;
        $('path-pseudocode').innerHTML = data.pseudocode;
        $('path-explanation').innerHTML = data.explanation;
      } finally {
        lock(false);
      }
    });

    refreshFindPath();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    from logging_config import setup_logging

    setup_logging(config.LOG_LEVEL)
    logger.info("Sorting and Pathfinding Visualizer on http://localhost:%d", config.PORT)
    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
