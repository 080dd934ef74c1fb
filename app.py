from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from flask import Flask, jsonify, request

from game import (
    DEFAULT_SIZE,
    Place,
    PuzzleState,
    find_galaxies,
    find_galaxy,
    mark_galaxies,
    max_unmarked_region,
    solved,
)
from galaxies_core.board import as_place, coordinate
from galaxies_core.logging_config import LOGGER_NAME, setup_logging

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _default_size() -> int:
    try:
        return int(os.getenv("GALAXIES_DEFAULT_SIZE", str(DEFAULT_SIZE)))
    except ValueError:
        return DEFAULT_SIZE


def _int_from_json(v: Any) -> int:
    # JSON floats and bools are rejected rather than truncated.
    return coordinate(v)


def _place_from_json(obj: Any) -> Place:
    return as_place(obj)


def _places_to_json(places) -> List[List[int]]:
    return [[int(p.x), int(p.y)] for p in sorted(places)]


def state_to_json(s: PuzzleState) -> Dict[str, Any]:
    return {
        "cols": s.cols,
        "rows": s.rows,
        "boundaries": _places_to_json(s.boundaries()),
        "centers": [[c.x, c.y] for c in s.centers()],
        "marks": [[p.x, p.y, v] for p, v in sorted(s.marked_cells().items())],
    }


def json_to_state(obj: Dict[str, Any]) -> PuzzleState:
    """Rebuilds a board from its JSON form. Raises ValueError/KeyError/TypeError on bad input."""
    s = PuzzleState(_int_from_json(obj["cols"]), _int_from_json(obj["rows"]))
    for e in obj.get("boundaries", []):
        edge = _place_from_json(e)
        if not s.is_boundary(edge):
            s.toggle_boundary(edge)
    for c in obj.get("centers", []):
        s.place_center(_place_from_json(c))
    for x, y, v in obj.get("marks", []):
        s.set_mark(_place_from_json((x, y)), v)
    return s


def _bad_request(error: str) -> Tuple[Any, int]:
    return jsonify({"ok": False, "error": error}), 400


def _body() -> Optional[Dict[str, Any]]:
    """The JSON request body, or None when it is not a JSON object."""
    body = request.get_json(force=True, silent=True)
    if body is None:
        return {}
    return body if isinstance(body, dict) else None


def _load(body: Dict[str, Any]) -> Tuple[Optional[PuzzleState], Optional[str]]:
    s_in = body.get("state")
    if not isinstance(s_in, dict):
        return None, "state required"
    try:
        return json_to_state(s_in), None
    except (KeyError, TypeError, ValueError) as e:
        return None, f"bad state: {e}"


# ---------- Board editing API ----------

@app.post("/api/new")
def api_new() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    size = _default_size()
    try:
        state = PuzzleState(_int_from_json(body.get("cols", size)), _int_from_json(body.get("rows", size)))
    except (TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(state)})


@app.post("/api/boundary")
def api_boundary() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    try:
        state.toggle_boundary(_place_from_json(body["edge"]))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(state), "solved": solved(state)})


@app.post("/api/center")
def api_center() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    try:
        place = _place_from_json(body["place"])
        if body.get("remove"):
            state.remove_center(place)
        else:
            state.place_center(place)
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(state), "solved": solved(state)})


@app.post("/api/mark")
def api_mark() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    try:
        state.set_mark(_place_from_json(body["cell"]), body["value"])
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(state)})


@app.post("/api/mark_galaxies")
def api_mark_galaxies() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    try:
        mark_galaxies(state, _int_from_json(body.get("value", 1)))
    except (TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "state": state_to_json(state)})


# ---------- Query API ----------

@app.post("/api/galaxy")
def api_galaxy() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    try:
        region = find_galaxy(state, _place_from_json(body["center"]))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "galaxy": _places_to_json(region) if region is not None else None})


@app.post("/api/solved")
def api_solved() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    galaxies = [
        {"center": [c.x, c.y], "cells": _places_to_json(region) if region is not None else None}
        for c, region in find_galaxies(state).items()
    ]
    return jsonify({"ok": True, "solved": solved(state), "galaxies": galaxies})


@app.post("/api/hint")
def api_hint() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    try:
        region = max_unmarked_region(state, _place_from_json(body["point"]))
    except (KeyError, TypeError, ValueError) as e:
        return _bad_request(str(e))
    return jsonify({"ok": True, "region": _places_to_json(region)})


@app.post("/api/render")
def api_render() -> Any:
    body = _body()
    if body is None:
        return _bad_request("JSON object required")
    state, err = _load(body)
    if state is None:
        return _bad_request(err or "bad state")
    return jsonify({"ok": True, "text": state.pretty()})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    level = os.getenv("GALAXIES_LOG_LEVEL", "INFO")
    # The core and this module log under different names.
    for name in (LOGGER_NAME, __name__):
        setup_logging(level, name=name)
    debug = os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0")).lower() in ("1", "true", "yes", "on")
    port = int(os.getenv("PORT", "5000"))
    logger.info("serving Galaxies API on port %d", port)
    app.run(host="0.0.0.0", port=port, debug=debug)
