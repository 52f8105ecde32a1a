"""FastAPI-powered web UI for playing Tic-Tac-Toe against the minimax AI."""

from __future__ import annotations

import logging
import threading
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ConfigDict, Field

from .engine import GameEngine
from .game import Outcome

logger = logging.getLogger(__name__)


@dataclass
class GameSession:
    """An engine plus whatever the page needs to show about the last game."""

    engine: GameEngine = field(default_factory=GameEngine)
    cells: List[str] = field(default_factory=lambda: [""] * 9)
    final_cells: Optional[List[str]] = None
    last_outcome: Optional[Outcome] = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self.engine.render = self._on_render
        self.engine.announce = self._on_announce
        self.cells = self.engine.board.rendered()

    def _on_render(self, cells: List[str]) -> None:
        self.cells = list(cells)

    def _on_announce(self, outcome: Outcome) -> None:
        # Called before the engine resets, so cells still hold the final board.
        self.final_cells = list(self.cells)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="Tic-Tac-Toe", description="Play Tic-Tac-Toe against minimax")


class MoveRequest(BaseModel):
    """Request payload for a click on a board cell."""

    model_config = ConfigDict(populate_by_name=True)

    # Range is not validated here: the engine ignores unavailable cells.
    cell_index: int = Field(alias="cellIndex")


def _create_session() -> Tuple[str, GameSession]:
    session = GameSession()
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("Created game %s", session_id)
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        engine = session.engine
        outcome = session.last_outcome
        return {
            "id": game_id,
            "cells": list(session.cells),
            "currentPlayer": engine.current_player,
            "state": engine.state.value,
            "lastOutcome": outcome.value if outcome else None,
            "message": outcome.message if outcome else None,
            "finalCells": session.final_cells,
        }


def _apply_player_move(session: GameSession, cell_index: int) -> None:
    with session.lock:
        outcome = session.engine.on_cell_activated(cell_index)
        # Ignored activations report no outcome.
        session.last_outcome = outcome
        if outcome is None or not outcome.is_terminal:
            session.final_cells = None


def _apply_reset(session: GameSession) -> None:
    with session.lock:
        session.engine.on_reset_requested()
        session.last_outcome = None
        session.final_cells = None


@app.post("/api/game")
def create_game() -> Dict[str, object]:
    game_id, session = _create_session()
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(game_id: str, request: MoveRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_player_move(session, request.cell_index)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset")
def reset_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_reset(session)
    return _serialize_session(game_id, session)


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return HTML_PAGE


HTML_PAGE = """<!DOCTYPE html>
<html lang=\"en\">
  <head>
    <meta charset=\"utf-8\" />
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\" />
    <title>Tic Tac Toe</title>
    <style>
      body {
        margin: 0;
        min-height: 100vh;
        display: flex;
        align-items: center;
        justify-content: center;
        font-family: system-ui, sans-serif;
        background: #f0f0f5;
      }
      main {
        width: 300px;
        display: flex;
        flex-direction: column;
        gap: 8px;
      }
      #grid {
        display: grid;
        grid-template-columns: repeat(3, 1fr);
        gap: 4px;
      }
      #grid button {
        height: 96px;
        font-size: 48px;
        font-weight: 600;
        border: 1px solid #999;
        background: #fff;
        cursor: pointer;
      }
      #restart {
        height: 40px;
        font-size: 16px;
      }
    </style>
  </head>
  <body>
    <main>
      <div id=\"grid\"></div>
      <button id=\"restart\" type=\"button\">Restart</button>
    </main>
    <script>
      const grid = document.getElementById("grid");
      const buttons = [];
      let gameId = null;

      for (let i = 0; i < 9; i++) {
        const button = document.createElement("button");
        button.type = "button";
        button.addEventListener("click", () => activate(i));
        grid.appendChild(button);
        buttons.push(button);
      }

      function render(cells) {
        cells.forEach((mark, i) => {
          buttons[i].textContent = mark;
        });
      }

      async function post(path, body) {
        const response = await fetch(path, {
          method: "POST",
          headers: { "Content-Type": "application/json" },
          body: body === undefined ? undefined : JSON.stringify(body),
        });
        return response.json();
      }

      function show(state) {
        if (state.message && state.finalCells) {
          render(state.finalCells);
          // Let the final board paint before the modal message blocks.
          setTimeout(() => {
            alert(state.message);
            render(state.cells);
          }, 0);
          return;
        }
        render(state.cells);
      }

      async function activate(index) {
        if (gameId === null || buttons[index].textContent !== "") {
          return;
        }
        show(await post(`/api/game/${gameId}/move`, { cellIndex: index }));
      }

      document.getElementById("restart").addEventListener("click", async () => {
        if (gameId !== null) {
          show(await post(`/api/game/${gameId}/reset`));
        }
      });

      post("/api/game").then((state) => {
        gameId = state.id;
        show(state);
      });
    </script>
  </body>
</html>
"""
