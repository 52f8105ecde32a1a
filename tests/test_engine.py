"""Tests for the turn-taking engine and its UI notifications."""

import pytest

from tictactoe.engine import EngineState, GameEngine
from tictactoe.game import COMPUTER, EMPTY, HUMAN, Board, Outcome

EMPTY_RENDER = [""] * 9


def _board(layout: str) -> Board:
    return Board(cells=[EMPTY if c == "." else c for c in layout])


def _engine(layout: str = "........."):
    events = []
    engine = GameEngine(
        board=_board(layout),
        render=lambda cells: events.append(("render", list(cells))),
        announce=lambda outcome: events.append(("announce", outcome)),
    )
    return engine, events


def test_human_move_is_followed_by_computer_reply():
    engine, events = _engine()
    outcome = engine.on_cell_activated(4)

    assert outcome is Outcome.ONGOING
    assert engine.board.cells[4] == HUMAN
    assert engine.board.cells[0] == COMPUTER
    assert engine.state is EngineState.AWAITING_HUMAN
    assert engine.current_player == HUMAN
    assert [kind for kind, _ in events] == ["render", "render"]
    assert events[0][1][4] == "X" and events[0][1][0] == ""
    assert events[1][1][0] == "O"


def test_human_win_is_announced_then_board_resets():
    engine, events = _engine("XX.OO....")
    outcome = engine.on_cell_activated(2)

    assert outcome is Outcome.HUMAN_WIN
    assert events == [
        ("render", ["X", "X", "X", "O", "O", "", "", "", ""]),
        ("announce", Outcome.HUMAN_WIN),
        ("render", EMPTY_RENDER),
    ]
    assert engine.board.cells == [EMPTY] * 9
    assert engine.state is EngineState.AWAITING_HUMAN
    assert engine.current_player == HUMAN


def test_last_human_move_can_end_in_a_tie():
    engine, events = _engine("XOXXOOOX.")
    outcome = engine.on_cell_activated(8)

    assert outcome is Outcome.TIE
    assert events[0] == ("render", ["X", "O", "X", "X", "O", "O", "O", "X", "X"])
    assert events[1:] == [("announce", Outcome.TIE), ("render", EMPTY_RENDER)]


def test_computer_reply_can_win():
    engine, events = _engine("OO.X..X..")
    outcome = engine.on_cell_activated(8)

    assert outcome is Outcome.COMPUTER_WIN
    assert [kind for kind, _ in events] == ["render", "render", "announce", "render"]
    assert events[1][1][:3] == ["O", "O", "O"]
    assert events[2] == ("announce", Outcome.COMPUTER_WIN)
    assert engine.board.cells == [EMPTY] * 9


def test_computer_blocks_two_in_a_row():
    engine, _ = _engine()
    engine.on_cell_activated(0)
    assert engine.board.cells[4] == COMPUTER

    engine.on_cell_activated(1)
    assert engine.board.cells[2] == COMPUTER


def test_computer_avoids_opposite_corner_fork():
    engine, _ = _engine()
    engine.on_cell_activated(0)
    engine.on_cell_activated(8)
    played = {i for i, c in enumerate(engine.board.cells) if c == COMPUTER}
    assert 4 in played
    (edge,) = played - {4}
    assert edge in (1, 3, 5, 7)


@pytest.mark.parametrize("index", [-1, 9, 42])
def test_out_of_range_activation_is_ignored(index):
    engine, events = _engine()
    assert engine.on_cell_activated(index) is None
    assert events == []
    assert engine.board.cells == [EMPTY] * 9


def test_occupied_activation_is_ignored():
    engine, events = _engine()
    engine.on_cell_activated(4)
    events.clear()
    before = list(engine.board.cells)

    assert engine.on_cell_activated(4) is None
    assert engine.on_cell_activated(0) is None
    assert events == []
    assert engine.board.cells == before


def test_reset_request_clears_board_mid_game():
    engine, events = _engine()
    engine.on_cell_activated(4)
    events.clear()

    engine.on_reset_requested()

    assert engine.board.cells == [EMPTY] * 9
    assert engine.state is EngineState.AWAITING_HUMAN
    assert engine.current_player == HUMAN
    assert events == [("render", EMPTY_RENDER)]


def test_direct_submission_checks_preconditions():
    engine, _ = _engine("....X....")
    with pytest.raises(ValueError):
        engine.submit_human_move(4)
    with pytest.raises(ValueError):
        engine.compute_computer_move()


def test_default_engine_runs_without_listeners():
    engine = GameEngine()
    assert engine.on_cell_activated(0) is Outcome.ONGOING
    assert engine.board.cells[4] == COMPUTER
