"""Turn-taking and game-over state machine for a human versus the minimax AI."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional
import logging

from .ai import MinimaxAI
from .game import BOARD_SIZE, COMPUTER, HUMAN, Board, Outcome, Player, outcome_of

logger = logging.getLogger(__name__)

RenderCallback = Callable[[List[str]], None]
AnnounceCallback = Callable[[Outcome], None]


class EngineState(str, Enum):
    AWAITING_HUMAN = "awaiting_human"
    EVALUATING = "evaluating"
    AWAITING_COMPUTER = "awaiting_computer"
    TERMINAL = "terminal"


def _ignore_render(cells: List[str]) -> None:
    return None


def _ignore_announce(outcome: Outcome) -> None:
    return None


@dataclass
class GameEngine:
    """Drives one game: human move, evaluation, computer reply, evaluation.

    The UI is told about changes through two callbacks:
      - render(cells) after every processed move and after every reset
      - announce(outcome) when a game ends, right before the reset render
    """

    board: Board = field(default_factory=Board)
    ai: MinimaxAI = field(default_factory=lambda: MinimaxAI(player=COMPUTER))
    render: RenderCallback = field(default=_ignore_render, repr=False)
    announce: AnnounceCallback = field(default=_ignore_announce, repr=False)
    current_player: Player = HUMAN
    state: EngineState = EngineState.AWAITING_HUMAN

    # ---- UI-facing API ----

    def on_cell_activated(self, index: int) -> Optional[Outcome]:
        """Handle a click on ``index``; invalid activations are ignored."""
        if self.state is not EngineState.AWAITING_HUMAN:
            logger.debug("Ignoring activation of %s in state %s", index, self.state)
            return None
        if not 0 <= index < BOARD_SIZE or not self.board.is_empty(index):
            logger.debug("Ignoring activation of unavailable cell %s", index)
            return None
        return self.submit_human_move(index)

    def on_reset_requested(self) -> None:
        self._reset()

    # ---- turn handling ----

    def submit_human_move(self, index: int) -> Outcome:
        """Play the human's move and, unless the game ended, the reply.

        Returns the outcome the call produced. A terminal outcome has
        already been announced and the board reset by the time this returns.
        """
        if self.state is not EngineState.AWAITING_HUMAN:
            raise ValueError("It is not the human player's turn")
        if not 0 <= index < BOARD_SIZE or not self.board.is_empty(index):
            raise ValueError("Cell is not available")

        self._apply(index, HUMAN)
        outcome = self._evaluate()
        if outcome.is_terminal:
            return outcome

        self.compute_computer_move()
        return self._evaluate()

    def compute_computer_move(self) -> int:
        if self.state is not EngineState.AWAITING_COMPUTER:
            raise ValueError("It is not the computer player's turn")
        move = self.ai.choose(self.board)
        self._apply(move, COMPUTER)
        return move

    # ---- helpers ----

    def _apply(self, index: int, player: Player) -> None:
        self.board.place(index, player)
        logger.debug("%s played cell %d", player, index)
        self.state = EngineState.EVALUATING
        self.render(self.board.rendered())

    def _evaluate(self) -> Outcome:
        outcome = outcome_of(self.board)
        if outcome.is_terminal:
            self.state = EngineState.TERMINAL
            logger.info("Game over: %s", outcome.value)
            self.announce(outcome)
            self._reset()
            return outcome

        self.current_player = COMPUTER if self.current_player == HUMAN else HUMAN
        self.state = (
            EngineState.AWAITING_COMPUTER
            if self.current_player == COMPUTER
            else EngineState.AWAITING_HUMAN
        )
        return outcome

    def _reset(self) -> None:
        self.board.reset()
        self.current_player = HUMAN
        self.state = EngineState.AWAITING_HUMAN
        self.render(self.board.rendered())
