"""Exhaustive minimax AI for the 3x3 board."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional
import math

from .game import COMPUTER, Board, Player, other

WIN_SCORE = 10


@dataclass
class MinimaxAI:
    """AI player that searches the full game tree on a single board buffer.

    Every hypothetical move is applied to the board it was given and undone
    before returning, so callers see the board unchanged afterwards.
    """

    player: Player = COMPUTER

    @property
    def opponent(self) -> Player:
        return other(self.player)

    # ---- public API ----

    def choose(self, board: Board) -> int:
        """Best cell for ``self.player``; the lowest index wins ties."""
        best_score = -math.inf
        best_move: Optional[int] = None

        for idx in board.empty_cells():
            board.place(idx, self.player)
            score = self._minimax(board, 0, False)
            board.clear(idx)
            if score > best_score:
                best_score, best_move = score, idx

        if best_move is None:
            raise RuntimeError("No valid moves available")
        return best_move

    def score(self, board: Board, maximizing: bool, depth: int = 0) -> int:
        """Minimax value of ``board`` with ``self.player`` maximizing."""
        return self._minimax(board, depth, maximizing)

    # ---- core search ----

    def _minimax(self, board: Board, depth: int, maximizing: bool) -> int:
        # Terminal checks read the buffer being mutated by the search.
        winner = board.winner()
        if winner == self.player:
            return WIN_SCORE - depth
        if winner == self.opponent:
            return depth - WIN_SCORE
        moves = board.empty_cells()
        if not moves:
            return 0

        if maximizing:
            value = -math.inf
            for idx in moves:
                board.place(idx, self.player)
                value = max(value, self._minimax(board, depth + 1, False))
                board.clear(idx)
        else:
            value = math.inf
            for idx in moves:
                board.place(idx, self.opponent)
                value = min(value, self._minimax(board, depth + 1, True))
                board.clear(idx)
        return int(value)
