"""Board state and outcome rules for a single 3x3 Tic-Tac-Toe board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

Player = str  # "X" or "O"

EMPTY = " "
HUMAN: Player = "X"
COMPUTER: Player = "O"

BOARD_SIZE = 9

# Scan order matters for winner(): rows, then columns, then diagonals.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def other(player: Player) -> Player:
    return COMPUTER if player == HUMAN else HUMAN


class Outcome(str, Enum):
    ONGOING = "ongoing"
    HUMAN_WIN = "human_win"
    COMPUTER_WIN = "computer_win"
    TIE = "tie"

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.ONGOING

    @property
    def message(self) -> Optional[str]:
        """Text shown to the player when the game ends."""
        return _MESSAGES.get(self)


_MESSAGES = {
    Outcome.HUMAN_WIN: "You win!",
    Outcome.COMPUTER_WIN: "AI wins!",
    Outcome.TIE: "It's a tie!",
}


@dataclass
class Board:
    # 'X', 'O', or ' ' (space) for empty
    cells: List[str] = field(default_factory=lambda: [EMPTY] * BOARD_SIZE)

    def is_empty(self, idx: int) -> bool:
        return self.cells[idx] == EMPTY

    def place(self, idx: int, player: Player) -> None:
        # No occupancy check: callers validate with is_empty() first.
        self.cells[idx] = player

    def clear(self, idx: int) -> None:
        self.cells[idx] = EMPTY

    def reset(self) -> None:
        for idx in range(BOARD_SIZE):
            self.cells[idx] = EMPTY

    def empty_cells(self) -> List[int]:
        return [i for i, c in enumerate(self.cells) if c == EMPTY]

    def is_full(self) -> bool:
        return all(c != EMPTY for c in self.cells)

    def winner(self) -> Optional[Player]:
        """Mark of the first completed line in scan order, or ``None``."""
        for a, b, c in WINNING_LINES:
            v = self.cells[a]
            if v != EMPTY and v == self.cells[b] == self.cells[c]:
                return v
        return None

    def rendered(self) -> List[str]:
        """Cell contents for display: the mark, or an empty string."""
        return [c if c in (HUMAN, COMPUTER) else "" for c in self.cells]


def outcome_of(board: Board) -> Outcome:
    winner = board.winner()
    if winner == HUMAN:
        return Outcome.HUMAN_WIN
    if winner == COMPUTER:
        return Outcome.COMPUTER_WIN
    if board.is_full():
        return Outcome.TIE
    return Outcome.ONGOING
