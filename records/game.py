"""
Tic-tac-toe.

State is an immutable GameState; ``mark`` and ``reset`` return a new state
and never touch the one passed in. The board lives in the user's session
between requests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

PLAYERS = ("X", "O")
BOARD_SIZE = 9

# Scan order is fixed: rows, columns, diagonals.
LINES = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

Squares = Tuple[Optional[str], ...]


def calculate_winner(squares: Sequence[Optional[str]]) -> Optional[str]:
    for a, b, c in LINES:
        if squares[a] and squares[a] == squares[b] == squares[c]:
            return squares[a]
    return None


@dataclass(frozen=True)
class GameState:
    squares: Squares = (None,) * BOARD_SIZE
    x_is_next: bool = True

    @property
    def next_player(self) -> str:
        return PLAYERS[0] if self.x_is_next else PLAYERS[1]

    @property
    def winner(self) -> Optional[str]:
        return calculate_winner(self.squares)

    @property
    def is_draw(self) -> bool:
        return self.winner is None and all(self.squares)

    @property
    def status(self) -> str:
        winner = self.winner
        if winner:
            return f"Winner: {winner}"
        if self.is_draw:
            return "Draw"
        return f"Next player: {self.next_player}"

    def to_session(self) -> Dict[str, Any]:
        return {"squares": list(self.squares), "x_is_next": self.x_is_next}

    @classmethod
    def from_session(cls, data: Optional[Dict[str, Any]]) -> "GameState":
        if not data:
            return cls()
        squares = tuple(data.get("squares") or ())
        if len(squares) != BOARD_SIZE or any(s not in PLAYERS and s is not None for s in squares):
            logger.warning("Discarding malformed game state from session")
            return cls()
        return cls(squares=squares, x_is_next=bool(data.get("x_is_next", True)))


def mark(state: GameState, index: int) -> GameState:
    """Place the current player's symbol; occupied squares and finished games are left as they are."""
    if not 0 <= index < BOARD_SIZE:
        raise ValueError(f"Square index must be between 0 and {BOARD_SIZE - 1}, got {index}")
    if state.squares[index] or state.winner:
        return state

    squares = list(state.squares)
    squares[index] = state.next_player
    return replace(state, squares=tuple(squares), x_is_next=not state.x_is_next)


def reset() -> GameState:
    """Empty board with X to move."""
    return GameState()
