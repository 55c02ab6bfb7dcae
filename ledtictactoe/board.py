"""The 3x3 tic-tac-toe board and its simple AI."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Iterator, NamedTuple, Optional

SIZE = 3


class Player(IntEnum):
    """Contents of a cell: nobody, the AI or the human."""

    EMPTY = 0
    AI = 1
    HUMAN = 2


class Position(NamedTuple):
    """A cell on the board, column ``x`` and row ``y``."""

    x: int
    y: int


_LINES = (
    [[Position(x, y) for x in range(SIZE)] for y in range(SIZE)]
    + [[Position(x, y) for y in range(SIZE)] for x in range(SIZE)]
    + [[Position(i, i) for i in range(SIZE)]]
    + [[Position(SIZE - 1 - i, i) for i in range(SIZE)]]
)


class Board:
    """A 3x3 grid of :class:`Player` values."""

    def __init__(self) -> None:
        self._cells = [[Player.EMPTY] * SIZE for _ in range(SIZE)]

    @staticmethod
    def _check(position: tuple[int, int]) -> Position:
        pos = Position(*position)
        if not (0 <= pos.x < SIZE and 0 <= pos.y < SIZE):
            raise IndexError(f"position {tuple(pos)} is off the board")
        return pos

    def __getitem__(self, position: tuple[int, int]) -> Player:
        pos = self._check(position)
        return self._cells[pos.y][pos.x]

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        pos = self._check(position)
        self._cells[pos.y][pos.x] = Player(value)

    def clear(self) -> None:
        """Empty every cell."""
        for row in self._cells:
            row[:] = [Player.EMPTY] * SIZE

    def empty_cells(self) -> Iterator[Position]:
        """Empty cells in row-major order."""
        for y, row in enumerate(self._cells):
            for x, cell in enumerate(row):
                if cell == Player.EMPTY:
                    yield Position(x, y)

    def check_win(self, player: int) -> bool:
        """Whether ``player`` holds a full row, column or diagonal."""
        return any(all(self[p] == player for p in line) for line in _LINES)

    def is_full(self) -> bool:
        """Whether no cell is empty."""
        return next(self.empty_cells(), None) is None

    def evaluate(self) -> int:
        """10 if the AI has won, -10 if the human has, 0 otherwise."""
        if self.check_win(Player.AI):
            return 10
        if self.check_win(Player.HUMAN):
            return -10
        return 0

    def _completing_cell(self, player: Player) -> Optional[Position]:
        for pos in self.empty_cells():
            self[pos] = player
            won = self.check_win(player)
            self[pos] = Player.EMPTY
            if won:
                return pos
        return None

    def ai_move(self, rng: Optional[random.Random] = None) -> Position:
        """Place an AI mark: win if possible, else block, else pick at random."""
        choice = self._completing_cell(Player.AI)
        if choice is None:
            choice = self._completing_cell(Player.HUMAN)
        if choice is None:
            empty = list(self.empty_cells())
            if not empty:
                raise ValueError("the board is full")
            choice = empty[(rng or random).randrange(len(empty))]
        self[choice] = Player.AI
        return choice

    def __repr__(self) -> str:
        rows = ("".join(".XO"[c] for c in row) for row in self._cells)
        return f"Board({'/'.join(rows)})"