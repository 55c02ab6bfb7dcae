"""Drawing the tic-tac-toe board and its animations on a 5x5 LED matrix."""

from __future__ import annotations

import time
from typing import Callable, Optional

from ledtictactoe.board import Board, Player, Position
from ledtictactoe.ledstrip import LedStrip, rgb

MATRIX_SIZE = 5

COLOR_OFF = rgb(0, 0, 0)
COLOR_GRID = rgb(2, 2, 0)
COLOR_CURSOR = rgb(0, 0, 30)
COLOR_PLAYER1 = rgb(30, 0, 0)
COLOR_PLAYER2 = rgb(0, 0, 30)
COLOR_WIN = rgb(0, 30, 0)
COLOR_DRAW = rgb(20, 20, 0)

PLAYER_COLORS = {
    Player.AI: COLOR_PLAYER1,
    Player.HUMAN: COLOR_PLAYER2,
}

Sleep = Callable[[float], object]


def _matrix_index(column: int, row: int) -> int:
    return row * MATRIX_SIZE + column


def led_index(position: tuple[int, int]) -> int:
    """LED index of a board cell; cells sit on the even rows and columns."""
    pos = Position(*position)
    if not (0 <= pos.x < 3 and 0 <= pos.y < 3):
        raise IndexError(f"position {tuple(pos)} is off the board")
    return _matrix_index(2 * pos.x, 2 * pos.y)


def _grid_indices() -> list[int]:
    return [
        _matrix_index(column, row)
        for row in range(MATRIX_SIZE)
        for column in range(MATRIX_SIZE)
        if row % 2 == 1 or column % 2 == 1
    ]


def draw_board(
    strip: LedStrip,
    board: Board,
    cursor: Optional[tuple[int, int]] = None,
    show_cursor: bool = False,
) -> tuple[int, ...]:
    """Draw grid, marks and (optionally) the cursor, then show the strip."""
    strip.fill(COLOR_OFF)
    for index in _grid_indices():
        strip.set_pixel_color(index, COLOR_GRID)
    for y in range(3):
        for x in range(3):
            color = PLAYER_COLORS.get(board[x, y])
            if color is not None:
                strip.set_pixel_color(led_index((x, y)), color)
    if show_cursor and cursor is not None and board[cursor] == Player.EMPTY:
        strip.set_pixel_color(led_index(cursor), COLOR_CURSOR)
    return strip.show()


def flash_position(
    strip: LedStrip,
    position: tuple[int, int],
    color: int,
    sleep: Sleep = time.sleep,
) -> None:
    """Blink one cell: on, off, on, 100 ms per step."""
    index = led_index(position)
    for step in range(3):
        strip.set_pixel_color(index, color if step % 2 == 0 else COLOR_OFF)
        strip.show()
        sleep(0.1)


def win_animation(strip: LedStrip, player: int, sleep: Sleep = time.sleep) -> None:
    """Flash the whole matrix in the winner's colour, 200 ms per step."""
    color = COLOR_PLAYER1 if player == Player.AI else COLOR_PLAYER2
    for step in range(5):
        strip.fill(color if step % 2 == 0 else COLOR_OFF)
        strip.show()
        sleep(0.2)


def draw_animation(strip: LedStrip, sleep: Sleep = time.sleep) -> None:
    """Flash the whole matrix in the draw colour, 300 ms per step."""
    for step in range(3):
        strip.fill(COLOR_DRAW if step % 2 == 0 else COLOR_OFF)
        strip.show()
        sleep(0.3)