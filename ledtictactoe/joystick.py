"""Tic-tac-toe against the AI, steered with a joystick and a button."""

from __future__ import annotations

import random
import time
from typing import Callable, Optional

from ledtictactoe.board import Board, Player, Position
from ledtictactoe.ledstrip import LedStrip
from ledtictactoe.render import (
    COLOR_PLAYER2,
    draw_animation,
    draw_board,
    flash_position,
    win_animation,
)

DEBOUNCE_DELAY_MS = 200
AXIS_LOW = 1000
AXIS_HIGH = 3000


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def _axis(value: int) -> int:
    if value < AXIS_LOW:
        return 1
    if value > AXIS_HIGH:
        return -1
    return 0


class JoystickGame:
    """Game state and input handling for the joystick mode."""

    def __init__(
        self,
        strip: LedStrip,
        rng: Optional[random.Random] = None,
        clock: Callable[[], int] = _monotonic_ms,
        sleep: Callable[[float], object] = time.sleep,
    ) -> None:
        self.strip = strip
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock
        self.sleep = sleep
        self.board = Board()
        self.current_player = Player.AI
        self.cursor = Position(1, 1)
        self.active = True
        self._last_move_time = 0
        self._last_button = False
        self._last_reset = False

    def draw(self) -> tuple[int, ...]:
        """Redraw the board; the cursor shows only on the human's turn."""
        show_cursor = self.active and self.current_player == Player.HUMAN
        return draw_board(self.strip, self.board, self.cursor, show_cursor)

    def process_input(
        self,
        x_value: int,
        y_value: int,
        button_pressed: bool,
        reset_pressed: bool,
    ) -> None:
        """Handle one reading of the joystick axes and the two buttons."""
        if reset_pressed and not self._last_reset:
            self.reset()
        self._last_reset = reset_pressed

        dx = dy = 0
        if self.active:
            dx = _axis(y_value)
            dy = _axis(x_value)

        now = self.clock()
        if now - self._last_move_time > DEBOUNCE_DELAY_MS and (dx or dy):
            self.cursor = Position(
                (self.cursor.x + dx) % 3, (self.cursor.y - dy) % 3
            )
            self.draw()
            self._last_move_time = now

        if button_pressed and not self._last_button:
            if not self.active:
                self.reset()
            elif (
                self.current_player == Player.HUMAN
                and self.board[self.cursor] == Player.EMPTY
            ):
                self.board[self.cursor] = Player.HUMAN
                flash_position(self.strip, self.cursor, COLOR_PLAYER2, self.sleep)
                self.check_game_state()
        self._last_button = button_pressed

    def ai_turn(self) -> Position:
        """Pause, let the AI place its mark, redraw and update the state."""
        self.sleep(0.5)
        choice = self.board.ai_move(self.rng)
        self.draw()
        self.check_game_state()
        return choice

    def check_game_state(self) -> None:
        """End the game on a win or a full board, else pass the turn."""
        if self.board.check_win(self.current_player):
            win_animation(self.strip, self.current_player, self.sleep)
            self.draw()
            self.active = False
        elif self.board.is_full():
            draw_animation(self.strip, self.sleep)
            self.draw()
            self.active = False
        else:
            self.current_player = (
                Player.HUMAN if self.current_player == Player.AI else Player.AI
            )

    def reset(self) -> None:
        """Start a new game with the AI to move."""
        self.board.clear()
        self.cursor = Position(1, 1)
        self.current_player = Player.AI
        self.active = True
        self.draw()

    def tick(
        self,
        x_value: int,
        y_value: int,
        button_pressed: bool,
        reset_pressed: bool,
    ) -> None:
        """One pass of the main loop."""
        if self.active and self.current_player == Player.AI:
            self.ai_turn()
        else:
            self.process_input(x_value, y_value, button_pressed, reset_pressed)
        self.sleep(0.01)