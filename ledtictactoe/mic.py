"""Tic-tac-toe against the AI, steered by claps picked up by a microphone."""

from __future__ import annotations

import logging
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

log = logging.getLogger(__name__)

ADC_VREF = 3.3
ADC_RANGE = 1 << 12
ADC_CONVERT = ADC_VREF / (ADC_RANGE - 1)
THRESHOLD_VOLTS = 1.5
RELEASE_FACTOR = 0.6
ANALYSIS_WINDOW_MS = 1000
CLAP_TIMEOUT_MS = 20


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


def adc_to_volts(raw: int) -> float:
    """Convert a 12-bit ADC reading to volts."""
    if not 0 <= raw < ADC_RANGE:
        raise ValueError(f"ADC reading must be within 0..{ADC_RANGE - 1}, got {raw}")
    return raw * ADC_CONVERT


class ClapDetector:
    """Groups loud peaks into bursts of claps."""

    def __init__(self) -> None:
        self.claps: list[int] = []
        self.above_threshold = False

    def feed(self, volts: float, now: int) -> int:
        """Take one sample at time ``now`` (ms).

        Returns the number of claps in a burst that has just ended, or 0.
        """
        if not self.above_threshold and volts > THRESHOLD_VOLTS:
            self.above_threshold = True
            self.claps.append(now)
            log.debug("clap detected (%.2f V) at %d ms", volts, now)
        elif volts < THRESHOLD_VOLTS * RELEASE_FACTOR:
            self.above_threshold = False

        self.claps = [t for t in self.claps if now - t <= ANALYSIS_WINDOW_MS]
        if self.claps and now - self.claps[-1] > CLAP_TIMEOUT_MS:
            count = len(self.claps)
            self.claps.clear()
            return count
        return 0


class MicGame:
    """Game state and clap handling for the microphone mode.

    One clap moves the cursor to the next empty cell; two or more claps
    place the human's mark under the cursor.
    """

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
        self.detector = ClapDetector()

    def draw(self) -> tuple[int, ...]:
        """Redraw the board; the cursor shows only on the human's turn."""
        show_cursor = self.active and self.current_player == Player.HUMAN
        return draw_board(self.strip, self.board, self.cursor, show_cursor)

    def process_claps(self, adc_raw: int, reset_pressed: bool) -> int:
        """Handle one microphone sample and the reset button.

        Returns the size of a clap burst that ended with this sample, or 0.
        """
        volts = adc_to_volts(adc_raw)
        count = self.detector.feed(volts, self.clock())
        if count == 1:
            self.move_cursor()
        elif count > 1:
            self.make_move()
        if reset_pressed:
            self.reset()
        log.debug("volts: %.2f", volts)
        return count

    def move_cursor(self) -> None:
        """Advance the cursor in reading order to the next empty cell."""
        if not self.active or self.current_player != Player.HUMAN:
            return
        for _ in range(9):
            x = (self.cursor.x + 1) % 3
            y = (self.cursor.y + 1) % 3 if x == 0 else self.cursor.y
            self.cursor = Position(x, y)
            if self.board[self.cursor] == Player.EMPTY:
                break
        self.draw()

    def make_move(self) -> None:
        """Place the human's mark under the cursor if that is allowed."""
        if (
            not self.active
            or self.current_player != Player.HUMAN
            or self.board[self.cursor] != Player.EMPTY
        ):
            return
        self.board[self.cursor] = Player.HUMAN
        flash_position(self.strip, self.cursor, COLOR_PLAYER2, self.sleep)
        self.check_game_state()

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

    def tick(self, adc_raw: int, reset_pressed: bool) -> None:
        """One pass of the main loop."""
        if self.active and self.current_player == Player.AI:
            self.ai_turn()
        else:
            self.process_claps(adc_raw, reset_pressed)
        self.sleep(0.01)