"""Command-line front end: play either mode on a text rendering of the LED matrix."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Optional, Sequence, TextIO, Union

from ledtictactoe.board import Player
from ledtictactoe.joystick import DEBOUNCE_DELAY_MS, JoystickGame
from ledtictactoe.ledstrip import DataFormat, LedStrip
from ledtictactoe.mic import ADC_RANGE, CLAP_TIMEOUT_MS, MicGame
from ledtictactoe.render import (
    COLOR_CURSOR,
    COLOR_DRAW,
    COLOR_GRID,
    COLOR_OFF,
    COLOR_PLAYER1,
    COLOR_WIN,
    MATRIX_SIZE,
)

LED_LENGTH = 25
MAX_CLAPS = 9

_AXIS_CENTER = ADC_RANGE // 2
_AXIS_MIN = 0
_AXIS_MAX = ADC_RANGE - 1

# The cursor and the human's marks share one colour, so both render as "O".
_SYMBOLS = (
    (COLOR_OFF, "."),
    (COLOR_GRID, "+"),
    (COLOR_PLAYER1, "X"),
    (COLOR_CURSOR, "O"),
    (COLOR_DRAW, "*"),
    (COLOR_WIN, "#"),
)

_JOYSTICK_HELP = "commands: up, down, left, right, press, reset, help, quit"
_MIC_HELP = "commands: clap [N], N, reset, help, quit"


def render_text(strip: LedStrip) -> str:
    """Render the strip as rows of the LED matrix, one character per pixel."""
    symbols = {strip.convert(color): char for color, char in reversed(_SYMBOLS)}
    chars = [symbols.get(word, "?") for word in strip.words()]
    rows = (
        "".join(chars[start:start + MATRIX_SIZE])
        for start in range(0, len(chars), MATRIX_SIZE)
    )
    return "\n".join(rows)


class _VirtualClock:
    """A millisecond clock that moves only when told to."""

    def __init__(self) -> None:
        self.now = 0

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


def _no_sleep(_seconds: float) -> None:
    return None


Game = Union[JoystickGame, MicGame]


def _settle(game: Game) -> None:
    while game.active and game.current_player == Player.AI:
        game.ai_turn()


def _status(game: Game, again: str) -> str:
    if game.active:
        return f"your turn, cursor at ({game.cursor.x}, {game.cursor.y})"
    if game.board.check_win(Player.AI):
        result = "AI wins"
    elif game.board.check_win(Player.HUMAN):
        result = "you win"
    else:
        result = "draw"
    return f"{result} - {again} to play again"


def _joystick_command(game: JoystickGame, clock: _VirtualClock, command: str) -> None:
    axes = {
        "up": (_AXIS_MIN, _AXIS_CENTER),
        "down": (_AXIS_MAX, _AXIS_CENTER),
        "right": (_AXIS_CENTER, _AXIS_MIN),
        "left": (_AXIS_CENTER, _AXIS_MAX),
    }
    clock.advance(DEBOUNCE_DELAY_MS + 1)
    if command in axes:
        x_value, y_value = axes[command]
        game.process_input(x_value, y_value, False, False)
    elif command == "press":
        game.process_input(_AXIS_CENTER, _AXIS_CENTER, True, False)
    elif command == "reset":
        game.process_input(_AXIS_CENTER, _AXIS_CENTER, False, True)
    else:
        raise ValueError(f"unknown command: {command!r}")
    game.process_input(_AXIS_CENTER, _AXIS_CENTER, False, False)


def _parse_claps(words: list[str]) -> int:
    if words[0] == "clap" and len(words) == 1:
        return 1
    text = words[1] if words[0] == "clap" and len(words) == 2 else " ".join(words)
    try:
        count = int(text)
    except ValueError:
        raise ValueError(f"unknown command: {' '.join(words)!r}") from None
    if not 1 <= count <= MAX_CLAPS:
        raise ValueError(f"number of claps must be within 1..{MAX_CLAPS}")
    return count


def _mic_command(game: MicGame, clock: _VirtualClock, command: str) -> None:
    if command == "reset":
        clock.advance(1)
        game.process_claps(0, True)
        return
    count = _parse_claps(command.split())
    for _ in range(count):
        clock.advance(5)
        game.process_claps(_AXIS_MAX, False)
        clock.advance(5)
        game.process_claps(0, False)
    clock.advance(CLAP_TIMEOUT_MS + 1)
    game.process_claps(0, False)


def _play(
    game: Game,
    strip: LedStrip,
    clock: _VirtualClock,
    joystick: bool,
    stdin: TextIO,
) -> None:
    help_text = _JOYSTICK_HELP if joystick else _MIC_HELP
    again = "press" if joystick else "reset"
    print(help_text)
    game.draw()
    while True:
        _settle(game)
        print(render_text(strip))
        print(_status(game, again))
        line = stdin.readline()
        if not line:
            break
        command = " ".join(line.lower().split())
        if not command:
            continue
        if command in ("q", "quit", "exit"):
            break
        if command == "help":
            print(help_text)
            continue
        try:
            if joystick:
                _joystick_command(game, clock, command)
            else:
                _mic_command(game, clock, command)
        except ValueError as error:
            print(f"error: {error}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the game in microphone mode, or joystick mode when asked."""
    parser = argparse.ArgumentParser(
        prog="ledtictactoe",
        description="Tic-tac-toe against the AI on a 5x5 LED matrix.",
    )
    parser.add_argument(
        "--joystick",
        action="store_true",
        help="play with the joystick instead of claps (button B held at boot)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for the AI")
    args = parser.parse_args(argv)

    strip = LedStrip(LED_LENGTH, DataFormat.GRB)
    rng = random.Random(args.seed)
    clock = _VirtualClock()

    game: Game
    if args.joystick:
        print(">> button B held at boot: starting joystick mode")
        game = JoystickGame(strip, rng, clock, _no_sleep)
    else:
        print(">> button B not held at boot: starting microphone mode")
        game = MicGame(strip, rng, clock, _no_sleep)

    _play(game, strip, clock, args.joystick, sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())