"""Tic-tac-toe against a simple AI on a modelled 5x5 RGB LED matrix, with joystick and clap modes."""

__version__ = "1.0.0"
__all__ = ["board", "cli", "joystick", "ledstrip", "mic", "render"]