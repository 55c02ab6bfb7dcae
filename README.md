# ledtictactoe

Tic-tac-toe on a 5x5 RGB LED matrix. The board is a 3x3 grid of cells.
Each cell sits on an even row and an even column of the matrix, and dim
grid lines fill the odd rows and columns. The AI always moves first and
is drawn red. The human is drawn blue.

On each turn the AI takes a winning cell if it has one. If not, it blocks
a cell where the human would win. Otherwise it picks a random empty cell.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing in a terminal

```
ledtictactoe              # clap mode
ledtictactoe --joystick   # joystick mode
ledtictactoe --seed 42    # repeatable AI choices
```

After every update the command prints the LED matrix as text, using
`ledtictactoe.cli.render_text`. Each pixel is one character:

| Character | Meaning |
|-----------|---------|
| `.` | off |
| `+` | grid line |
| `X` | AI mark |
| `O` | human mark or cursor (both use the same colour) |
| `*` | draw flash |
| `#` | green |
| `?` | any other colour |

Below the matrix the command prints a status line. It shows the cursor
position, or the result of the game and how to play again.

The time used by the game is simulated, so there are no pauses. Every
command also accepts `help`, and `quit` (or `q` / `exit`) ends the game,
as does end of input.

### Joystick mode commands

| Command | Effect |
|---------|--------|
| `up`, `down`, `left`, `right` | Move the cursor one cell. It wraps around the edges. |
| `press` | Place your mark under the cursor. Once a game has ended, it starts a new one. |
| `reset` | Start a new game. |

### Clap mode commands

| Command | Effect |
|---------|--------|
| `clap` | One clap: move the cursor to the next empty cell in reading order. |
| `clap N` or `N` | A burst of N claps, N from 1 to 9. Two or more claps place your mark. |
| `reset` | Start a new game. |

## Using the library

### The LED strip (`ledtictactoe.ledstrip`)

`LedStrip(length, layout, sink)` keeps one output word per pixel.

- Colours are packed with `rgb()` and `rgbw()` as `0xWWBBGGRR`.
- `layout` is a `DataFormat` (`RGB`, `GRB` or `WRGB`) or a sequence of
  `DataByte` slots.
- `convert()` reorders a packed colour into the strip's output word.
- `set_pixel_color()` sets one pixel and ignores indices outside the strip.
- `fill()` sets a range of pixels.
- `words()` returns the current output words.
- `show()` passes the words to `sink`, if one was given, and also returns them.

```python
from ledtictactoe.ledstrip import LedStrip, DataFormat, rgb

frames = []
strip = LedStrip(25, DataFormat.GRB, frames.append)
strip.fill(rgb(2, 2, 0))
strip.show()
```

### The board (`ledtictactoe.board`)

`Board` is indexed by `Position(x, y)` or by an `(x, y)` tuple, and holds
`Player.EMPTY`, `Player.AI` or `Player.HUMAN`.

- `check_win()` tells whether a player has three in a row.
- `is_full()` tells whether no cell is empty.
- `empty_cells()` yields the empty cells in reading order.
- `evaluate()` returns 10 if the AI has won, -10 if the human has, and 0 otherwise.
- `ai_move(rng)` places the AI's mark and returns where it went. It raises
  `ValueError` when the board is full.

### Drawing (`ledtictactoe.render`)

- `draw_board()` draws the grid, the marks and, optionally, the cursor.
- `led_index()` maps a board cell to its pixel.
- `flash_position()`, `win_animation()` and `draw_animation()` run the
  blink sequences. Each one takes a `sleep` function.

### The two games

`ledtictactoe.joystick.JoystickGame` takes raw stick readings and button
states, either through `process_input()` or one main-loop pass at a time
through `tick()`:

- Axis values below 1000 or above 3000 move the cursor.
- Cursor moves are at least 200 ms apart.
- Button presses act on the press only, not while the button is held.

`ledtictactoe.mic.MicGame` takes 12-bit microphone readings through
`process_claps()` or `tick()`. It converts them to volts with
`adc_to_volts()` and passes them to a `ClapDetector`, which works like this:

- A sample above 1.5 V starts a clap.
- The level must fall below 0.9 V before the next clap can start.
- A burst ends 20 ms after its last clap.
- Claps older than one second are dropped.

A burst of one clap moves the cursor, and a longer burst places the mark.
A pressed reset starts a new game.

Both games take an `rng`, a millisecond `clock` and a `sleep` function, so
they can be run and tested without real time passing.

## What this package does not do

It does not talk to LEDs, a joystick, buttons or a microphone. The strip
only hands its words to the sink you provide, and both games expect their
readings to be passed in. The `ledtictactoe` command simulates the inputs
from typed commands and draws the matrix as text.