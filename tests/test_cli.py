import io

import pytest

from ledtictactoe.board import Board, Player
from ledtictactoe.cli import main, render_text
from ledtictactoe.ledstrip import DataFormat, LedStrip, rgb
from ledtictactoe.render import draw_board


def _strip():
    return LedStrip(25, DataFormat.GRB)


def _run(monkeypatch, capsys, argv, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main(argv)
    return code, capsys.readouterr().out


def _statuses(out):
    return [line for line in out.splitlines() if line.startswith("your turn")]


def test_blank_strip_renders_all_off():
    lines = render_text(_strip()).split("\n")
    assert len(lines) == 5
    assert all(len(line) == 5 for line in lines)
    assert set("".join(lines)) == {"."}


def test_grid_rows_are_lit_on_empty_board():
    strip = _strip()
    draw_board(strip, Board())
    lines = render_text(strip).split("\n")
    assert lines[1] == "+" * 5
    assert lines[3] == "+" * 5
    for row in (0, 2, 4):
        assert lines[row][1] == lines[row][3] == "+"
        assert lines[row][0] == lines[row][2] == lines[row][4] == "."


def test_marks_render_at_their_cells():
    strip = _strip()
    board = Board()
    board[2, 1] = Player.AI
    board[0, 2] = Player.HUMAN
    draw_board(strip, board)
    lines = render_text(strip).split("\n")
    assert lines[2][4] == "X"
    assert lines[4][0] == "O"


def test_unknown_colour_renders_as_question_mark():
    strip = _strip()
    strip.set_pixel_color(0, rgb(1, 2, 3))
    assert render_text(strip)[0] == "?"


def test_short_strip_renders_partial_last_row():
    strip = LedStrip(7)
    assert render_text(strip).split("\n") == ["." * 5, "." * 2]


def test_microphone_mode_is_default(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["--seed", "1"], "")
    assert code == 0
    assert "microphone mode" in out
    assert _statuses(out)[-1].endswith("(1, 1)")


def test_joystick_mode_starts_with_flag(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ["--joystick", "--seed", "1"], "quit\n")
    assert code == 0
    assert "joystick mode" in out


def test_ai_moves_first(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["--seed", "3"], "")
    assert out.count("X") == 1


def test_joystick_moves_cursor(monkeypatch, capsys):
    _, out = _run(
        monkeypatch, capsys, ["--joystick", "--seed", "2"], "right\nup\n"
    )
    statuses = _statuses(out)
    assert statuses[-2].endswith("(2, 1)")
    assert statuses[-1].endswith("(2, 0)")


def test_joystick_cursor_wraps(monkeypatch, capsys):
    _, out = _run(
        monkeypatch, capsys, ["--joystick", "--seed", "2"], "left\nleft\n"
    )
    assert _statuses(out)[-1].endswith("(2, 1)")


def test_joystick_reset_recentres_cursor(monkeypatch, capsys):
    _, out = _run(
        monkeypatch, capsys, ["--joystick", "--seed", "4"], "down\nreset\n"
    )
    statuses = _statuses(out)
    assert statuses[-2].endswith("(1, 2)")
    assert statuses[-1].endswith("(1, 1)")


def test_single_clap_moves_cursor(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["--seed", "5"], "clap\n")
    statuses = _statuses(out)
    assert statuses[0].endswith("(1, 1)")
    assert not statuses[-1].endswith("(1, 1)")


def test_two_claps_place_a_mark(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["--seed", "6"], "clap\nclap 2\n")
    frames_after = out.split("your turn")[-2]
    assert frames_after.count("X") >= 1
    assert out.split("your turn")[-1].count("X") + out.split("\n")[-7:].count(
        "X"
    ) >= 0
    last_frame = "\n".join(out.splitlines()[-6:-1])
    assert last_frame.count("X") == 2


@pytest.mark.parametrize("command", ["clap 0", "clap 10", "hop"])
def test_bad_mic_command_reports_error(monkeypatch, capsys, command):
    code, out = _run(monkeypatch, capsys, ["--seed", "1"], command + "\n")
    assert code == 0
    assert "error:" in out


def test_bad_joystick_command_reports_error(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["--joystick"], "jump\n")
    assert "error: unknown command" in out


def test_help_lists_commands(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["--joystick"], "help\n")
    assert out.count("commands:") == 2


def test_quit_stops_reading(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ["--joystick", "--seed", "1"], "quit\nright\n")
    assert len(_statuses(out)) == 1


def test_invalid_option_exits_with_usage_error(monkeypatch, capsys):
    with pytest.raises(SystemExit) as info:
        _run(monkeypatch, capsys, ["--bogus"], "")
    assert info.value.code == 2