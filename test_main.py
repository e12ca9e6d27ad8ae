"""
Tests for the console driver and its text output.
"""

import io

import pytest

import main
import ui
from logic.board import Cell
from logic.match_controller import MatchController
from logic.move_validator import MoveError


class ScriptedInput:
    """Feeds canned answers to prompts, then raises EOFError."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def run_console(answers):
    output = []
    reader = ScriptedInput(answers)
    game = main.ConsoleGame(MatchController(), input_func=reader, output=output.append)
    code = game.play()
    return game, reader, output, code


# ==================== PARSING ====================

@pytest.mark.parametrize("text,expected", [
    ("1,2", (1, 2)),
    (" 0 , 2 ", (0, 2)),
    ("3,0", (3, 0)),
    ("-1,1", (-1, 1)),
])
def test_parse_move(text, expected):
    assert main.parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "1", "a,b", "1,2,3", "1.5,2", "1;2"])
def test_parse_move_rejects_garbage(text):
    assert main.parse_move(text) is None


# ==================== UI ====================

def test_format_board_shows_indices_and_marks():
    match = MatchController()
    match.attempt_move(0, 0)
    match.attempt_move(2, 1)

    text = ui.format_board(match.render())

    assert "0   1   2" in text
    assert "0 │ X │   │   │" in text
    assert "2 │   │ O │   │" in text


def test_prompt_and_result_messages():
    assert ui.move_prompt(Cell.O) == "Player 'O', enter your move (row,col): "
    assert "Player 'X' wins" in ui.result_message(Cell.X)
    assert "draw" in ui.result_message(None)
    assert ui.rejection_message(MoveError.CELL_OCCUPIED) == ui.SPOT_TAKEN


# ==================== INTERACTIVE PLAY ====================

def test_full_game_then_quit():
    game, reader, output, code = run_console(["0,0", "1,1", "0,1", "1,0", "0,2", "no"])

    assert code == 0
    assert game.controller.winner == Cell.X
    assert ui.result_message(Cell.X) in output
    assert output[-1] == ui.GOODBYE
    assert reader.prompts[-1] == ui.PLAY_AGAIN


def test_bad_input_does_not_use_a_turn():
    game, reader, output, _ = run_console(["hello", "5,5", "0,0", "0,0"])

    assert output.count(ui.INVALID_INPUT) == 2
    assert output.count(ui.SPOT_TAKEN) == 1
    assert game.controller.current_player == Cell.O
    assert len(game.controller.moves) == 1
    assert reader.prompts[:3] == [ui.move_prompt(Cell.X)] * 3


def test_play_again_resets():
    answers = ["0,0", "1,1", "0,1", "1,0", "0,2", "YES", "2,2", "no"]
    game, _, output, code = run_console(answers)

    assert code == 0
    assert ui.NEW_GAME in output
    assert not game.controller.is_over
    assert game.controller.cell(2, 2) == Cell.X
    assert game.controller.cell(0, 0) == Cell.EMPTY


def test_end_of_input_ends_session():
    game, _, output, code = run_console(["1,1"])

    assert code == 0
    assert output[-1] == ui.GOODBYE
    assert not game.controller.is_over


# ==================== DEMO ====================

def test_demo_plays_scripted_win():
    output = []
    game = main.ConsoleGame(MatchController(), input_func=ScriptedInput([]), output=output.append)

    assert game.run_demo() == 0
    assert game.controller.winner == Cell.X
    assert output[0] == ui.DEMO_BANNER
    assert output[-1] == ui.result_message(Cell.X)
    assert game.input_func.prompts == []


def test_demo_reports_rejected_moves():
    output = []
    game = main.ConsoleGame(MatchController(), output=output.append)

    game.run_demo([(0, 0), (0, 0), (4, 4)])

    assert ui.SPOT_TAKEN in output
    assert ui.INVALID_INPUT in output
    assert len(game.controller.moves) == 1


# ==================== ENTRY POINT ====================

def test_is_interactive():
    assert not main.is_interactive(io.StringIO())

    class Terminal(io.StringIO):
        def isatty(self):
            return True

    assert main.is_interactive(Terminal())


def test_main_demo_mode(capsys):
    assert main.main(["--demo"]) == 0
    out = capsys.readouterr().out
    assert "Non-Interactive Demo" in out
    assert "Congratulations! Player 'X' wins!" in out


def test_main_without_terminal_runs_demo(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0,0\n"))
    assert main.main([]) == 0
    assert "Non-Interactive Demo" in capsys.readouterr().out


def test_main_interactive_flag_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0,0\n1,1\n0,1\n1,0\n0,2\nno\n"))
    assert main.main(["--interactive"]) == 0
    out = capsys.readouterr().out
    assert "Welcome" in out
    assert "Thanks for playing!" in out
