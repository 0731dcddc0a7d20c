import io
import re

import pytest

from wordlegame.dictionary import Dictionary
from wordlegame.game import (
    BAD_FORMAT,
    GREEN,
    RED,
    RESET,
    UNKNOWN_WORD,
    GameManager,
    SceneID,
    main,
)
from wordlegame.printer import Printer
from wordlegame.words import Word

_ESCAPE = re.compile(r"\x1b\[[0-9:;]*m")


def symbols(marked):
    return _ESCAPE.sub("", marked)


def make_game(tmp_path, script, answers=("crane",), guesses=("slate", "nacre")):
    answers_file = tmp_path / "answers.txt"
    answers_file.write_text("\n".join(answers) + "\n")
    guesses_file = tmp_path / "guesses.txt"
    guesses_file.write_text("\n".join(guesses) + "\n")
    out = io.StringIO()
    printer = Printer(80, 24, out, io.StringIO(script))
    manager = GameManager(printer, Dictionary(answers_file), Dictionary(guesses_file))
    return manager, out


def test_compare_full_match_is_all_green_and_wins(tmp_path):
    manager, _ = make_game(tmp_path, "")
    manager.hidden_word = Word("crane")
    assert manager.compare(Word("crane")) == GREEN + "OOOOO" + RESET
    assert manager.won is True


def test_compare_no_common_letters_is_all_red(tmp_path):
    manager, _ = make_game(tmp_path, "")
    manager.hidden_word = Word("crane")
    assert manager.compare(Word("fight")) == RED + "X" + RED + "X" + RED + "X" + RED + "X" + RED + "X" + RESET
    assert manager.won is False


def test_compare_misplaced_letters_are_yellow(tmp_path):
    manager, _ = make_game(tmp_path, "")
    manager.hidden_word = Word("crane")
    assert symbols(manager.compare(Word("nacre"))) == "####O"


def test_compare_extra_duplicates_are_red(tmp_path):
    manager, _ = make_game(tmp_path, "")
    manager.hidden_word = Word("abbey")
    assert symbols(manager.compare(Word("bbbbb"))) == "XOOXX"


def test_compare_marks_never_exceed_letter_count(tmp_path):
    manager, _ = make_game(tmp_path, "")
    manager.hidden_word = Word("abbey")
    marks = symbols(manager.compare(Word("bebbb")))
    assert len(marks) == 5
    assert sum(1 for m in marks if m in "O#") == 3


def test_menu_starts_play(tmp_path):
    manager, _ = make_game(tmp_path, "1\n")
    manager.step()
    assert manager.scene_id is SceneID.PLAY
    assert manager.hidden_word == Word("crane")
    assert manager.lives == 6


def test_menu_takes_only_first_character(tmp_path):
    manager, _ = make_game(tmp_path, "12\n")
    manager.step()
    assert manager.scene_id is SceneID.PLAY


@pytest.mark.parametrize("choice", ["\n", "9\n", "x\n"])
def test_menu_other_input_exits(tmp_path, choice):
    manager, _ = make_game(tmp_path, choice)
    manager.step()
    assert manager.scene_id is SceneID.EXIT


@pytest.mark.parametrize(
    "choice, expected",
    [("2\n", SceneID.RULES), ("3\n", SceneID.CREDIT)],
)
def test_menu_info_scenes(tmp_path, choice, expected):
    manager, _ = make_game(tmp_path, choice + "\n")
    manager.step()
    assert manager.scene_id is expected
    manager.step()
    assert manager.scene_id is SceneID.MAIN_MENU


def test_valid_guess_costs_a_life(tmp_path):
    manager, _ = make_game(tmp_path, "1\nslate\n")
    manager.step()
    manager.step()
    assert manager.lives == 5
    assert manager.scene.text.startswith("5")
    assert "You guessed: slate" in manager.scene.text
    assert manager.scene_id is SceneID.PLAY


def test_badly_formed_guess_is_rejected(tmp_path):
    manager, _ = make_game(tmp_path, "1\nABCDE\n")
    manager.step()
    manager.step()
    assert manager.scene.temp == BAD_FORMAT
    assert manager.lives == 6


def test_unknown_word_is_rejected(tmp_path):
    manager, _ = make_game(tmp_path, "1\nzzzzz\n")
    manager.step()
    manager.step()
    assert manager.scene.temp == UNKNOWN_WORD
    assert manager.lives == 6


def test_winning_guess_finishes(tmp_path):
    manager, _ = make_game(tmp_path, "1\ncrane\n")
    manager.step()
    manager.step()
    assert manager.scene_id is SceneID.FINISH
    assert manager.scene.temp.startswith("You Won!!!!! the word was:")
    assert manager.scene.wait_len == 0


def test_running_out_of_guesses_loses(tmp_path):
    manager, _ = make_game(tmp_path, "1\n" + "slate\n" * 6)
    for _ in range(7):
        manager.step()
    assert manager.scene_id is SceneID.FINISH
    assert manager.scene.temp.startswith("You lost, the word was:")
    assert manager.scene.text.startswith("0")
    assert manager.scene.text.count("You guessed: slate") == 6


def test_winning_on_last_guess(tmp_path):
    manager, _ = make_game(tmp_path, "1\n" + "slate\n" * 5 + "crane\n")
    for _ in range(7):
        manager.step()
    assert manager.scene_id is SceneID.FINISH
    assert "just barely" in manager.scene.temp


def test_loop_full_game_until_exit(tmp_path):
    manager, out = make_game(tmp_path, "1\ncrane\n\n\n")
    manager.loop()
    assert manager.scene_id is SceneID.EXIT
    assert "You Won!!!!!" in out.getvalue()
    assert "Good bye~" in out.getvalue()


def test_loop_shows_rules(tmp_path):
    manager, out = make_game(tmp_path, "2\n\n\n")
    manager.loop()
    assert manager.scene_id is SceneID.EXIT
    assert "The game of wordle is a word guessing game!" in out.getvalue()


def test_main_reports_missing_dictionary(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    assert main(["--answers", str(missing), "--guesses", str(missing)]) == 1
    assert "missing.txt" in capsys.readouterr().err


def test_main_runs_and_exits(tmp_path, monkeypatch, capsys):
    answers = tmp_path / "a.txt"
    answers.write_text("crane\n")
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main(["--answers", str(answers), "--guesses", str(answers)]) == 0
    assert "Good bye~" in capsys.readouterr().out