"""The word-guessing game: menus, rules and the guessing rounds."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from enum import Enum, auto

from .dictionary import Dictionary, DictionaryError
from .printer import Printer, terminal_size
from .scene import Scene
from .words import WORD_LENGTH, Word, is_valid_word

ANSWERS_FILE = "dict/la.txt"
GUESSES_FILE = "dict/ta.txt"

MAX_LIVES = 6

GREEN = "\x1b[38:5:10m"
RED = "\x1b[38:5:9m"
YELLOW = "\x1b[38:5:11m"
RESET = "\x1b[0m"

GUESS_PROMPT = "Enter your guess (only 5 letters will be taken):\n> "
BAD_FORMAT = "Wrong input!, please input a lower cased word of length 5!\n> "
UNKNOWN_WORD = "Wrong input!, word not in recognizable dictionary!\n> "
RETURN_PROMPT = "\n\nPress Enter to return to main menu\n> "

_MARKS = {"O": GREEN + "O", "X": RED + "X"}


class SceneID(Enum):
    MAIN_MENU = auto()
    RULES = auto()
    CREDIT = auto()
    PLAY = auto()
    EXIT = auto()
    FINISH = auto()


def _build_scene(scene_id: SceneID) -> Scene:
    if scene_id is SceneID.MAIN_MENU:
        scene = Scene("", False, 1)
        for line in (
            "Welcome to wordle!",
            "",
            "Choose an option (Enter to confirm):",
            "1. Play!",
            "2. Read rules",
            "3. Credit",
            "Enter anything else to exit",
        ):
            scene.add_line(line)
        scene.temp = "> "
        return scene
    if scene_id is SceneID.RULES:
        scene = Scene("", False, 0)
        for line in (
            "The game of wordle is a word guessing game!",
            "",
            "The game first chooses a secret 5 letter word.",
            "Your task is to guess the secret word within 6 tries.",
            "",
            "After you make a guess, colored letters appears for each letter:",
            f"{RED} X : Red X{RESET} - This letter does not appear in the secret word.",
            f"{YELLOW} # : Yellow #{RESET} - This letter appears in the secret word but not in this spot.",
            f"{GREEN} O : Green O{RESET} - This letter appears in the secret word and in this spot.",
            "Tip: If the secret word has 2 letter 'a' and your guess has 3 letter 'a', "
            "only 2 will be marked yellow or green, 1 will be red.",
            "Press enter to quit back to main menu.",
        ):
            scene.add_line(line)
        scene.temp = "> "
        return scene
    if scene_id is SceneID.CREDIT:
        scene = Scene("", False, 0)
        scene.add_line("Made in May 2025 as a university project.")
        scene.add_line("")
        scene.add_line("Press enter to quit back to main menu.")
        scene.temp = "> "
        return scene
    if scene_id is SceneID.PLAY:
        scene = Scene(f"{MAX_LIVES} <- Numer of guesses left", False, 5)
        scene.add_line("")
        scene.temp = GUESS_PROMPT
        return scene
    if scene_id is SceneID.EXIT:
        return Scene("Good bye~")
    return Scene()


class GameManager:
    """Runs the menu and the guessing rounds on a Printer."""

    def __init__(
        self,
        printer: Printer | None = None,
        random_dict: Dictionary | None = None,
        guessable_dict: Dictionary | None = None,
    ) -> None:
        if printer is None:
            width, height = terminal_size()
            printer = Printer(width, max(1, height - 1))
        self.printer = printer
        self.random_dict = random_dict if random_dict is not None else Dictionary(ANSWERS_FILE)
        self.guessable_dict = (
            guessable_dict if guessable_dict is not None else Dictionary(GUESSES_FILE)
        )
        self.lives = MAX_LIVES
        self.won = False
        self.hidden_word = Word()
        self.scene_id = SceneID.MAIN_MENU
        self.scene = _build_scene(SceneID.MAIN_MENU)

    def _go(self, scene_id: SceneID) -> None:
        self.scene = _build_scene(scene_id)
        self.scene_id = scene_id

    def step(self) -> None:
        """Show the current scene, read its input and move to the next state."""
        self.scene.show(self.printer)

        if self.scene_id is SceneID.MAIN_MENU:
            self._menu_choice()
        elif self.scene_id in (SceneID.FINISH, SceneID.RULES, SceneID.CREDIT):
            self._go(SceneID.MAIN_MENU)
        elif self.scene_id is SceneID.PLAY:
            self._play_turn()

    def _menu_choice(self) -> None:
        if self.printer.last_input_len != 1:
            self._go(SceneID.EXIT)
            return
        choice = self.printer.input_buffer[0]
        if choice == "1":
            self._go(SceneID.PLAY)
            self.lives = MAX_LIVES
            self.won = False
            self.hidden_word = self.random_dict.random_word()
        elif choice == "2":
            self._go(SceneID.RULES)
        elif choice == "3":
            self._go(SceneID.CREDIT)
        else:
            self._go(SceneID.EXIT)

    def _play_turn(self) -> None:
        guess = self.printer.input_buffer[:WORD_LENGTH]
        if not is_valid_word(guess):
            self.scene.temp = BAD_FORMAT
            return
        word = Word(guess)
        if word not in self.random_dict and word not in self.guessable_dict:
            self.scene.temp = UNKNOWN_WORD
            return

        checked = self.compare(word)
        hidden = str(self.hidden_word)
        if self.lives != 1:
            self.lives -= 1
            self.scene.set_direct(0, str(self.lives))
            self._add_guess_lines(guess, checked)
            if self.won:
                self._finish(f"You Won!!!!! the word was: {GREEN} {hidden} {RESET}")
            else:
                self.scene.temp = GUESS_PROMPT
        else:
            self.lives = 0
            self.scene.set_direct(0, "0")
            self._add_guess_lines(guess, checked)
            if self.won:
                self._finish(
                    f"You Won!!!!! (just barely >.<) the word was: {GREEN} {hidden} {RESET}"
                )
            else:
                self._finish(f"You lost, the word was: {GREEN} {hidden} {RESET}")

    def _add_guess_lines(self, guess: str, checked: str) -> None:
        self.scene.add_line("You guessed: " + guess)
        self.scene.add_line("Checked:    |" + checked + "|")
        self.scene.add_line("")

    def _finish(self, message: str) -> None:
        self.scene.temp = message + RETURN_PROMPT
        self.scene.wait_len = 0
        self.scene_id = SceneID.FINISH

    def loop(self) -> None:
        """Step until the farewell scene has been shown."""
        while True:
            leaving = self.scene_id is SceneID.EXIT
            self.step()
            if leaving:
                return

    def compare(self, word: Word) -> str:
        """Mark each letter of ``word`` against the hidden word, as coloured text.

        A full match also marks the round as won.
        """
        hidden = self.hidden_word
        marks = ["_"] * WORD_LENGTH
        used: Counter[str] = Counter()
        for pos, (secret, guessed) in enumerate(zip(hidden, word)):
            if secret == guessed:
                marks[pos] = "O"
                used[guessed] += 1

        if all(mark == "O" for mark in marks):
            self.won = True
            return GREEN + "O" * WORD_LENGTH + RESET

        for pos, guessed in enumerate(word):
            if marks[pos] == "O":
                continue
            if hidden.count(guessed) <= used[guessed]:
                marks[pos] = "X"
            else:
                used[guessed] += 1

        return "".join(_MARKS.get(mark, YELLOW + "#") for mark in marks) + RESET


def main(argv: list[str] | None = None) -> int:
    """Play the game in the terminal."""
    parser = argparse.ArgumentParser(prog="wordlegame", description="Guess the hidden word.")
    parser.add_argument("--answers", default=ANSWERS_FILE, help="words the game may pick")
    parser.add_argument("--guesses", default=GUESSES_FILE, help="extra words accepted as guesses")
    args = parser.parse_args(argv)

    try:
        manager = GameManager(
            random_dict=Dictionary(args.answers),
            guessable_dict=Dictionary(args.guesses),
        )
    except DictionaryError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        manager.loop()
    except (EOFError, KeyboardInterrupt):
        pass

    sys.stdout.write("\x1b[2J\x1b[H")
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())