# wordlegame

A word-guessing game for the terminal. The game picks a secret five-letter
word and you have six tries to find it. After each guess every letter is
marked:

- a red `X` means the letter is not in the secret word,
- a yellow `#` means the letter is in the word but in another spot,
- a green `O` means the letter is in the word and in this spot.

When a letter appears more often in your guess than in the secret word, only
as many copies as the secret word holds are marked yellow or green; the rest
are red.

## Installing

```
pip install .
```

## Word lists

The game needs two word lists, one word per line:

- the answers list, from which the secret word is chosen
  (default `dict/la.txt`, relative to the current directory),
- the guesses list, holding further words accepted as guesses
  (default `dict/ta.txt`).

A line is used as a word when it is exactly five lower-case letters
(`a` to `z`). When a list cannot be opened, or the file is empty, the game
prints an error and exits with status 1.

No word lists come with the package; you supply your own.

## Playing

Start the game from the directory that holds `dict/`:

```
wordlegame
```

or point it at other files:

```
wordlegame --answers my/answers.txt --guesses my/guesses.txt
```

The main menu offers:

1. Play
2. Read the rules
3. Credits

Type the number and press Enter. Any other input leaves the game. During a
game, type a guess and press Enter; only the first five characters are
taken. A guess has to be five lower-case letters and a word from one of the
two lists, otherwise you are asked again and it does not cost a try. After a
win or a loss, press Enter to return to the main menu.

Leaving the menu, pressing Ctrl+C or ending the input stream ends the game
and clears the screen.

## Using it as a library

The pieces of the game can be used on their own:

- `wordlegame.words`: `Word`, an immutable five-character word
  (`count`, `char_at`, `str()`), `is_valid_word` and `rng`;
- `wordlegame.trie.Tree`: a letter tree that stores five-letter words
  (`insert`, `in`, `random`, `debug`);
- `wordlegame.dictionary.Dictionary`: a word list loaded from a file
  (`len()`, `in`, `random_word`), raising `DictionaryError` when the file
  cannot be read or yields no lines;
- `wordlegame.printer.Printer`: an off-screen character grid drawn with ANSI
  escape sequences, redrawing only rows that changed, with line input via
  `get_input`; `terminal_size` reports the terminal's size;
- `wordlegame.scene.Scene`: a screenful of text plus a prompt, drawn on a
  `Printer` with `show`;
- `wordlegame.game.GameManager`: runs the menus and the game; `compare`
  marks a guess against the hidden word, and `main` is the command above.

`GameManager` takes a `Printer` and two `Dictionary` objects, so the game can
be driven from any text streams, not only the terminal.

## Running the tests

```
pip install .[test]
pytest
```