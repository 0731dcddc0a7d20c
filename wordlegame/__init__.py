"""A terminal word-guessing game: five-letter words, six tries, ANSI screens."""

__version__ = "0.1.0"