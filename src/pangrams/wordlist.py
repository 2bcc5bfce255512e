"""Module for word list management."""

from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from pangrams.config import SearchConfig

WORD_LIST_FILE = "words.txt"
"""Name of the word list bundled with the package."""


def bundled_word_list_path() -> Path:
    """Return the path of the word list shipped alongside this module."""
    return Path(__file__).parent / WORD_LIST_FILE


def normalize_word(line: str) -> str:
    """Trim, upper-case and strip everything but the letters A-Z from a line."""
    return "".join(ch for ch in line.strip().upper() if "A" <= ch <= "Z")


def unique_letters(word: str) -> str:
    """Return the distinct letters of a word, in alphabetical order."""
    return "".join(sorted(set(word)))


def normalize_words(lines: Iterable[str], *, alphabet: str) -> list[str]:
    """Normalize raw corpus lines into a sorted list of distinct words.

    Lines that are empty after normalization are dropped, as are words using letters
    outside `alphabet`.

    Args:
        lines: Raw lines of the corpus.
        alphabet: The letters that words may contain.

    Returns:
        A sorted list of unique, normalized words.
    """
    allowed = set(alphabet)
    words: set[str] = set()
    for line in lines:
        word = normalize_word(line)
        if not word:
            continue
        if not set(word) <= allowed:
            continue
        words.add(word)
    return sorted(words)


def load_word_list(config: SearchConfig, *, out: TextIO | None = None) -> list[str]:
    """Load and normalize the configured word list.

    Args:
        config: The search configuration.  `word_list_path` selects the file; if it is None,
            the bundled word list is used.
        out: Stream for diagnostic messages, standard output if None (only written to if
            `config.verbose` is set).

    Returns:
        A sorted list of unique, normalized words.

    Raises:
        FileNotFoundError: If the word list file does not exist.
    """
    if config.word_list_path is None:
        word_list_path = bundled_word_list_path()
    else:
        word_list_path = Path(config.word_list_path)
    if not word_list_path.is_file():
        raise FileNotFoundError(f"Word list file not found: {word_list_path}")

    with word_list_path.open("r", encoding="utf-8") as f:
        words = normalize_words(f, alphabet=config.alphabet)

    if config.verbose:
        print(f"Loaded {len(words)} words from {word_list_path}", file=out, flush=True)
    return words
