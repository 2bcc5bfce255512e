"""Conversion of words into letter masks, merging anagrams."""

from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass

from pangrams.rarity import LetterRanking


@dataclass(frozen=True, order=True)
class WordEntry:
    """One or more words sharing the same set of letters.

    Entries order by mask, so that a sorted list of entries is in canonical order.
    """

    mask: int
    """Letter mask: the bit for each letter present in the words (see `LetterRanking.bit`)."""

    names: tuple[str, ...]
    """The words sharing this letter set, in alphabetical order."""

    @property
    def multiplicity(self) -> int:
        """Number of words merged into this entry."""
        return len(self.names)

    def __str__(self) -> str:
        return "/".join(self.names)


def encode_word(word: str, ranking: LetterRanking) -> int:
    """Return the letter mask of a normalized word.

    Raises:
        ValueError: If the word contains a letter that is not ranked.
    """
    mask = 0
    for ch in set(word):
        mask |= ranking.bit(ranking.rank(ch))
    return mask


def encode_words(words: Iterable[str], ranking: LetterRanking) -> list[WordEntry]:
    """Encode words into entries, merging words with identical letter sets.

    Args:
        words: Normalized, distinct words.
        ranking: The letter ranking that determines the bit layout.

    Returns:
        A list of entries with distinct masks, sorted by mask.
    """
    by_mask: defaultdict[int, list[str]] = defaultdict(list)
    for word in words:
        by_mask[encode_word(word, ranking)].append(word)

    return sorted(
        WordEntry(mask=mask, names=tuple(sorted(names))) for mask, names in by_mask.items()
    )
