"""Letter rarity ranking and mask bit layout.

Letters are ranked from rarest (rank 0) to most common, counting the number of distinct words
that contain each letter.  A word mask is a 32-bit integer with one bit per letter, where the
letter of rank `r` occupies bit `31 - r`: the rarest letter is the most significant bit, and
masks for alphabets shorter than 32 letters are left-justified.
"""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field

from sortedcontainers import SortedList

from pangrams.wordlist import unique_letters

MASK_WIDTH = 32
"""Number of bits in a word mask."""

_WIDTH_MASK = (1 << MASK_WIDTH) - 1


def count_letters(words: Iterable[str], alphabet: str) -> dict[str, int]:
    """Count, for each letter of the alphabet, the number of words containing it at least once."""
    counts: Counter[str] = Counter()
    for word in words:
        counts.update(unique_letters(word))
    return {ch: counts[ch] for ch in alphabet}


@dataclass
class LetterRanking:
    """A total order of the alphabet from rarest to most common letter.

    Built once per run and treated as read-only afterwards.  Rankings compare by their letters
    and counts, and are not hashable.
    """

    letters: tuple[str, ...]
    """The alphabet, rarest letter first.  `letters[r]` is the letter of rank `r`."""

    counts: dict[str, int]
    """Number of distinct words containing each letter."""

    _ranks: dict[str, int] = field(init=False, repr=False, compare=False)
    """Maps each letter to its rank."""

    def __post_init__(self) -> None:
        """Validate the ranking and build the letter -> rank lookup."""
        if len(self.letters) > MASK_WIDTH:
            raise ValueError(f"Cannot rank more than {MASK_WIDTH} letters.")
        if len(set(self.letters)) != len(self.letters):
            raise ValueError("Ranked letters must be distinct.")
        self._ranks = {ch: r for r, ch in enumerate(self.letters)}

    @classmethod
    def from_words(cls, words: Iterable[str], alphabet: str) -> "LetterRanking":
        """Rank the letters of `alphabet` by the number of words in which they appear.

        Ties are broken by letter value, so that the ranking is reproducible.  Letters that no
        word contains are ranked rarest of all.
        """
        counts = count_letters(words, alphabet)
        by_rarity = SortedList(counts.items(), key=lambda item: (item[1], item[0]))
        return cls(letters=tuple(ch for ch, _ in by_rarity), counts=counts)

    def __len__(self) -> int:
        return len(self.letters)

    def rank(self, letter: str) -> int:
        """Return the rank of a letter (0 is the rarest)."""
        try:
            return self._ranks[letter]
        except KeyError:
            raise ValueError(f"Letter '{letter}' is not in the ranked alphabet.") from None

    @staticmethod
    def bit(rank: int) -> int:
        """Return the mask bit for the letter of the given rank."""
        return 1 << (MASK_WIDTH - 1 - rank)

    @property
    def full_mask(self) -> int:
        """Mask with a bit set for every letter of the alphabet."""
        return _WIDTH_MASK ^ (_WIDTH_MASK >> len(self.letters))

    def next_missing(self, covered: int) -> int:
        """Return the lowest rank not yet set in `covered` (its number of leading set bits).

        Returns `len(self)` or more if every letter of the alphabet is covered.
        """
        return MASK_WIDTH - (~covered & _WIDTH_MASK).bit_length()

    def is_complete(self, covered: int) -> bool:
        """Return whether `covered` includes every letter of the alphabet."""
        return self.next_missing(covered) >= len(self.letters)

    def ranks_in(self, mask: int) -> list[int]:
        """Return the ranks of the letters set in `mask`, rarest first."""
        ranks: list[int] = []
        remaining = mask & _WIDTH_MASK
        while remaining:
            rank = MASK_WIDTH - remaining.bit_length()
            ranks.append(rank)
            remaining ^= self.bit(rank)
        return ranks

    def decode(self, mask: int) -> str:
        """Return the letters present in `mask`, in alphabetical order."""
        return "".join(sorted(self.letters[r] for r in self.ranks_in(mask)))
