"""Letter-indexed buckets of word entries for candidate lookup."""

from collections.abc import Sequence

from bitarray import bitarray
from bitarray.util import zeros

from pangrams.encoder import WordEntry
from pangrams.rarity import LetterRanking


class LetterBuckets:
    """Word entries indexed by the letters they contain.

    Bucket `r` holds every entry whose mask contains the letter of rank `r`.  Membership is
    stored as one bitarray per rank, aligned with `entries`; the bucket contents are also
    materialized as tuples for the search.
    """

    def __init__(self, entries: Sequence[WordEntry], ranking: LetterRanking):
        self.entries: tuple[WordEntry, ...] = tuple(entries)
        """All entries, in a fixed order.  Must never be modified, so that bitarrays align."""

        self.ranking: LetterRanking = ranking
        """The letter ranking used to encode the entries."""

        self.membership: list[bitarray] = [zeros(len(self.entries)) for _ in range(len(ranking))]
        """Element [r] maps entries containing the letter of rank `r` to True."""

        for index, entry in enumerate(self.entries):
            for rank in ranking.ranks_in(entry.mask):
                self.membership[rank][index] = True

        self._buckets: list[tuple[WordEntry, ...]] = [
            tuple(self.entries[i] for i in bits.search(1)) for bits in self.membership
        ]

    def __len__(self) -> int:
        return len(self._buckets)

    def __getitem__(self, rank: int) -> tuple[WordEntry, ...]:
        """Return the entries containing the letter of the given rank."""
        return self._buckets[rank]

    def bucket_sizes(self) -> dict[str, int]:
        """Return the number of entries containing each letter, keyed by letter."""
        return {
            self.ranking.letters[rank]: bits.count() for rank, bits in enumerate(self.membership)
        }
