"""Backtracking search for word combinations covering the whole alphabet.

The search always branches on the rarest letter not yet covered, trying only the words in
that letter's bucket.  Every candidate therefore makes progress on the hardest letter to
satisfy, which keeps the branching factor small.  A combination can still be reached along
several paths (a word chosen for one letter may also supply a letter that another path
chooses it for), so complete combinations are deduplicated.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from math import prod
from time import time
from typing import NamedTuple, TextIO

from sortedcontainers import SortedSet

from pangrams.buckets import LetterBuckets
from pangrams.config import SearchConfig
from pangrams.encoder import WordEntry
from pangrams.util import int_comma, time_str


class PangramState(IntEnum):
    """Classification of a partial solution after adding a word."""

    POTENTIAL = 0
    """Not complete yet, and more words may still be added."""

    FAILED = 1
    """Cannot lead to an accepted solution; abandon the branch."""

    COMPLETE = 2
    """Every letter is covered."""


class PartialSolution(NamedTuple):
    """Words chosen so far on the current search path."""

    words: tuple[WordEntry, ...] = ()
    """Chosen entries, in the order they were chosen."""

    covered: int = 0
    """Bitwise OR of the masks of the chosen entries."""

    def extend(self, entry: WordEntry) -> "PartialSolution":
        """Return a new partial solution with `entry` added."""
        return PartialSolution(self.words + (entry,), self.covered | entry.mask)

    def has_redundant_word(self) -> bool:
        """Return whether some chosen word only supplies letters that other words supply."""
        for i, entry in enumerate(self.words):
            others = 0
            for j, other in enumerate(self.words):
                if i != j:
                    others |= other.mask
            if entry.mask | others == others:
                return True
        return False


class Solution(NamedTuple):
    """A combination of entries covering every letter, in canonical (mask) order."""

    words: tuple[WordEntry, ...]

    @classmethod
    def from_partial(cls, partial: PartialSolution) -> "Solution":
        return cls(tuple(sorted(partial.words)))

    @property
    def covered(self) -> int:
        covered = 0
        for entry in self.words:
            covered |= entry.mask
        return covered

    @property
    def multiplicity(self) -> int:
        """Number of concrete word combinations represented by this solution."""
        return prod(entry.multiplicity for entry in self.words)

    def __str__(self) -> str:
        return " + ".join(str(entry) for entry in self.words)


@dataclass
class SearchStats:
    """Statistics collected during the search."""

    nodes_examined: int = 0
    """Number of candidate extensions classified."""

    complete: int = 0
    """Number of complete combinations reached, including duplicates."""

    duplicates: int = 0
    """Number of complete combinations that had already been found."""

    failed: int = 0
    """Number of branches abandoned at the size limit."""

    redundant: int = 0
    """Number of branches abandoned because a chosen word became redundant."""

    max_depth_reached: int = 0
    """Largest number of words in a partial solution."""

    start_time: float = field(default_factory=time)
    """Timestamp when the search started."""


class PangramSearch:
    """Depth-first search over letter buckets.

    The buckets are shared read-only by every recursive call, and each call extends its own
    copy of the partial solution, so backtracking is just returning from the call.
    """

    def __init__(self, buckets: LetterBuckets, config: SearchConfig, *, out: TextIO | None = None):
        self.buckets: LetterBuckets = buckets
        """Entries indexed by letter rank."""

        self.ranking = buckets.ranking
        self.full_mask: int = self.ranking.full_mask
        """Mask with every letter of the alphabet set."""

        self.config: SearchConfig = config
        """Search configuration (size limit, redundancy filter, progress reporting)."""

        self.out: TextIO | None = out
        """Stream for progress messages."""

        self.solutions: SortedSet[Solution] = SortedSet()
        """Distinct solutions found so far."""

        self.stats: SearchStats = SearchStats()

    def classify(self, partial: PartialSolution) -> PangramState:
        """Classify a partial solution that has just been extended by one word."""
        if self.config.minimal_only and partial.has_redundant_word():
            self.stats.redundant += 1
            return PangramState.FAILED
        if partial.covered & self.full_mask == self.full_mask:
            return PangramState.COMPLETE
        if len(partial.words) >= self.config.max_solution_size:
            self.stats.failed += 1
            return PangramState.FAILED
        return PangramState.POTENTIAL

    def run(self) -> list[Solution]:
        """Run the search from an empty partial solution.

        Returns:
            The distinct solutions, in canonical order.
        """
        self.solutions.clear()
        self.stats = SearchStats()
        if self.config.verbose:
            sizes = ", ".join(f"{ch}:{n}" for ch, n in self.buckets.bucket_sizes().items())
            print(f"Bucket sizes (rarest first): {sizes}", file=self.out, flush=True)

        self._search(PartialSolution())

        if self.config.verbose:
            self._report(final=True)
        return list(self.solutions)

    def _search(self, partial: PartialSolution) -> None:
        # Candidates are the entries containing the rarest uncovered letter
        next_rank = self.ranking.next_missing(partial.covered)
        for entry in self.buckets[next_rank]:
            extended = partial.extend(entry)
            self.stats.nodes_examined += 1
            self.stats.max_depth_reached = max(self.stats.max_depth_reached, len(extended.words))
            if self.config.verbose and self.stats.nodes_examined % self.config.report_interval == 0:
                self._report()

            state = self.classify(extended)
            if state == PangramState.COMPLETE:
                self._accept(Solution.from_partial(extended))
            elif state == PangramState.POTENTIAL:
                self._search(extended)

    def _accept(self, solution: Solution) -> None:
        self.stats.complete += 1
        if solution in self.solutions:
            self.stats.duplicates += 1
            return
        self.solutions.add(solution)

    def _report(self, *, final: bool = False) -> None:
        prefix = "Search finished" if final else "Searching"
        print(
            f"{prefix}: {int_comma(self.stats.nodes_examined)} nodes, "
            f"{int_comma(len(self.solutions))} solutions, "
            f"{int_comma(self.stats.duplicates)} duplicates, "
            f"max depth {self.stats.max_depth_reached}, "
            f"elapsed {time_str(time() - self.stats.start_time)}",
            file=self.out,
            flush=True,
        )


def find_pangrams(
    buckets: LetterBuckets, config: SearchConfig, *, out: TextIO | None = None
) -> list[Solution]:
    """Find every distinct combination of at most `config.max_solution_size` entries that
    covers the alphabet.

    Args:
        buckets: Entries indexed by letter rank.
        config: The search configuration.
        out: Stream for progress messages, standard output if None (only written to if
            `config.verbose` is set).

    Returns:
        The distinct solutions, in canonical order.
    """
    return PangramSearch(buckets, config, out=out).run()
