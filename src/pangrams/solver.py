"""Pipeline wiring: load words, rank letters, encode, index and search."""

from dataclasses import dataclass
from pprint import pprint
from time import time
from typing import TextIO

from pangrams.buckets import LetterBuckets
from pangrams.config import SearchConfig
from pangrams.encoder import WordEntry, encode_words
from pangrams.pruner import prune_subsets
from pangrams.rarity import LetterRanking
from pangrams.report import count_combinations, print_solutions
from pangrams.search import PangramSearch, SearchStats, Solution
from pangrams.util import int_comma, time_str
from pangrams.wordlist import load_word_list


@dataclass
class SearchResult:
    """Outcome of a complete run."""

    solutions: list[Solution]
    """Distinct solutions, in canonical order."""

    total: int
    """Number of concrete word combinations (anagram multiplicities expanded)."""

    stats: SearchStats
    """Statistics collected by the search."""

    elapsed: float
    """Wall-clock duration of the search phase, in seconds."""


def build_buckets(
    words: list[str], config: SearchConfig, *, out: TextIO | None = None
) -> LetterBuckets:
    """Rank letters, encode the words and build the letter buckets.

    Subset pruning is applied first unless `config.exhaustive_search` is set.
    """
    ranking = LetterRanking.from_words(words, config.alphabet)
    entries: list[WordEntry] = encode_words(words, ranking)
    if config.verbose:
        print(f"Letters by rarity: {''.join(ranking.letters)}", file=out, flush=True)
        print(f"Distinct letter sets: {int_comma(len(entries))}", file=out, flush=True)

    if not config.exhaustive_search:
        entries = prune_subsets(entries)
        if config.verbose:
            print(
                f"Letter sets after subset pruning: {int_comma(len(entries))}",
                file=out,
                flush=True,
            )

    return LetterBuckets(entries, ranking)


def solve(words: list[str], config: SearchConfig, *, out: TextIO | None = None) -> SearchResult:
    """Find all combinations of `words` covering the alphabet.

    Args:
        words: Normalized, distinct words.
        config: The search configuration.
        out: Stream for diagnostic messages, standard output if None (only written to if
            `config.verbose` is set).
    """
    buckets = build_buckets(words, config, out=out)

    start = time()
    search = PangramSearch(buckets, config, out=out)
    solutions = search.run()
    elapsed = time() - start

    return SearchResult(
        solutions=solutions,
        total=count_combinations(solutions),
        stats=search.stats,
        elapsed=elapsed,
    )


def run(config: SearchConfig, *, out: TextIO | None = None) -> SearchResult:
    """Load the configured word list, run the search and print the result.

    Raises:
        FileNotFoundError: If the word list cannot be found.
    """
    if config.verbose:
        print("Search config:", file=out, flush=True)
        pprint(config.model_dump(), stream=out, width=100)

    words = load_word_list(config, out=out)
    result = solve(words, config, out=out)

    print(int_comma(result.total), file=out, flush=True)
    print(f"Search time: {time_str(result.elapsed)}", file=out, flush=True)
    if config.show_solutions:
        print_solutions(result.solutions, out=out)
    return result
