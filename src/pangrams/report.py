"""Aggregation of search results into concrete word combinations."""

from collections.abc import Iterable, Iterator
from itertools import product
from typing import TextIO

from pangrams.search import Solution
from pangrams.util import int_comma


def solution_multiplicity(solution: Solution) -> int:
    """Return the number of concrete word combinations a solution stands for.

    An entry that merges `k` anagrams contributes a factor of `k`.
    """
    return solution.multiplicity


def count_combinations(solutions: Iterable[Solution]) -> int:
    """Return the total number of concrete word combinations over all solutions."""
    return sum(solution_multiplicity(solution) for solution in solutions)


def expand_solution(solution: Solution) -> Iterator[tuple[str, ...]]:
    """Yield every concrete word combination represented by a solution."""
    yield from product(*(entry.names for entry in solution.words))


def print_solutions(solutions: Iterable[Solution], *, out: TextIO | None = None) -> None:
    """Print each solution, followed by its concrete word combinations if it merges anagrams.

    Example output for a solution whose first entry merges two words::

        AB/BA + CDEF  (x2)
            AB CDEF
            BA CDEF
    """
    for solution in solutions:
        multiplicity = solution_multiplicity(solution)
        if multiplicity == 1:
            print(solution, file=out)
            continue
        print(f"{solution}  (x{int_comma(multiplicity)})", file=out)
        for words in expand_solution(solution):
            print(f"    {' '.join(words)}", file=out)
