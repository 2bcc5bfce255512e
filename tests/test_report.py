import io

from conftest import build_buckets

from pangrams.report import (
    count_combinations,
    expand_solution,
    print_solutions,
    solution_multiplicity,
)
from pangrams.search import find_pangrams


def test_multiplicity_expansion(make_config):
    solutions = find_pangrams(
        build_buckets(["AB", "BA", "CDEF", "FEDC", "DCFE", "ABCDEF"]), make_config()
    )
    by_size = {len(solution.words): solution for solution in solutions}
    assert solution_multiplicity(by_size[1]) == 1
    assert solution_multiplicity(by_size[2]) == 2 * 3
    assert count_combinations(solutions) == 7


def test_count_of_nothing():
    assert count_combinations([]) == 0


def test_expand_solution(make_config):
    (solution,) = find_pangrams(
        build_buckets(["AB", "BA", "CDEF"]), make_config(max_solution_size=2)
    )
    assert list(expand_solution(solution)) == [("AB", "CDEF"), ("BA", "CDEF")]


def test_expansion_count_matches_multiplicity(make_config):
    solutions = find_pangrams(
        build_buckets(["AB", "BA", "CD", "DC", "EF", "FE", "ABCDEF"]), make_config()
    )
    assert count_combinations(solutions) == sum(
        len(list(expand_solution(solution))) for solution in solutions
    )
    assert count_combinations(solutions) == 9


def test_print_solutions(make_config):
    solutions = find_pangrams(build_buckets(["AB", "BA", "CDEF", "ABCDEF"]), make_config())
    out = io.StringIO()
    print_solutions(solutions, out=out)
    assert out.getvalue().splitlines() == [
        "AB/BA + CDEF  (x2)",
        "    AB CDEF",
        "    BA CDEF",
        "ABCDEF",
    ]


def test_print_solutions_to_current_stdout(make_config, capsys):
    solutions = find_pangrams(build_buckets(["AB", "BA", "CDEF"]), make_config(max_solution_size=2))
    print_solutions(solutions)
    assert capsys.readouterr().out == "AB/BA + CDEF  (x2)\n    AB CDEF\n    BA CDEF\n"
