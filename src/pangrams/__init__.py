"""Pangram Word-Set Finder.

Counts the combinations of dictionary words that, taken together, contain every letter of the
alphabet at least once.  Words with identical letter sets (anagrams) share a slot in the search
and are expanded again when counting.  Uses backtracking over letter-indexed word buckets,
always branching on the rarest letter not yet covered.
"""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from .config import SearchConfig
from .solver import run


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pangrams", description="Count word combinations that cover the whole alphabet"
    )
    parser.add_argument(
        "--max-solution-size", type=int, help="Maximum number of words in a combination"
    )
    parser.add_argument(
        "--pruned",
        action="store_true",
        help="Drop words whose letters are a subset of another word's (faster, not exhaustive)",
    )
    parser.add_argument(
        "--all-covers",
        action="store_true",
        help="Also count combinations containing words that add no new letters",
    )
    parser.add_argument("--alphabet", type=str, help="Letters to cover (default A-Z)")
    parser.add_argument("--word-list", type=str, help="Word list file (default: bundled list)")
    parser.add_argument("--show-solutions", action="store_true", help="Print every solution")
    parser.add_argument("--verbose", action="store_true", help="Print progress messages")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> SearchConfig:
    """Create the search configuration, with command-line arguments overriding settings."""
    overrides: dict[str, object] = {}
    if args.max_solution_size is not None:
        overrides["max_solution_size"] = args.max_solution_size
    if args.pruned:
        overrides["exhaustive_search"] = False
    if args.all_covers:
        overrides["minimal_only"] = False
    if args.alphabet is not None:
        overrides["alphabet"] = args.alphabet
    if args.word_list is not None:
        overrides["word_list_path"] = args.word_list
    if args.show_solutions:
        overrides["show_solutions"] = True
    if args.verbose:
        overrides["verbose"] = True
    return SearchConfig(**overrides)


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point for the pangram finder."""
    args = parse_args(argv)
    try:
        config = build_config(args)
        run(config)
    except ValidationError as e:
        print(f"Error: invalid configuration\n{e}", file=sys.stderr)
        sys.exit(1)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print("Search interrupted by user.", file=sys.stderr)
        sys.exit(1)
