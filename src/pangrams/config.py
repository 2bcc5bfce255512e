"""Pangram search configuration."""

from dotenv import find_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None

DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class SearchConfig(BaseSettings):
    """Configuration settings for the pangram search."""

    max_solution_size: int = Field(default=4, ge=1)
    """Maximum number of words in a single combination. Default: 4."""

    exhaustive_search: bool = True
    """Whether to search exhaustively.  If False, words whose letters are a strict subset of
    another word's letters are pruned before searching, which is faster but may miss solutions.
    Default: True."""

    minimal_only: bool = True
    """Whether to report only irredundant combinations, i.e. those where every word supplies at
    least one letter that no other word in the combination supplies. Default: True."""

    alphabet: str = DEFAULT_ALPHABET
    """Letters that a combination must cover. Default: A-Z."""

    word_list_path: str | None = None
    """Path to the word list.  If None (default), uses the word list bundled with the package."""

    report_interval: int = Field(default=100_000, ge=1)
    """Interval (in number of search nodes) at which to report progress. Default: 100000."""

    verbose: bool = False
    """Whether to print progress and diagnostic messages. Default: False."""

    show_solutions: bool = False
    """Whether to print every distinct solution after the total count. Default: False."""

    model_config = SettingsConfigDict(
        env_prefix="PANGRAMS_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )

    @field_validator("alphabet")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        alphabet = value.strip().upper()
        if not alphabet:
            raise ValueError("The alphabet must contain at least one letter.")
        invalid = {ch for ch in alphabet if not ("A" <= ch <= "Z")}
        if invalid:
            raise ValueError(f"The alphabet contains invalid characters: {sorted(invalid)}")
        if len(set(alphabet)) != len(alphabet):
            raise ValueError(f"The alphabet contains repeated letters: {alphabet}")
        return alphabet

