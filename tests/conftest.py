import pytest

from pangrams.buckets import LetterBuckets
from pangrams.config import SearchConfig
from pangrams.encoder import encode_words
from pangrams.rarity import LetterRanking

SIX_LETTERS = "ABCDEF"


@pytest.fixture
def make_config():
    """Factory for search configurations that ignore any environment settings."""

    def _make_config(**kwargs) -> SearchConfig:
        kwargs.setdefault("alphabet", SIX_LETTERS)
        return SearchConfig(_env_file=None, **kwargs)

    return _make_config


def build_buckets(words: list[str], alphabet: str = SIX_LETTERS) -> LetterBuckets:
    ranking = LetterRanking.from_words(words, alphabet)
    return LetterBuckets(encode_words(words, ranking), ranking)
