import pytest

from pangrams.rarity import MASK_WIDTH, LetterRanking, count_letters


def test_count_letters_counts_words_not_occurrences():
    counts = count_letters(["QI", "QUIT", "IT", "TITI"], "IQTU")
    assert counts == {"I": 4, "Q": 2, "T": 3, "U": 1}


def test_ranking_rarest_first_with_letter_tie_break():
    ranking = LetterRanking.from_words(["QI", "QUIT", "IT"], "IQTU")
    assert ranking.letters == ("U", "Q", "T", "I")
    assert [ranking.rank(ch) for ch in "UQTI"] == [0, 1, 2, 3]


def test_unused_letters_rank_rarest():
    ranking = LetterRanking.from_words(["QI", "QUIT", "IT"], "IQTUZ")
    assert ranking.letters[0] == "Z"
    assert ranking.counts["Z"] == 0


def test_ranking_is_reproducible():
    words = ["AB", "CD", "EF", "ABCDEF"]
    assert LetterRanking.from_words(words, "FEDCBA") == LetterRanking.from_words(words, "ABCDEF")


def test_empty_corpus_ranks_alphabetically():
    ranking = LetterRanking.from_words([], "CAB")
    assert ranking.letters == ("A", "B", "C")


def test_bits_are_left_justified():
    assert LetterRanking.bit(0) == 1 << (MASK_WIDTH - 1)
    assert LetterRanking.bit(5) == 1 << (MASK_WIDTH - 6)


def test_full_mask():
    assert LetterRanking.from_words([], "ABCDEF").full_mask == 0xFC000000
    assert LetterRanking.from_words([], "ABCDEFGHIJKLMNOPQRSTUVWXYZ").full_mask == 0xFFFFFFC0


def test_next_missing_is_lowest_uncovered_rank():
    ranking = LetterRanking.from_words([], "ABCDEF")
    bit = ranking.bit
    assert ranking.next_missing(0) == 0
    assert ranking.next_missing(bit(1)) == 0
    assert ranking.next_missing(bit(0) | bit(1)) == 2
    assert ranking.next_missing(bit(0) | bit(1) | bit(3)) == 2
    assert ranking.next_missing(ranking.full_mask) == 6


def test_is_complete():
    ranking = LetterRanking.from_words([], "ABCDEF")
    assert ranking.is_complete(ranking.full_mask)
    assert not ranking.is_complete(ranking.full_mask ^ ranking.bit(5))


def test_ranks_in_and_decode():
    ranking = LetterRanking.from_words(["QI", "QUIT", "IT"], "IQTU")
    mask = ranking.bit(ranking.rank("Q")) | ranking.bit(ranking.rank("I"))
    assert ranking.ranks_in(mask) == [1, 3]
    assert ranking.decode(mask) == "IQ"
    assert ranking.decode(0) == ""


def test_unknown_letter():
    ranking = LetterRanking.from_words([], "ABC")
    with pytest.raises(ValueError, match="'Z'"):
        ranking.rank("Z")


def test_too_many_letters():
    with pytest.raises(ValueError):
        LetterRanking(letters=tuple(chr(0x100 + i) for i in range(MASK_WIDTH + 1)), counts={})


def test_ranking_is_comparable_but_not_hashable():
    ranking = LetterRanking.from_words(["AB", "BC"], "ABC")
    assert ranking == LetterRanking(letters=("A", "C", "B"), counts={"A": 1, "B": 2, "C": 1})
    assert "_ranks" not in repr(ranking)
    with pytest.raises(TypeError):
        hash(ranking)
