import random
from itertools import combinations

import pytest

from jotto.errors import InconsistentScoreError, ValidationError, ValidationReason
from jotto.services.engine import (
    check_guess, filter_candidates, is_valid_guess, normalize_word, score, select_guess
)


def test_score_counts_shared_letters_regardless_of_position():
    assert score("ABCDE", "EDCBA") == 5
    assert score("ABCDE", "FGHIJ") == 0
    assert score("CRANE", "TRACE") == 4
    assert score("HEART", "EARTH") == 5


def test_score_of_a_word_against_itself_is_its_length(dictionary):
    for word in dictionary:
        assert score(word, word) == 5


def test_score_is_symmetric_for_distinct_letter_words(dictionary):
    words = sorted(dictionary)[:60]
    for first, second in combinations(words, 2):
        assert score(first, second) == score(second, first)


def test_score_is_not_symmetric_when_a_letter_repeats():
    assert score("AABCD", "AEFGH") == 2
    assert score("AEFGH", "AABCD") == 1


def test_score_of_empty_input_is_zero():
    assert score("", "ABCDE") == 0
    assert score("ABCDE", "") == 0


def test_filter_reproduces_the_documented_elimination():
    candidates = {"ABCDE", "FGHIJ", "ABCDF"}
    assert score("FGHIJ", "ABCDE") == 0
    assert score("FGHIJ", "ABCDF") == 1

    assert filter_candidates(candidates, "FGHIJ", 0) == {"ABCDE"}


def test_filter_does_not_mutate_its_input():
    candidates = {"ABCDE", "FGHIJ", "ABCDF"}
    filter_candidates(candidates, "FGHIJ", 0)
    assert candidates == {"ABCDE", "FGHIJ", "ABCDF"}


def test_filter_is_idempotent(dictionary):
    once = filter_candidates(dictionary.all(), "CRANE", 2)
    assert filter_candidates(once, "CRANE", 2) == once


def test_filter_is_order_independent(dictionary):
    first = filter_candidates(filter_candidates(dictionary.all(), "CRANE", 2), "MOIST", 1)
    second = filter_candidates(filter_candidates(dictionary.all(), "MOIST", 1), "CRANE", 2)
    assert first == second


def test_filter_never_grows_the_candidate_set(dictionary):
    candidates = set(dictionary.all())
    for guess in ("BLAST", "CHOIR", "DUSKY"):
        for observed in range(6):
            assert len(filter_candidates(candidates, guess, observed)) <= len(candidates)


def test_filter_keeps_the_true_secret_under_truthful_scores(dictionary):
    rng = random.Random(7)
    for _ in range(25):
        secret = dictionary.pick_random(rng)
        candidates = set(dictionary.all())
        for guess in rng.sample(sorted(dictionary), 6):
            candidates = filter_candidates(candidates, guess, score(guess, secret))
            assert secret in candidates


def test_filter_empties_when_no_candidate_matches_the_reported_score():
    candidates = {"ABCDE", "ABCDF", "ABCDG"}
    # every candidate scores 4 or 5 against ABCDE
    assert filter_candidates(candidates, "ABCDE", 2) == set()


def test_select_guess_returns_a_remaining_candidate():
    candidates = {"ABCDE", "FGHIJ", "ABCDF"}
    rng = random.Random(3)
    for _ in range(20):
        assert select_guess(candidates, rng) in candidates


def test_select_guess_is_reproducible_with_a_seed(dictionary):
    first = select_guess(dictionary.all(), random.Random(99))
    second = select_guess(set(dictionary.all()), random.Random(99))
    assert first == second


def test_select_guess_from_an_empty_set_raises():
    with pytest.raises(InconsistentScoreError):
        select_guess(set())


def test_normalize_word_uppercases_and_strips():
    assert normalize_word("  crane\n") == "CRANE"


def test_is_valid_guess_rejects_repeated_letters(dictionary):
    is_valid, error = is_valid_guess("apple", dictionary)
    assert is_valid is False
    assert error == "Guess must not repeat any letter"


def test_is_valid_guess_accepts_lowercase_dictionary_words(dictionary):
    assert is_valid_guess("crane", dictionary) == (True, "")


@pytest.mark.parametrize("raw, reason", [
    ("cran", ValidationReason.LENGTH),
    ("cranes", ValidationReason.LENGTH),
    ("", ValidationReason.LENGTH),
    ("apple", ValidationReason.DUPLICATE_LETTERS),
    ("qwxyz", ValidationReason.NOT_IN_DICTIONARY),
    ("ab1de", ValidationReason.NOT_IN_DICTIONARY),
    (12345, ValidationReason.NOT_A_STRING),
    (None, ValidationReason.NOT_A_STRING),
])
def test_check_guess_reports_why_a_word_is_rejected(dictionary, raw, reason):
    with pytest.raises(ValidationError) as exc_info:
        check_guess(raw, dictionary)
    assert exc_info.value.reason == reason


def test_check_guess_returns_the_normalized_word(dictionary):
    assert check_guess(" Crane ", dictionary) == "CRANE"
