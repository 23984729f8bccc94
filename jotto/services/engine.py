"""
Deduction Engine

Pure functions behind the opponent: scoring a guess, eliminating candidates
that disagree with reported feedback, choosing the next guess and checking
that a word is playable. Nothing here touches session state.
"""

import random
from typing import Iterable, Optional, Set, Tuple

from ..config.game_settings import WORD_LENGTH
from ..errors import InconsistentScoreError, ValidationError, ValidationReason


def normalize_word(raw: str) -> str:
    """Single place where free text becomes a Word."""
    return raw.strip().upper()


def score(guess: str, secret: str) -> int:
    """
    Count the letters of ``guess`` that occur anywhere in ``secret``.

    Position is ignored and so is repetition: with distinct-letter words this
    is the size of the letter-set intersection. A guess with a repeated letter
    counts that letter once per occurrence, so the function is only symmetric
    for distinct-letter words.
    """
    if not guess or not secret:
        return 0
    count = 0
    for char in guess:
        if char in secret:
            count += 1
    return count


def filter_candidates(candidates: Iterable[str], guess: str, observed_score: int) -> Set[str]:
    """
    Keep the candidates that would have produced ``observed_score``.

    If a candidate were the real secret, scoring ``guess`` against it must give
    the reported score; any candidate that gives something else is ruled out.
    Returns a new set and never adds words.
    """
    return {candidate for candidate in candidates if score(guess, candidate) == observed_score}


def select_guess(candidates: Iterable[str], rng: Optional[random.Random] = None) -> str:
    """
    Pick uniformly among the remaining candidates.

    Raises:
        InconsistentScoreError: If no candidate remains
    """
    ordered = sorted(candidates)
    if not ordered:
        raise InconsistentScoreError()
    return (rng or random).choice(ordered)


def check_guess(raw_input, dictionary) -> str:
    """
    Validate free text as a guess and return the normalized word.

    Raises:
        ValidationError: With the first failing rule as its reason
    """
    if not isinstance(raw_input, str):
        raise ValidationError(ValidationReason.NOT_A_STRING, "Guess must be a valid string")

    word = normalize_word(raw_input)

    if len(word) != WORD_LENGTH:
        raise ValidationError(ValidationReason.LENGTH, f"Guess must be exactly {WORD_LENGTH} letters")

    if len(set(word)) != WORD_LENGTH:
        raise ValidationError(ValidationReason.DUPLICATE_LETTERS, "Guess must not repeat any letter")

    if word not in dictionary:
        raise ValidationError(ValidationReason.NOT_IN_DICTIONARY, "Word not in word list")

    return word


def is_valid_guess(raw_input, dictionary) -> Tuple[bool, str]:
    """
    Validates a guess against the word rules.

    Returns:
        Tuple of (is_valid, error_message)
    """
    try:
        check_guess(raw_input, dictionary)
    except ValidationError as e:
        return False, e.message
    return True, ""
