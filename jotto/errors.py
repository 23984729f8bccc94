"""
Game Errors

Exception hierarchy shared by the dictionary, the deduction engine and the
session layer. Controllers map these onto HTTP status codes.
"""

from enum import Enum
from typing import Optional


class JottoError(Exception):
    """Base class for all game errors."""


class ValidationReason(Enum):
    """Why a submitted word or score was rejected."""
    NOT_A_STRING = "not_a_string"
    LENGTH = "length"
    DUPLICATE_LETTERS = "duplicate_letters"
    NOT_IN_DICTIONARY = "not_in_dictionary"
    ALREADY_GUESSED = "already_guessed"
    SCORE_OUT_OF_RANGE = "score_out_of_range"
    UNEXPECTED_GUESS = "unexpected_guess"


class ValidationError(JottoError, ValueError):
    """A guess or reported score was rejected; the turn does not advance."""

    def __init__(self, reason: ValidationReason, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


class InconsistentScoreError(JottoError):
    """
    Filtering emptied the candidate set.

    Some earlier reported score did not match the real secret. The session
    cannot recover from this; a new game has to be started.
    """

    def __init__(self, guess: Optional[str] = None, score: Optional[int] = None):
        message = "I have run out of words! Did you make a mistake in scoring?"
        super().__init__(message)
        self.guess = guess
        self.score = score


class MalformedDictionary(JottoError, ValueError):
    """The word list could not be loaded or holds an invalid entry."""


class TurnOrderError(JottoError):
    """An operation was called out of turn or after the game ended."""


class GameNotFound(JottoError):
    """No session is registered under the given game id."""
