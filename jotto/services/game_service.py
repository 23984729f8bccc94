"""
Game Service

Session operations for the duel plus a registry that keys sessions by id
for the HTTP and WebSocket layers.
"""

import random
from typing import Dict, Optional, Tuple

from ..config.game_settings import WINNING_SCORE, WORD_LENGTH
from ..errors import (
    GameNotFound, InconsistentScoreError, TurnOrderError, ValidationError, ValidationReason
)
from ..models.game import GameSession, GameState, GuessRecord, TurnState, Winner
from ..utils.game_logger import game_logger
from .dictionary import Dictionary
from .engine import check_guess, filter_candidates, normalize_word, score, select_guess


def new_session(dictionary: Dictionary, rng: Optional[random.Random] = None) -> GameSession:
    """
    Start a fresh game: a random opponent secret and every word as a candidate.

    Safe to call repeatedly; nothing is shared with earlier sessions. When
    ``rng`` is given, the session draws its own generator from it once, so
    later play in other sessions cannot shift this one.
    """
    session_rng = random.Random(rng.getrandbits(64)) if rng is not None else random.Random()
    return GameSession(
        secret=dictionary.pick_random(session_rng),
        candidates=set(dictionary.all()),
        dictionary=dictionary,
        rng=session_rng,
    )


def _require_turn(session: GameSession, expected: TurnState) -> None:
    if session.turn == expected:
        return
    if session.turn == TurnState.GAME_OVER:
        raise TurnOrderError("Game is already over")
    if session.turn == TurnState.INCONSISTENT:
        raise TurnOrderError("Game cannot continue after an inconsistent score, start a new game")
    if expected == TurnState.AWAITING_HUMAN_GUESS:
        raise TurnOrderError("Waiting for a score for the opponent's guess")
    raise TurnOrderError("Waiting for your guess")


def submit_human_guess(session: GameSession, raw_input) -> Tuple[str, int]:
    """
    Validate and score a human guess against the opponent's secret.

    Returns:
        Tuple of (normalized_word, score)

    Raises:
        ValidationError: If the word is unplayable or was already guessed
        TurnOrderError: If it is not the human's turn
    """
    _require_turn(session, TurnState.AWAITING_HUMAN_GUESS)

    word = check_guess(raw_input, session.dictionary)
    if any(record.word == word for record in session.human_guesses):
        raise ValidationError(ValidationReason.ALREADY_GUESSED, "You already guessed that word!")

    guess_score = score(word, session.secret)
    session.human_guesses.append(GuessRecord(word, guess_score))

    if guess_score == WINNING_SCORE:
        session.turn = TurnState.GAME_OVER
        session.winner = Winner.HUMAN
        game_logger.log_game_event(
            session.game_id, 'game_won',
            winner=Winner.HUMAN.value, winning_guess=word, target_word=session.secret,
            rounds_used=len(session.human_guesses)
        )
    else:
        session.turn = TurnState.AWAITING_OPPONENT_SCORE

    return word, guess_score


def opponent_turn(session: GameSession, rng: Optional[random.Random] = None) -> str:
    """
    Choose the opponent's next guess from the remaining candidates.

    The candidate set is not touched here; it shrinks only once the human
    reports a score. Asking again before scoring returns the same guess.
    """
    _require_turn(session, TurnState.AWAITING_OPPONENT_SCORE)

    if session.pending_guess is None:
        session.pending_guess = select_guess(session.candidates, rng or session.rng)
    return session.pending_guess


def report_opponent_score(session: GameSession, guess: str, reported_score) -> None:
    """
    Record the human's score for the opponent's guess and eliminate candidates.

    Raises:
        ValidationError: If the score is out of range or ``guess`` is not the
            guess the opponent is waiting on
        TurnOrderError: If the opponent has no guess awaiting a score
        InconsistentScoreError: If no candidate agrees with every report so far
    """
    _require_turn(session, TurnState.AWAITING_OPPONENT_SCORE)
    if session.pending_guess is None:
        raise TurnOrderError("The opponent has not guessed yet")

    if isinstance(reported_score, bool) or not isinstance(reported_score, int) \
            or not 0 <= reported_score <= WORD_LENGTH:
        raise ValidationError(
            ValidationReason.SCORE_OUT_OF_RANGE, f"Score must be a whole number from 0 to {WORD_LENGTH}"
        )

    word = normalize_word(guess) if isinstance(guess, str) else guess
    if word != session.pending_guess:
        raise ValidationError(
            ValidationReason.UNEXPECTED_GUESS, f"The opponent is waiting for a score for {session.pending_guess}"
        )

    session.opponent_guesses.append(GuessRecord(word, reported_score))
    session.pending_guess = None

    count_before = len(session.candidates)
    session.candidates = filter_candidates(session.candidates, word, reported_score)
    count_after = len(session.candidates)
    game_logger.log_game_event(
        session.game_id, 'candidates_filtered',
        guess=word, score=reported_score, count_before=count_before, count_after=count_after
    )

    if not session.candidates:
        session.turn = TurnState.INCONSISTENT
        game_logger.logger.warning(
            f"Game {session.game_id}: candidate set emptied after {word} scored {reported_score}"
        )
        raise InconsistentScoreError(word, reported_score)

    if reported_score == WINNING_SCORE:
        session.turn = TurnState.GAME_OVER
        session.winner = Winner.OPPONENT
        game_logger.log_game_event(
            session.game_id, 'game_won',
            winner=Winner.OPPONENT.value, winning_guess=word, target_word=session.secret,
            rounds_used=len(session.opponent_guesses)
        )
    else:
        session.turn = TurnState.AWAITING_HUMAN_GUESS


def is_game_over(session: GameSession) -> Optional[Winner]:
    return session.winner


def get_game_state(session: GameSession) -> GameState:
    """Snapshot of a session without the opponent's secret unless the game is over."""
    return GameState(
        game_id=session.game_id,
        turn=session.turn.value,
        game_over=session.is_finished,
        winner=session.winner.value if session.winner else None,
        human_guesses=[{'word': r.word, 'score': r.score} for r in session.human_guesses],
        opponent_guesses=[{'word': r.word, 'score': r.score} for r in session.opponent_guesses],
        pending_guess=session.pending_guess,
        candidates_remaining=len(session.candidates),
        inconsistent=session.turn == TurnState.INCONSISTENT,
        answer=session.secret if session.is_finished else None
    )


class GameService:
    """
    Registry of live sessions for the web layer.

    This class handles:
    - Session creation with unique game IDs
    - Looking sessions up by id
    - Seeding each new session from the service RNG
    """

    def __init__(self, dictionary: Dictionary, seed: Optional[int] = None):
        self.dictionary = dictionary
        self.rng = random.Random(seed)
        self.games: Dict[str, GameSession] = {}

    def create_new_game(self) -> GameSession:
        session = new_session(self.dictionary, self.rng)
        self.games[session.game_id] = session
        game_logger.log_game_event(
            session.game_id, 'game_started', dictionary_size=len(self.dictionary)
        )
        return session

    def get_session(self, game_id: str) -> GameSession:
        """
        Raises:
            GameNotFound: If no session has that id
        """
        session = self.games.get(game_id)
        if session is None:
            raise GameNotFound(f"Game not found: {game_id}")
        return session

    def get_game_state(self, game_id: str) -> GameState:
        return get_game_state(self.get_session(game_id))

    def submit_guess(self, game_id: str, raw_input) -> Tuple[str, int]:
        return submit_human_guess(self.get_session(game_id), raw_input)

    def opponent_guess(self, game_id: str) -> str:
        return opponent_turn(self.get_session(game_id))

    def report_score(self, game_id: str, guess: str, reported_score) -> None:
        report_opponent_score(self.get_session(game_id), guess, reported_score)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False
