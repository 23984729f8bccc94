"""
Services Package

Contains the dictionary, the deduction engine and the session operations.
"""

from .dictionary import Dictionary
from .engine import (
    check_guess, filter_candidates, is_valid_guess, normalize_word, score, select_guess
)
from .game_service import (
    GameService, get_game_state, is_game_over, new_session, opponent_turn,
    report_opponent_score, submit_human_guess
)

__all__ = [
    'Dictionary',
    'check_guess', 'filter_candidates', 'is_valid_guess', 'normalize_word', 'score', 'select_guess',
    'GameService', 'get_game_state', 'is_game_over', 'new_session', 'opponent_turn',
    'report_opponent_score', 'submit_human_guess'
]
