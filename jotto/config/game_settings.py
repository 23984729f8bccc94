"""
Game Configuration Constants Module

All game rule constants are centralized here. Runtime settings that come
from the environment live in app_config.py instead.
"""

import os
from typing import Final

WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret and every guess.
Type: Final[int] - Immutable to prevent accidental modification
"""

WINNING_SCORE: Final[int] = WORD_LENGTH
"""
A guess sharing every letter with the secret wins, whatever the letter order.
"""

VOWELS: Final[frozenset] = frozenset("AEIOU")

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)
