"""
Game Data Models

Contains all game-related data structures and enums.
"""

import random
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, List, Optional, Set


class TurnState(Enum):
    """Where a session is in the alternating turn cycle."""
    AWAITING_HUMAN_GUESS = "awaiting_human_guess"
    AWAITING_OPPONENT_SCORE = "awaiting_opponent_score"
    GAME_OVER = "game_over"
    INCONSISTENT = "inconsistent"


class Winner(Enum):
    HUMAN = "human"
    OPPONENT = "opponent"


@dataclass(frozen=True)
class GuessRecord:
    """A single guess and the shared-letter count it earned."""
    word: str
    score: int


@dataclass
class GameSession:
    """
    Everything one game owns.

    The human's secret is never known here: the human reports scores for the
    opponent's guesses and those reports drive the candidate set.
    """
    secret: str
    candidates: Set[str]
    dictionary: Any = field(repr=False, compare=False)
    game_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    human_guesses: List[GuessRecord] = field(default_factory=list)
    opponent_guesses: List[GuessRecord] = field(default_factory=list)
    pending_guess: Optional[str] = None
    turn: TurnState = TurnState.AWAITING_HUMAN_GUESS
    winner: Optional[Winner] = None
    created_at: datetime = field(default_factory=datetime.now)
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    @property
    def is_finished(self) -> bool:
        return self.turn in (TurnState.GAME_OVER, TurnState.INCONSISTENT)


@dataclass
class GameState:
    """Client-facing snapshot of a session."""
    game_id: str
    turn: str
    game_over: bool
    winner: Optional[str]
    human_guesses: List[dict]  # newest last, as {'word', 'score'}
    opponent_guesses: List[dict]
    pending_guess: Optional[str]
    candidates_remaining: int
    inconsistent: bool = False
    answer: Optional[str] = None  # Only included when game is over
