"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import game_endpoint, socket_game_event, error_payload, error_status
from .helpers import get_user_identity
from .game_logger import game_logger

__all__ = [
    'game_endpoint', 'socket_game_event', 'error_payload', 'error_status',
    'get_user_identity', 'game_logger'
]
