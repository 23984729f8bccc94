"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameSession, GameState, GuessRecord, TurnState, Winner

__all__ = ['GameSession', 'GameState', 'GuessRecord', 'TurnState', 'Winner']
