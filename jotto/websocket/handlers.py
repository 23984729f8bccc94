"""
WebSocket Event Handlers

Real-time play over Socket.IO. The opponent's thinking pause lives here and
nowhere else; the engine answers immediately.
"""

from dataclasses import asdict
from flask import current_app, request
from flask_socketio import emit, join_room, leave_room

from ..utils.decorators import socket_game_event
from ..utils.game_logger import game_logger


def _get_game_service():
    return getattr(current_app, 'game_service', None)


def _room(game_id):
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def broadcast_game_state_update(game_service, game_id):
        state = game_service.get_game_state(game_id)
        socketio.emit('game_state_update', {
            'success': True,
            'state': asdict(state)
        }, to=_room(game_id))

    @socketio.on('start_game')
    @socket_game_event('start_game', _get_game_service)
    def handle_start_game(game_service, data):
        """Start a new game, leaving the previous one's room if given."""
        previous_game_id = data.get('previous_game_id')
        if previous_game_id:
            leave_room(_room(previous_game_id))

        session = game_service.create_new_game()
        join_room(_room(session.game_id))
        game_logger.log_user_action(request, 'new_game', session.game_id, transport='websocket')

        emit('game_started', {
            'success': True,
            'game_id': session.game_id,
            'state': asdict(game_service.get_game_state(session.game_id))
        })

    @socketio.on('join_game')
    @socket_game_event('join_game', _get_game_service)
    def handle_join_game(game_service, data):
        """Follow an existing game's updates, e.g. after a reconnect."""
        game_id = data.get('game_id')
        state = game_service.get_game_state(game_id)
        join_room(_room(game_id))

        emit('game_state_update', {
            'success': True,
            'state': asdict(state)
        })

    @socketio.on('submit_guess')
    @socket_game_event('submit_guess', _get_game_service)
    def handle_submit_guess(game_service, data):
        """Submit a human guess via WebSocket."""
        game_id = data.get('game_id')
        guess = data.get('guess')
        game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess, transport='websocket')

        word, score = game_service.submit_guess(game_id, guess)
        emit('guess_result', {'success': True, 'word': word, 'score': score})
        broadcast_game_state_update(game_service, game_id)

    @socketio.on('request_opponent_guess')
    @socket_game_event('opponent_guess', _get_game_service)
    def handle_request_opponent_guess(game_service, data):
        """Have the opponent pick a guess, pausing first for effect."""
        game_id = data.get('game_id')
        guess = game_service.opponent_guess(game_id)

        think_seconds = current_app.config.get('OPPONENT_THINK_SECONDS', 0)
        if think_seconds > 0:
            socketio.sleep(think_seconds)

        emit('opponent_guess', {'success': True, 'game_id': game_id, 'guess': guess})

    @socketio.on('report_score')
    @socket_game_event('report_score', _get_game_service)
    def handle_report_score(game_service, data):
        """Score the opponent's pending guess against your secret word."""
        game_id = data.get('game_id')
        guess = data.get('guess')
        score = data.get('score')
        game_logger.log_user_action(
            request, 'report_score', game_id, guess=guess, score=score, transport='websocket'
        )

        game_service.report_score(game_id, guess, score)
        broadcast_game_state_update(game_service, game_id)
