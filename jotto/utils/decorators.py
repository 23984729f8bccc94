"""
Endpoint Decorators

Contains decorators that hand the game service to HTTP and WebSocket
handlers and turn game errors into error responses.
"""

from functools import wraps
from flask import request, jsonify, current_app
from flask_socketio import emit

from ..errors import (
    GameNotFound, InconsistentScoreError, JottoError, TurnOrderError, ValidationError
)
from .game_logger import game_logger

ERROR_STATUS = {
    ValidationError: 400,
    GameNotFound: 404,
    TurnOrderError: 409,
    InconsistentScoreError: 409,
}


def error_payload(error: JottoError) -> dict:
    """JSON body describing a game error."""
    payload = {
        'success': False,
        'error': str(error)
    }
    if isinstance(error, ValidationError):
        payload['error_type'] = 'validation'
        payload['reason'] = error.reason.value
    elif isinstance(error, InconsistentScoreError):
        payload['error_type'] = 'inconsistent_score'
    elif isinstance(error, GameNotFound):
        payload['error_type'] = 'not_found'
    elif isinstance(error, TurnOrderError):
        payload['error_type'] = 'turn_order'
    return payload


def error_status(error: JottoError) -> int:
    for error_class, status in ERROR_STATUS.items():
        if isinstance(error, error_class):
            return status
    return 400


def game_endpoint(action):
    """
    Decorator for HTTP endpoints that need the game service.

    The wrapped view receives the service as its first argument. Game errors
    become JSON error responses; anything else is logged and answered with 500.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            game_id = kwargs.get('game_id')
            game_service = getattr(current_app, 'game_service', None)
            if not game_service:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            try:
                return f(game_service, *args, **kwargs)
            except JottoError as e:
                error_response = error_payload(e)
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), error_status(e)
            except Exception as e:
                game_logger.log_error(request, e, action, game_id)
                error_response = {
                    'success': False,
                    'error': str(e)
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 500

        return decorated_function
    return decorator


def socket_game_event(action, service_getter):
    """Decorator for WebSocket events; failures are emitted as 'game_error'."""
    def decorator(f):
        @wraps(f)
        def decorated_function(data=None):
            data = data or {}
            if not isinstance(data, dict):
                emit('game_error', {'success': False, 'action': action, 'error': 'Invalid payload'})
                return

            game_service = service_getter()
            if not game_service:
                emit('game_error', {'success': False, 'error': 'Game service unavailable'})
                return

            try:
                return f(game_service, data)
            except JottoError as e:
                error_response = error_payload(e)
                error_response['action'] = action
                game_logger.log_server_response(request, action, False, error_response, data.get('game_id'))
                emit('game_error', error_response)
            except Exception as e:
                game_logger.log_error(request, e, action, data.get('game_id'))
                emit('game_error', {'success': False, 'action': action, 'error': str(e)})

        return decorated_function
    return decorator
