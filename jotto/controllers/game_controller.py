"""
Game Controller

Handles all game-related HTTP endpoints.
"""

from dataclasses import asdict
from flask import Blueprint, request, jsonify, current_app

from ..utils.decorators import game_endpoint
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)


@game_bp.route('/new_game', methods=['POST'])
@game_endpoint('new_game')
def new_game(game_service):
    """Create a new game session; also used to restart."""
    game_logger.log_user_action(request, 'new_game')

    session = game_service.create_new_game()
    state = game_service.get_game_state(session.game_id)

    response_data = {
        'success': True,
        'game_id': session.game_id,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'new_game', True, response_data, session.game_id,
        candidates_remaining=state.candidates_remaining
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@game_endpoint('get_state')
def get_state(game_service, game_id):
    """Get current game state."""
    game_logger.log_user_action(request, 'get_state', game_id)

    state = game_service.get_game_state(game_id)
    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'get_state', True, response_data, game_id, turn=state.turn
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@game_endpoint('submit_guess')
def make_guess(game_service, game_id):
    """Submit a human guess at the opponent's secret."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'guess' not in data:
        error_response = {
            'success': False,
            'error': 'Guess is required'
        }
        game_logger.log_server_response(request, 'submit_guess', False, error_response, game_id)
        return jsonify(error_response), 400

    guess = data['guess']
    game_logger.log_user_action(request, 'submit_guess', game_id, guess=guess)

    word, score = game_service.submit_guess(game_id, guess)
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'word': word,
        'score': score,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'submit_guess', True, response_data, game_id,
        guess=word, score=score, game_over=state.game_over
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/opponent_guess', methods=['POST'])
@game_endpoint('opponent_guess')
def opponent_guess(game_service, game_id):
    """Ask the opponent for its next guess."""
    game_logger.log_user_action(request, 'opponent_guess', game_id)

    guess = game_service.opponent_guess(game_id)
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'guess': guess,
        'think_seconds': current_app.config.get('OPPONENT_THINK_SECONDS', 0),
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'opponent_guess', True, response_data, game_id,
        guess=guess, candidates_remaining=state.candidates_remaining
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>/opponent_score', methods=['POST'])
@game_endpoint('report_score')
def report_score(game_service, game_id):
    """Report how many letters the opponent's guess shares with your word."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict) or 'guess' not in data or 'score' not in data:
        error_response = {
            'success': False,
            'error': 'Guess and score are required'
        }
        game_logger.log_server_response(request, 'report_score', False, error_response, game_id)
        return jsonify(error_response), 400

    guess = data['guess']
    score = data['score']
    game_logger.log_user_action(request, 'report_score', game_id, guess=guess, score=score)

    game_service.report_score(game_id, guess, score)
    state = game_service.get_game_state(game_id)

    response_data = {
        'success': True,
        'state': asdict(state)
    }

    game_logger.log_server_response(
        request, 'report_score', True, response_data, game_id,
        candidates_remaining=state.candidates_remaining, game_over=state.game_over
    )

    return jsonify(response_data)


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@game_endpoint('delete_game')
def delete_game(game_service, game_id):
    """Delete a game session."""
    game_logger.log_user_action(request, 'delete_game', game_id)

    success = game_service.delete_game(game_id)
    response_data = {
        'success': success
    }

    game_logger.log_server_response(request, 'delete_game', success, response_data, game_id)

    if success:
        game_logger.log_game_event(game_id, 'game_deleted', request.remote_addr)
        return jsonify(response_data)

    response_data['error'] = 'Game not found'
    return jsonify(response_data), 404


@game_bp.route('/words/stats', methods=['GET'])
@game_endpoint('word_stats')
def word_stats(game_service):
    """Statistics about the loaded dictionary."""
    game_logger.log_user_action(request, 'word_stats')

    response_data = {
        'success': True,
        'stats': game_service.dictionary.statistics()
    }

    game_logger.log_server_response(request, 'word_stats', True, response_data)
    return jsonify(response_data)


@game_bp.route('/health', methods=['GET'])
@game_endpoint('health_check')
def health_check(game_service):
    """Health check endpoint."""
    game_logger.log_user_action(request, 'health_check')

    response_data = {
        'status': 'healthy',
        'active_games': len(game_service.games),
        'dictionary_size': len(game_service.dictionary),
        'log_stats': game_logger.get_log_stats()
    }

    game_logger.log_server_response(request, 'health_check', True, response_data)
    return jsonify(response_data)
