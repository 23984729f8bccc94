"""
Jotto Duel Server Application Package

A human and an automated opponent race to deduce each other's five-letter
word from shared-letter counts. The opponent narrows its candidate words
after every score it is told.
"""

from typing import Optional

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config
from .services.dictionary import Dictionary
from .services.game_service import GameService


def create_app(config_class=Config, dictionary: Optional[Dictionary] = None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        dictionary: Preloaded word list; loaded from WORD_LIST_PATH when omitted

    Returns:
        Tuple of (Flask application, SocketIO instance)

    Raises:
        MalformedDictionary: If the word list cannot be loaded
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    if dictionary is None:
        dictionary = Dictionary.load(app.config['WORD_LIST_PATH'])

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)

    # Each app owns its own session registry
    app.game_service = GameService(dictionary, seed=app.config.get('OPPONENT_SEED'))

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp, url_prefix='/api')

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
