"""
Jotto Duel Server - Main Entry Point

Loads the dictionary, builds the Flask-SocketIO application and serves it.
"""

import os
import sys

from jotto import create_app
from jotto.config import config
from jotto.errors import MalformedDictionary
from jotto.utils.game_logger import game_logger


def main():
    """Main function to load the word list and start the server."""
    config_class = config[os.getenv('APP_ENV', 'default')]

    try:
        print("Loading word list and creating Flask application...")
        app, socketio = create_app(config_class)
        print(f"✓ Dictionary loaded with {len(app.game_service.dictionary)} words")
    except MalformedDictionary as e:
        print(f"✗ Word list is invalid: {e}")
        game_logger.logger.error(f"Startup aborted, malformed dictionary: {e}")
        sys.exit(1)

    game_logger.logger.info("Jotto Server Starting")

    print(f"\nStarting Jotto Duel Server on {config_class.HOST}:{config_class.PORT}")
    print(f"Debug mode: {config_class.DEBUG}")
    print("=" * 50)

    try:
        socketio.run(app, host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Jotto Server shutting down (KeyboardInterrupt)")


if __name__ == '__main__':
    main()
