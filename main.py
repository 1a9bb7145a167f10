"""
Word Board Server - Main Entry Point

Validates the word list, initializes the game service and starts the
Flask-SocketIO application.
"""

from wordle_board import create_app
from wordle_board.config import Config, load_word_list, validate_word_list_integrity
from wordle_board.services.game_service import initialize_game_service
from wordle_board.services.word_source import WordSource
from wordle_board.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        if Config.WORD_LIST_PATH:
            words = load_word_list(Config.WORD_LIST_PATH)
            word_source = WordSource(words)
        else:
            validate_word_list_integrity()
            word_source = WordSource()
        print(f"✓ Word list loaded ({len(word_source)} playable words)")

        game_service = initialize_game_service(word_source)
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Board Server Starting")

        print(f"\nStarting Word Board Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Board Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
