"""
Evil Hangman Server - Main Entry Point

This is the main entry point for the hangman server.
It initializes the game service and starts the Flask application.
"""

import random
from evil_hangman import create_app
from evil_hangman.config import Config, get_word_statistics
from evil_hangman.services.game_service import initialize_game_service
from evil_hangman.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        rng = random.Random(Config.RANDOM_SEED) if Config.RANDOM_SEED is not None else None
        game_service = initialize_game_service(
            rng=rng,
            engine_debug=Config.ENGINE_DEBUG,
            dictionary_path=Config.DICTIONARY_PATH
        )
        stats = get_word_statistics(list(game_service.dictionary))
        print(f"✓ Game service initialized with {stats['total_words']} words")

        print("Creating Flask application...")
        app = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info(
            f"Hangman Server Starting - {stats['total_words']} words, "
            f"lengths {game_service.dictionary.lengths()}"
        )

        print(f"\nStarting Evil Hangman Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)

        app.run(host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Hangman Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
