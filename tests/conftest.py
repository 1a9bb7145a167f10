import os
import random
import tempfile

# Keep test runs from writing logs into the working tree; must run before
# the package reads its configuration.
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordle_board_logs_'))

import pytest

from wordle_board import create_app
from wordle_board.config import TestingConfig
from wordle_board.services.game_service import initialize_game_service
from wordle_board.services.state_machine import GameController
from wordle_board.services.word_source import WordSource

TEST_WORDS = [
    "crane", "candy", "happy", "apply", "stare", "trace", "raise",
    "eerie", "geese", "level", "llama", "plant", "hello", "world",
]


def type_word(game, word):
    for char in word:
        game.insert_letter(char)


@pytest.fixture
def word_source():
    return WordSource(TEST_WORDS, targets=["crane"], rng=random.Random(0))


@pytest.fixture
def game(word_source):
    return GameController(word_source, game_id="test-game")


@pytest.fixture
def app(word_source):
    initialize_game_service(word_source)
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
