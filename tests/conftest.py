import os
import random
import tempfile

# Keep test log files out of the working tree; must run before the package
# reads its configuration.
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="hangman-logs-"))

import pytest

from evil_hangman import create_app
from evil_hangman.config import TestingConfig
from evil_hangman.models import Difficulty
from evil_hangman.services import HangmanEngine
from evil_hangman.services.game_service import initialize_game_service

CAT_WORDS = {"cat", "car", "can"}

SMALL_WORDS = [
    "ally", "beta", "cool", "deal", "else", "flew", "good", "hope", "ibex",
    "bed", "bad", "bid", "bud", "dab", "dad", "ear", "era",
    "hello", "world", "words", "sword",
]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def cat_engine(rng):
    engine = HangmanEngine(CAT_WORDS, rng=rng)
    engine.prepare_round(3, 6, Difficulty.HARD)
    return engine


@pytest.fixture
def game_service():
    return initialize_game_service(SMALL_WORDS, rng=random.Random(0))


@pytest.fixture
def client(game_service):
    app = create_app(TestingConfig)
    with app.test_client() as test_client:
        yield test_client
