import random

import pytest

from clapbird import GameConfig, GameSession


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(config, rng):
    return GameSession(config, rng=rng)


@pytest.fixture
def playing_session(session):
    session.handle_input()
    return session
