import pytest

from message_board import create_app
from message_board.config import Settings
from message_board.services import MessageStore


@pytest.fixture
def store():
    """A fresh, empty message store for each test."""
    return MessageStore()


@pytest.fixture
def app(store):
    app = create_app(Settings(), store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    return app.test_client()
