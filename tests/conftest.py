import os
import sys
import pytest

# Ensure the project root (containing the `dailypuzzle` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
PROJECT_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from dailypuzzle import create_app, socketio
from dailypuzzle.services.scores import DailyRecordStore


class TestConfig:
    TESTING = True
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    MOUNT = ''
    BOARD_ROWS = 12
    BOARD_COLS = 12
    MAX_SUBMISSION_BYTES = 1024
    CORS_ORIGINS = ['http://localhost:5454']


class FakeClock:
    """Stands in for the wall clock; returns a packed YYYYMMDD day."""

    def __init__(self, day=20261018):
        self.day = day

    def __call__(self):
        return self.day


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def store(clock):
    return DailyRecordStore(today=clock)


@pytest.fixture()
def flask_app(store):
    application = create_app(TestConfig, store=store)
    with application.app_context():
        yield application


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def sio_client(flask_app):
    test_client = socketio.test_client(
        flask_app,
        flask_test_client=flask_app.test_client(),
        namespace='/ws'
    )
    yield test_client
    try:
        test_client.disconnect(namespace='/ws')
    except Exception:
        pass
