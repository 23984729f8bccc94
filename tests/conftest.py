import os
import tempfile

# Keep test logs out of the working tree; read when jotto.config is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='jotto-logs-'))

import pytest

from jotto import create_app
from jotto.config import TestingConfig
from jotto.services.dictionary import Dictionary


@pytest.fixture(scope='session')
def dictionary():
    return Dictionary.load()


@pytest.fixture
def small_dictionary():
    return Dictionary.from_words(["ABCDE", "FGHIJ", "ABCDF"])


@pytest.fixture
def app(dictionary):
    app, _ = create_app(TestingConfig, dictionary)
    return app


@pytest.fixture
def small_app(small_dictionary):
    app, _ = create_app(TestingConfig, small_dictionary)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def small_client(small_app):
    return small_app.test_client()


@pytest.fixture
def socket_client(app):
    client = app.socketio.test_client(app)
    yield client
    if client.is_connected():
        client.disconnect()
