from unittest import mock

import pytest
import requests

from replicate_ninja import Config, Replicate
from tests.helpers import BASE_URL

ENV_VARS = [
    "REPLICATE_API_TOKEN",
    "REPLICATE_API_URL",
    "REPLICATE_TIMEOUT",
    "REPLICATE_POLL_INTERVAL",
]


@pytest.fixture()
def clean_env(monkeypatch, tmp_path):
    """Run in an empty directory with no REPLICATE_* variables set.

    Each variable is set before being deleted so monkeypatch restores
    whatever load_dotenv may write during the test.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "placeholder")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture()
def session():
    return mock.create_autospec(requests.Session, instance=True)


@pytest.fixture()
def config():
    return Config(api_token="r8_test_token", base_url=BASE_URL, poll_interval=0.5)


@pytest.fixture()
def client(config, session):
    return Replicate(config, session=session)


@pytest.fixture()
def sleeps():
    """Pauses requested by the poll loop; pass ``sleeps.append`` as ``sleep``."""
    return []
