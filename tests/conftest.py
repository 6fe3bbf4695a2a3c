"""
- Provide a fake HTTP session that replays canned responses (no network)
- Provide an ApiClient wired to that fake session
- Provide a scripted stdin replacement for the interactive prompts
"""
import pytest
from typing import List

import requests

from mastermind_client.config import Settings
from mastermind_client.transport import ApiClient

from fakes import BASE_URL, FakeHttp, ScriptedInput


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE_URL)


@pytest.fixture
def http() -> FakeHttp:
    return FakeHttp()


@pytest.fixture
def api(http, settings) -> ApiClient:
    # Same client the app uses, but its HTTP session never touches the network
    return ApiClient(settings.base_url, http=http)


@pytest.fixture
def output() -> List[str]:
    return []


@pytest.fixture
def echo(output):
    return output.append


@pytest.fixture
def connection_error():
    return requests.ConnectionError("Name or service not known")


@pytest.fixture
def scripted_input():
    return ScriptedInput
