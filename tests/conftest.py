from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from prompt_schema.api import create_app
from prompt_schema.core import AppConfig
from tests.samples import BASIC_CHAT, FUNCTION_CHAT, BASIC_COMPLETION


@pytest.fixture()
def basic_chat_json() -> str:
    return json.dumps(BASIC_CHAT)


@pytest.fixture()
def function_chat_json() -> str:
    return json.dumps(FUNCTION_CHAT)


@pytest.fixture()
def completion_json() -> str:
    return json.dumps(BASIC_COMPLETION)


@pytest.fixture()
def make_client():
    clients: list[TestClient] = []

    def _make(**config) -> TestClient:
        client = TestClient(create_app(config=AppConfig(**config)))
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()


@pytest.fixture()
def client(make_client) -> TestClient:
    return make_client()
