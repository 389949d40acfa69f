from __future__ import annotations

import json
import logging

import pytest

from prompt_schema import __version__
from prompt_schema.api import create_app


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_chat_accepted(client, basic_chat_json):
    response = client.post("/v1/chat", content=basic_chat_json)

    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "chat"
    assert body["request"]["engine"] == "chat-bison"
    assert body["request"]["messages"] == [{"role": "user", "content": "Write a hello world in js"}]
    assert "$schema" not in body["request"]


def test_function_chat_accepted(client, function_chat_json):
    response = client.post("/v1/chat", content=function_chat_json)

    assert response.status_code == 200
    request = response.json()["request"]
    assert request["functions"][0]["parameters"][0]["enums"] == ["Wuhan", "Beijing"]
    assert request["messages"][1]["function_call"]["name"] == "get_weather"


def test_completion_accepted(client, completion_json):
    response = client.post("/v1/completion", content=completion_json)

    assert response.status_code == 200
    assert response.json()["kind"] == "completion"
    assert response.json()["request"]["prompt"] == "I'm hungry and I want to"


def test_malformed_body(client):
    response = client.post("/v1/chat", content="!@$!$#")

    assert response.status_code == 400
    error = response.json()["detail"]["error"]
    assert error["code"] == "MALFORMED_JSON"
    assert error["line"] == 1


def test_missing_field_reports_path(client):
    response = client.post("/v1/completion", content="{}")

    assert response.status_code == 400
    error = response.json()["detail"]["error"]
    assert error["code"] == "MISSING_FIELD"
    assert error["path"] == "version"
    assert error["message"] == "version: missing required field"


def test_nested_type_mismatch_reports_path(client, function_chat_json):
    data = json.loads(function_chat_json)
    data["messages"][1]["function_call"]["name"] = 7

    response = client.post("/v1/chat", content=json.dumps(data))

    assert response.status_code == 400
    error = response.json()["detail"]["error"]
    assert error == {
        "code": "TYPE_MISMATCH",
        "path": "messages[1].function_call.name",
        "expected": "string",
        "actual": "number",
        "message": "messages[1].function_call.name: expected string, got number",
    }


def test_completion_body_is_not_a_chat(client, completion_json):
    response = client.post("/v1/chat", content=completion_json)

    assert response.status_code == 400
    assert response.json()["detail"]["error"]["path"] == "messages"


def test_strict_validation_rejects_empty_messages(client):
    raw = '{"version": "0.2", "engine": "chat-bison", "messages": []}'

    response = client.post("/v1/chat", content=raw)

    assert response.status_code == 400
    assert response.json()["detail"]["error"]["code"] == "EMPTY_MESSAGES"


def test_permissive_mode_accepts_empty_messages(make_client):
    client = make_client(validation={"strict": False})
    raw = '{"version": "0.2", "engine": "chat-bison", "messages": []}'

    response = client.post("/v1/chat", content=raw)

    assert response.status_code == 200
    assert response.json()["request"]["messages"] == []


def test_body_size_limit(make_client, basic_chat_json):
    client = make_client(server={"max_body_bytes": 16})

    response = client.post("/v1/chat", content=basic_chat_json)

    assert response.status_code == 413
    assert response.json()["detail"]["error"]["code"] == "PAYLOAD_TOO_LARGE"


def test_rejections_are_logged(client, caplog):
    with caplog.at_level(logging.WARNING, logger="prompt_schema"):
        client.post("/v1/chat", content="{}")

    assert any("MISSING_FIELD" in record.getMessage() for record in caplog.records)


def test_create_app_with_missing_config(tmp_path):
    with pytest.raises(ValueError):
        create_app(config_path=tmp_path / "missing.yaml")


def test_create_app_from_config_path(tmp_path, basic_chat_json):
    from fastapi.testclient import TestClient

    path = tmp_path / "config.yaml"
    path.write_text("server:\n  max_body_bytes: 8\n", encoding="utf-8")

    with TestClient(create_app(config_path=path)) as client:
        response = client.post("/v1/chat", content=basic_chat_json)

    assert response.status_code == 413


def test_deeply_nested_parameter_value_is_rejected(client):
    value = "leaf"
    for _ in range(300):
        value = [value]
    raw = json.dumps({
        "version": "0.2",
        "engine": "chat-bison",
        "messages": [{"role": "user", "content": "hi"}],
        "parameters": [{"name": "p", "value": value}],
    })

    response = client.post("/v1/chat", content=raw)

    assert response.status_code == 400
    assert response.json()["detail"]["error"]["code"] == "MALFORMED_JSON"


def test_nested_parameter_value_within_limit_is_echoed(client):
    value = "leaf"
    for _ in range(100):
        value = [value]
    raw = json.dumps({
        "version": "0.2",
        "engine": "chat-bison",
        "messages": [{"role": "user", "content": "hi"}],
        "parameters": [{"name": "p", "value": value}],
    })

    response = client.post("/v1/chat", content=raw)

    assert response.status_code == 200
    assert response.json()["request"]["parameters"][0]["value"] == value


def test_unpaired_surrogate_is_rejected(client):
    raw = r'{"version": "0.2", "engine": "e", "messages": [{"role": "user", "content": "\ud800"}]}'

    response = client.post("/v1/chat", content=raw)

    assert response.status_code == 400
    error = response.json()["detail"]["error"]
    assert error["code"] == "TYPE_MISMATCH"
    assert error["path"] == "messages[0].content"
