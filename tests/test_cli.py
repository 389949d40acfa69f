from __future__ import annotations

import json

import pytest
import uvicorn
from typer.testing import CliRunner

import prompt_schema.cli.commands.serve as serve_module
import prompt_schema.core.config as config_module
from prompt_schema import __version__
from prompt_schema.cli.main import app

runner = CliRunner()


def _write(tmp_path, name: str, content: str):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return str(path)


def test_validate_chat(tmp_path, basic_chat_json):
    source = _write(tmp_path, "chat.json", basic_chat_json)

    result = runner.invoke(app, ["validate", "chat", source])

    assert result.exit_code == 0
    assert "valid chat" in result.stdout


def test_validate_chat_json_output(tmp_path, function_chat_json):
    source = _write(tmp_path, "chat.json", function_chat_json)

    result = runner.invoke(app, ["validate", "chat", source, "--json"])

    assert result.exit_code == 0
    document = json.loads(result.stdout)
    assert document["engine"] == "chat-bison"
    assert len(document["messages"]) == 3


def test_validate_completion_from_stdin(completion_json):
    result = runner.invoke(app, ["validate", "completion", "-"], input=completion_json)

    assert result.exit_code == 0
    assert "valid completion" in result.stdout


def test_validate_invalid_document(tmp_path):
    source = _write(tmp_path, "chat.json", "{}")

    result = runner.invoke(app, ["validate", "chat", source])

    assert result.exit_code == 1


def test_validate_malformed_document(tmp_path):
    source = _write(tmp_path, "completion.json", "!@$!$#")

    result = runner.invoke(app, ["validate", "completion", source])

    assert result.exit_code == 1


def test_no_strict_accepts_empty_messages(tmp_path):
    source = _write(tmp_path, "chat.json", '{"version": "0.2", "engine": "chat-bison", "messages": []}')

    assert runner.invoke(app, ["validate", "chat", source]).exit_code == 1
    assert runner.invoke(app, ["validate", "chat", source, "--no-strict"]).exit_code == 0


def test_validate_missing_file(tmp_path):
    result = runner.invoke(app, ["validate", "chat", str(tmp_path / "nope.json")])

    assert result.exit_code == 2


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_validate_json_output_rejects_unpaired_surrogate(tmp_path):
    source = _write(
        tmp_path,
        "chat.json",
        r'{"version": "0.2", "engine": "e", "messages": [{"role": "user", "content": "\ud800"}]}',
    )

    result = runner.invoke(app, ["validate", "chat", source, "--json"])

    assert result.exit_code == 1
    assert result.exception is None or isinstance(result.exception, SystemExit)


# ============================================================
# serve
# ============================================================

@pytest.fixture()
def serve_calls(tmp_path, monkeypatch):
    calls: dict = {}

    def fake_run(app, host, port, log_level):
        calls.update(app=app, host=host, port=port, log_level=log_level)

    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_PATHS", (tmp_path / "missing.yaml",))
    monkeypatch.setattr(uvicorn, "run", fake_run)
    monkeypatch.setattr(serve_module, "setup_logging", lambda level: calls.setdefault("logging", level))
    return calls


def test_serve_applies_overrides(serve_calls):
    result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9001", "--log-level", "debug"])

    assert result.exit_code == 0
    assert serve_calls["host"] == "0.0.0.0"
    assert serve_calls["port"] == 9001
    assert serve_calls["log_level"] == "debug"
    assert serve_calls["logging"] == "DEBUG"
    assert serve_calls["app"].state.config.server.port == 9001


def test_serve_reads_config_file(serve_calls, tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("server:\n  port: 9100\nvalidation:\n  strict: false\n", encoding="utf-8")

    result = runner.invoke(app, ["serve", "--config", str(path)])

    assert result.exit_code == 0
    assert serve_calls["port"] == 9100
    assert serve_calls["host"] == "127.0.0.1"
    assert serve_calls["app"].state.config.validation.strict is False


@pytest.mark.parametrize("args", [
    ["serve", "--log-level", "loud"],
    ["serve", "--port", "0"],
])
def test_serve_rejects_invalid_overrides(serve_calls, args):
    result = runner.invoke(app, args)

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "host" not in serve_calls


def test_serve_missing_config_file(serve_calls, tmp_path):
    result = runner.invoke(app, ["serve", "--config", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "host" not in serve_calls
