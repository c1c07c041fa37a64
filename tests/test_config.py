"""Tests for configuration loading, gateway wiring and the command line."""
import json

import pytest

from gateway.completion_gateway import CompletionGateway
from llm_providers.openai import OpenAIProvider
from main import CONFIG_SCHEMA, create_gateway, load_config, main, resolve_api_key


def test_api_key_priority():
    environ = {"API_KEY": "generic", "OPENAI_KEY": "secondary", "OPENAI_API_KEY": "primary"}
    assert resolve_api_key(environ) == "primary"
    assert resolve_api_key({"API_KEY": "generic", "OPENAI_KEY": "secondary"}) == "secondary"
    assert resolve_api_key({"API_KEY": "generic"}) == "generic"


def test_blank_api_key_is_skipped():
    assert resolve_api_key({"OPENAI_API_KEY": "  ", "API_KEY": "generic"}) == "generic"
    assert resolve_api_key({}) is None


def test_missing_config_file_uses_defaults(tmp_path):
    config = load_config(str(tmp_path / "missing.ini"), environ={})
    assert config["api_key"] is None
    assert config["config_file"] is None
    assert config["completion"] == {name: schema["default"] for name, schema in CONFIG_SCHEMA.items()}


def test_config_file_overrides(tmp_path):
    path = tmp_path / "config.ini"
    path.write_text("[COMPLETION]\nmodel = gpt-4.1\ntemperature = 0.5\nmax_retries = 2\n")
    config = load_config(str(path), environ={"OPENAI_KEY": "sk-file"})
    completion = config["completion"]
    assert completion["model"] == "gpt-4.1"
    assert completion["temperature"] == 0.5
    assert completion["max_retries"] == 2
    assert completion["max_tokens"] == 2000
    assert config["api_key"] == "sk-file"


@pytest.mark.parametrize("line", ["temperature = hot", "temperature = 3.5", "max_tokens = 0"])
def test_invalid_config_values_are_rejected(tmp_path, line):
    path = tmp_path / "config.ini"
    path.write_text(f"[COMPLETION]\n{line}\n")
    with pytest.raises(ValueError, match="COMPLETION"):
        load_config(str(path), environ={})


def test_create_gateway_from_config(tmp_path):
    config = load_config(str(tmp_path / "missing.ini"), environ={"OPENAI_API_KEY": "sk-test"})
    gateway = create_gateway(config)
    assert isinstance(gateway, CompletionGateway)
    assert isinstance(gateway.provider, OpenAIProvider)
    assert gateway.provider.has_credentials
    assert gateway.provider.max_retries == 0
    assert gateway.temperature == 0.3
    assert gateway.max_tokens == 2000


def test_cli_analyze(capsys):
    assert main(["analyze", "Prove this mathematical theorem using formal logic"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["recommendedModel"] == "o3"
    assert data["taskComplexity"] == "complex"


def test_cli_build_prints_instructions(capsys):
    code = main(["build", "--model", "gpt-4o", "--task-type", "email-writing", "--tone", "friendly",
                 "--custom-prompt", "Write to my landlord"])
    out = capsys.readouterr().out
    assert code == 0
    assert "=== System instruction ===" in out
    assert 'Original prompt: "Write to my landlord"' in out


def test_cli_build_reports_invalid_input(capsys):
    code = main(["build", "--model", "gpt-4o", "--task-type", "other", "--tone", "friendly"])
    assert code == 2
    assert "customPrompt" in capsys.readouterr().err
