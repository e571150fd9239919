import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from agent_studio.cli.main import app
from agent_studio.config import StudioConfig
from agent_studio.domain.presets import TOOL_TEMPLATES

runner = CliRunner()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    """Runs the CLI inside an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _definition(workspace: Path, agent: str = "default") -> dict:
    path = workspace / ".agent_studio" / "agents" / f"{agent}.agent.json"
    return json.loads(path.read_text(encoding="utf-8"))


def test_init_creates_definition(workspace: Path) -> None:
    result = runner.invoke(app, ["init", "--name", "Atlas"])

    assert result.exit_code == 0
    assert "Initialized agent definition" in result.stdout
    payload = _definition(workspace)
    assert payload["name"] == "Atlas"
    assert payload["response_style"] == "balanced"


def test_init_already_exists(workspace: Path) -> None:
    runner.invoke(app, ["init", "--name", "Atlas"])

    result = runner.invoke(app, ["init", "--name", "Other"])

    assert result.exit_code == 0
    assert "Definition already exists" in result.stdout
    assert _definition(workspace)["name"] == "Atlas"


def test_init_force_overwrites(workspace: Path) -> None:
    runner.invoke(app, ["init", "--name", "Atlas"])

    result = runner.invoke(app, ["init", "--name", "Other", "--force"])

    assert result.exit_code == 0
    assert _definition(workspace)["name"] == "Other"


@patch("agent_studio.cli.main.ConfigProvider")
def test_init_uses_configured_response_style(mock_config_provider, tmp_path: Path):
    mock_config_provider.return_value.load.return_value = StudioConfig(
        studio_dir=tmp_path / ".agent_studio",
        default_response_style="succinct",
    )

    result = runner.invoke(app, ["init", "--agent", "terse"])

    assert result.exit_code == 0
    assert _definition(tmp_path, "terse")["response_style"] == "succinct"


def test_commands_require_definition(workspace: Path) -> None:
    result = runner.invoke(app, ["prompt"])

    assert result.exit_code == 1
    assert "not found" in result.stdout


def test_add_and_toggle_update_definition(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    runner.invoke(app, ["add", "capabilities", "Research synthesis"])
    duplicate = runner.invoke(app, ["add", "capabilities", "Research synthesis"])
    runner.invoke(app, ["toggle", "guardrails", "Flag uncertainty"])

    assert duplicate.exit_code == 0
    assert "Nothing added" in duplicate.stdout
    payload = _definition(workspace)
    assert payload["capabilities"] == ["Research synthesis"]
    assert payload["guardrails"] == ["Flag uncertainty"]

    runner.invoke(app, ["toggle", "guardrails", "Flag uncertainty"])

    assert _definition(workspace)["guardrails"] == []


def test_toggle_ignores_blank_label(workspace: Path) -> None:
    runner.invoke(app, ["init", "--name", "Atlas"])

    result = runner.invoke(app, ["toggle", "capabilities", "   "])
    prompt = runner.invoke(app, ["prompt"])

    assert result.exit_code == 0
    assert "Nothing toggled in capabilities" in result.stdout
    assert _definition(workspace)["capabilities"] == []
    assert "Signature capabilities:" not in prompt.stdout


def test_toggle_trims_label(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    runner.invoke(app, ["toggle", "tones", "  Calm  "])

    assert _definition(workspace)["tones"] == ["Calm"]


def test_add_rejects_unknown_field(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    result = runner.invoke(app, ["add", "tools", "Search"])

    assert result.exit_code != 0


def test_set_fields(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    runner.invoke(app, ["set", "mission", "Ship faster."])
    runner.invoke(app, ["set", "response_style", "immersive"])

    payload = _definition(workspace)
    assert payload["mission"] == "Ship faster."
    assert payload["response_style"] == "immersive"


def test_set_rejects_invalid_assignment(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    bad_field = runner.invoke(app, ["set", "tools", "x"])
    bad_style = runner.invoke(app, ["set", "response_style", "verbose"])

    assert bad_field.exit_code == 1
    assert bad_style.exit_code == 1
    assert "Unknown response style" in bad_style.stdout


def test_tool_commands(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    added = runner.invoke(
        app, ["add-tool", "Search", "Look things up", "--mode", "write"]
    )
    runner.invoke(app, ["use-template", TOOL_TEMPLATES[0].name])
    again = runner.invoke(app, ["use-template", TOOL_TEMPLATES[0].name])

    assert added.exit_code == 0
    assert "already attached" in again.stdout
    tools = _definition(workspace)["tools"]
    assert [tool["name"] for tool in tools] == ["Search", TOOL_TEMPLATES[0].name]
    assert tools[0]["mode"] == "write"

    removed = runner.invoke(app, ["remove-tool", tools[0]["id"]])

    assert removed.exit_code == 0
    assert [tool["name"] for tool in _definition(workspace)["tools"]] == [
        TOOL_TEMPLATES[0].name
    ]


def test_add_tool_ignores_blank_description(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    result = runner.invoke(app, ["add-tool", "Search", "  "])

    assert result.exit_code == 0
    assert "needs both a name and a description" in result.stdout
    assert _definition(workspace)["tools"] == []


def test_use_template_unknown(workspace: Path) -> None:
    runner.invoke(app, ["init"])

    result = runner.invoke(app, ["use-template", "Teleporter"])

    assert result.exit_code == 1
    assert "No tool template" in result.stdout


def test_prompt_and_manifest_output(workspace: Path) -> None:
    runner.invoke(app, ["init", "--name", "Atlas"])
    runner.invoke(app, ["add", "capabilities", "Research synthesis"])

    prompt = runner.invoke(app, ["prompt"])
    manifest = runner.invoke(app, ["manifest"])

    assert prompt.exit_code == 0
    assert "You are Atlas." in prompt.stdout
    assert "1. Research synthesis" in prompt.stdout
    payload = json.loads(manifest.stdout)
    assert payload["identity"]["name"] == "Atlas"
    assert payload["capabilities"] == ["Research synthesis"]


def test_manifest_export(workspace: Path) -> None:
    runner.invoke(app, ["init", "--name", "Atlas"])

    result = runner.invoke(app, ["manifest", "--output", "out/manifest.json"])

    assert result.exit_code == 0
    exported = (workspace / "out" / "manifest.json").read_text(encoding="utf-8")
    assert json.loads(exported)["identity"]["name"] == "Atlas"


def test_status_and_presets(workspace: Path) -> None:
    runner.invoke(app, ["init"])
    runner.invoke(app, ["toggle", "tones", "Calm"])

    status = runner.invoke(app, ["status"])
    presets = runner.invoke(app, ["presets"])

    assert status.exit_code == 0
    assert "Calm" in status.stdout
    assert presets.exit_code == 0
    assert "Tool templates" in presets.stdout


def test_schema_command() -> None:
    result = runner.invoke(app, ["schema"])

    assert result.exit_code == 0
    assert "identity" in json.loads(result.stdout)["properties"]


def test_config_option_reads_settings_file(workspace: Path) -> None:
    settings = workspace / "studio.json"
    settings.write_text(
        '{"manifest_indent": 4, "default_response_style": "succinct"}',
        encoding="utf-8",
    )

    runner.invoke(app, ["--config", str(settings), "init", "--name", "Atlas"])
    result = runner.invoke(app, ["-c", str(settings), "manifest"])

    assert result.exit_code == 0
    assert _definition(workspace)["response_style"] == "succinct"
    assert '\n    "schema_version": "1.0"' in result.stdout


def test_config_option_missing_file(workspace: Path) -> None:
    result = runner.invoke(app, ["--config", "nope.json", "presets"])

    assert result.exit_code == 1
    assert "Settings file not found" in result.stdout


def test_invalid_settings_reported_as_error(workspace: Path, monkeypatch) -> None:
    monkeypatch.setenv("AGENT_STUDIO_LOG_LEVEL", "bogus")

    result = runner.invoke(app, ["presets"])

    assert result.exit_code == 1
    assert "Error:" in result.stdout
    assert "Invalid settings" in result.stdout
    assert not isinstance(result.exception, ValueError)
