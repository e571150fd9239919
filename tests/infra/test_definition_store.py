"""Tests for reading and writing agent definition files."""

from pathlib import Path

import pytest

from agent_studio.domain import AgentConfig, ResponseStyle, ToolDraft
from agent_studio.domain.exceptions import DefinitionFileError
from agent_studio.infra.definition_store import DefinitionStore


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    """Writes a definition and reads back the same values."""
    config = AgentConfig(
        name="Atlas",
        tones=["Calm"],
        response_style=ResponseStyle.IMMERSIVE,
        guardrails=["Flag uncertainty"],
    )
    tool = config.add_tool(ToolDraft(name="Search", description="Look things up"))
    store = DefinitionStore(tmp_path / "agents" / "atlas.agent.json")

    store.save(config)
    loaded = store.load()

    assert store.exists()
    assert loaded == config
    assert tool is not None
    assert loaded.tools[0].id == tool.id


def test_load_missing_file(tmp_path: Path) -> None:
    """Raises a definition error when the file is absent."""
    store = DefinitionStore(tmp_path / "missing.agent.json")

    assert not store.exists()
    with pytest.raises(DefinitionFileError, match="not found"):
        store.load()


def test_load_invalid_json(tmp_path: Path) -> None:
    """Raises a definition error for malformed JSON."""
    path = tmp_path / "broken.agent.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(DefinitionFileError, match="Could not read"):
        DefinitionStore(path).load()


def test_load_rejects_duplicate_labels(tmp_path: Path) -> None:
    """Refuses definitions that break the duplicate-free invariant."""
    path = tmp_path / "dupes.agent.json"
    path.write_text('{"capabilities": ["A", "A"]}', encoding="utf-8")

    with pytest.raises(DefinitionFileError, match="invalid"):
        DefinitionStore(path).load()


def test_load_rejects_unknown_style(tmp_path: Path) -> None:
    """Refuses response styles outside the enumeration."""
    path = tmp_path / "style.agent.json"
    path.write_text('{"response_style": "verbose"}', encoding="utf-8")

    with pytest.raises(DefinitionFileError):
        DefinitionStore(path).load()
