"""Renders agent definitions into manifest records and manifest JSON."""

import json
import logging
from typing import Any, Dict

from agent_studio.domain import (
    AgentConfig,
    AgentManifest,
    ManifestBehavior,
    ManifestIdentity,
    ManifestSafety,
    ManifestTool,
)

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_INDENT = 2


def compile_manifest(config: AgentConfig) -> AgentManifest:
    """
    Builds the structured manifest for an agent definition.

    Tool handles are left out; they only identify tools inside one session.

    Args:
        config: The agent definition to render.

    Returns:
        A new AgentManifest mirroring the definition's order.
    """
    return AgentManifest(
        identity=ManifestIdentity(
            name=config.name.strip(),
            tagline=config.tagline.strip(),
            mission=config.mission.strip(),
            audience=config.audience.strip(),
        ),
        behavior=ManifestBehavior(
            tones=list(config.tones),
            response_style=config.response_style,
            kickoff=config.kickoff.strip(),
        ),
        capabilities=list(config.capabilities),
        tools=[
            ManifestTool(name=tool.name, description=tool.description, mode=tool.mode)
            for tool in config.tools
        ],
        protocols=list(config.protocols),
        safety=ManifestSafety(
            guardrails=list(config.guardrails),
            handoff=config.handoff.strip(),
            promise=config.promise.strip(),
        ),
    )


def render_manifest(
    manifest: AgentManifest, indent: int = DEFAULT_MANIFEST_INDENT
) -> str:
    """
    Serializes a manifest as pretty-printed JSON.

    Keys follow the declared record order, so repeated calls on the same
    record return identical text.

    Args:
        manifest: The manifest record to serialize.
        indent: Number of spaces per nesting level.

    Returns:
        The manifest JSON text.
    """
    payload = manifest.model_dump(mode="json")
    text = json.dumps(payload, indent=indent, ensure_ascii=False)
    logger.debug("Rendered manifest with %d characters.", len(text))
    return text


def manifest_json_schema() -> Dict[str, Any]:
    """
    Returns the JSON schema describing the manifest record.

    Returns:
        The JSON schema dictionary.
    """
    return AgentManifest.model_json_schema()
