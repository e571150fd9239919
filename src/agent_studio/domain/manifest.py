"""Manifest record exported for machine consumption.

Field names and their declaration order are the serialized key order, so
renaming or reordering a field is a breaking change for consumers.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from agent_studio.domain.response_style import ResponseStyle
from agent_studio.domain.tool import ToolMode

MANIFEST_SCHEMA_VERSION = "1.0"


class ManifestIdentity(BaseModel):
    """Who the agent is and whom it serves."""

    name: str = ""
    tagline: str = ""
    mission: str = ""
    audience: str = ""

    model_config = ConfigDict(extra="forbid")


class ManifestBehavior(BaseModel):
    """How the agent sounds and opens a conversation."""

    tones: List[str] = Field(default_factory=list)
    response_style: ResponseStyle = ResponseStyle.BALANCED
    kickoff: str = ""

    model_config = ConfigDict(extra="forbid")


class ManifestTool(BaseModel):
    """A tool entry without its session handle."""

    name: str
    description: str
    mode: ToolMode

    model_config = ConfigDict(extra="forbid")


class ManifestSafety(BaseModel):
    """Guardrails and the escalation path to a human."""

    guardrails: List[str] = Field(default_factory=list)
    handoff: str = ""
    promise: str = ""

    model_config = ConfigDict(extra="forbid")


class AgentManifest(BaseModel):
    """
    Structured, versioned description of an agent definition.
    """

    schema_version: str = Field(
        default=MANIFEST_SCHEMA_VERSION,
        description="Manifest format version for compatibility checks.",
    )
    identity: ManifestIdentity = Field(default_factory=ManifestIdentity)
    behavior: ManifestBehavior = Field(default_factory=ManifestBehavior)
    capabilities: List[str] = Field(default_factory=list)
    tools: List[ManifestTool] = Field(default_factory=list)
    protocols: List[str] = Field(default_factory=list)
    safety: ManifestSafety = Field(default_factory=ManifestSafety)

    model_config = ConfigDict(extra="forbid")
