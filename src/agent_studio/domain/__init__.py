from agent_studio.domain.agent_config import FREE_TEXT_FIELDS, AgentConfig
from agent_studio.domain.manifest import (
    MANIFEST_SCHEMA_VERSION,
    AgentManifest,
    ManifestBehavior,
    ManifestIdentity,
    ManifestSafety,
    ManifestTool,
)
from agent_studio.domain.response_style import ResponseStyle
from agent_studio.domain.taxonomy import TaxonomyField
from agent_studio.domain.tool import Tool, ToolDraft, ToolMode, ToolTemplate

__all__ = [
    "AgentConfig",
    "AgentManifest",
    "FREE_TEXT_FIELDS",
    "MANIFEST_SCHEMA_VERSION",
    "ManifestBehavior",
    "ManifestIdentity",
    "ManifestSafety",
    "ManifestTool",
    "ResponseStyle",
    "TaxonomyField",
    "Tool",
    "ToolDraft",
    "ToolMode",
    "ToolTemplate",
]
