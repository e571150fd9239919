from pydantic import BaseModel, Field

from agent_studio.domain import AgentConfig

VOICE_PLACEHOLDER = "Customise"


class StatusSummary(BaseModel):
    """
    At-a-glance readout of how complete an agent definition is.
    """

    voice: str = Field(..., description="Tones joined for display.")
    capabilities_mapped: int = Field(..., description="Number of capabilities.")
    tools_connected: int = Field(..., description="Number of attached tools.")


def summarize(config: AgentConfig) -> StatusSummary:
    """
    Builds the status readout for an agent definition.

    Args:
        config: The agent definition to summarize.

    Returns:
        The status summary.
    """
    return StatusSummary(
        voice=" · ".join(config.tones) or VOICE_PLACEHOLDER,
        capabilities_mapped=len(config.capabilities),
        tools_connected=len(config.tools),
    )
