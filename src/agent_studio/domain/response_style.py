"""Response cadence options for agent definitions."""

from enum import Enum


class ResponseStyle(str, Enum):
    """
    Enumerates how verbose the agent's replies should be.
    """

    SUCCINCT = "succinct"
    BALANCED = "balanced"
    IMMERSIVE = "immersive"
