from enum import Enum
from typing import Callable, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


class ToolMode(str, Enum):
    """
    Enumerates the access level a tool grants the agent.
    """

    READ = "read"
    WRITE = "write"
    EXECUTE = "execute"


_TOOL_ID_FACTORY: Callable[[], str] = lambda: uuid4().hex


def set_tool_id_factory(factory: Callable[[], str]) -> None:
    """Override the tool id factory for deterministic tests.

    Args:
        factory: Callable that returns a unique tool id.
    """

    global _TOOL_ID_FACTORY
    _TOOL_ID_FACTORY = factory


def reset_tool_id_factory() -> None:
    """Reset the tool id factory to the default UUID generator."""

    global _TOOL_ID_FACTORY
    _TOOL_ID_FACTORY = lambda: uuid4().hex


def new_tool_id() -> str:
    """Returns a fresh opaque tool handle."""

    return _TOOL_ID_FACTORY()


class ToolTemplate(BaseModel):
    """
    A ready-made tool integration offered by the preset catalog.
    """

    name: str = Field(..., description="Display name of the tool.")
    description: str = Field(..., description="What the tool unlocks for the agent.")
    mode: ToolMode = Field(..., description="Access level granted by the tool.")

    model_config = ConfigDict(frozen=True, extra="forbid")


class ToolDraft(BaseModel):
    """
    User-entered tool input that has not been accepted yet.
    """

    name: str = ""
    description: str = ""
    mode: ToolMode = ToolMode.READ


class Tool(BaseModel):
    """
    A tool integration attached to an agent definition.

    Args:
        id: Opaque handle used to remove the tool later.
        name: Display name of the tool.
        description: What the tool unlocks for the agent.
        mode: Access level granted by the tool.
    """

    id: str = Field(
        default_factory=new_tool_id,
        description="Session-scoped handle; not part of the manifest.",
    )
    name: str = Field(..., description="Display name of the tool.")
    description: str = Field(..., description="What the tool unlocks for the agent.")
    mode: ToolMode = Field(default=ToolMode.READ, description="Access level.")

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_template(
        cls, template: ToolTemplate, tool_id: Optional[str] = None
    ) -> "Tool":
        """
        Builds a tool from a catalog template.

        Args:
            template: The catalog template to copy.
            tool_id: Handle to use instead of a freshly generated one.

        Returns:
            A new Tool instance.
        """
        return cls(
            id=tool_id or new_tool_id(),
            name=template.name,
            description=template.description,
            mode=template.mode,
        )
