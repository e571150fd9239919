import logging
from typing import List, Optional, Union
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from agent_studio.domain.response_style import ResponseStyle
from agent_studio.domain.taxonomy import TaxonomyField, ensure_unique_labels
from agent_studio.domain.tool import Tool, ToolDraft, ToolTemplate, new_tool_id

logger = logging.getLogger(__name__)

FREE_TEXT_FIELDS = (
    "name",
    "tagline",
    "mission",
    "audience",
    "kickoff",
    "handoff",
    "promise",
)


class AgentConfig(BaseModel):
    """
    The structured description of one conversational agent.

    Taxonomy lists are insertion ordered and duplicate free. The list
    operations below replace the whole attribute so assignment validation
    re-checks every invariant.
    """

    name: str = Field(default="", description="Display name of the agent.")
    tagline: str = Field(default="", description="Positioning strapline.")
    mission: str = Field(
        default="", description="What the agent must achieve every session."
    )
    audience: str = Field(default="", description="Who the agent serves.")
    tones: List[str] = Field(
        default_factory=list,
        description="Voice and tone labels; earlier entries lead the prose.",
    )
    response_style: ResponseStyle = Field(
        default=ResponseStyle.BALANCED, description="Response cadence."
    )
    kickoff: str = Field(default="", description="How conversations open.")
    capabilities: List[str] = Field(
        default_factory=list, description="Signature capabilities."
    )
    tools: List[Tool] = Field(default_factory=list, description="Tool integrations.")
    protocols: List[str] = Field(
        default_factory=list, description="Execution protocols."
    )
    guardrails: List[str] = Field(
        default_factory=list, description="Trust boundaries the agent never crosses."
    )
    handoff: str = Field(default="", description="Human escalation protocol.")
    promise: str = Field(default="", description="Persona promise to the user.")

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @field_validator("tones", "capabilities", "guardrails", "protocols")
    @classmethod
    def _validate_unique_labels(cls, values: List[str]) -> List[str]:
        return ensure_unique_labels(values)

    @model_validator(mode="after")
    def _validate_unique_tool_ids(self) -> "AgentConfig":
        """
        Validates that every tool handle is unique.

        Returns:
            The validated configuration.
        """
        seen = set()
        for tool in self.tools:
            if tool.id in seen:
                raise ValueError(f"Duplicate tool id: {tool.id!r}.")
            seen.add(tool.id)
        return self

    @classmethod
    def create_default(
        cls, response_style: ResponseStyle = ResponseStyle.BALANCED
    ) -> "AgentConfig":
        """
        Creates an empty agent definition.

        Args:
            response_style: The initial response cadence.

        Returns:
            A new AgentConfig with empty text and lists.
        """
        return cls(response_style=response_style)

    def _labels(self, field: Union[TaxonomyField, str]) -> List[str]:
        return getattr(self, TaxonomyField(field).value)

    def _fresh_tool_id(self) -> str:
        taken = {tool.id for tool in self.tools}
        tool_id = new_tool_id()
        while tool_id in taken:
            logger.debug("Tool id %s is taken; generating another.", tool_id)
            tool_id = uuid4().hex
        return tool_id

    def has(self, field: Union[TaxonomyField, str], value: str) -> bool:
        """Returns whether a taxonomy list contains the exact value."""

        return value in self._labels(field)

    def toggle(self, field: Union[TaxonomyField, str], value: str) -> bool:
        """
        Flips membership of a trimmed label in a taxonomy list.

        Blank input leaves the list unchanged.

        Args:
            field: The taxonomy list to update.
            value: The label to add or remove.

        Returns:
            True if the label is present after the call.
        """
        key = TaxonomyField(field).value
        trimmed = value.strip()
        if not trimmed:
            logger.debug("Ignoring blank %s toggle.", key)
            return False
        current = self._labels(key)
        if trimmed in current:
            setattr(self, key, [item for item in current if item != trimmed])
            return False
        setattr(self, key, [*current, trimmed])
        return True

    def add(self, field: Union[TaxonomyField, str], value: str) -> bool:
        """
        Appends a trimmed label to a taxonomy list.

        Blank input and exact duplicates are ignored.

        Args:
            field: The taxonomy list to update.
            value: The raw user input.

        Returns:
            True if the list changed.
        """
        key = TaxonomyField(field).value
        trimmed = value.strip()
        if not trimmed:
            logger.debug("Ignoring blank %s entry.", key)
            return False
        current = self._labels(key)
        if trimmed in current:
            logger.debug("Ignoring duplicate %s entry: %s", key, trimmed)
            return False
        setattr(self, key, [*current, trimmed])
        return True

    def add_tool(self, draft: ToolDraft) -> Optional[Tool]:
        """
        Accepts a tool draft when both name and description are filled in.

        Args:
            draft: The user-entered tool fields.

        Returns:
            The created tool, or None when the draft was ignored.
        """
        name = draft.name.strip()
        description = draft.description.strip()
        if not name or not description:
            logger.debug("Ignoring incomplete tool draft.")
            return None
        tool = Tool(
            id=self._fresh_tool_id(),
            name=name,
            description=description,
            mode=draft.mode,
        )
        self.tools = [*self.tools, tool]
        return tool

    def add_tool_template(self, template: ToolTemplate) -> Optional[Tool]:
        """
        Attaches a catalog tool unless one with the same name is present.

        Args:
            template: The catalog template to attach.

        Returns:
            The created tool, or None when the name was already taken.
        """
        if any(tool.name == template.name for tool in self.tools):
            logger.debug("Tool template already attached: %s", template.name)
            return None
        tool = Tool.from_template(template, tool_id=self._fresh_tool_id())
        self.tools = [*self.tools, tool]
        return tool

    def remove_tool(self, tool_id: str) -> bool:
        """
        Removes the tool with the given handle.

        Args:
            tool_id: The tool handle to remove.

        Returns:
            True if a tool was removed.
        """
        remaining = [tool for tool in self.tools if tool.id != tool_id]
        if len(remaining) == len(self.tools):
            return False
        self.tools = remaining
        return True
