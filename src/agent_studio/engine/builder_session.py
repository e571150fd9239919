"""In-memory owner of one agent definition and its derived artifacts."""

import logging
from typing import Optional, Union

from agent_studio.domain import (
    FREE_TEXT_FIELDS,
    AgentConfig,
    AgentManifest,
    ResponseStyle,
    TaxonomyField,
    Tool,
    ToolDraft,
)
from agent_studio.domain.exceptions import (
    InvalidAssignmentError,
    UnknownTemplateError,
)
from agent_studio.domain.presets import find_tool_template
from agent_studio.engine.manifest_compiler import (
    DEFAULT_MANIFEST_INDENT,
    compile_manifest,
    render_manifest,
)
from agent_studio.engine.prompt_compiler import compile_prompt
from agent_studio.engine.status_summary import StatusSummary, summarize

logger = logging.getLogger(__name__)


class BuilderSession:
    """
    Holds the single mutable agent definition for a user session.

    Derived artifacts are recompiled from the current definition on every
    access; nothing is cached between mutations.

    Args:
        config: The definition to own. A default definition is created when
            omitted.
        manifest_indent: Indentation used for manifest JSON.
    """

    def __init__(
        self,
        config: Optional[AgentConfig] = None,
        manifest_indent: int = DEFAULT_MANIFEST_INDENT,
    ) -> None:
        self.config = config if config is not None else AgentConfig.create_default()
        self.manifest_indent = manifest_indent

    @property
    def prompt(self) -> str:
        """Returns the system prompt for the current definition."""

        return compile_prompt(self.config)

    @property
    def manifest(self) -> AgentManifest:
        """Returns the manifest record for the current definition."""

        return compile_manifest(self.config)

    @property
    def manifest_text(self) -> str:
        """Returns the manifest JSON for the current definition."""

        return render_manifest(self.manifest, indent=self.manifest_indent)

    @property
    def status(self) -> StatusSummary:
        """Returns the status readout for the current definition."""

        return summarize(self.config)

    def assign(self, field: str, value: str) -> None:
        """
        Replaces a free-text field or the response style.

        Args:
            field: The field name.
            value: The new value.
        """
        if field == "response_style":
            try:
                style = ResponseStyle(value)
            except ValueError as exc:
                choices = ", ".join(item.value for item in ResponseStyle)
                raise InvalidAssignmentError(
                    f"Unknown response style '{value}'. Choose one of: {choices}."
                ) from exc
            self.config.response_style = style
        elif field in FREE_TEXT_FIELDS:
            setattr(self.config, field, value)
        else:
            raise InvalidAssignmentError(
                f"Field '{field}' cannot be set directly. Editable fields: "
                f"{', '.join((*FREE_TEXT_FIELDS, 'response_style'))}."
            )
        logger.debug("Assigned %s.", field)

    def add(self, field: Union[TaxonomyField, str], value: str) -> bool:
        """Appends a label to a taxonomy list; see AgentConfig.add."""

        changed = self.config.add(field, value)
        if changed:
            logger.info(
                "Added %s entry: %s", TaxonomyField(field).value, value.strip()
            )
        return changed

    def toggle(self, field: Union[TaxonomyField, str], value: str) -> bool:
        """Flips a label in a taxonomy list; see AgentConfig.toggle."""

        present = self.config.toggle(field, value)
        logger.info(
            "%s %s entry: %s",
            "Enabled" if present else "Disabled",
            TaxonomyField(field).value,
            value,
        )
        return present

    def add_tool(self, draft: ToolDraft) -> Optional[Tool]:
        """Attaches a user-defined tool; see AgentConfig.add_tool."""

        tool = self.config.add_tool(draft)
        if tool is not None:
            logger.info("Added tool %s (%s).", tool.name, tool.id)
        return tool

    def use_template(self, name: str) -> Optional[Tool]:
        """
        Attaches a catalog tool by template name.

        Args:
            name: The catalog template name.

        Returns:
            The created tool, or None when a tool with that name exists.
        """
        template = find_tool_template(name)
        if template is None:
            raise UnknownTemplateError(f"No tool template named '{name}'.")
        tool = self.config.add_tool_template(template)
        if tool is not None:
            logger.info("Attached template tool %s (%s).", tool.name, tool.id)
        return tool

    def remove_tool(self, tool_id: str) -> bool:
        """Detaches a tool by handle; see AgentConfig.remove_tool."""

        removed = self.config.remove_tool(tool_id)
        if removed:
            logger.info("Removed tool %s.", tool_id)
        return removed
