"""Renders agent definitions into system prompt text."""

import logging
from typing import Callable, Dict, List, Optional, Sequence

from langchain_core.messages import BaseMessage, SystemMessage

from agent_studio.domain import AgentConfig, ResponseStyle

logger = logging.getLogger(__name__)

MISSION_HEADING = "Mission:"
AUDIENCE_HEADING = "Primary audience:"
TONE_HEADING = "Voice & tone:"
RESPONSE_STYLE_HEADING = "Response style:"
CAPABILITIES_HEADING = "Signature capabilities:"
TOOLS_HEADING = "Tool integrations:"
PROTOCOLS_HEADING = "Execution protocols:"
GUARDRAILS_HEADING = "Guardrails:"
HANDOFF_HEADING = "Human escalation:"
PROMISE_HEADING = "Persona promise:"
KICKOFF_HEADING = "Conversation kickoff:"

RESPONSE_STYLE_DIRECTIVES: Dict[ResponseStyle, str] = {
    ResponseStyle.SUCCINCT: (
        "Keep replies short and razor-sharp. Lead with the answer and drop "
        "any preamble."
    ),
    ResponseStyle.BALANCED: (
        "Give a direct answer first, then the structured rationale that "
        "supports it."
    ),
    ResponseStyle.IMMERSIVE: (
        "Offer narrative deep dives that explore context, trade-offs, and "
        "next steps in full."
    ),
}


def join_naturally(items: Sequence[str]) -> str:
    """
    Joins labels as prose, e.g. ``a, b, and c``.

    Args:
        items: The labels to join, in order.

    Returns:
        The joined phrase, or an empty string for no items.
    """
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def _numbered(items: Sequence[str]) -> str:
    return "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))


def _bulleted(items: Sequence[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


class PromptCompiler:
    """
    Builds the system prompt for an agent definition.

    Sections appear in a fixed order and are left out entirely when the
    data behind them is empty.

    Args:
        config: The agent definition to render.
    """

    def __init__(self, config: AgentConfig) -> None:
        self.config = config

    def _identity_section(self) -> Optional[str]:
        lines = []
        name = self.config.name.strip()
        tagline = self.config.tagline.strip()
        if name:
            lines.append(f"You are {name}.")
        if tagline:
            lines.append(f"Positioning: {tagline}")
        return "\n".join(lines) or None

    def _mission_section(self) -> Optional[str]:
        mission = self.config.mission.strip()
        return f"{MISSION_HEADING} {mission}" if mission else None

    def _audience_section(self) -> Optional[str]:
        audience = self.config.audience.strip()
        return f"{AUDIENCE_HEADING} {audience}" if audience else None

    def _voice_section(self) -> Optional[str]:
        lines = []
        if self.config.tones:
            lines.append(f"{TONE_HEADING} {join_naturally(self.config.tones)}.")
        directive = RESPONSE_STYLE_DIRECTIVES[self.config.response_style]
        lines.append(f"{RESPONSE_STYLE_HEADING} {directive}")
        return "\n".join(lines)

    def _capabilities_section(self) -> Optional[str]:
        if not self.config.capabilities:
            return None
        return f"{CAPABILITIES_HEADING}\n{_numbered(self.config.capabilities)}"

    def _tools_section(self) -> Optional[str]:
        if not self.config.tools:
            return None
        lines = [
            f"- {tool.name} ({tool.mode.value} access): {tool.description}"
            for tool in self.config.tools
        ]
        return f"{TOOLS_HEADING}\n" + "\n".join(lines)

    def _protocols_section(self) -> Optional[str]:
        if not self.config.protocols:
            return None
        return f"{PROTOCOLS_HEADING}\n{_numbered(self.config.protocols)}"

    def _guardrails_section(self) -> Optional[str]:
        if not self.config.guardrails:
            return None
        return f"{GUARDRAILS_HEADING}\n{_bulleted(self.config.guardrails)}"

    def _handoff_section(self) -> Optional[str]:
        handoff = self.config.handoff.strip()
        return f"{HANDOFF_HEADING} {handoff}" if handoff else None

    def _promise_section(self) -> Optional[str]:
        promise = self.config.promise.strip()
        return f"{PROMISE_HEADING} {promise}" if promise else None

    def _kickoff_section(self) -> Optional[str]:
        kickoff = self.config.kickoff.strip()
        return f"{KICKOFF_HEADING} {kickoff}" if kickoff else None

    def _sections(self) -> List[Callable[[], Optional[str]]]:
        return [
            self._identity_section,
            self._mission_section,
            self._audience_section,
            self._voice_section,
            self._capabilities_section,
            self._tools_section,
            self._protocols_section,
            self._guardrails_section,
            self._handoff_section,
            self._promise_section,
            self._kickoff_section,
        ]

    def build_system_prompt(self) -> str:
        """
        Builds the system prompt text from the agent definition.

        Returns:
            The rendered sections separated by blank lines.
        """
        rendered = [section() for section in self._sections()]
        prompt = "\n\n".join(text for text in rendered if text)
        logger.debug("Compiled prompt with %d characters.", len(prompt))
        return prompt

    def build_messages(self, messages: List[BaseMessage]) -> List[BaseMessage]:
        """
        Prepends the compiled system prompt to a conversation.

        Args:
            messages: Existing conversation messages.

        Returns:
            The ordered list of messages for LLM invocation.
        """
        return [SystemMessage(content=self.build_system_prompt())] + messages


def compile_prompt(config: AgentConfig) -> str:
    """
    Renders an agent definition into natural-language instructions.

    Args:
        config: The agent definition to render.

    Returns:
        The system prompt text.
    """
    return PromptCompiler(config).build_system_prompt()
