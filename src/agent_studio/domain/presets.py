"""Curated suggestions that seed agent definitions."""

from typing import Dict, Optional, Tuple

from agent_studio.domain.taxonomy import TaxonomyField
from agent_studio.domain.tool import ToolMode, ToolTemplate

TONE_PRESETS: Tuple[str, ...] = (
    "Confident",
    "Empathetic",
    "Analytical",
    "Playful",
    "Direct",
    "Visionary",
    "Calm",
    "Witty",
)

CAPABILITY_SUGGESTIONS: Tuple[str, ...] = (
    "Research synthesis",
    "Strategic planning",
    "Data storytelling",
    "Workflow automation",
    "Customer discovery interviews",
    "Competitive landscape mapping",
    "Executive briefings",
)

PROTOCOL_SUGGESTIONS: Tuple[str, ...] = (
    "Clarify the goal before acting",
    "Cite sources for every factual claim",
    "Summarise decisions and next steps at the end of each reply",
    "Offer two alternatives when confidence is low",
    "Validate assumptions with the user before committing",
    "Break complex tasks into numbered checkpoints",
)

GUARDRAIL_SUGGESTIONS: Tuple[str, ...] = (
    "Never share personal or confidential data",
    "Decline legal, medical, or financial advice",
    "Flag uncertainty instead of guessing",
    "Do not take irreversible actions without confirmation",
    "Refuse to impersonate real people",
    "Keep tone respectful under pressure",
)

TOOL_TEMPLATES: Tuple[ToolTemplate, ...] = (
    ToolTemplate(
        name="Web search",
        description="Look up fresh public information and news.",
        mode=ToolMode.READ,
    ),
    ToolTemplate(
        name="Knowledge base",
        description="Retrieve internal documentation, playbooks, and FAQs.",
        mode=ToolMode.READ,
    ),
    ToolTemplate(
        name="CRM updater",
        description="Create and update account records after conversations.",
        mode=ToolMode.WRITE,
    ),
    ToolTemplate(
        name="Calendar scheduler",
        description="Propose and book meetings on shared calendars.",
        mode=ToolMode.WRITE,
    ),
    ToolTemplate(
        name="Code interpreter",
        description="Run analysis scripts and return charts or tables.",
        mode=ToolMode.EXECUTE,
    ),
)

_SUGGESTIONS: Dict[TaxonomyField, Tuple[str, ...]] = {
    TaxonomyField.TONES: TONE_PRESETS,
    TaxonomyField.CAPABILITIES: CAPABILITY_SUGGESTIONS,
    TaxonomyField.GUARDRAILS: GUARDRAIL_SUGGESTIONS,
    TaxonomyField.PROTOCOLS: PROTOCOL_SUGGESTIONS,
}


def suggestions_for(field: TaxonomyField) -> Tuple[str, ...]:
    """
    Returns the curated suggestions for a taxonomy field.

    Args:
        field: The taxonomy field to look up.

    Returns:
        The immutable tuple of suggested labels.
    """
    return _SUGGESTIONS[TaxonomyField(field)]


def find_tool_template(name: str) -> Optional[ToolTemplate]:
    """
    Finds a catalog tool template by exact name.

    Args:
        name: The template name.

    Returns:
        The matching template or None.
    """
    for template in TOOL_TEMPLATES:
        if template.name == name:
            return template
    return None
