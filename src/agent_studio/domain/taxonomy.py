"""Taxonomy list fields and their duplicate-free invariant."""

from enum import Enum
from typing import List


class TaxonomyField(str, Enum):
    """
    Names the ordered, duplicate-free label lists on an agent definition.
    """

    TONES = "tones"
    CAPABILITIES = "capabilities"
    GUARDRAILS = "guardrails"
    PROTOCOLS = "protocols"


def ensure_unique_labels(values: List[str]) -> List[str]:
    """
    Validates that a taxonomy list holds no repeated labels.

    Args:
        values: The candidate list of labels.

    Returns:
        The unchanged list when every label is unique.
    """
    seen = set()
    for value in values:
        if value in seen:
            raise ValueError(f"Duplicate entry in taxonomy list: {value!r}.")
        seen.add(value)
    return values
