"""JSON files that carry an agent definition between CLI invocations."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from agent_studio.domain import AgentConfig
from agent_studio.domain.exceptions import DefinitionFileError

logger = logging.getLogger(__name__)


class DefinitionStore:
    """
    Reads and writes one agent definition file.

    Args:
        path: Path to the JSON definition file.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        """Returns the definition file path."""

        return self._path

    def exists(self) -> bool:
        """Returns whether the definition file is present."""

        return self._path.exists()

    def load(self) -> AgentConfig:
        """
        Loads and validates the agent definition.

        Returns:
            The parsed AgentConfig.
        """
        if not self._path.exists():
            raise DefinitionFileError(
                f"Definition file not found: {self._path}. Run 'init' first."
            )
        try:
            with self._path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except (OSError, json.JSONDecodeError) as exc:
            raise DefinitionFileError(
                f"Could not read definition file {self._path}: {exc}"
            ) from exc
        try:
            config = AgentConfig.model_validate(payload)
        except ValidationError as exc:
            raise DefinitionFileError(
                f"Definition file {self._path} is invalid: {exc}"
            ) from exc
        logger.debug("Loaded definition from %s.", self._path)
        return config

    def save(self, config: AgentConfig) -> None:
        """
        Writes the agent definition as JSON.

        Args:
            config: The definition to write.
        """
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with self._path.open("w", encoding="utf-8") as handle:
                handle.write(config.model_dump_json(indent=2))
                handle.write("\n")
        except OSError as exc:
            raise DefinitionFileError(
                f"Could not write definition file {self._path}: {exc}"
            ) from exc
        logger.debug("Saved definition to %s.", self._path)
