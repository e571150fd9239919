import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic_settings.sources import (
    DotEnvSettingsSource,
    EnvSettingsSource,
    JsonConfigSettingsSource,
)

from agent_studio.domain import ResponseStyle

DEFAULT_STUDIO_DIR = Path(".agent_studio")
DEFAULT_CONFIG_PATH = DEFAULT_STUDIO_DIR / "config.json"


class StudioConfig(BaseSettings):
    """
    Application settings loaded from environment variables, .env, and JSON.
    """

    log_level: str = Field(
        default="WARNING", description="Logging level for the command line."
    )
    manifest_indent: int = Field(
        default=2, ge=1, le=8, description="Spaces per level in manifest JSON."
    )
    studio_dir: Path = Field(
        default=DEFAULT_STUDIO_DIR, description="Root directory for studio files."
    )
    definitions_dir: Optional[Path] = Field(
        default=None, description="Directory holding agent definition files."
    )
    default_response_style: ResponseStyle = Field(
        default=ResponseStyle.BALANCED,
        description="Response style given to newly initialized definitions.",
    )

    model_config = SettingsConfigDict(
        env_prefix="AGENT_STUDIO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="forbid",
    )

    @model_validator(mode="after")
    def _apply_defaults(self) -> "StudioConfig":
        """
        Anchors the definitions directory and normalizes the log level.

        Returns:
            The validated configuration instance.
        """
        if self.definitions_dir is None:
            self.definitions_dir = self.studio_dir / "agents"
        elif not self.definitions_dir.is_absolute():
            studio_parts = self.studio_dir.parts
            if self.definitions_dir.parts[: len(studio_parts)] != studio_parts:
                self.definitions_dir = self.studio_dir / self.definitions_dir
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}.")
        return self

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "StudioConfig":
        """
        Loads configuration from a JSON file when present.

        Args:
            path: Optional override path for the JSON config file.

        Returns:
            A validated configuration object.
        """
        config_path = path or DEFAULT_CONFIG_PATH
        if not config_path.exists():
            return cls()

        json_source = JsonConfigSettingsSource(cls, json_file=config_path)
        dotenv_source = DotEnvSettingsSource(cls)
        env_source = EnvSettingsSource(cls)
        merged: dict[str, object] = {}
        merged.update(json_source())
        merged.update(dotenv_source())
        merged.update(env_source())
        return cls.model_validate(merged)

    def get_log_level(self) -> str:
        """Returns the configured logging level name."""

        return self.log_level

    def get_manifest_indent(self) -> int:
        """Returns the indentation used for manifest JSON."""

        return self.manifest_indent

    def get_studio_dir(self) -> Path:
        """Returns the root directory for studio files."""

        return self.studio_dir

    def get_definitions_dir(self) -> Path:
        """
        Returns the directory holding agent definition files.

        Returns:
            The definitions directory path.
        """
        if self.definitions_dir is None:
            raise ValueError("Definitions directory is not configured.")
        return self.definitions_dir

    def get_definition_path(self, agent_id: str) -> Path:
        """
        Returns the definition file path for a given agent id.

        Args:
            agent_id: The agent identifier.

        Returns:
            The definition file path under the definitions directory.
        """
        return self.get_definitions_dir() / f"{agent_id}.agent.json"
