"""Resolves studio settings for the command line."""

from pathlib import Path
from typing import Optional

from agent_studio.config import StudioConfig
from agent_studio.domain.exceptions import SettingsError


class ConfigProvider:
    """
    Loads settings from a chosen JSON file or the default location.

    An explicitly chosen file must exist. Validation and read failures are
    reported as SettingsError so callers handle them like other studio errors.

    Args:
        path: JSON settings file chosen by the user, if any.
    """

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path

    def load(self) -> StudioConfig:
        """
        Loads and validates the settings.

        Returns:
            A validated configuration object.

        Raises:
            SettingsError: If the chosen file is missing or the settings are invalid.
        """
        if self._path is not None and not self._path.is_file():
            raise SettingsError(f"Settings file not found: {self._path}")
        try:
            return StudioConfig.load(self._path)
        except OSError as e:
            raise SettingsError(f"Could not read settings: {e}") from e
        except ValueError as e:
            raise SettingsError(f"Invalid settings: {e}") from e
