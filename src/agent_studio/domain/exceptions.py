class AgentStudioError(Exception):
    """Base exception for the Agent Studio system."""

    pass


class DefinitionFileError(AgentStudioError):
    """Agent definition file is missing, unreadable, or invalid."""

    pass


class UnknownTemplateError(AgentStudioError):
    """No tool template in the preset catalog has the requested name."""

    pass


class InvalidAssignmentError(AgentStudioError):
    """Assignment names a non-editable field or an invalid value."""

    pass


class SettingsError(AgentStudioError):
    """Studio settings could not be read or failed validation."""

    pass
