"""Exceptions raised by dsesh."""


class SeshError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigError(SeshError):
    """Config file missing, unreadable, malformed or not matching the schema."""


class SessionNotFoundError(SeshError):
    def __init__(self, name: str) -> None:
        super().__init__(f"No such session: {name}")
        self.name = name


class LaunchError(SeshError):
    """The session's shell could not be started."""
