"""Exception hierarchy for the SumMatch engine."""


class SumMatchError(Exception):
    """Base class for every error raised by the game engine."""


class ConfigurationError(SumMatchError, ValueError):
    """Grid dimensions or value bounds cannot describe a playable board."""


class StorageUnavailable(SumMatchError):
    """The high score medium could not be read from or written to."""
