"""Exception hierarchy for prettui."""


class PrettuiError(Exception):
    """Base class for every error raised by prettui."""


class ConfigError(PrettuiError, ValueError):
    """A configuration object holds values the widget cannot lay out."""


class EmptyListError(PrettuiError, ValueError):
    """choose_from_list was called with no items."""

    def __init__(self, message: str = "Cannot choose from an empty list"):
        super().__init__(message)


class TerminalError(PrettuiError, OSError):
    """The terminal could not be driven."""


class TerminalUnavailableError(TerminalError):
    """stdin is not a terminal, or it refused to enter raw mode."""


class IoFailureError(TerminalError):
    """Reading a key or writing to the screen failed mid-session."""


class PromptError(PrettuiError, ValueError):
    """A validated prompt ran out of attempts."""
