class CompletionError(Exception):
    """Base class for failures of a completion round trip."""


class TransportError(CompletionError):
    """The request could not be sent or did not complete successfully."""


class ProtocolError(CompletionError):
    """The service answered but the body lacks the expected reply text."""


class ConfigError(Exception):
    """Startup configuration is missing or invalid."""
