"""Error kinds raised by Portline components.

Only the messages of these exceptions are logged server-side. HTTP handlers
translate them into generic client-facing responses.
"""


class PortlineError(Exception):
    """Base class for all Portline errors."""


class ConfigurationError(PortlineError):
    """Required configuration is missing or invalid. Fatal at startup."""


class RuntimeUnavailable(PortlineError):
    """The container runtime could not be reached or rejected the query."""


class InvalidInput(PortlineError):
    """The container runtime returned data that cannot be aggregated."""


class MalformedRequest(PortlineError):
    """A request body could not be parsed."""
