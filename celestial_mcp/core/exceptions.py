# The module defines the exceptions raised inside the Celestial Node MCP server.
# Date: 2026-10-18
# Version: 1.1.0

from typing import Optional

REGISTER_URL = "https://celestialnode.com/register"


class CelestialMCPError(Exception):
    """Base class for every error raised by this package."""


class DuplicateToolError(CelestialMCPError):
    """Raised while building the registry when two tools share a name."""

    def __init__(self, name: str):
        super().__init__(f"Tool '{name}' is registered more than once.")
        self.name = name


class ToolCallError(CelestialMCPError):
    """
    Raised from the MCP call handler to hand a failure message to the SDK,
    which turns it into a tool result flagged with isError.
    """


class CelestialAPIError(CelestialMCPError):
    """A non-success response from the Celestial Node API."""

    def __init__(self, message: str, status_code: Optional[int] = None, reason: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class AuthenticationError(CelestialAPIError):
    def __init__(self, reason: str = "Unauthorized"):
        super().__init__(f"Invalid API key. Get yours at {REGISTER_URL}", status_code=401, reason=reason)


class RateLimitError(CelestialAPIError):
    def __init__(self, reason: str = "Too Many Requests"):
        super().__init__(f"Rate limit exceeded. Register for higher limits: {REGISTER_URL}", status_code=429, reason=reason)


class APIStatusError(CelestialAPIError):
    def __init__(self, status_code: int, reason: str = ""):
        super().__init__(f"API error: {status_code} {reason}".rstrip(), status_code=status_code, reason=reason)
