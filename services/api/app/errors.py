"""Error types mapped to HTTP responses by the app-level exception handler."""


class VillageError(Exception):
    """Base error carrying the HTTP status and the message shown to clients.

    The constructor message is for server-side logs; ``public_message`` is the
    only text that reaches the caller.
    """

    status_code = 500
    default_public_message = "Internal server error"

    def __init__(self, message: str = "", public_message: str | None = None):
        super().__init__(message or public_message or self.default_public_message)
        self.public_message = public_message or self.default_public_message


class ValidationError(VillageError):
    status_code = 400
    default_public_message = "Missing required data"


class RateLimitError(VillageError):
    status_code = 429
    default_public_message = "Too many requests. Please wait a minute before trying again."


class ConfigurationError(VillageError):
    default_public_message = "API not configured"


class UpstreamError(VillageError):
    default_public_message = "Failed to get a response from the provider"


class ParseError(VillageError):
    default_public_message = "Failed to parse the provider response"
