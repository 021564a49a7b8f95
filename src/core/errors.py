"""Error taxonomy shared by the client and the command surface.

Every error carries a user-facing message; the CLI prints `str(exc)` and
exits with code 1.
"""

from __future__ import annotations


class VatApiCliError(Exception):
    """Base class for every error the CLI reports to the user."""


class AuthenticationError(VatApiCliError):
    def __init__(self) -> None:
        super().__init__("Authentication failed. Check your API key: vatapi config set --api-key <key>")


class AuthorizationError(VatApiCliError):
    def __init__(self) -> None:
        super().__init__("Access forbidden. Check your API permissions.")


class NotFoundError(VatApiCliError):
    def __init__(self) -> None:
        super().__init__("Resource not found.")


class RateLimitError(VatApiCliError):
    def __init__(self) -> None:
        super().__init__("Rate limit exceeded. Please wait before retrying.")


class ApiError(VatApiCliError):
    """Any other non-success HTTP status."""

    def __init__(self, status: int, message: str) -> None:
        self.status = status
        self.message = message
        super().__init__(f"API Error ({status}): {message}")


class ConnectivityError(VatApiCliError):
    def __init__(self) -> None:
        super().__init__("No response from VAT API. Check your internet connection.")


class PreconditionError(VatApiCliError):
    """Raised before any network call when no API key is configured."""

    def __init__(self) -> None:
        super().__init__("VAT API key not configured.")


class UsageError(VatApiCliError):
    """A required flag or argument is missing."""


class ConfigStoreError(VatApiCliError):
    """The configuration file could not be written."""
