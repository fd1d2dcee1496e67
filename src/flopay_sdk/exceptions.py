from typing import Any


class FlopayError(Exception):
    """Base exception for SDK errors."""


class InvalidCredentialError(FlopayError):
    """Client credentials were not found in the environment."""

    def __init__(self) -> None:
        super().__init__(
            "FLOPAY_CLIENT_{ID, SECRET} env vars expected but not found. "
            "Please set them and try again. Or use the other constructor "
            "that accepts the client id and client secret as arguments."
        )


class AuthenticationError(FlopayError):
    """Failed to obtain an access token from Flopay."""


class NotAuthorizedError(FlopayError):
    """Client holds no valid access token."""


class ResponseNotSetError(FlopayError):
    """Request output was read before a response was assigned."""


class ProviderError(FlopayError):
    """Flopay answered with ``success: false``."""

    def __init__(
        self,
        message: str | None,
        error_type: str | None = None,
        payload: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_type = error_type
        self.payload = payload
        super().__init__(message)


class InvalidCustomerNumber(ProviderError):
    """The recipient's Mobile Money account number is invalid."""


class ExceededDailyLimit(ProviderError):
    """The customer has exceeded their daily wallet limit."""


class UnknownProviderError(ProviderError):
    """Flopay reported an error type this SDK does not know about."""

    def __init__(
        self,
        message: str | None,
        error_type: str | None = None,
        payload: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_type = error_type
        self.payload = payload
        FlopayError.__init__(
            self, f"unknown error type: {error_type}, with message {message}"
        )
