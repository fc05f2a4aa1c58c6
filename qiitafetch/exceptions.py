"""Custom exception hierarchy for qiitafetch."""


class QiitaFetchError(Exception):
    """Base exception for all qiitafetch errors."""


class ProfileError(QiitaFetchError):
    """Any error carried by a failed profile outcome."""


class InvalidRequestError(ProfileError):
    """Username or access token is empty."""


class TransportError(ProfileError):
    """Failed to get a response from the API."""


class HttpStatusError(TransportError):
    """API answered with a non-success status code."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code


class DecodeError(ProfileError):
    """Response body is not a valid profile document."""
