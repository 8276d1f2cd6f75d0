"""Exception hierarchy for the Stability API client."""

from typing import Optional


class StabilityError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ConfigurationError(StabilityError):
    """Client configuration cannot produce a valid request target."""

    pass


class StabilityTransportError(StabilityError):
    """The request never produced an HTTP response (connection, DNS, timeout)."""

    pass


class StabilityAPIError(StabilityError):
    """Non-200 response carrying a structured error body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_id: Optional[str] = None,
        name: Optional[str] = None,
    ):
        super().__init__(message, status_code)
        self.error_id = error_id
        self.name = name


class StatusCodeError(StabilityError):
    """Non-200 response whose body could not be decoded as an error payload."""

    def __init__(self, status_code: int):
        super().__init__(f"Invalid response status code: {status_code}", status_code)


class MultipartEncodingError(StabilityError):
    """A form field could not be represented in a multipart body."""

    pass


class ResponseDecodeError(StabilityError):
    """Successful status, but the body does not match the expected schema."""

    pass


class ArtifactDecodeError(ResponseDecodeError):
    """An artifact's base64 payload is not valid base64."""

    pass
