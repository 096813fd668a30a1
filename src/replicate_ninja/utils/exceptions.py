"""Custom exceptions for Replicate Ninja."""

from typing import Any, Optional


class ReplicateError(Exception):
    """Base exception for all Replicate Ninja errors."""

    pass


class ConfigurationError(ReplicateError):
    """Raised when the client configuration is missing or invalid."""

    pass


class ValidationError(ReplicateError):
    """Raised when input validation fails."""

    pass


class InvalidVersionError(ValidationError):
    """Raised when a model version reference cannot be parsed."""

    def __init__(self, ref: str):
        super().__init__(
            f"Invalid version reference: {ref!r}. "
            f"Use 'owner/name:version_id' or a bare version id."
        )
        self.ref = ref


class TransportError(ReplicateError):
    """Raised when the HTTP request could not be sent or completed."""

    pass


class APIError(ReplicateError):
    """Raised when the API answers with a non-2xx status.

    ``message`` is the response body exactly as the server sent it.
    """

    def __init__(self, status_code: int, message: str, detail: Optional[str] = None):
        super().__init__(f"API returned status {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.detail = detail


class DeserializationError(ReplicateError):
    """Raised when a response body does not match the expected shape."""

    pass


class WaitTimeoutError(ReplicateError):
    """Raised when polling gives up before a terminal status is observed."""

    def __init__(self, resource: Any, attempts: int):
        super().__init__(
            f"Gave up after {attempts} attempts; last status was "
            f"{getattr(resource, 'status', None)!s}"
        )
        self.resource = resource
        self.attempts = attempts


class PredictionFailedError(ReplicateError):
    """Raised by ``run`` when the prediction ends in the ``failed`` status."""

    def __init__(self, prediction: Any):
        super().__init__(f"Prediction {prediction.id} failed: {prediction.error}")
        self.prediction = prediction
