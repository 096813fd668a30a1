"""Utility modules for Replicate Ninja."""

from replicate_ninja.utils.exceptions import (
    APIError,
    ConfigurationError,
    DeserializationError,
    InvalidVersionError,
    PredictionFailedError,
    ReplicateError,
    TransportError,
    ValidationError,
    WaitTimeoutError,
)

__all__ = [
    "ReplicateError",
    "ConfigurationError",
    "ValidationError",
    "InvalidVersionError",
    "TransportError",
    "APIError",
    "DeserializationError",
    "WaitTimeoutError",
    "PredictionFailedError",
]
