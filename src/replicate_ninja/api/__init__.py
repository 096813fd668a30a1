"""Transport, configuration and response types for the Replicate API.

This module provides the pieces every resource is built on: the
authentication handler, the configuration loader, the HTTP transport,
the response dataclasses and the poll loop used by ``wait``.
"""

from replicate_ninja.api.auth import AuthHandler, BearerTokenAuth
from replicate_ninja.api.config import Config, ConfigLoader
from replicate_ninja.api.polling import FixedDelay, Poller
from replicate_ninja.api.transport import Transport
from replicate_ninja.api.types import (
    TERMINAL_STATUSES,
    Collection,
    Model,
    ModelVersion,
    Page,
    Prediction,
    PredictionSource,
    PredictionStatus,
    PredictionURLs,
    Training,
)

__all__ = [
    # Authentication
    "AuthHandler",
    "BearerTokenAuth",
    # Configuration
    "Config",
    "ConfigLoader",
    # HTTP
    "Transport",
    # Polling
    "FixedDelay",
    "Poller",
    # Response types
    "Collection",
    "Model",
    "ModelVersion",
    "Page",
    "Prediction",
    "PredictionSource",
    "PredictionStatus",
    "PredictionURLs",
    "TERMINAL_STATUSES",
    "Training",
]
