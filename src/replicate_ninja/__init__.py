"""Replicate Ninja - typed Python client for the Replicate inference API."""

__version__ = "0.1.0"

from replicate_ninja.api.config import Config
from replicate_ninja.api.types import Prediction, PredictionStatus
from replicate_ninja.client import Replicate

__all__ = [
    "__version__",
    "Config",
    "Prediction",
    "PredictionStatus",
    "Replicate",
]
