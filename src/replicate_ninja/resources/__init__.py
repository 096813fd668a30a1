"""API resources grouped the way the Replicate HTTP API groups its endpoints."""

from replicate_ninja.resources.collections import Collections
from replicate_ninja.resources.models import Models, ModelVersions
from replicate_ninja.resources.predictions import Predictions, parse_version_ref
from replicate_ninja.resources.trainings import Trainings

__all__ = [
    "Collections",
    "Models",
    "ModelVersions",
    "Predictions",
    "Trainings",
    "parse_version_ref",
]
