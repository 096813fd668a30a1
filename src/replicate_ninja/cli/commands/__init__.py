"""CLI commands for Replicate Ninja."""

from replicate_ninja.cli.commands.model_commands import (
    get_collection,
    get_model,
    get_version,
    list_collections,
    list_models,
    list_versions,
)
from replicate_ninja.cli.commands.prediction_commands import (
    cancel_prediction,
    create_prediction,
    get_prediction,
    list_predictions,
    run,
    wait_prediction,
)
from replicate_ninja.cli.commands.training_commands import (
    cancel_training,
    create_training,
    get_training,
    list_trainings,
)

__all__ = [
    "run",
    "create_prediction",
    "get_prediction",
    "list_predictions",
    "cancel_prediction",
    "wait_prediction",
    "get_model",
    "list_models",
    "list_versions",
    "get_version",
    "get_collection",
    "list_collections",
    "create_training",
    "get_training",
    "list_trainings",
    "cancel_training",
]
