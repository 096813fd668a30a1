"""Client facade for the Replicate API."""

import logging
from typing import Any, Callable, Dict, Optional

import requests

from replicate_ninja.api.auth import AuthHandler
from replicate_ninja.api.config import Config
from replicate_ninja.api.transport import Transport
from replicate_ninja.api.types import Prediction, PredictionStatus
from replicate_ninja.resources import Collections, Models, Predictions, Trainings
from replicate_ninja.utils.exceptions import PredictionFailedError

logger = logging.getLogger(__name__)


class Replicate:
    """Client for the Replicate HTTP API.

    Groups the API resources:
    - predictions: run models and follow the results
    - models: get and list models; ``models.versions`` for their versions
    - trainings: fine-tune model versions
    - collections: curated groupings of models

    Example:
        client = Replicate()  # REPLICATE_API_TOKEN from environment or .env
        prediction = client.predictions.create(
            "stability-ai/sdxl:39ed52f2a78e934b3ba6e2a89f5b1c712de7dfea535525255b1aa35c5565e08b",
            {"prompt": "a 19th century portrait of a wombat gentleman"},
        )
        prediction = client.predictions.wait(prediction)
        print(prediction.output)
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        auth_handler: Optional[AuthHandler] = None,
        session: Optional[requests.Session] = None
    ):
        """Initialize the client.

        Args:
            config: Client configuration (default: ``Config.from_env()``)
            auth_handler: Authentication handler (default: Bearer token from config)
            session: Optional pre-built ``requests.Session``
        """
        self.config = config if config is not None else Config.from_env()
        self.transport = Transport(self.config, auth_handler, session)

        self.predictions = Predictions(self.transport)
        self.models = Models(self.transport)
        self.trainings = Trainings(self.transport)
        self.collections = Collections(self.transport)

    def run(
        self,
        ref: str,
        input: Dict[str, Any],
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> Prediction:
        """Run a model version and block until the prediction is finished.

        Args:
            ref: Version reference, ``owner/name:version_id`` or a bare version id
            input: Model inputs
            interval: Seconds between polls (default: config poll_interval)
            max_attempts: Give up after this many polls (default: never)
            sleep: Replacement for ``time.sleep``

        Returns:
            The finished prediction (succeeded or canceled)

        Raises:
            PredictionFailedError: If the prediction ended in status failed
        """
        prediction = self.predictions.create(ref, input)
        prediction = self.predictions.wait(
            prediction, interval=interval, max_attempts=max_attempts, sleep=sleep
        )
        if prediction.status == PredictionStatus.FAILED:
            raise PredictionFailedError(prediction)
        return prediction

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self.transport.close()

    def __enter__(self) -> "Replicate":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Replicate(base_url={self.config.base_url!r})"
