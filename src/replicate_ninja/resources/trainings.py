"""Training endpoints."""

import logging
from typing import Any, Callable, Dict, Iterator, Optional, Union

from replicate_ninja.api.types import Page, Training
from replicate_ninja.resources.base import Resource, api_path
from replicate_ninja.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


class Trainings(Resource):
    """Fine-tune a model version into a new version of a destination model."""

    def create(
        self,
        owner: str,
        name: str,
        version_id: str,
        destination: str,
        input: Dict[str, Any],
        webhook: Optional[str] = None,
    ) -> Training:
        """Start a training.

        Args:
            owner: Owner of the model to train
            name: Name of the model to train
            version_id: Version of the model to train
            destination: ``owner/name`` of the model receiving the new version
            input: Training inputs
            webhook: Optional URL the API calls back on updates

        Returns:
            The training as first reported by the API
        """
        if destination.count("/") != 1 or not all(destination.split("/")):
            raise ValidationError(f"Destination must be 'owner/name', got {destination!r}")

        payload: Dict[str, Any] = {"destination": destination, "input": dict(input)}
        if webhook is not None:
            payload["webhook"] = webhook

        path = api_path("models", owner, name, "versions", version_id, "trainings")
        training = Training.from_dict(self.transport.request("POST", path, json=payload))
        logger.info("Created training %s (%s)", training.id, training.status)
        return training

    def get(self, id: str) -> Training:
        """Fetch the current state of a training."""
        return Training.from_dict(self.transport.request("GET", api_path("trainings", id)))

    def list(self, cursor: Optional[str] = None) -> Page[Training]:
        """List trainings of the authenticated account."""
        return self._list_page("/trainings", Training.from_dict, cursor)

    def paginate(self) -> Iterator[Training]:
        return self._iterate(self.list)

    def cancel(self, id: str) -> Training:
        """Ask the API to cancel a training."""
        data = self.transport.request("POST", api_path("trainings", id, "cancel"))
        training = Training.from_dict(data) if data is not None else self.get(id)
        logger.info("Requested cancelation of training %s (%s)", id, training.status)
        return training

    def wait(
        self,
        training: Union[str, Training],
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> Training:
        """Block until a training reaches a terminal status."""
        training_id = training.id if isinstance(training, Training) else training
        return self._poller(interval, max_attempts, sleep).wait(lambda: self.get(training_id))
