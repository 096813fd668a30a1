"""Prediction endpoints: create, get, list, cancel and wait."""

import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from replicate_ninja.api.types import Page, Prediction
from replicate_ninja.resources.base import Resource, api_path
from replicate_ninja.utils.exceptions import InvalidVersionError

logger = logging.getLogger(__name__)


def parse_version_ref(ref: str) -> Tuple[Optional[str], str]:
    """Split a model version reference into model and version id.

    Accepts ``owner/name:version_id`` or a bare ``version_id``.

    Args:
        ref: Version reference

    Returns:
        Tuple of (model, version_id); model is None for a bare id

    Raises:
        InvalidVersionError: If the reference has no usable version id

    Examples:
        "stability-ai/sdxl:39ed52f2" -> ("stability-ai/sdxl", "39ed52f2")
        "39ed52f2" -> (None, "39ed52f2")
        "stability-ai/sdxl" -> InvalidVersionError
    """
    if not ref or not isinstance(ref, str):
        raise InvalidVersionError(str(ref))

    if ":" in ref:
        model, version = ref.split(":", 1)
        owner, _, name = model.partition("/")
        if not owner or not name or "/" in name or not version or ":" in version:
            raise InvalidVersionError(ref)
        return model, version

    if "/" in ref or any(c.isspace() for c in ref):
        raise InvalidVersionError(ref)
    return None, ref


class Predictions(Resource):
    """Run models and follow the resulting predictions."""

    def create(
        self,
        ref: str,
        input: Dict[str, Any],
        webhook: Optional[str] = None,
        webhook_events_filter: Optional[List[str]] = None,
    ) -> Prediction:
        """Start a prediction of a model version.

        Args:
            ref: Version reference, ``owner/name:version_id`` or a bare version id
            input: Model inputs
            webhook: Optional URL the API calls back on updates
            webhook_events_filter: Events that trigger the webhook
                (``start``, ``output``, ``logs``, ``completed``)

        Returns:
            The prediction as first reported by the API (usually ``starting``)
        """
        _, version = parse_version_ref(ref)

        payload: Dict[str, Any] = {"version": version, "input": dict(input)}
        if webhook is not None:
            payload["webhook"] = webhook
        if webhook_events_filter is not None:
            payload["webhook_events_filter"] = list(webhook_events_filter)

        prediction = Prediction.from_dict(
            self.transport.request("POST", "/predictions", json=payload)
        )
        logger.info("Created prediction %s (%s)", prediction.id, prediction.status)
        return prediction

    def get(self, id: str) -> Prediction:
        """Fetch the current state of a prediction."""
        return Prediction.from_dict(self.transport.request("GET", api_path("predictions", id)))

    def list(self, cursor: Optional[str] = None) -> Page[Prediction]:
        """List predictions of the authenticated account, newest first.

        Args:
            cursor: ``next`` or ``previous`` URL of an earlier page

        Returns:
            One page of predictions
        """
        return self._list_page("/predictions", Prediction.from_dict, cursor)

    def paginate(self) -> Iterator[Prediction]:
        """Iterate over every prediction, following ``next`` links."""
        return self._iterate(self.list)

    def cancel(self, id: str) -> Prediction:
        """Ask the API to cancel a prediction.

        The returned snapshot may still be ``processing``; cancelation
        takes effect asynchronously.
        """
        data = self.transport.request("POST", api_path("predictions", id, "cancel"))
        # An empty cancel response carries no state; fetch it instead.
        prediction = Prediction.from_dict(data) if data is not None else self.get(id)
        logger.info("Requested cancelation of prediction %s (%s)", id, prediction.status)
        return prediction

    def reload(self, prediction: Prediction) -> Prediction:
        """Overwrite ``prediction`` in place with its latest server state."""
        prediction.update_from(self.get(prediction.id))
        return prediction

    def wait(
        self,
        prediction: Union[str, Prediction],
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> Prediction:
        """Block until a prediction reaches a terminal status.

        Args:
            prediction: Prediction id, or a prediction returned earlier
            interval: Seconds between polls (default: config poll_interval)
            max_attempts: Give up after this many polls (default: never)
            sleep: Replacement for ``time.sleep``

        Returns:
            The prediction in status succeeded, failed or canceled. When a
            Prediction object was passed in, that same object is updated
            and returned.

        Raises:
            WaitTimeoutError: If ``max_attempts`` polls were all non-terminal
        """
        poller = self._poller(interval, max_attempts, sleep)
        if isinstance(prediction, Prediction):
            return poller.wait(lambda: self.reload(prediction))
        return poller.wait(lambda: self.get(prediction))
