"""Model and model version endpoints."""

import logging
from typing import Iterator, Optional

from replicate_ninja.api.transport import Transport
from replicate_ninja.api.types import Model, ModelVersion, Page
from replicate_ninja.resources.base import Resource, api_path

logger = logging.getLogger(__name__)


class ModelVersions(Resource):
    """Versions of a model."""

    def get(self, owner: str, name: str, version_id: str) -> ModelVersion:
        """Get a single version of a model."""
        return ModelVersion.from_dict(
            self.transport.request("GET", api_path("models", owner, name, "versions", version_id))
        )

    def list(self, owner: str, name: str, cursor: Optional[str] = None) -> Page[ModelVersion]:
        """List the versions of a model, newest first."""
        path = api_path("models", owner, name, "versions")
        return self._list_page(path, ModelVersion.from_dict, cursor)

    def paginate(self, owner: str, name: str) -> Iterator[ModelVersion]:
        return self._iterate(lambda cursor: self.list(owner, name, cursor))

    def delete(self, owner: str, name: str, version_id: str) -> None:
        """Delete a version of a model the token's account owns."""
        self.transport.request("DELETE", api_path("models", owner, name, "versions", version_id))
        logger.info("Deleted version %s of %s/%s", version_id, owner, name)


class Models(Resource):
    """Hosted models. Versions live under ``models.versions``."""

    def __init__(self, transport: Transport):
        super().__init__(transport)
        self.versions = ModelVersions(transport)

    def get(self, owner: str, name: str) -> Model:
        """Get a model by owner and name."""
        return Model.from_dict(self.transport.request("GET", api_path("models", owner, name)))

    def list(self, cursor: Optional[str] = None) -> Page[Model]:
        """List public models."""
        return self._list_page("/models", Model.from_dict, cursor)

    def paginate(self) -> Iterator[Model]:
        return self._iterate(self.list)
