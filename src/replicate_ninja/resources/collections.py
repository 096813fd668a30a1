"""Collection endpoints."""

from typing import Iterator, Optional

from replicate_ninja.api.types import Collection, Page
from replicate_ninja.resources.base import Resource, api_path


class Collections(Resource):
    """Curated groupings of models."""

    def get(self, slug: str) -> Collection:
        """Get a collection, including its models, by slug."""
        data = self.transport.request("GET", api_path("collections", slug))
        return Collection.from_dict(data)

    def list(self, cursor: Optional[str] = None) -> Page[Collection]:
        """List collections. Listed items do not include their models."""
        return self._list_page("/collections", Collection.from_dict, cursor)

    def paginate(self) -> Iterator[Collection]:
        return self._iterate(self.list)
