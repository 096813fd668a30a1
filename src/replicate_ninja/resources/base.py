"""Shared plumbing for API resources."""

from typing import Any, Callable, Iterator, Optional, TypeVar

from requests.utils import quote

from replicate_ninja.api.polling import FixedDelay, Poller
from replicate_ninja.api.transport import Transport
from replicate_ninja.api.types import Page

T = TypeVar("T")


def api_path(*segments: Any) -> str:
    """Build an API path, percent-encoding each segment so ids cannot add path parts."""
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


class Resource:
    """Base class for a group of endpoints sharing one transport."""

    def __init__(self, transport: Transport):
        self.transport = transport

    def _list_page(
        self,
        path: str,
        item_factory: Callable[[Any], T],
        cursor: Optional[str] = None
    ) -> Page[T]:
        """Fetch one page of a listing.

        ``cursor`` is the ``next``/``previous`` URL of an earlier page; when
        given it is requested instead of ``path``. The transport refuses
        cursors that leave the base URL's scheme and host.
        """
        data = self.transport.request("GET", cursor or path)
        return Page.from_dict(data, item_factory)

    def _iterate(self, fetch_page: Callable[[Optional[str]], Page[T]]) -> Iterator[T]:
        cursor = None
        while True:
            page = fetch_page(cursor)
            yield from page.results
            if not page.next:
                return
            cursor = page.next

    def _poller(
        self,
        interval: Optional[float] = None,
        max_attempts: Optional[int] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> Poller:
        if interval is None:
            interval = self.transport.config.poll_interval
        kwargs = {"max_attempts": max_attempts}
        if sleep is not None:
            kwargs["sleep"] = sleep
        return Poller(FixedDelay(interval), **kwargs)
