"""Blocking poll loop used to wait for predictions and trainings."""

import logging
import time
from typing import Callable, Optional, TypeVar

from replicate_ninja.utils.exceptions import WaitTimeoutError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FixedDelay:
    """Delay strategy that waits the same number of seconds between attempts."""

    def __init__(self, seconds: float):
        if seconds < 0:
            raise ValueError("Delay must not be negative")
        self.seconds = seconds

    def __call__(self, attempt: int) -> float:
        return self.seconds

    def __repr__(self) -> str:
        return f"FixedDelay({self.seconds})"


def is_terminal(resource) -> bool:
    """Default terminal predicate: the resource's status says it is done."""
    return resource.status.is_terminal


class Poller:
    """Re-fetch a resource until it reaches a terminal status.

    The delay strategy, the sleep function and the terminal predicate are
    all injected, so tests can drive the loop without sleeping.
    """

    def __init__(
        self,
        delay: Callable[[int], float],
        sleep: Callable[[float], None] = time.sleep,
        max_attempts: Optional[int] = None,
        terminal: Callable[[object], bool] = is_terminal,
    ):
        """Initialize the poller.

        Args:
            delay: Maps the 1-based attempt number to seconds to sleep afterwards
            sleep: Function used to pause between attempts
            max_attempts: Give up after this many fetches (default: never)
            terminal: Predicate deciding whether a fetched resource is final
        """
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.delay = delay
        self.sleep = sleep
        self.max_attempts = max_attempts
        self.terminal = terminal

    def wait(self, fetch: Callable[[], T]) -> T:
        """Call ``fetch`` until it returns a terminal resource, and return it.

        Errors raised by ``fetch`` stop the loop and propagate unchanged.

        Raises:
            WaitTimeoutError: If ``max_attempts`` fetches all came back non-terminal
        """
        attempt = 0
        while True:
            attempt += 1
            resource = fetch()
            if self.terminal(resource):
                logger.debug("Terminal status %s after %d attempt(s)", resource.status, attempt)
                return resource

            if self.max_attempts is not None and attempt >= self.max_attempts:
                raise WaitTimeoutError(resource, attempt)

            pause = self.delay(attempt)
            logger.debug(
                "Status %s on attempt %d, sleeping %.2fs", resource.status, attempt, pause
            )
            self.sleep(pause)
