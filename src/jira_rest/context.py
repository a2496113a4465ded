"""Request scoped execution context."""
from __future__ import annotations

import threading
from dataclasses import dataclass, field


@dataclass(slots=True)
class RequestContext:
    """Carries the timeout and cancellation state for one or more requests.

    ``timeout`` (seconds) becomes the per-request httpx timeout.  A context can be
    cancelled from another thread; cancelled contexts fail fast in
    :meth:`jira_rest.http_client.JiraHTTPClient.call`.
    """

    timeout: float | None = None
    _cancelled: threading.Event = field(default_factory=threading.Event, repr=False)

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout <= 0:
            msg = "Context timeout must be positive"
            raise ValueError(msg)

    def cancel(self) -> None:
        self._cancelled.set()

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()


def background() -> RequestContext:
    """Return a fresh context without timeout or cancellation."""

    return RequestContext()


__all__ = ["RequestContext", "background"]
