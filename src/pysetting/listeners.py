"""Copy-on-write listener collection used by :class:`~pysetting.Setting`."""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from itertools import count
from threading import Lock
from typing import Any

from . import config
from .errors import InvalidArgumentError, ListenerError

logger = logging.getLogger(__name__)

Listener = Callable[[Any], Any]


class ListenerList:
    """Ordered callbacks that tolerate mutation during a notification pass.

    Writers swap in a new tuple under a lock, so readers iterate a stable
    snapshot without locking.  A pass never calls listeners added after it
    started, and skips listeners removed before their turn.
    """

    def __init__(self) -> None:
        # each registration gets its own token so duplicates stay distinguishable
        self._entries: tuple[tuple[int, Listener], ...] = ()
        self._tokens = count()
        self._lock = Lock()

    def add(self, fn: Listener) -> None:
        _check(fn)
        with self._lock:
            self._entries = (*self._entries, (next(self._tokens), fn))

    def remove(self, fn: Listener) -> None:
        _check(fn)
        with self._lock:
            for index, (_, item) in enumerate(self._entries):
                if item == fn:
                    self._entries = self._entries[:index] + self._entries[index + 1 :]
                    return

    def snapshot(self) -> tuple[Listener, ...]:
        return tuple(fn for _, fn in self._entries)

    def __iter__(self) -> Iterator[Listener]:
        return iter(self.snapshot())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, fn: object) -> bool:
        return any(item == fn for _, item in self._entries)

    def notify(self, value: Any) -> None:
        """Call every listener registered when the pass starts with *value*."""
        failures: list[tuple[Listener, Exception]] = []
        for token, fn in self._entries:
            if not self._registered(token):
                # removed by an earlier listener of this pass
                continue
            if config.listener_errors == "raise":
                fn(value)
                continue
            try:
                fn(value)
            except Exception as exc:
                logger.warning("listener %r failed: %s", fn, exc, exc_info=True)
                failures.append((fn, exc))
        if failures:
            raise ListenerError(failures) from failures[0][1]

    def _registered(self, token: int) -> bool:
        return any(t == token for t, _ in self._entries)


def _check(fn: object) -> None:
    if fn is None:
        raise InvalidArgumentError("Listener cannot be null")
    if not callable(fn):
        raise InvalidArgumentError(f"Listener must be callable, got {type(fn).__name__}")


__all__ = ["Listener", "ListenerList"]
