from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any


class SettingError(Exception):
    """Base class for setting errors."""


class InvalidArgumentError(SettingError, ValueError):
    """Raised when a ``None`` value or listener is passed where it is not allowed."""


class SettingStateError(SettingError, RuntimeError):
    """Raised when the setting cannot serve a request in its current state."""


class TypeMismatchError(SettingError, TypeError):
    """Raised when a codec cannot read the supplied control."""


class IncompleteConfigurationError(SettingError):
    """Raised by :meth:`Builder.build` when a required field is missing."""


class UnknownCodecError(SettingError, LookupError):
    """Raised when a codec name is not registered."""


class ListenerError(SettingError):
    """Raised after a notification pass in which one or more listeners failed.

    ``failures`` holds ``(listener, exception)`` pairs in call order.
    """

    def __init__(self, failures: Iterable[tuple[Callable[..., Any], BaseException]]) -> None:
        self.failures = list(failures)
        super().__init__(self.failures)

    def __str__(self) -> str:
        names = ", ".join(_name(fn) for fn, _ in self.failures)
        return f"{len(self.failures)} listener(s) failed: {names}"


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
