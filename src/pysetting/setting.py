"""Typed, observable configuration cells.

A :class:`Setting` holds one value together with its default, notifies
listeners when the value changes and delegates persistence and UI binding to
a :class:`~pysetting.codecs.SettingCodec`.  ``None`` is the only marker for an
absent value.  Settings that cannot be null never store ``None`` through
:meth:`Setting.set_value` and read back their default while the stored value
is absent.

Settings are assembled with a :class:`Builder`::

    volume = (
        Setting.builder(int, "volume")
        .tree_path("audio/output")
        .codec(integer_codec())
        .default_value(10)
        .build()
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from .codecs import Document, SettingCodec
from .errors import (
    IncompleteConfigurationError,
    InvalidArgumentError,
    SettingStateError,
    TypeMismatchError,
)
from .listeners import ListenerList

logger = logging.getLogger(__name__)

T = TypeVar("T")

NULL_VALUE_MESSAGE = "Setting value is null and cannot be null"


class Setting(Generic[T]):
    def __init__(
        self,
        id: str,
        tree_path: str,
        codec: SettingCodec[T] | None,
        type: type[T],
        can_be_null: bool = False,
        default_value: T | None = None,
    ) -> None:
        self._id = id
        self._tree_path = tree_path
        self._codec = codec
        self._type = type
        self._can_be_null = can_be_null
        self._default_value = default_value
        self._value: T | None = default_value
        self._listeners = ListenerList()

    @classmethod
    def builder(cls, type: type[T] | None = None, id: str | None = None) -> Builder[T]:
        """Return a new :class:`Builder`, optionally preset with *type* and *id*."""
        builder: Builder[T] = Builder()
        if type is not None:
            builder.type(type)
        if id is not None:
            builder.id(id)
        return builder

    # -- immutable attributes ---------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def tree_path(self) -> str:
        return self._tree_path

    @property
    def codec(self) -> SettingCodec[T] | None:
        return self._codec

    @property
    def type(self) -> type[T]:
        return self._type

    @property
    def can_be_null(self) -> bool:
        return self._can_be_null

    @property
    def default_value(self) -> T | None:
        return self._default_value

    @property
    def value(self) -> T | None:
        """The stored value, without default substitution."""
        return self._value

    @property
    def listeners(self) -> tuple[Callable[[T | None], Any], ...]:
        return self._listeners.snapshot()

    # -- reads -------------------------------------------------------------

    def get_or_default_value(self) -> T | None:
        """Return the stored value, or the default while it is absent."""
        if self._value is None:
            return self._default_value
        return self._value

    def get_optional(self) -> T | None:
        """Return the value as external consumers should see it.

        Nullable settings report the stored value as is.  Other settings
        substitute the default, so ``None`` only comes back when both the
        value and the default are absent.
        """
        if self._can_be_null:
            return self._value
        return self.get_or_default_value()

    def get_or_throw(
        self, error: str | Callable[[], BaseException] | None = None
    ) -> T:
        """Return :meth:`get_optional` or raise if it is ``None``.

        *error* may be a message for :class:`SettingStateError` or a factory
        returning the exception to raise.
        """
        value = self.get_optional()
        if value is not None:
            return value
        if error is None:
            raise SettingStateError(NULL_VALUE_MESSAGE)
        if isinstance(error, str):
            raise SettingStateError(error)
        raise error()

    # -- writes ------------------------------------------------------------

    def set_value(self, value: T | None) -> None:
        """Store *value* and notify listeners in registration order."""
        if value is None and not self._can_be_null:
            raise InvalidArgumentError("Setting value cannot be null")
        logger.debug("setting %s = %r", self._id, value)
        self._value = value
        self._listeners.notify(self._value)

    def force_update(self) -> None:
        """Re-apply the stored value so listeners refresh derived state."""
        self.set_value(self._value)

    def reset(self) -> None:
        """Restore the default value and notify listeners."""
        self.set_value(self._default_value)

    def add_listener(self, listener: Callable[[T | None], Any]) -> None:
        self._listeners.add(listener)

    def remove_listener(self, listener: Callable[[T | None], Any]) -> None:
        self._listeners.remove(listener)

    # -- documents ---------------------------------------------------------

    def to_json(self) -> Document | None:
        """Serialise the stored value, or return ``None`` without a codec."""
        if self._codec is None:
            return None
        return self._codec.serialize(self._value)

    def from_json(self, document: Document | None) -> T | None:
        """Replace the value from *document* without notifying listeners.

        A ``None`` document clears nullable settings and restores the default
        of the others.
        """
        if self._codec is None:
            raise SettingStateError(f"Setting '{self._id}' has no codec to deserialize with")
        if document is None:
            self._value = None if self._can_be_null else self._default_value
        else:
            self._value = self._codec.deserialize(document)
        logger.debug("setting %s loaded %r", self._id, self._value)
        return self._value

    def from_json_update(self, document: Document | None) -> T | None:
        """Like :meth:`from_json`, then notify listeners once."""
        value = self.from_json(document)
        self._listeners.notify(value)
        return value

    # -- controls ----------------------------------------------------------

    def read_value_from_node(self, control: Any) -> T | None:
        """Read the value shown by *control* and store it via :meth:`set_value`."""
        if self._codec is None:
            return None
        control_type = self._codec.control_type
        if control_type is not None and not isinstance(control, control_type):
            raise TypeMismatchError(
                f"Codec for setting '{self._id}' does not support reading from "
                f"{type(control).__name__}"
            )
        try:
            value = self._codec.control_to_value(control)
        except TypeError as exc:
            raise TypeMismatchError(
                f"Codec for setting '{self._id}' does not support reading from node"
            ) from exc
        self.set_value(value)
        return value

    def create_node(self) -> Any | None:
        """Return a control showing the stored value, or ``None`` without a codec."""
        if self._codec is None:
            return None
        return self._codec.value_to_control(self._value)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id!r}, tree_path={self._tree_path!r}, "
            f"value={self._value!r})"
        )


class Builder(Generic[T]):
    """Fluent assembly of a :class:`Setting`.

    ``id`` and ``tree_path`` default to ``"undefined"``; ``codec`` and
    ``type`` must be supplied before :meth:`build`.
    """

    def __init__(self) -> None:
        self._id: str | None = "undefined"
        self._tree_path: str | None = "undefined"
        self._codec: SettingCodec[T] | None = None
        self._type: type[T] | None = None
        self._can_be_null = False
        self._default_value: T | None = None
        self._listeners: list[Callable[[T | None], Any]] = []

    def id(self, id: str | None) -> Builder[T]:
        self._id = id
        return self

    def tree_path(self, tree_path: str | None) -> Builder[T]:
        self._tree_path = tree_path
        return self

    def codec(self, codec: SettingCodec[T] | None) -> Builder[T]:
        self._codec = codec
        return self

    def type(self, type: type[T] | None) -> Builder[T]:
        self._type = type
        return self

    def can_be_null(self, can_be_null: bool = True) -> Builder[T]:
        self._can_be_null = can_be_null
        return self

    def default_value(self, default_value: T | None) -> Builder[T]:
        self._default_value = default_value
        return self

    def add_listener(self, listener: Callable[[T | None], Any]) -> Builder[T]:
        if listener is None:
            raise InvalidArgumentError("Listener cannot be null")
        self._listeners.append(listener)
        return self

    def build(self) -> Setting[T]:
        missing = [
            name
            for name, val in (
                ("id", self._id),
                ("tree_path", self._tree_path),
                ("codec", self._codec),
                ("type", self._type),
            )
            if val is None
        ]
        if missing:
            raise IncompleteConfigurationError(
                f"Setting is missing required fields: {', '.join(missing)}"
            )
        setting = Setting(
            self._id,
            self._tree_path,
            self._codec,
            self._type,
            can_be_null=self._can_be_null,
            default_value=self._default_value,
        )
        for listener in self._listeners:
            setting.add_listener(listener)
        return setting


__all__ = ["Builder", "NULL_VALUE_MESSAGE", "Setting"]
