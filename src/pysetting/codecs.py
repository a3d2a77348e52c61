"""Codecs converting setting values to documents and editor widgets.

A codec is a bundle of four conversions owned by whoever defines a kind of
setting.  Documents are JSON-compatible Python values (``None``, ``bool``,
``int``, ``float``, ``str``, lists and dicts); controls are editor widgets as
described by :class:`~pysetting.ui.widgets.EditorWidget`.

Built-in codecs are available through :data:`CODECS`::

    codec = codec_for("integer")
    codec.serialize(3)        # -> 3
    codec.deserialize("42")   # -> 42
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .errors import UnknownCodecError
from .ui.widgets import EditorWidget, check_editor, choice_editor, entry_editor

T = TypeVar("T")

# JSON-compatible value tree
Document = Any

ControlFactory = Callable[[], EditorWidget]


@dataclass(frozen=True)
class SettingCodec(Generic[T]):
    """Conversions between a value and its document and control forms.

    ``control_type`` is checked by :meth:`Setting.read_value_from_node`
    before ``control_to_value`` is called; ``None`` accepts any control.
    """

    name: str
    serialize: Callable[[T | None], Document]
    deserialize: Callable[[Document], T | None]
    value_to_control: Callable[[T | None], Any]
    control_to_value: Callable[[Any], T | None]
    control_type: type | None = None


CODECS: dict[str, Callable[..., SettingCodec]] = {}


def register_codec(name: str) -> Callable[[Callable[..., SettingCodec]], Callable[..., SettingCodec]]:
    """Register a codec factory under *name* and return it for decorator use."""

    def decorator(factory: Callable[..., SettingCodec]) -> Callable[..., SettingCodec]:
        CODECS[name] = factory
        return factory

    return decorator


def codec_for(name: str, **kwargs: Any) -> SettingCodec:
    """Build the registered codec *name*, passing *kwargs* to its factory."""
    try:
        factory = CODECS[name]
    except KeyError:
        raise UnknownCodecError(f"No codec registered for {name!r}") from None
    return factory(**kwargs)


def _editor_codec(
    name: str,
    *,
    serialize: Callable[[Any], Document],
    deserialize: Callable[[Document], Any],
    to_text: Callable[[Any], object],
    from_text: Callable[[object], Any],
    control_factory: ControlFactory,
) -> SettingCodec:
    """Assemble a codec whose controls hold ``to_text`` renderings of values."""

    def value_to_control(value: Any) -> EditorWidget:
        widget = control_factory()
        widget.set_value(None if value is None else to_text(value))
        return widget

    def control_to_value(widget: EditorWidget) -> Any:
        return from_text(widget.get_value())

    return SettingCodec(
        name=name,
        serialize=lambda v: None if v is None else serialize(v),
        deserialize=lambda d: None if d is None else deserialize(d),
        value_to_control=value_to_control,
        control_to_value=control_to_value,
        control_type=EditorWidget,
    )


# -- strings ---------------------------------------------------------------


def _expect_str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected str, got {type(value).__name__}")
    return value


@register_codec("string")
def string_codec(control_factory: ControlFactory | None = None) -> SettingCodec[str]:
    """Plain text.  An empty editor reads back as the empty string."""
    return _editor_codec(
        "string",
        serialize=_expect_str,
        deserialize=_expect_str,
        to_text=str,
        from_text=lambda raw: "" if raw is None else str(raw),
        control_factory=control_factory or entry_editor,
    )


# -- numbers ---------------------------------------------------------------


def _to_int(raw: Any) -> int:
    if isinstance(raw, bool):
        raise TypeError("expected int, got bool")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not raw.is_integer():
            raise ValueError(f"not an integer: {raw!r}")
        return int(raw)
    if isinstance(raw, str):
        return int(raw.strip())
    raise TypeError(f"expected int, got {type(raw).__name__}")


def _serialize_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    return value


@register_codec("integer")
def integer_codec(control_factory: ControlFactory | None = None) -> SettingCodec[int]:
    return _editor_codec(
        "integer",
        serialize=_serialize_int,
        deserialize=_to_int,
        to_text=str,
        from_text=lambda raw: None if raw is None else _to_int(raw),
        control_factory=control_factory or entry_editor,
    )


def _to_float(raw: Any) -> float:
    if isinstance(raw, bool):
        raise TypeError("expected number, got bool")
    if isinstance(raw, int | float):
        return float(raw)
    if isinstance(raw, str):
        return float(raw.strip())
    raise TypeError(f"expected number, got {type(raw).__name__}")


def _serialize_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise TypeError(f"expected number, got {type(value).__name__}")
    return float(value)


@register_codec("number")
def number_codec(control_factory: ControlFactory | None = None) -> SettingCodec[float]:
    return _editor_codec(
        "number",
        serialize=_serialize_float,
        deserialize=_to_float,
        to_text=str,
        from_text=lambda raw: None if raw is None else _to_float(raw),
        control_factory=control_factory or entry_editor,
    )


# -- booleans --------------------------------------------------------------


def _to_bool(raw: Any) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in {"true", "1"}:
            return True
        if lowered in {"false", "0"}:
            return False
        raise ValueError(f"invalid boolean: {raw!r}")
    raise TypeError(f"expected bool, got {type(raw).__name__}")


def _serialize_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise TypeError(f"expected bool, got {type(value).__name__}")
    return value


@register_codec("boolean")
def boolean_codec(control_factory: ControlFactory | None = None) -> SettingCodec[bool]:
    return _editor_codec(
        "boolean",
        serialize=_serialize_bool,
        deserialize=_to_bool,
        to_text=bool,
        from_text=lambda raw: None if raw is None else _to_bool(raw),
        control_factory=control_factory or check_editor,
    )


# -- string lists ----------------------------------------------------------


def _to_str_list(raw: Any) -> list[str]:
    if isinstance(raw, str):
        return [p.strip() for p in raw.split(",") if p.strip()]
    if isinstance(raw, list) and all(isinstance(p, str) for p in raw):
        return list(raw)
    raise TypeError("expected list[str]")


def _serialize_str_list(value: Any) -> list[str]:
    if not isinstance(value, list | tuple) or not all(isinstance(p, str) for p in value):
        raise TypeError("expected list[str]")
    return list(value)


@register_codec("string_list")
def string_list_codec(control_factory: ControlFactory | None = None) -> SettingCodec[list[str]]:
    """Lists of strings; editors show them as one comma separated line.

    The editor form is lossy: commas split elements, surrounding whitespace
    is stripped and blank elements are dropped, so ``["a,b", " c "]`` reads
    back as ``["a", "b", "c"]``.  Documents keep elements exactly.  An empty
    editor reads back as an empty list.
    """
    return _editor_codec(
        "string_list",
        serialize=_serialize_str_list,
        deserialize=_to_str_list,
        to_text=", ".join,
        from_text=lambda raw: [] if raw is None else _to_str_list(raw),
        control_factory=control_factory or entry_editor,
    )


# -- enums -----------------------------------------------------------------

E = TypeVar("E", bound=Enum)


@register_codec("enum")
def enum_codec(enum_cls: type[E], control_factory: ControlFactory | None = None) -> SettingCodec[E]:
    """Enum members stored by name; editors offer the member names."""

    def to_member(raw: Any) -> E:
        if isinstance(raw, enum_cls):
            return raw
        if not isinstance(raw, str):
            raise TypeError(f"expected {enum_cls.__name__} name, got {type(raw).__name__}")
        try:
            return enum_cls[raw]
        except KeyError:
            raise ValueError(f"{raw!r} is not a member of {enum_cls.__name__}") from None

    def to_name(value: Any) -> str:
        if not isinstance(value, enum_cls):
            raise TypeError(f"expected {enum_cls.__name__}, got {type(value).__name__}")
        return value.name

    names = [member.name for member in enum_cls]
    return _editor_codec(
        f"enum:{enum_cls.__name__}",
        serialize=to_name,
        deserialize=to_member,
        to_text=to_name,
        from_text=lambda raw: None if raw is None else to_member(raw),
        control_factory=control_factory or (lambda: choice_editor(names)),
    )


__all__ = [
    "CODECS",
    "Document",
    "SettingCodec",
    "boolean_codec",
    "codec_for",
    "enum_codec",
    "integer_codec",
    "number_codec",
    "register_codec",
    "string_codec",
    "string_list_codec",
]
