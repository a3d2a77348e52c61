from __future__ import annotations

import enum

from pysetting.codecs import SettingCodec, integer_codec


class Theme(enum.Enum):
    LIGHT = "light"
    DARK = "dark"


class FakeEditor:
    """Toolkit free stand-in for an editor widget."""

    def __init__(self, value: object | None = None) -> None:
        self.value = value
        self.set_calls = 0

    def get_value(self) -> object | None:
        return self.value

    def set_value(self, value: object | None) -> None:
        self.value = value
        self.set_calls += 1


class Recorder:
    """Listener collecting every value it is called with."""

    def __init__(self, name: str = "rec", log: list | None = None) -> None:
        self.name = name
        self.values: list[object] = []
        self.log = log

    def __call__(self, value: object) -> None:
        self.values.append(value)
        if self.log is not None:
            self.log.append((self.name, value))


def fake_int_codec() -> SettingCodec[int]:
    return integer_codec(control_factory=FakeEditor)


class EntryLikeEditor(FakeEditor):
    """Fake editor that, like a text entry, reports empty text as ``None``."""

    def get_value(self) -> object | None:
        return self.value if self.value not in (None, "") else None
