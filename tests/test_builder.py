from __future__ import annotations

import pytest

from pysetting import (
    Builder,
    IncompleteConfigurationError,
    InvalidArgumentError,
    Setting,
)
from tests.utils import Recorder, fake_int_codec


def test_defaults():
    s = Builder().codec(fake_int_codec()).type(int).build()
    assert s.id == "undefined"
    assert s.tree_path == "undefined"
    assert s.can_be_null is False
    assert s.default_value is None
    assert s.value is None


def test_builder_shortcuts():
    b = Setting.builder(int, "retries")
    s = b.codec(fake_int_codec()).default_value(3).build()
    assert s.id == "retries"
    assert s.type is int
    assert s.get_or_default_value() == 3


def test_missing_codec():
    with pytest.raises(IncompleteConfigurationError, match="codec"):
        Setting.builder(int, "retries").build()


def test_missing_type():
    with pytest.raises(IncompleteConfigurationError, match="type"):
        Builder().codec(fake_int_codec()).build()


@pytest.mark.parametrize("field", ["id", "tree_path"])
def test_explicit_none_identity_fields(field):
    b = Setting.builder(int).codec(fake_int_codec())
    getattr(b, field)(None)
    with pytest.raises(IncompleteConfigurationError, match=field):
        b.build()


def test_pending_listeners_registered_in_order():
    log: list = []
    first, second = Recorder("first", log), Recorder("second", log)
    s = (
        Setting.builder(int, "retries")
        .codec(fake_int_codec())
        .add_listener(first)
        .add_listener(second)
        .build()
    )
    assert s.listeners == (first, second)
    s.set_value(1)
    assert log == [("first", 1), ("second", 1)]


def test_add_listener_none():
    with pytest.raises(InvalidArgumentError):
        Builder().add_listener(None)


def test_nullable_flag():
    s = Setting.builder(int).codec(fake_int_codec()).can_be_null().build()
    s.set_value(None)
    assert s.get_optional() is None
