from __future__ import annotations

import copy
import pickle

from pysetting import ListenerError, SettingError


def test_listener_error_message_names_listeners():
    err = ListenerError([(len, ValueError("bad"))])
    assert isinstance(err, SettingError)
    assert str(err) == "1 listener(s) failed: len"


def test_listener_error_copies_and_pickles():
    err = ListenerError([(len, ValueError("bad"))])
    clone = copy.copy(err)
    assert clone.failures[0][0] is len
    restored = pickle.loads(pickle.dumps(err))
    assert restored.failures[0][0] is len
    assert str(restored) == str(err)
