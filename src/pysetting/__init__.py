from .codecs import (
    CODECS,
    SettingCodec,
    boolean_codec,
    codec_for,
    enum_codec,
    integer_codec,
    number_codec,
    register_codec,
    string_codec,
    string_list_codec,
)
from .config import configure_logging
from .errors import (
    IncompleteConfigurationError,
    InvalidArgumentError,
    ListenerError,
    SettingError,
    SettingStateError,
    TypeMismatchError,
    UnknownCodecError,
)
from .setting import Builder, Setting

configure_logging()


__all__ = [
    "Builder",
    "CODECS",
    "IncompleteConfigurationError",
    "InvalidArgumentError",
    "ListenerError",
    "Setting",
    "SettingCodec",
    "SettingError",
    "SettingStateError",
    "TypeMismatchError",
    "UnknownCodecError",
    "boolean_codec",
    "codec_for",
    "configure_logging",
    "enum_codec",
    "integer_codec",
    "number_codec",
    "register_codec",
    "string_codec",
    "string_list_codec",
]
