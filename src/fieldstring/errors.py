"""Error types raised by the fieldstring codec."""

from __future__ import annotations


class FieldStringError(Exception):
    """Base class for every error raised while encoding or decoding."""


class FormatError(FieldStringError, ValueError):
    """The serialized text does not follow the field-string grammar."""


class TypeConversionError(FieldStringError, ValueError):
    """A raw scalar value could not be parsed as the requested type."""

    def __init__(self, text: str, kind: str) -> None:
        super().__init__(f"cannot convert {text!r} to {kind}")
        self.text = text
        self.kind = kind


class ConstructionError(FieldStringError):
    """A record could not be instantiated or populated from its fields."""

    def __init__(self, factory: object, message: str) -> None:
        name = getattr(factory, "__qualname__", None) or repr(factory)
        super().__init__(f"cannot build {name}: {message}")
        self.factory = factory


class UnknownRecordError(FieldStringError, KeyError):
    """No record factory is registered under the requested tag."""

    def __str__(self) -> str:
        return f"no record registered as {self.args[0]!r}"
