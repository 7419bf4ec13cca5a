"""Scalar encoding: strings, numbers, dates, booleans and the null sentinel."""

from __future__ import annotations

import math
import re
from datetime import date, datetime

from .dialect import DEFAULT, Dialect
from .errors import TypeConversionError
from .pairs import make_pair

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(NaN|Infinity|(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)")

Scalar = str | int | float | bool | date | datetime | None


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def encode_string(value: str | None, name: str, *, dialect: Dialect = DEFAULT) -> str:
    """``name#value``, or ``name#`null``` when *value* is ``None``.

    The text is written verbatim; delimiter characters inside it are not
    escaped.
    """
    return make_pair(name, dialect.null if value is None else value, dialect=dialect)


def decode_string(text: str, *, dialect: Dialect = DEFAULT) -> str | None:
    if text == dialect.null:
        return None
    return text


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def decode_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise TypeConversionError(text, "int")
    return int(text)


def _format_float(value: float) -> str:
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def decode_float(text: str) -> float:
    if not _FLOAT_RE.fullmatch(text):
        raise TypeConversionError(text, "float")
    return float(text)


def encode_int(value: int, name: str, *, dialect: Dialect = DEFAULT) -> str:
    return make_pair(name, str(int(value)), dialect=dialect)


def encode_float(value: float, name: str, *, dialect: Dialect = DEFAULT) -> str:
    return make_pair(name, _format_float(value), dialect=dialect)


# ---------------------------------------------------------------------------
# Dates and booleans
# ---------------------------------------------------------------------------

def decode_datetime(text: str) -> datetime:
    """Parse ISO-8601 text, including the shortened ``YYYY-MM-DDTHH:MM`` form."""
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise TypeConversionError(text, "datetime") from exc


def decode_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as exc:
        raise TypeConversionError(text, "date") from exc


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def decode_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise TypeConversionError(text, "bool")


def encode_datetime(value: datetime, name: str, *, dialect: Dialect = DEFAULT) -> str:
    return make_pair(name, value.isoformat(), dialect=dialect)


def encode_date(value: date, name: str, *, dialect: Dialect = DEFAULT) -> str:
    return make_pair(name, value.isoformat(), dialect=dialect)


def encode_bool(value: bool, name: str, *, dialect: Dialect = DEFAULT) -> str:
    return make_pair(name, _format_bool(value), dialect=dialect)


# ---------------------------------------------------------------------------
# Type-dispatched entry points
# ---------------------------------------------------------------------------

def encode_scalar(value: Scalar, name: str, *, dialect: Dialect = DEFAULT) -> str:
    """Encode any supported scalar as a ``name#text`` pair.

    ``bool`` is checked before ``int`` and ``datetime`` before ``date``
    because the first of each pair subclasses the second.
    """
    if value is None or isinstance(value, str):
        return encode_string(value, name, dialect=dialect)
    if isinstance(value, bool):
        return encode_bool(value, name, dialect=dialect)
    if isinstance(value, int):
        return encode_int(value, name, dialect=dialect)
    if isinstance(value, float):
        return encode_float(value, name, dialect=dialect)
    if isinstance(value, datetime):
        return encode_datetime(value, name, dialect=dialect)
    if isinstance(value, date):
        return encode_date(value, name, dialect=dialect)
    raise TypeError(f"unsupported scalar type: {type(value).__name__}")


_PARSERS = {
    int: decode_int,
    float: decode_float,
    bool: decode_bool,
    datetime: decode_datetime,
    date: decode_date,
}


def decode_scalar(text: str, kind: type = str, *, dialect: Dialect = DEFAULT) -> Scalar:
    """Parse *text* back into a value of *kind*.

    ``str`` honours the null sentinel; every other kind raises
    :class:`TypeConversionError` on malformed text.
    """
    if kind is str:
        return decode_string(text, dialect=dialect)
    try:
        parser = _PARSERS[kind]
    except KeyError:
        raise TypeError(f"unsupported scalar type: {kind!r}") from None
    return parser(text)
