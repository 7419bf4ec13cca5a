"""List Codec: sequences of records or strings inside one envelope.

Elements are split on the list separator without tracking marker depth, so
an element whose content contains ``&`` anywhere, including inside a nested
record, does not survive a round trip. This matches the legacy wire format.

An absent list is written as the bare sentinel (``name#`null```), which keeps
it apart from a list holding one ``None``. A string list holding only ``""``
is written ``{}`` and reads back as ``[]``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .dialect import DEFAULT, Dialect
from .errors import FieldStringError
from .objects import decode_object, strip_envelope, wrap_object
from .pairs import make_pair
from .record import Record, RecordFactory, RecordRegistry, resolve_factory

logger = logging.getLogger(__name__)


def encode_list(
    items: Iterable[Record | None] | None, name: str, *, dialect: Dialect = DEFAULT
) -> str:
    if items is None:
        return make_pair(name, dialect.null, dialect=dialect)
    body = dialect.list_sep.join(wrap_object(item, dialect=dialect) for item in items)
    return make_pair(name, dialect.envelope(body), dialect=dialect)


def encode_string_list(
    items: Iterable[str | None] | None, name: str, *, dialect: Dialect = DEFAULT
) -> str:
    if items is None:
        return make_pair(name, dialect.null, dialect=dialect)
    body = dialect.list_sep.join(dialect.null if item is None else item for item in items)
    return make_pair(name, dialect.envelope(body), dialect=dialect)


def _split_elements(text: str, dialect: Dialect) -> list[str] | None:
    if text == dialect.null:
        return None
    inner = strip_envelope(text, dialect=dialect)
    if not inner:
        return []
    return inner.split(dialect.list_sep)


def decode_list(
    factory: RecordFactory | str,
    text: str,
    *,
    lenient: bool = False,
    dialect: Dialect = DEFAULT,
    registry: RecordRegistry | None = None,
) -> list[Record | None] | None:
    """Decode a list envelope of records.

    With *lenient* set, an element that fails to decode is logged and
    replaced by ``None`` instead of aborting the whole list.
    """
    pieces = _split_elements(text, dialect)
    if pieces is None or pieces == [dialect.null]:
        # ``{`null`}`` was the absent-list form in older data
        return None

    ctor = resolve_factory(factory, registry)
    items: list[Record | None] = []
    for index, piece in enumerate(pieces):
        if piece == dialect.null:
            items.append(None)
            continue
        try:
            items.append(decode_object(ctor, piece, dialect=dialect))
        except FieldStringError as exc:
            if not lenient:
                raise
            logger.warning("dropping list element %d (%r): %s", index, piece, exc)
            items.append(None)
    return items


def decode_string_list(text: str, *, dialect: Dialect = DEFAULT) -> list[str | None] | None:
    pieces = _split_elements(text, dialect)
    if pieces is None:
        return None
    return [None if piece == dialect.null else piece for piece in pieces]
