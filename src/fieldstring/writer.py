"""Builds a record's field string one pair at a time."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from .dialect import DEFAULT, Dialect
from .lists import encode_list, encode_string_list
from .objects import encode_object
from .primitives import (
    encode_bool,
    encode_date,
    encode_datetime,
    encode_float,
    encode_int,
    encode_string,
)
from .record import Record
from .splitter import join_pairs


class FieldWriter:
    """Collects encoded pairs; every ``put_*`` returns the writer for chaining.

    Usage::

        def to_field_string(self):
            return (
                FieldWriter()
                .put_string("title", self.title)
                .put_float("rating", self.rating)
                .build()
            )
    """

    def __init__(self, *, dialect: Dialect = DEFAULT) -> None:
        self.dialect = dialect
        self.pairs: list[str] = []

    def put_string(self, name: str, value: str | None) -> FieldWriter:
        self.pairs.append(encode_string(value, name, dialect=self.dialect))
        return self

    def put_int(self, name: str, value: int) -> FieldWriter:
        self.pairs.append(encode_int(value, name, dialect=self.dialect))
        return self

    def put_float(self, name: str, value: float) -> FieldWriter:
        self.pairs.append(encode_float(value, name, dialect=self.dialect))
        return self

    def put_bool(self, name: str, value: bool) -> FieldWriter:
        self.pairs.append(encode_bool(value, name, dialect=self.dialect))
        return self

    def put_datetime(self, name: str, value: datetime) -> FieldWriter:
        self.pairs.append(encode_datetime(value, name, dialect=self.dialect))
        return self

    def put_date(self, name: str, value: date) -> FieldWriter:
        self.pairs.append(encode_date(value, name, dialect=self.dialect))
        return self

    def put_object(self, name: str, value: Record | None) -> FieldWriter:
        self.pairs.append(encode_object(value, name, dialect=self.dialect))
        return self

    def put_list(self, name: str, items: Iterable[Record | None] | None) -> FieldWriter:
        self.pairs.append(encode_list(items, name, dialect=self.dialect))
        return self

    def put_string_list(self, name: str, items: Iterable[str | None] | None) -> FieldWriter:
        self.pairs.append(encode_string_list(items, name, dialect=self.dialect))
        return self

    def build(self) -> str:
        return join_pairs(self.pairs, dialect=self.dialect)
