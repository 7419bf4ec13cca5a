"""Typed access to the fields of a parsed record string."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime

from .dialect import DEFAULT, Dialect
from .errors import FormatError
from .lists import decode_list, decode_string_list
from .objects import decode_object
from .primitives import (
    decode_bool,
    decode_date,
    decode_datetime,
    decode_float,
    decode_int,
    decode_string,
)
from .record import Record, RecordFactory, RecordRegistry
from .splitter import parse_fields, require_field


class FieldReader:
    """Wraps a field mapping and decodes one field per call.

    Every getter raises :class:`FormatError` when the field is missing, so a
    record's ``from_field_string`` can be written as a flat list of lookups::

        def from_field_string(self, s):
            r = FieldReader.parse(s)
            self.title = r.get_string("title")
            self.rating = r.get_float("rating")
            return self
    """

    def __init__(
        self,
        fields: Mapping[str, str],
        *,
        dialect: Dialect = DEFAULT,
        registry: RecordRegistry | None = None,
    ) -> None:
        self.fields = fields
        self.dialect = dialect
        self.registry = registry

    @classmethod
    def parse(
        cls, s: str, *, dialect: Dialect = DEFAULT, registry: RecordRegistry | None = None
    ) -> FieldReader:
        fields = parse_fields(s, dialect=dialect)
        if fields is None:
            raise FormatError("cannot read fields of an absent record")
        return cls(fields, dialect=dialect, registry=registry)

    def __contains__(self, name: object) -> bool:
        return name in self.fields

    def raw(self, name: str) -> str:
        return require_field(self.fields, name)

    # -- Scalars --------------------------------------------------------

    def get_string(self, name: str) -> str | None:
        return decode_string(self.raw(name), dialect=self.dialect)

    def get_int(self, name: str) -> int:
        return decode_int(self.raw(name))

    def get_float(self, name: str) -> float:
        return decode_float(self.raw(name))

    def get_bool(self, name: str) -> bool:
        return decode_bool(self.raw(name))

    def get_datetime(self, name: str) -> datetime:
        return decode_datetime(self.raw(name))

    def get_date(self, name: str) -> date:
        return decode_date(self.raw(name))

    # -- Structures -----------------------------------------------------

    def get_object(self, name: str, factory: RecordFactory | str) -> Record | None:
        return decode_object(
            factory, self.raw(name), dialect=self.dialect, registry=self.registry
        )

    def get_list(
        self, name: str, factory: RecordFactory | str, *, lenient: bool = False
    ) -> list[Record | None] | None:
        return decode_list(
            factory,
            self.raw(name),
            lenient=lenient,
            dialect=self.dialect,
            registry=self.registry,
        )

    def get_string_list(self, name: str) -> list[str | None] | None:
        return decode_string_list(self.raw(name), dialect=self.dialect)
