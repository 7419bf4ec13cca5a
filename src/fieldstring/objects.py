"""Object Codec: nested records wrapped in object markers."""

from __future__ import annotations

from .dialect import DEFAULT, Dialect
from .errors import ConstructionError, FieldStringError, FormatError
from .pairs import make_pair
from .record import Record, RecordFactory, RecordRegistry, resolve_factory


def wrap_object(record: Record | None, *, dialect: Dialect = DEFAULT) -> str:
    """``{fields}`` for a record, ``{`null`}`` for ``None``."""
    if record is None:
        return dialect.envelope(dialect.null)
    return dialect.envelope(record.to_field_string())


def encode_object(record: Record | None, name: str, *, dialect: Dialect = DEFAULT) -> str:
    return make_pair(name, wrap_object(record, dialect=dialect), dialect=dialect)


def strip_envelope(text: str, *, dialect: Dialect = DEFAULT) -> str:
    """Remove exactly one leading ``{`` and one trailing ``}``."""
    if (
        len(text) < 2
        or not text.startswith(dialect.obj_start)
        or not text.endswith(dialect.obj_end)
    ):
        raise FormatError(f"expected an object envelope, got {text!r}")
    return text[1:-1]


def decode_object(
    factory: RecordFactory | str,
    text: str,
    *,
    dialect: Dialect = DEFAULT,
    registry: RecordRegistry | None = None,
) -> Record | None:
    """Rebuild a record from its ``{...}`` envelope.

    *factory* is a zero-argument constructor, or a tag looked up in
    *registry* (the module registry by default). ``{`null`}`` decodes to
    ``None``.

    Codec errors raised while the record populates itself propagate as they
    are; anything else is wrapped in :class:`ConstructionError`.
    """
    inner = strip_envelope(text, dialect=dialect)
    if inner == dialect.null:
        return None

    ctor = resolve_factory(factory, registry)
    try:
        instance = ctor()
    except Exception as exc:
        raise ConstructionError(ctor, f"instantiation failed: {exc}") from exc

    try:
        result = instance.from_field_string(inner)
    except FieldStringError:
        raise
    except Exception as exc:
        raise ConstructionError(ctor, f"population failed: {exc}") from exc
    return instance if result is None else result


def dumps(record: Record | None, *, dialect: Dialect = DEFAULT) -> str:
    """Serialize a top-level record, without an enclosing envelope."""
    if record is None:
        return dialect.null
    return record.to_field_string()


def loads(
    factory: RecordFactory | str,
    s: str,
    *,
    dialect: Dialect = DEFAULT,
    registry: RecordRegistry | None = None,
) -> Record | None:
    """Inverse of :func:`dumps`."""
    return decode_object(factory, dialect.envelope(s), dialect=dialect, registry=registry)
