"""Field-Splitter: joins pairs into a record string and splits it back."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .dialect import DEFAULT, Dialect
from .errors import FormatError


def join_pairs(pairs: Iterable[str], *, dialect: Dialect = DEFAULT) -> str:
    """Join already-formed ``name#value`` strings with the top-level splitter."""
    return dialect.splitter.join(pairs)


def parse_fields(s: str, *, dialect: Dialect = DEFAULT) -> dict[str, str] | None:
    """Split a record string into a ``{name: raw_value}`` mapping.

    Returns ``None`` when *s* is the null sentinel (the record is absent),
    which is distinct from ``{}`` (an empty string, a record without fields).

    Splitter and separator characters between a matched ``{``/``}`` pair are
    payload and never split the enclosing pair. Raw values are returned as
    written; nested envelopes keep their markers.

    Raises :class:`FormatError` when a ``}`` has no opening ``{``, a ``{`` is
    never closed, or a pair has no separator at depth 0.
    """
    if s == dialect.null:
        return None

    fields: dict[str, str] = {}
    if not s:
        return fields

    separator = dialect.separator
    splitter = dialect.splitter
    obj_start = dialect.obj_start
    obj_end = dialect.obj_end

    depth = 0
    pair_start = 0
    boundary = -1

    for i, ch in enumerate(s):
        if ch == separator and boundary == -1 and depth == 0:
            boundary = i
        elif ch == obj_start:
            depth += 1
        elif ch == obj_end:
            depth -= 1
            if depth < 0:
                raise FormatError(f"unbalanced markers at offset {i}")
        elif ch == splitter and depth == 0:
            if boundary == -1:
                raise FormatError(f"missing separator in {s[pair_start:i]!r}")
            fields[s[pair_start:boundary]] = s[boundary + 1:i]
            pair_start = i + 1
            boundary = -1

    if depth != 0:
        raise FormatError(f"unbalanced markers: {depth} left open")
    if boundary == -1:
        raise FormatError(f"missing separator in {s[pair_start:]!r}")
    fields[s[pair_start:boundary]] = s[boundary + 1:]
    return fields


def require_field(fields: Mapping[str, str], name: str) -> str:
    """Look up *name*, raising :class:`FormatError` if the record lacks it."""
    try:
        return fields[name]
    except KeyError:
        raise FormatError(f"missing field {name!r}") from None
