"""Key-value pair construction."""

from __future__ import annotations

from .dialect import DEFAULT, Dialect


def make_pair(name: str, value_text: str, *, dialect: Dialect = DEFAULT) -> str:
    """Return ``name#value_text``.

    There is no inverse here: splitting a pair must track marker nesting and
    is done by :func:`fieldstring.splitter.parse_fields`.
    """
    return name + dialect.separator + value_text
