"""Delimiter set used by every encode and decode operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Dialect:
    """The six literals that make up the wire format.

    The defaults are the legacy set; changing any of them produces strings
    that other readers of the format will not understand.
    """

    splitter: str = "~"
    obj_start: str = "{"
    obj_end: str = "}"
    separator: str = "#"
    list_sep: str = "&"
    null: str = "`null`"

    def __post_init__(self) -> None:
        chars = self.delimiters
        for ch in chars:
            if len(ch) != 1:
                raise ValueError(f"delimiter must be a single character, got {ch!r}")
        if len(set(chars)) != len(chars):
            raise ValueError(f"delimiters must be distinct, got {chars!r}")
        if not self.null:
            raise ValueError("null literal must not be empty")
        clash = [ch for ch in chars if ch in self.null]
        if clash:
            raise ValueError(f"null literal {self.null!r} contains delimiter {clash[0]!r}")

    @property
    def delimiters(self) -> tuple[str, ...]:
        return (self.splitter, self.obj_start, self.obj_end, self.separator, self.list_sep)

    def envelope(self, content: str) -> str:
        """Wrap *content* in one pair of object markers."""
        return self.obj_start + content + self.obj_end


DEFAULT = Dialect()

SPLITTER = DEFAULT.splitter
OBJ_START = DEFAULT.obj_start
OBJ_END = DEFAULT.obj_end
SEPARATOR = DEFAULT.separator
LIST_SEP = DEFAULT.list_sep
NULL_SENTINEL = DEFAULT.null
