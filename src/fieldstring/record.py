"""Record contract and the registry of record constructors."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar, runtime_checkable

from .errors import UnknownRecordError

logger = logging.getLogger(__name__)


@runtime_checkable
class Record(Protocol):
    """A type that can write its own fields and read them back.

    ``to_field_string`` returns the joined pairs for every field (see
    :func:`fieldstring.splitter.join_pairs`). ``from_field_string`` receives
    that string with the enclosing object markers already removed, populates
    the record and returns it. Returning ``None`` means "populated in place".
    """

    def to_field_string(self) -> str: ...

    def from_field_string(self, s: str) -> Record | None: ...


R = TypeVar("R", bound=Record)
RecordFactory = Callable[[], Record]


@dataclass
class RecordRegistry:
    """Zero-argument record constructors keyed by a type tag."""

    factories: dict[str, RecordFactory] = field(default_factory=dict)

    def register(self, tag: str, factory: RecordFactory) -> None:
        existing = self.factories.get(tag)
        if existing is not None and existing is not factory:
            raise ValueError(f"record tag {tag!r} already registered to {existing!r}")
        self.factories[tag] = factory
        logger.debug("registered record %r -> %r", tag, factory)

    def resolve(self, tag: str) -> RecordFactory:
        try:
            return self.factories[tag]
        except KeyError:
            raise UnknownRecordError(tag) from None

    def __contains__(self, tag: object) -> bool:
        return tag in self.factories


registry = RecordRegistry()


def register_record(tag: str | None = None, *, into: RecordRegistry | None = None):
    """Class decorator registering a record type under *tag*.

    The tag defaults to the class name::

        @register_record()
        class Review:
            ...

        decode_object("Review", "{first#Great~second#4.5}")
    """
    target = registry if into is None else into

    def decorator(cls: type[R]) -> type[R]:
        target.register(tag or cls.__name__, cls)
        return cls

    return decorator


def resolve_factory(
    factory: RecordFactory | str, reg: RecordRegistry | None = None
) -> RecordFactory:
    """Return *factory* itself, or the constructor registered under that tag."""
    if isinstance(factory, str):
        return (registry if reg is None else reg).resolve(factory)
    return factory
