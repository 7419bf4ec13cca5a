"""Tests for the Object Codec."""

import pytest

from fieldstring.errors import (
    ConstructionError,
    FormatError,
    TypeConversionError,
    UnknownRecordError,
)
from fieldstring.objects import decode_object, dumps, encode_object, loads, strip_envelope, wrap_object
from fieldstring.splitter import parse_fields

from cinema import Holder, Person, Point, Review


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def test_person_field_string():
    assert Person(age=5, city=None).to_field_string() == "age#5~city#`null`"

def test_nested_record():
    assert Holder(Point(1)).to_field_string() == "a#{x#1}"

def test_nested_record_inner_parse():
    inner = strip_envelope(parse_fields("a#{x#1}")["a"])
    assert inner == "x#1"
    assert parse_fields(inner) == {"x": "1"}

def test_encode_object():
    assert encode_object(Point(3), "p") == "p#{x#3}"

def test_encode_null_object():
    assert encode_object(None, "a") == "a#{`null`}"

def test_wrap_object():
    assert wrap_object(Point(2)) == "{x#2}"
    assert wrap_object(None) == "{`null`}"


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def test_decode_object():
    assert decode_object(Point, "{x#7}") == Point(7)

def test_decode_null_object():
    assert decode_object(Point, "{`null`}") is None

def test_decode_by_registered_tag():
    assert decode_object("Review", "{first#Great~second#4.5}") == Review("Great", 4.5)

def test_decode_populated_in_place():
    """Person.from_field_string returns None and fills itself."""
    assert decode_object(Person, "{age#5~city#`null`}") == Person(5, None)

def test_decode_nested():
    assert decode_object(Holder, "{a#{x#9}}") == Holder(Point(9))
    assert decode_object(Holder, "{a#{`null`}}") == Holder(None)

@pytest.mark.parametrize("text", ["x#7", "{x#7", "x#7}", "", "{"])
def test_decode_requires_envelope(text):
    with pytest.raises(FormatError):
        decode_object(Point, text)

def test_decode_unbalanced_inner():
    with pytest.raises(FormatError, match="unbalanced"):
        decode_object(Point, "{x#1}}")

def test_decode_missing_field():
    with pytest.raises(FormatError, match="missing field 'x'"):
        decode_object(Point, "{y#1}")

def test_decode_bad_scalar_propagates():
    with pytest.raises(TypeConversionError):
        decode_object(Point, "{x#abc}")

def test_decode_unknown_tag():
    with pytest.raises(UnknownRecordError) as info:
        decode_object("Spaceship", "{x#1}")
    assert isinstance(info.value, KeyError)
    assert "Spaceship" in str(info.value)


# ---------------------------------------------------------------------------
# ConstructionError
# ---------------------------------------------------------------------------

def _broken_factory():
    raise RuntimeError("no default constructor")


class _Exploding:
    def to_field_string(self):
        return ""

    def from_field_string(self, s):
        raise AttributeError("boom")


def test_factory_failure():
    with pytest.raises(ConstructionError, match="instantiation failed") as info:
        decode_object(_broken_factory, "{x#1}")
    assert isinstance(info.value.__cause__, RuntimeError)
    assert info.value.factory is _broken_factory

def test_population_failure():
    with pytest.raises(ConstructionError, match="population failed") as info:
        decode_object(_Exploding, "{x#1}")
    assert isinstance(info.value.__cause__, AttributeError)


# ---------------------------------------------------------------------------
# dumps / loads
# ---------------------------------------------------------------------------

def test_dumps_record():
    assert dumps(Person(5, "Paris")) == "age#5~city#Paris"

def test_dumps_none():
    assert dumps(None) == "`null`"

def test_loads():
    assert loads(Person, "age#5~city#Paris") == Person(5, "Paris")

def test_loads_null():
    assert loads(Person, "`null`") is None
