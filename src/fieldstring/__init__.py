"""fieldstring — flat delimited-string codec for nested records."""

from .dialect import (
    DEFAULT,
    LIST_SEP,
    NULL_SENTINEL,
    OBJ_END,
    OBJ_START,
    SEPARATOR,
    SPLITTER,
    Dialect,
)
from .errors import (
    ConstructionError,
    FieldStringError,
    FormatError,
    TypeConversionError,
    UnknownRecordError,
)
from .pairs import make_pair
from .primitives import (
    decode_bool,
    decode_date,
    decode_datetime,
    decode_float,
    decode_int,
    decode_scalar,
    decode_string,
    encode_bool,
    encode_date,
    encode_datetime,
    encode_float,
    encode_int,
    encode_scalar,
    encode_string,
)
from .splitter import join_pairs, parse_fields, require_field
from .record import Record, RecordRegistry, register_record, registry
from .objects import decode_object, dumps, encode_object, loads
from .lists import decode_list, decode_string_list, encode_list, encode_string_list
from .reader import FieldReader
from .writer import FieldWriter
from .repl import FieldStringShell

__all__ = [
    "DEFAULT",
    "LIST_SEP",
    "NULL_SENTINEL",
    "OBJ_END",
    "OBJ_START",
    "SEPARATOR",
    "SPLITTER",
    "Dialect",
    "ConstructionError",
    "FieldStringError",
    "FormatError",
    "TypeConversionError",
    "UnknownRecordError",
    "make_pair",
    "encode_scalar",
    "decode_scalar",
    "encode_string",
    "decode_string",
    "encode_int",
    "decode_int",
    "encode_float",
    "decode_float",
    "encode_datetime",
    "decode_datetime",
    "encode_date",
    "decode_date",
    "encode_bool",
    "decode_bool",
    "join_pairs",
    "parse_fields",
    "require_field",
    "Record",
    "RecordRegistry",
    "register_record",
    "registry",
    "encode_object",
    "decode_object",
    "dumps",
    "loads",
    "encode_list",
    "encode_string_list",
    "decode_list",
    "decode_string_list",
    "FieldReader",
    "FieldWriter",
    "FieldStringShell",
]
