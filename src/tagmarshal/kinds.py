"""
Value classification for the encoder.

Every visited value is classified into one kind of a closed set before it is
encoded. The encoder dispatches on the kind, never on the concrete type.

Sized numeric kinds come from ctypes: c_uint8..c_uint64 are unsigned
integers, c_float is a 32-bit float. Plain Python int and float map to INT
and FLOAT64.
"""

import ctypes
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, is_dataclass
from enum import Enum
from typing import Any


class Kind(str, Enum):
    """Closed set of value kinds understood by the encoder."""

    # Structural
    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    POINTER = "pointer"
    INTERFACE = "interface"

    # Absent
    NIL = "nil"

    # Scalars
    INT = "int"
    UINT = "uint"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    STRING = "string"
    OTHER = "other"


SCALAR_KINDS = frozenset(
    {
        Kind.INT,
        Kind.UINT,
        Kind.FLOAT32,
        Kind.FLOAT64,
        Kind.BOOL,
        Kind.STRING,
        Kind.OTHER,
    }
)

SIGNED_CTYPES = (ctypes.c_byte, ctypes.c_short, ctypes.c_int, ctypes.c_long, ctypes.c_longlong)
UNSIGNED_CTYPES = (
    ctypes.c_ubyte,
    ctypes.c_ushort,
    ctypes.c_uint,
    ctypes.c_ulong,
    ctypes.c_ulonglong,
    ctypes.c_size_t,
)


@dataclass(frozen=True)
class Pointer:
    """
    One level of indirection to a value that may be absent.

    Pointer(None) is a nil pointer; encoding it fails.
    """

    target: Any = None


@dataclass(frozen=True)
class Interface:
    """
    A value whose concrete kind is only known at runtime.

    Interface(None) holds nothing; encoding it fails.
    """

    value: Any = None


@dataclass(frozen=True)
class Node:
    """A classified value: the kind plus the value it was computed from."""

    kind: Kind
    value: Any

    @property
    def is_scalar(self) -> bool:
        return self.kind in SCALAR_KINDS


def classify(value: Any) -> Node:
    """
    Classify a value into a Node.

    Order matters: bool before int (bool is an int subclass), str before
    Sequence (str is a Sequence), dataclass instances before everything
    structural.

    Args:
        value: Any in-memory value

    Returns:
        Node carrying the value's kind
    """
    if value is None:
        return Node(Kind.NIL, value)

    if isinstance(value, Pointer):
        return Node(Kind.POINTER, value)
    if isinstance(value, Interface):
        return Node(Kind.INTERFACE, value)

    # Dataclass classes themselves are not records
    if is_dataclass(value) and not isinstance(value, type):
        return Node(Kind.RECORD, value)

    if isinstance(value, (bool, ctypes.c_bool)):
        return Node(Kind.BOOL, value)
    if isinstance(value, UNSIGNED_CTYPES):
        return Node(Kind.UINT, value)
    if isinstance(value, (int, SIGNED_CTYPES)):
        return Node(Kind.INT, value)
    if isinstance(value, ctypes.c_float):
        return Node(Kind.FLOAT32, value)
    if isinstance(value, (float, ctypes.c_double)):
        return Node(Kind.FLOAT64, value)
    if isinstance(value, str):
        return Node(Kind.STRING, value)

    if isinstance(value, Mapping):
        return Node(Kind.MAPPING, value)
    if isinstance(value, Sequence):
        return Node(Kind.SEQUENCE, value)

    return Node(Kind.OTHER, value)
