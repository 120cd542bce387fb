import math
import re
import struct
from enum import Enum
from typing import List, Optional

UNSIGNED_PATTERN = re.compile(r"^\+?[0-9]+$")
SIGNED_PATTERN = re.compile(r"^[+-]?[0-9]+$")

# 2**128 has 39 digits
MAX_INTEGER_DIGITS = 39


def _to_int(value: str) -> Optional[int]:
    # int() refuses very long digit strings, so oversized values stop here
    digits = value.lstrip("+-").lstrip("0")
    if len(digits) > MAX_INTEGER_DIGITS:
        return None
    number = int(digits or "0")
    return -number if value.startswith("-") else number


def _fits_unsigned(value: str, bits: int) -> bool:
    """
    Check if value is a base-10 integer in 0 .. 2**bits - 1.
    """
    if not UNSIGNED_PATTERN.fullmatch(value):
        return False
    number = _to_int(value)
    return number is not None and number < 2 ** bits


def _fits_signed(value: str, bits: int) -> bool:
    """
    Check if value is a base-10 integer in -2**(bits-1) .. 2**(bits-1) - 1.
    """
    if not SIGNED_PATTERN.fullmatch(value):
        return False
    number = _to_int(value)
    bound = 2 ** (bits - 1)
    return number is not None and -bound <= number < bound


def _parse_float(value: str):
    # float() also tolerates padding, "_" separators and non-ASCII digits
    if not value.isascii() or "_" in value or value != value.strip():
        return None
    try:
        return float(value)
    except ValueError:
        return None


def _is_float64(value: str) -> bool:
    return _parse_float(value) is not None


def _is_float32(value: str) -> bool:
    """
    Float literal whose finite value stays finite in single precision.
    """
    parsed = _parse_float(value)
    if parsed is None:
        return False
    if not math.isfinite(parsed):
        return True
    try:
        struct.pack("<f", parsed)
        return True
    except OverflowError:
        return False


class TypeCandidate(Enum):
    """
    Primitive kinds a column can resolve to.

    Declaration order is the priority order: narrowest first, STRING last.
    STRING accepts every token, so a column always keeps one candidate.
    F32 takes every float literal, infinities included; F64 wins only when a
    finite value overflows single precision.
    """

    U8 = "U8"
    U16 = "U16"
    U32 = "U32"
    U64 = "U64"
    U128 = "U128"
    I8 = "I8"
    I16 = "I16"
    I32 = "I32"
    I64 = "I64"
    I128 = "I128"
    F32 = "F32"
    F64 = "F64"
    STRING = "str"

    @classmethod
    def all(cls) -> List["TypeCandidate"]:
        return list(cls)

    @property
    def priority(self) -> int:
        return _PRIORITY[self]

    def type_name(self, optional: bool = False) -> str:
        if optional:
            return f"Optional[{self.value}]"
        return self.value

    def can_parse(self, value: str) -> bool:
        kind = self.name
        if self is TypeCandidate.STRING:
            return True
        if self is TypeCandidate.F32:
            return _is_float32(value)
        if self is TypeCandidate.F64:
            return _is_float64(value)
        bits = int(kind[1:])
        if kind.startswith("U"):
            return _fits_unsigned(value, bits)
        return _fits_signed(value, bits)


_PRIORITY = {candidate: rank for rank, candidate in enumerate(TypeCandidate)}
