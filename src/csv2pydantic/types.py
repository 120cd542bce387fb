"""
Annotated aliases referenced by generated models.

    from typing import Optional
    from pydantic import BaseModel, Field
    from csv2pydantic.types import U8, I32, F64

Integer aliases bound the value to the matching fixed-width range; F32
rejects finite values that overflow single precision.
"""

import math
import struct
from typing import Annotated

from pydantic import AfterValidator, Field


def _unsigned(bits: int):
    return Annotated[int, Field(ge=0, le=2 ** bits - 1)]


def _signed(bits: int):
    return Annotated[int, Field(ge=-(2 ** (bits - 1)), le=2 ** (bits - 1) - 1)]


def _fits_float32(value: float) -> float:
    if math.isfinite(value):
        try:
            struct.pack("<f", value)
        except OverflowError:
            raise ValueError("value does not fit in a 32-bit float") from None
    return value


U8 = _unsigned(8)
U16 = _unsigned(16)
U32 = _unsigned(32)
U64 = _unsigned(64)
U128 = _unsigned(128)

I8 = _signed(8)
I16 = _signed(16)
I32 = _signed(32)
I64 = _signed(64)
I128 = _signed(128)

F32 = Annotated[float, AfterValidator(_fits_float32)]
F64 = float

__all__ = [
    "U8", "U16", "U32", "U64", "U128",
    "I8", "I16", "I32", "I64", "I128",
    "F32", "F64",
]
