## Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import sys
import math
from typing import Any
from dataclasses import dataclass

from .errors import FlagValueError


POINTER_BITS = (sys.maxsize.bit_length() + 1)

# Smallest magnitude that rounds past the largest finite f32, i.e. (2 - 2**-24) * 2**127.
F32_OVERFLOW = 2.0**128 - 2.0**103


@dataclass(frozen=True)
class Kind:
    name: str                     # canonical lowercase tag, e.g. "i32"
    python: type                  # bool, int, float or str
    bits: int | None = None       # integer width, None for other kinds
    signed: bool = False

    @property
    def minimum(self) -> int | None:
        if self.bits is None: return None
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def maximum(self) -> int | None:
        if self.bits is None: return None
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1


KINDS: dict[str, Kind] = {
    'bool': Kind('bool', bool),
    'i8': Kind('i8', int, 8, True), 'i16': Kind('i16', int, 16, True),
    'i32': Kind('i32', int, 32, True), 'i64': Kind('i64', int, 64, True),
    'i128': Kind('i128', int, 128, True), 'isize': Kind('isize', int, POINTER_BITS, True),
    'u8': Kind('u8', int, 8), 'u16': Kind('u16', int, 16),
    'u32': Kind('u32', int, 32), 'u64': Kind('u64', int, 64),
    'u128': Kind('u128', int, 128), 'usize': Kind('usize', int, POINTER_BITS),
    'f32': Kind('f32', float), 'f64': Kind('f64', float),
    'string': Kind('string', str),
}


def check_range(value: int, kind: Kind, token: str | None = None) -> int:
    if value > kind.maximum:
        raise FlagValueError("number too large to fit in target type", kind=kind.name, token=token)
    if value < kind.minimum:
        raise FlagValueError("number too small to fit in target type", kind=kind.name, token=token)
    return value


def narrow_float(value: float, kind: Kind) -> float:
    if kind.name == 'f32' and abs(value) >= F32_OVERFLOW:
        return math.copysign(math.inf, value)
    return value


# Python has no mutable references to primitives, so callers own one of these slots
# and pass it to `FlagSet.add`; parsing writes the result back into `.value`.
class Slot:
    __slots__ = ('value',)
    kind: Kind

    def __init__(self, value: Any = None):
        self.value = self._coerce(value)

    def _coerce(self, value):
        python = self.kind.python
        if value is None: return python()
        if python is float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if type(value) is not python:
            raise TypeError(f"{type(self).__name__} slot expects {python.__name__}, got {type(value).__name__}.")
        if self.kind.bits is not None:
            check_range(value, self.kind)
        if python is float:
            return narrow_float(value, self.kind)
        return value

    def __eq__(self, other):
        return type(other) is type(self) and other.value == self.value

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"


class Bool(Slot):   kind = KINDS['bool']

class I8(Slot):     kind = KINDS['i8']
class I16(Slot):    kind = KINDS['i16']
class I32(Slot):    kind = KINDS['i32']
class I64(Slot):    kind = KINDS['i64']
class I128(Slot):   kind = KINDS['i128']
class Isize(Slot):  kind = KINDS['isize']

class U8(Slot):     kind = KINDS['u8']
class U16(Slot):    kind = KINDS['u16']
class U32(Slot):    kind = KINDS['u32']
class U64(Slot):    kind = KINDS['u64']
class U128(Slot):   kind = KINDS['u128']
class Usize(Slot):  kind = KINDS['usize']

class F32(Slot):    kind = KINDS['f32']
class F64(Slot):    kind = KINDS['f64']

class String(Slot): kind = KINDS['string']


SLOT_TYPES: tuple[type, ...] = (Bool, I8, I16, I32, I64, I128, Isize,
                                U8, U16, U32, U64, U128, Usize, F32, F64, String)
