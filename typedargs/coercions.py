"""
typedargs type coercion engine.

Overview
- ArgumentKind: positional (bare name) vs optional (dash-prefixed name).
- ArgumentType: the closed set of scalar types an argument can declare. Each member's
  value is the type tag used in diagnostics ("int", "float", ...).
- CoercionOutcome: (value, expected, actual) tagged result. `value` is Unset exactly
  when coercion failed; `expected == actual` iff it succeeded. On failure `actual` is a
  diagnostic label rather than a type name:
  • "string"       → the text is not parseable as the expected type.
  • "out_of_range" → the text is numeric but does not fit the expected format.

Converters (pure, stateless, no registry access)
- to_int:    signed base-10, 32-bit range.
- to_float:  decimal literal at single precision.
- to_double: decimal literal at double precision.
- to_bool:   "true"/"1" and "false"/"0", case-insensitive.
- to_char:   exactly one character.
- to_string: always succeeds, verbatim.
- coerce(raw, type): dispatch on ArgumentType.

Quick example:
    >>> coerce("42", ArgumentType.INT)
    CoercionOutcome(value=42, expected='int', actual='int')
    >>> coerce("forty-two", ArgumentType.INT).actual
    'string'
"""
import math
import re
import struct
from collections import namedtuple
from enum import Enum

from .utils import Unset

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1

_INTEGER = re.compile(r"\s*([+-]?[0-9]+)\s*")
_DECIMAL = re.compile(r"\s*([+-]?(?:([0-9]+)\.?([0-9]*)|\.([0-9]+))(?:[eE][+-]?[0-9]+)?)\s*")
_SPECIAL = re.compile(r"\s*([+-]?(?:inf|infinity|nan))\s*", re.IGNORECASE)


class ArgumentKind(Enum):
    POSITIONAL = "positional"
    OPTIONAL = "optional"

    @classmethod
    def infer(cls, name, /):
        """
        derive the kind from a declared name: dash-prefixed names are optional.
        """
        if not isinstance(name, str):
            raise TypeError("infer() argument must be a string")
        return cls.OPTIONAL if name.startswith("-") else cls.POSITIONAL


class ArgumentType(Enum):
    STRING = "string"
    INT = "int"
    FLOAT = "float"
    DOUBLE = "double"
    BOOL = "bool"
    CHAR = "char"

    @property
    def tag(self):
        return self.value


class CoercionOutcome(namedtuple("CoercionOutcome", ("value", "expected", "actual"))):
    """
    result of a single coercion.

    truthiness reflects success, so callers can write `if outcome: ...`.
    """
    __slots__ = ()

    @classmethod
    def success(cls, type, value, /):
        return cls(value, type.tag, type.tag)

    @classmethod
    def failure(cls, type, actual="string", /):
        return cls(Unset, type.tag, actual)

    def __bool__(self):
        return self.expected == self.actual


def to_string(raw, /):
    return CoercionOutcome.success(ArgumentType.STRING, raw)


def to_int(raw, /):
    if not (match := _INTEGER.fullmatch(raw)):
        return CoercionOutcome.failure(ArgumentType.INT)
    value = int(match.group(1))
    if not INT_MIN <= value <= INT_MAX:
        return CoercionOutcome.failure(ArgumentType.INT, "out_of_range")
    return CoercionOutcome.success(ArgumentType.INT, value)


def _decimal(raw, type, /):
    """
    parse a decimal literal shared by the float and double converters.

    returns (outcome, value): outcome is a failure or Unset when parsing succeeded
    and the caller still has to apply its own precision checks.
    """
    if match := _SPECIAL.fullmatch(raw):
        return Unset, float(match.group(1))
    if not (match := _DECIMAL.fullmatch(raw)):
        return CoercionOutcome.failure(type), Unset
    value = float(match.group(1))
    if math.isinf(value):
        return CoercionOutcome.failure(type, "out_of_range"), Unset
    # Underflow: a literal with a nonzero mantissa that collapses to zero.
    mantissa = "".join(filter(None, match.group(2, 3, 4)))
    if value == 0.0 and mantissa.strip("0"):
        return CoercionOutcome.failure(type, "out_of_range"), Unset
    return Unset, value


def to_double(raw, /):
    failure, value = _decimal(raw, ArgumentType.DOUBLE)
    if failure is not Unset:
        return failure
    return CoercionOutcome.success(ArgumentType.DOUBLE, value)


def to_float(raw, /):
    failure, value = _decimal(raw, ArgumentType.FLOAT)
    if failure is not Unset:
        return failure
    try:
        single, = struct.unpack("f", struct.pack("f", value))
    except OverflowError:
        return CoercionOutcome.failure(ArgumentType.FLOAT, "out_of_range")
    # Older interpreters pack an overflowing value as inf instead of raising.
    if math.isinf(single) and not math.isinf(value):
        return CoercionOutcome.failure(ArgumentType.FLOAT, "out_of_range")
    if single == 0.0 and value != 0.0:
        return CoercionOutcome.failure(ArgumentType.FLOAT, "out_of_range")
    return CoercionOutcome.success(ArgumentType.FLOAT, single)


def to_bool(raw, /):
    match raw.lower():
        case "true" | "1":
            return CoercionOutcome.success(ArgumentType.BOOL, True)
        case "false" | "0":
            return CoercionOutcome.success(ArgumentType.BOOL, False)
        case _:
            return CoercionOutcome.failure(ArgumentType.BOOL)


def to_char(raw, /):
    if len(raw) != 1:
        return CoercionOutcome.failure(ArgumentType.CHAR)
    return CoercionOutcome.success(ArgumentType.CHAR, raw)


_converters = {
    ArgumentType.STRING: to_string,
    ArgumentType.INT: to_int,
    ArgumentType.FLOAT: to_float,
    ArgumentType.DOUBLE: to_double,
    ArgumentType.BOOL: to_bool,
    ArgumentType.CHAR: to_char,
}


def coerce(raw, type, /):
    """
    convert a raw token into a value of the given ArgumentType.

    never raises for bad input text; the failure is reported in the outcome.

    raises
    - TypeError: raw is not a string or type is not an ArgumentType.
    """
    if not isinstance(raw, str):
        raise TypeError("coerce() first argument must be a string")
    if not isinstance(type, ArgumentType):
        raise TypeError("coerce() second argument must be an argument type")
    return _converters[type](raw)


__all__ = (
    "ArgumentKind",
    "ArgumentType",
    "CoercionOutcome",
    "INT_MIN",
    "INT_MAX",
    "to_string",
    "to_int",
    "to_float",
    "to_double",
    "to_bool",
    "to_char",
    "coerce",
)
