"""
typedargs faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing issue
  (errors and warnings), grouped by domain so logs and searches stay predictable.
- ParserException / ParserWarning: base types that carry a message + options and
  know how to render themselves on a rich console as a single diagnostic line.
- trigger(): central entry point to surface any fault (respecting shell/colorful).

Severity model
- Value-bearing misuse (a positional or an option followed by its value that does not
  coerce, or a bare token with no positional slot left) is fatal: in shell mode the
  diagnostic is printed to standard error and the process exits with status 1.
- Flag-style misuse (an option given without a value whose declared type rejects
  "true") is a warning: it is reported and parsing continues.
- Registry and accessor errors are raised to the caller in every mode.

Integration
- The dispatcher calls trigger(fault, shell=..., colorful=...).
- In non-shell mode exceptions are raised and warnings go through warnings.warn.
"""
import logging
import sys
import warnings
from abc import ABC
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console
from rich.text import Text

from .utils import Unset, hostattr

console = Console(stderr=True)
logger = logging.getLogger(__name__)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the package (stable identifiers).

    grouping (by high-level domain)
    - registry (1120x)
      • DUPLICATE_NAME, NOT_FOUND
    - dispatcher (1121x)
      • COERCION_FAILURE, UNCONSUMED_TOKEN
    - accessor (1122x)
      • MISSING_VALUE, TYPE_MISMATCH
    - warnings (1221x)
      • FLAG_COERCION
    """
    # --- registry errors (11xxx) ---
    DUPLICATE_NAME      = 11201
    NOT_FOUND           = 11202

    # --- dispatcher errors (11xxx) ---
    COERCION_FAILURE    = 11211
    UNCONSUMED_TOKEN    = 11212

    # --- accessor errors (11xxx) ---
    MISSING_VALUE       = 11221
    TYPE_MISMATCH       = 11222

    # --- warnings (12xxx) ---
    FLAG_COERCION       = 12211

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(hostattr("__codes__", {}).get(self, self.value))


def _styles():
    return defaultdict(str, {
        "error-message": "bold #FF4DA6",  # friendly pinky error line
        "warning-message": "bold #FFB400",  # amber warning line
    } | hostattr("__styles__", {}))


class ParserException(Exception):
    code = Unset

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        if not self.options.get("colorful", False):
            return Text(str(self.message))
        return Text(str(self.message), _styles()["error-message"])

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self, soft_wrap=True)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class DuplicateNameError(ParserException):
    code = FaultCode.DUPLICATE_NAME


class NotFoundError(ParserException):
    code = FaultCode.NOT_FOUND


class CoercionFailure(ParserException):
    """
    a value-bearing token did not coerce to its declared type.

    options
    - expected: type tag the declaration asked for (e.g. "int").
    - actual: diagnostic label of what was found ("string", "out_of_range").
    - token: the raw token that failed (when known).
    """
    code = FaultCode.COERCION_FAILURE

    @property
    def expected(self):
        return self.options.get("expected")

    @property
    def actual(self):
        return self.options.get("actual")


class UnconsumedTokenError(ParserException):
    code = FaultCode.UNCONSUMED_TOKEN

    @property
    def token(self):
        return self.options.get("token")


class MissingValueError(ParserException):
    code = FaultCode.MISSING_VALUE


class TypeMismatchError(ParserException):
    code = FaultCode.TYPE_MISMATCH


class ParserWarning(ABC, Warning):
    code = Unset

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message)

    def __rich__(self):
        if not self.options.get("colorful", False):
            return Text(str(self.message))
        return Text(str(self.message), _styles()["warning-message"])

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=5)
        console.print(self, soft_wrap=True)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class FlagCoercionWarning(ParserWarning):
    """
    a flag-style option stored "true" but its declared type rejects it.

    options mirror CoercionFailure (expected/actual/token).
    """
    code = FaultCode.FLAG_COERCION

    @property
    def expected(self):
        return self.options.get("expected")

    @property
    def actual(self):
        return self.options.get("actual")


def coercion_message(expected, actual, /):
    """
    the one-line diagnostic shared by fatal and non-fatal coercion faults.
    """
    return "Invalid argument type. Expected '%s' got '%s'" % (expected, actual)


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich console on standard error
      (errors then exit with status 1); otherwise exceptions are raised and
      warnings are emitted through the warnings module.

    typical options
    - shell, colorful, and any context the caller wants to attach
      (token, index, argument, expected, actual).
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault = fault.__replace__(**options)
    code = fault.code.normalize() if isinstance(fault.code, FaultCode) else "-"
    logger.debug("surfacing fault %s (%s): %s", code, type(fault).__name__, fault.message)
    fault.__trigger__()


__all__ = (
    "ParserException",
    "DuplicateNameError",
    "NotFoundError",
    "CoercionFailure",
    "UnconsumedTokenError",
    "MissingValueError",
    "TypeMismatchError",
    "ParserWarning",
    "FlagCoercionWarning",
    "FaultCode",
    "coercion_message",
    "trigger",
)
