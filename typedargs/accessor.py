"""
typedargs typed accessor.

fetch(registry, name, type) re-runs coercion on a declaration's stored raw value
and hands back the typed value. It never mutates the registry and never exits the
process: its faults are meant for application code that may supply a fallback.

faults
- NotFoundError: the name was never declared.
- MissingValueError: the raw value does not coerce (e.g. an INT never supplied
  and declared without a default).
- TypeMismatchError: the caller asked for a type other than the declared one.
"""
from .coercions import ArgumentType, coerce
from .faults import MissingValueError, TypeMismatchError


def fetch(registry, name, type, /):
    if not isinstance(type, ArgumentType):
        raise TypeError("fetch() third argument must be an argument type")

    declaration = registry.lookup(name)
    outcome = coerce(declaration.raw_value, declaration.type)

    if not outcome:
        raise MissingValueError(
            "argument %r has no usable value (expected %r got %r)" % (name, outcome.expected, outcome.actual),
            name=name,
            expected=outcome.expected,
            actual=outcome.actual,
        )
    if outcome.expected != type.tag:
        raise TypeMismatchError(
            "argument %r holds %r but %r was requested" % (name, outcome.expected, type.tag),
            name=name,
            expected=type.tag,
            actual=outcome.expected,
        )
    return outcome.value


__all__ = ("fetch",)
