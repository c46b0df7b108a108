"""
typedargs utilities (internal helpers, carefully exposed)

Overview
- UnsetType / Unset
  • Singleton sentinel to represent “value not provided” without conflating with None
    or with an empty string (an empty raw value is a legitimate state in the registry).
  • Falsey (bool(Unset) is False), printable as "Unset", and non-subclassable.

- coalesce(value, default=None)
  • Replace Unset with a concrete default, but preserve legitimate falsey values like None/0/"".

- hostattr(name, default)
  • Read an override published by the host application on its __main__ module
    (__prog__, __styles__, __codes__).

Quick examples
    >>> coalesce(Unset, "fallback")
    'fallback'
    >>> coalesce("", "fallback")
    ''
"""
import functools
import sys
from typing import final


@final
class UnsetType:
    """
    Internal sentinel type representing a value that was not provided.

    Characteristics
    - Boolean-false: bool(Unset) is False, but it is distinct from None, 0 and "".
    - Printable: repr(Unset) -> "Unset" for friendly diagnostics.
    - Non-subclassable: this type is sealed; do not subclass.
    - Singleton per process: UnsetType() always yields the same instance.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in annotations (e.g., str | UnsetType).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


Unset = UnsetType()
"""
Internal sentinel for “not provided”.

Use Unset as a default when None (or "") is a meaningful value but you still
need to distinguish “no input” from an explicit value.
"""


def coalesce(object, default=None, /):
    """
    Resolve an internal Unset sentinel to a concrete default.

    Falsey values like None, 0 or "" are preserved as-is; only Unset is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce("", "fallback")     -> ""
    """
    return object if object is not Unset else default


def hostattr(name, default=Unset, /):
    """
    Fetch a host-level override from the running __main__ module.

    The host application may customize rendering without threading options
    through every call by defining module globals in its entry script:
    - __prog__: program name shown in the usage banner.
    - __styles__: mapping of palette keys to rich styles.
    - __codes__: mapping of FaultCode members to custom labels.

    Returns the attribute when present, otherwise `default` (Unset when omitted).
    """
    if not isinstance(name, str):
        raise TypeError("hostattr() argument must be a string")
    return getattr(sys.modules.get("__main__"), name, default)


__all__ = (
    # Functions
    "coalesce",
    "hostattr",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
