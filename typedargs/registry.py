r"""
typedargs argument registry.

Overview
- ArgumentDeclaration: one declared argument (name, kind, required, help, type) plus
  the raw string value assigned during parsing (or its default).
- Registry: insertion-ordered name → declaration mapping and a FIFO queue of
  positional names in declaration order.

Lifecycle
- Declarations are created once by Registry.declare(), mutated in place by the
  dispatcher during a single parse pass, then read any number of times.
- The positional queue is consumed destructively: each bare token pops one name.
- Two reserved optional flags, -h and --help, are declared by the constructor.

Validation highlights
- Names are unique across the whole registry regardless of kind.
- Optional names must match r"--?[^-\s]\S*"; positional names must not start with '-'.
- Neither kind may contain whitespace.
"""
import logging
import re
from collections import deque
from types import MappingProxyType

from .coercions import ArgumentKind, ArgumentType
from .faults import DuplicateNameError, NotFoundError
from .utils import Unset, coalesce

logger = logging.getLogger(__name__)

HELP_TEXT = "Display this help message"


class ArgumentDeclaration:
    """
    A declared argument and its current raw value.

    Metadata is read-only after construction; only raw_value changes, and only
    through Registry.assign().
    """
    __slots__ = ("_name", "_kind", "_required", "_help", "_type", "raw_value")

    def __init__(self, name, kind, required, help, type, raw_value=""):
        self._name = name
        self._kind = kind
        self._required = required
        self._help = help
        self._type = type
        self.raw_value = raw_value

    name = property(lambda self: self._name)
    kind = property(lambda self: self._kind)
    required = property(lambda self: self._required)
    help = property(lambda self: self._help)
    type = property(lambda self: self._type)

    @property
    def positional(self):
        return self._kind is ArgumentKind.POSITIONAL

    def __rich_repr__(self):
        yield "name", self._name
        yield "kind", self._kind.value
        yield "type", self._type.tag
        yield "required", self._required
        yield "help", self._help
        yield "raw_value", self.raw_value

    def __repr__(self):
        return "argument(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())


def _sanitize(name, kind, required, help, type, default, /):
    """
    Internal: validate declaration metadata and resolve the kind.

    Raises
    - TypeError: when a field has the wrong type.
    - ValueError: when a name is empty, contains whitespace, or disagrees with its kind.
    """
    if not isinstance(name, str):
        raise TypeError("declare() 'name' must be a string")
    elif not name or re.search(r"\s", name):
        raise ValueError("declare() 'name' must be a non-empty string without whitespace")

    if not isinstance(kind := coalesce(kind, ArgumentKind.infer(name)), ArgumentKind):
        raise TypeError("declare() 'kind' must be an argument kind")
    if kind is ArgumentKind.OPTIONAL and not re.fullmatch(r"--?[^-\s]\S*", name):
        raise ValueError("declare() optional names must start with one or two dashes (e.g. -x, --name)")
    if kind is ArgumentKind.POSITIONAL and name.startswith("-"):
        raise ValueError("declare() positional names cannot start with a dash")

    if not isinstance(required, bool):
        raise TypeError("declare() 'required' must be a bool")
    if not isinstance(help, str):
        raise TypeError("declare() 'help' must be a string")
    if not isinstance(type, ArgumentType):
        raise TypeError("declare() 'type' must be an argument type")
    if not isinstance(default, str):
        raise TypeError("declare() 'default' must be a string")

    return kind


class Registry:
    """
    Insertion-ordered store of argument declarations.

    Iterating yields declarations in the order they were declared (help order);
    the positional queue keeps only positional names, front first.
    """
    HELP_NAMES = ("-h", "--help")

    def __init__(self):
        self._declarations = {}
        self._positionals = deque()
        for name in self.HELP_NAMES:
            self.declare(name, ArgumentKind.OPTIONAL, False, HELP_TEXT, ArgumentType.BOOL)

    def declare(self, name, kind=Unset, required=False, help="", type=ArgumentType.STRING, default=""):
        """
        Register a new argument.

        Parameters
        - name: bare name for positionals, "-x"/"--name" for optionals.
        - kind: ArgumentKind; inferred from the name when omitted.
        - required: informational only; nothing checks it after parsing.
        - help: free text rendered by the help formatter.
        - type: ArgumentType used to validate assignments and by the accessor.
        - default: initial raw value (kept when the argument is never supplied).

        Raises
        - DuplicateNameError: the name is already declared (help flags included).
        """
        kind = _sanitize(name, kind, required, help, type, default)
        if name in self._declarations:
            raise DuplicateNameError(
                "argument %r is already declared" % name,
                name=name,
            )
        declaration = self._declarations[name] = ArgumentDeclaration(name, kind, required, help, type, default)
        if declaration.positional:
            self._positionals.append(name)
        logger.debug("declared %r", declaration)
        return declaration

    def lookup(self, name, /):
        try:
            return self._declarations[name]
        except KeyError:
            raise NotFoundError("argument %r is not declared" % (name,), name=name) from None

    def assign(self, name, raw, /):
        """
        Store a raw value on a declared argument.
        """
        if not isinstance(raw, str):
            raise TypeError("assign() second argument must be a string")
        declaration = self.lookup(name)
        declaration.raw_value = raw
        logger.debug("assigned %r to %r", raw, name)
        return declaration

    def pop_positional(self):
        """
        Take the next unfilled positional name, or Unset when none remain.
        """
        return self._positionals.popleft() if self._positionals else Unset

    @property
    def declarations(self):
        return MappingProxyType(self._declarations)

    @property
    def positionals(self):
        return tuple(self._positionals)

    def __contains__(self, name):
        return name in self._declarations

    def __iter__(self):
        return iter(self._declarations.values())

    def __len__(self):
        return len(self._declarations)


__all__ = (
    "ArgumentDeclaration",
    "Registry",
    "HELP_TEXT",
)
