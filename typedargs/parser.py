"""
typedargs parser: declare, tokenize/dispatch, and read typed values.

What this module provides
- Parser: a caller-owned facade over one Registry with:
  • declare(): register positional/optional arguments with a type and default.
  • parse(): one left-to-right pass over the invocation tokens.
  • get()/raw()/coerce(): typed, raw and diagnostic access after parsing.
  • format_help()/print_help(): usage text built from the declarations.

Dispatch rules (per token)
1. "-h" / "--help": print help to standard output and exit with status 0.
2. dash-prefixed:
   a. registered and followed by a token that does not start with '-':
      the next token is its value. A value that does not coerce is fatal.
   b. registered otherwise (flag-style): the value is the literal "true". A
      declared type that rejects it only warns; parsing continues.
   c. not registered: ignored.
3. bare token: fills the next positional in declaration order; a value that does
   not coerce is fatal, and a bare token with no positional left is fatal.

Runtime flags
- shell (default True): fatal faults print a one-line diagnostic to standard error
  and exit with status 1; warnings print to standard error. With shell=False,
  faults are raised and warnings go through the warnings module instead.
- colorful (default False): style help and diagnostics with the rich palette.

Quick start
    from typedargs import Parser, ArgumentType

    parser = Parser("tool")
    parser.declare("number", help="A number", type=ArgumentType.INT)
    parser.declare("--test", help="test", type=ArgumentType.STRING, default="none")
    parser.parse(["12", "--test", "hi"])
    parser.get("number", ArgumentType.INT)    # 12
    parser.get("--test", ArgumentType.STRING)  # "hi"
"""
import logging
import os.path
import shlex
import sys
from collections.abc import Iterable

from rich.console import Console

from .accessor import fetch
from .coercions import ArgumentType, coerce
from .faults import CoercionFailure, FlagCoercionWarning, UnconsumedTokenError, coercion_message, trigger
from .formatter import render, stylize
from .registry import Registry
from .utils import Unset, coalesce, hostattr

console = Console()
logger = logging.getLogger(__name__)


def _tokenize(prompt, /):
    """
    Normalize a prompt into a list of tokens.

    - Unset: sys.argv[1:] (the program path is excluded).
    - str: shell-like string split with shlex.split.
    - Iterable[str]: used as-is; every element must be a string.
    """
    if prompt is Unset:
        return sys.argv[1:]
    if isinstance(prompt, str):
        return shlex.split(prompt)
    if isinstance(prompt, Iterable):
        tokens = list(prompt)
        if not all(isinstance(token, str) for token in tokens):
            raise TypeError("parse() argument must be a string or an iterable of strings")
        return tokens
    raise TypeError("parse() argument must be a string or an iterable of strings")


class Parser:
    """
    Argument declaration, parsing and typed retrieval over a private Registry.

    Parameters
    - prog: program name for the usage banner. Falls back to __prog__ in __main__,
      then to the basename of sys.argv[0].
    - shell: surface fatal faults by exiting the process (True) or by raising (False).
    - colorful: style console output.
    """

    def __init__(self, prog=Unset, *, shell=True, colorful=False):
        if not isinstance(prog, str | Unset):
            raise TypeError("Parser() 'prog' must be a string")
        elif isinstance(prog, str) and not (prog := prog.strip()):
            raise ValueError("Parser() 'prog' cannot be empty")
        if not isinstance(shell, bool):
            raise TypeError("Parser() 'shell' must be a bool")
        if not isinstance(colorful, bool):
            raise TypeError("Parser() 'colorful' must be a bool")

        self._prog = coalesce(prog, coalesce(hostattr("__prog__"), os.path.basename(sys.argv[0])))
        self._shell = shell
        self._colorful = colorful
        self._registry = Registry()

    prog = property(lambda self: self._prog)
    shell = property(lambda self: self._shell)
    colorful = property(lambda self: self._colorful)
    registry = property(lambda self: self._registry)

    def declare(self, name, kind=Unset, required=False, help="", type=ArgumentType.STRING, default=""):
        """
        Declare an argument; see Registry.declare() for parameters and faults.
        """
        return self._registry.declare(name, kind, required, help, type, default)

    def trigger(self, fault, /, **overrides):
        trigger(fault, **{"shell": self._shell, "colorful": self._colorful} | overrides)

    def parse(self, tokens=Unset, /):
        """
        Run the single dispatch pass over the tokens (sys.argv[1:] when omitted).

        The positional queue is consumed by this pass, so a Parser is meant to
        parse once.
        """
        tokens = _tokenize(tokens)
        logger.debug("parsing %d token(s) for %r", len(tokens), self._prog)

        index = 0
        while index < len(tokens):
            token = tokens[index]

            if token in Registry.HELP_NAMES:
                logger.debug("help requested at position %d", index)
                self.print_help()
                sys.exit(0)

            if token.startswith("-"):
                following = tokens[index + 1] if index + 1 < len(tokens) else Unset
                if token in self._registry and following is not Unset and not following.startswith("-"):
                    # option with value: validate before storing
                    declaration = self._registry.lookup(token)
                    if not (outcome := coerce(following, declaration.type)):
                        self._fail(outcome, following, index + 1)
                    self._registry.assign(token, following)
                    index += 2
                    continue
                elif token in self._registry:
                    # flag-style: store first, then only warn on a mismatch
                    declaration = self._registry.assign(token, "true")
                    if not (outcome := coerce("true", declaration.type)):
                        self.trigger(FlagCoercionWarning(
                            coercion_message(outcome.expected, outcome.actual),
                            expected=outcome.expected,
                            actual=outcome.actual,
                            token=token,
                            index=index,
                        ))
                else:
                    logger.debug("ignoring unknown switch %r at position %d", token, index)

            elif (name := self._registry.pop_positional()) is not Unset:
                declaration = self._registry.assign(name, token)
                if not (outcome := coerce(token, declaration.type)):
                    self._fail(outcome, token, index)

            else:
                self.trigger(UnconsumedTokenError(
                    "Invalid argument: %s" % token,
                    token=token,
                    index=index,
                ))
                return

            index += 1

    def _fail(self, outcome, token, index, /):
        self.trigger(CoercionFailure(
            coercion_message(outcome.expected, outcome.actual),
            expected=outcome.expected,
            actual=outcome.actual,
            token=token,
            index=index,
        ))

    def get(self, name, type, /):
        """
        Return the typed value of a declared argument.

        Raises NotFoundError, MissingValueError or TypeMismatchError; these are
        never turned into a process exit.
        """
        return fetch(self._registry, name, type)

    def raw(self, name, /):
        """
        Return the stored raw string of a declared argument ("" when never set).
        """
        return self._registry.lookup(name).raw_value

    def coerce(self, name, /):
        """
        Re-check a declaration's raw value against its declared type.
        """
        declaration = self._registry.lookup(name)
        return coerce(declaration.raw_value, declaration.type)

    def format_help(self):
        return render(self._registry, self._prog)

    def print_help(self):
        """
        Write the help text to standard output.

        Plain help goes to the stream byte for byte (tabs included); colorful help is
        rendered by rich, which expands tabs.
        """
        if self._colorful:
            console.print(stylize(self._registry, self._prog, colorful=True), end="", soft_wrap=True)
        else:
            console.file.write(self.format_help())
            console.file.flush()


__all__ = (
    "Parser",
)
