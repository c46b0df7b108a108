r"""
typedargs help formatter.

render() turns a registry into plain usage text:

    Usage: <prog> <flags>
    <name> :\t <help>        (one line per declaration, insertion order)

stylize() builds the same text as a rich Text for console output. Palette keys:
- usage-label, program-name, argument-name, argument-help
Define a mapping named __styles__ in __main__ to override any palette entry.
"""
from collections import defaultdict

from rich.text import Text

from .utils import hostattr


def render(registry, prog, /):
    if not isinstance(prog, str):
        raise TypeError("render() second argument must be a string")
    lines = ["Usage: %s <flags>\n" % prog]
    lines.extend("%s :\t %s\n" % (declaration.name, declaration.help) for declaration in registry)
    return "".join(lines)


def stylize(registry, prog, /, colorful=False):
    styles = defaultdict(str, {
        "usage-label": "bold #00E6FF",  # CYAN → signature info color
        "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "argument-name": "bold #22C55E",  # GREEN for names
        "argument-help": "#9CA3AF",  # Muted gray
    } | hostattr("__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    text = Text.assemble(("Usage: ", styler("usage-label")), (prog, styler("program-name")), " <flags>\n")
    for declaration in registry:
        text.append(declaration.name, styler("argument-name"))
        text.append(" :\t ")
        text.append(declaration.help, styler("argument-help"))
        text.append("\n")
    return text


__all__ = (
    "render",
    "stylize",
)
