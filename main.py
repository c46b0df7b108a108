from rich.pretty import pprint

from typedargs import *

__prog__ = "typedargs-demo"


if __name__ == '__main__':
    parser = Parser()
    parser.declare("number", required=True, help="A number", type=ArgumentType.INT)
    parser.declare("--test", help="A test argument", default="value")
    parser.declare("--ratio", help="A ratio", type=ArgumentType.DOUBLE, default="0.5")
    parser.declare("--verbose", help="Chatty output", type=ArgumentType.BOOL, default="false")
    parser.parse()
    pprint({
        "number": parser.get("number", ArgumentType.INT),
        "test": parser.get("--test", ArgumentType.STRING),
        "ratio": parser.get("--ratio", ArgumentType.DOUBLE),
        "verbose": parser.get("--verbose", ArgumentType.BOOL),
    })
