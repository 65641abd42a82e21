from rich.pretty import pprint

from argscan import *

parser = (
    Parser(Mode.OPTIONS_FIRST, shell=True, fancy=True)
    .add_option(OptionSpec.flag("debug", alias="d"))
    .add_option(OptionSpec.required("args", alias="a", repeatable=True))
    .add_option(OptionSpec.optional("color"))
    .add_positional(PositionalSpec.named())
    .add_positional(PositionalSpec.rest())
)


if __name__ == '__main__':
    pprint(parser.parse())
