"""
argscan parser facade: declare options and positionals, then parse.

What this module provides
- Parser: owns an OptionRegistry and a PositionalRegistry plus the scanning
  mode, and runs the engine over a prompt.
  • add_option(spec) / add_positional(spec): register and return the parser (chainable).
  • parse(prompt=Unset): tokens from sys.argv[1:], a shell-like string or an iterable.

Runtime flags
- shell: when True, parse faults are rendered with rich on stderr and the
  process exits with status 1 instead of raising.
- fancy: render faults inside a panel.
- colorful: style rendered faults.
Registration faults are always raised: they are programming errors of the host.

Quick start
    from argscan import Parser, Mode, OptionSpec, PositionalSpec, Selector

    parser = (
        Parser(Mode.OPTIONS_FIRST)
        .add_option(OptionSpec.flag("verbose", alias="v"))
        .add_option(OptionSpec.required("output", alias="o"))
        .add_positional(PositionalSpec.named())
        .add_positional(PositionalSpec.rest())
    )
    args = Selector(parser.parse("-v -o out.txt build --fast"))
    args.flag("verbose")   # True
    args.value("output")   # "out.txt"
    args.positionals()     # ["build", "--fast"]
"""
import shlex
import sys
from collections.abc import Iterable

from . import engine
from .faults import ParserException, trigger
from .options import OptionRegistry
from .positionals import PositionalRegistry
from .utils import *


class Parser:
    """
    Command-line parser: registries + mode + runtime flags.

    Properties
    - mode: engine.Mode
    - options: OptionRegistry (read it, register through add_option)
    - positionals: PositionalRegistry (read it, register through add_positional)
    - shell / fancy / colorful: fault reporting flags
    """

    mode = mirror("mode")
    options = mirror("options")
    positionals = mirror("positionals")
    shell = mirror("shell")
    fancy = mirror("fancy")
    colorful = mirror("colorful")

    def __init__(self, mode=engine.Mode.MIXED, /, *, shell=False, fancy=False, colorful=True):
        if not isinstance(mode, engine.Mode):
            raise TypeError("parser 'mode' must be a mode")
        self._mode = mode
        self._options = OptionRegistry()
        self._positionals = PositionalRegistry()
        self._shell = bool(shell)
        self._fancy = bool(fancy)
        self._colorful = bool(colorful)

    def add_option(self, spec, /):
        self._options.register(spec)
        return self

    def add_positional(self, spec, /):
        self._positionals.register(spec)
        return self

    def trigger(self, fault, /, **options):
        """
        Surface a fault with this parser's runtime flags merged in.
        """
        trigger(fault, **options, shell=self.shell, fancy=self.fancy, colorful=self.colorful)

    def parse(self, prompt=Unset, /):
        """
        Parse a prompt into a list of parsed entries.

        Parameters
        - prompt:
          • Unset: read tokens from sys.argv[1:].
          • str: shell-like string; will be split via shlex.split.
          • Iterable[str]: pre-tokenized sequence, used verbatim.

        Returns
        - list[ParsedArg]

        Raises
        - TypeError: when prompt is not Unset/str/Iterable[str].
        - ParserException subclasses (non-shell mode only).
        """
        if prompt is Unset:
            tokens = sys.argv[1:]
        elif isinstance(prompt, str):
            tokens = shlex.split(prompt)
        elif isinstance(prompt, Iterable):
            tokens = list(prompt)
            if not all(isinstance(token, str) for token in tokens):
                raise TypeError("parse() argument must be a string or an iterable of strings")
        else:
            raise TypeError("parse() argument must be a string or an iterable of strings")

        try:
            return engine.parse(tokens, self._mode, self._options, self._positionals)
        except ParserException as fault:
            if self.shell:
                self.trigger(fault)
            raise

    def __repr__(self):
        return f"parser(mode={self._mode!r}, options={self._options!r}, positionals={self._positionals!r})"


__all__ = (
    "Parser",
)
