"""
argscan faults (registration and parsing errors) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every failure the
  registries and the engine can report. Codes are grouped by domain to keep
  copy consistent and make logs/searches predictable.
- ParserException: base type that carries message + options, exposes the
  structured payload (name, alias, value, actual, expected) as attributes and
  knows how to render itself with rich.
- trigger(): central entry point to surface a fault (respecting shell/fancy/colorful).

Message contract
- Every concrete fault owns a message template; the rendered message is part of
  the documented behavior (e.g. "--foo is invalid", "cannot provide -f again").
- Titles and hints are only used by the rich renderer.

Integration
- The registries and the engine raise faults directly.
- The Parser facade routes parse faults through trigger(): in non-shell mode
  they are raised, in shell mode they are printed on stderr and the process exits.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    this enumeration follows the Seralix Fault Codes convention:
    - numeric ranges encode domains (names, values, positionals).
    - spacing leaves room for future additions without reshuffling existing codes.
    - normalize() allows host remapping to custom labels while keeping code-stability.

    grouping
    - names (1111x)
      • INVALID_OPTION, INVALID_ALIAS, DUPLICATE_OPTION, DUPLICATE_ALIAS,
        UNKNOWN_OPTION, UNKNOWN_ALIAS
    - values (1112x)
      • INVALID_OPTION_VALUE, INVALID_ALIAS_VALUE, MISSING_OPTION_VALUE,
        MISSING_ALIAS_VALUE
    - positionals (1113x)
      • INVALID_REST_POSITION, MISSING_ARGS
    """
    # --- name errors (1111x) ---
    INVALID_OPTION        = 11111
    INVALID_ALIAS         = 11112
    DUPLICATE_OPTION      = 11113
    DUPLICATE_ALIAS       = 11114
    UNKNOWN_OPTION        = 11115
    UNKNOWN_ALIAS         = 11116

    # --- value errors (1112x) ---
    INVALID_OPTION_VALUE  = 11121
    INVALID_ALIAS_VALUE   = 11122
    MISSING_OPTION_VALUE  = 11123
    MISSING_ALIAS_VALUE   = 11124

    # --- positional errors (1113x) ---
    INVALID_REST_POSITION = 11131
    MISSING_ARGS          = 11132

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels. when no mapping
        is present, the numeric value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class ParserException(Exception):
    """
    Base class of every registration/parsing fault.

    Construction
    - ParserException(message=Unset, /, **options)
      When message is Unset, it is rendered from the class __template__ using
      the options (e.g. name="foo" → "--foo is invalid").

    Payload
    - options: read-only mapping with the structured payload plus any rendering
      context merged later through copy.replace() (shell, fancy, colorful, ...).
    - Payload keys are reachable as attributes: error.name, error.value, ...

    Class attributes
    - __code__: FaultCode of the fault.
    - __title__: short title used in rendered headers.
    - __template__: message template (str.format over the options).
    - __hint__: hint template shown under the message when rendered.
    """
    __code__ = Unset
    __title__ = "parser error"
    __template__ = "{message}"
    __hint__ = ""

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        self.message = message if message is not Unset else self.__template__.format_map(options)
        self.options = MappingProxyType(options)
        super().__init__(self.message)

    def __getattr__(self, name, /):
        # only reached when regular lookup fails; never recurse on the payload itself
        if name == "options" or name.startswith("__"):
            raise AttributeError(name)
        try:
            return self.options[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}") from None

    def __str__(self):
        return self.message

    def __reduce__(self):
        return _rebuild, (type(self), self.message, dict(self.options))

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)
        fancy = self.options.get("fancy", False)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            if isinstance(fragment, Text):
                return fragment
            return Text(str(fragment), style)

        prog = text(self.options.get("prog", getattr(main, "__prog__", "argscan")), styler("prog-name"))
        code = self.options.get("code", self.__code__)

        header = Text.assemble(
            "[ ",
            prog,
            " — ",
            text(code.normalize() if isinstance(code, FaultCode) else code, styler("code")),
            " | ",
            text(self.options.get("title", self.__title__).title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))
        hint = Text.assemble(
            text(" → ", styler("hint-arrow")),
            text(self.options.get("hint", self.__hint__.format_map(self.options)), styler("hint"))
        )

        if fancy:
            return Panel(Group(message, hint), title=header, title_align="left")

        return Group(header, message, hint)

    def __trigger__(self) -> None:
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


def _rebuild(cls, message, options, /):
    return cls(message, **options)


class InvalidOptionError(ParserException):
    __code__ = FaultCode.INVALID_OPTION
    __title__ = "invalid option"
    __template__ = "--{name} is invalid"
    __hint__ = "option names use ascii letters, digits and single inner hyphens (e.g. --dry-run)"


class InvalidAliasError(ParserException):
    __code__ = FaultCode.INVALID_ALIAS
    __title__ = "invalid alias"
    __template__ = "-{alias} is invalid"
    __hint__ = "aliases are a single ascii letter or digit (e.g. -v)"


class DuplicateOptionError(ParserException):
    __code__ = FaultCode.DUPLICATE_OPTION
    __title__ = "duplicated option"
    __template__ = "cannot provide --{name} again"
    __hint__ = "keep a single --{name}; it can be specified only once"


class DuplicateAliasError(ParserException):
    __code__ = FaultCode.DUPLICATE_ALIAS
    __title__ = "duplicated alias"
    __template__ = "cannot provide -{alias} again"
    __hint__ = "keep a single -{alias}; it can be specified only once"


class UnknownOptionError(ParserException):
    __code__ = FaultCode.UNKNOWN_OPTION
    __title__ = "unknown option"
    __template__ = "--{name} is undefined"
    __hint__ = "check the spelling of --{name}"


class UnknownAliasError(ParserException):
    __code__ = FaultCode.UNKNOWN_ALIAS
    __title__ = "unknown alias"
    __template__ = "-{alias} is undefined"
    __hint__ = "check the spelling of -{alias}"


class InvalidOptionValueError(ParserException):
    __code__ = FaultCode.INVALID_OPTION_VALUE
    __title__ = "invalid flag value"
    __template__ = "--{name} cannot accept '{value}' as a value"
    __hint__ = "flags accept no value, 'true' or 'false' (e.g. --{name}=false)"


class InvalidAliasValueError(ParserException):
    __code__ = FaultCode.INVALID_ALIAS_VALUE
    __title__ = "invalid flag value"
    __template__ = "-{alias} cannot accept '{value}' as a value"
    __hint__ = "flags accept no value, 'true' or 'false' (e.g. -{alias}=false)"


class MissingOptionValueError(ParserException):
    __code__ = FaultCode.MISSING_OPTION_VALUE
    __title__ = "missing option value"
    __template__ = "--{name} is missing a value"
    __hint__ = "provide a value (e.g. --{name}=<value> or --{name} <value>)"


class MissingAliasValueError(ParserException):
    __code__ = FaultCode.MISSING_ALIAS_VALUE
    __title__ = "missing option value"
    __template__ = "-{alias} is missing a value"
    __hint__ = "provide a value (e.g. -{alias}<value> or -{alias} <value>)"


class InvalidRestPositionError(ParserException):
    __code__ = FaultCode.INVALID_REST_POSITION
    __title__ = "invalid rest position"
    __template__ = "'rest' positional arg must be placed last"
    __hint__ = "declare every named positional before the 'rest' one"


class MissingArgsError(ParserException):
    __code__ = FaultCode.MISSING_ARGS
    __title__ = "missing positional args"
    __template__ = "{expected} arg(s) required, but got {actual}"
    __hint__ = "add the missing positional values"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ParserException).
    - options are merged into the fault via copy.replace() before triggering.
    - in shell mode, rendering happens via the rich stderr console followed by
      sys.exit(1); otherwise the fault is raised.

    typical options
    - shell, fancy, colorful, prog, title, hint.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "ParserException",
    "InvalidOptionError",
    "InvalidAliasError",
    "DuplicateOptionError",
    "DuplicateAliasError",
    "UnknownOptionError",
    "UnknownAliasError",
    "InvalidOptionValueError",
    "InvalidAliasValueError",
    "MissingOptionValueError",
    "MissingAliasValueError",
    "InvalidRestPositionError",
    "MissingArgsError",
    "FaultCode",
    "trigger",
)
