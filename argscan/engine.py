r"""
argscan parse engine: turn a token list into parsed entries.

Token grammar (while option scanning is on)
- "--"                       end of options; every later token is positional, "--" included.
- "--name", "--name=value"   long reference (split on the first "=").
- "-a", "-a=value", "-avalue"
                             short reference through an alias. For FLAG options
                             "-avalue" is a cluster: it is read as "-a" followed by "-value".
- anything else              positional.

Value resolution
- FLAG            value must be "", "true" or "false" → Flag(name, value != "false").
- REQUIRED_VALUE  inline value, or the next token when that token is not itself an
                  option reference (one token of lookahead) → RequiredValue(name, value).
                  A next token that fails to resolve ("-1", "--nope") is taken as the value.
- OPTIONAL_VALUE  inline value only, never the next token → OptionalValue(name, value | None).

Modes
- Mode.MIXED          options and positionals may interleave.
- Mode.OPTIONS_FIRST  the first positional ends option scanning.

The scan is a single left-to-right pass over a deque local to one call; the
only mutation besides popping is pushing a declustered short flag back to the
front. Faults are raised immediately and the partial output is dropped.
"""
import enum
from collections import deque

from loguru import logger

from .faults import *
from .options import OptionKind, OptionRegistry, OptionSpec
from .parsed import *
from .positionals import PositionalRegistry
from .utils import *


class Mode(enum.Enum):
    MIXED = "mixed"
    OPTIONS_FIRST = "options-first"

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


def _reference(token, options, /):
    """
    classify a token as an option reference and resolve it against the registry.

    returns
    - None when the token has no leading dash (not an option reference).
    - (spec, alias, remainder) otherwise:
      • alias is None for long references, the alias character for short ones.
      • remainder is the unparsed tail: "" or "=value" for long references,
        anything after the alias character for short ones.

    raises
    - InvalidOptionError / UnknownOptionError for long references.
    - InvalidAliasError / UnknownAliasError for short references (a lone "-"
      carries an empty alias and is invalid).
    """
    if token.startswith("--"):
        name, separator, value = token[2:].partition("=")
        if not OptionSpec.is_valid_name(name):
            raise InvalidOptionError(name=name)
        if (spec := options.lookup(name)) is None:
            raise UnknownOptionError(name=name)
        return spec, None, separator + value

    if token.startswith("-"):
        alias, remainder = token[1:2], token[2:]
        if not OptionSpec.is_valid_alias(alias):
            raise InvalidAliasError(alias=alias)
        if (name := options.resolve(alias)) is None:
            raise UnknownAliasError(alias=alias)
        return options.lookup(name), alias, remainder

    return None


def _consumable(token, options, /):
    """
    whether a REQUIRED_VALUE option may take `token` as its value.

    the token is peeked, not consumed: it qualifies unless it is the "--"
    terminator or resolves to a registered option. tokens that fail to resolve
    (e.g. "-1" with no "1" alias) are plain values.
    """
    if token == "--":
        return False
    try:
        return _reference(token, options) is None
    except ParserException:
        return True


def _value(spec, alias, remainder, queue, /):
    """
    compute the effective inline value of a reference.

    "=value" wins; a short FLAG reference pushes the rest of its cluster back
    to the front of the queue (as a new short reference) and takes no value;
    anything else is taken verbatim.
    """
    if remainder.startswith("="):
        return remainder[1:]
    if alias is not None and spec.kind is OptionKind.FLAG and remainder:
        queue.appendleft("-" + remainder)
        return ""
    return remainder


def parse(tokens, /, mode=Mode.MIXED, options=Unset, positionals=Unset):
    """
    Parse tokens against the registries.

    Parameters
    - tokens: Iterable[str]
      Raw arguments, program name excluded. Used verbatim (no trimming).
    - mode: Mode
    - options: OptionRegistry (empty when omitted)
    - positionals: PositionalRegistry (empty when omitted)

    Returns
    - list[ParsedArg] in token order.

    Raises
    - TypeError: a token is not a string, or a parameter has the wrong type.
    - ParserException subclasses: see the module docs and argscan.faults.
    """
    options = OptionRegistry() if options is Unset else options
    positionals = PositionalRegistry() if positionals is Unset else positionals
    if not isinstance(mode, Mode):
        raise TypeError("parse() 'mode' must be a mode")
    if not isinstance(options, OptionRegistry):
        raise TypeError("parse() 'options' must be an option-registry")
    if not isinstance(positionals, PositionalRegistry):
        raise TypeError("parse() 'positionals' must be a positional-registry")

    queue = deque(tokens)
    if not all(isinstance(token, str) for token in queue):
        raise TypeError("parse() argument must be an iterable of strings")

    scanning = True
    seen = set()
    parsed = []

    while queue:
        token = queue.popleft()

        if scanning and token == "--":
            scanning = False
            logger.trace("end of options")
            continue

        if not scanning or (reference := _reference(token, options)) is None:
            parsed.append(entry := Positional(token))
            logger.trace("emitted {!r}", entry)
            if mode is Mode.OPTIONS_FIRST:
                scanning = False
            continue

        spec, alias, remainder = reference
        value = _value(spec, alias, remainder, queue)

        match spec.kind:
            case OptionKind.FLAG:
                if value not in ("", "true", "false"):
                    if alias is None:
                        raise InvalidOptionValueError(name=spec.name, value=value)
                    raise InvalidAliasValueError(alias=alias, value=value)
                entry = Flag(spec.name, value != "false")
            case OptionKind.REQUIRED_VALUE:
                if not value:
                    if not queue or not _consumable(queue[0], options):
                        if alias is None:
                            raise MissingOptionValueError(name=spec.name)
                        raise MissingAliasValueError(alias=alias)
                    value = queue.popleft()
                entry = RequiredValue(spec.name, value)
            case OptionKind.OPTIONAL_VALUE:
                entry = OptionalValue(spec.name, value or None)
            case _:
                raise RuntimeError("unexpected option kind")

        if not spec.repeatable and spec.name in seen:
            if alias is None:
                raise DuplicateOptionError(name=spec.name)
            raise DuplicateAliasError(alias=alias)
        seen.add(spec.name)

        parsed.append(entry)
        logger.trace("emitted {!r}", entry)

    actual = sum(isinstance(entry, Positional) for entry in parsed)
    if actual < (expected := positionals.named):
        raise MissingArgsError(actual=actual, expected=expected)

    logger.debug("parsed {} entries ({} positional) in {} mode", len(parsed), actual, mode.value)
    return parsed


__all__ = (
    "Mode",
    "parse",
)
