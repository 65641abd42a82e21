r"""
argscan option specifications and registry.

Overview
- OptionKind: FLAG (boolean switch), REQUIRED_VALUE (always carries a string),
  OPTIONAL_VALUE (carries a string only when given inline).
- OptionSpec: immutable descriptor of one named option (name, alias, kind, repeatable).
  • Factories: OptionSpec.flag(...), OptionSpec.required(...), OptionSpec.optional(...).
  • Predicates: OptionSpec.is_valid_name(text), OptionSpec.is_valid_alias(text).
  • copy.replace(spec, repeatable=True) derives a modified copy.
- OptionRegistry: owns the name → spec and alias → name mappings and enforces
  uniqueness and name syntax at registration time.

Name syntax (names and aliases)
- Every character is an ASCII letter, an ASCII digit or a hyphen.
- A hyphen may only follow a letter/digit and may not be the last character
  (so no leading, trailing or doubled hyphens).
- Names are longer than one character; aliases are exactly one character.

Validation split
- OptionSpec only checks Python types (TypeError); the syntax of name/alias is
  checked by OptionRegistry.register() so that bad input surfaces as a
  structured fault (InvalidOptionError / InvalidAliasError).

Quick example:
    >>> registry = OptionRegistry()
    >>> registry.register(OptionSpec.flag("verbose", alias="v"))
    >>> registry.resolve("v")
    'verbose'
"""
import enum
import re

from loguru import logger

from .faults import *
from .utils import *

_HYPHEN_SEQUENCE = re.compile(r"[A-Za-z0-9]+(-[A-Za-z0-9]+)*")


class OptionKind(enum.Enum):
    """
    How an option consumes its value.

    - FLAG: no value, or an inline "true"/"false".
    - REQUIRED_VALUE: an inline value or the next token.
    - OPTIONAL_VALUE: an inline value only; never consumes the next token.
    """
    FLAG = "flag"
    REQUIRED_VALUE = "required-value"
    OPTIONAL_VALUE = "optional-value"

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


class OptionSpec(metaclass=SpecType, final=True):
    """
    Named option specification.

    Properties
    - name: canonical long name (referenced as --name).
    - alias: single-character short name (referenced as -a) or None.
    - kind: OptionKind.
    - repeatable: whether the option may be given more than once per parse.
    """

    __introspectable__ = (
        "name",
        "kind",
        "alias",
        "repeatable",
    )

    def __init__(self, name, kind=OptionKind.FLAG, alias=None, repeatable=False):
        """
        Construct an OptionSpec.

        Parameters
        - name: str
          Canonical name without the leading "--".
        - kind: OptionKind
        - alias: str | None
          Single character without the leading "-".
        - repeatable: bool

        Raises
        - TypeError: when a parameter has the wrong type. Name syntax is not
          checked here (see OptionRegistry.register()).
        """
        if not isinstance(name, str):
            raise TypeError(f"{type(self).__typename__} 'name' must be a string")
        if not isinstance(kind, OptionKind):
            raise TypeError(f"{type(self).__typename__} 'kind' must be an option-kind")
        if not isinstance(alias, str | None):
            raise TypeError(f"{type(self).__typename__} 'alias' must be a string")

        self._name = name
        self._kind = kind
        self._alias = alias
        self._repeatable = bool(repeatable)

    @classmethod
    def flag(cls, name, /, alias=None, repeatable=False):
        return cls(name, OptionKind.FLAG, alias, repeatable)

    @classmethod
    def required(cls, name, /, alias=None, repeatable=False):
        return cls(name, OptionKind.REQUIRED_VALUE, alias, repeatable)

    @classmethod
    def optional(cls, name, /, alias=None, repeatable=False):
        return cls(name, OptionKind.OPTIONAL_VALUE, alias, repeatable)

    @staticmethod
    def is_valid_name(text, /):
        """
        True when text is a valid option name (see module docs), e.g. "dry-run".
        """
        return isinstance(text, str) and len(text) > 1 and text.isascii() and bool(_HYPHEN_SEQUENCE.fullmatch(text))

    @staticmethod
    def is_valid_alias(text, /):
        """
        True when text is a valid alias: one ASCII letter or digit.
        """
        return isinstance(text, str) and len(text) == 1 and text.isascii() and text.isalnum()


class OptionRegistry:
    """
    Registry of options keyed by name, with a secondary alias → name mapping.

    Invariants
    - names are unique; aliases are unique.
    - every alias resolves to a registered name.
    - every registered name/alias satisfies the name syntax.

    Lookups
    - lookup(name) -> OptionSpec | None
    - resolve(alias) -> str | None (the canonical name)
    """

    names = mirror("names")
    aliases = mirror("aliases")

    def __init__(self):
        self._names = {}
        self._aliases = {}

    def register(self, spec, /):
        """
        Register an option.

        Raises
        - TypeError: spec is not an OptionSpec.
        - InvalidOptionError: the name fails the name syntax.
        - DuplicateOptionError: the name is already registered.
        - InvalidAliasError: the alias is not a single ASCII letter/digit.
        - DuplicateAliasError: the alias is already registered.

        Every check runs before any insertion; a failure leaves the registry unchanged.
        """
        if not isinstance(spec, OptionSpec):
            raise TypeError("register() argument must be an option-spec")

        if not OptionSpec.is_valid_name(spec.name):
            raise InvalidOptionError(name=spec.name)
        if spec.name in self._names:
            raise DuplicateOptionError(name=spec.name)

        if spec.alias is not None:
            if not OptionSpec.is_valid_alias(spec.alias):
                raise InvalidAliasError(alias=spec.alias)
            if spec.alias in self._aliases:
                raise DuplicateAliasError(alias=spec.alias)
            self._aliases[spec.alias] = spec.name

        self._names[spec.name] = spec
        logger.debug("registered option {!r}", spec)

    def lookup(self, name, /):
        return self._names.get(name)

    def resolve(self, alias, /):
        return self._aliases.get(alias)

    def __contains__(self, name, /):
        return name in self._names

    def __iter__(self):
        return iter(self._names.values())

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return f"option-registry({', '.join(map(repr, self._names))})"


__all__ = (
    "OptionKind",
    "OptionSpec",
    "OptionRegistry",
)
