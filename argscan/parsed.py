"""
Parsed argument model.

A parse returns a list of ParsedArg entries in token order. The variant set is
closed; consumers dispatch with match:

    match entry:
        case Positional(value):
            ...
        case Flag(name, value):
            ...
        case RequiredValue(name, value) | OptionalValue(name, value):
            ...

Entries are frozen: the list is built once per parse and never mutated by the parser afterwards.
"""
from dataclasses import dataclass


class ParsedArg:
    """Base of the four parsed entry variants."""
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class Positional(ParsedArg):
    value: str


@dataclass(frozen=True, slots=True)
class Flag(ParsedArg):
    name: str
    value: bool


@dataclass(frozen=True, slots=True)
class RequiredValue(ParsedArg):
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class OptionalValue(ParsedArg):
    # None when the option was given without an inline value
    name: str
    value: str | None = None


__all__ = (
    "ParsedArg",
    "Positional",
    "Flag",
    "RequiredValue",
    "OptionalValue",
)
