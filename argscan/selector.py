"""
Read-only queries over a parsed entry list.

Selector knows nothing about registries: it only walks the entries. Lookups by
name return the first matching entry's value, in token order.

    >>> args = Selector([Flag("verbose", True), RequiredValue("output", "a.txt"), Positional("src")])
    >>> args.flag("verbose"), args.value("output"), args.first()
    (True, 'a.txt', 'src')
"""
from .parsed import *


class Selector:
    def __init__(self, args, /):
        self._args = tuple(args)
        if not all(isinstance(arg, ParsedArg) for arg in self._args):
            raise TypeError("selector argument must be an iterable of parsed args")

    def positionals(self):
        return [arg.value for arg in self._args if isinstance(arg, Positional)]

    def first(self, default=None):
        return next((arg.value for arg in self._args if isinstance(arg, Positional)), default)

    def last(self, default=None):
        return next((arg.value for arg in reversed(self._args) if isinstance(arg, Positional)), default)

    def flag(self, name, /, default=False):
        return next((arg.value for arg in self._args if isinstance(arg, Flag) and arg.name == name), default)

    def value(self, name, /, default=None):
        return next((arg.value for arg in self._args if isinstance(arg, RequiredValue) and arg.name == name), default)

    def values(self, name, /):
        return [arg.value for arg in self._args if isinstance(arg, RequiredValue) and arg.name == name]

    def optional(self, name, /, default=None):
        """
        Value of the first OptionalValue entry for name.

        The default is returned both when the option is absent and when its
        first occurrence carries no value; use `name in selector` to tell them apart.
        """
        for arg in self._args:
            if isinstance(arg, OptionalValue) and arg.name == name:
                return default if arg.value is None else arg.value
        return default

    def count(self, name, /):
        """
        Number of option entries (any kind) for name, e.g. 3 for "-vvv".
        """
        return sum(not isinstance(arg, Positional) and arg.name == name for arg in self._args)

    def __contains__(self, name, /):
        return self.count(name) > 0

    def __iter__(self):
        return iter(self._args)

    def __len__(self):
        return len(self._args)

    def __repr__(self):
        return f"selector({', '.join(map(repr, self._args))})"


__all__ = (
    "Selector",
)
