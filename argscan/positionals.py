"""
argscan positional specifications and registry.

- PositionalKind: NAMED (one required slot) or REST (catch-all for the remaining values).
- PositionalSpec: immutable descriptor of one slot; PositionalSpec.named() / PositionalSpec.rest().
- PositionalRegistry: ordered slots (first declared, first consumed). A REST slot
  must be the last one; appending after it fails with InvalidRestPositionError.
"""
import enum

from loguru import logger

from .faults import *
from .utils import *


class PositionalKind(enum.Enum):
    NAMED = "named"
    REST = "rest"

    def __repr__(self):
        return f"{type(self).__name__}.{self.name}"


class PositionalSpec(metaclass=SpecType, final=True):
    """
    Positional slot specification.

    A NAMED slot requires one positional value; a REST slot requires none and
    absorbs whatever positionals remain.
    """

    __introspectable__ = (
        "kind",
    )

    def __init__(self, kind=PositionalKind.NAMED):
        if not isinstance(kind, PositionalKind):
            raise TypeError(f"{type(self).__typename__} 'kind' must be a positional-kind")
        self._kind = kind

    @classmethod
    def named(cls):
        return cls(PositionalKind.NAMED)

    @classmethod
    def rest(cls):
        return cls(PositionalKind.REST)


class PositionalRegistry:
    """
    Ordered registry of positional slots.

    Properties
    - named: number of NAMED slots (the minimum positional count of a parse).
    - rest: whether a REST slot was declared.
    """

    def __init__(self):
        self._specs = []

    @property
    def named(self):
        return sum(spec.kind is PositionalKind.NAMED for spec in self._specs)

    @property
    def rest(self):
        return bool(self._specs) and self._specs[-1].kind is PositionalKind.REST

    def register(self, spec, /):
        """
        Append a slot.

        Raises
        - TypeError: spec is not a PositionalSpec.
        - InvalidRestPositionError: the last declared slot is already a REST slot.
        """
        if not isinstance(spec, PositionalSpec):
            raise TypeError("register() argument must be a positional-spec")
        if self.rest:
            raise InvalidRestPositionError()
        self._specs.append(spec)
        logger.debug("registered positional {!r} at index {}", spec, len(self._specs) - 1)

    def __iter__(self):
        return iter(self._specs)

    def __len__(self):
        return len(self._specs)

    def __getitem__(self, index, /):
        return self._specs[index]

    def __repr__(self):
        return f"positional-registry({', '.join(spec.kind.value for spec in self._specs)})"


__all__ = (
    "PositionalKind",
    "PositionalSpec",
    "PositionalRegistry",
)
