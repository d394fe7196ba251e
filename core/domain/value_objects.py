"""Domain value objects and error types for collection transforms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Tuple, Union


class MissingCallableError(TypeError):
    """Raised when a required transform or predicate is not supplied."""


class InvalidTypeFilterError(TypeError):
    """Raised when a type filter cannot be built from the given argument."""


class DuplicateKeyError(KeyError):
    """Raised when a dictionary merge meets a key it has already seen."""

    def __init__(self, key: object) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Duplicate key produced during merge: {self.key!r}"


class FlattenError(ValueError):
    """Raised when a flatten transform yields something that is not a sub-sequence."""


def require_callable(fn: Callable[..., Any] | None, role: str) -> Callable[..., Any]:
    """Return ``fn`` unchanged, failing fast when it is absent or not callable."""
    if fn is None:
        raise MissingCallableError(f"A {role} must be provided")
    if not callable(fn):
        raise MissingCallableError(
            f"The {role} must be callable, got {type(fn).__name__}"
        )
    return fn


@dataclass(frozen=True, slots=True)
class TypeFilter:
    """Set of classes an element must be an instance of to be retained."""

    types: Tuple[type, ...]

    def __post_init__(self) -> None:
        if not self.types:
            raise InvalidTypeFilterError("Type filter requires at least one class")
        for candidate in self.types:
            if not isinstance(candidate, type):
                raise InvalidTypeFilterError(
                    f"Type filter expects classes, got {candidate!r}"
                )

    @classmethod
    def of(cls, desired: TypeSpec) -> "TypeFilter":
        """Normalise a class, tuple of classes, or existing filter."""
        if isinstance(desired, TypeFilter):
            return desired
        if isinstance(desired, type):
            return cls((desired,))
        if isinstance(desired, tuple):
            return cls(tuple(desired))
        raise InvalidTypeFilterError(
            f"Expected a class, tuple of classes or TypeFilter, got {desired!r}"
        )

    def matches(self, obj: object) -> bool:
        return isinstance(obj, self.types)

    def __str__(self) -> str:
        return " | ".join(t.__name__ for t in self.types)


TypeSpec = Union[type, Tuple[type, ...], TypeFilter]
