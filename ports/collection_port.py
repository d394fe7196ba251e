"""Collection transform port definitions."""

from __future__ import annotations

from typing import Any, Callable, Hashable, Mapping, Optional, Protocol, runtime_checkable

from core.domain.value_objects import TypeSpec


@runtime_checkable
class SequenceTransformPort(Protocol):
    """Port for order-preserving transforms over sequence-like containers."""

    def map_items(self, sequence: Any, transform: Callable[[Any], Any]) -> Any:
        ...

    def filter_items(self, sequence: Any, predicate: Callable[[Any], bool]) -> Any:
        ...

    def flatten(self, sequence: Any, transform: Callable[[Any], Any]) -> Any:
        ...

    def map_to_dict(
        self,
        sequence: Any,
        transform: Callable[[Any], Optional[Mapping[Hashable, Any]]],
    ) -> dict:
        ...

    def objects_of_type(self, sequence: Any, desired: TypeSpec) -> Any:
        ...

    def first_matching(self, sequence: Any, predicate: Callable[[Any], bool]) -> Any:
        ...

    def contains_matching(self, sequence: Any, predicate: Callable[[Any], bool]) -> bool:
        ...


@runtime_checkable
class SetTransformPort(Protocol):
    """Port for transforms over unordered unique-element containers."""

    def map_set(self, items: Any, transform: Callable[[Any], Any]) -> Any:
        ...

    def filter_set(self, items: Any, predicate: Callable[[Any], bool]) -> Any:
        ...

    def set_objects_of_type(self, items: Any, desired: TypeSpec) -> Any:
        ...

    def any_matching(self, items: Any, predicate: Callable[[Any], bool]) -> Any:
        ...
