"""In-memory adapters over built-in sequences and sets."""

from __future__ import annotations

from typing import AbstractSet, Any, Callable, Dict, Hashable, Mapping, Optional, Sequence

from core.domain.collection_service import CollectionService
from core.domain.value_objects import TypeSpec
from ports.collection_port import SequenceTransformPort, SetTransformPort


def _like(source: Any, values: list) -> Sequence[Any]:
    return tuple(values) if isinstance(source, tuple) else values


class InMemorySequenceAdapter(SequenceTransformPort):
    """Adapter over lists and tuples; tuple inputs produce tuple outputs."""

    def __init__(self, service: CollectionService | None = None) -> None:
        self._service = service or CollectionService()

    def map_items(self, sequence: Sequence[Any], transform: Callable[[Any], Any]) -> Sequence[Any]:
        return _like(sequence, self._service.map_items(sequence, transform))

    def filter_items(self, sequence: Sequence[Any], predicate: Callable[[Any], bool]) -> Sequence[Any]:
        return _like(sequence, self._service.filter_items(sequence, predicate))

    def flatten(self, sequence: Sequence[Any], transform: Callable[[Any], Any]) -> Sequence[Any]:
        return _like(sequence, self._service.flatten(sequence, transform))

    def map_to_dict(
        self,
        sequence: Sequence[Any],
        transform: Callable[[Any], Optional[Mapping[Hashable, Any]]],
    ) -> Dict[Hashable, Any]:
        return self._service.map_to_dict(sequence, transform)

    def objects_of_type(self, sequence: Sequence[Any], desired: TypeSpec) -> Sequence[Any]:
        return _like(sequence, self._service.objects_of_type(sequence, desired))

    def first_matching(self, sequence: Sequence[Any], predicate: Callable[[Any], bool]) -> Any:
        return self._service.first_matching(sequence, predicate)

    def contains_matching(self, sequence: Sequence[Any], predicate: Callable[[Any], bool]) -> bool:
        return self._service.contains_matching(sequence, predicate)


class InMemorySetAdapter(SetTransformPort):
    """Adapter over sets; frozenset inputs produce frozenset outputs."""

    def __init__(self, service: CollectionService | None = None) -> None:
        self._service = service or CollectionService()

    @staticmethod
    def _like(source: AbstractSet[Any], values: set) -> AbstractSet[Any]:
        return frozenset(values) if isinstance(source, frozenset) else values

    def map_set(self, items: AbstractSet[Any], transform: Callable[[Any], Any]) -> AbstractSet[Any]:
        return self._like(items, self._service.map_set(items, transform))

    def filter_set(self, items: AbstractSet[Any], predicate: Callable[[Any], bool]) -> AbstractSet[Any]:
        return self._like(items, self._service.filter_set(items, predicate))

    def set_objects_of_type(self, items: AbstractSet[Any], desired: TypeSpec) -> AbstractSet[Any]:
        return self._like(items, self._service.set_objects_of_type(items, desired))

    def any_matching(self, items: AbstractSet[Any], predicate: Callable[[Any], bool]) -> Any:
        return self._service.any_matching(items, predicate)
