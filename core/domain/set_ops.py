"""Operations over unordered collections of unique elements."""

from __future__ import annotations

from typing import AbstractSet, Callable, Hashable, Optional, Set, TypeVar

from core.domain.value_objects import TypeFilter, TypeSpec, require_callable

T = TypeVar("T", bound=Hashable)
U = TypeVar("U", bound=Hashable)


def map_set(items: AbstractSet[T], transform: Callable[[T], U]) -> Set[U]:
    """Apply ``transform`` to every element.

    Results are de-duplicated, so the output may be smaller than the input
    when ``transform`` is not injective.
    """
    transform = require_callable(transform, "transform")
    return {transform(item) for item in items}


def filter_set(items: AbstractSet[T], predicate: Callable[[T], bool]) -> Set[T]:
    predicate = require_callable(predicate, "predicate")
    return {item for item in items if predicate(item)}


def set_objects_of_type(items: AbstractSet[T], desired: TypeSpec) -> Set[T]:
    type_filter = TypeFilter.of(desired)
    return {item for item in items if type_filter.matches(item)}


def any_matching(items: AbstractSet[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """Return some element satisfying ``predicate``, or ``None``.

    Which element is returned depends on set iteration order and is not
    stable across processes.
    """
    predicate = require_callable(predicate, "predicate")
    for item in items:
        if predicate(item):
            return item
    return None
