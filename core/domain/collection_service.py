"""Service applying configuration on top of the sequence and set operations."""

from __future__ import annotations

import logging
from collections.abc import Iterable as IterableABC
from typing import (
    AbstractSet,
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Mapping,
    Optional,
    Set,
    Sized,
    TypeVar,
)

from config.logger import ROOT_LOGGER, setup_logger
from config.settings import CollectionConfig
from core.domain import sequence_ops, set_ops
from core.domain.value_objects import FlattenError, TypeSpec, require_callable

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

logger = logging.getLogger(f"{ROOT_LOGGER}.service")


def _strict_sub_sequence(transform: Callable[[T], object]) -> Callable[[T], Optional[Iterable[U]]]:
    def _checked(item: T) -> Optional[Iterable[U]]:
        produced = transform(item)
        if produced is None:
            return None
        if isinstance(produced, (str, bytes, bytearray)):
            raise FlattenError(
                f"Flatten transform returned a {type(produced).__name__} for {item!r}; "
                "wrap it in a list to keep it whole"
            )
        if not isinstance(produced, IterableABC):
            raise FlattenError(
                f"Flatten transform returned non-iterable {type(produced).__name__} for {item!r}"
            )
        return produced

    return _checked


def _size(items: object) -> str:
    return str(len(items)) if isinstance(items, Sized) else "?"


class CollectionService:
    """Entry point for sequence and set transforms under a shared configuration."""

    def __init__(self, config: CollectionConfig | None = None) -> None:
        self.config = config or CollectionConfig()
        # the shared logger is only re-levelled when a level is named explicitly
        if self.config.log_level is not None:
            setup_logger(level=self.config.log_level)

    # ordered sequences

    def map_items(self, sequence: Iterable[T], transform: Callable[[T], U]) -> List[U]:
        result = sequence_ops.map_items(sequence, transform)
        logger.debug("map_items: %s in, %d out", _size(sequence), len(result))
        return result

    def filter_items(self, sequence: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
        result = sequence_ops.filter_items(sequence, predicate)
        logger.debug("filter_items: %s in, %d out", _size(sequence), len(result))
        return result

    def flatten(
        self,
        sequence: Iterable[T],
        transform: Callable[[T], Optional[Iterable[U]]],
    ) -> List[U]:
        """Flatten, rejecting strings and scalars when ``strict_flatten`` is set."""
        transform = require_callable(transform, "transform")
        if self.config.strict_flatten:
            transform = _strict_sub_sequence(transform)
        result = sequence_ops.flatten(sequence, transform)
        logger.debug("flatten: %s in, %d out", _size(sequence), len(result))
        return result

    def map_to_dict(
        self,
        sequence: Iterable[T],
        transform: Callable[[T], Optional[Mapping[K, V]]],
    ) -> Dict[K, V]:
        result = sequence_ops.map_to_dict(
            sequence, transform, on_duplicate=self.config.on_duplicate
        )
        logger.debug(
            "map_to_dict: %s in, %d keys out (policy=%s)",
            _size(sequence),
            len(result),
            self.config.on_duplicate,
        )
        return result

    def objects_of_type(self, sequence: Iterable[T], desired: TypeSpec) -> List[T]:
        result = sequence_ops.objects_of_type(sequence, desired)
        logger.debug("objects_of_type: %s in, %d out", _size(sequence), len(result))
        return result

    def first_matching(
        self,
        sequence: Iterable[T],
        predicate: Callable[[T], bool],
    ) -> Optional[T]:
        result = sequence_ops.first_matching(sequence, predicate)
        logger.debug("first_matching: %s in, found=%s", _size(sequence), result is not None)
        return result

    def contains_matching(self, sequence: Iterable[T], predicate: Callable[[T], bool]) -> bool:
        result = sequence_ops.contains_matching(sequence, predicate)
        logger.debug("contains_matching: %s in, found=%s", _size(sequence), result)
        return result

    # sets

    def map_set(self, items: AbstractSet[T], transform: Callable[[T], U]) -> Set[U]:
        result = set_ops.map_set(items, transform)
        logger.debug("map_set: %d in, %d out", len(items), len(result))
        return result

    def filter_set(self, items: AbstractSet[T], predicate: Callable[[T], bool]) -> Set[T]:
        result = set_ops.filter_set(items, predicate)
        logger.debug("filter_set: %d in, %d out", len(items), len(result))
        return result

    def set_objects_of_type(self, items: AbstractSet[T], desired: TypeSpec) -> Set[T]:
        result = set_ops.set_objects_of_type(items, desired)
        logger.debug("set_objects_of_type: %d in, %d out", len(items), len(result))
        return result

    def any_matching(
        self,
        items: AbstractSet[T],
        predicate: Callable[[T], bool],
    ) -> Optional[T]:
        result = set_ops.any_matching(items, predicate)
        logger.debug("any_matching: %d in, found=%s", len(items), result is not None)
        return result
