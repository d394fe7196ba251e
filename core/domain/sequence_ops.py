"""Transform, filter, flatten and search operations over ordered sequences.

Every function reads its input once, in order, and returns a freshly built
container. Inputs are never mutated. Exceptions raised by the supplied
callable propagate unchanged and abort the traversal.
"""

from __future__ import annotations

from typing import (
    Callable,
    Dict,
    Hashable,
    Iterable,
    List,
    Literal,
    Mapping,
    Optional,
    TypeVar,
)

from core.domain.value_objects import (
    DuplicateKeyError,
    TypeFilter,
    TypeSpec,
    require_callable,
)

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

DuplicatePolicy = Literal["last", "first", "raise"]
DUPLICATE_POLICIES = ("last", "first", "raise")


def map_items(sequence: Iterable[T], transform: Callable[[T], U]) -> List[U]:
    """Apply ``transform`` to every element, keeping length and order."""
    transform = require_callable(transform, "transform")
    return [transform(item) for item in sequence]


def filter_items(sequence: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    """Return the elements for which ``predicate`` holds, in original order."""
    predicate = require_callable(predicate, "predicate")
    return [item for item in sequence if predicate(item)]


def flatten(
    sequence: Iterable[T],
    transform: Callable[[T], Optional[Iterable[U]]],
) -> List[U]:
    """Concatenate the sub-sequences produced by ``transform``.

    A ``None`` result contributes nothing, as does an empty iterable.
    """
    transform = require_callable(transform, "transform")
    result: List[U] = []
    for item in sequence:
        produced = transform(item)
        if produced is None:
            continue
        result.extend(produced)
    return result


def map_to_dict(
    sequence: Iterable[T],
    transform: Callable[[T], Optional[Mapping[K, V]]],
    *,
    on_duplicate: DuplicatePolicy = "last",
) -> Dict[K, V]:
    """Merge the entries produced for each element into one dictionary.

    ``transform`` returns a mapping (usually holding a single entry) or
    ``None``. Entries are merged in iteration order; when two elements yield
    the same key, ``on_duplicate`` decides the outcome:

    * ``"last"``: the later value replaces the earlier one.
    * ``"first"``: the earlier value is kept.
    * ``"raise"``: :class:`DuplicateKeyError` is raised.
    """
    transform = require_callable(transform, "transform")
    if on_duplicate not in DUPLICATE_POLICIES:
        raise ValueError(f"Unsupported duplicate key policy: {on_duplicate}")
    result: Dict[K, V] = {}
    for item in sequence:
        entries = transform(item)
        if not entries:
            continue
        for key, value in entries.items():
            if key in result:
                if on_duplicate == "first":
                    continue
                if on_duplicate == "raise":
                    raise DuplicateKeyError(key)
            result[key] = value
    return result


def objects_of_type(sequence: Iterable[T], desired: TypeSpec) -> List[T]:
    """Return the elements that are instances of ``desired``, order preserved."""
    type_filter = TypeFilter.of(desired)
    return [item for item in sequence if type_filter.matches(item)]


def first_matching(
    sequence: Iterable[T],
    predicate: Callable[[T], bool],
) -> Optional[T]:
    """Return the first element satisfying ``predicate``, or ``None``."""
    predicate = require_callable(predicate, "predicate")
    for item in sequence:
        if predicate(item):
            return item
    return None


def contains_matching(sequence: Iterable[T], predicate: Callable[[T], bool]) -> bool:
    predicate = require_callable(predicate, "predicate")
    return any(predicate(item) for item in sequence)
