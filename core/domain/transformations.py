"""Domain models for chained sequence transformations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from core.domain.collection_service import CollectionService

# step name -> (service method, parameter name)
STEP_OPERATIONS: Dict[str, Tuple[str, str]] = {
    "map": ("map_items", "transform"),
    "filter": ("filter_items", "predicate"),
    "flatten": ("flatten", "transform"),
    "objects_of_type": ("objects_of_type", "desired"),
}


@dataclass(frozen=True)
class TransformationSpec:
    """Represents a single named step and its parameter payload."""

    name: str
    params: Dict[str, object]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Transformation name must be provided")
        if self.name not in STEP_OPERATIONS:
            raise ValueError(f"Unknown transformation: {self.name}")
        _, param = STEP_OPERATIONS[self.name]
        if param not in self.params:
            raise ValueError(f"Transformation '{self.name}' requires a '{param}' parameter")

    @classmethod
    def map(cls, transform) -> "TransformationSpec":
        return cls("map", {"transform": transform})

    @classmethod
    def filter(cls, predicate) -> "TransformationSpec":
        return cls("filter", {"predicate": predicate})

    @classmethod
    def flatten(cls, transform) -> "TransformationSpec":
        return cls("flatten", {"transform": transform})

    @classmethod
    def objects_of_type(cls, desired) -> "TransformationSpec":
        return cls("objects_of_type", {"desired": desired})

    def run(self, sequence: Iterable[Any], service: CollectionService) -> List[Any]:
        method, param = STEP_OPERATIONS[self.name]
        return getattr(service, method)(sequence, self.params[param])


@dataclass(frozen=True)
class TransformationChain:
    """Ordered collection of transformation specifications.

    A step may appear more than once; each occurrence runs again.
    """

    steps: Tuple[TransformationSpec, ...]

    def __post_init__(self) -> None:
        for spec in self.steps:
            if not isinstance(spec, TransformationSpec):
                raise TypeError(f"Chain steps must be TransformationSpec, got {spec!r}")

    @classmethod
    def empty(cls) -> "TransformationChain":
        return cls(steps=tuple())

    def append(self, spec: TransformationSpec) -> "TransformationChain":
        return TransformationChain(self.steps + (spec,))

    def __len__(self) -> int:
        return len(self.steps)

    def apply(
        self,
        sequence: Iterable[Any],
        service: CollectionService | None = None,
    ) -> List[Any]:
        """Run every step in order and return a fresh list."""
        service = service or CollectionService()
        result = list(sequence)
        for spec in self.steps:
            result = spec.run(result, service)
        return result
