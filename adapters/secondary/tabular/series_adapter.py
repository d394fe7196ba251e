"""Adapter applying sequence transforms to pandas Series."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, List, Mapping, Optional

import numpy as np
import pandas as pd

from config.logger import ROOT_LOGGER
from core.domain.collection_service import CollectionService
from core.domain.value_objects import TypeFilter, TypeSpec, require_callable
from ports.collection_port import SequenceTransformPort

logger = logging.getLogger(f"{ROOT_LOGGER}.adapters.series")


def _values(series: pd.Series) -> List[Any]:
    # tolist converts numpy scalars to builtins so type filters see int/float
    return series.tolist()


def _mask(values: List[Any], test: Callable[[Any], bool]) -> np.ndarray:
    return np.fromiter((bool(test(value)) for value in values), dtype=bool, count=len(values))


class PandasSeriesAdapter(SequenceTransformPort):
    """Sequence adapter keeping the index labels of retained elements."""

    def __init__(self, service: CollectionService | None = None) -> None:
        self._service = service or CollectionService()

    def map_items(self, sequence: pd.Series, transform: Callable[[Any], Any]) -> pd.Series:
        mapped = self._service.map_items(_values(sequence), transform)
        return pd.Series(mapped, index=sequence.index.copy(), name=sequence.name)

    def filter_items(self, sequence: pd.Series, predicate: Callable[[Any], bool]) -> pd.Series:
        predicate = require_callable(predicate, "predicate")
        mask = _mask(_values(sequence), predicate)
        logger.debug("filter_items kept %d of %d rows", int(mask.sum()), len(mask))
        return sequence[mask].copy()

    def flatten(self, sequence: pd.Series, transform: Callable[[Any], Any]) -> pd.Series:
        """Flatten, repeating each source label once per produced element."""
        transform = require_callable(transform, "transform")
        labels: List[Hashable] = []
        flattened: List[Any] = []
        for label, value in zip(sequence.index, _values(sequence)):
            produced = self._service.flatten([value], transform)
            flattened.extend(produced)
            labels.extend([label] * len(produced))
        index = pd.Index(labels, name=sequence.index.name)
        return pd.Series(flattened, index=index, name=sequence.name)

    def map_to_dict(
        self,
        sequence: pd.Series,
        transform: Callable[[Any], Optional[Mapping[Hashable, Any]]],
    ) -> Dict[Hashable, Any]:
        return self._service.map_to_dict(_values(sequence), transform)

    def objects_of_type(self, sequence: pd.Series, desired: TypeSpec) -> pd.Series:
        type_filter = TypeFilter.of(desired)
        mask = _mask(_values(sequence), type_filter.matches)
        return sequence[mask].copy()

    def first_matching(self, sequence: pd.Series, predicate: Callable[[Any], bool]) -> Any:
        return self._service.first_matching(_values(sequence), predicate)

    def contains_matching(self, sequence: pd.Series, predicate: Callable[[Any], bool]) -> bool:
        return self._service.contains_matching(_values(sequence), predicate)
