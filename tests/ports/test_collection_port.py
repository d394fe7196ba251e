import pytest

from adapters.secondary.memory.collection_adapter import (
    InMemorySequenceAdapter,
    InMemorySetAdapter,
)
from adapters.secondary.tabular.series_adapter import PandasSeriesAdapter
from config.settings import CollectionConfig
from core.domain.collection_service import CollectionService
from core.domain.value_objects import MissingCallableError
from ports.collection_port import SequenceTransformPort, SetTransformPort


@pytest.fixture
def sequences() -> InMemorySequenceAdapter:
    return InMemorySequenceAdapter()


@pytest.fixture
def sets() -> InMemorySetAdapter:
    return InMemorySetAdapter()


def test_adapters_satisfy_ports(
    sequences: InMemorySequenceAdapter, sets: InMemorySetAdapter
) -> None:
    assert isinstance(sequences, SequenceTransformPort)
    assert isinstance(PandasSeriesAdapter(), SequenceTransformPort)
    assert isinstance(sets, SetTransformPort)


class TestInMemorySequenceAdapter:
    def test_list_in_list_out(self, sequences: InMemorySequenceAdapter) -> None:
        result = sequences.map_items([1, 2], lambda x: x * 2)
        assert result == [2, 4]
        assert isinstance(result, list)

    def test_tuple_in_tuple_out(self, sequences: InMemorySequenceAdapter) -> None:
        assert sequences.filter_items((1, 2, 3, 4), lambda x: x % 2 == 0) == (2, 4)
        assert sequences.flatten(((1, 2), (3,)), lambda x: x) == (1, 2, 3)
        assert sequences.objects_of_type((1, "a"), str) == ("a",)

    def test_search(self, sequences: InMemorySequenceAdapter) -> None:
        assert sequences.first_matching([5, 6, 7], lambda x: x > 5) == 6
        assert sequences.contains_matching([5, 6, 7], lambda x: x > 7) is False

    def test_map_to_dict_uses_service_policy(self) -> None:
        adapter = InMemorySequenceAdapter(
            CollectionService(CollectionConfig(on_duplicate="first"))
        )
        assert adapter.map_to_dict(["ant", "ape"], lambda w: {w[0]: w}) == {"a": "ant"}

    def test_missing_callable(self, sequences: InMemorySequenceAdapter) -> None:
        with pytest.raises(MissingCallableError):
            sequences.filter_items([1], None)


class TestInMemorySetAdapter:
    def test_set_in_set_out(self, sets: InMemorySetAdapter) -> None:
        result = sets.map_set({1, 2}, str)
        assert result == {"1", "2"}
        assert isinstance(result, set)

    def test_frozenset_in_frozenset_out(self, sets: InMemorySetAdapter) -> None:
        result = sets.filter_set(frozenset({1, 2, 3}), lambda x: x > 1)
        assert result == frozenset({2, 3})
        assert isinstance(result, frozenset)
        assert isinstance(sets.set_objects_of_type(frozenset({1, "a"}), int), frozenset)

    def test_any_matching(self, sets: InMemorySetAdapter) -> None:
        assert sets.any_matching({1, 2, 3}, lambda x: x == 2) == 2
        assert sets.any_matching(set(), lambda x: True) is None
