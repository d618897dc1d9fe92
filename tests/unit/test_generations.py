"""Unit tests for the generation → national id table."""

import pytest

from app.errors import InvalidGeneration
from resolvers.generations import GENERATIONS, range_for


def test_ranges_are_contiguous() -> None:
    """Each generation starts right after the previous one ends."""
    previous_last = 0
    for generation in range(1, 9):
        first_id, last_id = range_for(generation)
        assert first_id == previous_last + 1, f"gap before generation {generation}"
        assert first_id <= last_id
        previous_last = last_id


def test_table_bounds() -> None:
    assert range_for(1)[0] == 1
    assert range_for(8)[1] == 898


def test_known_values() -> None:
    assert range_for(1) == (1, 151)
    assert range_for(3) == (252, 386)
    assert range_for(6) == (650, 721)


def test_table_is_ordered_by_generation() -> None:
    assert [g.generation for g in GENERATIONS] == list(range(1, 9))


@pytest.mark.parametrize("generation", [0, 9, -1, 255])
def test_unknown_generation_raises(generation: int) -> None:
    with pytest.raises(InvalidGeneration):
        range_for(generation)
