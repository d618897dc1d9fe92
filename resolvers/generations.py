"""Generation → national id range table.

Fixed data, not derived from the catalog.  Ranges are inclusive, contiguous
and cover ids 1..898.
"""

from typing import NamedTuple

from app.errors import InvalidGeneration


class GenerationRange(NamedTuple):
    generation: int
    first_id: int
    last_id: int


GENERATIONS: tuple[GenerationRange, ...] = (
    GenerationRange(1, 1, 151),
    GenerationRange(2, 152, 251),
    GenerationRange(3, 252, 386),
    GenerationRange(4, 387, 493),
    GenerationRange(5, 494, 649),
    GenerationRange(6, 650, 721),
    GenerationRange(7, 722, 809),
    GenerationRange(8, 810, 898),
)

FIRST_GENERATION = GENERATIONS[0].generation
LAST_GENERATION = GENERATIONS[-1].generation


def range_for(generation: int) -> tuple[int, int]:
    """Return ``(first_id, last_id)`` for *generation*.

    Raises:
        InvalidGeneration: If *generation* is not in the table.
    """
    for entry in GENERATIONS:
        if entry.generation == generation:
            return entry.first_id, entry.last_id
    raise InvalidGeneration(generation)
