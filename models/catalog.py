"""Pydantic models for the creature catalog.

The catalog is an ordered, immutable list of :class:`CatalogEntry`.  Order is
part of the data: the entry at 0-based position ``i`` has national id
``i + 1``, which is what the generation ranges index into.
"""

from collections.abc import Iterator, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.errors import IndexOutOfBounds

# Forms list sentinel meaning "the default appearance, no name suffix".
REGULAR_FORM = "regular"


class CatalogEntry(BaseModel):
    """One creature: canonical name plus its supported forms."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    """Canonical, case-sensitive name; also the asset store key."""

    forms: tuple[str, ...] = ()
    """Ordered forms; may contain the ``"regular"`` sentinel."""

    @property
    def alternate_forms(self) -> list[str]:
        """Forms that produce a ``{name}-{form}`` asset, in catalog order."""
        return [f for f in self.forms if f != REGULAR_FORM]


class Catalog(BaseModel):
    """Ordered, read-only collection of catalog entries."""

    model_config = ConfigDict(frozen=True)

    entries: tuple[CatalogEntry, ...]

    @model_validator(mode="after")
    def _reject_duplicate_names(self) -> "Catalog":
        seen: set[str] = set()
        for entry in self.entries:
            if entry.name in seen:
                raise ValueError(f"duplicate catalog name: {entry.name}")
            seen.add(entry.name)
        return self

    @classmethod
    def from_entries(cls, entries: Sequence[CatalogEntry]) -> "Catalog":
        return cls(entries=tuple(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:  # type: ignore[override]
        return iter(self.entries)

    def __contains__(self, name: object) -> bool:
        return any(entry.name == name for entry in self.entries)

    def get(self, name: str) -> CatalogEntry | None:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def by_id(self, national_id: int) -> CatalogEntry:
        """Return the entry with 1-based *national_id*.

        Raises:
            IndexOutOfBounds: If *national_id* is outside ``1..len(self)``.
        """
        if national_id < 1 or national_id > len(self.entries):
            raise IndexOutOfBounds(national_id, len(self.entries))
        return self.entries[national_id - 1]

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]
