"""Pydantic models for a selection request and its resolved asset."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, model_validator

from app.errors import UsageError


class SelectionMode(str, Enum):
    EXPLICIT             = "explicit"
    RANDOM_BY_GENERATION = "random_by_generation"
    RANDOM_BY_NAMES      = "random_by_names"


# Flag spelling used in usage errors for each random mode.
_MODE_FLAG: dict[SelectionMode, str] = {
    SelectionMode.RANDOM_BY_GENERATION: "--random",
    SelectionMode.RANDOM_BY_NAMES: "--random-by-names",
}


class SelectionRequest(BaseModel):
    """What the user asked for; exactly one selection mode is active."""

    model_config = ConfigDict(frozen=True)

    mode: SelectionMode
    name: str | None = None
    form: str | None = None
    shiny: bool = False
    large: bool = False
    generations: str | None = None
    """Generation spec for random-by-generation, e.g. ``"1-8"`` or ``"2,4"``."""
    names: str | None = None
    """Comma-separated names for random-by-names."""

    # A plain ValueError would be wrapped in ValidationError; UsageError is
    # not a ValueError, so it propagates unchanged.
    @model_validator(mode="after")
    def _check_mode_inputs(self) -> "SelectionRequest":
        if self.mode is SelectionMode.EXPLICIT:
            if self.name is None:
                raise UsageError("explicit selection requires a pokemon name")
        elif self.form is not None:
            raise UsageError(f"--form flag unexpected with {_MODE_FLAG[self.mode]}")
        elif self.mode is SelectionMode.RANDOM_BY_GENERATION and self.generations is None:
            raise UsageError("random selection requires a generation spec")
        elif self.mode is SelectionMode.RANDOM_BY_NAMES and self.names is None:
            raise UsageError("--random-by-names requires a list of names")
        return self


class ResolvedAsset(BaseModel):
    """A fully resolved sprite: enough to build one asset store key."""

    model_config = ConfigDict(frozen=True)

    display_name: str
    """Name including any form suffix, e.g. ``"raichu-alola"``."""

    is_shiny: bool = False
    is_large: bool = False

    @property
    def key(self) -> str:
        return asset_key(self.display_name, self.is_shiny, self.is_large)


def asset_key(display_name: str, is_shiny: bool, is_large: bool) -> str:
    """Return the asset store key ``{small|large}/{regular|shiny}/{name}``."""
    size = "large" if is_large else "small"
    variant = "shiny" if is_shiny else "regular"
    return f"{size}/{variant}/{display_name}"
