"""Selector — turns a SelectionRequest into one ResolvedAsset.

Three resolution paths, one per :class:`~models.selection.SelectionMode`:

  explicit              name (+ optional form) looked up in the catalog
  random_by_generation  uniform id draw inside a generation spec
                        ("3", "1-4", or "2,5,7")
  random_by_names       uniform pick among the valid names of a CSV list

All three share the shiny roll: the result is shiny when the caller asked for
it, or with probability ``SHINY_RATE`` otherwise.

A comma-separated generation spec picks ONE of the listed generations and
draws from that generation alone; ids are not pooled across the list the way
a dash range pools them across its span.
"""

import random
import sys
from collections.abc import Callable

from app.errors import (
    InvalidGeneration,
    InvalidGenerationFormat,
    NoValidNames,
    UnknownForm,
    UnknownPokemon,
)
from app.utils.logging import get_logger
from models.catalog import Catalog
from models.selection import ResolvedAsset, SelectionMode, SelectionRequest
from resolvers.generations import range_for

# Shiny encounter rate.
SHINY_RATE = 1.0 / 128.0

DEFAULT_GENERATIONS = "1-8"

_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def _stderr_warning(message: str) -> None:
    """Write *message* to stderr, in red when stderr is a terminal."""
    if sys.stderr.isatty():
        message = f"{_RED}{message}{_RESET}"
    print(message, file=sys.stderr)


def _parse_int(spec: str, part: str) -> int:
    try:
        return int(part.strip())
    except ValueError:
        raise InvalidGenerationFormat(spec, f"'{part}' is not a number") from None


class Selector:
    """Resolve selection requests against a loaded catalog.

    Args:
        catalog: The loaded :class:`~models.catalog.Catalog`.
        rng: Random source.  Defaults to a ``random.Random`` seeded from
            system entropy; tests pass a seeded instance.
        shiny_rate: Probability of an unrequested shiny result.
    """

    def __init__(
        self,
        catalog: Catalog,
        rng: random.Random | None = None,
        shiny_rate: float = SHINY_RATE,
    ) -> None:
        self.catalog = catalog
        self.rng = rng or random.Random()
        self.shiny_rate = shiny_rate
        self._log = get_logger("resolvers.selector")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def select(self, request: SelectionRequest) -> ResolvedAsset:
        """Resolve *request* to a concrete sprite."""
        if request.mode is SelectionMode.EXPLICIT:
            display_name = self.resolve_name(request.name, request.form)
        elif request.mode is SelectionMode.RANDOM_BY_GENERATION:
            display_name = self.pick_by_generation(request.generations)
        else:
            display_name = self.pick_by_names(request.names)

        resolved = ResolvedAsset(
            display_name=display_name,
            is_shiny=self.roll_shiny(request.shiny),
            is_large=request.large,
        )
        self._log.debug(
            "selection_resolved",
            mode=request.mode.value,
            display_name=resolved.display_name,
            is_shiny=resolved.is_shiny,
            is_large=resolved.is_large,
        )
        return resolved

    def resolve_name(self, name: str, form: str | None = None) -> str:
        """Return the display name for *name*, suffixed with *form* if given.

        Raises:
            UnknownPokemon: *name* is not in the catalog.
            UnknownForm: *form* is not one of the entry's alternate forms.
        """
        entry = self.catalog.get(name)
        if entry is None:
            raise UnknownPokemon(name)

        if form is None:
            return name

        alternatives = entry.alternate_forms
        if form not in alternatives:
            raise UnknownForm(name, form, alternatives)
        return f"{name}-{form}"

    def parse_generations(self, spec: str) -> tuple[int, int]:
        """Parse a generation spec into ``(start, end)`` generations.

        ``"2,4,6"`` picks one listed generation uniformly; ``"1-3"`` is an
        inclusive range; ``"5"`` is a single generation.

        Raises:
            InvalidGenerationFormat: *spec* matches none of the shapes.
        """
        if "," in spec:
            generations = [_parse_int(spec, part) for part in spec.split(",")]
            chosen = self.rng.choice(generations)
            return chosen, chosen

        if "-" in spec:
            parts = spec.split("-")
            if len(parts) != 2:
                raise InvalidGenerationFormat(spec, "expected a range like 1-3")
            return _parse_int(spec, parts[0]), _parse_int(spec, parts[1])

        generation = _parse_int(spec, spec)
        return generation, generation

    def pick_by_generation(self, spec: str = DEFAULT_GENERATIONS) -> str:
        """Return the name of a uniformly drawn creature within *spec*.

        Raises:
            InvalidGenerationFormat: *spec* cannot be parsed.
            InvalidGeneration: an endpoint is not a known generation, or the
                range is reversed.
            IndexOutOfBounds: the drawn id is past the end of the catalog.
        """
        start, end = self.parse_generations(spec)
        first_id = range_for(start)[0]
        last_id = range_for(end)[1]
        if first_id > last_id:
            raise InvalidGeneration(start)

        national_id = self.rng.randint(first_id, last_id)
        entry = self.catalog.by_id(national_id)
        self._log.debug(
            "generation_draw",
            spec=spec,
            first_id=first_id,
            last_id=last_id,
            national_id=national_id,
            name=entry.name,
        )
        return entry.name

    def pick_by_names(
        self,
        names: str,
        warn: Callable[[str], None] | None = None,
    ) -> str:
        """Return one valid name from the comma-separated *names*.

        Each name missing from the catalog is reported through *warn*
        (default: a line on stderr) and dropped.

        Raises:
            NoValidNames: none of the names is in the catalog.  Raised after
                every rejected name has been reported.
        """
        warn = warn or _stderr_warning
        valid: list[str] = []
        rejected: list[str] = []

        for name in names.split(","):
            if name in self.catalog:
                valid.append(name)
            else:
                rejected.append(name)
                self._log.info("invalid_pokemon_name", name=name)
                warn(f"Invalid pokemon {name}")

        if not valid:
            raise NoValidNames(rejected)
        return self.rng.choice(valid)

    def roll_shiny(self, explicit: bool = False) -> bool:
        """Return True if *explicit*, else with probability ``shiny_rate``."""
        if explicit:
            return True
        return self.rng.random() < self.shiny_rate
