"""Exception hierarchy for pokescript.

Every failure a lookup, selection or render step can hit is a subclass of
:class:`PokescriptError`.  Nothing below the CLI layer prints or exits; the
CLI converts these into ``ERROR: ...`` lines on stderr and an exit code.
"""


class PokescriptError(Exception):
    """Base class; ``str(exc)`` is the user-facing message."""

    exit_code: int = 1


class UsageError(PokescriptError):
    """Conflicting or incomplete command-line flags."""

    exit_code = 2


class ParseError(PokescriptError):
    """The bundled catalog data is unreadable or malformed."""


class UnknownPokemon(PokescriptError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Invalid pokemon {name}")
        self.name = name


class UnknownForm(PokescriptError):
    """Requested form is not one of the entry's alternate forms.

    ``alternatives`` lists the valid alternate forms (``"regular"`` excluded)
    so the caller can report them; it is empty when the creature has none.
    """

    def __init__(self, name: str, form: str, alternatives: list[str]) -> None:
        super().__init__(f"Invalid form '{form}' for pokemon {name}")
        self.name = name
        self.form = form
        self.alternatives = list(alternatives)


class InvalidGenerationFormat(PokescriptError):
    def __init__(self, spec: str, detail: str = "") -> None:
        message = f"Invalid generation format '{spec}'"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.spec = spec


class InvalidGeneration(PokescriptError):
    def __init__(self, generation: int | None = None) -> None:
        super().__init__("Invalid generation number provided.")
        self.generation = generation


class IndexOutOfBounds(PokescriptError):
    """A generation range points past the end of the catalog."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Pokemon index out of bounds: {index} > {size}")
        self.index = index
        self.size = size


class NoValidNames(PokescriptError):
    def __init__(self, rejected: list[str] | None = None) -> None:
        super().__init__("No correct pokemon names have been provided.")
        self.rejected = list(rejected or [])


class RenderError(PokescriptError):
    """Base for failures while fetching an asset for display."""

    def __init__(self, message: str, key: str) -> None:
        super().__init__(message)
        self.key = key


class AssetNotFound(RenderError):
    def __init__(self, name: str, key: str) -> None:
        super().__init__(f"Colorscript for '{name}' not found at {key}", key)
        self.name = name


class AssetNotUtf8(RenderError):
    def __init__(self, name: str, key: str) -> None:
        super().__init__(f"Could not read colorscript content for '{name}'", key)
        self.name = name
