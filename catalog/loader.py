"""Catalog loader — reads the bundled creature list.

Source path priority:
  1. Explicit ``path`` argument
  2. ``POKESCRIPT_CATALOG`` env var
  3. Bundled ``data/pokemon.json``

The file is a JSON array of ``{"name": str, "forms": [str, ...]}`` records.
It is validated against ``data/schemas/pokemon.v1.json`` before any model is
built, so a malformed file fails as a whole with :class:`ParseError`.
"""

import json
import os
from collections.abc import Iterator
from pathlib import Path

import jsonschema
from pydantic import ValidationError

from app.errors import ParseError
from app.utils.logging import get_logger
from models.catalog import Catalog, CatalogEntry

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"
_DEFAULT_CATALOG = _DATA_DIR / "pokemon.json"
_SCHEMA_PATH = _DATA_DIR / "schemas" / "pokemon.v1.json"

_log = get_logger("catalog.loader")


def _catalog_path(path: str | Path | None) -> Path:
    return Path(path or os.environ.get("POKESCRIPT_CATALOG") or _DEFAULT_CATALOG)


def _load_schema() -> dict:
    return json.loads(_SCHEMA_PATH.read_text(encoding="utf-8"))


def load(path: str | Path | None = None) -> Catalog:
    """Load, validate and return the catalog.

    Raises:
        ParseError: If the file cannot be read, is not JSON, violates the
            catalog schema, or repeats a name.
    """
    source = _catalog_path(path)

    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ParseError(f"failed to read catalog {source}: {exc}") from exc
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ParseError(f"catalog {source} is not valid JSON: {exc}") from exc

    try:
        jsonschema.validate(instance=raw, schema=_load_schema())
    except jsonschema.ValidationError as exc:
        raise ParseError(
            f"catalog {source} does not conform to pokemon.v1.json: {exc.message}"
        ) from exc

    try:
        catalog = Catalog.from_entries(
            [CatalogEntry(name=item["name"], forms=tuple(item["forms"])) for item in raw]
        )
    except ValidationError as exc:
        raise ParseError(f"catalog {source} is malformed: {exc}") from exc

    _log.debug("catalog_loaded", path=str(source), entries=len(catalog))
    return catalog


def list_names(catalog: Catalog) -> Iterator[str]:
    """Yield each canonical name in catalog order.

    A new generator is returned on every call, so the listing can be
    restarted freely.
    """
    for entry in catalog:
        yield entry.name
