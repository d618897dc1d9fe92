"""Unit tests for the catalog loader and catalog models.

Covers:
  1. The bundled data/pokemon.json loads, in order, with 898 entries.
  2. Malformed catalogs (bad JSON, schema violations, duplicates) → ParseError.
  3. list_names() is ordered and restartable.
  4. Catalog lookups by name and by national id.
  5. POKESCRIPT_CATALOG env var overrides the bundled file.
"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from app.errors import IndexOutOfBounds, ParseError
from catalog.loader import list_names, load
from models.catalog import Catalog, CatalogEntry

_BUNDLED_CATALOG = Path(__file__).resolve().parents[2] / "data" / "pokemon.json"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _write_catalog(tmp_path: Path, payload: object, name: str = "pokemon.json") -> Path:
    """Write *payload* as JSON to *tmp_path/name* and return the path."""
    p = tmp_path / name
    p.write_text(json.dumps(payload), encoding="utf-8")
    return p


# ---------------------------------------------------------------------------
# Bundled catalog
# ---------------------------------------------------------------------------


def test_bundled_catalog_has_all_national_ids() -> None:
    """The shipped catalog covers every id the generation table can draw."""
    catalog = load(_BUNDLED_CATALOG)
    assert len(catalog) == 898


def test_bundled_catalog_preserves_file_order() -> None:
    """Entry order matches the JSON array order; id = position + 1."""
    raw = json.loads(_BUNDLED_CATALOG.read_text(encoding="utf-8"))
    catalog = load(_BUNDLED_CATALOG)

    assert catalog.names() == [item["name"] for item in raw]
    assert catalog.by_id(1).name == "bulbasaur"
    assert catalog.by_id(25).name == "pikachu"
    assert catalog.by_id(151).name == "mew"
    assert catalog.by_id(152).name == "chikorita"
    assert catalog.by_id(898).name == "calyrex"


def test_bundled_catalog_forms_start_with_regular() -> None:
    catalog = load(_BUNDLED_CATALOG)
    raichu = catalog.get("raichu")

    assert raichu is not None
    assert raichu.forms[0] == "regular"
    assert raichu.alternate_forms == ["alola"]


def test_load_uses_env_var_when_no_path_given(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write_catalog(tmp_path, [{"name": "missingno", "forms": ["regular"]}])
    monkeypatch.setenv("POKESCRIPT_CATALOG", str(path))

    catalog = load()
    assert catalog.names() == ["missingno"]


# ---------------------------------------------------------------------------
# Malformed catalogs
# ---------------------------------------------------------------------------


def test_invalid_json_raises_parse_error(tmp_path: Path) -> None:
    p = tmp_path / "pokemon.json"
    p.write_text("[{\"name\": \"pikachu\",", encoding="utf-8")

    with pytest.raises(ParseError):
        load(p)


def test_missing_file_raises_parse_error(tmp_path: Path) -> None:
    with pytest.raises(ParseError):
        load(tmp_path / "does-not-exist.json")


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "pikachu", "forms": []},               # not an array
        [],                                              # empty
        [{"name": "pikachu"}],                           # forms missing
        [{"forms": ["regular"]}],                        # name missing
        [{"name": "pikachu", "forms": "regular"}],       # forms not a list
        [{"name": "pikachu", "forms": [1]}],             # form not a string
        [{"name": "", "forms": []}],                     # empty name
        [{"name": "pikachu", "forms": [], "id": 25}],    # unknown field
    ],
)
def test_schema_violations_raise_parse_error(tmp_path: Path, payload: object) -> None:
    path = _write_catalog(tmp_path, payload)
    with pytest.raises(ParseError) as exc_info:
        load(path)
    assert "pokemon.v1.json" in str(exc_info.value)


def test_duplicate_names_raise_parse_error(tmp_path: Path) -> None:
    path = _write_catalog(
        tmp_path,
        [
            {"name": "eevee", "forms": ["regular"]},
            {"name": "eevee", "forms": ["regular", "gmax"]},
        ],
    )
    with pytest.raises(ParseError) as exc_info:
        load(path)
    assert "duplicate" in str(exc_info.value)


# ---------------------------------------------------------------------------
# list_names
# ---------------------------------------------------------------------------


def test_list_names_is_ordered_and_restartable() -> None:
    catalog = Catalog.from_entries(
        [CatalogEntry(name=n, forms=("regular",)) for n in ("pichu", "pikachu", "raichu")]
    )

    first = list(list_names(catalog))
    second = list(list_names(catalog))

    assert first == ["pichu", "pikachu", "raichu"]
    assert first == second


# ---------------------------------------------------------------------------
# Catalog model
# ---------------------------------------------------------------------------


def test_catalog_lookup_by_name_is_case_sensitive() -> None:
    catalog = Catalog.from_entries([CatalogEntry(name="eevee", forms=("regular",))])

    assert "eevee" in catalog
    assert "Eevee" not in catalog
    assert catalog.get("Eevee") is None


@pytest.mark.parametrize("national_id", [0, 2, -1])
def test_by_id_out_of_range_raises(national_id: int) -> None:
    catalog = Catalog.from_entries([CatalogEntry(name="eevee", forms=("regular",))])

    with pytest.raises(IndexOutOfBounds):
        catalog.by_id(national_id)


def test_alternate_forms_exclude_regular_sentinel() -> None:
    entry = CatalogEntry(name="meowth", forms=("regular", "alola", "galar"))
    assert entry.alternate_forms == ["alola", "galar"]


def test_catalog_entry_is_immutable() -> None:
    entry = CatalogEntry(name="eevee", forms=("regular",))
    with pytest.raises(ValidationError):
        entry.name = "vaporeon"
