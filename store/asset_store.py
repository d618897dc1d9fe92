"""AssetStore — read-only colorscript lookup by hierarchical key.

Keys are path-shaped strings ``{size}/{variant}/{name}``, for example
``small/shiny/pikachu`` or ``large/regular/raichu-alola``.  Values are the
raw sprite files: UTF-8 text carrying ANSI colour escapes.

Root resolution priority:
  1. Explicit constructor arg
  2. ``POKESCRIPT_ASSETS_ROOT`` env var (e.g. a full colorscripts checkout)
  3. Bundled ``data/colorscripts/``
"""

import os
from pathlib import Path

from app.errors import AssetNotFound, AssetNotUtf8
from app.utils.logging import get_logger

_DEFAULT_ASSETS_ROOT = Path(__file__).resolve().parent.parent / "data" / "colorscripts"


class AssetStore:
    """Directory-backed, read-only key/value store of sprite text.

    Usage::

        store = AssetStore()
        text = store.get_text("small/regular/pikachu")

    Args:
        root: Directory holding the ``{size}/{variant}/{name}`` tree.
            Defaults to ``POKESCRIPT_ASSETS_ROOT``, then the bundled tree.
    """

    def __init__(self, root: str | Path | None = None) -> None:
        chosen = (
            root
            or os.environ.get("POKESCRIPT_ASSETS_ROOT")
            or str(_DEFAULT_ASSETS_ROOT)
        )
        self.root = Path(chosen).resolve()
        self._log = get_logger("store.asset_store")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._path_for(key) is not None

    def get_bytes(self, key: str) -> bytes:
        """Return the raw bytes stored under *key*.

        Raises:
            AssetNotFound: No file exists for *key*.
        """
        path = self._path_for(key)
        if path is None:
            self._log.debug("asset_not_found", key=key, root=str(self.root))
            raise AssetNotFound(_name_of(key), key)
        return path.read_bytes()

    def get_text(self, key: str) -> str:
        """Return the content under *key* decoded as UTF-8.

        Raises:
            AssetNotFound: No file exists for *key*.
            AssetNotUtf8: The file exists but is not valid UTF-8.
        """
        data = self.get_bytes(key)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            self._log.debug("asset_not_utf8", key=key, root=str(self.root))
            raise AssetNotUtf8(_name_of(key), key) from None

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _path_for(self, key: str) -> Path | None:
        """Map *key* to an existing file under the root, or None.

        Keys that are absolute or climb out of the root never match.
        """
        parts = key.split("/")
        if not key or any(p in ("", ".", "..") for p in parts):
            return None
        candidate = self.root.joinpath(*parts)
        if not candidate.is_file():
            return None
        if not candidate.resolve().is_relative_to(self.root):
            return None
        return candidate


def _name_of(key: str) -> str:
    return key.rsplit("/", 1)[-1]
