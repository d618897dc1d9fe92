"""Renderer — writes a resolved sprite to an output stream."""

import sys
from typing import TextIO

from app.utils.logging import get_logger
from models.selection import ResolvedAsset, asset_key
from store.asset_store import AssetStore


class Renderer:
    """Print colorscripts from an :class:`~store.asset_store.AssetStore`.

    Args:
        store: Source of sprite text.
        out: Output stream; defaults to ``sys.stdout`` at render time.
    """

    def __init__(self, store: AssetStore, out: TextIO | None = None) -> None:
        self.store = store
        self.out = out
        self._log = get_logger("render.renderer")

    def render(
        self,
        display_name: str,
        is_shiny: bool,
        is_large: bool,
        show_title: bool = True,
    ) -> None:
        """Write the optional title line and the sprite content verbatim.

        The asset is fetched before anything is written, so a failed lookup
        leaves the output untouched.

        Raises:
            AssetNotFound: No sprite exists for the key.
            AssetNotUtf8: The sprite is not valid UTF-8.
        """
        key = asset_key(display_name, is_shiny, is_large)
        content = self.store.get_text(key)

        out = self.out or sys.stdout
        if show_title:
            title = f"{display_name} (shiny)" if is_shiny else display_name
            out.write(title + "\n")
        out.write(content)
        out.flush()

        self._log.debug("asset_rendered", key=key, show_title=show_title)

    def render_asset(self, resolved: ResolvedAsset, show_title: bool = True) -> None:
        self.render(resolved.display_name, resolved.is_shiny, resolved.is_large, show_title)
