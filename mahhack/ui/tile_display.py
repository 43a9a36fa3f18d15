"""Tile display formatting with colors for terminal output."""

from typing import Iterable

from rich.text import Text

from mahhack.core.tile import Tile, TileSuit, TILE_NAMES_34


def get_tile_short_names() -> list:
    """Get localized tile short names for display.

    Number tiles (1m-9s) are universal. Honor tiles are translated.
    """
    from mahhack.ui.i18n import t
    return TILE_NAMES_34[:27] + [
        t("tile.east"), t("tile.south"), t("tile.west"), t("tile.north"),
        t("tile.haku"), t("tile.hatsu"), t("tile.chun"),
    ]


# Color schemes
SUIT_COLORS = {
    TileSuit.MAN: "red",
    TileSuit.PIN: "blue",
    TileSuit.SOU: "green",
    TileSuit.WIND: "yellow",
    TileSuit.DRAGON: "yellow",
}


def tile_to_rich_text(tile: Tile, highlight: bool = False) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    name = get_tile_short_names()[tile.index34]
    style = f"bold {SUIT_COLORS[tile.suit]}"
    if highlight:
        style += " on white"
    return Text(f"[{name}]", style=style)


def tile_to_simple_str(tile: Tile) -> str:
    """Simple string representation of a tile (stable, for logging)."""
    return tile.name


def tiles_to_rich_text(tiles: Iterable[Tile], separator: str = " ",
                       highlight_last: bool = False) -> Text:
    """Convert a list of tiles to Rich Text.

    With ``highlight_last`` the final tile (the drawn one) is set apart.
    """
    tiles = list(tiles)
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        is_last = highlight_last and i == len(tiles) - 1
        result.append_text(tile_to_rich_text(tile, highlight=is_last))
    return result
