"""Dora (ドラ) resolution from indicator tiles."""

from typing import Iterable, List

from mahhack.core.tile import ALL_TILES, Tile


def next_dora_index(index34: int) -> int:
    """Get the dora index promoted by an indicator index.

    For number tiles: wraps 9->1 within the suit
    For wind: 東→南→西→北→東
    For dragon: 白→發→中→白
    """
    if not (0 <= index34 < 34):
        raise ValueError(f"index34 must be 0..33, got {index34}")
    if index34 < 27:
        suit_start = index34 - index34 % 9
        return suit_start + (index34 - suit_start + 1) % 9
    elif index34 < 31:
        return 27 + (index34 - 27 + 1) % 4
    else:
        return 31 + (index34 - 31 + 1) % 3


def next_dora_from_indicator(indicator: Tile) -> Tile:
    """Get the dora tile shown by an indicator tile."""
    return ALL_TILES[next_dora_index(indicator.index34)]


def dora_tiles_from_indicators(indicators: Iterable[Tile]) -> List[int]:
    """Promote every revealed indicator; the same dora may appear twice."""
    return [next_dora_index(t.index34) for t in indicators]


def dora_count(tiles_34: List[int], dora_tiles_34: Iterable[int]) -> int:
    """Count dora in a hand.

    Each entry of ``dora_tiles_34`` counts separately, so a tile promoted by
    two indicators is worth two per copy held.
    """
    return sum(tiles_34[d] for d in dora_tiles_34)
