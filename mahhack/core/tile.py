"""Tile definition over the 34 tile types.

Tiles carry no physical-copy identity: two 5m tiles are the same value.
Algorithms work on 34-length count arrays indexed by ``Tile.index34``.
"""

from enum import IntEnum
from typing import Iterable, List


class TileSuit(IntEnum):
    MAN = 0   # 萬子
    PIN = 1   # 筒子
    SOU = 2   # 索子
    WIND = 3  # 風牌
    DRAGON = 4  # 三元牌


# Yaochu (terminal + honor) tile indices in 34 encoding
YAOCHU_INDICES = [0, 8, 9, 17, 18, 26, 27, 28, 29, 30, 31, 32, 33]
TERMINAL_INDICES = [0, 8, 9, 17, 18, 26]
WIND_INDICES = [27, 28, 29, 30]
DRAGON_INDICES = [31, 32, 33]
# 2s 3s 4s 6s 8s 發
GREEN_INDICES = [19, 20, 21, 23, 25, 32]

MAX_COPIES = 4  # Copies of each tile type in a set

EAST, SOUTH, WEST, NORTH = 27, 28, 29, 30
HAKU, HATSU, CHUN = 31, 32, 33

TILE_NAMES_34 = [
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "東", "南", "西", "北", "白", "發", "中",
]

SUIT_CHARS = ("m", "p", "s")
HONOR_CHARS = "東南西北白發中"


class Tile:
    """Immutable tile value identified by its 34 index."""
    __slots__ = ('_index34', '_suit', '_number')

    def __init__(self, index34: int):
        if not (0 <= index34 < 34):
            raise ValueError(f"index34 must be 0..33, got {index34}")
        self._index34 = index34
        if index34 < 27:
            self._suit = TileSuit(index34 // 9)
            self._number = index34 % 9 + 1
        elif index34 < 31:
            self._suit = TileSuit.WIND
            self._number = index34 - 27 + 1  # 1=東,2=南,3=西,4=北
        else:
            self._suit = TileSuit.DRAGON
            self._number = index34 - 31 + 1  # 1=白,2=發,3=中

    @property
    def index34(self) -> int:
        return self._index34

    @property
    def suit(self) -> TileSuit:
        return self._suit

    @property
    def number(self) -> int:
        return self._number

    @property
    def is_number_tile(self) -> bool:
        return self._suit in (TileSuit.MAN, TileSuit.PIN, TileSuit.SOU)

    @property
    def is_wind(self) -> bool:
        return self._suit == TileSuit.WIND

    @property
    def is_dragon(self) -> bool:
        return self._suit == TileSuit.DRAGON

    @property
    def is_honor(self) -> bool:
        return self._suit in (TileSuit.WIND, TileSuit.DRAGON)

    @property
    def is_terminal(self) -> bool:
        return not self.is_honor and self._number in (1, 9)

    @property
    def is_yaochu(self) -> bool:
        return self.is_honor or self.is_terminal

    @property
    def name(self) -> str:
        return TILE_NAMES_34[self._index34]

    def __repr__(self):
        return f"Tile({self.name})"

    def __eq__(self, other):
        if isinstance(other, Tile):
            return self._index34 == other._index34
        return NotImplemented

    def __hash__(self):
        return self._index34

    def __lt__(self, other):
        if isinstance(other, Tile):
            return self._index34 < other._index34
        return NotImplemented


# Canonical instances, one per tile type
ALL_TILES = [Tile(i) for i in range(34)]


def tile_34_to_name(index34: int) -> str:
    """Get tile name from 34 encoding."""
    return TILE_NAMES_34[index34]


def tile_from_name(name: str) -> Tile:
    """Parse an external tile name: '5m' style for suits, one CJK char for honors."""
    try:
        return ALL_TILES[TILE_NAMES_34.index(name)]
    except ValueError:
        raise ValueError(f"unknown tile name: {name!r}") from None


def sort_tiles(tiles: Iterable[Tile]) -> List[Tile]:
    """Return tiles in display order: man, pin, sou, 東南西北, 白發中."""
    return sorted(tiles)


def count_tiles(tiles: Iterable[Tile]) -> List[int]:
    """Convert tiles to a 34-length count array."""
    arr = [0] * 34
    for t in tiles:
        arr[t.index34] += 1
    return arr


def over_copied_tiles(tiles: Iterable[Tile]) -> List[Tile]:
    """Tile types held more than the four copies a set contains."""
    arr = count_tiles(tiles)
    return [ALL_TILES[i] for i in range(34) if arr[i] > MAX_COPIES]


def tiles_from_34_array(tiles_34: List[int]) -> List[Tile]:
    """Expand a 34-length count array back into a sorted tile list."""
    tiles = []
    for idx, count in enumerate(tiles_34):
        tiles.extend([ALL_TILES[idx]] * count)
    return tiles


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse a shorthand string like '123m456p789s東南西北' into tiles.

    Whitespace is ignored. Digits not followed by a suit letter, a zero
    rank or any other character raise ValueError.
    """
    tiles = []
    numbers = []
    for ch in s:
        if ch.isspace():
            continue
        if ch.isdigit():
            if ch == '0':
                raise ValueError(f"rank 0 is not a tile in {s!r}")
            numbers.append(int(ch))
        elif ch in SUIT_CHARS:
            if not numbers:
                raise ValueError(f"suit '{ch}' without ranks in {s!r}")
            suit_offset = SUIT_CHARS.index(ch) * 9
            for n in numbers:
                tiles.append(ALL_TILES[suit_offset + n - 1])
            numbers = []
        elif ch in HONOR_CHARS:
            tiles.append(ALL_TILES[27 + HONOR_CHARS.index(ch)])
        else:
            raise ValueError(f"unexpected character {ch!r} in {s!r}")
    if numbers:
        raise ValueError(f"ranks without a suit at the end of {s!r}")
    return tiles


def tiles_to_string(tiles: Iterable[Tile]) -> str:
    """Format tiles back into compact shorthand, e.g. '123m55p東東'."""
    tiles = sort_tiles(tiles)
    parts = []
    numbers = []
    current_suit = None
    for t in tiles:
        if t.is_honor:
            continue
        if current_suit is not None and t.suit != current_suit:
            parts.append("".join(numbers) + SUIT_CHARS[current_suit])
            numbers = []
        current_suit = t.suit
        numbers.append(str(t.number))
    if numbers:
        parts.append("".join(numbers) + SUIT_CHARS[current_suit])
    parts.extend(t.name for t in tiles if t.is_honor)
    return "".join(parts)
