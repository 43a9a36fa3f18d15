"""Win (和了) detection - standard form, seven pairs, thirteen orphans.

Returns all possible decompositions for a winning hand.
"""

from typing import Iterator, List, Optional, Tuple

from mahhack.core.tile import YAOCHU_INDICES


# A decomposition is (head_34, mentsu) where mentsu is a tuple of (type, index34)
# type: 'koutsu' (刻子), 'kantsu' (槓子) or 'shuntsu' (順子, index is the lowest tile)
Mentsu = Tuple[str, int]
Decomposition = Tuple[int, Tuple[Mentsu, ...]]

HAND_SIZE = 14
MENTSU_COUNT = 4


def is_agari(tiles_34: List[int]) -> bool:
    """Check if the 34-array is a complete 14-tile winning hand (any form)."""
    if sum(tiles_34) != HAND_SIZE:
        return False
    return (is_kokushi_agari(tiles_34) or
            is_chiitoi_agari(tiles_34) or
            is_standard_agari(tiles_34))


def is_standard_agari(tiles_34: List[int]) -> bool:
    """Check standard form (4 mentsu + 1 jantai)."""
    return len(decompose_standard(tiles_34)) > 0


def decompose_standard(tiles_34: List[int]) -> List[Decomposition]:
    """Find ALL standard decompositions (4 mentsu + 1 head).

    Each head candidate is tried in 34 order; the remainder is searched
    from its smallest tile, koutsu before kantsu before shuntsu. The same
    partition reached through a different consumption order is kept once.
    """
    results: List[Decomposition] = []
    seen = set()

    for head in range(34):
        if tiles_34[head] < 2:
            continue
        remaining = list(tiles_34)
        remaining[head] -= 2
        for mentsu in _iter_mentsu(remaining, 0, MENTSU_COUNT):
            key = (head, tuple(sorted(mentsu)))
            if key in seen:
                continue
            seen.add(key)
            results.append((head, mentsu))

    return results


def _shapes_at(tiles: List[int], idx: int) -> Iterator[Tuple[str, Tuple[int, ...]]]:
    """Mentsu that can start at ``idx``, with the tiles each one uses."""
    if tiles[idx] >= 3:
        yield 'koutsu', (idx,) * 3
    # Kantsu only fits when the caller passes the fourth copy of a quad
    if tiles[idx] >= 4:
        yield 'kantsu', (idx,) * 4
    # Sequences only for number tiles, never starting on 8 or 9
    if idx < 27 and idx % 9 <= 6 and tiles[idx + 1] and tiles[idx + 2]:
        yield 'shuntsu', (idx, idx + 1, idx + 2)


def _iter_mentsu(tiles: List[int], start: int,
                 needed: int) -> Iterator[Tuple[Mentsu, ...]]:
    """Yield every way to split ``tiles`` into exactly ``needed`` mentsu.

    ``tiles`` is modified while a branch is explored and restored after.
    """
    idx = start
    while idx < 34 and tiles[idx] == 0:
        idx += 1

    if needed == 0:
        if idx >= 34:
            yield ()
        return
    if idx >= 34:
        return

    for m_type, used in list(_shapes_at(tiles, idx)):
        for i in used:
            tiles[i] -= 1
        for rest in _iter_mentsu(tiles, idx, needed - 1):
            yield ((m_type, idx),) + rest
        for i in used:
            tiles[i] += 1


def is_chiitoi_agari(tiles_34: List[int]) -> bool:
    """Check seven pairs (七対子) form."""
    if sum(tiles_34) != HAND_SIZE:
        return False
    pairs = sum(1 for c in tiles_34 if c == 2)
    return pairs == 7


def is_kokushi_agari(tiles_34: List[int]) -> bool:
    """Check thirteen orphans (国士無双) form."""
    if sum(tiles_34) != HAND_SIZE:
        return False
    has_pair = False
    for idx in YAOCHU_INDICES:
        if tiles_34[idx] == 0:
            return False
        if tiles_34[idx] >= 2:
            has_pair = True
    # Must have exactly 14 tiles all yaochu with one pair
    non_yaochu = sum(tiles_34[i] for i in range(34) if i not in YAOCHU_INDICES)
    return has_pair and non_yaochu == 0


def get_agari_type(tiles_34: List[int]) -> Optional[str]:
    """Determine the agari type: 'standard', 'chiitoi', 'kokushi', or None."""
    if sum(tiles_34) != HAND_SIZE:
        return None
    if is_kokushi_agari(tiles_34):
        return 'kokushi'
    if is_standard_agari(tiles_34):
        return 'standard'
    if is_chiitoi_agari(tiles_34):
        return 'chiitoi'
    return None


def get_waiting_tiles(tiles_34: List[int]) -> List[int]:
    """Find all tiles (34 indices) that would complete a 13-tile hand.

    Tiles already held four times are never waits. Any other tile count
    yields an empty list.
    """
    if sum(tiles_34) != HAND_SIZE - 1:
        return []

    waits = []
    for i in range(34):
        if tiles_34[i] >= 4:
            continue
        test = list(tiles_34)
        test[i] += 1
        if is_agari(test):
            waits.append(i)
    return waits


def is_tenpai(tiles_34: List[int]) -> bool:
    """A 13-tile hand is tenpai (聴牌) when it has at least one wait."""
    return len(get_waiting_tiles(tiles_34)) > 0
