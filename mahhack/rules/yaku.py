"""Yaku (役) detection for Riichi Mahjong.

Each yaku function takes a HandContext and returns a YakuMatch or None.
A yaku holds when any standard decomposition of the hand satisfies it, so
checks that depend on grouping scan ``ctx.decompositions``.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from mahhack.core.tile import (
    DRAGON_INDICES, EAST, GREEN_INDICES, TERMINAL_INDICES, WIND_INDICES,
    YAOCHU_INDICES,
)
from mahhack.rules.agari import (
    Decomposition, decompose_standard, is_chiitoi_agari, is_kokushi_agari,
)
from mahhack.rules.dora import dora_count


YAKUMAN_HAN = 13


@dataclass(frozen=True)
class WinContext:
    """Circumstances of a win, supplied by the turn loop.

    Dora lists hold 34 indices of dora tiles (already promoted from their
    indicators); a tile may be listed more than once.
    """
    win_tile_34: int = -1
    is_tsumo: bool = True
    is_menzen: bool = True
    # Positional
    seat_wind_34: int = EAST
    round_wind_34: int = EAST
    # Riichi
    is_riichi: bool = False
    is_double_riichi: bool = False
    is_ippatsu: bool = False
    # Special conditions
    is_haitei: bool = False  # Last tile from wall
    is_houtei: bool = False  # Last discard
    is_rinshan: bool = False  # After kan draw
    is_chankan: bool = False  # Robbing a kan
    is_tenhou: bool = False  # Dealer first draw
    is_chiihou: bool = False  # Non-dealer first draw
    kan_count: int = 0
    # Dora
    dora_tiles_34: Tuple[int, ...] = ()
    uradora_tiles_34: Tuple[int, ...] = ()

    def __post_init__(self):
        draw_sources = (self.is_haitei, self.is_rinshan, self.is_chankan)
        if sum(1 for flag in draw_sources if flag) > 1:
            raise ValueError("haitei, rinshan and chankan are mutually exclusive")
        object.__setattr__(self, "dora_tiles_34", tuple(self.dora_tiles_34))
        object.__setattr__(self, "uradora_tiles_34", tuple(self.uradora_tiles_34))


@dataclass(frozen=True)
class YakuMatch:
    name: str
    han: int
    is_yakuman: bool = False
    is_dora: bool = False


@dataclass
class YakuResult:
    """Matched yaku of one winning hand.

    ``han`` already includes dora. When yakuman matched it is 13 per yakuman
    and no regular yaku or dora are listed.
    """
    yaku: List[YakuMatch] = field(default_factory=list)
    han: int = 0
    yakuman_count: int = 0
    dora_count: int = 0
    uradora_count: int = 0

    @property
    def is_yakuman(self) -> bool:
        return self.yakuman_count > 0

    @property
    def names(self) -> List[str]:
        return [y.name for y in self.yaku]

    def has(self, name: str) -> bool:
        return any(y.name == name for y in self.yaku)

    @property
    def has_yaku(self) -> bool:
        """Whether there's at least one real yaku (not just dora)."""
        return any(not y.is_dora for y in self.yaku)


@dataclass
class HandContext:
    """All information needed to judge yaku."""
    tiles_34: List[int]
    decompositions: List[Decomposition]
    win: WinContext
    # Seven pairs shape, independent of any standard grouping
    is_chiitoi: bool = False


def build_hand_context(tiles_34: List[int], win: WinContext) -> HandContext:
    decompositions = decompose_standard(tiles_34)
    return HandContext(
        tiles_34=list(tiles_34),
        decompositions=decompositions,
        win=win,
        is_chiitoi=is_chiitoi_agari(tiles_34),
    )


def detect_yaku(tiles_34: List[int], win: WinContext) -> YakuResult:
    """Detect all applicable yaku for a 14-tile winning hand.

    Input is assumed to be a winning hand; other input gives an
    unspecified result.
    """
    if is_kokushi_agari(tiles_34):
        return _yakuman_result([YakuMatch("国士無双", YAKUMAN_HAN, is_yakuman=True)])

    ctx = build_hand_context(tiles_34, win)

    yakuman = _check_yakuman(ctx)
    if yakuman:
        return _yakuman_result(yakuman)

    results = []
    for checker in REGULAR_CHECKERS:
        result = checker(ctx)
        if result:
            results.append(result)

    # Dora (not real yaku, but counted for scoring)
    dora = dora_count(tiles_34, win.dora_tiles_34)
    if dora > 0:
        results.append(YakuMatch("ドラ", dora, is_dora=True))
    uradora = 0
    if win.is_riichi or win.is_double_riichi:
        uradora = dora_count(tiles_34, win.uradora_tiles_34)
        if uradora > 0:
            results.append(YakuMatch("裏ドラ", uradora, is_dora=True))

    return YakuResult(
        yaku=results,
        han=total_han(results),
        dora_count=dora,
        uradora_count=uradora,
    )


def _yakuman_result(matches: List[YakuMatch]) -> YakuResult:
    return YakuResult(
        yaku=matches,
        han=YAKUMAN_HAN * len(matches),
        yakuman_count=len(matches),
    )


def _check_yakuman(ctx: HandContext) -> List[YakuMatch]:
    """Check for yakuman hands (thirteen orphans is handled by the caller)."""
    results = []
    for checker in YAKUMAN_CHECKERS:
        r = checker(ctx)
        if r:
            results.append(r)
    return results


def total_han(yaku_list: List[YakuMatch]) -> int:
    """Sum total han from yaku list."""
    return sum(y.han for y in yaku_list)


# === Grouping helpers ===

def _is_triplet(m_type: str) -> bool:
    return m_type in ('koutsu', 'kantsu')


def _triplets(decomp: Decomposition) -> List[int]:
    return [m_idx for m_type, m_idx in decomp[1] if _is_triplet(m_type)]


def _sequences(decomp: Decomposition) -> List[int]:
    return [m_idx for m_type, m_idx in decomp[1] if m_type == 'shuntsu']


def _group_has_yaochu(m_type: str, m_idx: int) -> bool:
    if m_type == 'shuntsu':
        return m_idx % 9 in (0, 6)
    return m_idx in YAOCHU_INDICES


def _outside_hand(decomp: Decomposition) -> Optional[bool]:
    """Every group and the head hold a terminal or honor.

    Returns whether honors are involved, or None if some group has none.
    """
    head, mentsu = decomp
    if head not in YAOCHU_INDICES:
        return None
    if not all(_group_has_yaochu(m_type, m_idx) for m_type, m_idx in mentsu):
        return None
    return head >= 27 or any(idx >= 27 for idx in _triplets(decomp))


def _suits_present(tiles_34: List[int]) -> Tuple[Set[int], bool]:
    suits = set()
    has_honor = False
    for i in range(34):
        if tiles_34[i] > 0:
            if i < 27:
                suits.add(i // 9)
            else:
                has_honor = True
    return suits, has_honor


def _is_value_tile(idx: int, win: WinContext) -> bool:
    return idx in DRAGON_INDICES or idx == win.seat_wind_34 or idx == win.round_wind_34


def _is_ryanmen(seq_start: int, win_tile: int) -> bool:
    """Win tile completes the sequence from an open end.

    Excludes kanchan (middle tile) and penchan (12 waiting on 3, 89 waiting on 7).
    """
    if win_tile == seq_start:
        return seq_start % 9 != 6
    if win_tile == seq_start + 2:
        return seq_start % 9 != 0
    return False


def _peikou_count(decomp: Decomposition) -> int:
    seen: Dict[int, int] = {}
    for s in _sequences(decomp):
        seen[s] = seen.get(s, 0) + 1
    return sum(v // 2 for v in seen.values())


# === Situational yaku ===

def check_tsumo(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_tsumo and ctx.win.is_menzen:
        return YakuMatch("門前清自摸和", 1)
    return None


def check_riichi(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_riichi and not ctx.win.is_double_riichi:
        return YakuMatch("立直", 1)
    return None


def check_double_riichi(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_double_riichi:
        return YakuMatch("両立直", 2)
    return None


def check_ippatsu(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_ippatsu:
        return YakuMatch("一発", 1)
    return None


def check_haitei(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_haitei and ctx.win.is_tsumo:
        return YakuMatch("海底摸月", 1)
    return None


def check_houtei(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_houtei and not ctx.win.is_tsumo:
        return YakuMatch("河底撈魚", 1)
    return None


def check_rinshan(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_rinshan and ctx.win.is_tsumo:
        return YakuMatch("嶺上開花", 1)
    return None


def check_chankan(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_chankan and not ctx.win.is_tsumo:
        return YakuMatch("搶槓", 1)
    return None


def check_sankantsu(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.kan_count >= 3:
        return YakuMatch("三槓子", 2)
    return None


# === Hand shape yaku ===

def check_chiitoi(ctx: HandContext) -> Optional[YakuMatch]:
    """Seven pairs (七対子)."""
    if ctx.is_chiitoi and ctx.win.is_menzen:
        return YakuMatch("七対子", 2)
    return None


def check_tanyao(ctx: HandContext) -> Optional[YakuMatch]:
    """All simples (断幺九) - no terminals or honors."""
    for i in YAOCHU_INDICES:
        if ctx.tiles_34[i] > 0:
            return None
    return YakuMatch("断幺九", 1)


def check_yakuhai(ctx: HandContext) -> Optional[YakuMatch]:
    """Value triplet (役牌): a dragon, or the seat or round wind."""
    for decomp in ctx.decompositions:
        if any(_is_value_tile(idx, ctx.win) for idx in _triplets(decomp)):
            return YakuMatch("役牌", 1)
    return None


def check_pinfu(ctx: HandContext) -> Optional[YakuMatch]:
    """Pinfu - all sequences, non-yakuhai head, ryanmen wait, menzen."""
    if not ctx.win.is_menzen:
        return None
    win = ctx.win.win_tile_34
    for decomp in ctx.decompositions:
        head, mentsu = decomp
        if any(m_type != 'shuntsu' for m_type, _ in mentsu):
            continue
        if _is_value_tile(head, ctx.win):
            continue
        if any(_is_ryanmen(s, win) for s in _sequences(decomp)):
            return YakuMatch("平和", 1)
    return None


def check_peikou(ctx: HandContext) -> Optional[YakuMatch]:
    """Identical sequences: 一盃口 for one pair, 二盃口 for two. Menzen only."""
    if not ctx.win.is_menzen:
        return None
    best = max((_peikou_count(d) for d in ctx.decompositions), default=0)
    if best >= 2:
        return YakuMatch("二盃口", 3)
    if best == 1:
        return YakuMatch("一盃口", 1)
    return None


def check_toitoi(ctx: HandContext) -> Optional[YakuMatch]:
    """All triplets (対々和)."""
    for decomp in ctx.decompositions:
        if len(_triplets(decomp)) == 4:
            return YakuMatch("対々和", 2)
    return None


def _is_honroutou(ctx: HandContext) -> bool:
    """Toitoi and chanta at once."""
    return any(len(_triplets(d)) == 4 and _outside_hand(d)
               for d in ctx.decompositions)


def check_honroutou(ctx: HandContext) -> Optional[YakuMatch]:
    """All terminals and honors (混老頭)."""
    if _is_honroutou(ctx):
        return YakuMatch("混老頭", 2)
    return None


def check_sanankou(ctx: HandContext) -> Optional[YakuMatch]:
    """Three concealed triplets (三暗刻)."""
    for decomp in ctx.decompositions:
        if len(_triplets(decomp)) >= 3:
            return YakuMatch("三暗刻", 2)
    return None


def check_sanshoku_doukou(ctx: HandContext) -> Optional[YakuMatch]:
    """Three-colored triplets (三色同刻). Same triplet in all 3 suits."""
    for decomp in ctx.decompositions:
        koutsu_set = set(idx for idx in _triplets(decomp) if idx < 27)
        for k in koutsu_set:
            if k < 9 and (k + 9) in koutsu_set and (k + 18) in koutsu_set:
                return YakuMatch("三色同刻", 2)
    return None


def check_sanshoku_doujun(ctx: HandContext) -> Optional[YakuMatch]:
    """Three-colored straight (三色同順). Same sequence in all 3 suits."""
    for decomp in ctx.decompositions:
        suits_by_rank: Dict[int, Set[int]] = {}
        for s in _sequences(decomp):
            suits_by_rank.setdefault(s % 9, set()).add(s // 9)
        if any(len(suits) == 3 for suits in suits_by_rank.values()):
            han = 2 if ctx.win.is_menzen else 1
            return YakuMatch("三色同順", han)
    return None


def check_shousangen(ctx: HandContext) -> Optional[YakuMatch]:
    """Little three dragons (小三元). 2 dragon triplets + dragon pair."""
    for decomp in ctx.decompositions:
        dragon_koutsu = sum(1 for idx in _triplets(decomp) if idx in DRAGON_INDICES)
        if dragon_koutsu == 2 and decomp[0] in DRAGON_INDICES:
            return YakuMatch("小三元", 2)
    return None


def check_ittsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Straight (一気通貫). 123+456+789 of one suit."""
    for decomp in ctx.decompositions:
        shuntsu_set = set(_sequences(decomp))
        for suit_start in (0, 9, 18):
            if (suit_start in shuntsu_set and
                    suit_start + 3 in shuntsu_set and
                    suit_start + 6 in shuntsu_set):
                han = 2 if ctx.win.is_menzen else 1
                return YakuMatch("一気通貫", han)
    return None


def check_chanta(ctx: HandContext) -> Optional[YakuMatch]:
    """Mixed outside hand (混全帯幺九). All groups contain terminal or honor."""
    for decomp in ctx.decompositions:
        if _outside_hand(decomp):
            han = 2 if ctx.win.is_menzen else 1
            return YakuMatch("混全帯幺九", han)
    return None


def check_junchan(ctx: HandContext) -> Optional[YakuMatch]:
    """Pure outside hand (純全帯幺九). All groups contain terminal, no honor."""
    for decomp in ctx.decompositions:
        if _outside_hand(decomp) is False:
            han = 3 if ctx.win.is_menzen else 2
            return YakuMatch("純全帯幺九", han)
    return None


def check_honitsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Half flush (混一色). One suit + honors."""
    suits, has_honor = _suits_present(ctx.tiles_34)
    if len(suits) == 1 and has_honor:
        han = 3 if ctx.win.is_menzen else 2
        return YakuMatch("混一色", han)
    return None


def check_chinitsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Full flush (清一色). One suit only, no honors."""
    suits, has_honor = _suits_present(ctx.tiles_34)
    if len(suits) == 1 and not has_honor:
        han = 6 if ctx.win.is_menzen else 5
        return YakuMatch("清一色", han)
    return None


# === Yakuman ===

def _yakuman(name: str) -> YakuMatch:
    return YakuMatch(name, YAKUMAN_HAN, is_yakuman=True)


def check_tenhou(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_tenhou:
        return _yakuman("天和")
    return None


def check_chiihou(ctx: HandContext) -> Optional[YakuMatch]:
    if ctx.win.is_chiihou:
        return _yakuman("地和")
    return None


def check_daisangen(ctx: HandContext) -> Optional[YakuMatch]:
    """Big three dragons (大三元)."""
    for decomp in ctx.decompositions:
        if sum(1 for idx in _triplets(decomp) if idx in DRAGON_INDICES) == 3:
            return _yakuman("大三元")
    return None


def check_daisuushii(ctx: HandContext) -> Optional[YakuMatch]:
    """Big four winds (大四喜)."""
    for decomp in ctx.decompositions:
        if sum(1 for idx in _triplets(decomp) if idx in WIND_INDICES) == 4:
            return _yakuman("大四喜")
    return None


def check_shousuushii(ctx: HandContext) -> Optional[YakuMatch]:
    """Little four winds (小四喜)."""
    for decomp in ctx.decompositions:
        wind_koutsu = sum(1 for idx in _triplets(decomp) if idx in WIND_INDICES)
        if wind_koutsu == 3 and decomp[0] in WIND_INDICES:
            return _yakuman("小四喜")
    return None


def check_suuankou(ctx: HandContext) -> Optional[YakuMatch]:
    """Four concealed triplets (四暗刻)."""
    for decomp in ctx.decompositions:
        if len(_triplets(decomp)) == 4:
            return _yakuman("四暗刻")
    return None


def check_suukantsu(ctx: HandContext) -> Optional[YakuMatch]:
    """Four kans (四槓子)."""
    if ctx.win.kan_count >= 4:
        return _yakuman("四槓子")
    return None


def check_tsuuiisou(ctx: HandContext) -> Optional[YakuMatch]:
    """All honors (字一色)."""
    if any(ctx.tiles_34[i] > 0 for i in range(27)):
        return None
    return _yakuman("字一色")


def check_ryuuiisou(ctx: HandContext) -> Optional[YakuMatch]:
    """All green (緑一色). Only 2s,3s,4s,6s,8s + hatsu."""
    for i in range(34):
        if ctx.tiles_34[i] > 0 and i not in GREEN_INDICES:
            return None
    return _yakuman("緑一色")


def check_chinroutou(ctx: HandContext) -> Optional[YakuMatch]:
    """All terminals (清老頭)."""
    for i in range(34):
        if ctx.tiles_34[i] > 0 and i not in TERMINAL_INDICES:
            return None
    return _yakuman("清老頭")


def check_chuuren(ctx: HandContext) -> Optional[YakuMatch]:
    """Nine gates (九蓮宝燈). Menzen only, one suit: 1112345678999+1."""
    if not ctx.win.is_menzen:
        return None
    suits, has_honor = _suits_present(ctx.tiles_34)
    if has_honor or len(suits) != 1:
        return None
    suit_start = suits.pop() * 9

    # Must have at least: 3,1,1,1,1,1,1,1,3 of 1-9
    required = [3, 1, 1, 1, 1, 1, 1, 1, 3]
    for j in range(9):
        if ctx.tiles_34[suit_start + j] < required[j]:
            return None
    return _yakuman("九蓮宝燈")


YAKUMAN_CHECKERS = [
    check_tenhou, check_chiihou,
    check_daisangen, check_daisuushii, check_shousuushii,
    check_suuankou, check_suukantsu,
    check_tsuuiisou, check_ryuuiisou, check_chinroutou, check_chuuren,
]

REGULAR_CHECKERS = [
    check_tsumo, check_riichi, check_double_riichi, check_ippatsu,
    check_haitei, check_houtei, check_rinshan, check_chankan,
    check_chiitoi, check_tanyao, check_yakuhai, check_pinfu,
    check_peikou, check_toitoi, check_honroutou, check_sanankou,
    check_sanshoku_doukou, check_sanshoku_doujun, check_shousangen,
    check_ittsu, check_sankantsu, check_chanta, check_junchan,
    check_honitsu, check_chinitsu,
]
