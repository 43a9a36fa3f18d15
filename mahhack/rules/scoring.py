"""Score calculation - convert han + fu to points."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from mahhack.engine.config import RuleConfig
from mahhack.rules.agari import is_agari
from mahhack.rules.fu import calculate_fu
from mahhack.rules.yaku import WinContext, YakuResult, detect_yaku


MANGAN_BASE = 2000


class LimitTier(str, Enum):
    MANGAN = "mangan"                    # 満貫
    HANEMAN = "haneman"                  # 跳満
    BAIMAN = "baiman"                    # 倍満
    SANBAIMAN = "triple mangan"          # 三倍満
    KAZOE_YAKUMAN = "counted yakuman"    # 数え役満


# Checked top-down, first match wins
LIMIT_TABLE = [
    (13, LimitTier.KAZOE_YAKUMAN, 8000),
    (11, LimitTier.SANBAIMAN, 6000),
    (8, LimitTier.BAIMAN, 4000),
    (6, LimitTier.HANEMAN, 3000),
    (5, LimitTier.MANGAN, MANGAN_BASE),
]


@dataclass(frozen=True)
class ScoreResult:
    """Result of point calculation.

    ``total_points`` is base points x 4, a single number rather than the
    per-player tsumo payments.
    """
    han: int
    fu: int
    limit: Optional[LimitTier]
    base_points: int
    total_points: int

    @property
    def is_limit(self) -> bool:
        return self.limit is not None


@dataclass(frozen=True)
class WinResult:
    """Yaku and score of one evaluated win."""
    yaku_result: YakuResult
    score: ScoreResult

    @property
    def han(self) -> int:
        return self.score.han

    @property
    def fu(self) -> int:
        return self.score.fu

    @property
    def total_points(self) -> int:
        return self.score.total_points

    @property
    def yaku_names(self) -> List[str]:
        return self.yaku_result.names


def calculate_points(han: int, fu: int, mangan_30fu_4han: bool = False) -> ScoreResult:
    """Calculate capped base points and the total from han and fu."""
    limit = None
    base = None
    for min_han, tier, tier_base in LIMIT_TABLE:
        if han >= min_han:
            limit, base = tier, tier_base
            break

    if limit is None:
        raw = fu * (2 ** (2 + han))
        if raw >= MANGAN_BASE:
            limit, base = LimitTier.MANGAN, MANGAN_BASE
        elif mangan_30fu_4han and han == 4 and fu == 30:
            limit, base = LimitTier.MANGAN, MANGAN_BASE
        else:
            base = raw

    base_points = math.ceil(base)
    return ScoreResult(
        han=han,
        fu=fu,
        limit=limit,
        base_points=base_points,
        total_points=base_points * 4,
    )


def calculate_score(tiles_34: List[int], win: WinContext,
                    config: Optional[RuleConfig] = None) -> Optional[WinResult]:
    """Evaluate a 14-tile hand end to end. Returns None if not a valid win."""
    if not is_agari(tiles_34):
        return None
    if config is None:
        config = RuleConfig()

    yaku_result = detect_yaku(tiles_34, win)
    if not yaku_result.has_yaku:
        return None

    fu_val = calculate_fu(yaku_result, win)
    score = calculate_points(yaku_result.han, fu_val, config.mangan_30fu_4han)
    return WinResult(yaku_result=yaku_result, score=score)
