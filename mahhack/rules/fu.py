"""Fu (符) calculation for scoring.

Only the base, the tsumo bonus and the fixed pinfu / seven-pairs values are
counted. Triplet, wait and pair fu are intentionally left out; the point
totals of this variant are built on the reduced table.
"""

from mahhack.rules.yaku import WinContext, YakuResult


BASE_FU = 20
TSUMO_FU = 2
CHIITOI_FU = 25
PINFU_TSUMO_FU = 20
PINFU_RON_FU = 30


def calculate_fu(yaku_result: YakuResult, win: WinContext) -> int:
    """Calculate fu (符) for a winning hand.

    Args:
        yaku_result: Output of detect_yaku for the hand
        win: The win context the yaku were detected with

    Returns:
        25 for seven pairs, otherwise a multiple of 10.
    """
    # Special case: chiitoi is always 25 fu
    if yaku_result.has("七対子"):
        return CHIITOI_FU

    if yaku_result.has("平和"):
        return PINFU_TSUMO_FU if win.is_tsumo else PINFU_RON_FU

    fu = BASE_FU  # Base fu (副底)
    if win.is_tsumo:
        fu += TSUMO_FU

    # Round up to nearest 10
    return _round_up_10(fu)


def _round_up_10(fu: int) -> int:
    """Round up to nearest 10."""
    return ((fu + 9) // 10) * 10
