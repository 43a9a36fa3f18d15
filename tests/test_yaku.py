"""Tests for yaku.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahhack.core.tile import SOUTH, count_tiles, make_tiles_from_string, tile_from_name
from mahhack.rules.yaku import (
    WinContext, YakuMatch, build_hand_context, check_chanta, check_honroutou,
    check_toitoi, detect_yaku, total_han,
)


def detect(hand: str, win_tile: str = None, **kwargs):
    """Detect yaku; the last tile of the string is the winning tile by default."""
    tiles = make_tiles_from_string(hand)
    win_idx = tiles[-1].index34 if win_tile is None else tile_from_name(win_tile).index34
    return detect_yaku(count_tiles(tiles), WinContext(win_tile_34=win_idx, **kwargs))


# All sequences, non-value pair, 1m completes 23m from an open end
PINFU_HAND = "23m456m789p234s55p1m"


class TestWinContext:
    def test_defaults(self):
        win = WinContext()
        assert win.is_tsumo and win.is_menzen
        assert win.dora_tiles_34 == ()

    def test_dora_lists_become_tuples(self):
        win = WinContext(dora_tiles_34=[0, 0])
        assert win.dora_tiles_34 == (0, 0)

    def test_exclusive_draw_flags(self):
        with pytest.raises(ValueError):
            WinContext(is_haitei=True, is_rinshan=True)
        with pytest.raises(ValueError):
            WinContext(is_rinshan=True, is_chankan=True)


class TestEndToEnd:
    def test_tsumo_ittsu(self):
        result = detect("11123456789m555p")
        assert result.names == ["門前清自摸和", "一気通貫"]
        assert result.han == 3
        assert not result.is_yakuman

    def test_total_han(self):
        assert total_han([YakuMatch("立直", 1), YakuMatch("ドラ", 2, is_dora=True)]) == 3


class TestPinfu:
    def test_ryanmen(self):
        result = detect(PINFU_HAND)
        assert result.names == ["門前清自摸和", "平和"]

    def test_kanchan(self):
        assert not detect("13m456m789p234s55p2m").has("平和")

    def test_penchan_low(self):
        assert not detect("12m456m789p234s55p3m").has("平和")

    def test_penchan_high(self):
        assert not detect("89m123p456p789s55s7m").has("平和")

    def test_tanki(self):
        assert not detect("123m456m789p234s5p5p").has("平和")

    def test_dragon_pair(self):
        assert not detect("23m456m789p234s中中1m").has("平和")

    def test_guest_wind_pair(self):
        assert detect("23m456m789p234s南南1m").has("平和")

    def test_seat_wind_pair(self):
        assert not detect("23m456m789p234s南南1m", seat_wind_34=SOUTH).has("平和")


class TestYakuhai:
    def test_dragon_triplet(self):
        result = detect("123m456p789s白白白南南")
        assert result.names == ["門前清自摸和", "役牌"]

    def test_seat_and_round_wind(self):
        assert detect("123m456p789s東東東南南").has("役牌")

    def test_guest_wind_triplet(self):
        result = detect("123m456p789s東東東南南", seat_wind_34=SOUTH, round_wind_34=SOUTH)
        assert not result.has("役牌")

    def test_single_entry(self):
        result = detect("白白白發發發123m456p99s")
        assert result.names.count("役牌") == 1
        assert result.han == 2


class TestSituational:
    def test_riichi(self):
        result = detect(PINFU_HAND, is_riichi=True)
        assert result.has("立直")

    def test_double_riichi_replaces_riichi(self):
        result = detect(PINFU_HAND, is_riichi=True, is_double_riichi=True)
        assert result.has("両立直")
        assert not result.has("立直")

    def test_ippatsu(self):
        assert detect(PINFU_HAND, is_riichi=True, is_ippatsu=True).has("一発")

    def test_haitei(self):
        assert detect(PINFU_HAND, is_haitei=True).has("海底摸月")

    def test_rinshan(self):
        assert detect(PINFU_HAND, is_rinshan=True).has("嶺上開花")

    def test_ron_only_yaku_absent_on_tsumo(self):
        assert not detect(PINFU_HAND, is_houtei=True).has("河底撈魚")
        assert not detect(PINFU_HAND, is_chankan=True).has("搶槓")

    def test_sankantsu(self):
        assert detect(PINFU_HAND, kan_count=3).has("三槓子")


class TestShapeYaku:
    def test_chiitoi(self):
        result = detect("2255m3388p4466s東東")
        assert result.names == ["門前清自摸和", "七対子"]
        assert result.han == 3

    def test_chiitoi_tanyao(self):
        result = detect("2255m3388p4466s77s")
        assert result.has("七対子") and result.has("断幺九")
        assert result.han == 4

    def test_chiitoi_of_terminals_and_honors(self):
        result = detect("1199m1199p1199s東東")
        assert result.names == ["門前清自摸和", "七対子"]
        assert result.han == 3

    def test_honroutou(self):
        ctx = build_hand_context(
            count_tiles(make_tiles_from_string("111m999p東東東南南南白白")), WinContext())
        assert check_honroutou(ctx) == YakuMatch("混老頭", 2)
        assert check_chanta(ctx) == YakuMatch("混全帯幺九", 2)

    def test_iipeikou(self):
        result = detect("12233m456p789s55s1m")
        assert result.has("一盃口")
        assert not result.has("二盃口")

    def test_chiitoi_with_ryanpeikou(self):
        # Seven pairs that also groups as two identical-sequence pairs
        result = detect("112233m445566p77s")
        assert result.names == ["門前清自摸和", "七対子", "二盃口"]
        assert result.han == 6

    def test_sanankou(self):
        result = detect("111m222p333s456p東東")
        assert result.names == ["門前清自摸和", "三暗刻"]

    def test_sanshoku_doukou(self):
        result = detect("111m111p111s456p東東")
        assert result.has("三色同刻") and result.has("三暗刻")
        assert result.han == 5

    def test_sanshoku_doujun(self):
        assert detect("123m123p123s456p東東").has("三色同順")

    def test_toitoi_shape(self):
        ctx = build_hand_context(
            count_tiles(make_tiles_from_string("111m222p333s444p東東")), WinContext())
        assert check_toitoi(ctx) == YakuMatch("対々和", 2)

    def test_shousangen(self):
        result = detect("白白白發發發中中123m456p")
        assert result.has("小三元") and result.has("役牌")
        assert result.han == 4

    def test_chanta(self):
        result = detect("123m789p123s東東東99p")
        assert result.has("混全帯幺九")
        assert result.han == 4

    def test_junchan(self):
        result = detect("123m789p123s999s11m")
        assert result.has("純全帯幺九")
        assert not result.has("混全帯幺九")
        assert result.han == 4

    def test_honitsu(self):
        result = detect("123m456m789m東東東南南")
        assert YakuMatch("混一色", 3) in result.yaku
        assert result.han == 7

    def test_chinitsu(self):
        result = detect("123m234m345m678m99m")
        assert YakuMatch("清一色", 6) in result.yaku
        assert not result.has("混一色")
        assert result.han == 7

    def test_tanyao(self):
        assert detect("234m456p678s222s55p").has("断幺九")


class TestDora:
    def test_dora(self):
        result = detect(PINFU_HAND, dora_tiles_34=(0,))
        assert YakuMatch("ドラ", 1, is_dora=True) in result.yaku
        assert result.dora_count == 1
        assert result.han == 3

    def test_repeated_dora(self):
        result = detect(PINFU_HAND, dora_tiles_34=(0, 0))
        assert result.dora_count == 2

    def test_uradora_needs_riichi(self):
        result = detect(PINFU_HAND, uradora_tiles_34=(3,))
        assert not result.has("裏ドラ")
        assert result.uradora_count == 0

        result = detect(PINFU_HAND, is_riichi=True, uradora_tiles_34=(3,))
        assert result.has("裏ドラ")
        assert result.uradora_count == 1

    def test_dora_alone_is_not_yaku(self):
        result = detect("123m456p789s東東東南南", is_tsumo=False, dora_tiles_34=(0,),
                        seat_wind_34=SOUTH, round_wind_34=SOUTH)
        assert result.names == ["ドラ"]
        assert not result.has_yaku


class TestYakuman:
    @pytest.mark.parametrize("hand,kwargs,expected", [
        ("119m19p19s東南西北白發中", {}, ["国士無双"]),
        (PINFU_HAND, {"is_tenhou": True}, ["天和"]),
        (PINFU_HAND, {"is_chiihou": True}, ["地和"]),
        (PINFU_HAND, {"kan_count": 4}, ["四槓子"]),
        ("白白白發發發中中中123m44p", {}, ["大三元"]),
        ("東東東南南南西西西北北123m", {}, ["小四喜"]),
        ("111m222p333s444p東東", {}, ["四暗刻"]),
        ("東南西北白發中東南西北白發中", {}, ["字一色"]),
        ("234s234s666s88s發發發", {}, ["緑一色"]),
        ("1112345678999m5m", {}, ["九蓮宝燈"]),
    ])
    def test_single_yakuman(self, hand, kwargs, expected):
        result = detect(hand, **kwargs)
        assert result.names == expected
        assert result.yakuman_count == 1
        assert result.han == 13

    @pytest.mark.parametrize("hand,expected", [
        ("東東東南南南西西西北北北11m", {"大四喜", "四暗刻"}),
        ("東東東南南南西西西白白白發發", {"四暗刻", "字一色"}),
        ("111m999m111p999p11s", {"四暗刻", "清老頭"}),
    ])
    def test_stacked_yakuman(self, hand, expected):
        result = detect(hand)
        assert set(result.names) == expected
        assert result.yakuman_count == 2
        assert result.han == 26

    def test_no_regular_yaku_or_dora(self):
        result = detect("119m19p19s東南西北白發中", is_riichi=True,
                        dora_tiles_34=(0, 27), uradora_tiles_34=(33,))
        assert all(y.is_yakuman for y in result.yaku)
        assert result.dora_count == 0
        assert result.han == 13
