"""Tests for tile.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from mahhack.core.tile import (
    Tile, TileSuit, ALL_TILES, YAOCHU_INDICES, count_tiles, sort_tiles,
    tile_34_to_name, tile_from_name, make_tiles_from_string, tiles_to_string,
    tiles_from_34_array, over_copied_tiles,
)


class TestTileBasic:
    def test_tile_count(self):
        assert len(ALL_TILES) == 34

    def test_index_range(self):
        for i, t in enumerate(ALL_TILES):
            assert t.index34 == i
        with pytest.raises(ValueError):
            Tile(34)
        with pytest.raises(ValueError):
            Tile(-1)

    def test_suit_assignment(self):
        assert ALL_TILES[0].suit == TileSuit.MAN
        assert ALL_TILES[0].number == 1
        assert ALL_TILES[9].suit == TileSuit.PIN
        assert ALL_TILES[17].number == 9
        assert ALL_TILES[18].suit == TileSuit.SOU
        # East wind
        assert ALL_TILES[27].suit == TileSuit.WIND
        assert ALL_TILES[27].number == 1
        # Chun
        assert ALL_TILES[33].suit == TileSuit.DRAGON
        assert ALL_TILES[33].number == 3

    def test_value_equality(self):
        assert Tile(4) == ALL_TILES[4]
        assert Tile(4) is not ALL_TILES[4]
        assert len({Tile(4), ALL_TILES[4]}) == 1

    def test_yaochu(self):
        for i in range(34):
            assert ALL_TILES[i].is_yaochu == (i in YAOCHU_INDICES)

    def test_terminal_and_honor(self):
        assert ALL_TILES[0].is_terminal  # 1m
        assert ALL_TILES[26].is_terminal  # 9s
        assert not ALL_TILES[1].is_terminal  # 2m
        assert not ALL_TILES[27].is_terminal  # East (honor, not terminal)
        assert ALL_TILES[27].is_honor and ALL_TILES[27].is_wind
        assert ALL_TILES[31].is_honor and ALL_TILES[31].is_dragon
        assert ALL_TILES[13].is_number_tile
        assert not ALL_TILES[30].is_number_tile


class TestTileNames:
    def test_34_name(self):
        assert tile_34_to_name(0) == "1m"
        assert tile_34_to_name(9) == "1p"
        assert tile_34_to_name(27) == "東"
        assert tile_34_to_name(33) == "中"

    def test_from_name(self):
        assert tile_from_name("5p").index34 == 13
        assert tile_from_name("發").index34 == 32
        assert tile_from_name("9s").name == "9s"

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            tile_from_name("0m")
        with pytest.raises(ValueError):
            tile_from_name("E")


class TestSortAndCount:
    def test_sort_order(self):
        tiles = make_tiles_from_string("中東1s9p5m白北1m")
        assert [t.name for t in sort_tiles(tiles)] == [
            "1m", "5m", "9p", "1s", "東", "北", "白", "中"]

    def test_sort_returns_new_list(self):
        tiles = make_tiles_from_string("3m1m")
        result = sort_tiles(tiles)
        assert [t.name for t in tiles] == ["3m", "1m"]
        assert [t.name for t in result] == ["1m", "3m"]

    def test_count_tiles(self):
        arr = count_tiles(make_tiles_from_string("112m東"))
        assert len(arr) == 34
        assert arr[0] == 2
        assert arr[1] == 1
        assert arr[27] == 1
        assert sum(arr) == 4

    def test_count_empty(self):
        assert count_tiles([]) == [0] * 34

    def test_over_copied_tiles(self):
        assert over_copied_tiles(make_tiles_from_string("1111m234p567p789s")) == []
        extra = over_copied_tiles(make_tiles_from_string("11111m234p東東東東東"))
        assert [t.name for t in extra] == ["1m", "東"]

    def test_expand_34_array(self):
        tiles = make_tiles_from_string("東1m1m9s")
        assert tiles_from_34_array(count_tiles(tiles)) == sort_tiles(tiles)


class TestMakeTilesFromString:
    def test_basic(self):
        tiles = make_tiles_from_string("123m")
        assert [t.index34 for t in tiles] == [0, 1, 2]

    def test_mixed_suits(self):
        tiles = make_tiles_from_string("1m1p1s")
        assert [t.suit for t in tiles] == [TileSuit.MAN, TileSuit.PIN, TileSuit.SOU]

    def test_honor_tiles(self):
        tiles = make_tiles_from_string("東南西北白發中")
        assert [t.index34 for t in tiles] == list(range(27, 34))

    def test_spaces_ignored(self):
        assert len(make_tiles_from_string("123m 456p")) == 6

    @pytest.mark.parametrize("bad", ["0m", "12", "m", "123x", "1z"])
    def test_invalid(self, bad):
        with pytest.raises(ValueError):
            make_tiles_from_string(bad)

    def test_to_string(self):
        tiles = make_tiles_from_string("東55p東321m")
        assert tiles_to_string(tiles) == "123m55p東東"
