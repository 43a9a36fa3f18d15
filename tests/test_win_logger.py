"""Tests for win_logger.py"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json

from mahhack.core.tile import count_tiles, make_tiles_from_string
from mahhack.engine.config import RuleConfig
from mahhack.engine.win_logger import WinLogger
from mahhack.rules.scoring import calculate_score
from mahhack.rules.yaku import WinContext


class TestWinLogger:
    def test_save_session(self, tmp_path):
        logger = WinLogger(RuleConfig().to_dict(), log_dir=str(tmp_path))

        tiles = make_tiles_from_string("11123456789m555p")
        win = WinContext(win_tile_34=tiles[-1].index34)
        result = calculate_score(count_tiles(tiles), win)
        logger.log_win(tiles, win, make_tiles_from_string("9s"), result)
        logger.log_waits(make_tiles_from_string("23m456p789s東東東白白"), [0, 3])

        path = logger.save()
        assert os.path.dirname(path) == str(tmp_path)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        assert data["session_id"] == logger.session_id
        assert data["config"]["mangan_30fu_4han"] is False
        win_entry, waits_entry = data["evaluations"]

        assert win_entry["kind"] == "win"
        assert win_entry["win_tile"] == "5p"
        assert win_entry["dora_indicators"] == ["9s"]
        assert win_entry["result"]["han"] == 3
        assert win_entry["result"]["total_points"] == 3840
        assert win_entry["result"]["limit"] is None
        assert [y["name"] for y in win_entry["result"]["yaku_list"]] == [
            "門前清自摸和", "一気通貫"]

        assert waits_entry["kind"] == "waits"
        assert waits_entry["waits"] == ["1m", "4m"]

    def test_unscored_hand(self, tmp_path):
        logger = WinLogger({}, log_dir=str(tmp_path))
        tiles = make_tiles_from_string("1357m2468p1357s東白")
        logger.log_win(tiles, WinContext(win_tile_34=tiles[-1].index34), [], None)
        assert logger.evaluations[0]["result"] is None
        assert logger.evaluations[0]["win_tile"] == "白"

    def test_limit_value_logged(self, tmp_path):
        logger = WinLogger({}, log_dir=str(tmp_path))
        tiles = make_tiles_from_string("123m234m345m678m99m")
        win = WinContext(win_tile_34=tiles[-1].index34)
        logger.log_win(tiles, win, [], calculate_score(count_tiles(tiles), win))
        assert logger.evaluations[0]["result"]["limit"] == "haneman"
