"""Evaluation logger - records every evaluated hand for later review."""

import json
import os
import uuid
from datetime import datetime
from typing import List, Optional

from mahhack.core.tile import Tile
from mahhack.rules.scoring import WinResult
from mahhack.rules.yaku import WinContext
from mahhack.ui.tile_display import tile_to_simple_str

LOG_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.abspath(__file__)))), "logs")


def _tiles_str(tiles) -> List[str]:
    return [tile_to_simple_str(t) for t in tiles]


class WinLogger:
    """Records hand evaluations to a JSON log file."""

    def __init__(self, config_info: dict, log_dir: Optional[str] = None):
        self.session_id = uuid.uuid4().hex[:12]
        self.timestamp = datetime.now().isoformat()
        self.config_info = config_info
        self.log_dir = log_dir or LOG_DIR

        self.evaluations: List[dict] = []

    def log_waits(self, tiles: List[Tile], waits: List[int]):
        """Log a 13-tile tenpai query."""
        self.evaluations.append({
            "kind": "waits",
            "hand": _tiles_str(tiles),
            "waits": [tile_to_simple_str(Tile(w)) for w in waits],
        })

    def log_win(self, tiles: List[Tile], win: WinContext,
                dora_indicators: List[Tile], result: Optional[WinResult]):
        """Log a 14-tile evaluation; ``result`` is None when it did not score."""
        entry = {
            "kind": "win",
            "hand": _tiles_str(tiles),
            "win_tile": tile_to_simple_str(Tile(win.win_tile_34)) if win.win_tile_34 >= 0 else None,
            "dora_indicators": _tiles_str(dora_indicators),
            "is_riichi": win.is_riichi,
            "result": None,
        }
        if result is not None:
            score = result.score
            entry["result"] = {
                "han": score.han,
                "fu": score.fu,
                "limit": score.limit.value if score.limit else None,
                "base_points": score.base_points,
                "total_points": score.total_points,
                "yaku_list": [
                    {"name": y.name, "han": y.han}
                    for y in result.yaku_result.yaku
                ],
            }
        self.evaluations.append(entry)

    def save(self) -> str:
        """Save the session log to a JSON file and return its path."""
        log_data = {
            "session_id": self.session_id,
            "timestamp": self.timestamp,
            "config": self.config_info,
            "evaluations": self.evaluations,
        }

        os.makedirs(self.log_dir, exist_ok=True)
        filename = f"evaluations_{self.session_id}.json"
        filepath = os.path.join(self.log_dir, filename)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(log_data, f, ensure_ascii=False, indent=2)

        return filepath
