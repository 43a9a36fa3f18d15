"""Japanese strings. Yaku keys are the Japanese names themselves."""

TRANSLATIONS = {
    # Tiles
    "tile.east": "東",
    "tile.south": "南",
    "tile.west": "西",
    "tile.north": "北",
    "tile.haku": "白",
    "tile.hatsu": "發",
    "tile.chun": "中",

    # Limit tiers
    "limit.mangan": "満貫",
    "limit.haneman": "跳満",
    "limit.baiman": "倍満",
    "limit.triple mangan": "三倍満",
    "limit.counted yakuman": "数え役満",
    "limit.none": "{han}翻{fu}符",

    # Yaku
    "yaku.門前清自摸和": "門前清自摸和",
    "yaku.立直": "立直",
    "yaku.両立直": "両立直",
    "yaku.一発": "一発",
    "yaku.海底摸月": "海底摸月",
    "yaku.河底撈魚": "河底撈魚",
    "yaku.嶺上開花": "嶺上開花",
    "yaku.搶槓": "搶槓",
    "yaku.七対子": "七対子",
    "yaku.断幺九": "断幺九",
    "yaku.役牌": "役牌",
    "yaku.平和": "平和",
    "yaku.一盃口": "一盃口",
    "yaku.二盃口": "二盃口",
    "yaku.対々和": "対々和",
    "yaku.混老頭": "混老頭",
    "yaku.三暗刻": "三暗刻",
    "yaku.三色同刻": "三色同刻",
    "yaku.三色同順": "三色同順",
    "yaku.小三元": "小三元",
    "yaku.一気通貫": "一気通貫",
    "yaku.三槓子": "三槓子",
    "yaku.混全帯幺九": "混全帯幺九",
    "yaku.純全帯幺九": "純全帯幺九",
    "yaku.混一色": "混一色",
    "yaku.清一色": "清一色",
    "yaku.ドラ": "ドラ",
    "yaku.裏ドラ": "裏ドラ",
    "yaku.国士無双": "国士無双",
    "yaku.天和": "天和",
    "yaku.地和": "地和",
    "yaku.大三元": "大三元",
    "yaku.大四喜": "大四喜",
    "yaku.小四喜": "小四喜",
    "yaku.四暗刻": "四暗刻",
    "yaku.四槓子": "四槓子",
    "yaku.字一色": "字一色",
    "yaku.緑一色": "緑一色",
    "yaku.清老頭": "清老頭",
    "yaku.九蓮宝燈": "九蓮宝燈",

    # Labels
    "label.title": "MahHack 役判定",
    "label.subtitle": "門前ツモ専用 点数計算",
    "label.yaku": "役",
    "label.han": "翻",
    "label.han_value": "{han}翻",
    "label.points": "{points}点",
    "label.fu_han": "{fu}符 {han}翻",
    "label.hand": "手牌",
    "label.waits": "待ち",

    # Messages
    "msg.tsumo_win": "ツモ和了！",
    "msg.yakuman": "役満！ {points}点",
    "msg.not_agari": "和了形ではありません",
    "msg.no_yaku": "役がありません",
    "msg.tenpai": "聴牌",
    "msg.noten": "ノーテン",
    "msg.invalid_hand": "手牌を読み取れません: {error}",
    "msg.log_saved": "記録を保存しました: {path}",
    "msg.goodbye": "おつかれさまでした",

    # Prompts
    "prompt.hand": "手牌 (13枚または14枚, 例 123m456p789s東東東南)",
    "prompt.win_tile": "和了牌 (空欄で最後の牌)",
    "prompt.dora": "ドラ表示牌 (空欄でなし)",
    "prompt.uradora": "裏ドラ表示牌 (空欄でなし)",
    "prompt.riichi": "立直していますか",
    "prompt.mangan_rule": "30符4翻を満貫にしますか",
    "prompt.again": "続けますか",
}
