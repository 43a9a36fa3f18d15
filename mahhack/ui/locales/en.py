"""English strings."""

TRANSLATIONS = {
    # Tiles
    "tile.east": "E",
    "tile.south": "S",
    "tile.west": "W",
    "tile.north": "N",
    "tile.haku": "Wh",
    "tile.hatsu": "Gr",
    "tile.chun": "Rd",

    # Limit tiers
    "limit.mangan": "Mangan",
    "limit.haneman": "Haneman",
    "limit.baiman": "Baiman",
    "limit.triple mangan": "Sanbaiman",
    "limit.counted yakuman": "Kazoe Yakuman",
    "limit.none": "{han} han {fu} fu",

    # Yaku
    "yaku.門前清自摸和": "Menzen Tsumo",
    "yaku.立直": "Riichi",
    "yaku.両立直": "Double Riichi",
    "yaku.一発": "Ippatsu",
    "yaku.海底摸月": "Haitei",
    "yaku.河底撈魚": "Houtei",
    "yaku.嶺上開花": "Rinshan Kaihou",
    "yaku.搶槓": "Chankan",
    "yaku.七対子": "Chiitoitsu",
    "yaku.断幺九": "Tanyao",
    "yaku.役牌": "Yakuhai",
    "yaku.平和": "Pinfu",
    "yaku.一盃口": "Iipeikou",
    "yaku.二盃口": "Ryanpeikou",
    "yaku.対々和": "Toitoi",
    "yaku.混老頭": "Honroutou",
    "yaku.三暗刻": "Sanankou",
    "yaku.三色同刻": "Sanshoku Doukou",
    "yaku.三色同順": "Sanshoku Doujun",
    "yaku.小三元": "Shousangen",
    "yaku.一気通貫": "Ittsuu",
    "yaku.三槓子": "Sankantsu",
    "yaku.混全帯幺九": "Chanta",
    "yaku.純全帯幺九": "Junchan",
    "yaku.混一色": "Honitsu",
    "yaku.清一色": "Chinitsu",
    "yaku.ドラ": "Dora",
    "yaku.裏ドラ": "Ura Dora",
    "yaku.国士無双": "Kokushi Musou",
    "yaku.天和": "Tenhou",
    "yaku.地和": "Chiihou",
    "yaku.大三元": "Daisangen",
    "yaku.大四喜": "Daisuushii",
    "yaku.小四喜": "Shousuushii",
    "yaku.四暗刻": "Suuankou",
    "yaku.四槓子": "Suukantsu",
    "yaku.字一色": "Tsuuiisou",
    "yaku.緑一色": "Ryuuiisou",
    "yaku.清老頭": "Chinroutou",
    "yaku.九蓮宝燈": "Chuuren Poutou",

    # Labels
    "label.title": "MahHack Hand Evaluator",
    "label.subtitle": "Closed-hand tsumo scoring",
    "label.yaku": "Yaku",
    "label.han": "Han",
    "label.han_value": "{han} han",
    "label.points": "{points} pts",
    "label.fu_han": "{fu} fu {han} han",
    "label.hand": "Hand",
    "label.waits": "Waits",

    # Messages
    "msg.tsumo_win": "Tsumo!",
    "msg.yakuman": "Yakuman! {points} pts",
    "msg.not_agari": "Not a winning hand",
    "msg.no_yaku": "No yaku",
    "msg.tenpai": "Tenpai",
    "msg.noten": "Noten",
    "msg.invalid_hand": "Cannot read hand: {error}",
    "msg.log_saved": "Evaluation log saved: {path}",
    "msg.goodbye": "Goodbye!",

    # Prompts
    "prompt.hand": "Hand (13 or 14 tiles, e.g. 123m456p789s東東東南)",
    "prompt.win_tile": "Winning tile (blank for the last tile)",
    "prompt.dora": "Dora indicators (blank for none)",
    "prompt.uradora": "Ura dora indicators (blank for none)",
    "prompt.riichi": "Riichi declared?",
    "prompt.mangan_rule": "Count 30 fu 4 han as mangan?",
    "prompt.again": "Evaluate another hand?",
}
