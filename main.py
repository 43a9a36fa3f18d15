#!/usr/bin/env python3
"""MahHack - closed-hand tsumo evaluator for the terminal"""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm

from mahhack.core.tile import (
    Tile, count_tiles, make_tiles_from_string, over_copied_tiles, sort_tiles, tiles_to_string,
)
from mahhack.engine.config import RuleConfig
from mahhack.engine.win_logger import WinLogger
from mahhack.rules.agari import get_waiting_tiles, is_agari
from mahhack.rules.dora import dora_tiles_from_indicators
from mahhack.rules.scoring import calculate_score
from mahhack.rules.yaku import WinContext
from mahhack.ui.i18n import t, set_language
from mahhack.ui.result_display import render_failure, render_waits, render_win_screen

console = Console()


def change_language(config: RuleConfig):
    """Show language selection submenu."""
    console.print("\n    1. 日本語")
    console.print("    2. English")
    while True:
        try:
            choice = int(console.input("  > 1/2: ").strip())
            if choice in (1, 2):
                config.language = "ja" if choice == 1 else "en"
                set_language(config.language)
                return
        except ValueError:
            pass
        console.print("  [red]Invalid / 無効[/red]")


def show_menu() -> int:
    """Show the main menu and return the choice."""
    console.print()
    console.print(Panel(
        f"[bold cyan]{t('label.title')}[/bold cyan]\n"
        f"[dim]{t('label.subtitle')}[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    console.print("    1. Evaluate / 評価")
    console.print("    2. Language / 言語")
    console.print("    0. Quit / 終了")
    console.print()

    while True:
        try:
            choice = int(console.input("  > ").strip())
            if 0 <= choice <= 2:
                return choice
        except ValueError:
            pass
        console.print("  [red]Invalid / 無効[/red]")


def read_tiles(prompt_key: str, allow_empty: bool = True) -> List[Tile]:
    """Prompt until the input parses as shorthand tiles."""
    while True:
        raw = console.input(f"  {t(prompt_key)}: ").strip()
        if not raw and allow_empty:
            return []
        try:
            tiles = make_tiles_from_string(raw)
        except ValueError as e:
            console.print(f"  [red]{t('msg.invalid_hand', error=e)}[/red]")
            continue
        if tiles or allow_empty:
            return tiles


def read_win_tile(hand: List[Tile]) -> Tile:
    """Ask for the winning tile; blank means the last tile entered."""
    while True:
        tiles = read_tiles("prompt.win_tile")
        if not tiles:
            return hand[-1]
        if len(tiles) == 1 and tiles[0] in hand:
            return tiles[0]
        console.print(f"  [red]{t('msg.invalid_hand', error=tiles_to_string(tiles))}[/red]")


def evaluate_win(hand: List[Tile], config: RuleConfig, logger: WinLogger):
    """Ask for the win circumstances, then score and render the hand."""
    win_tile = read_win_tile(hand)
    rest = list(hand)
    rest.remove(win_tile)
    display = sort_tiles(rest) + [win_tile]

    tiles_34 = count_tiles(hand)
    if not is_agari(tiles_34):
        logger.log_win(display, WinContext(win_tile_34=win_tile.index34), [], None)
        render_failure(console, display, "msg.not_agari")
        return

    dora_indicators = read_tiles("prompt.dora")
    is_riichi = Confirm.ask(f"  {t('prompt.riichi')}", console=console, default=False)
    uradora_indicators = read_tiles("prompt.uradora") if is_riichi else []

    win = WinContext(
        win_tile_34=win_tile.index34,
        is_riichi=is_riichi,
        dora_tiles_34=dora_tiles_from_indicators(dora_indicators),
        uradora_tiles_34=dora_tiles_from_indicators(uradora_indicators),
    )
    result = calculate_score(tiles_34, win, config)
    logger.log_win(display, win, dora_indicators, result)

    if result is None:
        render_failure(console, display, "msg.no_yaku")
    else:
        render_win_screen(console, display, result)


def evaluate_loop(config: RuleConfig, logger: WinLogger):
    """Evaluate hands until the player stops."""
    while True:
        hand = read_tiles("prompt.hand", allow_empty=False)
        extra = over_copied_tiles(hand)
        if extra:
            console.print(f"  [red]{t('msg.invalid_hand', error=tiles_to_string(extra))}[/red]")
            continue
        if len(hand) == 13:
            waits = get_waiting_tiles(count_tiles(hand))
            logger.log_waits(sort_tiles(hand), waits)
            render_waits(console, sort_tiles(hand), waits)
        elif len(hand) == 14:
            evaluate_win(hand, config, logger)
        else:
            console.print(f"  [red]{t('msg.invalid_hand', error=len(hand))}[/red]")
            continue

        if not Confirm.ask(f"  {t('prompt.again')}", console=console, default=True):
            return


def main():
    """Main entry point."""
    config = RuleConfig()
    set_language(config.language)
    logger = None
    try:
        config.mangan_30fu_4han = Confirm.ask(
            f"  {t('prompt.mangan_rule')}", console=console, default=False)
        logger = WinLogger(config.to_dict())
        while True:
            choice = show_menu()
            if choice == 0:
                console.print(f"\n  {t('msg.goodbye')}\n")
                break
            elif choice == 2:
                change_language(config)
                continue
            evaluate_loop(config, logger)
    except (KeyboardInterrupt, EOFError):
        console.print(f"\n\n  [dim]{t('msg.goodbye')}[/dim]\n")

    if logger is not None and logger.evaluations:
        log_path = logger.save()
        console.print(f"  [dim]{t('msg.log_saved', path=log_path)}[/dim]")


if __name__ == "__main__":
    main()
