"""Rich rendering of evaluation results."""

from typing import List

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from mahhack.core.tile import ALL_TILES, Tile
from mahhack.rules.scoring import WinResult
from mahhack.ui.i18n import t, translate_limit, translate_yaku
from mahhack.ui.tile_display import tiles_to_rich_text


def render_hand(console: Console, tiles: List[Tile], highlight_last: bool = False):
    """Print a labelled hand row."""
    line = Text(f"  {t('label.hand')}: ")
    line.append_text(tiles_to_rich_text(tiles, highlight_last=highlight_last))
    console.print(line)


def build_yaku_table(win_result: WinResult) -> Table:
    """Yaku list as a two-column table."""
    table = Table(title=t("label.yaku"), show_header=True, border_style="cyan")
    table.add_column(t("label.yaku"), style="bold")
    table.add_column(t("label.han"), justify="right")

    for yaku in win_result.yaku_result.yaku:
        style = "bold red" if yaku.is_yakuman else ("dim" if yaku.is_dora else "")
        table.add_row(Text(translate_yaku(yaku.name), style=style),
                      t("label.han_value", han=yaku.han))
    return table


def render_win_screen(console: Console, tiles: List[Tile], win_result: WinResult):
    """Render winning screen with yaku and score details."""
    console.print()
    console.print(Panel(f"[bold green]{t('msg.tsumo_win')}[/bold green]",
                        border_style="green"))
    render_hand(console, tiles, highlight_last=True)
    console.print(build_yaku_table(win_result))

    score = win_result.score
    if win_result.yaku_result.is_yakuman:
        console.print(f"  [bold red]{t('msg.yakuman', points=score.total_points)}[/bold red]")
    else:
        rank = translate_limit(score.limit, score.han, score.fu)
        console.print(f"  {t('label.fu_han', fu=score.fu, han=score.han)}  "
                      f"[bold]{rank}[/bold]  "
                      f"{t('label.points', points=score.total_points)}")
    console.print()


def render_failure(console: Console, tiles: List[Tile], message_key: str):
    """Render a hand that did not score (not agari, or no yaku)."""
    console.print()
    render_hand(console, tiles)
    console.print(f"  [red]{t(message_key)}[/red]")
    console.print()


def render_waits(console: Console, tiles: List[Tile], waits: List[int]):
    """Render the waits of a 13-tile hand, or noten."""
    console.print()
    render_hand(console, tiles)
    if not waits:
        console.print(f"  [yellow]{t('msg.noten')}[/yellow]")
    else:
        line = Text(f"  {t('msg.tenpai')}  {t('label.waits')}: ", style="bold")
        line.append_text(tiles_to_rich_text([ALL_TILES[w] for w in waits]))
        console.print(line)
    console.print()
