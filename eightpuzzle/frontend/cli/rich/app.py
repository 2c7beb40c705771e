"""Rich terminal frontend: styled board panel and option prompt.

Uses the ``rich`` library for output and ``IntPrompt`` for the single-choice
selection, sharing the menu text and choice handling with the vanilla CLI.
"""

from __future__ import annotations

import rich.box
from loguru import logger
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.prompt import IntPrompt
from rich.table import Table
from rich.text import Text

from eightpuzzle.backend.engine.gameplay import GamePlay
from eightpuzzle.backend.models.board import EMPTY, Board, Move
from eightpuzzle.config import Settings
from eightpuzzle.frontend.cli.options import (
    BANNER,
    EXIT_MESSAGE,
    PROMPT,
    RETRY_MESSAGE,
    SUCCESS_MESSAGE,
    build_options,
    format_time,
    resolve_choice,
)

console = Console()


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(len(board.tiles)):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.tiles):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == EMPTY:
                cells.append("[dim]_[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def _render_options(moves: list[Move]) -> Table:
    table = Table(show_header=False, box=None, padding=(0, 1))
    table.add_column(justify="right", style="bold cyan")
    table.add_column()
    for i, label in enumerate(build_options(moves), 1):
        table.add_row(str(i), label)
    return table


# -- screens ------------------------------------------------------------------


def _draw_turn(con: Console, game: GamePlay, moves: list[Move]) -> None:
    stats = Text()
    stats.append("Moves: ", style="dim")
    stats.append(str(game.state.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(game.state.elapsed_time), style="bold yellow")

    panel = Panel(
        Group(Align.center(_render_board(game.board)), Align.center(stats)),
        title=f"[bold cyan]{BANNER}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )
    con.print()
    con.print(panel)
    con.print("Please select an option:")
    con.print(_render_options(moves))


def _draw_win(con: Console, game: GamePlay) -> None:
    congrats = Text()
    congrats.append("★ ", style="bold yellow")
    congrats.append(SUCCESS_MESSAGE, style="bold green")
    congrats.append(
        f"  solved in {game.state.moves} moves, "
        f"{format_time(game.state.elapsed_time)} ",
        style="green",
    )
    congrats.append("★", style="bold yellow")

    panel = Panel(
        Group(Align.center(_render_board(game.board)), Align.center(congrats)),
        title=f"[bold green]{BANNER}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )
    con.print()
    con.print(panel)


# -- selection ----------------------------------------------------------------


def _ask(con: Console, moves: list[Move]) -> Move | None:
    """Prompt until an option is picked; ``None`` means exit."""
    choices = [str(i) for i in range(1, len(moves) + 2)]
    while True:
        try:
            answer = IntPrompt.ask(
                PROMPT, console=con, choices=choices, show_choices=False
            )
        except KeyboardInterrupt:
            logger.debug("Prompt interrupted")
            con.print()
            con.print(f"[yellow]{RETRY_MESSAGE}[/yellow]")
            continue
        return resolve_choice(str(answer), moves)


# -- game loop ----------------------------------------------------------------


def play(game: GamePlay, con: Console | None = None) -> GamePlay:
    """Run the prompt loop until the user exits or solves the board."""
    con = con if con is not None else console

    while not game.is_won:
        moves = game.valid_moves
        _draw_turn(con, game, moves)

        try:
            chosen = _ask(con, moves)
        except EOFError:
            chosen = None
            con.print()

        if chosen is None:
            con.print(f"[dim]{EXIT_MESSAGE}[/dim]")
            break

        con.print(f"[cyan]{chosen.label}[/cyan] Chosen")
        game.apply(chosen)
        if game.is_won:
            _draw_win(con, game)
    return game


# -- public entry point -------------------------------------------------------


def run(settings: Settings) -> GamePlay:
    """Launch the Rich CLI for one shuffled run."""
    game = GamePlay(settings.shuffle_depth, settings.make_rng())
    return play(game)
