import asyncio
import random
from typing import Optional, Tuple

import click
from rich.console import Console

from puzzle_solver.board import PuzzleBoard
from puzzle_solver.catalog import PUZZLES, get_puzzle_by_id
from puzzle_solver.config import SolverSettings, load_settings
from puzzle_solver.dispatcher import solve as solve_descriptor, strategy_description
from puzzle_solver.errors import PuzzleSolverError
from puzzle_solver.logs import configure_logging
from puzzle_solver.models import Category, PuzzleDescriptor
from puzzle_solver.stats import generate_solving_report, get_puzzle_statistics
from puzzle_solver.ui import render_board, render_catalog, render_outcome, render_statistics

console = Console()


@click.group()
@click.option("--config", "-c", "config_path", type=click.Path(exists=True, dir_okay=False), help="JSON settings file")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Render log events as JSON")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[str], verbose: bool, json_logs: bool):
    configure_logging(verbose=verbose, json=json_logs)
    try:
        settings = load_settings(config_path) if config_path else SolverSettings()
    except PuzzleSolverError as e:
        raise click.ClickException(str(e))
    ctx.obj = settings


@cli.command()
@click.argument("category")
@click.argument("challenge")
@click.option("--bits", "-b", type=int, default=None, help="Declared bit width for keyspace puzzles")
@click.option("--known-solution", "-k", default=None, help="Reference answer, if one exists")
@click.option("--seed", type=int, default=None, help="Seed for the simulated search")
@click.pass_obj
def solve(settings: SolverSettings, category: str, challenge: str, bits: Optional[int],
          known_solution: Optional[str], seed: Optional[int]):
    """Solve an ad-hoc CHALLENGE of the given CATEGORY."""
    descriptor = PuzzleDescriptor(
        category=category,
        challenge=challenge,
        bit_width=bits,
        known_solution=known_solution,
    )
    try:
        outcome = solve_descriptor(descriptor, settings=settings, rng=None if seed is None else random.Random(seed))
    except PuzzleSolverError as e:
        raise click.ClickException(str(e))
    console.print(render_outcome(outcome, title=f"{category}: {strategy_description(category)}"))


@cli.command()
@click.option("--type", "-t", "category", type=click.Choice([c.value for c in Category]), default=None)
def catalog(category: Optional[str]):
    """List the puzzle catalog."""
    puzzles = [p for p in PUZZLES if category is None or p.type.value == category]
    console.print(render_catalog(puzzles))


@cli.command()
@click.argument("puzzle_ids", nargs=-1, type=int)
@click.option("--all", "run_all", is_flag=True, help="Run every solvable puzzle that is not yet solved")
@click.option("--latency/--no-latency", default=False, help="Simulate processing time before each solve")
@click.option("--seed", type=int, default=None, help="Seed for the simulated processing delays")
@click.option("--report", is_flag=True, help="Print a solving report at the end")
@click.pass_obj
def run(settings: SolverSettings, puzzle_ids: Tuple[int, ...], run_all: bool, latency: bool,
        seed: Optional[int], report: bool):
    """Solve catalog puzzles by id through the solver board."""
    if not latency:
        settings = settings.model_copy(update={"min_delay": 0.0, "max_delay": 0.0})
    board = PuzzleBoard(settings=settings, rng=random.Random(seed))

    if run_all:
        puzzle_ids = tuple(e.puzzle.id for e in board.entries
                           if e.status == "unsolved" and e.puzzle.difficulty != "impossible")
    if not puzzle_ids:
        raise click.UsageError("Give at least one puzzle id or --all")

    async def run_ids():
        for puzzle_id in puzzle_ids:
            puzzle = get_puzzle_by_id(puzzle_id)
            if puzzle is None:
                console.print(f"[bright_red]Unknown puzzle #{puzzle_id}[/bright_red]")
                continue
            try:
                outcome = await board.solve_puzzle(puzzle_id)
            except PuzzleSolverError as e:
                console.print(f"[bright_red]{e}[/bright_red]")
                continue
            console.print(render_outcome(outcome, title=f"#{puzzle.id} {puzzle.name}"))

    try:
        asyncio.run(run_ids())
    except KeyboardInterrupt:
        console.print("Solver stopped")

    console.print(render_board(board.entries, board.total_attempts))
    if report:
        console.print(generate_solving_report(board.history))


@cli.command()
def stats():
    """Show catalog statistics."""
    console.print(render_statistics(get_puzzle_statistics()))


if __name__ == "__main__":
    cli()
