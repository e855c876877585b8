from typing import Iterable, Literal, Optional

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from puzzle_solver.board import BoardEntry
from puzzle_solver.catalog import CatalogPuzzle
from puzzle_solver.models import SolveOutcome
from puzzle_solver.stats import PuzzleStatistics, format_large_number

COLORS = {
    "solved": "spring_green2",
    "unsolved": "bright_red",
    "solving": "bold yellow",
    "difficulty": {
        "easy": "green",
        "medium": "yellow",
        "hard": "dark_orange",
        "impossible": "red",
    },
}

type StatusLabel = Literal["solved", "unsolved", "solving"]


def styled(text: str, style: str) -> str:
    return f"[{style}]{text}[/{style}]"


def status_to_string(status: StatusLabel) -> str:
    return styled(status, COLORS[status])


def render_outcome(outcome: SolveOutcome, title: Optional[str] = None):
    """Render one solve outcome as a panel."""
    status: StatusLabel = "solved" if outcome.succeeded else "unsolved"
    table = Table.grid(padding=(0, 2))
    table.add_column(justify="right", style="dim")
    table.add_column()
    table.add_row("Status", status_to_string(status))
    if outcome.succeeded:
        table.add_row("Solution", escape(repr(outcome.solution)))
    else:
        table.add_row("Reason", str(outcome.failure_reason))
    table.add_row("Method", escape(outcome.strategy_name))
    table.add_row("Attempts", f"{outcome.attempts_made:,} ({format_large_number(outcome.attempts_made)})")
    table.add_row("Time", f"{outcome.elapsed_millis:.2f} ms")

    border = COLORS[status]
    return Panel(table, title=escape(title or "Solve result"), border_style=border)


def render_catalog(puzzles: Iterable[CatalogPuzzle]):
    table = Table(title="Puzzle catalog")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Type")
    table.add_column("Difficulty")
    table.add_column("Bits", justify="right")
    table.add_column("Challenge", overflow="fold")

    for puzzle in puzzles:
        difficulty = styled(puzzle.difficulty, COLORS["difficulty"][puzzle.difficulty])
        bits = "" if puzzle.bits is None else str(puzzle.bits)
        table.add_row(str(puzzle.id), puzzle.name, puzzle.type.value, difficulty, bits, puzzle.challenge)
    return table


def render_board(entries: Iterable[BoardEntry], total_attempts: int):
    table = Table(title=f"Solver board  |  Total attempts {total_attempts:,}")
    table.add_column("#", justify="right")
    table.add_column("Name")
    table.add_column("Status")
    table.add_column("Found solution", overflow="fold")

    for entry in entries:
        found = "" if entry.found_solution is None else escape(repr(entry.found_solution))
        table.add_row(str(entry.puzzle.id), entry.puzzle.name, status_to_string(entry.status), found)
    return table


def render_statistics(stats: PuzzleStatistics):
    table = Table(title="Catalog statistics")
    table.add_column("Group")
    table.add_column("Count", justify="right")

    table.add_row("Total", str(stats.total))
    table.add_row("Solved", str(stats.solved))
    table.add_row("Unsolved", str(stats.unsolved))
    for category, count in stats.by_type.items():
        table.add_row(f"type: {category.value}", str(count))
    for difficulty, count in stats.by_difficulty.items():
        table.add_row(f"difficulty: {difficulty}", str(count))
    return table
