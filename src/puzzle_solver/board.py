import asyncio
import random
from dataclasses import dataclass
from typing import Dict, List, Literal, Optional, Tuple

import structlog

from puzzle_solver.catalog import PUZZLES, CatalogPuzzle
from puzzle_solver.config import SolverSettings
from puzzle_solver.dispatcher import DEFAULT_SETTINGS, estimate_solve_time, solve
from puzzle_solver.errors import PuzzleInfeasible, SolveInProgress
from puzzle_solver.models import PuzzleDescriptor, SolveOutcome
from puzzle_solver.stats import PuzzleResult

log = structlog.get_logger()

type PuzzleStatus = Literal["solved", "unsolved", "solving"]

INITIALLY_SOLVED_PUZZLE_COUNT = 3


async def solve_with_latency(
    descriptor: PuzzleDescriptor,
    *,
    rng: Optional[random.Random] = None,
    settings: Optional[SolverSettings] = None,
) -> SolveOutcome:
    """Wait a random processing delay drawn from `rng`, then run one synchronous solve.

    The solve itself is seeded from the descriptor, so the delay never changes the outcome.
    """
    settings = settings or DEFAULT_SETTINGS
    rng = rng or random.Random()
    delay = settings.min_delay + rng.random() * (settings.max_delay - settings.min_delay)
    if delay > 0:
        await asyncio.sleep(delay)
    return solve(descriptor, settings=settings)


@dataclass
class BoardEntry:
    puzzle: CatalogPuzzle
    status: PuzzleStatus = "unsolved"
    found_solution: Optional[str] = None


class PuzzleBoard:
    """Caller-side state for a catalog: per-puzzle status, history and attempt totals.

    Only one solve per puzzle may be pending at a time.
    """

    def __init__(
        self,
        puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES,
        *,
        settings: Optional[SolverSettings] = None,
        rng: Optional[random.Random] = None,
        initially_solved: int = INITIALLY_SOLVED_PUZZLE_COUNT,
    ) -> None:
        self._settings = settings or DEFAULT_SETTINGS
        self._rng = rng or random.Random()
        self._entries: Dict[int, BoardEntry] = {}
        for puzzle in puzzles:
            entry = BoardEntry(puzzle)
            if puzzle.id <= initially_solved:
                entry.status = "solved"
                entry.found_solution = puzzle.solution
            self._entries[puzzle.id] = entry
        self.history: List[PuzzleResult] = []
        self.total_attempts = 0

    @property
    def entries(self) -> List[BoardEntry]:
        return list(self._entries.values())

    def entry(self, puzzle_id: int) -> BoardEntry:
        try:
            return self._entries[puzzle_id]
        except KeyError:
            raise KeyError(f"Unknown puzzle id: {puzzle_id}") from None

    def solved_ids(self) -> List[int]:
        return [e.puzzle.id for e in self._entries.values() if e.status == "solved"]

    def next_unsolved(self) -> Optional[CatalogPuzzle]:
        for entry in self._entries.values():
            if entry.status == "unsolved" and entry.puzzle.difficulty != "impossible":
                return entry.puzzle
        return None

    def reset(self) -> None:
        self.total_attempts = 0

    async def solve_puzzle(self, puzzle_id: int) -> SolveOutcome:
        entry = self.entry(puzzle_id)
        puzzle = entry.puzzle

        if puzzle.difficulty == "impossible":
            raise PuzzleInfeasible(
                f"Puzzle #{puzzle_id} is computationally infeasible "
                f"(estimated time: {estimate_solve_time(puzzle.difficulty)})"
            )
        if entry.status == "solving":
            raise SolveInProgress(f"Puzzle #{puzzle_id} is already being solved")

        entry.status = "solving"
        log.info("solver started", puzzle_id=puzzle_id, type=puzzle.type.value, difficulty=puzzle.difficulty)
        try:
            outcome = await solve_with_latency(puzzle.to_descriptor(), rng=self._rng, settings=self._settings)
        except BaseException:
            entry.status = "unsolved"
            raise

        if outcome.succeeded:
            entry.status = "solved"
            entry.found_solution = outcome.solution
        else:
            entry.status = "unsolved"

        self.total_attempts += outcome.attempts_made
        self.history.append(
            PuzzleResult(
                puzzle_id=puzzle_id,
                solved=outcome.succeeded,
                attempts=outcome.attempts_made,
                time_ms=outcome.elapsed_millis,
                solution=outcome.solution,
            )
        )
        return outcome
