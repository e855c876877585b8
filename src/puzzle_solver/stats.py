"""Statistics, hints and reports over a puzzle catalog."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from puzzle_solver.catalog import PUZZLES, CatalogPuzzle, get_puzzle_by_id
from puzzle_solver.models import Category

DIFFICULTY_ORDER = {"easy": 1, "medium": 2, "hard": 3, "impossible": 4}

DIFFICULTY_DESCRIPTIONS = {
    "easy": "Solvable in seconds with basic algorithms",
    "medium": "Requires optimized algorithms, solvable in seconds to minutes",
    "hard": "Computationally intensive, may take several minutes",
    "impossible": "Beyond current computational capabilities without breakthroughs",
}

TYPE_DESCRIPTIONS = {
    Category.BITCOIN_ADDRESS: "Find the private key that generates a specific Bitcoin address",
    Category.HASH_PREIMAGE: "Find the input that produces a specific hash output",
    Category.CIPHER_DECODE: "Decrypt or decode an encrypted message or data",
    Category.PATTERN_ANALYSIS: "Identify and continue mathematical or logical patterns",
    Category.PRIVATE_KEY_RECOVERY: "Recover private keys from partial information",
}

# Fields written by export_puzzle_data. Never the solution.
EXPORT_FIELDS = {"id", "type", "name", "description", "difficulty", "challenge", "hint"}

# Bit width above which a bitcoin puzzle is out of reach for current hardware.
SOLVABLE_BIT_LIMIT = 30


@dataclass
class PuzzleStatistics:
    total: int
    by_type: Dict[Category, int]
    by_difficulty: Dict[str, int]
    solved: int
    unsolved: int


@dataclass(frozen=True)
class PuzzleResult:
    puzzle_id: int
    solved: bool
    attempts: int
    time_ms: float
    solution: Optional[str] = None
    timestamp: datetime = field(default_factory=datetime.now)


def get_puzzle_statistics(solved_ids: Sequence[int] = (), puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES) -> PuzzleStatistics:
    by_type = {category: 0 for category in Category}
    by_difficulty = {difficulty: 0 for difficulty in DIFFICULTY_ORDER}
    for puzzle in puzzles:
        by_type[puzzle.type] += 1
        by_difficulty[puzzle.difficulty] += 1

    return PuzzleStatistics(
        total=len(puzzles),
        by_type=by_type,
        by_difficulty=by_difficulty,
        solved=len(solved_ids),
        unsolved=len(puzzles) - len(solved_ids),
    )


def get_recommended_puzzle(solved_ids: Iterable[int], puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES) -> Optional[CatalogPuzzle]:
    """Easiest unsolved puzzle that is not impossible, lowest id first on ties."""
    solved = set(solved_ids)
    available = [p for p in puzzles if p.id not in solved and p.difficulty != "impossible"]
    if not available:
        return None
    return min(available, key=lambda p: (DIFFICULTY_ORDER[p.difficulty], p.id))


def validate_solution(puzzle: CatalogPuzzle, proposed_solution: str) -> bool:
    """Compare ignoring case and surrounding whitespace. False when no reference answer exists."""
    if not puzzle.solution:
        return False
    return proposed_solution.strip().lower() == puzzle.solution.strip().lower()


def get_difficulty_description(difficulty: str) -> str:
    return DIFFICULTY_DESCRIPTIONS[difficulty]


def format_large_number(num: float) -> str:
    if num < 1_000:
        return str(num)
    if num < 1_000_000:
        return f"{num / 1_000:.1f}K"
    if num < 1_000_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num < 1_000_000_000_000:
        return f"{num / 1_000_000_000:.1f}B"
    return f"{num / 1_000_000_000_000:.1f}T"


def calculate_expected_attempts(bits: int) -> int:
    return 2 ** bits


def get_puzzle_type_description(category: Category | str) -> str:
    return TYPE_DESCRIPTIONS[Category.parse(category)]


def is_solvable_with_current_tech(puzzle: CatalogPuzzle) -> bool:
    if puzzle.difficulty == "impossible":
        return False
    if puzzle.type == Category.BITCOIN_ADDRESS and puzzle.bits:
        return puzzle.bits <= SOLVABLE_BIT_LIMIT
    return True


def get_additional_hints(puzzle: CatalogPuzzle) -> List[str]:
    hints = []
    match puzzle.type:
        case Category.CIPHER_DECODE:
            hints.append("Try different encoding/decoding methods")
            hints.append("Look for patterns in the encrypted text")
        case Category.PATTERN_ANALYSIS:
            hints.append("Look for mathematical relationships")
            hints.append("Consider well-known sequences")
        case Category.HASH_PREIMAGE:
            hints.append("Try common words and phrases")
            hints.append("Consider empty strings or simple inputs")
        case Category.BITCOIN_ADDRESS:
            if puzzle.bits and puzzle.bits <= 5:
                hints.append("The search space is very small")
            elif puzzle.bits and puzzle.bits <= 15:
                hints.append("May require optimized search algorithms")
    return hints


def export_puzzle_data(puzzle_id: int, puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES) -> str:
    """JSON view of a puzzle for sharing. The solution is never included."""
    puzzle = get_puzzle_by_id(puzzle_id, puzzles)
    if puzzle is None:
        return ""
    return puzzle.model_dump_json(include=EXPORT_FIELDS, indent=2)


def _difficulty_breakdown(results: Sequence[PuzzleResult], puzzles: Tuple[CatalogPuzzle, ...]) -> str:
    breakdown: Dict[str, List[int]] = {}
    for result in results:
        puzzle = get_puzzle_by_id(result.puzzle_id, puzzles)
        if puzzle is None:
            continue
        counts = breakdown.setdefault(puzzle.difficulty, [0, 0])
        counts[0] += 1
        if result.solved:
            counts[1] += 1
    return "\n".join(f"  {difficulty}: {solved}/{total}" for difficulty, (total, solved) in breakdown.items())


def generate_solving_report(results: Sequence[PuzzleResult], puzzles: Tuple[CatalogPuzzle, ...] = PUZZLES) -> str:
    if not results:
        return "Puzzle Solving Report\n=====================\nNo puzzles attempted."

    total_attempts = sum(r.attempts for r in results)
    total_time = sum(r.time_ms for r in results)
    solved = sum(1 for r in results if r.solved)

    lines = [
        "Puzzle Solving Report",
        "=====================",
        f"Total Puzzles Attempted: {len(results)}",
        f"Successfully Solved: {solved} ({solved / len(results) * 100:.1f}%)",
        f"Total Attempts: {format_large_number(total_attempts)}",
        f"Total Time: {total_time / 1000:.2f}s",
        f"Average Time per Puzzle: {total_time / len(results) / 1000:.2f}s",
        "",
        "By Difficulty:",
        _difficulty_breakdown(results, puzzles),
    ]
    return "\n".join(lines).strip()
