"""Strategy engine for decoding and searching cryptographic puzzle challenges."""
from puzzle_solver.dispatcher import solve
from puzzle_solver.models import Category, FailureReason, PuzzleDescriptor, SolveOutcome

__all__ = [
    "Category",
    "FailureReason",
    "PuzzleDescriptor",
    "SolveOutcome",
    "solve",
]
