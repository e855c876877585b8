import asyncio
import random

import pytest

from puzzle_solver import board as board_module
from puzzle_solver.board import PuzzleBoard, solve_with_latency
from puzzle_solver.config import SolverSettings
from puzzle_solver.errors import PuzzleInfeasible, SolveInProgress
from puzzle_solver.models import Category, FailureReason, PuzzleDescriptor

NO_DELAY = SolverSettings(min_delay=0.0, max_delay=0.0)


@pytest.fixture
def board():
    return PuzzleBoard(settings=NO_DELAY, rng=random.Random(0))


class TestSolveWithLatency:
    """Test suite for the delayed solve"""

    def test_returns_outcome(self):
        """Test that the delayed solve gives the same result as a direct solve"""
        outcome = asyncio.run(solve_with_latency(
            PuzzleDescriptor(Category.PATTERN_ANALYSIS, "1, 1, 2, 3, 5, 8"), settings=NO_DELAY
        ))
        assert outcome.solution == "13"

    def test_sleeps_within_range(self, monkeypatch):
        """Test that the delay is drawn from the configured range"""
        delays = []

        async def fake_sleep(delay):
            delays.append(delay)

        monkeypatch.setattr(board_module.asyncio, "sleep", fake_sleep)
        settings = SolverSettings(min_delay=0.5, max_delay=2.0)
        asyncio.run(solve_with_latency(
            PuzzleDescriptor(Category.CIPHER_DECODE, "SGk="), settings=settings, rng=random.Random(5)
        ))
        assert len(delays) == 1
        assert 0.5 <= delays[0] <= 2.0


class TestPuzzleBoard:
    """Test suite for the puzzle board"""

    def test_initial_state(self, board):
        """Test that the first three puzzles start solved"""
        assert board.solved_ids() == [1, 2, 3]
        assert board.entry(1).found_solution == "1"
        assert board.entry(4).status == "unsolved"
        assert board.total_attempts == 0
        assert board.history == []

    def test_next_unsolved(self, board):
        """Test the first unsolved puzzle that can be attempted"""
        assert board.next_unsolved().id == 4

    def test_unknown_entry(self, board):
        """Test that unknown ids raise KeyError"""
        with pytest.raises(KeyError, match="Unknown puzzle id"):
            board.entry(404)

    def test_solve_success(self, board):
        """Test that a success marks the puzzle solved and records history"""
        outcome = asyncio.run(board.solve_puzzle(5))
        assert outcome.solution == "21"
        entry = board.entry(5)
        assert entry.status == "solved"
        assert entry.found_solution == "21"
        assert board.total_attempts == 22
        assert len(board.history) == 1
        assert board.history[0].puzzle_id == 5
        assert board.history[0].solved

    def test_solve_failure(self, board):
        """Test that a failure leaves the puzzle unsolved but counts attempts"""
        outcome = asyncio.run(board.solve_puzzle(18))
        assert outcome.failure_reason is FailureReason.EXHAUSTED
        assert board.entry(18).status == "unsolved"
        assert board.total_attempts == 1_048_576
        assert not board.history[0].solved

    def test_attempts_accumulate(self, board):
        """Test that totals add up across solves"""
        asyncio.run(board.solve_puzzle(4))
        asyncio.run(board.solve_puzzle(7))
        assert board.total_attempts == 9 + 2
        assert len(board.history) == 2

    def test_reset(self, board):
        """Test that reset clears the attempt counter"""
        asyncio.run(board.solve_puzzle(4))
        board.reset()
        assert board.total_attempts == 0

    def test_impossible_refused(self, board):
        """Test that impossible puzzles are refused before solving"""
        with pytest.raises(PuzzleInfeasible, match="computationally infeasible"):
            asyncio.run(board.solve_puzzle(22))
        assert board.history == []

    def test_already_solving(self, board):
        """Test that only one solve per puzzle may be pending"""
        board.entry(9).status = "solving"
        with pytest.raises(SolveInProgress):
            asyncio.run(board.solve_puzzle(9))

    def test_concurrent_solves_of_one_puzzle(self):
        """Test that a second concurrent request for the same puzzle is refused"""
        slow = PuzzleBoard(settings=SolverSettings(min_delay=0.01, max_delay=0.01), rng=random.Random(0))

        async def both():
            return await asyncio.gather(
                slow.solve_puzzle(9), slow.solve_puzzle(9), return_exceptions=True
            )

        first, second = asyncio.run(both())
        assert first.solution == "THIS IS A SECRET MESSAGE"
        assert isinstance(second, SolveInProgress)

    def test_error_restores_status(self, board, monkeypatch):
        """Test that an error during the solve puts the puzzle back to unsolved"""

        def broken_solve(*args, **kwargs):
            raise RuntimeError("boom")

        monkeypatch.setattr(board_module, "solve", broken_solve)
        with pytest.raises(RuntimeError, match="boom"):
            asyncio.run(board.solve_puzzle(9))
        assert board.entry(9).status == "unsolved"

    @pytest.mark.parametrize("puzzle_id", [16, 17])
    def test_simulated_key_independent_of_delay_seed(self, puzzle_id):
        """Test that boards with different delay seeds find the same simulated key"""
        first = PuzzleBoard(settings=NO_DELAY, rng=random.Random(1))
        second = PuzzleBoard(settings=NO_DELAY, rng=random.Random(2))
        assert asyncio.run(first.solve_puzzle(puzzle_id)).solution == asyncio.run(second.solve_puzzle(puzzle_id)).solution
