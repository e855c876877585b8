import dataclasses

import pytest

from puzzle_solver.errors import InvalidConfiguration, KeyspaceOverflow, UnrecognizedCategory
from puzzle_solver.models import (
    MAX_BIT_WIDTH,
    Category,
    FailureReason,
    Keyspace,
    PuzzleDescriptor,
    SolveOutcome,
    elapsed_ms,
)


class TestCategory:
    """Test suite for Category"""

    def test_five_tags(self):
        """Test the closed set of category tags"""
        assert {c.value for c in Category} == {
            "bitcoin-address",
            "hash-preimage",
            "cipher-decode",
            "pattern-analysis",
            "private-key-recovery",
        }

    def test_parse_string(self):
        """Test parsing a raw tag"""
        assert Category.parse("cipher-decode") is Category.CIPHER_DECODE

    def test_parse_member(self):
        """Test that members parse to themselves"""
        assert Category.parse(Category.HASH_PREIMAGE) is Category.HASH_PREIMAGE

    def test_parse_unknown(self):
        """Test that an unknown tag raises UnrecognizedCategory"""
        with pytest.raises(UnrecognizedCategory, match="quantum-magic"):
            Category.parse("quantum-magic")

    def test_coerce_unknown(self):
        """Test that coerce returns None for an unknown tag"""
        assert Category.coerce("quantum-magic") is None

    def test_str(self):
        """Test the string form is the tag"""
        assert str(Category.PATTERN_ANALYSIS) == "pattern-analysis"


class TestPuzzleDescriptor:
    """Test suite for PuzzleDescriptor"""

    def test_defaults(self):
        """Test optional fields default to None"""
        descriptor = PuzzleDescriptor(Category.CIPHER_DECODE, "abc")
        assert descriptor.bit_width is None
        assert descriptor.known_solution is None

    def test_immutable(self):
        """Test that descriptors cannot be mutated"""
        descriptor = PuzzleDescriptor(Category.CIPHER_DECODE, "abc")
        with pytest.raises(dataclasses.FrozenInstanceError):
            descriptor.challenge = "xyz"


class TestSolveOutcome:
    """Test suite for SolveOutcome"""

    def test_success(self):
        """Test building a successful outcome"""
        outcome = SolveOutcome.success("foo", 2, "Dictionary")
        assert outcome.succeeded
        assert outcome.solution == "foo"
        assert outcome.failure_reason is None
        assert outcome.elapsed_millis == 0.0

    def test_failure(self):
        """Test building a failed outcome"""
        outcome = SolveOutcome.failure(FailureReason.EXHAUSTED, 3, "Dictionary")
        assert not outcome.succeeded
        assert outcome.solution is None
        assert outcome.failure_reason is FailureReason.EXHAUSTED

    def test_success_with_empty_solution(self):
        """Test that an empty string is still a present solution"""
        outcome = SolveOutcome.success("", 1, "Dictionary")
        assert outcome.succeeded
        assert outcome.solution == ""

    def test_solution_without_success(self):
        """Test that a solution on a failed outcome is rejected"""
        with pytest.raises(ValueError, match="solution must be present"):
            SolveOutcome(False, "foo", 1, "x", failure_reason=FailureReason.EXHAUSTED)

    def test_success_without_solution(self):
        """Test that a successful outcome needs a solution"""
        with pytest.raises(ValueError, match="solution must be present"):
            SolveOutcome(True, None, 1, "x")

    def test_failure_needs_reason(self):
        """Test that a failed outcome needs a failure reason"""
        with pytest.raises(ValueError, match="failure_reason"):
            SolveOutcome(False, None, 1, "x")

    def test_negative_attempts(self):
        """Test that attempts cannot be negative"""
        with pytest.raises(ValueError, match="attempts_made"):
            SolveOutcome.success("a", -1, "x")

    def test_same_result_ignores_timing(self):
        """Test that same_result compares everything but timing"""
        first = SolveOutcome(True, "a", 1, "x", elapsed_millis=1.0)
        second = SolveOutcome(True, "a", 1, "x", elapsed_millis=9.0)
        assert first.same_result(second)
        assert not first.same_result(SolveOutcome(True, "b", 1, "x"))

    def test_to_dict(self):
        """Test the plain dict form"""
        outcome = SolveOutcome.failure(FailureReason.INFEASIBLE, 4, "Brute force")
        assert outcome.to_dict() == {
            "succeeded": False,
            "solution": None,
            "attempts_made": 4,
            "strategy_name": "Brute force",
            "elapsed_millis": 0.0,
            "failure_reason": "infeasible",
        }


class TestKeyspace:
    """Test suite for Keyspace"""

    def test_size(self):
        """Test the keyspace size is 2^bit_width"""
        assert Keyspace(0).size == 1
        assert Keyspace(20).size == 1_048_576

    def test_size_is_exact_for_wide_keys(self):
        """Test sizes well beyond 64 bits stay exact"""
        assert Keyspace(70).size == 1_180_591_620_717_411_303_424
        assert Keyspace(MAX_BIT_WIDTH).size == 1 << MAX_BIT_WIDTH

    def test_describe(self):
        """Test the display form"""
        assert Keyspace(10).describe() == "2^10 = 1,024"

    def test_negative(self):
        """Test that negative widths are a configuration error"""
        with pytest.raises(InvalidConfiguration):
            Keyspace(-1)

    def test_overflow(self):
        """Test that absurd widths abort"""
        with pytest.raises(KeyspaceOverflow):
            Keyspace(MAX_BIT_WIDTH + 1)


def test_elapsed_ms_without_start():
    """Test that no start reading means zero elapsed time"""
    assert elapsed_ms(None) == 0.0
