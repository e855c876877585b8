from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from puzzle_solver.errors import InvalidConfiguration, KeyspaceOverflow, UnrecognizedCategory

MAX_BIT_WIDTH = 256


class Category(str, Enum):
    BITCOIN_ADDRESS = "bitcoin-address"
    HASH_PREIMAGE = "hash-preimage"
    CIPHER_DECODE = "cipher-decode"
    PATTERN_ANALYSIS = "pattern-analysis"
    PRIVATE_KEY_RECOVERY = "private-key-recovery"

    def __str__(self):
        return self.value

    @classmethod
    def parse(cls, value: "Category | str") -> "Category":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnrecognizedCategory(f"Unrecognized puzzle category: {value!r}") from None

    @classmethod
    def coerce(cls, value: "Category | str") -> Optional["Category"]:
        """Return the member for a known tag, None for anything else."""
        try:
            return cls.parse(value)
        except UnrecognizedCategory:
            return None


class FailureReason(str, Enum):
    MALFORMED_INPUT = "malformed-input"
    INVALID_CONFIGURATION = "invalid-configuration"
    INFEASIBLE = "infeasible"
    UNRECOGNIZED_CATEGORY = "unrecognized-category"
    EXHAUSTED = "exhausted"
    NO_PATTERN = "no-pattern"

    def __str__(self):
        return self.value


@dataclass(frozen=True, slots=True)
class PuzzleDescriptor:
    """What the caller wants solved. Strategies only ever read it."""

    category: Category | str
    challenge: str
    bit_width: int | None = None
    known_solution: str | None = None


@dataclass(frozen=True, slots=True)
class SolveOutcome:
    """Uniform result of every strategy.

    `solution` is set if and only if `succeeded` is true, and `failure_reason`
    is set if and only if it is not.
    """

    succeeded: bool
    solution: str | None
    attempts_made: int
    strategy_name: str
    elapsed_millis: float = 0.0
    failure_reason: FailureReason | None = None

    def __post_init__(self):
        if self.succeeded != (self.solution is not None):
            raise ValueError("solution must be present exactly when the solve succeeded")
        if self.succeeded == (self.failure_reason is not None):
            raise ValueError("failure_reason must be present exactly when the solve failed")
        if self.attempts_made < 0:
            raise ValueError(f"attempts_made must be non-negative, got {self.attempts_made}")
        if self.elapsed_millis < 0:
            raise ValueError(f"elapsed_millis must be non-negative, got {self.elapsed_millis}")

    @classmethod
    def success(cls, solution: str, attempts: int, strategy_name: str, started: float | None = None) -> "SolveOutcome":
        return cls(
            succeeded=True,
            solution=solution,
            attempts_made=attempts,
            strategy_name=strategy_name,
            elapsed_millis=elapsed_ms(started),
        )

    @classmethod
    def failure(cls, reason: FailureReason, attempts: int, strategy_name: str, started: float | None = None) -> "SolveOutcome":
        return cls(
            succeeded=False,
            solution=None,
            attempts_made=attempts,
            strategy_name=strategy_name,
            elapsed_millis=elapsed_ms(started),
            failure_reason=reason,
        )

    def same_result(self, other: "SolveOutcome") -> bool:
        """Compare everything but the timing."""
        return (
            self.succeeded == other.succeeded
            and self.solution == other.solution
            and self.strategy_name == other.strategy_name
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "succeeded": self.succeeded,
            "solution": self.solution,
            "attempts_made": self.attempts_made,
            "strategy_name": self.strategy_name,
            "elapsed_millis": self.elapsed_millis,
            "failure_reason": None if self.failure_reason is None else self.failure_reason.value,
        }


@dataclass(frozen=True, slots=True)
class CodecAttempt:
    codec_name: str
    output: str


@dataclass(frozen=True, slots=True)
class Keyspace:
    bit_width: int

    def __post_init__(self):
        if self.bit_width < 0:
            raise InvalidConfiguration(f"Bit width must be non-negative, got {self.bit_width}")
        if self.bit_width > MAX_BIT_WIDTH:
            raise KeyspaceOverflow(f"Bit width {self.bit_width} exceeds the maximum of {MAX_BIT_WIDTH}")

    @property
    def size(self) -> int:
        return 2 ** self.bit_width

    def describe(self) -> str:
        return f"2^{self.bit_width} = {self.size:,}"


def elapsed_ms(started: float | None) -> float:
    """Milliseconds since a `time.perf_counter()` reading, 0.0 if none was taken."""
    if started is None:
        return 0.0
    return max(0.0, (time.perf_counter() - started) * 1000.0)
