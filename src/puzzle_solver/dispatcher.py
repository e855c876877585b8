import random
from typing import Optional

import structlog

from puzzle_solver.config import SolverSettings
from puzzle_solver.errors import UnrecognizedCategory
from puzzle_solver.models import Category, FailureReason, PuzzleDescriptor, SolveOutcome
from puzzle_solver.strategies import decode_cascade, dictionary_search, infer_sequence, keyspace_search
from puzzle_solver.strategies.keyspace import KeyPredicate

log = structlog.get_logger()

UNRECOGNIZED_NAME = "unrecognized category"

DEFAULT_SETTINGS = SolverSettings()

STRATEGY_DESCRIPTIONS = {
    Category.BITCOIN_ADDRESS: "Brute force key generation with elliptic curve cryptography",
    Category.HASH_PREIMAGE: "Dictionary attacks, rainbow tables, and pattern matching",
    Category.CIPHER_DECODE: "Multi-method decoding: Base64, Hex, ROT13, XOR analysis",
    Category.PATTERN_ANALYSIS: "Machine learning pattern recognition and sequence prediction",
    Category.PRIVATE_KEY_RECOVERY: "Partial information exploitation with optimized search",
}

SOLVE_TIME_ESTIMATES = {
    "easy": "Less than 1 second",
    "medium": "1-10 seconds",
    "hard": "10 seconds - 1 minute",
}


def descriptor_rng(descriptor: PuzzleDescriptor) -> random.Random:
    """Random source seeded from the descriptor, so the same puzzle simulates the same way."""
    return random.Random(f"{str(descriptor.category)}:{descriptor.challenge}:{descriptor.bit_width}")


def _run_strategy(
    category: Category,
    descriptor: PuzzleDescriptor,
    settings: SolverSettings,
    rng: Optional[random.Random],
    key_predicate: Optional[KeyPredicate],
) -> SolveOutcome:
    match category:
        case Category.CIPHER_DECODE:
            return decode_cascade(descriptor.challenge, xor_key=settings.xor_key)
        case Category.PATTERN_ANALYSIS:
            return infer_sequence(descriptor.challenge, strict=settings.strict_sequence_parsing)
        case Category.HASH_PREIMAGE:
            return dictionary_search(descriptor.known_solution, settings.dictionary)
        case Category.BITCOIN_ADDRESS | Category.PRIVATE_KEY_RECOVERY:
            return keyspace_search(
                descriptor.bit_width,
                known_solution=descriptor.known_solution,
                key_predicate=key_predicate,
                rng=rng,
                feasibility_threshold=settings.feasibility_threshold,
                success_threshold=settings.success_threshold,
            )
        case _:
            raise AssertionError(f"Unhandled category: {category}")


def solve(
    descriptor: PuzzleDescriptor,
    *,
    settings: Optional[SolverSettings] = None,
    rng: Optional[random.Random] = None,
    key_predicate: Optional[KeyPredicate] = None,
) -> SolveOutcome:
    """Route a puzzle to the strategy for its category and return the outcome.

    Expected failures come back as unsuccessful outcomes. Only a keyspace too
    large to describe (KeyspaceOverflow) is raised. Without an injected `rng`
    the same descriptor always produces the same outcome.
    """
    settings = settings or DEFAULT_SETTINGS
    if rng is None:
        rng = descriptor_rng(descriptor)
    try:
        category = Category.parse(descriptor.category)
    except UnrecognizedCategory as e:
        log.warning("unrecognized category", error=str(e))
        return SolveOutcome.failure(FailureReason.UNRECOGNIZED_CATEGORY, 0, UNRECOGNIZED_NAME)

    outcome = _run_strategy(category, descriptor, settings, rng, key_predicate)
    if outcome.succeeded:
        log.info(
            "puzzle solved",
            category=category.value,
            method=outcome.strategy_name,
            attempts=outcome.attempts_made,
        )
    else:
        log.info(
            "puzzle not solved",
            category=category.value,
            method=outcome.strategy_name,
            attempts=outcome.attempts_made,
            reason=str(outcome.failure_reason),
        )
    return outcome


def strategy_description(category: Category | str) -> str:
    """Describe how puzzles of the given category are approached."""
    known = Category.coerce(category)
    if known is None:
        return "Generic AI-based analysis"
    return STRATEGY_DESCRIPTIONS[known]


def estimate_solve_time(difficulty: str) -> str:
    return SOLVE_TIME_ESTIMATES.get(difficulty, "Computationally infeasible")
