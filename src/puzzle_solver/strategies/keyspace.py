import random
import time
from typing import Callable, Optional

import structlog

from puzzle_solver.config import DEFAULT_FEASIBILITY_THRESHOLD, DEFAULT_SUCCESS_THRESHOLD
from puzzle_solver.errors import InvalidConfiguration
from puzzle_solver.models import FailureReason, Keyspace, SolveOutcome

log = structlog.get_logger()

KeyPredicate = Callable[[int], bool]

# Simulated hits land somewhere in the first 70% of the keyspace.
SIMULATED_HIT_FRACTION = 0.7


def search_name(keyspace: Keyspace) -> str:
    return f"Brute force key search ({keyspace.describe()} possible keys)"


def infeasible_name(keyspace: Keyspace) -> str:
    return f"Brute force ({keyspace.describe()} keys) - computationally infeasible"


def parse_key(text: Optional[str]) -> Optional[int]:
    """Parse a decimal or 0x-prefixed hex key. None when there is nothing usable."""
    if text is None:
        return None
    text = text.strip()
    try:
        if text.lower().startswith("0x"):
            return int(text, 16)
        return int(text, 10)
    except ValueError:
        return None


def _verifier(known_solution: Optional[str], key_predicate: Optional[KeyPredicate]) -> Optional[KeyPredicate]:
    if key_predicate is not None:
        return key_predicate
    known_key = parse_key(known_solution)
    if known_key is None:
        return None
    return lambda key: key == known_key


def keyspace_search(
    bit_width: Optional[int],
    *,
    known_solution: Optional[str] = None,
    key_predicate: Optional[KeyPredicate] = None,
    rng: Optional[random.Random] = None,
    feasibility_threshold: int = DEFAULT_FEASIBILITY_THRESHOLD,
    success_threshold: int = DEFAULT_SUCCESS_THRESHOLD,
) -> SolveOutcome:
    """Search (or simulate searching) the 2^bit_width keyspace.

    Above `feasibility_threshold` nothing is attempted and the whole keyspace
    is reported as the declared cost. Between the two thresholds the search
    is reported as exhausted. At or below `success_threshold` a verifier, when
    one is available, drives a real scan of keys 0..size-1; otherwise the hit
    position is drawn from `rng`, which defaults to one seeded by the bit width
    so repeated calls agree.
    """
    started = time.perf_counter()

    if bit_width is None:
        return SolveOutcome.failure(
            FailureReason.INVALID_CONFIGURATION, 0, "Brute force key search: no bit width declared", started
        )
    try:
        keyspace = Keyspace(bit_width)
    except InvalidConfiguration as e:
        return SolveOutcome.failure(FailureReason.INVALID_CONFIGURATION, 0, f"Brute force key search: {e}", started)

    size = keyspace.size

    if bit_width > feasibility_threshold:
        log.debug("keyspace infeasible", bit_width=bit_width, threshold=feasibility_threshold)
        return SolveOutcome.failure(FailureReason.INFEASIBLE, size, infeasible_name(keyspace), started)

    if bit_width > success_threshold:
        log.debug("keyspace too slow", bit_width=bit_width, threshold=success_threshold)
        return SolveOutcome.failure(FailureReason.EXHAUSTED, size, search_name(keyspace), started)

    matches = _verifier(known_solution, key_predicate)
    if matches is not None:
        for key in range(size):
            if matches(key):
                log.debug("key found", bit_width=bit_width, key=key)
                return SolveOutcome.success(str(key), key + 1, search_name(keyspace), started)
        return SolveOutcome.failure(FailureReason.EXHAUSTED, size, search_name(keyspace), started)

    if rng is None:
        rng = random.Random(bit_width)
    attempts = min(size, int(rng.random() * size * SIMULATED_HIT_FRACTION) + 1)
    solution = known_solution if known_solution is not None else str(attempts - 1)
    log.debug("key search simulated", bit_width=bit_width, attempts=attempts)
    return SolveOutcome.success(solution, attempts, search_name(keyspace), started)
