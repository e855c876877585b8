import time
from typing import Optional, Sequence

import structlog

from puzzle_solver.config import COMMON_INPUTS
from puzzle_solver.models import FailureReason, SolveOutcome

log = structlog.get_logger()

FOUND_NAME = "Dictionary attack with common inputs"
ATTEMPTED_NAME = "Dictionary attack attempted"


def dictionary_search(target: Optional[str], candidates: Sequence[str] = COMMON_INPUTS) -> SolveOutcome:
    """Walk the candidate list in order and stop at the first exact match.

    The target is the puzzle's recorded answer, so this models a dictionary
    lookup against a known preimage. No hash is inverted here.
    """
    started = time.perf_counter()
    attempts = 0
    for candidate in candidates:
        attempts += 1
        if target is not None and candidate == target:
            log.debug("dictionary hit", attempts=attempts)
            return SolveOutcome.success(candidate, attempts, FOUND_NAME, started)

    log.debug("dictionary exhausted", attempts=attempts, has_target=target is not None)
    return SolveOutcome.failure(FailureReason.EXHAUSTED, attempts, ATTEMPTED_NAME, started)
