import re
import time
from typing import List, Tuple

import structlog

from puzzle_solver import codec
from puzzle_solver.errors import MalformedInput
from puzzle_solver.models import FailureReason, SolveOutcome

log = structlog.get_logger()

FIBONACCI_NAME = "Fibonacci sequence detection"
PRIME_NAME = "Prime number sequence detection"
BINARY_NAME = "Binary to ASCII conversion"
NO_PATTERN_NAME = "No recognized pattern"

FIBONACCI_SIGNATURE = "1, 1, 2, 3, 5, 8"
PRIME_SIGNATURE = "2, 3, 5, 7, 11"
PLACEHOLDER = "?"

# Fewest terms from which a recurrence is trusted without a signature.
MIN_TERMS = 4

# Largest term prime classification will look at. Prime gaps below this are
# small, so extending a run takes a bounded number of primality tests.
MAX_PRIME_TERM = 2 ** 64

# Miller-Rabin with these bases is exact for every n below 3.1e23.
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

_INTEGER = re.compile(r"[+-]?\d+")
_BINARY_TEXT = re.compile(r"[01\s]+")


def parse_terms(text: str, *, strict: bool = False) -> List[int]:
    """Parse comma-separated integers.

    Lenient parsing drops tokens that are not integers. Strict parsing raises
    MalformedInput for them instead; the `?` placeholder is allowed either way.
    """
    terms = []
    for token in (t.strip() for t in text.split(",")):
        if not token or token == PLACEHOLDER:
            continue
        if _INTEGER.fullmatch(token):
            try:
                terms.append(int(token))
                continue
            except ValueError:
                # More digits than int() will convert.
                pass
        if strict:
            raise MalformedInput(f"Sequence token {token!r} is not an integer")
    return terms


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin, exact for every term up to MAX_PRIME_TERM."""
    if n < 2:
        return False
    for p in _WITNESSES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than n."""
    candidate = max(n + 1, 2)
    while not is_prime(candidate):
        candidate += 1
    return candidate


def _is_fibonacci_like(text: str, terms: List[int]) -> bool:
    if FIBONACCI_SIGNATURE in text and len(terms) >= 2:
        return True
    if len(terms) < MIN_TERMS:
        return False
    return all(terms[i] == terms[i - 1] + terms[i - 2] for i in range(2, len(terms)))


def _is_prime_run(text: str, terms: List[int]) -> bool:
    if not terms or max(terms) > MAX_PRIME_TERM:
        return False
    if PRIME_SIGNATURE in text:
        return True
    if len(terms) < MIN_TERMS or not is_prime(terms[0]):
        return False
    return all(terms[i] == next_prime(terms[i - 1]) for i in range(1, len(terms)))


def _classify(text: str, terms: List[int]) -> Tuple[str, str] | None:
    """Return (strategy name, next term) for a numeric pattern, or None."""
    if _is_fibonacci_like(text, terms):
        return FIBONACCI_NAME, str(terms[-2] + terms[-1])
    if _is_prime_run(text, terms):
        return PRIME_NAME, str(next_prime(terms[-1]))
    return None


def infer_sequence(challenge: str, *, strict: bool = False) -> SolveOutcome:
    """Classify a numeric or binary sequence and produce its next term or decoding."""
    started = time.perf_counter()
    binary_text = bool(challenge.strip()) and _BINARY_TEXT.fullmatch(challenge) is not None

    try:
        terms = parse_terms(challenge, strict=strict and not binary_text)
    except MalformedInput as e:
        log.debug("sequence rejected", reason=str(e))
        return SolveOutcome.failure(FailureReason.MALFORMED_INPUT, 0, f"Sequence parse failed: {e}", started)

    classified = _classify(challenge, terms)
    if classified is not None:
        name, next_term = classified
        log.debug("sequence classified", method=name, terms=len(terms), next_term=next_term)
        return SolveOutcome.success(next_term, 1, name, started)

    if binary_text:
        try:
            decoded = codec.as_text(codec.binary_decode(challenge))
        except MalformedInput as e:
            log.debug("binary pattern rejected", reason=str(e))
            return SolveOutcome.failure(FailureReason.MALFORMED_INPUT, 1, BINARY_NAME, started)
        if decoded:
            return SolveOutcome.success(decoded, 1, BINARY_NAME, started)

    return SolveOutcome.failure(FailureReason.NO_PATTERN, 0, NO_PATTERN_NAME, started)
