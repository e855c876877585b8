import time
from typing import Callable, Optional, Tuple, Union

import structlog

from puzzle_solver import codec
from puzzle_solver.config import DEFAULT_XOR_KEY
from puzzle_solver.errors import InvalidConfiguration, MalformedInput
from puzzle_solver.models import CodecAttempt, FailureReason, SolveOutcome

log = structlog.get_logger()

EXHAUSTED_NAME = "All decoding methods exhausted"

Decoder = Callable[[str, str], Union[bytes, str]]

# Trial order is a priority: the first printable output wins, so reordering
# this tuple changes which method solves an ambiguous challenge.
CASCADE: Tuple[Tuple[str, Decoder], ...] = (
    ("Base64", lambda text, key: codec.base64_decode(text)),
    ("Hex to ASCII", lambda text, key: codec.hex_decode(text)),
    ("ROT13", lambda text, key: codec.rot13(text)),
    ("Binary to ASCII", lambda text, key: codec.binary_decode(text)),
    ("XOR with {key}", lambda text, key: codec.xor_decode(text, key)),
)


def _try_codec(label: str, decoder: Decoder, challenge: str, xor_key: str) -> Optional[CodecAttempt]:
    """Run one codec. Returns None when its input was malformed."""
    try:
        output = decoder(challenge, xor_key)
    except MalformedInput as e:
        log.debug("codec rejected", codec=label, reason=str(e))
        return None

    if isinstance(output, (bytes, bytearray)):
        output = codec.as_text(output)
    return CodecAttempt(codec_name=label, output=output)


def decode_cascade(challenge: str, *, xor_key: str = DEFAULT_XOR_KEY) -> SolveOutcome:
    """Try each codec in `CASCADE` order and accept the first non-empty printable output."""
    started = time.perf_counter()
    attempts = 0

    for template, decoder in CASCADE:
        attempts += 1
        label = template.format(key=xor_key)
        try:
            attempt = _try_codec(label, decoder, challenge, xor_key)
        except InvalidConfiguration as e:
            log.warning("cascade misconfigured", codec=label, error=str(e))
            return SolveOutcome.failure(FailureReason.INVALID_CONFIGURATION, attempts, f"{label}: {e}", started)

        if attempt is None:
            continue
        if attempt.output and codec.is_printable(attempt.output):
            log.debug("codec accepted", codec=label, attempts=attempts)
            return SolveOutcome.success(attempt.output, attempts, attempt.codec_name, started)
        log.debug("codec output not printable", codec=label)

    return SolveOutcome.failure(FailureReason.EXHAUSTED, attempts, EXHAUSTED_NAME, started)
