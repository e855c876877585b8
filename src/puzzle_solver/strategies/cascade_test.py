import pytest

from puzzle_solver import codec
from puzzle_solver.models import FailureReason
from puzzle_solver.strategies.cascade import CASCADE, EXHAUSTED_NAME, decode_cascade


class TestDecodeCascade:
    """Test suite for the decode cascade"""

    def test_order(self):
        """Test the fixed priority order of codecs"""
        assert [label for label, _ in CASCADE] == [
            "Base64",
            "Hex to ASCII",
            "ROT13",
            "Binary to ASCII",
            "XOR with {key}",
        ]

    def test_base64_wins_first(self):
        """Test that base64 wins even though ROT13 would also be printable"""
        outcome = decode_cascade("UHJpdmF0ZUtleUZyYWdtZW50")
        assert outcome.succeeded
        assert outcome.solution == "PrivateKeyFragment"
        assert outcome.strategy_name == "Base64"
        assert outcome.attempts_made == 1

    def test_hex(self):
        """Test that hex wins when base64 is malformed"""
        outcome = decode_cascade("48656c6c6f20426974636f696e")
        assert outcome.solution == "Hello Bitcoin"
        assert outcome.strategy_name == "Hex to ASCII"
        assert outcome.attempts_made == 2

    def test_rot13(self):
        """Test that ROT13 wins for spaced letters"""
        outcome = decode_cascade("GUVF VF N FRPERG ZRFFNTR")
        assert outcome.solution == "THIS IS A SECRET MESSAGE"
        assert outcome.strategy_name == "ROT13"
        assert outcome.attempts_made == 3

    def test_rot13_shadows_xor_for_printable_hex(self):
        """Test that printable hex whose bytes are not printable falls through to ROT13"""
        outcome = decode_cascade("0a1e1b1f4b0a1e1b1f")
        assert outcome.strategy_name == "ROT13"
        assert outcome.solution == "0n1r1o1s4o0n1r1o1s"

    def test_binary(self):
        """Test that binary wins once the earlier codecs are rejected"""
        outcome = decode_cascade("01000010\n01010100\t01000011")
        assert outcome.succeeded
        assert outcome.solution == "BTC"
        assert outcome.strategy_name == "Binary to ASCII"
        assert outcome.attempts_made == 4

    def test_xor(self):
        """Test that XOR is the last resort"""
        outcome = decode_cascade("090c0d08\n0a1005")
        assert outcome.succeeded
        assert outcome.solution == "BITCOIN"
        assert outcome.strategy_name == "XOR with KEY"
        assert outcome.attempts_made == 5

    def test_xor_custom_key(self):
        """Test that the configured key is used and named"""
        challenge = codec.xor_encode("hidden", "pw")
        outcome = decode_cascade(challenge[:4] + "\n" + challenge[4:], xor_key="pw")
        assert outcome.solution == "hidden"
        assert outcome.strategy_name == "XOR with pw"

    def test_exhausted(self):
        """Test that nothing printable means every codec was tried"""
        outcome = decode_cascade("\x00\x01")
        assert not outcome.succeeded
        assert outcome.solution is None
        assert outcome.attempts_made == len(CASCADE)
        assert outcome.strategy_name == EXHAUSTED_NAME
        assert outcome.failure_reason is FailureReason.EXHAUSTED

    def test_empty_challenge(self):
        """Test that an empty challenge is never accepted"""
        outcome = decode_cascade("")
        assert not outcome.succeeded
        assert outcome.attempts_made == 5

    def test_empty_key_is_reported_not_raised(self):
        """Test that an empty XOR key fails the attempt as a configuration error"""
        outcome = decode_cascade("\x00", xor_key="")
        assert not outcome.succeeded
        assert outcome.failure_reason is FailureReason.INVALID_CONFIGURATION
        assert outcome.attempts_made == 5

    @pytest.mark.parametrize("challenge", [
        "UHJpdmF0ZUtleUZyYWdtZW50",
        "48656c6c6f20426974636f696e",
        "GUVF VF N FRPERG ZRFFNTR",
        "\x00",
    ])
    def test_deterministic(self, challenge):
        """Test that repeated runs agree"""
        assert decode_cascade(challenge).same_result(decode_cascade(challenge))
