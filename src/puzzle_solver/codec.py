import base64
import binascii
import re
import string
from typing import Union

from puzzle_solver.errors import InvalidConfiguration, MalformedInput

BytesLike = Union[str, bytes, bytearray, memoryview]

PRINTABLE_MIN = 0x20
PRINTABLE_MAX = 0x7E

_WHITESPACE = re.compile(r"\s+")
_OCTET = re.compile(r"[01]{8}")


def _as_bytes(data: BytesLike, *, encoding: str = "utf-8") -> bytes:
    """Normalize values to type bytes."""
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode(encoding)
    raise TypeError(f"Expected str or bytes-like, got {type(data).__name__}")


def as_text(data: bytes) -> str:
    """Map each byte to the character with the same code point."""
    return bytes(data).decode("latin-1")


def is_printable(value: Union[str, bytes]) -> bool:
    """True iff `value` is non-empty and every unit is printable ASCII (0x20-0x7E)."""
    if not value:
        return False
    if isinstance(value, str):
        return all(PRINTABLE_MIN <= ord(ch) <= PRINTABLE_MAX for ch in value)
    return all(PRINTABLE_MIN <= b <= PRINTABLE_MAX for b in value)


# ---- hex ----

def hex_encode(data: BytesLike) -> str:
    return _as_bytes(data).hex()


def hex_decode(text: str) -> bytes:
    """Strip whitespace, then decode pairs of hex digits."""
    clean = _WHITESPACE.sub("", text)
    if len(clean) % 2:
        raise MalformedInput(f"Hex input has odd length {len(clean)}")
    if not all(ch in string.hexdigits for ch in clean):
        raise MalformedInput("Hex input contains non-hex characters")
    return bytes.fromhex(clean)


# ---- base64 ----

def base64_encode(data: BytesLike) -> str:
    return base64.b64encode(_as_bytes(data)).decode("ascii")


def base64_decode(text: str) -> bytes:
    """Strict standard-alphabet decode. Padding must be present and correct."""
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedInput(f"Invalid base64: {e}") from e


# ---- rot13 ----

_ROT13 = str.maketrans(
    string.ascii_uppercase + string.ascii_lowercase,
    string.ascii_uppercase[13:] + string.ascii_uppercase[:13]
    + string.ascii_lowercase[13:] + string.ascii_lowercase[:13],
)


def rot13(text: str) -> str:
    """Rotate ASCII letters by 13 within their case. Everything else passes through."""
    return text.translate(_ROT13)


# ---- binary ----

def binary_encode(data: BytesLike) -> str:
    return " ".join(f"{b:08b}" for b in _as_bytes(data))


def binary_decode(text: str) -> bytes:
    """Decode whitespace separated groups of exactly eight binary digits."""
    out = bytearray()
    for group in text.split():
        if not _OCTET.fullmatch(group):
            raise MalformedInput(f"Binary group {group!r} is not eight binary digits")
        out.append(int(group, 2))
    return bytes(out)


# ---- xor ----

def _key_bytes(key: str) -> bytes:
    if not key:
        raise InvalidConfiguration("XOR key must not be empty")
    try:
        return key.encode("latin-1")
    except UnicodeEncodeError as e:
        raise InvalidConfiguration(f"XOR key must be single-byte text: {e}") from e


def xor_bytes(data: bytes, key: bytes) -> bytes:
    return bytes(b ^ key[i % len(key)] for i, b in enumerate(data))


def xor_encode(data: BytesLike, key: str) -> str:
    """XOR with the repeating key and return the result as hex."""
    return xor_bytes(_as_bytes(data), _key_bytes(key)).hex()


def xor_decode(text: str, key: str) -> bytes:
    """Hex decode `text`, then XOR each byte with the cyclically repeating key."""
    key_bytes = _key_bytes(key)
    return xor_bytes(hex_decode(text), key_bytes)
