"""Derivation of the master key and of the per-round keys."""

import hashlib

KEY_SIZE = 256
ROUNDS = 16

_KEY_BYTES = KEY_SIZE // 8


def _as_bytes(value: bytes | str) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else bytes(value)


def generate_master_key(password: bytes | str, salt: bytes | str) -> bytes:
    """Return the 256-bit master key: SHA-256 of the password followed by the salt."""
    digest = hashlib.sha256(_as_bytes(password) + _as_bytes(salt)).digest()
    return digest[:_KEY_BYTES]


def generate_round_keys(master_key: bytes) -> list[int]:
    """Return ``ROUNDS`` 64-bit round keys read big-endian, cycling through the master key."""
    master_key = bytes(master_key)
    if len(master_key) != _KEY_BYTES:
        raise ValueError(f"master key must be {_KEY_BYTES} bytes, got {len(master_key)}")
    doubled = master_key * 2
    return [
        int.from_bytes(doubled[offset % _KEY_BYTES : offset % _KEY_BYTES + 8], "big")
        for offset in range(0, ROUNDS * 8, 8)
    ]