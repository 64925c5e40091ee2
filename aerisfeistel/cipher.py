"""A 16-round Feistel block cipher over 64-bit blocks."""

import struct

from aerisfeistel.key_schedule import ROUNDS, generate_round_keys

BLOCK_SIZE = 64
BLOCK_BYTES = BLOCK_SIZE // 8
PAD_BYTE = b"X"

_MASK32 = 0xFFFFFFFF
_ROTATION = 3
_ROUND_CONSTANT = 0x12345678


def pad(data: bytes) -> bytes:
    """Fill ``data`` with ``X`` bytes up to a whole number of blocks."""
    data = bytes(data)
    shortfall = -len(data) % BLOCK_BYTES
    return data + PAD_BYTE * shortfall


def unpad(data: bytes, length: int) -> bytes:
    """Return the first ``length`` bytes of ``data``."""
    if not 0 <= length <= len(data):
        raise ValueError(f"length {length} out of range for {len(data)} bytes")
    return bytes(data[:length])


def bytes_to_blocks(data: bytes) -> list[int]:
    """Read ``data`` as little-endian unsigned 64-bit words."""
    if len(data) % BLOCK_BYTES:
        raise ValueError(f"data length {len(data)} is not a multiple of {BLOCK_BYTES}")
    return [word for (word,) in struct.iter_unpack("<Q", data)]


def blocks_to_bytes(blocks: list[int]) -> bytes:
    """Write 64-bit words as little-endian bytes."""
    try:
        return struct.pack(f"<{len(blocks)}Q", *blocks)
    except struct.error as exc:
        raise ValueError(f"blocks must be unsigned 64-bit integers: {exc}") from exc


def f(half: int, round_key: int) -> int:
    """Round function: mix a 32-bit half with the low 32 bits of a round key."""
    value = (half ^ round_key) & _MASK32
    value = ((value << _ROTATION) | (value >> (32 - _ROTATION))) & _MASK32
    return (~value + _ROUND_CONSTANT) & _MASK32


def feistel_net_encrypt(blocks: list[int], master_key: bytes) -> list[int]:
    """Encrypt each 64-bit block with the Feistel network."""
    round_keys = generate_round_keys(master_key)
    result = []
    for block in blocks:
        left, right = (block >> 32) & _MASK32, block & _MASK32
        for key in round_keys:
            left, right = right, left ^ f(right, key)
        result.append((left << 32) | right)
    return result


def feistel_net_decrypt(blocks: list[int], master_key: bytes) -> list[int]:
    """Decrypt each 64-bit block with the Feistel network, keys in reverse."""
    round_keys = generate_round_keys(master_key)
    result = []
    for block in blocks:
        left, right = (block >> 32) & _MASK32, block & _MASK32
        for key in reversed(round_keys[:ROUNDS]):
            left, right = right ^ f(left, key), left
        result.append((left << 32) | right)
    return result


def encrypt(plaintext: bytes, master_key: bytes) -> bytes:
    """Encrypt block-aligned ``plaintext``; use :func:`pad` first for other lengths."""
    return blocks_to_bytes(feistel_net_encrypt(bytes_to_blocks(plaintext), master_key))


def decrypt(ciphertext: bytes, master_key: bytes) -> bytes:
    """Decrypt block-aligned ``ciphertext``."""
    return blocks_to_bytes(feistel_net_decrypt(bytes_to_blocks(ciphertext), master_key))