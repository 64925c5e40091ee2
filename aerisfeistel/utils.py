"""Small helpers shared by the command line and the tests."""

import string

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_bin(hex_string: str, length: int) -> bytes:
    """Decode the first ``length`` bytes written as hex digit pairs in ``hex_string``."""
    if length < 0:
        raise ValueError("length must not be negative")
    digits = hex_string[: 2 * length]
    if len(digits) < 2 * length:
        raise ValueError(
            f"expected {2 * length} hex digits, got {len(digits)}"
        )
    if not set(digits) <= _HEX_DIGITS:
        raise ValueError(f"invalid hex digits in {digits!r}")
    return bytes.fromhex(digits)