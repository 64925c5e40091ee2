"""A 16-round Feistel block cipher with a SHA-256 password-derived key and a file command."""

__version__ = "0.1.0"