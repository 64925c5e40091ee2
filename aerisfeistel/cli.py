"""Command line: encrypt or decrypt a file with a password."""

import sys
import time
from pathlib import Path

from aerisfeistel.cipher import decrypt, encrypt, pad, unpad
from aerisfeistel.key_schedule import generate_master_key

SALT = "aeris256ciphersalt"
ENCRYPTED_OUTPUT = "encrypted"
DECRYPTED_OUTPUT = "decrypted"


def _run_timed(operation, data, master_key):
    start = time.process_time()
    result = operation(data, master_key)
    return result, time.process_time() - start


def main(argv=None) -> int:
    """Run ``<input_file_path> <enc/dec> <password>``; write the result to the working directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Usage: aerisfeistel <input_file_path> <enc/dec> <password>")
        return 1

    input_path, operation, password = args
    try:
        data = Path(input_path).read_bytes()
    except OSError:
        print("Error: Could not open input file.", file=sys.stderr)
        return 1

    master_key = generate_master_key(password, SALT)

    if operation == "enc":
        ciphertext, elapsed = _run_timed(encrypt, pad(data), master_key)
        try:
            Path(ENCRYPTED_OUTPUT).write_bytes(ciphertext)
        except OSError:
            print("Error: Could not open output file.", file=sys.stderr)
            return 1
        print(f"Encryption successful. Ciphertext written to {ENCRYPTED_OUTPUT}")
    elif operation == "dec":
        try:
            plaintext, elapsed = _run_timed(decrypt, data, master_key)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        try:
            Path(DECRYPTED_OUTPUT).write_bytes(unpad(plaintext, len(data)))
        except OSError:
            print("Error: Could not open output file.", file=sys.stderr)
            return 1
        print(f"Decryption successful. Decrypted plaintext written to {DECRYPTED_OUTPUT}")
    else:
        print(
            "Error: Invalid operation. Use 'enc' for encryption or 'dec' for decryption.",
            file=sys.stderr,
        )
        return 1

    print(f"Time taken: {elapsed:.5f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())