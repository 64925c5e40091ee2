# aerisfeistel

aerisfeistel is a compact block cipher. It is a 16-round Feistel network that works on
64-bit blocks. Its 256-bit master key is the SHA-256 digest of a password joined to a salt.
The package can be used as a Python library or as a command-line tool that encrypts and
decrypts files.

It is meant for study and experimentation. The round function is a simple
XOR / rotate / complement / add step, so do not use the cipher to protect real data.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## Command line

```
aerisfeistel <input_file_path> <enc|dec> <password>
```

- `enc` reads the input file and pads it with `X` bytes to a whole number of 8-byte blocks.
  It encrypts the result and writes it to a file named `encrypted` in the current directory.
- `dec` reads a file of ciphertext blocks and decrypts it. It writes the plaintext to a file
  named `decrypted` in the current directory. The input must be a whole number of 8-byte
  blocks. If it is not, the command reports an error.

Both operations print the processor time the cipher took. The salt is fixed
(`aeris256ciphersalt`), so the same password always gives the same key.

Example:

```
aerisfeistel notes.txt enc password
aerisfeistel encrypted dec password
```

The exit status is 0 on success and 1 in each of these cases:

- the wrong number of arguments is given (a usage line is printed);
- the input file cannot be read;
- the output file cannot be written;
- the operation is neither `enc` nor `dec`;
- the input to `dec` is not block-aligned.

## Library

`aerisfeistel.key_schedule`
- `generate_master_key(password, salt)` returns the 32-byte SHA-256 digest of the password
  followed by the salt. Each argument may be `bytes` or `str`; a `str` is encoded as UTF-8.
- `generate_round_keys(master_key)` returns the sixteen 64-bit round keys. Each key is read
  big-endian from 8 consecutive bytes of the master key, wrapping around its 32 bytes. It
  raises `ValueError` if the master key is not 32 bytes.
- `KEY_SIZE` (256) and `ROUNDS` (16).

`aerisfeistel.cipher`
- `pad(data)` appends `X` bytes up to a multiple of 8 bytes.
- `unpad(data, length)` returns the first `length` bytes. It raises `ValueError` if
  `length` is out of range.
- `bytes_to_blocks(data)` and `blocks_to_bytes(blocks)` convert between byte strings and
  lists of little-endian unsigned 64-bit words. They raise `ValueError` on a misaligned
  length or on a value that does not fit in 64 bits.
- `encrypt(plaintext, master_key)` and `decrypt(ciphertext, master_key)` run the cipher over
  block-aligned bytes. Call `pad` first for other lengths.
- `feistel_net_encrypt(blocks, master_key)` and `feistel_net_decrypt(blocks, master_key)`
  run the Feistel network over a list of 64-bit integers.
- `f(half, round_key)` is the round function on one 32-bit half.
- `BLOCK_SIZE` (64 bits), `BLOCK_BYTES` (8) and `PAD_BYTE` (`b"X"`).

`aerisfeistel.utils`
- `hex_to_bin(hex_string, length)` decodes the first `length` bytes written as hex digit
  pairs. It raises `ValueError` if there are too few digits or an invalid digit.

`aerisfeistel.cli`
- `main(argv=None)` is the command-line entry point. It returns the exit status.

Example:

```python
from aerisfeistel.cipher import decrypt, encrypt, pad
from aerisfeistel.key_schedule import generate_master_key

key = generate_master_key("password", "salt")
ciphertext = encrypt(pad(b"hello"), key)
assert decrypt(ciphertext, key) == b"helloXXX"
```

## What it does not do

- Padding is not removed on decryption. The `X` bytes added by `enc` remain in the
  `decrypted` file.
- Each block is encrypted independently, with no chaining mode and no initialisation
  vector. There is no integrity check, so a wrong password gives garbage output rather
  than an error.
- The output file names are fixed. An existing `encrypted` or `decrypted` file in the
  current directory is overwritten.