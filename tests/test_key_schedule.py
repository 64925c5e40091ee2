import pytest

from aerisfeistel.key_schedule import ROUNDS, generate_master_key, generate_round_keys


def test_master_key_matches_known_digest():
    password = "password"
    expected = bytes.fromhex(
        "7a37b85c8918eac19a9089c0fa5a2ab4dce3f90528dcdeec108b23ddf3607b99"
    )
    assert generate_master_key(password, "salt") == expected


def test_master_key_accepts_bytes_and_str_alike():
    password = "password"
    assert generate_master_key(password.encode(), b"salt") == generate_master_key(
        password, "salt"
    )


def test_master_key_depends_on_salt():
    password = "password"
    assert generate_master_key(password, "salt") != generate_master_key(password, "other")


def test_master_key_length():
    password = "password"
    assert len(generate_master_key(password, "")) == 32


def test_round_keys_read_big_endian():
    keys = generate_round_keys(bytes(range(32)))
    assert len(keys) == ROUNDS
    assert keys[0] == 0x0001020304050607
    assert keys[3] == 0x18191A1B1C1D1E1F


def test_round_keys_cycle_through_master_key():
    password = "password"
    keys = generate_round_keys(generate_master_key(password, "salt"))
    for index in range(ROUNDS - 4):
        assert keys[index] == keys[index + 4]
    assert all(0 <= key < 2**64 for key in keys)


def test_round_keys_reject_wrong_length():
    with pytest.raises(ValueError):
        generate_round_keys(b"\x00" * 16)