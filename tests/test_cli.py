import pytest

from aerisfeistel.cipher import pad
from aerisfeistel.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_wrong_argument_count_prints_usage(workdir, capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().out


def test_missing_input_file(workdir):
    password = "password"
    assert main([str(workdir / "absent"), "enc", password]) == 1
    assert not (workdir / "encrypted").exists()


def test_invalid_operation(workdir):
    password = "password"
    source = workdir / "plain.txt"
    source.write_bytes(b"hello")
    assert main([str(source), "scramble", password]) == 1
    assert not (workdir / "encrypted").exists()


def test_encrypt_then_decrypt(workdir, capsys):
    password = "password"
    data = b"hello, block cipher"
    source = workdir / "plain.txt"
    source.write_bytes(data)

    assert main([str(source), "enc", password]) == 0
    ciphertext = (workdir / "encrypted").read_bytes()
    assert len(ciphertext) == len(pad(data))
    assert ciphertext != pad(data)

    assert main([str(workdir / "encrypted"), "dec", password]) == 0
    assert (workdir / "decrypted").read_bytes() == pad(data)
    assert "Time taken" in capsys.readouterr().out


def test_wrong_password_does_not_recover_plaintext(workdir):
    password = "password"
    data = b"abcdefgh"
    source = workdir / "plain.txt"
    source.write_bytes(data)
    assert main([str(source), "enc", password]) == 0
    assert main([str(workdir / "encrypted"), "dec", "secret"]) == 0
    assert (workdir / "decrypted").read_bytes() != data


def test_decrypt_rejects_unaligned_input(workdir):
    password = "password"
    source = workdir / "broken.bin"
    source.write_bytes(b"12345")
    assert main([str(source), "dec", password]) == 1
    assert not (workdir / "decrypted").exists()