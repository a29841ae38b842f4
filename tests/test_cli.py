import io

import pytest

from pyocra.cli import main

KEY20 = "3132333435363738393031323334353637383930"
SUITE = "OCRA-1:HOTP-SHA1-6:QN08"


def test_generate(capsys):
    assert main(["generate", SUITE, "--key", KEY20, "--challenge", "00000000"]) == 0
    assert capsys.readouterr().out == "237653\n"


def test_generate_reads_challenge_from_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("11111111\n"))
    assert main(["generate", SUITE, "--key", KEY20]) == 0
    assert capsys.readouterr().out == "243178\n"


def test_generate_with_counter_and_password(capsys):
    argv = [
        "generate",
        "OCRA-1:HOTP-SHA256-8:C-QN08-PSHA1",
        "--key",
        "3132333435363738393031323334353637383930313233343536373839303132",
        "--challenge",
        "12345678",
        "--counter",
        "1",
        "--password",
        "1234",
    ]
    assert main(argv) == 0
    assert capsys.readouterr().out == "86775851\n"


def test_verify(capsys):
    assert main(["verify", SUITE, "237653", "--key", KEY20, "--challenge", "00000000"]) == 0
    assert capsys.readouterr().out == "valid\n"

    assert main(["verify", SUITE, "000000", "--key", KEY20, "--challenge", "00000000"]) == 1
    assert capsys.readouterr().out == "invalid\n"


def test_challenge(capsys):
    assert main(["challenge", SUITE]) == 0
    out = capsys.readouterr().out.strip()
    assert len(out) == 8
    assert out.isdigit()


def test_invalid_suite_reported(capsys):
    assert main(["generate", "OCRA-1:HOTP-SHA256-8:QA04-QA04", "--key", KEY20, "--challenge", "x"]) == 1
    assert "unexpected parameters left" in capsys.readouterr().err


def test_missing_parameter_reported(capsys):
    assert main(["generate", "OCRA-1:HOTP-SHA1-6:C-QN08", "--key", KEY20, "--challenge", "1"]) == 1
    assert "counter" in capsys.readouterr().err


def test_now_requires_timestamp_suite(capsys):
    assert main(["generate", SUITE, "--key", KEY20, "--challenge", "1", "--now"]) == 1
    assert "has no timestamp" in capsys.readouterr().err


def test_now_with_timestamp_suite(capsys):
    assert main(["generate", "OCRA-1:HOTP-SHA1-6:QN08-T1M", "--key", KEY20, "--challenge", "1", "--now"]) == 0
    assert len(capsys.readouterr().out.strip()) == 6


def test_subcommand_required():
    with pytest.raises(SystemExit):
        main([])
