import pytest

from analyze import SAMPLES, main


def test_valid(capsys: pytest.CaptureFixture):
    assert main(["a[b] * c"]) == 0

    out = capsys.readouterr().out
    assert "Expression: 'a[b] * c'" in out
    assert "ID('a')" in out and "END('')" in out
    assert "-- Expression" in out
    assert out.rstrip().endswith("VALID")


def test_invalid(capsys: pytest.CaptureFixture):
    assert main(["a + b", "a # b", "a +"]) == 1

    out = capsys.readouterr().out
    assert out.count("VALID") == 3
    assert "INVALID (lexical)" in out
    assert "INVALID (syntax)" in out


def test_options(capsys: pytest.CaptureFixture):
    assert main(["--no-tokens", "--no-tree", "--source", "(a+b)*c"]) == 0

    out = capsys.readouterr().out
    assert "Tokens:" not in out
    assert "Syntax tree:" not in out
    assert "(a + b) * c" in out


def test_samples(capsys: pytest.CaptureFixture):
    assert main([]) == 0

    out = capsys.readouterr().out
    for _, description in SAMPLES:
        assert f"=== {description} ===" in out
    assert out.count("INVALID (lexical)") == 3
    assert out.count("INVALID (syntax)") == 6


def test_nesting_too_deep(capsys: pytest.CaptureFixture):
    program = "(" * 3000 + "a" + ")" * 3000
    assert main(["--no-tokens", program]) == 1

    out = capsys.readouterr().out
    assert "nested too deeply" in out
    assert "INVALID (syntax)" in out
