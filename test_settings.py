"""
Settings Tests

Usage:
    pytest test_settings.py
"""
from settings import int_env


def test_int_env_reads_value(monkeypatch):
    monkeypatch.setenv("TRANSPOSE_TEST_INT", "42")
    assert int_env("TRANSPOSE_TEST_INT", 7) == 42

def test_int_env_default_when_unset(monkeypatch):
    monkeypatch.delenv("TRANSPOSE_TEST_INT", raising=False)
    assert int_env("TRANSPOSE_TEST_INT", 7) == 7

def test_int_env_default_when_garbage(monkeypatch):
    monkeypatch.setenv("TRANSPOSE_TEST_INT", "lots")
    assert int_env("TRANSPOSE_TEST_INT", 7) == 7
