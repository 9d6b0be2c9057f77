"""
HTTP API Tests

Usage:
    pytest test_server.py
"""
from fastapi.testclient import TestClient

import server

client = TestClient(server.app)


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True}

def test_encode():
    r = client.post("/api/encode", json={"text": "hello world", "key": "zebra"})
    assert r.status_code == 200
    body = r.json()
    assert body["ciphertext"] == "ol_lo_ew_lr_h_d"
    assert (body["rows"], body["cols"]) == (3, 5)
    assert body["grid"] == ["hello", "_worl", "d____"]
    assert [p["index"] for p in body["ranked_key"]] == [4, 2, 1, 3, 0]

def test_decode():
    r = client.post("/api/decode", json={"ciphertext": "ol_lo_ew_lr_h_d", "key": "zebra"})
    assert r.status_code == 200
    body = r.json()
    assert body["plaintext"] == "hello world    "
    assert body["warning"] is None

def test_decode_warning():
    r = client.post("/api/decode", json={"ciphertext": "abcdefg", "key": "abc"})
    assert r.status_code == 200
    assert "not multiple of cols" in r.json()["warning"]

def test_empty_key_is_400():
    for path, field in (("/api/encode", "text"), ("/api/decode", "ciphertext")):
        r = client.post(path, json={field: "hello", "key": ""})
        assert r.status_code == 400
        assert "at least one character" in r.json()["detail"]

def test_missing_field_is_422():
    r = client.post("/api/encode", json={"text": "hello"})
    assert r.status_code == 422

def test_payload_limit(monkeypatch):
    monkeypatch.setattr(server, "MAX_PAYLOAD", 5)
    r = client.post("/api/encode", json={"text": "too long", "key": "k"})
    assert r.status_code == 413

def test_key_over_limit_is_413(monkeypatch):
    monkeypatch.setattr(server, "MAX_PAYLOAD", 5)
    for path, field in (("/api/encode", "text"), ("/api/decode", "ciphertext")):
        r = client.post(path, json={field: "abc", "key": "longkey"})
        assert r.status_code == 413
