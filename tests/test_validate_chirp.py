"""
Pytest tests for POST /api/validate_chirp and the ChirpValidator behind it.
"""

from __future__ import annotations

import pytest

from chirpy.core.exceptions import ChirpTooLongError, MalformedChirpError
from chirpy.moderation import ChirpValidator


def test_cleans_profanity(client):
    """Example chirp: banned word masked, 200."""
    r = client.post(
        "/api/validate_chirp",
        json={"body": "This is a kerfuffle opinion I need to share with the world"},
    )
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/json"
    assert r.json() == {"cleaned_body": "This is a **** opinion I need to share with the world"}


def test_too_long(client):
    """141 characters -> 400 Chirp is too long."""
    r = client.post("/api/validate_chirp", json={"body": "a" * 141})
    assert r.status_code == 400
    assert r.json() == {"error": "Chirp is too long"}


def test_exactly_max_length_ok(client):
    r = client.post("/api/validate_chirp", json={"body": "a" * 140})
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": "a" * 140}


def test_length_checked_before_filtering(client):
    """A long chirp is rejected even if masking would shorten it."""
    body = " ".join(["kerfuffle"] * 15)  # 149 chars, 74 once masked
    assert len(body) > 140
    r = client.post("/api/validate_chirp", json={"body": body})
    assert r.status_code == 400


@pytest.mark.parametrize(
    "payload",
    [
        b"not json",
        b"",
        b'{"body": 42}',
        b'{"body": ["a"]}',
        b'["body"]',
        b'"just a string"',
        b'{"body": "hi", "score": NaN}',
        b'{"body": "unterminated',
    ],
)
def test_malformed_body(client, payload):
    """Bodies that are not {"body": string} -> 500 Something went wrong."""
    r = client.post(
        "/api/validate_chirp",
        content=payload,
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 500
    assert r.json() == {"error": "Something went wrong"}


def test_missing_body_field_is_empty_chirp(client):
    r = client.post("/api/validate_chirp", json={"text": "ignored"})
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": ""}


@pytest.mark.parametrize("payload", [b'{"body": null}', b"null", b"  null  "])
def test_null_is_empty_chirp(client, payload):
    """A null document or null body leaves the chirp empty."""
    r = client.post("/api/validate_chirp", content=payload, headers={"Content-Type": "application/json"})
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": ""}


@pytest.mark.parametrize("key", ["Body", "BODY", "bOdY"])
def test_body_key_case_insensitive(client, key):
    r = client.post("/api/validate_chirp", json={key: "kerfuffle"})
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": "****"}


def test_later_body_key_overwrites(client):
    """Keys are applied in order; a null value does not clear an earlier one."""
    r = client.post(
        "/api/validate_chirp",
        content=b'{"body": "hello", "Body": "fornax"}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": "****"}
    r = client.post(
        "/api/validate_chirp",
        content=b'{"Body": "hello", "body": null}',
        headers={"Content-Type": "application/json"},
    )
    assert r.json() == {"cleaned_body": "hello"}


@pytest.mark.parametrize("payload", [b'{"body": "hi"} trailing', b'{"body": "hi"}{"body": "x"}', b'{"body": "hi"}\n'])
def test_only_first_json_value_read(client, payload):
    r = client.post("/api/validate_chirp", content=payload, headers={"Content-Type": "application/json"})
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": "hi"}


def test_invalid_utf8_replaced(client):
    """Invalid UTF-8 bytes decode to U+FFFD instead of failing."""
    r = client.post(
        "/api/validate_chirp",
        content=b'{"body": "a\xffb kerfuffle"}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": "a\ufffdb ****"}


def test_extra_fields_ignored(client):
    r = client.post("/api/validate_chirp", json={"body": "Sharbert rules", "extra": 1})
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": "**** rules"}


@pytest.mark.parametrize(
    "body",
    [
        "",
        "hello",
        "kerfuffle  sharbert",
        "  leading spaces",
        "ünïcödé fornax ✓",
        "x " * 70,
    ],
)
def test_token_count_preserved(client, body):
    """Under the limit: 200 and the same number of single-space tokens."""
    r = client.post("/api/validate_chirp", json={"body": body})
    assert r.status_code == 200
    cleaned = r.json()["cleaned_body"]
    assert len(cleaned.split(" ")) == len(body.split(" "))


def test_get_not_allowed(client):
    assert client.get("/api/validate_chirp").status_code == 405


def test_custom_denylist_and_length(static_root):
    """Settings drive the denylist and limit."""
    from fastapi.testclient import TestClient

    from chirpy.api_server.server import create_app
    from chirpy.config import Settings

    app = create_app(Settings(filepath_root=static_root, profane_words=("gosh",), max_chirp_length=10))
    client = TestClient(app)
    r = client.post("/api/validate_chirp", json={"body": "GOSH fornax"})
    assert r.status_code == 400
    r = client.post("/api/validate_chirp", json={"body": "GOSH darn"})
    assert r.status_code == 200
    assert r.json() == {"cleaned_body": "**** darn"}


def test_validator_raises_domain_errors():
    validator = ChirpValidator(max_length=5)
    with pytest.raises(MalformedChirpError) as exc:
        validator.validate(b"{")
    assert exc.value.status_code == 500
    assert exc.value.message == "Something went wrong"
    with pytest.raises(ChirpTooLongError) as exc:
        validator.validate('{"body": "toolong"}')
    assert exc.value.status_code == 400
    assert validator.validate('{"body": "hi"}').cleaned_body == "hi"
