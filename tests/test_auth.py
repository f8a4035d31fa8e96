"""Tests for passwords, access tokens and login."""

from __future__ import annotations

import uuid

import pytest

from app.auth.jwt import InvalidTokenError, create_access_token, decode_access_token
from app.auth.passwords import PasswordTooLongError, hash_password, verify_password


def test_hash_and_verify():
    hashed = hash_password("secret")
    assert hashed != "secret"
    assert verify_password("secret", hashed)
    assert not verify_password("other", hashed)


def test_hash_rejects_passwords_over_72_bytes():
    with pytest.raises(PasswordTooLongError):
        hash_password("ż" * 37)


def test_verify_against_non_hash():
    assert not verify_password("secret", "")
    assert not verify_password("secret", "plaintext")


def test_token_round_trip():
    user_id = uuid.uuid4()
    assert decode_access_token(create_access_token(user_id)) == user_id


def test_expired_token():
    token = create_access_token(uuid.uuid4(), expires_minutes=-1)
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_garbage_token():
    with pytest.raises(InvalidTokenError):
        decode_access_token("not-a-token")


def test_login(client, user):
    response = client.post(
        "/auth/login", data={"username": "alice", "password": "old-secret"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert decode_access_token(data["access_token"]) == user.id


def test_login_wrong_password(client, user):
    response = client.post("/auth/login", data={"username": "alice", "password": "nope"})
    assert response.status_code == 401


def test_me(client, user, auth_headers):
    response = client.get("/users/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["username"] == "alice"
    assert "password" not in response.json()


def test_me_with_bad_token(client):
    response = client.get("/users/me", headers={"Authorization": "Bearer nope"})
    assert response.status_code == 401
