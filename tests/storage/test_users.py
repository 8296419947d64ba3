"""Tests for signup, login, and legacy credential migration."""

import json

import pytest

from promptshelf import storage


def test_register_and_authenticate():
    user = storage.register_user("ann", "secret")
    assert user.username == "ann"
    assert storage.authenticate("ann", "secret").username == "ann"


def test_password_is_not_stored_in_plaintext():
    storage.register_user("ann", "secret")
    raw = (storage.data_dir() / "global.json").read_text()
    assert "secret" not in raw
    record = json.loads(raw)["users"][0]
    assert record["password_hash"].startswith("pbkdf2_sha256$")


def test_register_duplicate():
    storage.register_user("ann", "secret")
    with pytest.raises(storage.DuplicateUser):
        storage.register_user("ann", "other")


def test_usernames_are_case_sensitive():
    storage.register_user("ann", "secret")
    storage.register_user("Ann", "secret")
    assert [u.username for u in storage.list_users()] == ["ann", "Ann"]


def test_register_requires_fields():
    with pytest.raises(storage.MissingField):
        storage.register_user("", "secret")
    with pytest.raises(storage.MissingField):
        storage.register_user("ann", "")


def test_authenticate_wrong_password():
    storage.register_user("ann", "secret")
    with pytest.raises(storage.InvalidCredentials):
        storage.authenticate("ann", "Secret")


def test_authenticate_unknown_user():
    with pytest.raises(storage.InvalidCredentials):
        storage.authenticate("nobody", "secret")


def test_get_user():
    storage.register_user("ann", "secret")
    assert storage.get_user("ann").username == "ann"
    assert storage.get_user("ANN") is None


# ── Legacy plaintext records ─────────────────────────────


def test_legacy_plaintext_record_is_migrated():
    snapshot = storage.load_snapshot(storage.GLOBAL_SCOPE)
    snapshot["users"].append({"username": "old", "password": "pw"})
    storage.save_snapshot(storage.GLOBAL_SCOPE, snapshot)

    with pytest.raises(storage.InvalidCredentials):
        storage.authenticate("old", "wrong")
    assert storage.authenticate("old", "pw").username == "old"

    record = storage.load_snapshot(storage.GLOBAL_SCOPE)["users"][0]
    assert "password" not in record
    assert storage.authenticate("old", "pw").username == "old"
