"""User accounts: signup and login against the global snapshot."""

import hashlib
import hmac
import logging
import secrets

from promptshelf.models import User

from .core import GLOBAL_SCOPE, load_snapshot, save_snapshot, storage_lock
from .errors import DuplicateUser, InvalidCredentials, MissingField

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 200_000


def _hash_password(password: str) -> str:
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, PBKDF2_ITERATIONS)
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt.hex()}${digest.hex()}"


def _verify_password(password: str, password_hash: str) -> bool:
    try:
        algorithm, iterations, salt_hex, digest_hex = password_hash.split("$", maxsplit=3)
    except ValueError:
        return False
    if algorithm != "pbkdf2_sha256":
        return False
    recomputed = hashlib.pbkdf2_hmac(
        "sha256",
        password.encode("utf-8"),
        bytes.fromhex(salt_hex),
        int(iterations),
    )
    return hmac.compare_digest(recomputed.hex(), digest_hex)


def list_users() -> list[User]:
    return [User(username=u["username"]) for u in load_snapshot(GLOBAL_SCOPE)["users"]]


def get_user(username: str) -> User | None:
    for record in load_snapshot(GLOBAL_SCOPE)["users"]:
        if record["username"] == username:
            return User(username=username)
    return None


def register_user(username: str, credential: str) -> User:
    """Create an account. Usernames are unique and case-sensitive."""
    if not username:
        raise MissingField("username")
    if not credential:
        raise MissingField("credential")
    with storage_lock():
        snapshot = load_snapshot(GLOBAL_SCOPE)
        if any(u["username"] == username for u in snapshot["users"]):
            raise DuplicateUser(f"User '{username}' already exists")
        snapshot["users"].append({
            "username": username,
            "password_hash": _hash_password(credential),
        })
        save_snapshot(GLOBAL_SCOPE, snapshot)
    logger.info(f"Registered user {username!r}")
    return User(username=username)


def authenticate(username: str, credential: str) -> User:
    """Return the user when username and credential both match.

    Records written by the old plaintext server carry a ``password`` field;
    they are verified as-is and rewritten to a hash on first login.
    """
    with storage_lock():
        snapshot = load_snapshot(GLOBAL_SCOPE)
        for record in snapshot["users"]:
            if record["username"] != username:
                continue
            if "password_hash" in record:
                if _verify_password(credential or "", record["password_hash"]):
                    return User(username=username)
                break
            legacy = record.get("password", "")
            if legacy and hmac.compare_digest(legacy.encode("utf-8"), (credential or "").encode("utf-8")):
                del record["password"]
                record["password_hash"] = _hash_password(credential)
                save_snapshot(GLOBAL_SCOPE, snapshot)
                logger.info(f"Migrated plaintext credential for {username!r}")
                return User(username=username)
            break
    logger.warning(f"Rejected login for {username!r}")
    raise InvalidCredentials("Invalid credentials")
