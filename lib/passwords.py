# =============================================================================
# lib/passwords.py - Password Hashing
# =============================================================================
# scrypt with a per-user random salt, stored as "<salt>:<hex key>".
#
# Parameters (N=16384, r=8, p=1, 64-byte key, salt used as UTF-8 text) match
# Node's crypto.scrypt defaults, so hashes written by the previous server
# still verify.
# =============================================================================

import hashlib
import hmac
import secrets

SCRYPT_N = 16384
SCRYPT_R = 8
SCRYPT_P = 1
KEY_LENGTH = 64
SALT_BYTES = 16


def _derive(password: str, salt: str) -> str:
    key = hashlib.scrypt(
        password.encode("utf-8"),
        salt=salt.encode("utf-8"),
        n=SCRYPT_N,
        r=SCRYPT_R,
        p=SCRYPT_P,
        dklen=KEY_LENGTH,
    )
    return key.hex()


def hash_password(password: str, salt: str | None = None) -> str:
    """
    Hash a password for storage.

    Example:
        stored = hash_password("hunter2")  # "9f86d0...:3a7bd3..."
    """
    salt = salt or secrets.token_hex(SALT_BYTES)
    return f"{salt}:{_derive(password, salt)}"


def verify_password(password: str, stored: str) -> bool:
    """Check a password against a stored "salt:key" string."""
    salt, sep, key = stored.partition(":")
    if not sep or not salt or not key:
        return False
    return hmac.compare_digest(_derive(password, salt), key)
