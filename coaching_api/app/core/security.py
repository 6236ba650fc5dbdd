"""
Password helpers for the admin login.

The admin password is never stored; only ``sha256(password + salt)``
in lowercase hex is kept in the settings.  Verification recomputes the
digest for the submitted password and compares it in constant time.
Plain salted SHA‑256 is weak for password storage; it is kept so that
existing admin digests remain valid.  No sessions or tokens are issued
here: a successful login is only reported back to the caller.
"""

import hashlib
import hmac


def hash_password(password: str, salt: str) -> str:
    """Return ``sha256(password + salt)`` as a lowercase hex string.

    Parameters
    ----------
    password : str
        The plain text password.
    salt : str
        The salt appended to the password before hashing.

    Returns
    -------
    str
        64 character hex digest.
    """
    return hashlib.sha256((password + salt).encode("utf-8")).hexdigest()


def verify_password(plain_password: str, salt: str, expected_digest: str) -> bool:
    """Check a plain password against a stored salted digest.

    Returns ``True`` only when the digest of ``plain_password + salt``
    equals ``expected_digest`` exactly (the stored digest is expected in
    lowercase).
    """
    digest = hash_password(plain_password, salt)
    return hmac.compare_digest(digest.encode("utf-8"), expected_digest.encode("utf-8"))


def verify_username(username: str, expected_username: str) -> bool:
    """Case‑sensitive exact comparison of the submitted username."""
    return hmac.compare_digest(username.encode("utf-8"), expected_username.encode("utf-8"))
