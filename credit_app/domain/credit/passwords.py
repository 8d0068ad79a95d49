"""
Password hashing for customer credentials.

Customers never have their password persisted in plain form.
Hashes are bcrypt strings, salt and cost factor included.
"""

import bcrypt

DEFAULT_ROUNDS = 12

# bcrypt only reads the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Return a salted bcrypt hash of the password."""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    """Check a plain password against a bcrypt hash.

    A value that is not a bcrypt hash never matches.
    """
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False
