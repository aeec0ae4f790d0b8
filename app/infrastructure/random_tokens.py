"""Random Tokens: unguessable strings for page ids and name suffixes.

Invariants:
    - Every character drawn independently with secrets.choice (CSPRNG)
    - Alphabet is URL-safe without escaping: ASCII letters and digits

Design Decisions:
    - secrets over random: the page id is a capability token
"""

import secrets
import string

TOKEN_ALPHABET = string.ascii_letters + string.digits


def random_string(length: int) -> str:
    """Return a fresh random string of exactly `length` characters."""
    if length < 1:
        raise ValueError("length must be positive")
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))
