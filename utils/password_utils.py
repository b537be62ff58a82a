"""
Temporary passwords handed out when an administrator registers a cooperative.
"""
import secrets
import string

# Characters that are easy to misread when a password is copied by hand
_AMBIGUOUS = set("0O1lI")
_LETTERS = "".join(c for c in string.ascii_letters if c not in _AMBIGUOUS)
_DIGITS = "".join(c for c in string.digits if c not in _AMBIGUOUS)
_SYMBOLS = "!@#$%&*"


def generate_secure_password(length: int = 12) -> str:
    """Random password with at least one upper, lower, digit and symbol."""
    if length < 4:
        raise ValueError("Password length must be at least 4")

    required = [
        secrets.choice([c for c in _LETTERS if c.isupper()]),
        secrets.choice([c for c in _LETTERS if c.islower()]),
        secrets.choice(_DIGITS),
        secrets.choice(_SYMBOLS),
    ]
    pool = _LETTERS + _DIGITS + _SYMBOLS
    chars = required + [secrets.choice(pool) for _ in range(length - len(required))]
    secrets.SystemRandom().shuffle(chars)
    return "".join(chars)
