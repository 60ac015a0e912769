import bcrypt

from courses_api.core import config

# bcrypt only looks at the first 72 bytes of a password.
_BCRYPT_MAX_BYTES = 72


def _encode(plain_password: str) -> bytes:
    return str(plain_password).encode("utf-8")[:_BCRYPT_MAX_BYTES]


def hash_password(plain_password: str, rounds: int | None = None) -> str:
    salt = bcrypt.gensalt(rounds=rounds or config.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_encode(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str | None, password_hash: str | None) -> bool:
    hashed = (password_hash or "").encode("utf-8")
    if plain_password is None or not hashed:
        return False
    try:
        return bcrypt.checkpw(_encode(plain_password), hashed)
    except ValueError:
        return False
