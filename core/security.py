"""
Хешування паролів адмінів і менеджерів ігор (bcrypt).
"""
import bcrypt


# bcrypt враховує тільки перші 72 байти (новіші версії кидають ValueError на довших)
BCRYPT_MAX_BYTES = 72


def _encode(plain: str) -> bytes:
    return plain.encode("utf-8")[:BCRYPT_MAX_BYTES]


def hash_password(plain: str) -> str:
    return bcrypt.hashpw(_encode(plain), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain: str, hashed: str) -> bool:
    """False для пошкодженого хешу замість ValueError"""
    try:
        return bcrypt.checkpw(_encode(plain), hashed.encode("utf-8"))
    except ValueError:
        return False
