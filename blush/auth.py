# blush/auth.py

from passlib.context import CryptContext

from .config import settings

# bcrypt only looks at the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def password_too_long(password: str) -> bool:
    return len(password.encode("utf-8")) > BCRYPT_MAX_BYTES


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    if password_too_long(plain):
        return False
    return pwd_context.verify(plain, hashed)
