"""Password hashing"""
import argparse
import asyncio
import hashlib

from passlib.context import CryptContext

from infrastructure.config import get_settings

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__ident="2b",
    bcrypt__rounds=get_settings().bcrypt_rounds,
)


def _prepare_password(password: str) -> str:
    """
    Prepare password for bcrypt to handle strings > 72 bytes.
    bcrypt has a 72-byte password limit. A 72 character password with
    multi-byte characters exceeds it, so longer inputs are pre-hashed with
    SHA256 (hex digest, 64 bytes).
    """
    password_bytes = password.encode('utf-8')
    if len(password_bytes) > 72:
        return hashlib.sha256(password_bytes).hexdigest()
    return password


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash"""
    return pwd_context.verify(_prepare_password(plain_password), hashed_password)


def get_password_hash(password: str) -> str:
    """Generate password hash"""
    return pwd_context.hash(_prepare_password(password))


async def hash_password(password: str) -> str:
    """Generate password hash without blocking the event loop"""
    return await asyncio.to_thread(get_password_hash, password)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Print a bcrypt digest for a password")
    parser.add_argument("password")
    args = parser.parse_args(argv)
    print(get_password_hash(args.password))


if __name__ == "__main__":
    main()
