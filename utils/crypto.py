import bcrypt

from constants import UTF8
from settings import auth_settings


def hash_password(password: str) -> str:
    """Hash a password with a fresh salt.

    Args:
        password: The plain-text password.

    Returns:
        The salted bcrypt hash encoded as UTF-8 text.

    """
    return bcrypt.hashpw(
        password=password.encode(UTF8),
        salt=bcrypt.gensalt(rounds=auth_settings.bcrypt_rounds),
    ).decode(UTF8)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against a stored hash in constant time.

    Args:
        password: The plain-text password.
        password_hash: The stored bcrypt hash.

    Returns:
        True if the password matches, False otherwise.

    """
    try:
        return bcrypt.checkpw(
            password=password.encode(UTF8),
            hashed_password=password_hash.encode(UTF8),
        )
    except ValueError:
        return False
