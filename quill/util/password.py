"""Password hashing with bcrypt."""

import bcrypt

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def hash_password(password: str) -> str:
    """Hash a plaintext password.

    Returns:
        bcrypt hash (includes the salt)
    """
    return bcrypt.hashpw(
        password.encode()[:BCRYPT_MAX_BYTES], bcrypt.gensalt()
    ).decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(
            password.encode()[:BCRYPT_MAX_BYTES], password_hash.encode()
        )
    except ValueError:
        # Malformed hash
        return False
