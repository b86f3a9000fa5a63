"""One-way hashing for saved passwords.

Only the SHA-256 digest of a password is ever stored. There is no
encryption and no way back to the plaintext.
"""

import hashlib
import hmac


def hash_password(password: str) -> str:
    """Hash a password using SHA-256.

    Single source of truth for password hashing across the application.

    Args:
        password: Plain text password

    Returns:
        64-character lowercase hex digest
    """
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against a stored digest.

    Args:
        password: Candidate plain text password
        password_hash: Previously stored hex digest

    Returns:
        True if password matches, False otherwise
    """
    return hmac.compare_digest(hash_password(password), password_hash.lower())
