import bcrypt


def hash_password(password: str) -> str:
    """Hash a plain-text password with bcrypt (random salt per call)."""
    hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")  # Stored as string in the users table


def verify_password(password: str, password_hash: str) -> bool:
    """Returns True if the password matches the stored bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
