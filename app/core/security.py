"""Bearer token helpers.

Sessions are owned by the external auth service. It signs a JWT whose
``sub`` claim is the user id; this service only verifies it. ``create_jwt``
exists for that service's shared-secret setup and for tests.
"""

from datetime import datetime, timedelta, timezone

from jose import jwt

from app.core.config import get_settings

settings = get_settings()


def _get_secret() -> str:
    if not settings.jwt_secret_key:
        raise RuntimeError("JWT_SECRET_KEY is not configured")
    return settings.jwt_secret_key


def ensure_jwt_configured() -> None:
    """Fail fast at startup; an empty key would let anyone mint tokens."""
    _get_secret()


def create_jwt(subject: str, expires_delta: timedelta | None = None) -> str:
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.jwt_expire_minutes)
    )
    payload = {
        "sub": subject,
        "exp": expire,
    }
    return jwt.encode(payload, _get_secret(), algorithm=settings.jwt_algorithm)


def decode_jwt(token: str) -> dict:
    """Decode and verify a JWT. Raises jose.JWTError on failure."""
    return jwt.decode(token, _get_secret(), algorithms=[settings.jwt_algorithm])
