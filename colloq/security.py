"""Password hashing and signed session tokens."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from jose import JWTError, jwt

from .config.auth import AuthConfig
from .errors import AuthError


@dataclass(frozen=True)
class SessionIdentity:
    """The authenticated user behind a request."""
    email: str
    name: Optional[str] = None
    user_id: Optional[int] = None


def hash_password(password: str, rounds: int = 12) -> str:
    """Salted one-way hash of a password."""
    return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt(rounds=rounds)).decode('utf-8')


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash."""
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def create_session_token(identity: SessionIdentity, config: AuthConfig, now: Optional[datetime] = None) -> str:
    """Issue a signed token for an authenticated user."""
    if now is None:
        now = datetime.now(timezone.utc)
    claims = {
        'sub': identity.email,
        'name': identity.name,
        'uid': identity.user_id,
        'iat': now,
        'exp': now + timedelta(minutes=config.session_ttl_minutes),
    }
    return jwt.encode(claims, config.secret_key, algorithm=config.algorithm)


def decode_session_token(token: str, config: AuthConfig) -> SessionIdentity:
    """
    Resolve a session token to the identity it was issued for.

    Raises:
        AuthError: If the token is malformed, tampered with or expired
    """
    try:
        payload = jwt.decode(token, config.secret_key, algorithms=[config.algorithm])
    except JWTError as e:
        raise AuthError() from e

    email = payload.get('sub')
    if not email:
        raise AuthError()
    return SessionIdentity(email=email, name=payload.get('name'), user_id=payload.get('uid'))
