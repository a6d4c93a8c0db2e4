"""Session and password hashing settings."""

import os
from dataclasses import dataclass

from .environment import IS_PRODUCTION_ENVIRONMENT

DEVELOPMENT_SECRET_KEY = "colloq-development-secret"

# NextAuth-style default: sessions last 30 days
DEFAULT_SESSION_TTL_MINUTES = 30 * 24 * 60


@dataclass
class AuthConfig:
    """Auth configuration settings."""

    secret_key: str = ""
    algorithm: str = "HS256"
    session_ttl_minutes: int = 0
    bcrypt_rounds: int = 0

    def __post_init__(self):
        """Load unset values from environment."""
        if not self.secret_key:
            self.secret_key = os.environ.get('SECRET_KEY', '')
            if not self.secret_key and not IS_PRODUCTION_ENVIRONMENT:
                self.secret_key = DEVELOPMENT_SECRET_KEY
        if not self.session_ttl_minutes:
            self.session_ttl_minutes = int(
                os.environ.get('SESSION_TTL_MINUTES', DEFAULT_SESSION_TTL_MINUTES)
            )
        if not self.bcrypt_rounds:
            self.bcrypt_rounds = int(os.environ.get('BCRYPT_ROUNDS', '12'))

    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.secret_key:
            raise ValueError("SECRET_KEY environment variable is required")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return True
