"""User signup and credential login."""

import logging
from typing import Any, Dict, Tuple

from .config.auth import AuthConfig
from .db import Database, DuplicateKeyError, insert_user, find_user_by_email
from .errors import AuthError, ConflictError, ValidationError
from .security import SessionIdentity, create_session_token, hash_password, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72

def signup(name: str, email: str, password: str, database: Database, config: AuthConfig) -> Dict[str, Any]:
    """
    Create a user account.
    
    Returns:
        The stored user, without the password hash
        
    Raises:
        ValidationError: If a field is missing or the password is too short
        ConflictError: If an account with the email already exists
    """
    logger.info(f"Signup attempt: {email}")

    if not name or not email or not password:
        raise ValidationError('All fields are required')

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f'Password must be at least {MIN_PASSWORD_LENGTH} characters')

    # bcrypt only looks at the first 72 bytes
    if len(password.encode('utf-8')) > MAX_PASSWORD_BYTES:
        raise ValidationError(f'Password must be at most {MAX_PASSWORD_BYTES} bytes')

    # The unique index on email settles concurrent signups as well
    if find_user_by_email(database, email):
        raise ConflictError('User already exists')

    try:
        user = insert_user(database, name, email, hash_password(password, config.bcrypt_rounds))
    except DuplicateKeyError as e:
        raise ConflictError('User already exists') from e

    logger.info(f"User created successfully: {user['id']}")
    return user

def authenticate(email: str, password: str, database: Database, config: AuthConfig) -> Tuple[SessionIdentity, str]:
    """
    Check credentials and issue a session token.
    
    Returns:
        Tuple of (identity, signed session token)
        
    Raises:
        AuthError: If credentials are missing or do not match an account
    """
    logger.info(f"Login attempt for: {email}")

    if not email or not password:
        raise AuthError('Please enter email and password')

    user = find_user_by_email(database, email)
    if not user:
        logger.warning(f"No user found with email: {email}")
        raise AuthError('No account found with this email. Please sign up first.')

    if not verify_password(password, user['password_hash']):
        logger.warning(f"Invalid password for: {email}")
        raise AuthError('Invalid password')

    identity = SessionIdentity(email=user['email'], name=user['name'], user_id=user['id'])
    logger.info(f"Login successful for: {email}")
    return identity, create_session_token(identity, config)
