"""Request dependencies: storage, auth settings and the session identity."""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..config.auth import AuthConfig
from ..db import Database
from ..errors import AuthError
from ..security import SessionIdentity, decode_session_token

bearer_scheme = HTTPBearer(auto_error=False)

def get_database(request: Request) -> Database:
    return request.app.state.database

def get_auth_config(request: Request) -> AuthConfig:
    return request.app.state.auth_config

def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    config: AuthConfig = Depends(get_auth_config)
) -> SessionIdentity:
    """
    Resolve the bearer token of the request to a session identity.
    
    Raises:
        AuthError: If the request carries no valid session token
    """
    if credentials is None:
        raise AuthError()
    return decode_session_token(credentials.credentials, config)
