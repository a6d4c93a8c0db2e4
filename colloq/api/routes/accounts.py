"""Signup and login routes."""

from fastapi import APIRouter, Depends

from ..deps import get_auth_config, get_database
from ..schemas import LoginIn, SignupIn
from ...accounts import authenticate, signup
from ...config.auth import AuthConfig
from ...db import Database

router = APIRouter(tags=["accounts"])

@router.post("/signup", status_code=201)
def create_account(
    payload: SignupIn,
    database: Database = Depends(get_database),
    config: AuthConfig = Depends(get_auth_config)
):
    """Create a user account."""
    user = signup(payload.name, payload.email, payload.password, database, config)
    return {"message": "User created successfully", "user_id": user['id']}

@router.post("/auth/login")
def login(
    payload: LoginIn,
    database: Database = Depends(get_database),
    config: AuthConfig = Depends(get_auth_config)
):
    """Exchange email and password for a session token."""
    identity, token = authenticate(payload.email, payload.password, database, config)
    return {
        "access_token": token,
        "token_type": "bearer",
        "user": {"id": identity.user_id, "email": identity.email, "name": identity.name}
    }
