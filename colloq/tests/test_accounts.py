import pytest

from colloq.accounts import authenticate, signup
from colloq.errors import AuthError, ConflictError, ValidationError
from colloq.security import decode_session_token


def test_signup_stores_hashed_password(database, auth_config):
    user = signup("Asha", "asha@example.com", "secret123", database, auth_config)

    assert user["email"] == "asha@example.com"
    assert "password_hash" not in user


@pytest.mark.parametrize("name,email,password,message", [
    ("", "asha@example.com", "secret123", "All fields are required"),
    ("Asha", "", "secret123", "All fields are required"),
    ("Asha", "asha@example.com", "", "All fields are required"),
    ("Asha", "asha@example.com", "12345", "Password must be at least 6 characters"),
    ("Asha", "asha@example.com", "x" * 73, "Password must be at most 72 bytes"),
])
def test_signup_rejects_bad_input(database, auth_config, name, email, password, message):
    with pytest.raises(ValidationError) as excinfo:
        signup(name, email, password, database, auth_config)
    assert excinfo.value.message == message


def test_signup_rejects_duplicate_email(database, auth_config):
    signup("Asha", "asha@example.com", "secret123", database, auth_config)
    with pytest.raises(ConflictError) as excinfo:
        signup("Other", "asha@example.com", "secret456", database, auth_config)
    assert excinfo.value.message == "User already exists"


def test_authenticate_issues_token(database, auth_config):
    signup("Asha", "asha@example.com", "secret123", database, auth_config)
    identity, token = authenticate("asha@example.com", "secret123", database, auth_config)

    assert identity.email == "asha@example.com"
    assert identity.name == "Asha"
    assert decode_session_token(token, auth_config) == identity


@pytest.mark.parametrize("email,password,message", [
    ("", "secret123", "Please enter email and password"),
    ("asha@example.com", "", "Please enter email and password"),
    ("nobody@example.com", "secret123", "No account found with this email. Please sign up first."),
    ("asha@example.com", "wrong-password", "Invalid password"),
])
def test_authenticate_failures(database, auth_config, email, password, message):
    signup("Asha", "asha@example.com", "secret123", database, auth_config)
    with pytest.raises(AuthError) as excinfo:
        authenticate(email, password, database, auth_config)
    assert excinfo.value.message == message
