"""Simple tests for Pydantic models and the credential verifier."""

import pytest
from pydantic import ValidationError
from app.core.auth.credential_verifier import ExampleCredentialVerifier
from app.models.auth import Credentials, SignInResponse, first_errors


def test_credentials_creation():
    """Test creating valid credentials."""
    creds = Credentials(email="demo@blogify.test", password="password123")
    assert creds.email == "demo@blogify.test"
    assert creds.remember is None


@pytest.mark.parametrize(
    "email",
    [
        "plain",
        "no-domain@",
        "@example.com",
        "a b@example.com",
        "x@host",
        "demo@blogify.test\n",
    ],
)
def test_invalid_emails(email):
    """Malformed emails report a message about the email."""
    with pytest.raises(ValidationError) as exc_info:
        Credentials(email=email, password="password123")
    assert "email" in first_errors(exc_info.value)["email"]


def test_short_password():
    """Passwords under six characters are rejected."""
    with pytest.raises(ValidationError) as exc_info:
        Credentials(email="demo@blogify.test", password="12345")
    assert first_errors(exc_info.value) == {
        "password": "Password must be at least 6 characters"
    }


def test_remember_must_be_boolean():
    """String values aren't coerced into the remember flag."""
    with pytest.raises(ValidationError) as exc_info:
        Credentials(email="demo@blogify.test", password="password123", remember="true")
    assert "remember" in first_errors(exc_info.value)


def test_first_errors_keeps_one_message_per_field():
    """Both fields report exactly one message."""
    with pytest.raises(ValidationError) as exc_info:
        Credentials(email="nope", password="1")
    errors = first_errors(exc_info.value)
    assert set(errors) == {"email", "password"}


def test_response_dump_omits_missing_fields():
    """Optional keys are left out of the serialized response."""
    body = SignInResponse(ok=False, message="nope").model_dump(exclude_none=True)
    assert body == {"ok": False, "message": "nope"}


def test_example_verifier():
    """Only the exact example pair is accepted."""
    verifier = ExampleCredentialVerifier(email="a@b.co", password="secret1", name="A")
    assert verifier.verify("a@b.co", "secret1")
    assert not verifier.verify("a@b.co", "secret2")
    assert not verifier.verify("A@b.co", "secret1")
    assert verifier.display_name("a@b.co") == "A"
    assert "a@b.co" in verifier.rejection_message()
