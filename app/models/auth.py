"""Pydantic models for sign-in requests and responses."""

import re
from pydantic import BaseModel, StrictBool, ValidationError, field_validator
from pydantic_core import PydanticCustomError
from typing import Dict, Optional

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PASSWORD_MIN_LENGTH = 6


class Credentials(BaseModel):
    """Sign-in credentials, shared by the form and the API"""

    email: str
    password: str
    remember: Optional[StrictBool] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Rejects anything that doesn't look like an email address."""
        if not EMAIL_PATTERN.fullmatch(value):
            raise PydanticCustomError(
                "invalid_email", "Please enter a valid email address"
            )
        return value

    @field_validator("password")
    @classmethod
    def check_password(cls, value: str) -> str:
        if len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "Password must be at least {min_length} characters",
                {"min_length": PASSWORD_MIN_LENGTH},
            )
        return value


class SignInUser(BaseModel):
    """Public profile returned on a successful sign-in"""

    email: str
    name: str


class SignInResponse(BaseModel):
    """Sign-in response model"""

    ok: bool
    message: Optional[str] = None
    user: Optional[SignInUser] = None


def first_errors(error: ValidationError) -> Dict[str, str]:
    """
    Collapses a ValidationError into one message per field, keeping the first
    violation reported for each. Errors not tied to a field are keyed by "".
    """
    messages: Dict[str, str] = {}
    for item in error.errors():
        loc = item.get("loc") or ("",)
        messages.setdefault(str(loc[0]), item["msg"])
    return messages
