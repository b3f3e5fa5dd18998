# app/core/auth/credential_verifier.py
"""Credential verification strategies (example account only for now)"""

from abc import ABC, abstractmethod
from app.config import settings


class CredentialVerifier(ABC):
    """Decides whether an email/password pair is valid"""

    @abstractmethod
    def verify(self, email: str, password: str) -> bool:
        """Return True when the pair identifies a known account"""

    def display_name(self, email: str) -> str:
        """Name shown for a verified account"""
        return email

    def rejection_message(self) -> str:
        """Message returned when verify() fails"""
        return "Invalid email or password."


class ExampleCredentialVerifier(CredentialVerifier):
    """Accepts exactly one hard-coded example account"""

    def __init__(
        self,
        email: str = settings.example_email,
        password: str = settings.example_password,
        name: str = settings.example_display_name,
    ):
        self.email = email
        self.password = password
        self.name = name

    def verify(self, email: str, password: str) -> bool:
        """Exact, case-sensitive comparison against the example pair"""
        return email == self.email and password == self.password

    def display_name(self, email: str) -> str:
        return self.name

    def rejection_message(self) -> str:
        return f"Invalid credentials. Use {self.email} / {self.password} to sign in."


# Global instance
credential_verifier = ExampleCredentialVerifier()
