"""API endpoint for the mock sign-in check."""

import logging
from fastapi import APIRouter, Depends, Request
from pydantic import ValidationError
from app.core.auth.credential_verifier import CredentialVerifier, credential_verifier
from app.core.exceptions import SignInError
from app.models.auth import Credentials, SignInResponse, SignInUser, first_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["authentication"])

INVALID_BODY_MESSAGE = "Invalid request body"


def get_credential_verifier() -> CredentialVerifier:
    """FastAPI dependency returning the active credential verifier."""
    return credential_verifier


async def parse_credentials(request: Request) -> Credentials:
    """
    Reads the raw body and validates it against the Credentials schema.
    Raises SignInError (400) for non-JSON bodies or schema violations.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.info("Rejected sign-in request: body is not valid JSON")
        raise SignInError(status_code=400, message=INVALID_BODY_MESSAGE)

    try:
        return Credentials.model_validate(payload)
    except ValidationError as e:
        messages = first_errors(e)
        message = next(iter(messages.values()), None) or INVALID_BODY_MESSAGE
        logger.info(f"Rejected sign-in request: {message}")
        raise SignInError(status_code=400, message=message)


@router.post(
    "/mock-signin", response_model=SignInResponse, response_model_exclude_none=True
)
async def mock_signin(
    credentials: Credentials = Depends(parse_credentials),
    verifier: CredentialVerifier = Depends(get_credential_verifier),
):
    """Check the submitted pair against the example account"""
    if not verifier.verify(credentials.email, credentials.password):
        logger.info(f"Sign-in rejected for {credentials.email}")
        raise SignInError(status_code=401, message=verifier.rejection_message())

    logger.info(f"Sign-in accepted for {credentials.email}")
    return SignInResponse(
        ok=True,
        user=SignInUser(
            email=credentials.email, name=verifier.display_name(credentials.email)
        ),
    )
