"""Sign-in form state, validation and submission, independent of the UI toolkit."""

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

import requests
from pydantic import BaseModel, StrictBool, StrictStr, ValidationError

from app.models.auth import Credentials, first_errors

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "/api/auth/mock-signin"
SUCCESS_DESTINATION = "/dashboard"
SERVER_ERROR_FALLBACK = "Sign in failed. Please try again."
TRANSPORT_ERROR_FALLBACK = "Something went wrong. Please try again."


class TextField(BaseModel):
    """Value of a free-text input (email, password)"""

    value: StrictStr


class ToggleField(BaseModel):
    """Value of a checkbox input (remember me)"""

    value: StrictBool


FieldValue = Union[TextField, ToggleField]

FIELD_KINDS = {
    "email": TextField,
    "password": TextField,
    "remember": ToggleField,
}


class FormState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    NAVIGATING_AWAY = "navigating_away"


class SubmissionOutcome(str, Enum):
    """How a call to SignInForm.submit() ended"""

    VALIDATION_REJECTED = "validation_rejected"
    SUCCESS = "success"
    CREDENTIAL_REJECTED = "credential_rejected"
    TRANSPORT_FAILURE = "transport_failure"
    IGNORED = "ignored"  # a request was already in flight


class SignInForm:
    """
    Holds the sign-in form for one page visit.

    Field updates clear that field's error and any banner error. submit()
    validates locally, posts the credentials to the sign-in API and either
    navigates to the dashboard or records a banner error. Every failure is
    converted into form state; nothing is raised to the caller.
    """

    def __init__(
        self,
        api_base: str = "http://localhost:8000",
        session: Optional[Any] = None,
        navigate: Optional[Callable[[str], None]] = None,
        timeout: Optional[float] = None,
    ):
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()
        self._navigate = navigate

        self._values: Dict[str, FieldValue] = {
            "email": TextField(value=""),
            "password": TextField(value=""),
            "remember": ToggleField(value=False),
        }
        self._errors: Dict[str, Optional[str]] = {}
        self._server_error: Optional[str] = None
        self._state = FormState.IDLE
        self.signed_in_user: Optional[Dict[str, Any]] = None
        self.navigated_to: Optional[str] = None

    # --- State accessors ---

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state is FormState.SUBMITTING

    @property
    def submit_disabled(self) -> bool:
        """The submit control is only disabled while a request is in flight."""
        return self.is_loading

    @property
    def errors(self) -> Dict[str, str]:
        """Current field-level errors, without cleared entries."""
        return {field: msg for field, msg in self._errors.items() if msg}

    def error_for(self, field: str) -> Optional[str]:
        return self._errors.get(field)

    @property
    def server_error(self) -> Optional[str]:
        """Banner-level error from the last submission, if any."""
        return self._server_error

    @property
    def values(self) -> Dict[str, Union[str, bool]]:
        return {field: item.value for field, item in self._values.items()}

    @property
    def endpoint(self) -> str:
        return f"{self.api_base}{SIGN_IN_PATH}"

    def payload(self) -> Dict[str, Union[str, bool]]:
        """Request body sent to the sign-in API."""
        return self.values

    # --- Operations ---

    def update_field(self, field: str, value: Union[FieldValue, str, bool]) -> None:
        """
        Sets a field's value, clearing that field's error and the banner error.

        Accepts a TextField/ToggleField or a raw value matching the field's
        kind. A value of the wrong kind raises TypeError.
        """
        kind = FIELD_KINDS.get(field)
        if kind is None:
            raise ValueError(f"Unknown form field: {field}")

        if not isinstance(value, BaseModel):
            try:
                value = kind(value=value)
            except ValidationError as e:
                raise TypeError(f"Field '{field}' expects a {kind.__name__}") from e
        if not isinstance(value, kind):
            raise TypeError(f"Field '{field}' expects a {kind.__name__}")

        self._values[field] = value
        self._errors.pop(field, None)
        self._server_error = None

    def validate(self) -> bool:
        """Applies the credentials schema; records the first message per field."""
        try:
            Credentials.model_validate(self.values)
        except ValidationError as e:
            self._errors = dict(first_errors(e))
            return False

        self._errors = {}
        return True

    def submit(self) -> SubmissionOutcome:
        """Validates and, if valid, sends one sign-in request."""
        if self._state is FormState.SUBMITTING:
            logger.info("Ignoring submit: a sign-in request is already in flight")
            return SubmissionOutcome.IGNORED

        self._state = FormState.VALIDATING
        if not self.validate():
            self._state = FormState.IDLE
            logger.info(f"Sign-in blocked by validation: {sorted(self.errors)}")
            return SubmissionOutcome.VALIDATION_REJECTED

        self._state = FormState.SUBMITTING
        self._server_error = None
        outcome = SubmissionOutcome.TRANSPORT_FAILURE
        try:
            response = self._session.post(
                self.endpoint,
                json=self.payload(),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
            body = response.json()
            if not isinstance(body, dict):
                body = {}

            if 200 <= response.status_code < 300:
                self.signed_in_user = body.get("user")
                outcome = SubmissionOutcome.SUCCESS
            else:
                message = body.get("message")
                if not isinstance(message, str) or not message:
                    message = SERVER_ERROR_FALLBACK
                self._server_error = message
                outcome = SubmissionOutcome.CREDENTIAL_REJECTED
        except Exception as e:
            logger.warning(f"Sign-in request failed: {e}")
            self._server_error = str(e) or TRANSPORT_ERROR_FALLBACK
        finally:
            self._state = FormState.IDLE

        logger.info(f"Sign-in submission finished: {outcome.value}")
        if outcome is SubmissionOutcome.SUCCESS:
            self._state = FormState.NAVIGATING_AWAY
            self.navigated_to = SUCCESS_DESTINATION
            if self._navigate is not None:
                self._navigate(SUCCESS_DESTINATION)
        return outcome
