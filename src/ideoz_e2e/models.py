"""Outcome snapshots returned by the page objects."""

from pydantic import BaseModel


class LoginState(BaseModel):
    """Login dialog state sampled after a submit."""

    modal_visible: bool
    url: str
    logged_in: bool


class SubmissionState(BaseModel):
    """Registration form state sampled after a submit."""

    form_visible: bool
    url: str
    redirected: bool


class PasswordFieldSecurity(BaseModel):
    """Attributes of the password input that matter for credential safety."""

    is_password_type: bool
    has_autocomplete: bool
