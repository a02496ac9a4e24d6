"""Reusable validated field types for request payloads.

Error messages are raised as ``PydanticCustomError`` so they reach the client
verbatim in the ``errors`` list of a 400 response.
"""

from typing import Annotated

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

NAME_MIN_LENGTH = 2
PASSWORD_MIN_LENGTH = 6


def _check_name(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("name_required", "Name is required")
    if len(value) < NAME_MIN_LENGTH:
        raise PydanticCustomError(
            "name_too_short", f"Name must be at least {NAME_MIN_LENGTH} characters long"
        )
    return value


def _check_email(value: str) -> str:
    value = value.strip()
    if not value:
        raise PydanticCustomError("email_required", "Email is required")
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_invalid", "Please provide a valid email") from None
    return value.lower()


def _check_password(value: str) -> str:
    if not value:
        raise PydanticCustomError("password_required", "Password is required")
    if len(value) < PASSWORD_MIN_LENGTH:
        raise PydanticCustomError(
            "password_too_short",
            f"Password must be at least {PASSWORD_MIN_LENGTH} characters long",
        )
    return value


def _check_password_present(value: str) -> str:
    if not value:
        raise PydanticCustomError("password_required", "Password is required")
    return value


Name = Annotated[str, AfterValidator(_check_name)]
Email = Annotated[str, AfterValidator(_check_email)]
Password = Annotated[str, AfterValidator(_check_password)]
LoginPassword = Annotated[str, AfterValidator(_check_password_present)]
