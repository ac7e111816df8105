from email_validator import EmailNotValidError
from email_validator import validate_email as check_email_address

from crm_core.app.use_cases.errors import VALIDATION_ERROR
from crm_core.libs.result import Error, Result, Return

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 100
SIGNUP_PASSWORD_MIN_LENGTH = 6
EMAIL_MAX_LENGTH = 255
NAME_MAX_LENGTH = 100


def validate_password(
    password: str, min_length: int = PASSWORD_MIN_LENGTH
) -> Result[None]:
    """
    Validate password complexity.

    Args:
        password: Password to validate
        min_length: Minimum accepted length

    Returns:
        Result with None if valid, or VALIDATION_ERROR
    """
    if len(password) < min_length:
        return Return.err(
            Error(
                VALIDATION_ERROR,
                f"Password must be at least {min_length} characters",
            )
        )

    if len(password) > PASSWORD_MAX_LENGTH:
        return Return.err(
            Error(
                VALIDATION_ERROR,
                f"Password must be at most {PASSWORD_MAX_LENGTH} characters",
            )
        )

    return Return.ok(None)


def validate_email(email: str) -> Result[None]:
    if not email or not email.strip():
        return Return.err(Error(VALIDATION_ERROR, "Email is required"))

    if len(email) > EMAIL_MAX_LENGTH:
        return Return.err(Error(VALIDATION_ERROR, "Invalid email"))

    try:
        check_email_address(email.strip(), check_deliverability=False)
    except EmailNotValidError:
        return Return.err(Error(VALIDATION_ERROR, "Invalid email"))

    return Return.ok(None)


def validate_name(value: str, field: str, required: bool = False) -> Result[None]:
    if required and not (value and value.strip()):
        return Return.err(Error(VALIDATION_ERROR, f"{field} is required"))

    if value and len(value) > NAME_MAX_LENGTH:
        return Return.err(
            Error(VALIDATION_ERROR, f"{field} must be at most {NAME_MAX_LENGTH} characters")
        )

    return Return.ok(None)
