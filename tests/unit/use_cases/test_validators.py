import pytest

from crm_core.app.use_cases.auth.validators import (
    EMAIL_MAX_LENGTH,
    validate_email,
    validate_name,
    validate_password,
)
from crm_core.app.use_cases.errors import VALIDATION_ERROR


@pytest.mark.parametrize(
    "email",
    ["owner@acme.com", "Jane.Doe@Example.COM", "  padded@acme.com  ", "first+tag@sub.acme.com"],
)
def test_accepts_well_formed_addresses(email):
    assert validate_email(email).is_ok()


@pytest.mark.parametrize(
    "email",
    [
        "not-an-email",
        "two@@acme.com",
        "trailing-dot@acme.com.",
        "space in@acme.com",
        "nodomain@",
        "@acme.com",
        "dots..twice@acme.com",
        "owner@acme",
    ],
)
def test_rejects_malformed_addresses(email):
    result = validate_email(email)

    assert result.is_err()
    assert result.error.code == VALIDATION_ERROR
    assert result.error.message == "Invalid email"


@pytest.mark.parametrize("email", ["", "   "])
def test_email_is_required(email):
    result = validate_email(email)

    assert result.error.message == "Email is required"


def test_overlong_email_is_rejected():
    email = "a" * EMAIL_MAX_LENGTH + "@acme.com"

    assert validate_email(email).error.code == VALIDATION_ERROR


def test_password_bounds():
    assert validate_password("short").is_err()
    assert validate_password("x" * 101).is_err()
    assert validate_password("long enough").is_ok()
    assert validate_password("sixsix", min_length=6).is_ok()


def test_name_bounds():
    assert validate_name("", "Name").is_ok()
    assert validate_name("", "Workspace name", required=True).error.message == (
        "Workspace name is required"
    )
    assert validate_name("x" * 101, "Name").is_err()
