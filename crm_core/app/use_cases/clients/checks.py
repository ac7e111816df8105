"""
Field rules shared by client creation and update.
"""

from typing import Optional

from crm_core.app.use_cases.auth.validators import validate_email
from crm_core.app.use_cases.errors import NOT_FOUND, VALIDATION_ERROR
from crm_core.domain.entities import ClientStatus
from crm_core.libs.result import Error, Result, Return

NAME_MAX_LENGTH = 255
PHONE_MAX_LENGTH = 50
NOTE_MAX_LENGTH = 5000


def client_not_found() -> Error:
    return Error(NOT_FOUND, "Client not found")


def blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


def parse_status(value: str) -> Result[ClientStatus]:
    try:
        return Return.ok(ClientStatus(value.upper()))
    except ValueError:
        return Return.err(
            Error(VALIDATION_ERROR, "Status must be one of PROSPECT, ACTIVE, INACTIVE")
        )


def check_fields(fields: dict) -> Result[dict]:
    """
    Validate and normalize the provided subset of client fields.

    Empty email, phone and note become None. Tags are trimmed and
    de-duplicated, keeping their first position.
    """
    cleaned = dict(fields)

    if "name" in cleaned:
        name = (cleaned["name"] or "").strip()
        if not name:
            return Return.err(Error(VALIDATION_ERROR, "Name is required"))
        if len(name) > NAME_MAX_LENGTH:
            return Return.err(
                Error(VALIDATION_ERROR, f"Name must be at most {NAME_MAX_LENGTH} characters")
            )
        cleaned["name"] = name

    if "email" in cleaned:
        cleaned["email"] = blank_to_none(cleaned["email"])
        if cleaned["email"] is not None:
            validation = validate_email(cleaned["email"])
            if validation.is_err():
                return Return.err(validation.error)

    if "phone" in cleaned:
        cleaned["phone"] = blank_to_none(cleaned["phone"])
        if cleaned["phone"] and len(cleaned["phone"]) > PHONE_MAX_LENGTH:
            return Return.err(
                Error(VALIDATION_ERROR, f"Phone must be at most {PHONE_MAX_LENGTH} characters")
            )

    if "note" in cleaned:
        cleaned["note"] = blank_to_none(cleaned["note"])
        if cleaned["note"] and len(cleaned["note"]) > NOTE_MAX_LENGTH:
            return Return.err(
                Error(VALIDATION_ERROR, f"Note must be at most {NOTE_MAX_LENGTH} characters")
            )

    if "status" in cleaned:
        if cleaned["status"] is None:
            return Return.err(Error(VALIDATION_ERROR, "Status cannot be empty"))
        status = parse_status(cleaned["status"])
        if status.is_err():
            return Return.err(status.error)
        cleaned["status"] = status.value

    if "tags" in cleaned:
        tags = []
        for tag in cleaned["tags"] or []:
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        cleaned["tags"] = tags

    return Return.ok(cleaned)
