import pytest

from crm_core.api.error import FORBIDDEN_MESSAGE, ClientError, ServerError, raise_for_error
from crm_core.libs.result import Error


@pytest.mark.parametrize(
    "code, status_code",
    [
        ("VALIDATION_ERROR", 400),
        ("INVALID_CREDENTIALS", 401),
        ("USED", 409),
        ("LAST_OWNER_VIOLATION", 409),
        ("EXPIRED", 410),
        ("RATE_LIMITED", 429),
    ],
)
def test_client_errors(code, status_code):
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(Error(code, "details"))

    assert exc_info.value.status_code == status_code
    assert exc_info.value.base_error.message == "details"


@pytest.mark.parametrize("code", ["UNAUTHORIZED", "NOT_FOUND"])
def test_tenant_scoped_errors_share_message(code):
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(Error(code, "Invitation not found"))

    assert exc_info.value.status_code == 403
    assert exc_info.value.base_error.message == FORBIDDEN_MESSAGE


def test_unknown_codes_are_server_errors():
    with pytest.raises(ServerError):
        raise_for_error(Error("SERVER_ERROR", "Internal server error"))
