import pytest
from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError

from crm_core.app.use_cases.errors import server_error_boundary
from crm_core.libs.result import Return


@server_error_boundary("Failing operation")
async def failing(exc):
    raise exc


@server_error_boundary("Working operation")
async def working():
    return Return.ok("done")


@pytest.mark.asyncio
async def test_storage_errors_become_server_error(caplog):
    result = await failing(IntegrityError("INSERT", {}, Exception("duplicate")))

    assert result.error.code == "SERVER_ERROR"
    assert result.error.message == "Internal server error"
    assert "Failing operation failed" in caplog.text


@pytest.mark.asyncio
async def test_framework_exceptions_propagate():
    with pytest.raises(HTTPException):
        await failing(HTTPException(status_code=401))


@pytest.mark.asyncio
async def test_results_pass_through():
    assert (await working()).value == "done"
