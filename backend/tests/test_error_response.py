import logging
import pytest
from fastapi import HTTPException

from venue_booking.utils.errors import error_response


def test_error_response_logs(caplog):
    caplog.set_level(logging.ERROR, logger="venue_booking.utils.errors")
    with pytest.raises(HTTPException):
        raise error_response("Invalid", {"field": "bad"})
    assert any(
        "Invalid" in r.getMessage() and "'field': 'bad'" in r.getMessage()
        for r in caplog.records
    )


def test_error_response_defaults():
    exc = error_response("Incomplete time window")
    assert exc.status_code == 422
    assert exc.detail == {"message": "Incomplete time window", "field_errors": {}}
