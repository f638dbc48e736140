"""Tests for API error classes."""

import pytest

from employee_api.core.errors import (
    APIError,
    DatabaseError,
    InvalidPageError,
    NotFoundError,
    ValidationError,
    status_text_for,
)


class TestAPIError:
    def test_has_code_status_text_and_detail(self):
        error = APIError(418, "I'm a teapot", "short and stout")
        assert error.code == 418
        assert error.status_text == "I'm a teapot"
        assert error.detail == "short and stout"
        assert str(error) == "short and stout"

    def test_is_exception(self):
        assert isinstance(APIError(400), Exception)

    def test_status_text_defaults_to_reason_phrase(self):
        assert APIError(404).status_text == "Not Found"
        assert APIError(503).status_text == "Service Unavailable"

    @pytest.mark.parametrize("code", [99, 600, -1, 1000])
    def test_out_of_range_code_falls_back_to_500(self, code):
        assert APIError(code).code == 500

    @pytest.mark.parametrize("code", [404.0, "404", None, True])
    def test_non_integer_code_falls_back_to_500(self, code):
        assert APIError(code).code == 500

    @pytest.mark.parametrize("code", [100, 599])
    def test_range_bounds_are_inclusive(self, code):
        assert APIError(code).code == code

    def test_reassigning_code_is_clamped(self):
        error = APIError(400)
        error.code = 700
        assert error.code == 500

    def test_public_detail_falls_back_to_status_text(self):
        assert APIError(404).public_detail == "Not Found"

    def test_to_dict(self):
        assert APIError(400, detail="bad").to_dict() == {"error": "bad"}


def test_status_text_for_unknown_code():
    assert status_text_for(599) == "Unknown Status"


def test_validation_error_is_400():
    error = ValidationError("per_page must be of type number")
    assert error.code == 400
    assert error.status_text == "Bad Request"
    assert error.public_detail == "per_page must be of type number"


def test_invalid_page_error_is_400_and_names_the_last_page():
    error = InvalidPageError(page=4, highest_valid_page=3)
    assert error.code == 400
    assert error.page == 4
    assert error.highest_valid_page == 3
    assert "highest valid page is 3" in error.detail


def test_not_found_error_is_404():
    assert NotFoundError().code == 404
    assert NotFoundError("nothing here").detail == "nothing here"


def test_database_error_hides_driver_detail_from_clients():
    error = DatabaseError("no such table: employees")
    assert error.code == 500
    assert error.detail == "no such table: employees"
    assert "no such table" not in error.public_detail
    assert error.to_dict() == {"error": DatabaseError.PUBLIC_MESSAGE}
