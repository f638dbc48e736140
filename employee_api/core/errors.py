"""API error classes.

Every failure of the employee listing is normalized into an APIError before
it leaves the service layer. The exception handlers in employee_api.main turn
them into `{"error": "<detail>"}` responses with the error's status code.

Taxonomy:
  ValidationError   400  malformed query input
  InvalidPageError  400  page beyond the last page of results
  NotFoundError     404  nothing matched
  DatabaseError     500  statement failed or returned an unexpected shape
"""

from http import HTTPStatus

DEFAULT_ERROR_CODE = HTTPStatus.INTERNAL_SERVER_ERROR.value


def status_text_for(code: int) -> str:
    """Return the standard reason phrase for a status code."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Unknown Status"


class APIError(Exception):
    """Base class for API errors.

    Attributes:
        code: HTTP status code, always within 100-599. Non-integer or
            out-of-range values fall back to 500.
        status_text: Short reason phrase. Defaults to the standard phrase
            for `code`.
        detail: Human-readable description of what went wrong.
    """

    def __init__(
        self,
        code: int = DEFAULT_ERROR_CODE,
        status_text: str | None = None,
        detail: str = "",
    ) -> None:
        super().__init__(detail)
        self.code = code
        self.status_text = status_text or status_text_for(self.code)
        self.detail = detail

    @property
    def code(self) -> int:
        return self._code

    @code.setter
    def code(self, value) -> None:
        # bool is an int subclass but never a status code
        if isinstance(value, bool) or not isinstance(value, int):
            self._code = DEFAULT_ERROR_CODE
            return
        if value < 100 or value > 599:
            self._code = DEFAULT_ERROR_CODE
            return
        self._code = value

    @property
    def public_detail(self) -> str:
        """Message that is safe to send to the client."""
        return self.detail or self.status_text

    def to_dict(self) -> dict:
        return {"error": self.public_detail}


class ValidationError(APIError):
    """Query input could not be converted to the expected type (400)."""

    def __init__(self, detail: str) -> None:
        super().__init__(code=HTTPStatus.BAD_REQUEST.value, detail=detail)


class InvalidPageError(APIError):
    """Requested page lies past the last page of matching records (400)."""

    def __init__(self, page: int, highest_valid_page: int) -> None:
        super().__init__(
            code=HTTPStatus.BAD_REQUEST.value,
            detail=(
                f"Page {page} is out of range; "
                f"the highest valid page is {highest_valid_page}"
            ),
        )
        self.page = page
        self.highest_valid_page = highest_valid_page


class NotFoundError(APIError):
    """No records matched the request (404)."""

    def __init__(self, detail: str = "No matching records") -> None:
        super().__init__(code=HTTPStatus.NOT_FOUND.value, detail=detail)


class DatabaseError(APIError):
    """A statement failed or produced a result of the wrong shape (500).

    `detail` keeps the driver message for logs. Clients only ever receive
    the generic `public_detail`.
    """

    PUBLIC_MESSAGE = "The employee store could not complete the request"

    def __init__(self, detail: str) -> None:
        super().__init__(code=HTTPStatus.INTERNAL_SERVER_ERROR.value, detail=detail)

    @property
    def public_detail(self) -> str:
        return self.PUBLIC_MESSAGE
