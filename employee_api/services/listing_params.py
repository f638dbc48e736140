"""
Listing Parameter Validation & Normalization
=============================================================================
CONCEPT: Typed values past the boundary

Query strings arrive as `str | None` (or numbers when called from code).
validate_listing_params() is the only place that looks at those raw values;
everything downstream works with a frozen ListingParams whose fields are
already typed and bounded.

RULES:
  keyword   absent, blank or "*"          -> no filter
            anything else                 -> trimmed substring
  sex       trimmed + lowercased; only "male"/"female" filter,
            any other value is ignored (not rejected)
  per_page  must be a finite number, else ValidationError
            < 1 -> 10; fractions are floored
  page      must be a finite number, else ValidationError
            < 1 -> 1; fractions are floored

Blank numeric values count as absent and take the defaults.
=============================================================================
"""

import math
from dataclasses import dataclass
from typing import Any

from employee_api.core.errors import ValidationError
from employee_api.db.models import SEX_VALUES
from employee_api.observability.logging import get_logger

logger = get_logger(__name__)

DEFAULT_PER_PAGE = 10
DEFAULT_PAGE = 1
WILDCARD = "*"


@dataclass(frozen=True)
class ListingParams:
    """Validated inputs of one employee listing request."""

    keyword: str | None = None
    sex: str | None = None
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


def _require_string(name: str, value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be of type string")
    return value


def _parse_number(name: str, value: Any) -> float | None:
    """Parse a finite number from a query value. None means 'not given'."""
    if value is None:
        return None
    # bool is an int subclass; True is not a page number
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be of type number")
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            raise ValidationError(f"{name} must be of type number") from None
    elif isinstance(value, str):
        if not value.strip():
            return None
        try:
            number = float(value.strip())
        except ValueError:
            raise ValidationError(f"{name} must be of type number") from None
    else:
        raise ValidationError(f"{name} must be of type number")

    if not math.isfinite(number):
        raise ValidationError(f"{name} must be of type number")
    return number


def normalize_keyword(value: Any) -> str | None:
    keyword = _require_string("keyword", value)
    if keyword is None:
        return None
    keyword = keyword.strip()
    if not keyword or keyword == WILDCARD:
        return None
    return keyword


def normalize_sex(value: Any) -> str | None:
    sex = _require_string("sex", value)
    if sex is None:
        return None
    sex = sex.strip().lower()
    if sex in SEX_VALUES:
        return sex
    if sex:
        # Unrecognized values are documented behavior: the filter is dropped.
        logger.debug("sex_filter_ignored", value=sex)
    return None


def normalize_per_page(value: Any) -> int:
    number = _parse_number("per_page", value)
    if number is None or number < 1:
        return DEFAULT_PER_PAGE
    return math.floor(number)


def normalize_page(value: Any) -> int:
    number = _parse_number("page", value)
    if number is None or number < 1:
        return DEFAULT_PAGE
    return math.floor(number)


def validate_listing_params(
    keyword: Any = None,
    sex: Any = None,
    per_page: Any = None,
    page: Any = None,
) -> ListingParams:
    """
    Convert raw listing inputs into ListingParams.

    Raises:
        ValidationError: a value has the wrong type, or a numeric value is
            not a finite number.
    """
    return ListingParams(
        keyword=normalize_keyword(keyword),
        sex=normalize_sex(sex),
        per_page=normalize_per_page(per_page),
        page=normalize_page(page),
    )
