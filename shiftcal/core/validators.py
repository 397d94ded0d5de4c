import datetime

from shiftcal.core.schedule.errors import InvalidDateError


def validate_year_month(year: int, month: int | None) -> None:
    """
    Validate year/month query parameters for month and year exports.

    Raises:
        InvalidDateError: If the combination is not a real calendar month
            (the API maps this to HTTP 400)
    """
    try:
        datetime.date(year, month or 1, 1)
    except ValueError as e:
        raise InvalidDateError(f"{year}-{month}", str(e)) from e
