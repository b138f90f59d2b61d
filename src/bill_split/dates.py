"""Bill date formatting."""

from .exceptions import DateFormatError


def format_date(date_text: str) -> str:
    """
    Render a YYYY-MM-DD date as YYYY年M月D日.

    All three parts must be numeric. Month and day lose their leading zeros;
    the year is kept as written.

    Example:
        format_date("2024-01-05") == "2024年1月5日"

    Raises:
        DateFormatError: If the text is not three numeric '-'-separated parts
    """
    parts = date_text.split("-")
    if len(parts) != 3:
        raise DateFormatError(date_text)

    year, month, day = parts
    try:
        int(year, 10)
        return f"{year}年{int(month, 10)}月{int(day, 10)}日"
    except ValueError as e:
        raise DateFormatError(date_text) from e
