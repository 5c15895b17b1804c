"""Ages derived from national identity numbers."""

from datetime import date


def age_from_id_number(id_number: str | None, today: date | None = None) -> int:
    """
    Work out an age in years from an identity number.

    The number starts with the birth date as YYMMDD. Two-digit years that
    would lie in the future are read as 19YY. Numbers without a valid
    leading date give 0.

    Example:
        age_from_id_number("1003155009087", date(2026, 3, 16)) == 16
    """
    today = today or date.today()
    if not id_number or len(id_number) < 6 or not id_number[:6].isdigit():
        return 0

    year = 2000 + int(id_number[0:2])
    if year > today.year:
        year -= 100
    try:
        born = date(year, int(id_number[2:4]), int(id_number[4:6]))
    except ValueError:
        return 0

    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return max(age, 0)
