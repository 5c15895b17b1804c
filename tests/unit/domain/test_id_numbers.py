"""Tests for ages derived from identity numbers."""

from datetime import date

from bizhub.domain.schools import age_from_id_number

TODAY = date(2026, 3, 16)


class TestAgeFromIdNumber:
    def test_birthday_already_passed(self) -> None:
        assert age_from_id_number("1003155009087", TODAY) == 16

    def test_birthday_still_to_come(self) -> None:
        assert age_from_id_number("1003175009087", TODAY) == 15

    def test_future_two_digit_year_belongs_to_last_century(self) -> None:
        assert age_from_id_number("8506015009087", TODAY) == 40

    def test_invalid_numbers_give_zero(self) -> None:
        assert age_from_id_number(None, TODAY) == 0
        assert age_from_id_number("12", TODAY) == 0
        assert age_from_id_number("ABCDEF0000000", TODAY) == 0
        assert age_from_id_number("0513325009087", TODAY) == 0
