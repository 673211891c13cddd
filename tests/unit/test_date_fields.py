"""
Тесты для примитивов компонентов MRZ-даты

Проверяет:
1. Разбор сырого текста и sentinel при ошибке
2. Дополнение нулями при форматировании
3. Проверку диапазонов (без учёта дней в месяце)
4. Упаковку в ключ сортировки
"""

from unittest.mock import Mock

import pytest

from src.core.domain.date_fields import (
    DAY_MAX,
    MONTH_MAX,
    PARSE_FAILURE_SENTINEL,
    PARSED_VALUE_MAX,
    PARSED_VALUE_MIN,
    YEAR_MAX,
    composite_key,
    format_field,
    invalid_reason,
    is_valid_triplet,
    parse_field,
)


class TestParseField:
    """Тесты для parse_field"""

    @pytest.mark.parametrize(
        "raw, expected",
        [("00", 0), ("02", 2), ("99", 99), ("011", 11), ("7", 7), ("+5", 5), ("-1", -1)],
    )
    def test_decimal_text_parsed(self, raw: str, expected: int) -> None:
        """Десятичный текст разбирается в число"""
        assert parse_field(raw, "year") == expected

    @pytest.mark.parametrize("raw", ["ab", "", "<<", "1a", " 1", "1_0", "--1", "1.0"])
    def test_non_decimal_gives_sentinel(self, raw: str) -> None:
        """Не-десятичный текст даёт sentinel -1"""
        assert parse_field(raw, "year") == PARSE_FAILURE_SENTINEL

    def test_unicode_decimal_digits(self) -> None:
        """Десятичные цифры других письменностей разбираются как цифры"""
        assert parse_field("\u0661\u0662", "year") == 12
        assert parse_field("\u0968\u0968", "day") == 22

    def test_superscript_not_a_digit(self) -> None:
        assert parse_field("\u00b2", "day") == PARSE_FAILURE_SENTINEL

    def test_signed_32_bit_range(self) -> None:
        assert parse_field(str(PARSED_VALUE_MAX), "year") == PARSED_VALUE_MAX
        assert parse_field(str(PARSED_VALUE_MIN), "year") == PARSED_VALUE_MIN

    @pytest.mark.parametrize("raw", ["99999999999", "2147483648", "-2147483649"])
    def test_out_of_range_gives_sentinel(self, raw: str) -> None:
        log = Mock()
        assert parse_field(raw, "year", log) == PARSE_FAILURE_SENTINEL
        log.debug.assert_called_once()

    def test_failure_logged_to_injected_sink(self) -> None:
        """Ошибка разбора пишется в переданный приёмник на уровне DEBUG"""
        log = Mock()
        parse_field("ab", "month", log)
        log.debug.assert_called_once()
        assert "month" in log.debug.call_args.args
        assert "ab" in log.debug.call_args.args

    def test_success_not_logged(self) -> None:
        """Успешный разбор ничего не пишет"""
        log = Mock()
        parse_field("12", "month", log)
        log.debug.assert_not_called()


class TestFormatField:
    """Тесты для format_field"""

    def test_zero_padded(self) -> None:
        assert format_field(0) == "00"
        assert format_field(7) == "07"
        assert format_field(28) == "28"

    def test_wide_value_not_truncated(self) -> None:
        """Значение шире двух символов не обрезается"""
        assert format_field(123) == "123"

    def test_negative(self) -> None:
        assert format_field(-1) == "-1"


class TestRangeValidation:
    """Тесты для invalid_reason / is_valid_triplet"""

    def test_bounds_valid(self) -> None:
        assert is_valid_triplet(0, 1, 1)
        assert is_valid_triplet(YEAR_MAX, MONTH_MAX, DAY_MAX)

    @pytest.mark.parametrize(
        "year, month, day",
        [(100, 1, 1), (-1, 1, 1), (1, 0, 1), (1, 13, 1), (1, 1, 0), (1, 1, 32)],
    )
    def test_out_of_range_invalid(self, year: int, month: int, day: int) -> None:
        assert not is_valid_triplet(year, month, day)

    def test_day_not_checked_against_month(self) -> None:
        """31 апреля и 30 февраля валидны: дни в месяце не проверяются"""
        assert is_valid_triplet(11, 4, 31)
        assert is_valid_triplet(11, 2, 30)

    def test_reason_names_first_bad_field(self) -> None:
        """Причина указывает первое поле вне диапазона"""
        assert invalid_reason(11, 2, 28) is None
        assert "year" in invalid_reason(100, 13, 32)
        assert "month" in invalid_reason(11, 13, 32)
        assert "day" in invalid_reason(11, 12, 32)


class TestCompositeKey:
    """Тесты для composite_key"""

    def test_packing(self) -> None:
        assert composite_key(11, 2, 28) == 110228
        assert composite_key(0, 1, 1) == 101

    def test_year_dominates(self) -> None:
        assert composite_key(1, 12, 31) < composite_key(2, 1, 1)

    def test_sentinel_sorts_first(self) -> None:
        assert composite_key(-1, 1, 1) < composite_key(0, 1, 1)
