"""
Date fields — Примитивы для одного компонента MRZ-даты

Компонент даты в MRZ (год, месяц, день) — это два символа фиксированной ширины.
Модуль содержит единственный допустимый способ:
- разбора сырого текста в число (parse_field)
- форматирования числа в сырой текст (format_field)
- проверки диапазонов (invalid_reason, is_valid_triplet)
- упаковки даты в ключ сортировки (composite_key)

Век года НЕ определяется: год хранится как есть, 0-99.
Количество дней в месяце НЕ проверяется: день валиден в диапазоне 1-31.
"""

import logging
import re
from typing import Final, Optional


logger = logging.getLogger(__name__)


# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================
YEAR_MIN: Final[int] = 0
YEAR_MAX: Final[int] = 99

MONTH_MIN: Final[int] = 1
MONTH_MAX: Final[int] = 12

# Без учёта месяца и високосного года
DAY_MIN: Final[int] = 1
DAY_MAX: Final[int] = 31

# Значение поля, которое не удалось разобрать
PARSE_FAILURE_SENTINEL: Final[int] = -1

# Ширина поля в MRZ (символов)
FIELD_WIDTH: Final[int] = 2

# Знак и десятичные цифры (включая не-ASCII, например арабские), без пробелов и "_"
_DECIMAL_RE: Final[re.Pattern] = re.compile(r"[+-]?\d+")

# Допустимый диапазон разобранного значения (знаковое 32-битное поле);
# всё за его пределами считается ошибкой разбора
PARSED_VALUE_MIN: Final[int] = -(2**31)
PARSED_VALUE_MAX: Final[int] = 2**31 - 1


# =============================================================================
# РАЗБОР И ФОРМАТИРОВАНИЕ
# =============================================================================


def parse_field(raw: str, field_name: str, log=None) -> int:
    """
    Разбор сырого компонента даты в десятичное число.

    Ошибка разбора не пробрасывается: поле получает PARSE_FAILURE_SENTINEL,
    а событие пишется в лог на уровне DEBUG.

    Args:
        raw: Сырой текст поля (например, '02')
        field_name: Имя поля для диагностики ('year', 'month', 'day')
        log: Приёмник диагностики с методом debug(); по умолчанию логгер модуля

    Returns:
        Разобранное число или PARSE_FAILURE_SENTINEL
    """
    if _DECIMAL_RE.fullmatch(raw) is None:
        (log or logger).debug("Failed to parse MRZ date %s %r", field_name, raw)
        return PARSE_FAILURE_SENTINEL
    value = int(raw)
    if not PARSED_VALUE_MIN <= value <= PARSED_VALUE_MAX:
        (log or logger).debug("Failed to parse MRZ date %s %r: out of range", field_name, raw)
        return PARSE_FAILURE_SENTINEL
    return value


def format_field(value: int) -> str:
    """
    Форматирование числа в сырой текст поля.

    Дополняет нулями до FIELD_WIDTH, не обрезает: 7 -> '07', 123 -> '123'.
    """
    return f"{value:0{FIELD_WIDTH}d}"


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def invalid_reason(year: int, month: int, day: int) -> Optional[str]:
    """
    Причина невалидности даты.

    Проверяет поля по порядку год → месяц → день и сообщает о первом нарушении.

    Returns:
        Сообщение о первом поле вне диапазона или None, если дата валидна
    """
    if not YEAR_MIN <= year <= YEAR_MAX:
        return f"Parameter year: invalid value {year}: must be {YEAR_MIN}..{YEAR_MAX}"
    if not MONTH_MIN <= month <= MONTH_MAX:
        return f"Parameter month: invalid value {month}: must be {MONTH_MIN}..{MONTH_MAX}"
    if not DAY_MIN <= day <= DAY_MAX:
        return f"Parameter day: invalid value {day}: must be {DAY_MIN}..{DAY_MAX}"
    return None


def is_valid_triplet(year: int, month: int, day: int) -> bool:
    """True если все три компонента в допустимых диапазонах."""
    return invalid_reason(year, month, day) is None


# =============================================================================
# СОРТИРОВКА
# =============================================================================


def composite_key(year: int, month: int, day: int) -> int:
    """
    Упаковка даты в одно число для сравнения.

    year*10000 + month*100 + day. Год — плоская ось 0-99 без поправки на век,
    поэтому 99 сортируется после 01.
    """
    return year * 10000 + month * 100 + day
