"""
MrzDate — Модель даты из Machine-Readable Zone

Immutable Pydantic модель одного поля даты MRZ (дата рождения, срок действия).
Хранит одновременно:
- разобранные числа (year, month, day) — для сравнения и сортировки
- сырой текст (raw_year, raw_month, raw_day) — для точной обратной сериализации

Невалидная дата — это не ошибка, а свойство значения: конструкторы никогда не
падают на плохих данных, проверка делается через is_date_valid().

Две семантики сравнения намеренно разделены:
- == сравнивает все шесть полей (сырой текст входит в идентичность)
- compare_to / <, <=, >, >= сравнивают только числа
"""

import logging
from typing import Any, Mapping

from pydantic import BaseModel, Field, PrivateAttr

from src.core.domain.date_fields import (
    composite_key,
    format_field,
    invalid_reason,
    is_valid_triplet,
    parse_field,
)


logger = logging.getLogger(__name__)


class MrzDate(BaseModel):
    """
    Дата MRZ: YYMMDD с неоднозначным веком.

    Год хранится как есть (0-99), перевод в полный год не определён.

    Immutable модель (frozen=True). Создаётся через from_ints / from_raw,
    прямой конструктор требует все шесть полей (используется при десериализации).
    """

    # Разобранные значения (-1 если поле не удалось разобрать)
    year: int = Field(..., description="Год, 00-99")
    month: int = Field(..., description="Месяц, 1-12")
    day: int = Field(..., description="День, 1-31")

    # Сырой текст поля из MRZ, хранится дословно
    raw_year: str = Field(..., description="Сырой текст года")
    raw_month: str = Field(..., description="Сырой текст месяца")
    raw_day: str = Field(..., description="Сырой текст дня")

    _is_date_valid: bool = PrivateAttr(default=False)

    model_config = {"frozen": True}  # Immutable

    def model_post_init(self, __context: Any) -> None:
        # Вычисляется один раз, только из чисел; __setattr__ запрещает запись
        self.__pydantic_private__["_is_date_valid"] = is_valid_triplet(
            self.year, self.month, self.day
        )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "_is_date_valid":
            raise AttributeError("MrzDate validity is fixed at construction")
        super().__setattr__(name, value)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "MrzDate":
        """
        Копия модели.

        С update собирается новая модель через валидацию: типы полей
        проверяются, валидность вычисляется заново.
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self).model_validate({**self.model_dump(), **update})

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_ints(cls, year: int, month: int, day: int, *, log=None) -> "MrzDate":
        """
        Создание даты из чисел.

        Диапазоны не проверяются на входе, сырой текст получается дополнением
        нулями до двух символов (7 -> '07', 123 -> '123').

        Args:
            year: Год
            month: Месяц
            day: День
            log: Приёмник диагностики с методом debug(); по умолчанию логгер модуля

        Returns:
            MrzDate (возможно невалидная)
        """
        date = cls(
            year=year,
            month=month,
            day=day,
            raw_year=format_field(year),
            raw_month=format_field(month),
            raw_day=format_field(day),
        )
        date._log_if_invalid(log or logger)
        return date

    @classmethod
    def from_raw(cls, raw_year: str, raw_month: str, raw_day: str, *, log=None) -> "MrzDate":
        """
        Создание даты из сырого текста MRZ.

        Каждое поле разбирается независимо. Поле, которое не удалось разобрать,
        получает -1 и пишется в лог; объект создаётся всегда.

        Args:
            raw_year: Сырой текст года (например, '11')
            raw_month: Сырой текст месяца (например, '02')
            raw_day: Сырой текст дня (например, '28')
            log: Приёмник диагностики с методом debug(); по умолчанию логгер модуля

        Returns:
            MrzDate (возможно невалидная)
        """
        log = log or logger
        date = cls(
            year=parse_field(raw_year, "year", log),
            month=parse_field(raw_month, "month", log),
            day=parse_field(raw_day, "day", log),
            raw_year=raw_year,
            raw_month=raw_month,
            raw_day=raw_day,
        )
        date._log_if_invalid(log)
        return date

    def _log_if_invalid(self, log) -> None:
        reason = invalid_reason(self.year, self.month, self.day)
        if reason is not None:
            log.debug(reason)

    # =========================================================================
    # ЗАПРОСЫ
    # =========================================================================

    def is_date_valid(self) -> bool:
        """
        Валидность даты.

        Returns:
            True если year 0-99, month 1-12, day 1-31 (без проверки дней в месяце)
        """
        return self._is_date_valid

    def to_mrz(self) -> str:
        """
        Обратная сериализация в MRZ.

        Returns:
            raw_year + raw_month + raw_day без разделителей, дословно
        """
        return f"{self.raw_year}{self.raw_month}{self.raw_day}"

    def __str__(self) -> str:
        return f"{{{self.day}/{self.month}/{self.year}}}"

    # =========================================================================
    # РАВЕНСТВО И ХЭШ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if other is None or type(other) is not type(self):
            return False
        return (
            self.year == other.year
            and self.month == other.month
            and self.day == other.day
            and self.raw_year == other.raw_year
            and self.raw_month == other.raw_month
            and self.raw_day == other.raw_day
        )

    def __hash__(self) -> int:
        # Сырой текст не участвует: равные объекты всегда равны и по числам
        h = 7
        h = 11 * h + self.year
        h = 11 * h + self.month
        h = 11 * h + self.day
        return h

    # =========================================================================
    # ПОРЯДОК
    # =========================================================================

    def compare_to(self, other: "MrzDate") -> int:
        """
        Сравнение по числам: year*10000 + month*100 + day.

        Не учитывает валидность и сырой текст. Значение -1 (ошибка разбора)
        сортируется раньше любых неотрицательных.

        Returns:
            -1, 0 или 1
        """
        left = composite_key(self.year, self.month, self.day)
        right = composite_key(other.year, other.month, other.day)
        return (left > right) - (left < right)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MrzDate):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, MrzDate):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, MrzDate):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, MrzDate):
            return NotImplemented
        return self.compare_to(other) >= 0
