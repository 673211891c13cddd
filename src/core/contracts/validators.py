"""
MrzDate JSON Contract

Контракт сериализованной MrzDate (результат model_dump / model_dump_json).

Схема не хранится отдельным файлом, а строится из самой модели
(MrzDate.model_json_schema) и закрывается от лишних полей. Поверх схемы
проверяется согласованность: каждое число должно получаться из своего
сырого текста тем же разбором, что и в MrzDate.from_raw. Pydantic эту связь
не проверяет, поэтому MrzDate(year=12, raw_year="11", ...) модель примет,
а контракт — нет.

Календарная валидность НЕ входит в контракт: year=-1 с raw_year='ab' корректен.
"""

import logging
from collections import deque
from functools import lru_cache
from typing import Any, Dict, Iterator

from jsonschema import Draft202012Validator, ValidationError

from src.core.domain.date_fields import parse_field
from src.core.domain.mrz_date import MrzDate


logger = logging.getLogger(__name__)

# Пары (число, сырой текст) в порядке MRZ
_FIELD_PAIRS = (("year", "raw_year"), ("month", "raw_month"), ("day", "raw_day"))


@lru_cache(maxsize=1)
def mrz_date_schema() -> Dict[str, Any]:
    """
    JSON Schema контракта, построенная из модели MrzDate.

    Returns:
        Схема (draft 2020-12) без дополнительных полей
    """
    schema = MrzDate.model_json_schema()
    schema["additionalProperties"] = False
    Draft202012Validator.check_schema(schema)
    return schema


class MrzDateValidator:
    """
    Валидатор сериализованной MrzDate.

    Сначала структура (схема), затем согласованность чисел и сырого текста.
    Согласованность проверяется только для структурно корректных данных.
    """

    def __init__(self):
        self.schema = mrz_date_schema()
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Итератор по всем ошибкам контракта.

        Yields:
            ValidationError для каждого нарушения
        """
        structural = list(self.validator.iter_errors(data))
        yield from structural
        if structural:
            return

        for name, raw_name in _FIELD_PAIRS:
            parsed = parse_field(data[raw_name], name, logger)
            if parsed != data[name]:
                yield ValidationError(
                    f"{name}={data[name]} does not match {raw_name}={data[raw_name]!r} "
                    f"(parses to {parsed})",
                    path=deque([name]),
                    instance=data[name],
                )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Первое найденное нарушение контракта
        """
        for error in self.iter_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка без exception."""
        return next(self.iter_errors(data), None) is None


def validate_mrz_date(data: Dict[str, Any]) -> MrzDate:
    """
    Валидация и загрузка сериализованной MrzDate.

    Args:
        data: Данные (результат MrzDate.model_dump())

    Returns:
        Восстановленная MrzDate

    Raises:
        ValidationError: Если данные не соответствуют контракту
    """
    MrzDateValidator().validate(data)
    return MrzDate.model_validate(data)
