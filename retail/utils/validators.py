import re
import logging

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"^[+-]?\d+$")


def parse_int(value: str, field: str) -> int:
    """
    Преобразует введенную строку в целое число.

    Args:
        value: Строка, введенная пользователем
        field: Название поля для сообщения об ошибке

    Returns:
        int: Значение поля

    Raises:
        ValueError: Если строка не является целым числом
    """
    value = (value or "").strip()
    if not _INT_RE.match(value):
        raise ValueError(f"Invalid {field}: '{value}' is not an integer")
    return int(value)


def parse_float(value: str, field: str) -> float:
    """
    Преобразует введенную строку в число с плавающей точкой.
    Запятая допускается как десятичный разделитель.

    Raises:
        ValueError: Если строка не является числом
    """
    value = (value or "").strip().replace(",", ".")
    if not re.match(r"^[+-]?(\d+(\.\d*)?|\.\d+)$", value):
        raise ValueError(f"Invalid {field}: '{value}' is not a number")
    return float(value)


def require_text(value: str, field: str) -> str:
    value = (value or "").strip()
    if not value:
        raise ValueError(f"{field} must not be empty")
    return value
