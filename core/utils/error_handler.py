# -*- coding: utf-8 -*-
"""
Ошибки приложения и централизованное логирование исключений.

Каждая ошибка несёт `user_message`: текст, который интерактивный цикл
показывает пользователю перед повторным запросом ввода.
"""

import logging
from typing import Optional

logger = logging.getLogger("error_handler")


class WeatherAppError(Exception):
    """Базовая ошибка клиента архива погоды."""

    default_message = "Произошла ошибка"

    def __init__(self, user_message: Optional[str] = None):
        self.user_message = user_message or self.default_message
        super().__init__(self.user_message)


class InputError(WeatherAppError):
    """Ошибка пользовательского ввода (обнаруживается до запроса к API)."""


class MalformedInputError(InputError):
    """Неверное число аргументов, не число, неверный формат даты или времени."""

    default_message = "Введены некорректные данные"


class OutOfRangeInputError(InputError):
    """Координаты вне допустимых границ, дата в будущем, неверный порядок дат."""

    default_message = "Введённые значения вне допустимого диапазона"


class UpstreamFailureError(WeatherAppError):
    """Сервис погоды недоступен или вернул некорректный ответ."""

    default_message = "Сервис погоды недоступен, попробуйте позже"


class EmptyResultError(WeatherAppError):
    """Сервис вернул пустой ряд данных."""

    default_message = "Нет данных за указанный период"


class HourOutOfBoundsError(WeatherAppError):
    """Запрошенный час отсутствует в ответе сервиса."""

    default_message = "Нет данных за указанный час"


def log_exception(exception: Exception, message: str = "Необработанное исключение", context: Optional[dict] = None):
    """
    Логирует исключение без выбрасывания.

    Args:
        exception (Exception): Исключение
        message (str): Описание
        context (dict): Контекст (координаты, даты и т.п.)
    """
    log_context = f" | Контекст: {context}" if context else ""
    logger.error(f"{message}{log_context} | Ошибка: {exception!r}", exc_info=exception)
