# core/utils/validator.py
# -*- coding: utf-8 -*-
"""
Проверка и разбор пользовательского ввода.

Все функции либо возвращают нормализованное значение, либо выбрасывают
MalformedInputError / OutOfRangeInputError с текстом для пользователя.
"""
import math
import re
from datetime import date, datetime
from typing import List, Optional, Tuple

from core.models.weather_response import Coordinates, CurrentWeatherQuery, ExtremeWeatherQuery
from core.utils.error_handler import MalformedInputError, OutOfRangeInputError

ARGUMENTS_COUNT = 4

DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)", re.ASCII)
DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)
TIME_PATTERN = re.compile(r"(\d{2}):(\d{2})", re.ASCII)


def tokenize_arguments(line: str) -> List[str]:
    """Делит строку по одиночным пробелам; аргументов должно быть ровно 4."""
    tokens = line.split(" ")
    if len(tokens) != ARGUMENTS_COUNT:
        raise MalformedInputError("Введено некорректное число аргументов")
    return tokens


def _parse_decimal(value: str) -> Optional[float]:
    if not DECIMAL_PATTERN.fullmatch(value):
        return None
    number = float(value)
    return number if math.isfinite(number) else None


def parse_coordinates(lat_str: str, lon_str: str) -> Coordinates:
    latitude = _parse_decimal(lat_str)
    longitude = _parse_decimal(lon_str)
    if latitude is None or longitude is None:
        raise MalformedInputError("Введены некорректные координаты")
    if not (-90.0 <= latitude <= 90.0) or not (-180.0 <= longitude <= 180.0):
        raise OutOfRangeInputError(
            "Координаты вне допустимого диапазона: широта [-90, 90], долгота [-180, 180]"
        )
    return Coordinates(latitude, longitude)


def parse_date(value: str, today: Optional[date] = None) -> date:
    """
    Разбирает дату в формате ГГГГ-ММ-ДД.

    Args:
        value (str): Строка с датой
        today (date): Текущая дата; по умолчанию берётся системная

    Returns:
        date: Разобранная дата, не позже today
    """
    if not DATE_PATTERN.fullmatch(value):
        raise MalformedInputError("Введена некорректная дата")
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise MalformedInputError("Введена некорректная дата") from None

    if parsed > (today or date.today()):
        raise OutOfRangeInputError("Дата не может быть в будущем")
    return parsed


def parse_date_range(start_str: str, end_str: str, today: Optional[date] = None) -> Tuple[date, date]:
    start = parse_date(start_str, today)
    end = parse_date(end_str, today)
    if start > end:
        raise OutOfRangeInputError("Введен некорректный порядок дат")
    return start, end


def parse_hour(value: str) -> int:
    """Проверяет время ЧЧ:ММ и возвращает только час."""
    match = TIME_PATTERN.fullmatch(value)
    if not match:
        raise MalformedInputError("Введено некорректное время")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise MalformedInputError("Введено некорректное время")
    return hours


def parse_current_arguments(line: str, today: Optional[date] = None) -> CurrentWeatherQuery:
    """Сценарий 1: `широта долгота ГГГГ-ММ-ДД ЧЧ:ММ`."""
    lat, lon, day, time = tokenize_arguments(line)
    coordinates = parse_coordinates(lat, lon)
    return CurrentWeatherQuery(coordinates, parse_date(day, today), parse_hour(time))


def parse_extreme_arguments(line: str, today: Optional[date] = None) -> ExtremeWeatherQuery:
    """Сценарий 2: `широта долгота ГГГГ-ММ-ДД ГГГГ-ММ-ДД`."""
    lat, lon, start, end = tokenize_arguments(line)
    coordinates = parse_coordinates(lat, lon)
    start_date, end_date = parse_date_range(start, end, today)
    return ExtremeWeatherQuery(coordinates, start_date, end_date)
