# -*- coding: utf-8 -*-
"""
Разрешение запросов: температура в заданный час и экстремумы за период.
"""

import logging
from typing import Tuple

from core.models.weather_response import (
    CurrentWeatherQuery,
    ExtremeWeather,
    ExtremeWeatherQuery,
    HourlySeries,
)
from core.utils.api_client import ArchiveClient
from core.utils.error_handler import EmptyResultError, HourOutOfBoundsError

logger = logging.getLogger("temperature_resolver")


def resolve_current(query: CurrentWeatherQuery, client: ArchiveClient) -> str:
    """
    Температура в указанном месте в указанный день и час.

    Returns:
        str: Значение с единицей измерения, например "9.0°C"
    """
    coordinates = query.coordinates
    response = client.fetch_hourly_temperatures(
        coordinates.latitude, coordinates.longitude, query.date, query.date
    )
    temperatures = response.hourly.temperatures

    if not temperatures:
        raise EmptyResultError()
    if query.hour >= len(temperatures):
        logger.warning(f"⚠️ Час {query.hour} вне ряда из {len(temperatures)} значений")
        raise HourOutOfBoundsError()

    temperature = temperatures[query.hour]
    if temperature is None:
        raise EmptyResultError("Нет данных за указанный час")
    return f"{temperature}{response.temperature_unit}"


def find_extremes(series: HourlySeries) -> Tuple[int, int]:
    """
    Индексы минимума и максимума за один проход.

    При равенстве остаётся первое вхождение. Пропуски (None) не учитываются.

    Raises:
        EmptyResultError: в ряду нет ни одного значения
    """
    min_index = max_index = None
    for index, value in enumerate(series.temperatures):
        if value is None:
            continue
        if min_index is None or value < series.temperatures[min_index]:
            min_index = index
        if max_index is None or value > series.temperatures[max_index]:
            max_index = index

    if min_index is None:
        raise EmptyResultError()
    return min_index, max_index


def resolve_extreme(query: ExtremeWeatherQuery, client: ArchiveClient) -> ExtremeWeather:
    """Минимальная и максимальная температура за период и моменты их достижения."""
    coordinates = query.coordinates
    response = client.fetch_hourly_temperatures(
        coordinates.latitude, coordinates.longitude, query.start_date, query.end_date
    )
    series = response.hourly
    min_index, max_index = find_extremes(series)

    unit = response.temperature_unit
    result = ExtremeWeather(
        min_temperature=f"{series.temperatures[min_index]}{unit}",
        max_temperature=f"{series.temperatures[max_index]}{unit}",
        min_timestamp=series.time[min_index],
        max_timestamp=series.time[max_index],
    )
    logger.info(f"📊 Экстремумы за {query.start_date}..{query.end_date}: "
                f"min={result.min_temperature}, max={result.max_temperature}")
    return result
