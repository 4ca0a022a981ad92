# -*- coding: utf-8 -*-
"""
Клиент архива Open-Meteo (исторические почасовые температуры).

Один вызов = один GET-запрос. Сессия requests открывается и закрывается
на каждый вызов; фабрика сессий передаётся в конструктор, поэтому в тестах
её можно подменить.
"""
import logging
from datetime import date
from typing import Callable

import requests

from core.models.weather_response import WeatherResponse
from core.utils.error_handler import UpstreamFailureError, log_exception

logger = logging.getLogger("api_client")

# === КОНФИГУРАЦИЯ API ===
ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"
API_TIMEOUT = 10.0  # секунд
HOURLY_FIELD = "temperature_2m"


class ArchiveClient:
    """Клиент для Open-Meteo Archive API."""

    def __init__(
        self,
        base_url: str = ARCHIVE_URL,
        timeout: float = API_TIMEOUT,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.session_factory = session_factory

    def fetch_hourly_temperatures(
        self,
        lat: float,
        lon: float,
        start_date: date,
        end_date: date,
    ) -> WeatherResponse:
        """
        Получает почасовую температуру за период [start_date, end_date].

        Args:
            lat (float): Широта
            lon (float): Долгота
            start_date (date): Первый день периода
            end_date (date): Последний день периода (включительно)

        Returns:
            WeatherResponse: Разобранный ответ сервиса

        Raises:
            UpstreamFailureError: ошибка сети, HTTP-статус не 2xx, некорректный JSON
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "hourly": HOURLY_FIELD,
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
        }
        context = {"lat": lat, "lon": lon, "start_date": params["start_date"], "end_date": params["end_date"]}

        try:
            with self.session_factory() as session:
                response = session.get(self.base_url, params=params, timeout=self.timeout)
                response.raise_for_status()
                data = response.json()
        except requests.RequestException as e:
            log_exception(e, "❌ Open-Meteo Archive: ошибка запроса", context)
            raise UpstreamFailureError() from e
        except ValueError as e:
            log_exception(e, "❌ Open-Meteo Archive: ответ не является JSON", context)
            raise UpstreamFailureError() from e

        try:
            weather = WeatherResponse.from_dict(data)
        except (TypeError, ValueError) as e:
            log_exception(e, "❌ Open-Meteo Archive: некорректная структура ответа", context)
            raise UpstreamFailureError() from e

        logger.info(f"✅ Open-Meteo Archive: получено {len(weather.hourly)} часов для ({lat}, {lon})")
        return weather
