# core/models/weather_response.py
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class CurrentWeatherQuery:
    coordinates: Coordinates
    date: date
    hour: int  # 0..23


@dataclass(frozen=True)
class ExtremeWeatherQuery:
    coordinates: Coordinates
    start_date: date
    end_date: date


@dataclass
class HourlySeries:
    """Почасовой ряд: time[i] соответствует temperatures[i]."""
    time: List[str] = field(default_factory=list)
    temperatures: List[Optional[float]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.temperatures)


@dataclass
class WeatherResponse:
    latitude: float = 0.0
    longitude: float = 0.0
    temperature_unit: str = ""
    hourly: HourlySeries = field(default_factory=HourlySeries)

    @classmethod
    def from_dict(cls, data: dict) -> "WeatherResponse":
        """
        Собирает ответ из JSON архива Open-Meteo.

        Неизвестные поля игнорируются, отсутствующие получают значения
        по умолчанию. Пропуски в ряду температур (null) сохраняются как None.

        Raises:
            ValueError: если тело не объект или длины time и temperature_2m различаются
        """
        if not isinstance(data, dict):
            raise ValueError(f"Ожидался JSON-объект, получено: {type(data).__name__}")

        hourly = data.get("hourly") or {}
        units = data.get("hourly_units") or {}
        if not isinstance(hourly, dict) or not isinstance(units, dict):
            raise ValueError("Поля hourly и hourly_units должны быть JSON-объектами")

        raw_time = hourly.get("time") or []
        raw_temperatures = hourly.get("temperature_2m") or []
        if not isinstance(raw_time, list) or not isinstance(raw_temperatures, list):
            raise ValueError("Поля hourly.time и hourly.temperature_2m должны быть массивами")

        time = [str(t) for t in raw_time]
        temperatures = [None if t is None else float(t) for t in raw_temperatures]
        if len(time) != len(temperatures):
            raise ValueError(
                f"Длины рядов не совпадают: time={len(time)}, temperature_2m={len(temperatures)}"
            )

        return cls(
            latitude=float(data.get("latitude") or 0.0),
            longitude=float(data.get("longitude") or 0.0),
            temperature_unit=str(units.get("temperature_2m") or ""),
            hourly=HourlySeries(time=time, temperatures=temperatures),
        )


@dataclass(frozen=True)
class ExtremeWeather:
    min_temperature: str
    max_temperature: str
    min_timestamp: str
    max_timestamp: str
