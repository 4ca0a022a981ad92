# -*- coding: utf-8 -*-
"""
Тексты интерактивного режима: приглашения и форматирование результатов.
"""

from core.models.weather_response import ExtremeWeather

GREETING = "Доброго времени суток! \n"

SCENARIO_PROMPT = (
    "Для того чтобы посмотреть погоду в конкретном месте в конкретное время, введите 1 \n"
    "Для того, чтобы узнать минимум и максимум за промежуток времени, введите 2 \n"
)

CURRENT_ARGUMENTS_PROMPT = (
    "Введите данные в формате : \n"
    "широта долгота день(гггг-мм-дд) время(чч:мм)\n"
)

EXTREME_ARGUMENTS_PROMPT = (
    "Введите данные в формате : \n"
    "широта долгота день старта(гггг-мм-дд) день окончания(гггг-мм-дд)\n"
)

INVALID_SCENARIO = "Введено некорректное число\n"

FAREWELL = "До свидания!"


def split_timestamp(timestamp: str):
    """'2024-01-01T01:00' -> ('2024-01-01', '01:00')."""
    day, _, time = timestamp.partition("T")
    return day, time


def format_current(temperature: str) -> str:
    return f"Температура по запросу {temperature}\n"


def format_extreme(result: ExtremeWeather) -> str:
    max_day, max_time = split_timestamp(result.max_timestamp)
    min_day, min_time = split_timestamp(result.min_timestamp)
    return (
        f"В данный промежуток времени максимальная температура {result.max_temperature} "
        f"достигалась {max_day} в {max_time} \n"
        f"Минимальная температура {result.min_temperature} "
        f"достигалась {min_day} в {min_time} \n"
    )


def format_error(message: str) -> str:
    return f"{message}\n"
