# weather_cli.py
# -*- coding: utf-8 -*-
"""
Интерактивный клиент архива погоды.

Сценарий 1: температура в месте, день и час.
Сценарий 2: минимум и максимум температуры за период.
Цикл повторяется до конца ввода (EOF) или Ctrl+C.
"""
import logging
import sys
from datetime import date
from typing import Callable, Optional

from core.utils.api_client import ArchiveClient
from core.utils.error_handler import InputError, WeatherAppError, log_exception
from core.utils.validator import parse_current_arguments, parse_extreme_arguments
from process_manager import process_manager
from scripts.weather._processes import formatter
from scripts.weather._processes.temperature_resolver import resolve_current, resolve_extreme

logger = logging.getLogger("weather_cli")

CURRENT_SCENARIO = "1"
EXTREME_SCENARIO = "2"


def handle_current(arguments: str, client: ArchiveClient, today: Optional[date] = None) -> str:
    query = parse_current_arguments(arguments, today)
    logger.info(f"🌍 Запрос температуры: {query}")
    return formatter.format_current(resolve_current(query, client))


def handle_extreme(arguments: str, client: ArchiveClient, today: Optional[date] = None) -> str:
    query = parse_extreme_arguments(arguments, today)
    logger.info(f"🌍 Запрос экстремумов: {query}")
    return formatter.format_extreme(resolve_extreme(query, client))


HANDLERS = {
    CURRENT_SCENARIO: (formatter.CURRENT_ARGUMENTS_PROMPT, handle_current),
    EXTREME_SCENARIO: (formatter.EXTREME_ARGUMENTS_PROMPT, handle_extreme),
}


def run_interactive(
    client: ArchiveClient,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
    today: Optional[date] = None,
):
    """
    Основной цикл: сценарий -> аргументы -> проверка -> запрос -> вывод.

    Ни одна ошибка запроса не завершает цикл: сообщение выводится
    и пользователь снова выбирает сценарий. Цикл заканчивается на EOF.
    """
    write(formatter.GREETING)

    while True:
        write(formatter.SCENARIO_PROMPT)
        try:
            scenario = read_line()
        except EOFError:
            logger.info("🛑 Конец ввода, завершение")
            return
        write("")

        if scenario not in HANDLERS:
            write(formatter.INVALID_SCENARIO)
            continue

        prompt, handler = HANDLERS[scenario]
        write(prompt)
        try:
            arguments = read_line()
        except EOFError:
            logger.info("🛑 Конец ввода, завершение")
            return
        write("")

        try:
            write(handler(arguments, client, today))
        except InputError as e:
            logger.info(f"⚠️ Некорректный ввод {arguments!r}: {e.user_message}")
            write(formatter.format_error(e.user_message))
        except WeatherAppError as e:
            log_exception(e, f"❌ Запрос не выполнен (сценарий {scenario})", {"arguments": arguments})
            write(formatter.format_error(e.user_message))


# === Основная функция запуска ===
def main():
    process_manager.initialize_sync()
    logging.info("🚀 Запуск клиента архива погоды")
    try:
        run_interactive(process_manager.api_client)
    except KeyboardInterrupt:
        print()
        print(formatter.FAREWELL)
    finally:
        process_manager.shutdown_sync()
    return 0


if __name__ == "__main__":
    sys.exit(main())
