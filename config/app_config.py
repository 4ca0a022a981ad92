# config/app_config.py
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from config.logging_config import DEFAULT_LOG_DIR
from core.utils.api_client import API_TIMEOUT, ARCHIVE_URL

load_dotenv()

logger = logging.getLogger("app_config")


def _read_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(f"⚠️ WEATHER_REQUEST_TIMEOUT={raw!r} не число, используем {API_TIMEOUT}")
        return API_TIMEOUT
    if timeout <= 0:
        logger.warning(f"⚠️ WEATHER_REQUEST_TIMEOUT={raw!r} должен быть положительным, используем {API_TIMEOUT}")
        return API_TIMEOUT
    return timeout


@dataclass
class AppConfig:
    archive_url: str = ARCHIVE_URL
    request_timeout: float = API_TIMEOUT
    log_level: str = "INFO"
    log_dir: Path = DEFAULT_LOG_DIR

    @classmethod
    def load(cls):
        return cls(
            archive_url=os.getenv("WEATHER_ARCHIVE_URL", ARCHIVE_URL),
            request_timeout=_read_timeout(os.getenv("WEATHER_REQUEST_TIMEOUT", str(API_TIMEOUT))),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=Path(os.getenv("LOG_DIR", str(DEFAULT_LOG_DIR))),
        )
