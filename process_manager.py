# process_manager.py
# -*- coding: utf-8 -*-
"""
Глобальный координатор зависимостей.
Инициализирует конфигурацию, логирование и клиент API один раз
и предоставляет к ним доступ.
"""

import logging
from typing import Optional

from config.app_config import AppConfig
from config.logging_config import setup_logging
from core.utils.api_client import ArchiveClient


class ProcessManager:
    """
    Единый контекст приложения. Все зависимости инициализируются здесь.
    """

    def __init__(self):
        self._initialized = False
        # Конфигурация
        self.config: Optional[AppConfig] = None
        # Клиент архива погоды
        self.api_client: Optional[ArchiveClient] = None

    def initialize_sync(self, config: Optional[AppConfig] = None):
        """Синхронная инициализация всех компонентов."""
        if self._initialized:
            return

        # 1. Загрузка конфигурации
        self.config = config or AppConfig.load()

        # 2. Логирование
        setup_logging(self.config.log_level, self.config.log_dir)

        # 3. Клиент API
        self.api_client = ArchiveClient(
            base_url=self.config.archive_url,
            timeout=self.config.request_timeout,
        )

        self._initialized = True
        logging.info(f"✅ ProcessManager: initialized (archive: {self.config.archive_url})")

    def shutdown_sync(self):
        """Синхронное завершение."""
        if not self._initialized:
            return

        # Сессии HTTP закрываются после каждого запроса, освобождать нечего.
        self.api_client = None
        self._initialized = False
        logging.info("🛑 ProcessManager: shut down")


# Глобальный экземпляр, используется точкой входа
process_manager = ProcessManager()
