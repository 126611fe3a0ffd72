"""
GuessRight — Адаптивна анкета для підбору профілю клієнта

Архітектура: Scoring + Match Resolution + Question Selection + Learning

Модулі:
- config: Конфігурація системи
- schemas: Профілі, питання, сесії, результати
- matching: Скоринг профілів та вибір найкращого
- question_engine: Вибір наступного питання
- learning: Онлайн-навчання профілів
- storage: Документне сховище та завантаження даних
- quiz_engine: Керування сесією анкетування
- analysis: Аналіз зворотного зв'язку
- api: Backend API
"""

__version__ = "0.1.0"

from .config import GuessRightConfig, get_default_config
