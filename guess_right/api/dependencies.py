"""
GuessRight — API Dependencies

Dependency Injection для FastAPI.
Створення движка анкети та завантаження даних.
"""

import threading
from typing import Optional

from guess_right.config import GuessRightConfig, load_config
from guess_right.quiz_engine import QuizEngine

from .config import config


class AppState:
    """
    Стан застосунку — один QuizEngine на процес.
    Singleton pattern.
    """

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self._initialized = True
        self.engine: Optional[QuizEngine] = None
        self.is_loaded = False
        self.error = None

    def initialize(
        self,
        data_dir: Optional[str] = None,
        engine_config: Optional[GuessRightConfig] = None
    ) -> bool:
        """Створити движок і завантажити дані"""
        try:
            print("📦 Завантаження даних...")

            if engine_config is None and config.config_path:
                engine_config = load_config(config.config_path)

            self.engine = QuizEngine.from_data_dir(
                data_dir or config.data_dir,
                config=engine_config,
            )
            self.is_loaded = True
            self.error = None
            print(f"   ✅ {self.engine}")
            return True

        except Exception as e:
            self.error = str(e)
            self.is_loaded = False
            print(f"❌ Помилка завантаження: {e}")
            return False

    def set_engine(self, engine: QuizEngine) -> None:
        """Підставити готовий движок (тести, вбудовування)"""
        self.engine = engine
        self.is_loaded = True
        self.error = None

    def reset(self) -> None:
        self.engine = None
        self.is_loaded = False
        self.error = None


# Глобальний стан
app_state = AppState()


# Dependency functions для FastAPI
def get_app_state() -> AppState:
    """Dependency: стан застосунку"""
    return app_state


def get_engine() -> QuizEngine:
    """Dependency: движок анкети (створюється при першому зверненні)"""
    if app_state.engine is None:
        app_state.initialize()
    if app_state.engine is None:
        raise RuntimeError(f"Quiz engine is not available: {app_state.error}")
    return app_state.engine
