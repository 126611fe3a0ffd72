"""
GuessRight — API Configuration

Налаштування FastAPI сервера та шлях до даних.
"""

from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Конфігурація API сервера"""

    # Сервер
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True
    reload: bool = False

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Дані (profiles.json / questions.json)
    data_dir: Optional[str] = None

    # YAML конфігурація движка (опціонально)
    config_path: Optional[str] = None

    # API
    api_prefix: str = "/api"
    api_title: str = "GuessRight API"
    api_description: str = "Адаптивна анкета для підбору профілю клієнта"

    def __post_init__(self):
        """Автоматичне визначення data_dir"""
        if self.data_dir is None:
            current = Path(__file__).parent.parent.parent

            for root in (current, Path.cwd()):
                if (root / "data" / "profiles.json").exists():
                    self.data_dir = str(root / "data")
                    break

    @classmethod
    def from_env(cls) -> 'APIConfig':
        """Створити конфігурацію з environment variables"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "true").lower() == "true",
            data_dir=os.getenv("DATA_DIR"),
            config_path=os.getenv("GUESSRIGHT_CONFIG"),
        )


# Глобальна конфігурація
config = APIConfig.from_env()
