"""GuessRight — Модуль конфігурації"""
from .settings import (
    GuessRightConfig,
    get_default_config,
    MatchingConfig,
    QuestionEngineConfig,
    LearningConfig,
    StorageConfig,
)
from .loader import save_config, load_config, save_yaml, load_yaml, config_from_dict

__all__ = [
    "GuessRightConfig",
    "get_default_config",
    "MatchingConfig",
    "QuestionEngineConfig",
    "LearningConfig",
    "StorageConfig",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "config_from_dict",
]
