"""GuessRight — Завантаження конфігурації"""
import yaml
from pathlib import Path
from dataclasses import asdict
from .settings import (
    GuessRightConfig,
    MatchingConfig,
    QuestionEngineConfig,
    LearningConfig,
    StorageConfig,
)


def save_yaml(config: GuessRightConfig, path: str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(asdict(config), f, default_flow_style=False, sort_keys=False)


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def config_from_dict(data: dict) -> GuessRightConfig:
    """Зібрати GuessRightConfig зі словника (відсутні ключі — за замовчуванням)"""
    data = dict(data)
    return GuessRightConfig(
        version=data.get("version", "1.0.0"),
        project_name=data.get("project_name", "GuessRight"),
        matching=MatchingConfig(**data.get("matching", {})),
        question_engine=QuestionEngineConfig(**data.get("question_engine", {})),
        learning=LearningConfig(**data.get("learning", {})),
        storage=StorageConfig(**data.get("storage", {})),
    )


def save_config(config: GuessRightConfig, path: str) -> None:
    save_yaml(config, path)


def load_config(path: str) -> GuessRightConfig:
    return config_from_dict(load_yaml(path))
