"""
GuessRight — Завантаження початкових даних

Читає data/profiles.json та data/questions.json і заповнює репозиторій.
Кожен профіль отримує порожній learning та frequency = 0,
кожне питання — asked_count = 0.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from guess_right.config import StorageConfig
from guess_right.schemas import Profile, Question

from .repository import QuizRepository


def load_seed_file(path: str) -> List[dict]:
    """
    Завантажити список записів з JSON файлу.

    Returns:
        Список записів ([] якщо файлу немає)
    """
    path = Path(path)
    if not path.exists():
        print(f"⚠️ {path.name} not found. Nothing will be seeded from it.")
        return []

    with open(path, 'r', encoding='utf-8') as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a JSON list of records")

    print(f"   Found {len(records)} records in {path.name}")
    return records


def seed_repository(
    repository: QuizRepository,
    profiles_path: str,
    questions_path: str
) -> Tuple[int, int]:
    """
    Заповнити репозиторій профілями та питаннями.

    Args:
        repository: Куди записувати
        profiles_path: Шлях до profiles.json
        questions_path: Шлях до questions.json

    Returns:
        (кількість профілів, кількість питань)
    """
    now = datetime.now()

    questions = load_seed_file(questions_path)
    for record in questions:
        question = Question.model_validate({
            **record,
            "asked_count": 0,
            "created_at": now,
            "updated_at": now,
        })
        repository.put_question(question)

    profiles = load_seed_file(profiles_path)
    for record in profiles:
        profile = Profile.model_validate({
            **record,
            "learning": {},
            "frequency": 0,
            "created_at": now,
            "updated_at": now,
        })
        repository.put_profile(profile)

    print(f"✅ Seeded {len(profiles)} profiles, {len(questions)} questions")
    return len(profiles), len(questions)


def seed_from_config(
    repository: QuizRepository,
    config: Optional[StorageConfig] = None,
    data_dir: Optional[str] = None
) -> Tuple[int, int]:
    """Заповнити репозиторій з файлів, вказаних у StorageConfig"""
    config = config or StorageConfig()
    root = Path(data_dir or config.data_dir)
    return seed_repository(
        repository,
        profiles_path=str(root / config.profiles_file),
        questions_path=str(root / config.questions_file),
    )
