"""
GuessRight — Налаштування системи

Всі параметри системи зібрані в dataclass-и для:
- Типізації
- Легкого доступу через config.matching.separation_weight
- Серіалізації в YAML
"""

from dataclasses import dataclass, field


# =============================================================================
# MATCHING CONFIGURATION
# =============================================================================

@dataclass
class MatchingConfig:
    """Параметри скорингу та вибору найкращого профілю"""

    # Внесок однієї відповіді у score
    exact_match_weight: float = 1.0     # відповіді співпали
    partial_match_weight: float = 0.5   # одна зі сторін "unsure"

    # Формула confidence = raw * w_raw + separation * w_sep
    raw_score_weight: float = 0.7
    separation_weight: float = 0.3
    separation_epsilon: float = 0.001   # захист від ділення на 0

    # Скільки альтернатив повертати
    max_alternatives: int = 3


# =============================================================================
# QUESTION ENGINE CONFIGURATION
# =============================================================================

@dataclass
class QuestionEngineConfig:
    """Параметри вибору наступного питання"""

    # Ідеальна частка відповідей "yes" та "no" серед кандидатів
    target_ratio: float = 0.5

    # Кешувати potential matches в межах сесії
    cache_potential_matches: bool = True


# =============================================================================
# LEARNING CONFIGURATION
# =============================================================================

@dataclass
class LearningConfig:
    """Параметри онлайн-навчання профілів"""
    min_samples: int = 5          # мінімум підтверджених відповідей
    min_confidence: float = 0.6   # частка більшості (включно)


# =============================================================================
# STORAGE CONFIGURATION
# =============================================================================

@dataclass
class StorageConfig:
    """Звідки завантажувати початкові дані"""
    data_dir: str = "data"
    profiles_file: str = "profiles.json"
    questions_file: str = "questions.json"
    reports_dir: str = "reports"

    # Активні сесії без змін довше за цей час видаляються
    session_timeout_minutes: int = 60


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class GuessRightConfig:
    """
    Головна конфігурація GuessRight

    Об'єднує всі параметри системи в одному місці.

    Приклад використання:
        config = GuessRightConfig()
        print(config.matching.raw_score_weight)  # 0.7
        print(config.learning.min_samples)  # 5
    """

    # Метадані
    version: str = "1.0.0"
    project_name: str = "GuessRight"

    # Компоненти
    matching: MatchingConfig = field(default_factory=MatchingConfig)
    question_engine: QuestionEngineConfig = field(default_factory=QuestionEngineConfig)
    learning: LearningConfig = field(default_factory=LearningConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)


# =============================================================================
# DEFAULT CONFIG INSTANCE
# =============================================================================

def get_default_config() -> GuessRightConfig:
    """Отримати конфігурацію за замовчуванням"""
    return GuessRightConfig()
