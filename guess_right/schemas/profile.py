"""
GuessRight — Схеми профілів та питань

Pydantic моделі для:
- AnswerValue: домен відповідей (yes / no / unsure)
- Question: питання анкети
- LearningRecord: лічильники підтверджених відповідей
- Profile: профіль клієнта з очікуваними відповідями
"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple, Union
from enum import Enum
from pydantic import BaseModel, Field, field_validator, model_validator


class AnswerValue(str, Enum):
    """Відповідь на питання"""
    YES = "yes"
    NO = "no"
    UNSURE = "unsure"   # нейтральна відповідь з обох сторін порівняння

    @classmethod
    def parse(cls, value: Union["AnswerValue", str]) -> "AnswerValue":
        """
        Перетворити значення на AnswerValue.

        Raises:
            ValueError: якщо значення не з домену {yes, no, unsure}
        """
        if isinstance(value, cls):
            return value
        # Лише точні значення: "YES" чи " yes" не вгадуються
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise ValueError(
            f"Invalid answer value: {value!r} (expected one of: yes, no, unsure)"
        )


def parse_answers(answers: Dict[str, Any]) -> Dict[str, AnswerValue]:
    """
    Провалідувати набір відповідей {question_id: answer}.

    Порядок ключів зберігається.
    """
    parsed = {}
    for question_id, answer in answers.items():
        if not question_id:
            raise ValueError("Answer set contains an empty question id")
        parsed[question_id] = AnswerValue.parse(answer)
    return parsed


class Question(BaseModel):
    """
    Питання анкети.

    Приклад:
        question = Question(
            _id="q_large_company",
            text="Does your customer work at a large company?",
            order=1
        )
    """
    id: str = Field(..., alias="_id", min_length=1, description="Унікальний ключ")
    text: str = Field(default="", description="Текст питання")
    order: int = Field(default=0, description="Підказка порядку (tie-break)")
    asked_count: int = Field(default=0, ge=0, description="Скільки разів питали")

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "_id": "q_large_company",
                "text": "Does your customer work at a large company (500+ employees)?",
                "order": 1
            }
        }


class LearningRecord(BaseModel):
    """
    Лічильники відповідей для пари (профіль, питання).

    Інваріант: total = yes + no + unsure
    """
    yes: int = Field(default=0, ge=0)
    no: int = Field(default=0, ge=0)
    unsure: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_total(self) -> "LearningRecord":
        if self.total != self.yes + self.no + self.unsure:
            raise ValueError(
                f"Learning record total {self.total} != "
                f"{self.yes} + {self.no} + {self.unsure}"
            )
        return self

    def record(self, answer: AnswerValue) -> None:
        """Врахувати одну підтверджену відповідь"""
        answer = AnswerValue.parse(answer)
        setattr(self, answer.value, getattr(self, answer.value) + 1)
        self.total += 1

    def majority(self) -> Tuple[AnswerValue, int]:
        """
        Найчастіша відповідь.

        "unsure" — відповідь за замовчуванням: yes, потім no
        замінюють її тільки якщо строго більші.
        """
        best_answer, best_count = AnswerValue.UNSURE, self.unsure

        if self.yes > best_count:
            best_answer, best_count = AnswerValue.YES, self.yes

        if self.no > best_count:
            best_answer, best_count = AnswerValue.NO, self.no

        return best_answer, best_count

    def agreement(self) -> float:
        """Частка найчастішої відповіді серед усіх"""
        if self.total == 0:
            return 0.0
        return self.majority()[1] / self.total


class Profile(BaseModel):
    """
    Профіль клієнта.

    answers — розріджена мапа {question_id: очікувана відповідь}.
    learning — лічильники для онлайн-навчання {question_id: LearningRecord}.

    Приклад:
        profile = Profile(
            _id="saas_startup_cto",
            name="SaaS Startup CTO",
            answers={"q_technical_background": "yes", "q_large_company": "no"}
        )
    """
    id: str = Field(..., alias="_id", min_length=1, description="Унікальний ключ")
    name: str = Field(default="", description="Назва профілю")
    description: str = Field(default="", description="Опис профілю")

    attributes: Dict[str, Any] = Field(default_factory=dict)
    marketing_recommendations: List[str] = Field(default_factory=list)

    answers: Dict[str, AnswerValue] = Field(
        default_factory=dict,
        description="Очікувані відповіді профілю"
    )
    learning: Dict[str, LearningRecord] = Field(
        default_factory=dict,
        description="Статистика підтверджених відповідей"
    )
    frequency: int = Field(default=0, ge=0, description="Скільки разів профіль обрано")

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("answers", mode="before")
    @classmethod
    def validate_answers(cls, v: Any) -> Any:
        """Перевірка відповідей: лише yes / no / unsure"""
        if isinstance(v, dict):
            return parse_answers(v)
        return v

    def expected_answer(self, question_id: str) -> Optional[AnswerValue]:
        """Очікувана відповідь або None якщо профіль її не визначає"""
        return self.answers.get(question_id)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "_id": "saas_startup_cto",
                "name": "SaaS Startup CTO",
                "description": "Technical founder of an early-stage SaaS company",
                "answers": {
                    "q_technical_background": "yes",
                    "q_large_company": "no",
                    "q_budget_constrained": "unsure"
                }
            }
        }


def coerce_profiles(profiles: List[Union[Profile, dict]]) -> List[Profile]:
    """
    Привести записи профілів до Profile.

    Raises:
        ValueError: запис без ідентифікатора або дублікати ідентифікаторів
    """
    result = []
    seen = set()
    for record in profiles:
        profile = record if isinstance(record, Profile) else Profile.model_validate(record)
        if profile.id in seen:
            raise ValueError(f"Duplicate profile id: {profile.id!r}")
        seen.add(profile.id)
        result.append(profile)
    return result


def coerce_questions(questions: List[Union[Question, dict]]) -> List[Question]:
    """Привести записи питань до Question"""
    return [
        q if isinstance(q, Question) else Question.model_validate(q)
        for q in questions
    ]
