"""
GuessRight — Інтерфейс документного сховища

Ядро не працює зі сховищем напряму. Репозиторій та движок анкети
використовують мінімальний набір операцій: get / put / increment.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Any, Dict, List, Optional


class DocumentStore(ABC):
    """Key-value сховище документів, згрупованих у колекції"""

    @abstractmethod
    def get(self, collection: str, key: str) -> Optional[Dict[str, Any]]:
        """Документ або None"""

    @abstractmethod
    def put(self, collection: str, key: str, document: Dict[str, Any]) -> None:
        """Записати документ повністю"""

    @abstractmethod
    def increment(self, collection: str, key: str, field: str, amount: int = 1) -> int:
        """Збільшити числове поле, повернути нове значення"""

    @abstractmethod
    def delete(self, collection: str, key: str) -> bool:
        """Видалити документ; False якщо його не було"""

    @abstractmethod
    def list(self, collection: str) -> List[Dict[str, Any]]:
        """Всі документи колекції в порядку вставки"""

    @abstractmethod
    def lock(self, collection: str, key: str) -> AbstractContextManager:
        """Серіалізувати read-modify-write одного документа"""

    def count(self, collection: str) -> int:
        return len(self.list(collection))
