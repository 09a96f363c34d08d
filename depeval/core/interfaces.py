# depeval/core/interfaces.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Union
from .data_structures import SentencePrediction


class BaseDependencyPipeline(ABC):
    """
    Внешний пайплайн (токенизация, POS, парсер, типизированный парсер).
    Для ядра оценки это черный ящик.
    """

    def fit(self, training_file: Union[str, Path]) -> "BaseDependencyPipeline":
        """Подготовка/обучение пайплайна. По умолчанию ничего не делает."""
        return self

    @abstractmethod
    def transform(self, texts: List[str]) -> List[SentencePrediction]:
        """
        Принимает тексты предложений.
        Возвращает по одному SentencePrediction на каждый текст, в том же порядке.
        """
        pass
