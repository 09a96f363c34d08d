# depeval/core/exceptions.py
from typing import Optional


class EvaluationError(ValueError):
    """Базовая ошибка оценки. Любая из них прерывает прогон до расчета accuracy."""


class MalformedRowError(EvaluationError):
    """Строка данных не делится на 10 полей CoNLL-U."""

    def __init__(self, path, line_number: int, field_count: int, expected: int = 10):
        self.path = path
        self.line_number = line_number
        self.field_count = field_count
        self.expected = expected
        super().__init__(
            f"{path}:{line_number}: expected {expected} tab-separated fields, got {field_count}"
        )


class SentenceBoundaryMissingError(EvaluationError):
    """Токен встречен до первого id == "1" (корпус начинается с середины предложения)."""

    def __init__(self, token_index: int, token_id: str):
        self.token_index = token_index
        self.token_id = token_id
        super().__init__(
            f"Token #{token_index} (id={token_id!r}) precedes any sentence boundary (id == '1')"
        )


class LengthMismatchError(EvaluationError):
    """
    Последовательности, которые выравниваются позиционно, имеют разную длину.
    Обычно означает, что пайплайн токенизировал текст иначе, чем золотой корпус.
    """

    def __init__(self, expected: int, actual: int, context: Optional[str] = None):
        self.expected = expected
        self.actual = actual
        self.context = context
        message = f"Length mismatch: expected {expected}, got {actual}"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class EmptyCorpusError(EvaluationError):
    """Нет ни одного токена: accuracy не определена."""
