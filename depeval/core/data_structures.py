# depeval/core/data_structures.py
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Union

# Порядок колонок CoNLL-U (10 фиксированных полей)
CONLLU_FIELDS = (
    "id", "form", "lemma", "upos", "xpos",
    "feats", "head", "deprel", "deps", "misc",
)

# Значение head, если пайплайн не вернул голову токена
HEAD_SENTINEL = "-1"


class ConlluToken(BaseModel):
    """
    Строка золотого корпуса CoNLL-U.
    Все поля хранятся как строки: ядро интерпретирует только id, form, head и deprel,
    остальные переносятся без изменений.
    """
    model_config = ConfigDict(frozen=True)

    id: str  # 1-based позиция в предложении ("1" начинает новое предложение)
    form: str
    lemma: str
    upos: str
    xpos: str
    feats: str
    head: str  # индекс родителя (1-based), "0" для ROOT
    deprel: str
    deps: str
    misc: str

    @classmethod
    def from_fields(cls, fields: List[str]) -> "ConlluToken":
        return cls(**dict(zip(CONLLU_FIELDS, fields)))

    def to_fields(self) -> List[str]:
        return [getattr(self, name) for name in CONLLU_FIELDS]


class Sentence(BaseModel):
    """Предложение, восстановленное по правилу сброса id."""
    model_config = ConfigDict(frozen=True)

    sentence_id: int
    tokens: List[ConlluToken]

    @property
    def text(self) -> str:
        # Формы через одиночный пробел, без детокенизации
        return " ".join(t.form for t in self.tokens)

    def __len__(self):
        return len(self.tokens)


class TokenMetadata(BaseModel):
    """
    Метаданные токена из вывода внешнего пайплайна.
    Гарантирует наличие head: отсутствующий ключ превращается в HEAD_SENTINEL.
    Остальные ключи пайплайна сохраняются как есть (extra).
    """
    model_config = ConfigDict(frozen=True, extra="allow")

    head: str = HEAD_SENTINEL

    @field_validator("head", mode="before")
    @classmethod
    def coerce_head(cls, value):
        # Парсеры (Stanza, UDPipe) отдают head как int
        if value is None:
            return HEAD_SENTINEL
        return str(value)


class SentencePrediction(BaseModel):
    """Вывод пайплайна для одного предложения: метаданные и метки, выровненные по токенам."""
    model_config = ConfigDict(frozen=True)

    metadata: List[TokenMetadata] = Field(default_factory=list)
    labels: List[str] = Field(default_factory=list)


class PredictionRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    predicted_head: str
    predicted_deprel: str


class GoldRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    form: str
    head: str
    deprel: str


class EvaluationRow(BaseModel):
    """Позиционное соединение PredictionRecord[i] и GoldRecord[i]."""
    model_config = ConfigDict(frozen=True)

    form: str
    predicted_head: str
    head: str
    deprel: str
    predicted_deprel: str

    @property
    def head_correct(self) -> bool:
        return self.predicted_head == self.head

    @property
    def label_correct(self) -> bool:
        return self.predicted_deprel == self.deprel

    @property
    def exact_match(self) -> bool:
        return self.head_correct and self.label_correct


class AccuracyReport(BaseModel):
    """
    Итог оценки.
    accuracy: доля токенов, где верны и голова, и метка (основная метрика).
    head_accuracy, label_accuracy: компоненты для диагностики.
    """
    model_config = ConfigDict(frozen=True)

    accuracy: float
    head_accuracy: float
    label_accuracy: float
    total_tokens: int
    correct_tokens: int
    total_sentences: Optional[int] = None


PipelineOutput = Union[SentencePrediction, dict]
