# depeval/evaluation/extractor.py
import logging
from typing import Any, Dict, Iterable, List, Mapping

from depeval.core.data_structures import (
    HEAD_SENTINEL,
    PipelineOutput,
    PredictionRecord,
    SentencePrediction,
    TokenMetadata,
)
from depeval.core.exceptions import LengthMismatchError

logger = logging.getLogger(__name__)


def _to_metadata(item: Any, head_default: str) -> TokenMetadata:
    if isinstance(item, TokenMetadata):
        return item
    data: Dict[str, Any] = dict(item)
    if data.get("head") is None:
        data["head"] = head_default
    return TokenMetadata(**data)


def to_sentence_prediction(output: PipelineOutput, head_default: str = HEAD_SENTINEL) -> SentencePrediction:
    """
    Приводит вывод пайплайна к SentencePrediction.
    Допускаются словари вида {"metadata": [...], "labels": [...]}.
    """
    if isinstance(output, SentencePrediction):
        return output
    if not isinstance(output, Mapping):
        raise TypeError(f"Unsupported pipeline output type: {type(output).__name__}")

    return SentencePrediction(
        metadata=[_to_metadata(m, head_default) for m in output.get("metadata", [])],
        labels=[str(label) for label in output.get("labels", [])],
    )


def extract(outputs: Iterable[PipelineOutput], head_default: str = HEAD_SENTINEL) -> List[PredictionRecord]:
    """
    Склеивает вывод пайплайна в одну последовательность предсказаний в порядке токенов.

    Для каждого предложения метаданные и метки соединяются позиционно;
    разная длина -> LengthMismatchError (никакого обрезания).
    """
    records = []

    for sent_idx, output in enumerate(outputs):
        prediction = to_sentence_prediction(output, head_default)

        if len(prediction.metadata) != len(prediction.labels):
            raise LengthMismatchError(
                len(prediction.metadata),
                len(prediction.labels),
                context=f"sentence {sent_idx}: metadata vs labels",
            )

        for meta, label in zip(prediction.metadata, prediction.labels):
            records.append(PredictionRecord(predicted_head=meta.head, predicted_deprel=label))

    logger.info(f"Extracted {len(records)} predicted tokens")
    return records
