# depeval/evaluation/scorer.py
import logging
from typing import List, Optional, Sequence

import pandas as pd

from depeval.core.data_structures import AccuracyReport, EvaluationRow, GoldRecord, PredictionRecord
from depeval.core.exceptions import EmptyCorpusError, LengthMismatchError

logger = logging.getLogger(__name__)

ROW_COLUMNS = ["form", "predicted_head", "head", "deprel", "predicted_deprel"]


def align(predictions: Sequence[PredictionRecord], gold: Sequence[GoldRecord]) -> List[EvaluationRow]:
    """
    Позиционное выравнивание: predictions[i] <-> gold[i].
    Сопоставления по тексту или идентичности токенов нет, поэтому
    разная длина считается ошибкой.
    """
    if len(predictions) != len(gold):
        raise LengthMismatchError(len(gold), len(predictions), context="predicted vs gold tokens")

    return [
        EvaluationRow(
            form=g.form,
            predicted_head=p.predicted_head,
            head=g.head,
            deprel=g.deprel,
            predicted_deprel=p.predicted_deprel,
        )
        for p, g in zip(predictions, gold)
    ]


def row_score(row: EvaluationRow) -> int:
    """1, если верны и голова, и метка (строгое сравнение строк), иначе 0."""
    return 1 if row.exact_match else 0


def evaluation_frame(rows: Sequence[EvaluationRow]) -> pd.DataFrame:
    """Таблица выравнивания с колонкой result (0/1) для каждого токена."""
    frame = pd.DataFrame([row.model_dump() for row in rows], columns=ROW_COLUMNS)
    frame["result"] = pd.Series([row_score(row) for row in rows], index=frame.index, dtype=int)
    return frame


def accuracy_report(rows: Sequence[EvaluationRow], total_sentences: Optional[int] = None) -> AccuracyReport:
    """
    Среднее по токенам. Помимо основной метрики (голова И метка)
    считаются доли верных голов и верных меток по отдельности.
    """
    if not rows:
        raise EmptyCorpusError("No aligned tokens: accuracy is undefined")

    frame = evaluation_frame(rows)
    head_ok = pd.Series([row.head_correct for row in rows], dtype=bool)
    label_ok = pd.Series([row.label_correct for row in rows], dtype=bool)

    report = AccuracyReport(
        accuracy=float(frame["result"].mean()),
        head_accuracy=float(head_ok.mean()),
        label_accuracy=float(label_ok.mean()),
        total_tokens=len(frame),
        correct_tokens=int(frame["result"].sum()),
        total_sentences=total_sentences,
    )
    logger.info(f"Accuracy {report.accuracy:.4f} over {report.total_tokens} tokens")
    return report


def score(predictions: Sequence[PredictionRecord], gold: Sequence[GoldRecord]) -> float:
    """Exact-match accuracy в [0, 1]."""
    return accuracy_report(align(predictions, gold)).accuracy
