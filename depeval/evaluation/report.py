# depeval/evaluation/report.py
"""
Вывод промежуточных таблиц и сохранение результатов оценки.
Таблицы служат только для отладки.
"""

import json
import logging
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

import pandas as pd
from conllu.models import Metadata, Token, TokenList
from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from depeval.core.data_structures import CONLLU_FIELDS, AccuracyReport, PredictionRecord, Sentence
from depeval.core.exceptions import LengthMismatchError

logger = logging.getLogger(__name__)

console = Console()


def records_frame(records: Iterable[BaseModel], columns: Optional[Sequence[str]] = None) -> pd.DataFrame:
    """Список pydantic-моделей -> DataFrame."""
    return pd.DataFrame([r.model_dump() for r in records], columns=columns)


def show_frame(df: pd.DataFrame, title: str, limit: int = 100, out: Console = None):
    """Печатает первые limit строк таблицы."""
    out = out or console

    table = Table(title=title)
    for col in df.columns:
        table.add_column(str(col))

    for _, row in df.head(limit).iterrows():
        table.add_row(*[str(v) for v in row.tolist()])

    out.print(table)
    if len(df) > limit:
        out.print(f"[dim]only showing top {limit} of {len(df)} rows[/]")


def show_accuracy(report: AccuracyReport, out: Console = None):
    out = out or console

    table = Table(title="Typed Dependency Parser Accuracy")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")

    table.add_row("accuracy", f"{report.accuracy:.4f} ({report.accuracy * 100:.2f}%)")
    table.add_row("head accuracy", f"{report.head_accuracy:.4f}")
    table.add_row("label accuracy", f"{report.label_accuracy:.4f}")
    table.add_row("correct tokens", str(report.correct_tokens))
    table.add_row("total tokens", str(report.total_tokens))
    if report.total_sentences is not None:
        table.add_row("sentences", str(report.total_sentences))

    out.print(table)


def save_report(report: AccuracyReport, output_path: Union[str, Path], **extra) -> Path:
    """Сохраняет результаты в JSON."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    results = {
        **{k: str(v) for k, v in extra.items()},
        "metrics": {
            "accuracy": report.accuracy,
            "head_accuracy": report.head_accuracy,
            "label_accuracy": report.label_accuracy,
        },
        "details": {
            "correct_tokens": report.correct_tokens,
            "total_tokens": report.total_tokens,
            "total_sentences": report.total_sentences,
        },
    }

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=2, ensure_ascii=False)

    logger.info(f"Report saved to {output_path}")
    return output_path


def write_predictions_conllu(
        sentences: Sequence[Sentence],
        predictions: Sequence[PredictionRecord],
        output_path: Union[str, Path],
) -> Path:
    """
    Пишет золотые предложения с подставленными предсказанными HEAD/DEPREL.
    Остальные колонки переносятся из золота без изменений.
    """
    total = sum(len(s) for s in sentences)
    if total != len(predictions):
        raise LengthMismatchError(total, len(predictions), context="predictions vs gold tokens for CoNLL-U export")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    predicted = iter(predictions)
    with open(output_path, "w", encoding="utf-8") as out:
        for sentence in sentences:
            tokens = []
            for gold_token in sentence.tokens:
                record = next(predicted)
                fields = dict(zip(CONLLU_FIELDS, gold_token.to_fields()))
                fields["head"] = record.predicted_head
                fields["deprel"] = record.predicted_deprel
                tokens.append(Token(fields))

            metadata = Metadata({"sent_id": str(sentence.sentence_id), "text": sentence.text})
            out.write(TokenList(tokens, metadata=metadata).serialize())

    logger.info(f"Predicted CoNLL-U written to {output_path}")
    return output_path
