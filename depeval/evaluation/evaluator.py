# depeval/evaluation/evaluator.py
import logging
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd

from depeval.config import EvaluationConfig
from depeval.core.data_structures import AccuracyReport, GoldRecord, PredictionRecord, Sentence, SentencePrediction
from depeval.core.exceptions import EmptyCorpusError, LengthMismatchError
from depeval.core.interfaces import BaseDependencyPipeline
from depeval.evaluation.extractor import extract
from depeval.evaluation.report import records_frame, show_frame
from depeval.evaluation.scorer import ROW_COLUMNS, accuracy_report, align
from depeval.evaluation.utils import measure
from depeval.ingestion.reader import read_conllu, to_gold_records
from depeval.ingestion.sentences import group_sentences

logger = logging.getLogger(__name__)


class TypedDependencyEvaluation:
    """
    Оценка пайплайна (голова + метка зависимости) на золотом CoNLL-U корпусе.

    Порядок: обучение пайплайна -> восстановление текстов предложений ->
    предсказание -> извлечение голов/меток -> позиционное выравнивание с золотом -> accuracy.
    """

    def __init__(
            self,
            pipeline: BaseDependencyPipeline,
            testing_file: Union[str, Path],
            training_file: Optional[Union[str, Path]] = None,
            config: Optional[EvaluationConfig] = None,
    ):
        self.pipeline = pipeline
        self.testing_file = Path(testing_file)
        self.training_file = Path(training_file) if training_file else None
        self.config = config or EvaluationConfig(testing_file=self.testing_file)

        self.sentences: List[Sentence] = []
        self.predictions: List[PredictionRecord] = []

    def _read_testing_tokens(self):
        return read_conllu(
            self.testing_file,
            comment_marker=self.config.comment_marker,
            delimiter=self.config.delimiter,
        )

    def _show(self, records, title: str, columns=None):
        if self.config.show_tables:
            show_frame(records_frame(records, columns), title, limit=self.config.show_rows)

    def train(self) -> BaseDependencyPipeline:
        with measure("[Typed Dependency Parser] Time to train"):
            self.pipeline = self.pipeline.fit(self.training_file) or self.pipeline
        return self.pipeline

    def test_sentences(self) -> List[Sentence]:
        tokens = self._read_testing_tokens()
        if not tokens:
            raise EmptyCorpusError(f"No tokens in {self.testing_file}")

        self.sentences = group_sentences(tokens)

        if self.config.show_tables:
            df = pd.DataFrame(
                [(s.sentence_id, len(s), s.text) for s in self.sentences],
                columns=["sentence_id", "tokens", "text"],
            )
            show_frame(df, "Test Dataset", limit=self.config.show_rows)
        return self.sentences

    def predict(self, texts: List[str]) -> List[SentencePrediction]:
        with measure("[Typed Dependency Parser] Time to predict"):
            outputs = self.pipeline.transform(texts)

        if len(outputs) != len(texts):
            raise LengthMismatchError(len(texts), len(outputs), context="pipeline outputs vs sentences")
        return outputs

    def ground_truth(self) -> List[GoldRecord]:
        gold = to_gold_records(self._read_testing_tokens())
        self._show(gold, "Ground Truth Dataset", columns=["form", "head", "deprel"])
        return gold

    def evaluate(self) -> AccuracyReport:
        """Полный прогон. Любая ошибка прерывает оценку до расчета accuracy."""
        self.train()

        sentences = self.test_sentences()
        outputs = self.predict([s.text for s in sentences])

        self.predictions = extract(outputs, head_default=self.config.head_default)
        self._show(self.predictions, "Prediction Dataset", columns=["predicted_head", "predicted_deprel"])

        gold = self.ground_truth()

        rows = align(self.predictions, gold)
        self._show(rows, "Evaluation Dataset", columns=ROW_COLUMNS)

        return accuracy_report(rows, total_sentences=len(sentences))
