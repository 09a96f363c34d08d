import logging
from pathlib import Path
from typing import List, Optional, Union

from depeval.core.data_structures import Sentence, SentencePrediction, TokenMetadata
from depeval.core.exceptions import LengthMismatchError
from depeval.core.interfaces import BaseDependencyPipeline
from depeval.ingestion.reader import read_conllu
from depeval.ingestion.sentences import group_sentences

logger = logging.getLogger(__name__)


class PredictionFilePipeline(BaseDependencyPipeline):
    """
    Отдаёт готовый вывод парсера из CoNLL-U файла (UDPipe, Trankit и т.д.).
    i-й запрошенный текст получает i-е предложение файла.
    """

    def __init__(self, predictions_file: Union[str, Path], comment_marker: str = "#", delimiter: str = "\t"):
        self.predictions_file = Path(predictions_file)
        self.comment_marker = comment_marker
        self.delimiter = delimiter
        self.sentences: List[Sentence] = []

    def fit(self, training_file: Optional[Union[str, Path]] = None) -> "PredictionFilePipeline":
        tokens = read_conllu(self.predictions_file, comment_marker=self.comment_marker, delimiter=self.delimiter)
        self.sentences = group_sentences(tokens)
        logger.info(f"Loaded {len(self.sentences)} predicted sentences from {self.predictions_file.name}")
        return self

    def transform(self, texts: List[str]) -> List[SentencePrediction]:
        if len(texts) != len(self.sentences):
            raise LengthMismatchError(
                len(texts), len(self.sentences), context=f"sentences in {self.predictions_file.name}"
            )

        outputs = []
        for i, (text, sentence) in enumerate(zip(texts, self.sentences)):
            if sentence.text != text:
                # Токенизация системы отличается от золота; длины проверит экстрактор/выравнивание
                logger.warning(f"Text drift in sentence {i + 1}: {text!r} vs {sentence.text!r}")

            outputs.append(SentencePrediction(
                metadata=[TokenMetadata(head=t.head, id=t.id, form=t.form) for t in sentence.tokens],
                labels=[t.deprel for t in sentence.tokens],
            ))
        return outputs
