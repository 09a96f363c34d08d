#!/usr/bin/env python3
"""
Обёртка для Stanza как внешнего пайплайна оценки.
Stanza выполняет токенизацию, POS и синтаксический анализ сама.
"""
import logging
from pathlib import Path
from typing import List, Optional, Union

from tqdm import tqdm

from depeval.core.data_structures import SentencePrediction, TokenMetadata
from depeval.core.interfaces import BaseDependencyPipeline

logger = logging.getLogger(__name__)


class StanzaPipeline(BaseDependencyPipeline):
    """
    Пайплайн tokenize,pos,lemma,depparse поверх предобученных моделей Stanza.

    Разбиение на предложения отключено: каждый восстановленный текст остаётся
    одним предложением, и индексы голов относятся к нему.
    В режиме pretokenized текст делится только по пробелам, как в золоте.
    """

    PROCESSORS = "tokenize,pos,lemma,depparse"

    def __init__(self, lang: str = "en", pretokenized: bool = False, use_gpu: bool = False):
        self.lang = lang
        self.pretokenized = pretokenized
        self.use_gpu = use_gpu
        self.nlp = None

    def fit(self, training_file: Optional[Union[str, Path]] = None) -> "StanzaPipeline":
        import stanza

        if training_file:
            logger.info(f"Stanza models are pretrained; training file {training_file} is not used.")

        self.nlp = stanza.Pipeline(
            lang=self.lang,
            processors=self.PROCESSORS,
            tokenize_no_ssplit=True,
            tokenize_pretokenized=self.pretokenized,
            use_gpu=self.use_gpu,
            verbose=False,
        )
        logger.info(f"Stanza loaded (lang={self.lang}, pretokenized={self.pretokenized})")
        return self

    def transform(self, texts: List[str]) -> List[SentencePrediction]:
        if self.nlp is None:
            raise RuntimeError("StanzaPipeline.fit() must be called before transform()")

        outputs = []
        for text in tqdm(texts, desc="Stanza"):
            doc = self.nlp(text)
            outputs.append(self._to_prediction(doc))
        return outputs

    @staticmethod
    def _to_prediction(doc) -> SentencePrediction:
        # "Выпрямляем" слова всех предложений документа
        metadata = []
        labels = []
        for sent in doc.sentences:
            for word in sent.words:
                metadata.append(TokenMetadata(head=word.head, id=str(word.id), form=word.text, upos=word.upos))
                labels.append(word.deprel)
        return SentencePrediction(metadata=metadata, labels=labels)
