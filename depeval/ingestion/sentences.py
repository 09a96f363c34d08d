# depeval/ingestion/sentences.py
import logging
from collections import defaultdict
from itertools import accumulate
from typing import Dict, List, Sequence

from depeval.core.data_structures import ConlluToken, Sentence
from depeval.core.exceptions import SentenceBoundaryMissingError

logger = logging.getLogger(__name__)

# id токена, с которого начинается новое предложение
BOUNDARY_ID = "1"


def assign_sentence_ids(tokens: Sequence[ConlluToken]) -> List[int]:
    """
    Номер предложения для каждого токена.

    Свертка с явным аккумулятором: счетчик стартует с 0 и увеличивается на каждом
    id == "1", так что первое предложение получает номер 1.
    Токен с номером 0 означает, что корпус начат с середины предложения.
    """
    sentence_ids = list(accumulate(1 if t.id == BOUNDARY_ID else 0 for t in tokens))

    if sentence_ids and sentence_ids[0] == 0:
        raise SentenceBoundaryMissingError(0, tokens[0].id)

    return sentence_ids


def group_sentences(tokens: Sequence[ConlluToken]) -> List[Sentence]:
    """
    Группирует токены в предложения.
    Токены раскладываются по корзинам в порядке обхода, сортировка не используется.
    """
    buckets: Dict[int, List[ConlluToken]] = defaultdict(list)

    for sentence_id, token in zip(assign_sentence_ids(tokens), tokens):
        buckets[sentence_id].append(token)

    sentences = [Sentence(sentence_id=sid, tokens=buckets[sid]) for sid in sorted(buckets)]
    logger.info(f"Reconstructed {len(sentences)} sentences from {len(tokens)} tokens")
    return sentences


def to_sentence_texts(tokens: Sequence[ConlluToken]) -> List[str]:
    """Тексты предложений (формы через пробел), упорядоченные по номеру предложения."""
    return [sentence.text for sentence in group_sentences(tokens)]
