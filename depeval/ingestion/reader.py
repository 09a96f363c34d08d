# depeval/ingestion/reader.py
import logging
from pathlib import Path
from typing import Iterable, List, Union

from depeval.core.data_structures import CONLLU_FIELDS, ConlluToken, GoldRecord
from depeval.core.exceptions import MalformedRowError

logger = logging.getLogger(__name__)


def parse_conllu_lines(
        lines: Iterable[str],
        source: str = "<memory>",
        comment_marker: str = "#",
        delimiter: str = "\t",
) -> List[ConlluToken]:
    """
    Разбирает строки CoNLL-U в плоский список токенов в порядке файла.

    Комментарии пропускаются полностью. Пустые строки (разделители предложений)
    тоже пропускаются: границы предложений определяет сброс id, а не пустая строка.
    Любая строка данных не из 10 полей -> MalformedRowError (частичный корпус не возвращается).
    """
    tokens = []

    for line_number, line in enumerate(lines, 1):
        line = line.rstrip("\r\n")

        if not line.strip() or line.startswith(comment_marker):
            continue

        fields = line.split(delimiter)
        if len(fields) != len(CONLLU_FIELDS):
            raise MalformedRowError(source, line_number, len(fields), len(CONLLU_FIELDS))

        tokens.append(ConlluToken.from_fields(fields))

    return tokens


def read_conllu(
        path: Union[str, Path],
        comment_marker: str = "#",
        delimiter: str = "\t",
) -> List[ConlluToken]:
    """Читает CoNLL-U файл целиком. Чистая функция от содержимого файла."""
    path = Path(path)
    # utf-8-sig снимает BOM перед первой строкой
    with open(path, "r", encoding="utf-8-sig") as f:
        tokens = parse_conllu_lines(f, source=str(path), comment_marker=comment_marker, delimiter=delimiter)

    logger.info(f"{len(tokens)} tokens read from {path.name}")
    return tokens


def to_gold_records(tokens: Iterable[ConlluToken]) -> List[GoldRecord]:
    """Проекция золотых токенов на (form, head, deprel)."""
    return [GoldRecord(form=t.form, head=t.head, deprel=t.deprel) for t in tokens]
