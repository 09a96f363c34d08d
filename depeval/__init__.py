"""depeval: оценка типизированного парсера зависимостей на CoNLL-U корпусе."""

__version__ = "0.1.0"
