# depeval/config.py
import logging
from pathlib import Path
from typing import Literal, Optional, Union

import yaml
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Определение базовых путей относительно корня проекта
BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
RESULTS_DIR = BASE_DIR / "results"

# Файлы по умолчанию (тестовый корпус и обучающий корпус для пайплайна)
TESTING_FILE = DATA_DIR / "parsers" / "test.conllu.txt"
TRAINING_FILE = DATA_DIR / "parsers" / "train.conllu.small.txt"

DEFAULT_CONFIG_PATH = BASE_DIR / "config" / "evaluation.yaml"


class EvaluationConfig(BaseModel):
    """Параметры одного прогона оценки."""

    testing_file: Path = TESTING_FILE
    training_file: Path = TRAINING_FILE

    # Формат входного файла
    comment_marker: str = "#"
    delimiter: str = "\t"
    head_default: str = "-1"

    # Отладочный вывод промежуточных таблиц
    show_tables: bool = True
    show_rows: int = Field(default=100, ge=0)

    # Внешний пайплайн
    pipeline: Literal["stanza", "file"] = "stanza"
    language: str = "en"
    pretokenized: bool = False
    predictions_file: Optional[Path] = None  # для pipeline == "file"

    # Результаты
    report_file: Optional[Path] = None
    output_conllu: Optional[Path] = None

    log_level: str = "INFO"


def load_config(path: Union[str, Path] = DEFAULT_CONFIG_PATH) -> EvaluationConfig:
    """
    Читает YAML-конфиг. Пустой файл дает конфиг по умолчанию.
    Ошибки валидации (pydantic.ValidationError) пробрасываются вызывающему.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must contain a mapping, got {type(raw).__name__}")

    logger.info(f"Loaded config from {path}")
    return EvaluationConfig(**raw)
