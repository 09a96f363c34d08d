#!/usr/bin/env python3
"""
Оценка типизированного парсера зависимостей на золотом CoNLL-U корпусе.

Запуск:
    python -m depeval.main --test-file data/parsers/test.conllu.txt --pipeline stanza --lang en
    python -m depeval.main --pipeline file --predictions results/udpipe_predictions.conllu
"""

import argparse
import logging
import sys
from pathlib import Path

from depeval.config import DEFAULT_CONFIG_PATH, EvaluationConfig, load_config
from depeval.core.exceptions import EvaluationError
from depeval.core.interfaces import BaseDependencyPipeline
from depeval.evaluation.evaluator import TypedDependencyEvaluation
from depeval.evaluation.report import console, save_report, show_accuracy, write_predictions_conllu

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Typed dependency parser evaluation against a CoNLL-U gold corpus")
    parser.add_argument("--config", type=Path, default=None,
                        help=f"YAML config (default: {DEFAULT_CONFIG_PATH} if it exists)")
    parser.add_argument("--test-file", type=Path, help="Gold CoNLL-U testing file")
    parser.add_argument("--train-file", type=Path, help="CoNLL-U training file for the pipeline")
    parser.add_argument("--pipeline", choices=["stanza", "file"], help="External dependency pipeline")
    parser.add_argument("--predictions", type=Path, help="System CoNLL-U output (for --pipeline file)")
    parser.add_argument("--lang", help="Stanza language code")
    parser.add_argument("--pretokenized", action="store_true", default=None,
                        help="Split texts on whitespace only (Stanza)")
    parser.add_argument("--show-rows", type=int, help="Rows shown per intermediate table")
    parser.add_argument("--no-tables", action="store_true", help="Do not print intermediate tables")
    parser.add_argument("--report", type=Path, help="Save JSON report here")
    parser.add_argument("--output-conllu", type=Path, help="Write predicted CoNLL-U here")
    parser.add_argument("--log-level", help="Logging level (INFO, DEBUG, ...)")
    return parser


def resolve_config(args: argparse.Namespace) -> EvaluationConfig:
    """YAML-конфиг, поверх которого применяются флаги командной строки."""
    if args.config is not None:
        config = load_config(args.config)
    elif DEFAULT_CONFIG_PATH.exists():
        config = load_config(DEFAULT_CONFIG_PATH)
    else:
        config = EvaluationConfig()

    overrides = {
        "testing_file": args.test_file,
        "training_file": args.train_file,
        "pipeline": args.pipeline,
        "predictions_file": args.predictions,
        "language": args.lang,
        "pretokenized": args.pretokenized,
        "show_rows": args.show_rows,
        "report_file": args.report,
        "output_conllu": args.output_conllu,
        "log_level": args.log_level,
    }
    if args.no_tables:
        overrides["show_tables"] = False

    updates = {k: v for k, v in overrides.items() if v is not None}
    return EvaluationConfig(**{**config.model_dump(), **updates})


def build_pipeline(config: EvaluationConfig) -> BaseDependencyPipeline:
    if config.pipeline == "file":
        from depeval.parsers.prediction_file import PredictionFilePipeline

        if config.predictions_file is None:
            raise ValueError("--pipeline file requires --predictions (or predictions_file in config)")
        return PredictionFilePipeline(
            config.predictions_file,
            comment_marker=config.comment_marker,
            delimiter=config.delimiter,
        )

    from depeval.parsers.stanza_pipeline import StanzaPipeline
    return StanzaPipeline(lang=config.language, pretokenized=config.pretokenized)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    config = resolve_config(args)

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    try:
        evaluation = TypedDependencyEvaluation(
            build_pipeline(config),
            testing_file=config.testing_file,
            training_file=config.training_file,
            config=config,
        )
        report = evaluation.evaluate()
    except (EvaluationError, ValueError) as e:
        logger.error(f"Evaluation aborted: {e}")
        console.print(f"[bold red]❌ {e}[/]")
        return 1

    show_accuracy(report)

    if config.report_file:
        save_report(report, config.report_file, pipeline=config.pipeline, test_file=config.testing_file)
    if config.output_conllu:
        write_predictions_conllu(evaluation.sentences, evaluation.predictions, config.output_conllu)

    return 0


if __name__ == "__main__":
    sys.exit(main())
