import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from depeval.config import EvaluationConfig, load_config
from depeval.main import build_parser, build_pipeline, resolve_config
from depeval.parsers.prediction_file import PredictionFilePipeline


class TestConfig(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self.tmp.name)

    def tearDown(self):
        self.tmp.cleanup()

    def _write(self, content: str) -> Path:
        path = self.dir / "evaluation.yaml"
        path.write_text(content, encoding="utf-8")
        return path

    def test_defaults(self):
        config = EvaluationConfig()
        self.assertEqual(config.comment_marker, "#")
        self.assertEqual(config.delimiter, "\t")
        self.assertEqual(config.head_default, "-1")
        self.assertEqual(config.show_rows, 100)

    def test_load_yaml(self):
        config = load_config(self._write("testing_file: gold.conllu\nshow_rows: 5\npipeline: file\n"))

        self.assertEqual(config.testing_file, Path("gold.conllu"))
        self.assertEqual(config.show_rows, 5)
        self.assertEqual(config.pipeline, "file")

    def test_empty_yaml_gives_defaults(self):
        self.assertEqual(load_config(self._write("")), EvaluationConfig())

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(self.dir / "nope.yaml")

    def test_invalid_value(self):
        with self.assertRaises(ValidationError):
            load_config(self._write("pipeline: spark\n"))

    def test_cli_overrides_yaml(self):
        path = self._write("show_rows: 5\nlanguage: ru\n")
        args = build_parser().parse_args(["--config", str(path), "--show-rows", "7", "--no-tables"])
        config = resolve_config(args)

        self.assertEqual(config.show_rows, 7)
        self.assertEqual(config.language, "ru")
        self.assertFalse(config.show_tables)

    def test_file_pipeline_requires_predictions(self):
        with self.assertRaises(ValueError):
            build_pipeline(EvaluationConfig(pipeline="file"))

        pipeline = build_pipeline(EvaluationConfig(pipeline="file", predictions_file=Path("pred.conllu")))
        self.assertIsInstance(pipeline, PredictionFilePipeline)


if __name__ == '__main__':
    unittest.main()
