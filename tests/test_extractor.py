import unittest

from depeval.core.data_structures import SentencePrediction, TokenMetadata
from depeval.core.exceptions import LengthMismatchError
from depeval.evaluation.extractor import extract


class TestPredictionExtractor(unittest.TestCase):
    def test_flattens_in_sentence_order(self):
        outputs = [
            SentencePrediction(metadata=[TokenMetadata(head="2"), TokenMetadata(head="0")], labels=["det", "root"]),
            SentencePrediction(metadata=[TokenMetadata(head="0")], labels=["root"]),
        ]
        records = extract(outputs)

        self.assertEqual([r.predicted_head for r in records], ["2", "0", "0"])
        self.assertEqual([r.predicted_deprel for r in records], ["det", "root", "root"])

    def test_missing_head_defaults_to_sentinel(self):
        outputs = [{"metadata": [{"sentence": "0"}, {"head": "1"}], "labels": ["root", "obj"]}]
        records = extract(outputs)

        self.assertEqual(records[0].predicted_head, "-1")
        self.assertEqual(records[1].predicted_head, "1")

    def test_custom_head_default(self):
        records = extract([{"metadata": [{}], "labels": ["root"]}], head_default="?")
        self.assertEqual(records[0].predicted_head, "?")

    def test_null_head_uses_custom_default(self):
        records = extract([{"metadata": [{"head": None}], "labels": ["root"]}], head_default="?")
        self.assertEqual(records[0].predicted_head, "?")

    def test_integer_heads_are_strings(self):
        # Парсеры отдают head как int
        records = extract([{"metadata": [{"head": 0}], "labels": ["root"]}])
        self.assertEqual(records[0].predicted_head, "0")

    def test_metadata_label_mismatch(self):
        outputs = [SentencePrediction(metadata=[TokenMetadata(head="0")], labels=["root", "punct"])]

        with self.assertRaises(LengthMismatchError) as ctx:
            extract(outputs)
        self.assertIn("sentence 0", str(ctx.exception))

    def test_empty_output(self):
        self.assertEqual(extract([]), [])


if __name__ == '__main__':
    unittest.main()
