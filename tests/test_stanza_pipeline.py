import unittest
from types import SimpleNamespace

from depeval.evaluation.extractor import extract
from depeval.parsers.stanza_pipeline import StanzaPipeline


def fake_doc(*sentences):
    """Имитация stanza.Document: sentences -> words(id, text, head, deprel, upos)."""
    return SimpleNamespace(sentences=[
        SimpleNamespace(words=[
            SimpleNamespace(id=i, text=text, head=head, deprel=deprel, upos="X")
            for i, (text, head, deprel) in enumerate(words, 1)
        ])
        for words in sentences
    ])


class TestStanzaPipeline(unittest.TestCase):
    def test_transform_requires_fit(self):
        with self.assertRaises(RuntimeError):
            StanzaPipeline().transform(["The dog"])

    def test_words_to_prediction(self):
        pipeline = StanzaPipeline()
        pipeline.nlp = lambda text: fake_doc([("The", 2, "det"), ("dog", 0, "root")])

        outputs = pipeline.transform(["The dog"])
        records = extract(outputs)

        self.assertEqual(len(outputs), 1)
        self.assertEqual([r.predicted_head for r in records], ["2", "0"])
        self.assertEqual([r.predicted_deprel for r in records], ["det", "root"])

    def test_split_document_is_flattened(self):
        doc = fake_doc([("Hi", 0, "root")], [("Bye", 0, "root")])
        prediction = StanzaPipeline._to_prediction(doc)

        self.assertEqual(len(prediction.metadata), 2)
        self.assertEqual(prediction.labels, ["root", "root"])


if __name__ == '__main__':
    unittest.main()
