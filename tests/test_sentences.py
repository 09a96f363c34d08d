import unittest

from depeval.core.data_structures import ConlluToken
from depeval.core.exceptions import SentenceBoundaryMissingError
from depeval.ingestion.reader import parse_conllu_lines
from depeval.ingestion.sentences import assign_sentence_ids, group_sentences, to_sentence_texts


def make_tokens(*sentences):
    """Токены из списков форм: каждый список задает одно предложение с id 1..n."""
    tokens = []
    for forms in sentences:
        for i, form in enumerate(forms, 1):
            tokens.append(ConlluToken.from_fields([str(i), form, "_", "_", "_", "_", "0", "dep", "_", "_"]))
    return tokens


class TestSentenceReconstructor(unittest.TestCase):
    def test_single_sentence_text(self):
        lines = "1\tThe\t_\t_\t_\t_\t2\tdet\t_\t_\n2\tdog\t_\t_\t_\t_\t0\troot\t_\t_\n".splitlines(True)
        self.assertEqual(to_sentence_texts(parse_conllu_lines(lines)), ["The dog"])

    def test_sentence_count_equals_boundaries(self):
        tokens = make_tokens(["A", "b", "."], ["C", "d"], ["E"])
        sentences = group_sentences(tokens)

        self.assertEqual(len(sentences), sum(1 for t in tokens if t.id == "1"))
        self.assertEqual(sum(len(s) for s in sentences), len(tokens))
        self.assertEqual([s.text for s in sentences], ["A b .", "C d", "E"])

    def test_ids_non_decreasing(self):
        ids = assign_sentence_ids(make_tokens(["a", "b"], ["c"], ["d", "e", "f"]))

        self.assertEqual(ids, [1, 1, 2, 3, 3, 3])
        self.assertTrue(all(x <= y for x, y in zip(ids, ids[1:])))

    def test_comment_does_not_affect_numbering(self):
        lines = [
            "# sent_id = 1\n",
            "1\tThe\t_\t_\t_\t_\t2\tdet\t_\t_\n",
            "2\tdog\t_\t_\t_\t_\t0\troot\t_\t_\n",
        ]
        sentences = group_sentences(parse_conllu_lines(lines))

        self.assertEqual(len(sentences), 1)
        self.assertEqual(sentences[0].sentence_id, 1)
        self.assertEqual(len(sentences[0]), 2)

    def test_intra_sentence_order_preserved(self):
        # Внутри предложения сохраняется порядок файла
        tokens = make_tokens(["x"])
        tokens += [ConlluToken.from_fields([i, f, "_", "_", "_", "_", "0", "dep", "_", "_"])
                   for i, f in [("3", "c"), ("2", "b")]]
        self.assertEqual(to_sentence_texts(tokens), ["x c b"])

    def test_missing_boundary_is_error(self):
        tokens = make_tokens(["a", "b"])[1:]  # начинается с id == "2"

        with self.assertRaises(SentenceBoundaryMissingError):
            group_sentences(tokens)

    def test_empty_input(self):
        self.assertEqual(group_sentences([]), [])
        self.assertEqual(assign_sentence_ids([]), [])

    def test_repeated_runs_do_not_accumulate(self):
        # Счетчик не глобальный: второй прогон нумерует с 1
        tokens = make_tokens(["a"], ["b"])
        first = [s.sentence_id for s in group_sentences(tokens)]
        second = [s.sentence_id for s in group_sentences(tokens)]
        self.assertEqual(first, [1, 2])
        self.assertEqual(second, [1, 2])


if __name__ == '__main__':
    unittest.main()
