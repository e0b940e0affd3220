"""Unit tests for token-level scoring rules."""

import unittest

from app.verification.rules import default_rule_set
from app.verification.token_scoring import TokenScorer


class TokenScorerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.scorer = TokenScorer(default_rule_set())

    def test_exact_tokens_score_one(self) -> None:
        self.assertEqual(self.scorer.score("picard", "picard"), 1.0)

    def test_nicknames_are_an_equivalence_class(self) -> None:
        self.assertEqual(self.scorer.score("bob", "robert"), 0.95)
        self.assertEqual(self.scorer.score("robert", "bob"), 0.95)
        self.assertEqual(self.scorer.score("bob", "bobby"), 0.95)
        self.assertEqual(self.scorer.score("kate", "catherine"), 0.95)
        self.assertEqual(self.scorer.score("sean", "shawn"), 0.95)
        self.assertFalse(self.scorer.are_nicknames("liam", "william"))

    def test_mc_mac_prefixes(self) -> None:
        self.assertEqual(self.scorer.score("mcdonald", "macdonald"), 0.9)
        self.assertFalse(self.scorer.are_variations("mcdonald", "macdowell"))

    def test_al_el_articles(self) -> None:
        self.assertEqual(self.scorer.score("al", "el"), 0.9)

    def test_transliteration_groups(self) -> None:
        self.assertEqual(self.scorer.score("mohammed", "muhammad"), 0.9)
        self.assertEqual(self.scorer.score("qasim", "alkasim"), 0.9)
        self.assertEqual(self.scorer.score("hilal", "alhilal"), 0.9)

    def test_slavic_endings(self) -> None:
        self.assertEqual(self.scorer.score("dargulov", "darguloff"), 0.9)
        self.assertEqual(self.scorer.score("petrov", "petrof"), 0.9)
        self.assertEqual(self.scorer.score("gorbachov", "gorbachev"), 0.9)

    def test_slavic_endings_need_a_real_stem(self) -> None:
        self.assertFalse(self.scorer.are_variations("lev", "lef"))
        self.assertAlmostEqual(self.scorer.score("lev", "lef"), 2 / 3)

    def test_rashid_rashidi_is_not_a_variation(self) -> None:
        self.assertFalse(self.scorer.are_variations("rashid", "rashidi"))
        self.assertAlmostEqual(self.scorer.score("rashid", "rashidi"), 1 - 1 / 7)

    def test_distinct_pairs_are_dampened(self) -> None:
        for left, right in (
            ("michael", "michelle"),
            ("maria", "mario"),
            ("daniel", "danielle"),
            ("gabrielle", "gabriel"),
            ("christopher", "christian"),
        ):
            self.assertEqual(self.scorer.score(left, right), 0.4, (left, right))

    def test_short_typos_are_floored(self) -> None:
        self.assertEqual(self.scorer.score("tyler", "tlyer"), 0.8)
        self.assertAlmostEqual(self.scorer.score("johnson", "jonson"), 1 - 1 / 7)

    def test_plain_edit_distance_otherwise(self) -> None:
        self.assertAlmostEqual(self.scorer.score("john", "james"), 0.2)

    def test_empty_token_scores_zero(self) -> None:
        self.assertEqual(self.scorer.score("", "omar"), 0.0)


if __name__ == "__main__":
    unittest.main()
