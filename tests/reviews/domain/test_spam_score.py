"""Tests for the spam scoring heuristic."""

import pytest
from reviews.review.spam import (
    SpamLevel,
    matched_phrases,
    spam_score,
    threshold_for,
    uppercase_ratio,
)


class TestIndividualSignals:
    def test_clean_review_scores_zero(self):
        assert spam_score("Great kettle", "Boils quickly and looks nice on the counter.") == 0.0

    def test_repeated_punctuation(self):
        assert spam_score("Great", "Absolutely wonderful service!!") == 0.2

    def test_repeated_question_marks(self):
        assert spam_score("Hmm", "Why would anyone design it like this??") == 0.2

    def test_single_exclamation_is_fine(self):
        assert spam_score("Great", "Absolutely wonderful service!") == 0.0

    def test_short_comment(self):
        assert spam_score("Meh", "Bad") == 0.3

    def test_empty_comment_counts_as_short(self):
        assert spam_score("Meh", "") == 0.3

    def test_shouting(self):
        assert spam_score("Loud", "THIS KETTLE IS GREAT") == 0.3

    def test_half_uppercase_is_not_shouting(self):
        # exactly half the characters are uppercase letters
        assert uppercase_ratio("ABCDEfghij") == 0.5
        assert spam_score("Fine", "ABCDEfghij") == 0.0

    def test_repeated_character(self):
        assert spam_score("Nice", "Sooooo good for the price") == 0.2

    def test_three_repeats_are_fine(self):
        assert spam_score("Nice", "Sooo good for the price") == 0.0


class TestDenylistedPhrases:
    def test_phrase_in_comment(self):
        assert spam_score("Hmm", "I think this might be fake honestly") == 0.2

    def test_phrase_in_title(self):
        assert spam_score("Worst purchase", "It arrived on time and works.") == 0.2

    def test_matching_is_case_insensitive(self):
        assert matched_phrases("", "Never Buy from them again") == ["never buy"]

    def test_each_phrase_counts(self):
        assert spam_score("Terrible", "A scam and totally fake product here") == 0.6

    def test_phrase_in_both_fields_counts_once(self):
        assert spam_score("Scam", "This seller is a scam, stay away") == 0.2


class TestScoreBounds:
    def test_signals_combine(self):
        # shouting, repeated punctuation and one phrase
        assert spam_score("Warning", "THIS IS A SCAM!!!") == 0.7

    def test_score_is_clamped_to_one(self):
        assert spam_score("FAKE", "FAKE SCAM WORST TERRIBLE!!!! never buy") == 1.0

    def test_score_is_deterministic(self):
        comment = "Terrible quality, fake reviews everywhere!!"
        assert spam_score("x", comment) == spam_score("x", comment)

    @pytest.mark.parametrize(
        "title, comment",
        [
            ("a", ""),
            ("Great", "Lovely"),
            ("SCAM", "WORST FAKE TERRIBLE SCAM!!!!!!"),
            ("ok", "A perfectly ordinary review of an ordinary product."),
        ],
    )
    def test_score_stays_in_range(self, title, comment):
        assert 0.0 <= spam_score(title, comment) <= 1.0


class TestSpamLevels:
    def test_thresholds(self):
        assert threshold_for(SpamLevel.HIGH) == 0.7
        assert threshold_for(SpamLevel.MEDIUM) == 0.4
        assert threshold_for(SpamLevel.LOW) == 0.0

    def test_threshold_accepts_level_value(self):
        assert threshold_for("high") == 0.7

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            threshold_for("extreme")
