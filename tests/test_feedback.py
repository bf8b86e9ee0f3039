"""Tests for feedback rule tables."""

from job_finder.matching.feedback import (
    IMPROVEMENT_RULES,
    MATCH_SUMMARY_BANDS,
    STRENGTH_RULES,
    FeedbackRule,
    MatchSignals,
    apply_rules,
    fixed,
    mentions,
    pick_band,
)


def make_signals(**kwargs) -> MatchSignals:
    defaults = dict(
        target_text="",
        matching_skills=(),
        missing_skills=(),
        matching_keywords=(),
        missing_keywords=(),
        metrics=(),
        certifications=(),
        has_action_verbs=False,
    )
    defaults.update(kwargs)
    return MatchSignals(**defaults)


class TestApplyRules:
    def test_order_follows_table_not_trigger(self):
        rules = (
            FeedbackRule("first", lambda s: True, fixed("one")),
            FeedbackRule("second", lambda s: False, fixed("two")),
            FeedbackRule("third", lambda s: True, fixed("three")),
        )
        assert apply_rules(rules, make_signals(), limit=5) == ("one", "three")

    def test_cap_truncates(self):
        rules = tuple(FeedbackRule(str(i), lambda s: True, fixed(str(i))) for i in range(5))
        assert apply_rules(rules, make_signals(), limit=2) == ("0", "1")

    def test_mentions(self):
        applies = mentions("revenue", "cost")
        assert applies(make_signals(target_text="cut cost"))
        assert not applies(make_signals(target_text="grow users"))


class TestRuleTables:
    def test_skill_alignment_counts_matches(self):
        signals = make_signals(matching_skills=("python", "go", "sql"))
        assert apply_rules(STRENGTH_RULES, signals, 4) == (
            "Strong technical skill alignment (3 matching skills)",
        )

    def test_missing_skills_names_first_four(self):
        signals = make_signals(
            missing_skills=("a", "b", "c", "d", "e"),
            metrics=("1%", "2%"),
            has_action_verbs=True,
        )
        assert apply_rules(IMPROVEMENT_RULES, signals, 4) == (
            "Add these in-demand skills if you have them: a, b, c, d",
        )

    def test_missing_keywords_needs_more_than_three(self):
        signals = make_signals(
            missing_keywords=("a", "b", "c"),
            metrics=("1%", "2%"),
            has_action_verbs=True,
        )
        assert apply_rules(IMPROVEMENT_RULES, signals, 4) == ()


class TestPickBand:
    def test_band_edges(self):
        assert pick_band(80, MATCH_SUMMARY_BANDS) == MATCH_SUMMARY_BANDS[0][1]
        assert pick_band(79, MATCH_SUMMARY_BANDS) == MATCH_SUMMARY_BANDS[1][1]
        assert pick_band(60, MATCH_SUMMARY_BANDS) == MATCH_SUMMARY_BANDS[1][1]
        assert pick_band(40, MATCH_SUMMARY_BANDS) == MATCH_SUMMARY_BANDS[2][1]
        assert pick_band(39, MATCH_SUMMARY_BANDS) == MATCH_SUMMARY_BANDS[3][1]
        assert pick_band(0, MATCH_SUMMARY_BANDS) == MATCH_SUMMARY_BANDS[3][1]
