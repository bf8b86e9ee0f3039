"""Tests for profile URL completeness scoring."""

from job_finder.matching.models import MatchResult
from job_finder.matching.profile_scorer import (
    MISSING_PROFILE_SUMMARY,
    PROFILE_IMPROVEMENTS,
    PROFILE_SUMMARY_BANDS,
    score_profile,
    suggest_headline,
)

FULL_URL = "https://www.linkedin.com/in/jane-doe-123"  # 40 chars
TITLE = "Senior Backend Engineer"
DESCRIPTION = "Build backend services."
REQUIREMENTS = ["Python", "Docker", "Kubernetes"]


def make_match(**kwargs) -> MatchResult:
    defaults = dict(
        score=67,
        matching_skills=("python", "docker"),
        missing_skills=("kubernetes",),
    )
    defaults.update(kwargs)
    return MatchResult(**defaults)


def score(url: str, match_result=None):
    return score_profile(url, TITLE, DESCRIPTION, REQUIREMENTS, match_result)


class TestMissingProfile:
    def test_empty_url_scores_fifty(self):
        result = score("")
        assert result.score == 50
        assert result.summary == MISSING_PROFILE_SUMMARY
        assert len(result.summary_feedback) == 2

    def test_missing_summary_wins_over_match_result(self):
        result = score("   ", make_match(score=95))
        assert result.score == 50
        assert result.summary == MISSING_PROFILE_SUMMARY

    def test_none_url(self):
        assert score(None).score == 50


class TestCompleteness:
    def test_full_url(self):
        result = score(FULL_URL)
        assert result.score == 100
        assert result.summary == PROFILE_SUMMARY_BANDS[0][1]
        assert len(result.summary_feedback) == 3

    def test_short_profile_path(self):
        result = score("linkedin.com/in/jd")
        assert result.score == 75
        assert result.summary == PROFILE_SUMMARY_BANDS[1][1]

    def test_no_indicators(self):
        result = score("example.com/me")
        assert result.score == 50
        assert result.summary == PROFILE_SUMMARY_BANDS[2][1]

    def test_blends_with_match_score_rounding_half_up(self):
        # (100 + 67) / 2 = 83.5
        assert score(FULL_URL, make_match(score=67)).score == 84

    def test_low_blend(self):
        result = score("x", make_match(score=0))
        assert result.score == 25
        assert result.summary == PROFILE_SUMMARY_BANDS[3][1]


class TestAdvice:
    def test_headline_with_matching_skills(self):
        assert suggest_headline(TITLE, make_match()) == "Backend Engineer | python & docker | Open to Opportunities"

    def test_headline_without_match(self):
        assert suggest_headline(TITLE) == "Backend Engineer | Experienced Professional | Always Learning"

    def test_headline_in_first_tip(self):
        result = score(FULL_URL, make_match())
        assert result.summary_feedback[0] == f"Update your headline to match this role: {result.headline_suggestion}"

    def test_endorsements_from_match_result(self):
        result = score(FULL_URL, make_match())
        assert result.endorsement_suggestions == ("python", "docker")
        assert result.skill_gaps == ("kubernetes",)

    def test_endorsements_from_target_skills(self):
        result = score(FULL_URL)
        assert result.endorsement_suggestions == ("python", "docker", "kubernetes")
        assert result.skill_gaps == ("python", "docker", "kubernetes")

    def test_fixed_improvements(self):
        assert score("").improvements == PROFILE_IMPROVEMENTS
        assert len(PROFILE_IMPROVEMENTS) == 5

    def test_deterministic(self):
        assert score(FULL_URL, make_match()) == score(FULL_URL, make_match())
