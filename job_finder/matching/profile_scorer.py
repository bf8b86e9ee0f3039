"""Profile URL completeness scoring, optionally blended with a resume match."""

import logging
from typing import Optional

from job_finder.matching.feedback import pick_band
from job_finder.matching.keyword_matcher import build_target_text
from job_finder.matching.models import MatchResult, ProfileCompletenessResult
from job_finder.utils.text_processing import (
    DEFAULT_VOCABULARY,
    Vocabulary,
    find_terms,
    round_half_up,
    unique,
)

logger = logging.getLogger("job_finder.matching.profile")

BASE_SCORE = 50
INDICATOR_POINTS = 25
MIN_COMPLETE_URL_LENGTH = 30

MISSING_PROFILE_SUMMARY = (
    "LinkedIn profile is missing or incomplete. A complete profile significantly "
    "improves your visibility to recruiters."
)

PROFILE_SUMMARY_BANDS = (
    (80, "Excellent LinkedIn profile! Keep it updated and consistent with your resume."),
    (60, "Good LinkedIn foundation. Add more specific accomplishments and get skill endorsements."),
    (40, "Your LinkedIn profile is a reasonable start. Align your headline and experience "
         "with the roles you are targeting."),
    (0, "Your LinkedIn profile needs attention. Update it with recent experience and "
        "stronger positioning."),
)

PROFILE_IMPROVEMENTS = (
    "Add detailed job descriptions with quantifiable results",
    "Get endorsements for skills matching this job role",
    "Ask colleagues for recommendations highlighting your strengths",
    "Include any relevant certifications and courses",
    "Show volunteer work or open source contributions if applicable",
)


def suggest_headline(title: str, match_result: Optional[MatchResult] = None) -> str:
    role = " ".join((title or "").split(" ")[-2:])
    if match_result and match_result.matching_skills:
        top_skills = " & ".join(match_result.matching_skills[:2])
        return f"{role} | {top_skills} | Open to Opportunities"
    return f"{role} | Experienced Professional | Always Learning"


def _summary_feedback(has_profile: bool, headline: str) -> list[str]:
    if not has_profile:
        return [
            "Create or complete your LinkedIn profile with a professional photo and comprehensive headline",
            "Add a compelling summary highlighting your career goals and key achievements",
        ]
    return [
        f"Update your headline to match this role: {headline}",
        "Include specific accomplishments and metrics in your summary section",
        "Mention industry experience and key projects you've worked on",
    ]


def score_profile(
    profile_url: str,
    title: str,
    description: str,
    requirements,
    match_result: Optional[MatchResult] = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> ProfileCompletenessResult:
    """Score how complete a profile URL looks for a posting.

    An absent URL keeps the base score of 50 and always gets the
    missing-profile summary, even when a resume match is supplied.
    """
    profile_url = profile_url or ""
    has_profile = bool(profile_url.strip())
    target_skills = find_terms(build_target_text(title, description, requirements), vocabulary.skills)

    score = BASE_SCORE
    if has_profile:
        indicators = (
            "/in/" in profile_url.lower(),
            len(profile_url) > MIN_COMPLETE_URL_LENGTH,
        )
        score = min(100, BASE_SCORE + INDICATOR_POINTS * sum(indicators))
        if match_result is not None:
            score = round_half_up((score + match_result.score) / 2)

    headline = suggest_headline(title, match_result)

    if match_result is not None:
        endorsements = match_result.matching_skills[:5]
        skill_gaps = match_result.missing_skills[:4]
    else:
        endorsements = target_skills[:5]
        skill_gaps = target_skills[:4]

    if has_profile:
        summary = pick_band(score, PROFILE_SUMMARY_BANDS)
    else:
        summary = MISSING_PROFILE_SUMMARY

    logger.debug("Scored profile URL (present=%s): %d", has_profile, score)

    return ProfileCompletenessResult(
        score=score,
        headline_suggestion=headline,
        summary_feedback=tuple(_summary_feedback(has_profile, headline)[:3]),
        endorsement_suggestions=tuple(unique(endorsements)),
        skill_gaps=tuple(unique(skill_gaps)),
        improvements=PROFILE_IMPROVEMENTS,
        summary=summary,
    )
