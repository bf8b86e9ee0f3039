"""Keyword and skill overlap scoring of a resume against a job posting."""

import logging

from job_finder.matching.feedback import (
    IMPROVEMENT_RULES,
    MATCH_SUMMARY_BANDS,
    METRIC_SUGGESTION_RULES,
    STRENGTH_RULES,
    MatchSignals,
    apply_rules,
    pick_band,
)
from job_finder.matching.models import MatchResult
from job_finder.profile.models import ExtractedProfile
from job_finder.utils.text_processing import (
    DEFAULT_VOCABULARY,
    Vocabulary,
    extract_keywords,
    find_terms,
    has_action_verbs,
    round_half_up,
    unique,
)

logger = logging.getLogger("job_finder.matching.keyword")

# Scoring weights (points out of 100)
WEIGHT_SKILLS = 40
WEIGHT_KEYWORDS = 30
BONUS_METRICS = 15
BONUS_ACTION_VERBS = 10
BONUS_CERTIFICATIONS = 5

# Ratio used when the posting names no recognizable terms
NEUTRAL_RATIO = 0.5

MAX_MATCHING_KEYWORDS = 10
MAX_MISSING_KEYWORDS = 8
MAX_MISSING_SKILLS = 6
MAX_STRENGTHS = 4
MAX_IMPROVEMENTS = 4
MAX_METRIC_SUGGESTIONS = 3


def build_target_text(title: str, description: str, requirements) -> str:
    """Lowercased concatenation of everything a posting says about itself."""
    return f"{title or ''} {description or ''} {' '.join(requirements or [])}".lower()


def _ratio(matched: int, total: int) -> float:
    return matched / total if total else NEUTRAL_RATIO


def score_resume(
    profile: ExtractedProfile,
    title: str,
    description: str,
    requirements,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> MatchResult:
    """Score a resume against a posting and attach advice.

    The score is 40 points of skill overlap, 30 of keyword overlap, and
    bonuses for metrics (15), action verbs (10) and certifications (5).
    """
    target_text = build_target_text(title, description, requirements)
    resume_text = profile.raw_text.lower()

    # 1. Skills
    target_skills = find_terms(target_text, vocabulary.skills)
    target_skills_lower = {s.lower() for s in target_skills}
    profile_skills_lower = {s.lower() for s in profile.skills}

    matching_skills = unique(s for s in profile.skills if s.lower() in target_skills_lower)
    missing_skills = unique(s for s in target_skills if s.lower() not in profile_skills_lower)

    # 2. Keywords
    target_keywords = extract_keywords(target_text, vocabulary)
    resume_keywords = extract_keywords(resume_text, vocabulary)
    target_keywords_lower = {k.lower() for k in target_keywords}
    resume_keywords_lower = {k.lower() for k in resume_keywords}

    matching_keywords = [k for k in resume_keywords if k.lower() in target_keywords_lower]
    missing_keywords = [k for k in target_keywords if k.lower() not in resume_keywords_lower]
    missing_keywords = missing_keywords[:MAX_MISSING_KEYWORDS]

    # 3. Weighted total
    skill_ratio = _ratio(len(matching_skills), len(target_skills))
    keyword_ratio = _ratio(len(matching_keywords), len(target_keywords))
    action_verbs = has_action_verbs(resume_text, vocabulary)

    total = (
        skill_ratio * WEIGHT_SKILLS
        + keyword_ratio * WEIGHT_KEYWORDS
        + (BONUS_METRICS if profile.metrics else 0)
        + (BONUS_ACTION_VERBS if action_verbs else 0)
        + (BONUS_CERTIFICATIONS if profile.certifications else 0)
    )
    score = max(0, min(100, round_half_up(total)))

    # 4. Feedback
    signals = MatchSignals(
        target_text=target_text,
        matching_skills=tuple(matching_skills),
        missing_skills=tuple(missing_skills),
        matching_keywords=tuple(matching_keywords),
        missing_keywords=tuple(missing_keywords),
        metrics=profile.metrics,
        certifications=profile.certifications,
        has_action_verbs=action_verbs,
    )

    logger.debug(
        "Scored resume against '%s': %d (skills %.2f, keywords %.2f)",
        title, score, skill_ratio, keyword_ratio,
    )

    return MatchResult(
        score=score,
        matching_skills=tuple(matching_skills),
        missing_skills=tuple(missing_skills[:MAX_MISSING_SKILLS]),
        matching_keywords=tuple(unique(matching_keywords)[:MAX_MATCHING_KEYWORDS]),
        missing_keywords=tuple(unique(missing_keywords)),
        strengths=apply_rules(STRENGTH_RULES, signals, MAX_STRENGTHS),
        improvements=apply_rules(IMPROVEMENT_RULES, signals, MAX_IMPROVEMENTS),
        metric_suggestions=apply_rules(METRIC_SUGGESTION_RULES, signals, MAX_METRIC_SUGGESTIONS),
        keyword_density=max(0, min(100, round_half_up(keyword_ratio * 100))),
        summary=pick_band(score, MATCH_SUMMARY_BANDS),
    )
