"""Scoring result data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MatchResult:
    """Outcome of scoring one resume against one job posting."""

    score: int = 0
    matching_skills: tuple[str, ...] = ()
    missing_skills: tuple[str, ...] = ()
    matching_keywords: tuple[str, ...] = ()
    missing_keywords: tuple[str, ...] = ()
    strengths: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    metric_suggestions: tuple[str, ...] = ()
    keyword_density: int = 0
    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "matching_skills": list(self.matching_skills),
            "missing_skills": list(self.missing_skills),
            "matching_keywords": list(self.matching_keywords),
            "missing_keywords": list(self.missing_keywords),
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "metric_suggestions": list(self.metric_suggestions),
            "keyword_density": self.keyword_density,
            "summary": self.summary,
        }


@dataclass(frozen=True)
class ProfileCompletenessResult:
    """Outcome of checking an external profile URL against one job posting."""

    score: int = 50
    headline_suggestion: str = ""
    summary_feedback: tuple[str, ...] = ()
    endorsement_suggestions: tuple[str, ...] = ()
    skill_gaps: tuple[str, ...] = ()
    improvements: tuple[str, ...] = ()
    summary: str = ""

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "headline_suggestion": self.headline_suggestion,
            "summary_feedback": list(self.summary_feedback),
            "endorsement_suggestions": list(self.endorsement_suggestions),
            "skill_gaps": list(self.skill_gaps),
            "improvements": list(self.improvements),
            "summary": self.summary,
        }
