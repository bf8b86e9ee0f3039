"""Rule tables that turn match signals into advice strings."""

from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchSignals:
    """Everything the feedback rules are allowed to look at."""

    target_text: str
    matching_skills: tuple[str, ...]
    missing_skills: tuple[str, ...]
    matching_keywords: tuple[str, ...]
    missing_keywords: tuple[str, ...]
    metrics: tuple[str, ...]
    certifications: tuple[str, ...]
    has_action_verbs: bool


@dataclass(frozen=True)
class FeedbackRule:
    name: str
    applies: Callable[[MatchSignals], bool]
    render: Callable[[MatchSignals], str]


def fixed(message: str) -> Callable[[MatchSignals], str]:
    return lambda signals: message


def mentions(*words: str) -> Callable[[MatchSignals], bool]:
    """Trigger when any of the words occurs in the lowercased target text."""
    return lambda signals: any(word in signals.target_text for word in words)


def apply_rules(rules, signals: MatchSignals, limit: int) -> tuple[str, ...]:
    """Evaluate every rule in order, then keep the first ``limit`` messages."""
    messages = [rule.render(signals) for rule in rules if rule.applies(signals)]
    return tuple(messages[:limit])


STRENGTH_RULES = (
    FeedbackRule(
        "skill_alignment",
        lambda s: len(s.matching_skills) >= 3,
        lambda s: f"Strong technical skill alignment ({len(s.matching_skills)} matching skills)",
    ),
    FeedbackRule(
        "quantified_achievements",
        lambda s: len(s.metrics) >= 2,
        fixed("Good use of quantifiable metrics and achievements"),
    ),
    FeedbackRule(
        "action_verbs",
        lambda s: s.has_action_verbs,
        fixed("Effective use of action verbs to describe accomplishments"),
    ),
    FeedbackRule(
        "certifications",
        lambda s: len(s.certifications) > 0,
        lambda s: f"Relevant certifications found ({', '.join(s.certifications)})",
    ),
    FeedbackRule(
        "keyword_alignment",
        lambda s: len(s.matching_keywords) >= 5,
        fixed("Strong keyword alignment with job description"),
    ),
)

IMPROVEMENT_RULES = (
    FeedbackRule(
        "missing_skills",
        lambda s: len(s.missing_skills) > 0,
        lambda s: f"Add these in-demand skills if you have them: {', '.join(s.missing_skills[:4])}",
    ),
    FeedbackRule(
        "few_metrics",
        lambda s: len(s.metrics) < 2,
        fixed("Include more quantifiable achievements (percentages, dollar amounts, user counts)"),
    ),
    FeedbackRule(
        "no_action_verbs",
        lambda s: not s.has_action_verbs,
        fixed("Start bullet points with strong action verbs (Led, Developed, Achieved, etc.)"),
    ),
    FeedbackRule(
        "missing_keywords",
        lambda s: len(s.missing_keywords) > 3,
        lambda s: f"Consider incorporating these keywords: {', '.join(s.missing_keywords[:4])}",
    ),
)

METRIC_SUGGESTION_RULES = (
    FeedbackRule(
        "team_size",
        mentions("team", "lead"),
        fixed('Add team size you\'ve managed or collaborated with (e.g., "Led a team of 8 engineers")'),
    ),
    FeedbackRule(
        "performance",
        mentions("performance", "optimization"),
        fixed('Include performance improvements (e.g., "Improved load time by 40%")'),
    ),
    FeedbackRule(
        "business_impact",
        mentions("revenue", "cost"),
        fixed('Add business impact metrics (e.g., "Reduced costs by $50K annually")'),
    ),
    FeedbackRule(
        "user_impact",
        mentions("user", "customer"),
        fixed('Include user/customer impact (e.g., "Served 100K+ daily active users")'),
    ),
    FeedbackRule(
        "delivery",
        mentions("project", "delivery"),
        fixed('Mention project delivery metrics (e.g., "Delivered 15 features ahead of schedule")'),
    ),
)

# (minimum score, narrative), highest band first
MATCH_SUMMARY_BANDS = (
    (80, "Excellent match! Your resume aligns very well with this position. "
         "Focus on tailoring your cover letter to stand out."),
    (60, "Good match with room for improvement. Consider highlighting the matching "
         "skills more prominently and addressing the missing keywords."),
    (40, "Moderate match. You may need to emphasize transferable skills and add more "
         "relevant keywords to strengthen your application."),
    (0, "This role may require significant resume tailoring. Focus on highlighting "
        "any relevant experience and consider gaining the missing skills."),
)


def pick_band(score: int, bands) -> str:
    """Return the narrative of the first band whose minimum the score reaches."""
    for minimum, narrative in bands:
        if score >= minimum:
            return narrative
    return bands[-1][1]
