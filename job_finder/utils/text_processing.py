"""Vocabulary tables, term lookup, and metric extraction."""

import math
import re
from dataclasses import dataclass, field, replace

# Recognized skills, in match order
TECH_SKILLS = (
    # Languages
    "javascript", "typescript", "python", "java", "c++", "c#", "go", "rust",
    "ruby", "php", "swift", "kotlin",
    # Frameworks & Libraries
    "react", "angular", "vue", "svelte", "next.js", "node.js", "express",
    "django", "flask", "fastapi", "spring",
    # Cloud & Infra
    "aws", "azure", "gcp", "docker", "kubernetes", "terraform", "jenkins",
    "ci/cd", "devops",
    # Databases & APIs
    "sql", "postgresql", "mysql", "mongodb", "redis", "elasticsearch",
    "graphql", "rest api",
    # Data & ML
    "machine learning", "deep learning", "tensorflow", "pytorch",
    "scikit-learn", "nlp", "computer vision",
    # Tools & Practices
    "git", "agile", "scrum", "jira", "confluence", "figma", "sketch",
    "html", "css", "sass", "tailwind", "bootstrap", "webpack", "vite",
    "testing", "jest", "cypress", "selenium", "unit testing",
    "integration testing", "microservices", "api design", "system design",
    "distributed systems", "scalability",
    # Analytics
    "data analysis", "data visualization", "tableau", "power bi", "excel",
    "pandas", "numpy",
    # Soft skills
    "leadership", "management", "communication", "problem-solving",
    "teamwork", "collaboration",
)

# Verbs that indicate accomplishment-oriented resume writing
ACTION_VERBS = (
    "achieved", "built", "created", "delivered", "developed", "designed",
    "established", "generated", "implemented", "improved", "increased",
    "launched", "led", "managed", "optimized", "reduced", "resolved",
    "scaled", "spearheaded", "streamlined", "transformed",
)

# Role, seniority, work-mode and business terms
JOB_TERMS = (
    "remote", "hybrid", "onsite", "full-time", "contract",
    "senior", "junior", "lead", "principal", "staff", "manager",
    "startup", "enterprise", "b2b", "b2c", "saas",
    "cross-functional", "stakeholder", "roadmap", "strategy",
    "analytics", "metrics", "kpi", "okr", "roi",
)

EDUCATION_MARKERS = (
    "bachelor", "master", "phd", "degree", "university", "college",
    "certification", "certified",
)

CERTIFICATION_MARKERS = (
    "aws certified", "google certified", "microsoft certified", "pmp",
    "scrum master", "cissp", "cka", "ckad",
)

EXPERIENCE_MARKERS = (
    "experience", "work history", "employment", "professional background",
)

# (pattern, case-insensitive) pairs, applied in order
METRIC_PATTERNS = (
    (r"\d+%", False),
    (r"\$[\d,]+", False),
    (r"\d+x", False),
    (r"\d+\+?\s*(users|customers|clients|employees|team members)", True),
    (r"\d+\+?\s*(years|months)", True),
    (r"\d+\+?\s*(projects|applications|systems|features)", True),
)


def _compile_patterns(patterns) -> tuple[re.Pattern, ...]:
    return tuple(
        re.compile(pattern, re.ASCII | (re.IGNORECASE if ignore_case else 0))
        for pattern, ignore_case in patterns
    )


@dataclass(frozen=True)
class Vocabulary:
    """Fixed term tables used by extraction and scoring.

    Every table is an ordered tuple; lookup order determines output order.
    Tests and config files swap in smaller tables via ``with_overrides``.
    """

    skills: tuple[str, ...] = TECH_SKILLS
    action_verbs: tuple[str, ...] = ACTION_VERBS
    job_terms: tuple[str, ...] = JOB_TERMS
    education: tuple[str, ...] = EDUCATION_MARKERS
    certifications: tuple[str, ...] = CERTIFICATION_MARKERS
    experience: tuple[str, ...] = EXPERIENCE_MARKERS
    metric_patterns: tuple[tuple[str, bool], ...] = METRIC_PATTERNS
    _compiled: tuple[re.Pattern, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_compiled", _compile_patterns(self.metric_patterns))

    @property
    def compiled_metric_patterns(self) -> tuple[re.Pattern, ...]:
        return self._compiled

    def with_overrides(self, **tables) -> "Vocabulary":
        """Return a copy with the given tables replaced (lists become tuples)."""
        cleaned = {}
        for name, terms in tables.items():
            if name == "metric_patterns":
                cleaned[name] = tuple((str(p), i) for p, i in terms)
            else:
                cleaned[name] = tuple(str(t) for t in terms)
        return replace(self, **cleaned)


DEFAULT_VOCABULARY = Vocabulary()


def find_terms(text_lower: str, terms) -> list[str]:
    """Return the terms whose lowercase form occurs in ``text_lower``, in table order."""
    return [term for term in terms if term.lower() in text_lower]


def unique(items) -> list[str]:
    """Deduplicate while preserving first-seen order."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def extract_skills(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Extract recognized skills from text (case-insensitive substring match)."""
    return find_terms((text or "").lower(), vocabulary.skills)


def extract_keywords(text_lower: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Skills plus role/seniority/business terms found in already-lowercased text."""
    keywords = find_terms(text_lower, vocabulary.skills)
    keywords.extend(find_terms(text_lower, vocabulary.job_terms))
    return unique(keywords)


def extract_metrics(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> list[str]:
    """Collect quantified-achievement snippets from the original-case text.

    Matches from every pattern are concatenated in pattern order, so a span
    such as "5 years" may appear more than once if several patterns hit it.
    """
    metrics = []
    for pattern in vocabulary.compiled_metric_patterns:
        metrics.extend(match.group(0) for match in pattern.finditer(text or ""))
    return metrics


def has_action_verbs(text_lower: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> bool:
    return any(verb.lower() in text_lower for verb in vocabulary.action_verbs)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (unlike built-in round)."""
    return int(math.floor(value + 0.5))
