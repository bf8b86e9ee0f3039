"""Plain-text resume parsing."""

import logging
from pathlib import Path

from job_finder.profile.models import ExtractedProfile
from job_finder.utils.text_processing import (
    DEFAULT_VOCABULARY,
    Vocabulary,
    extract_metrics,
    extract_skills,
    find_terms,
    unique,
)

logger = logging.getLogger("job_finder.profile")

SUPPORTED_SUFFIXES = (".txt", ".md", ".markdown")


def parse_resume(file_path: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> ExtractedProfile:
    """Parse a plain-text resume file (TXT or MD) into an ExtractedProfile."""
    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"Resume file not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported resume format: {suffix} (supported: .txt, .md)")

    text = path.read_text(encoding="utf-8")
    if not text.strip():
        raise ValueError(f"Resume file is empty or unreadable: {file_path}")

    return extract_profile(text, vocabulary)


def extract_profile(text: str, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> ExtractedProfile:
    """Extract skills, action verbs, metrics and section markers from raw text.

    Never raises: empty or ``None`` input gives an empty profile.
    """
    text = text or ""
    text_lower = text.lower()

    skills = extract_skills(text, vocabulary)
    keywords = unique(skills + find_terms(text_lower, vocabulary.action_verbs))

    profile = ExtractedProfile(
        raw_text=text,
        skills=tuple(skills),
        keywords=tuple(keywords),
        metrics=tuple(extract_metrics(text, vocabulary)),
        education=tuple(find_terms(text_lower, vocabulary.education)),
        certifications=tuple(find_terms(text_lower, vocabulary.certifications)),
        experience=tuple(find_terms(text_lower, vocabulary.experience)),
    )

    logger.debug(
        "Parsed resume: %d skills, %d keywords, %d metrics",
        len(profile.skills),
        len(profile.keywords),
        len(profile.metrics),
    )

    return profile
