"""Extracted profile data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedProfile:
    """Structured view of a resume's plain text.

    Term collections keep vocabulary order and never repeat a term, except
    ``metrics`` which keeps every pattern match as found.
    """

    raw_text: str = ""
    skills: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    metrics: tuple[str, ...] = ()
    education: tuple[str, ...] = ()
    certifications: tuple[str, ...] = ()
    experience: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.raw_text.strip()

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization (raw text omitted)."""
        return {
            "skills": list(self.skills),
            "keywords": list(self.keywords),
            "metrics": list(self.metrics),
            "education": list(self.education),
            "certifications": list(self.certifications),
            "experience": list(self.experience),
        }

    def to_summary_string(self) -> str:
        """Create a concise text summary for console output."""
        parts = []
        if self.skills:
            parts.append(f"Skills: {', '.join(self.skills)}")
        if self.metrics:
            parts.append(f"Metrics: {', '.join(self.metrics)}")
        if self.education:
            parts.append(f"Education: {', '.join(self.education)}")
        if self.certifications:
            parts.append(f"Certifications: {', '.join(self.certifications)}")
        return "\n".join(parts)
