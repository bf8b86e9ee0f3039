"""Job posting data model."""

import hashlib
from dataclasses import dataclass, field
from typing import Optional

from job_finder.matching.models import MatchResult, ProfileCompletenessResult


@dataclass(frozen=True)
class JobSource:
    """A simulated job board searched by the orchestrator."""

    name: str
    icon: str
    delay_ms: int


@dataclass
class JobPosting:
    """Represents a generated job posting and its analysis."""

    title: str
    company: str
    url: str
    index: int = 0
    location: str = ""
    description: str = ""
    requirements: list[str] = field(default_factory=list)
    salary: str = ""
    source: str = ""
    source_icon: str = ""
    posted_date: str = ""
    job_type: str = ""  # Full-time, Contract, ...
    match_score: int = 0
    resume_tip: str = ""
    profile_tip: str = ""
    resume_analysis: Optional[MatchResult] = None
    profile_analysis: Optional[ProfileCompletenessResult] = None

    @property
    def job_id(self) -> str:
        """Generate a stable ID via SHA-256 of (index, title, company, url)."""
        raw = f"{self.index}|{self.title.strip().lower()}|{self.company.strip().lower()}|{self.url.strip().lower()}"
        return hashlib.sha256(raw.encode()).hexdigest()[:16]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "job_id": self.job_id,
            "title": self.title,
            "company": self.company,
            "url": self.url,
            "location": self.location,
            "description": self.description,
            "requirements": list(self.requirements),
            "salary": self.salary,
            "source": self.source,
            "source_icon": self.source_icon,
            "posted_date": self.posted_date,
            "job_type": self.job_type,
            "match_score": self.match_score,
            "resume_tip": self.resume_tip,
            "profile_tip": self.profile_tip,
            "resume_analysis": self.resume_analysis.to_dict() if self.resume_analysis else None,
            "profile_analysis": self.profile_analysis.to_dict() if self.profile_analysis else None,
        }
