"""Search orchestrator: walks the simulated job sources and scores postings."""

import asyncio
import logging
import math
import random
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Optional

from job_finder.config import AppConfig
from job_finder.jobs.generator import generate_postings
from job_finder.jobs.models import JobPosting, JobSource
from job_finder.profile.models import ExtractedProfile
from job_finder.profile.resume_parser import extract_profile
from job_finder.utils.text_processing import DEFAULT_VOCABULARY, Vocabulary, round_half_up

logger = logging.getLogger("job_finder.search")

JOB_SOURCES = (
    JobSource("LinkedIn", "💼", 1200),
    JobSource("Indeed", "🔍", 1000),
    JobSource("Glassdoor", "🚪", 1100),
    JobSource("Google Jobs", "🔎", 900),
    JobSource("Fortune 500 Companies", "🏢", 1300),
    JobSource("Tech Startups", "🚀", 1000),
    JobSource("Remote Job Boards", "🌍", 800),
    JobSource("Staffing Agencies", "👥", 1100),
)


class SearchRequestError(ValueError):
    """Raised when a search request is missing required input."""


@dataclass
class SearchRequest:
    job_description: str
    resume_text: str = ""
    profile_url: str = ""

    def validate(self) -> None:
        if not self.job_description or not self.job_description.strip():
            raise SearchRequestError("Job description is required")

    def parse_resume(self, vocabulary: Vocabulary = DEFAULT_VOCABULARY) -> Optional[ExtractedProfile]:
        """Extract the resume profile, or None when no resume text was given."""
        if self.resume_text and self.resume_text.strip():
            return extract_profile(self.resume_text, vocabulary)
        return None


@dataclass
class SearchResult:
    jobs: list[JobPosting] = field(default_factory=list)
    sources: list[str] = field(default_factory=list)
    resume_detected: bool = False

    def to_dict(self) -> dict:
        return {
            "success": True,
            "total_results": len(self.jobs),
            "sources": list(self.sources),
            "resume_detected": self.resume_detected,
            "jobs": [job.to_dict() for job in self.jobs],
        }


def jobs_per_source(max_results: int, sources=JOB_SOURCES) -> int:
    return math.ceil(max_results / len(sources)) if sources else 0


def rank_jobs(jobs: list[JobPosting], limit: int) -> list[JobPosting]:
    """Sort by match score descending (stable) and keep the top ``limit``."""
    return sorted(jobs, key=lambda j: j.match_score, reverse=True)[:limit]


def _make_rng(config: AppConfig, rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random(config.search.seed)


def run_search(
    request: SearchRequest,
    config: AppConfig,
    rng: Optional[random.Random] = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    sources=JOB_SOURCES,
) -> SearchResult:
    """Generate and score postings from every source in one pass."""
    request.validate()
    rng = _make_rng(config, rng)
    profile = request.parse_resume(vocabulary)
    per_source = jobs_per_source(config.search.max_results, sources)

    all_jobs: list[JobPosting] = []
    for source in sources:
        all_jobs.extend(generate_postings(
            request.job_description, source, len(all_jobs), per_source, rng,
            profile=profile, profile_url=request.profile_url, vocabulary=vocabulary,
        ))

    logger.info(
        "Search generated %d postings from %d sources (resume: %s)",
        len(all_jobs), len(sources), "yes" if profile else "no",
    )

    return SearchResult(
        jobs=rank_jobs(all_jobs, config.search.max_results),
        sources=[s.name for s in sources],
        resume_detected=profile is not None,
    )


async def stream_search(
    request: SearchRequest,
    config: AppConfig,
    rng: Optional[random.Random] = None,
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
    sources=JOB_SOURCES,
) -> AsyncIterator[dict]:
    """Yield status, jobs, complete (or error) events while searching.

    Request validation happens before the first event, so a bad request
    raises SearchRequestError instead of producing an error event.
    """
    request.validate()
    rng = _make_rng(config, rng)
    profile = request.parse_resume(vocabulary)
    per_source = jobs_per_source(config.search.max_results, sources)
    delay_scale = max(0.0, config.search.delay_scale)
    total_sources = len(sources)
    all_jobs: list[JobPosting] = []

    try:
        yield {
            "type": "status",
            "message": "Analyzing resume and starting job search..." if profile else "Starting job search...",
            "progress": 0,
            "current_source": None,
            "resume_detected": profile is not None,
        }

        for i, source in enumerate(sources):
            yield {
                "type": "status",
                "message": f"Searching {source.name}...",
                "progress": round_half_up(i / total_sources * 100),
                "current_source": source.name,
                "source_icon": source.icon,
                "sources_completed": i,
                "total_sources": total_sources,
            }

            if delay_scale:
                await asyncio.sleep(source.delay_ms / 1000 * delay_scale)

            batch = generate_postings(
                request.job_description, source, len(all_jobs), per_source, rng,
                profile=profile, profile_url=request.profile_url, vocabulary=vocabulary,
            )
            all_jobs.extend(batch)

            yield {
                "type": "jobs",
                "source": source.name,
                "source_icon": source.icon,
                "jobs": [job.to_dict() for job in batch],
                "total_found": len(all_jobs),
            }

        ranked = rank_jobs(all_jobs, config.search.max_results)
        logger.info("Streamed search complete: %d postings", len(all_jobs))

        yield {
            "type": "complete",
            "message": "Search complete!",
            "progress": 100,
            "total_results": len(all_jobs),
            "jobs": [job.to_dict() for job in ranked],
        }
    except Exception:
        logger.exception("Job search failed after %d postings", len(all_jobs))
        yield {
            "type": "error",
            "message": "An error occurred while searching for jobs",
        }
