"""Tests for synthetic job posting generation."""

import random

from job_finder.jobs.generator import (
    BASE_REQUIREMENTS,
    LOCATIONS,
    extract_search_keywords,
    generate_postings,
    generate_requirements,
    generate_title,
    preferred_locations,
)
from job_finder.jobs.models import JobSource
from job_finder.profile.resume_parser import extract_profile

SOURCE = JobSource("Indeed", "🔍", 0)


def make_postings(description="senior python backend role", count=5, seed=42, **kwargs):
    return generate_postings(description, SOURCE, 0, count, random.Random(seed), **kwargs)


class TestTitles:
    def test_keywords_override_level_and_role(self):
        title = generate_title(["senior", "backend"], random.Random(1))
        assert title == "Senior Backend Engineer"

    def test_product_manager_needs_both_keywords(self):
        title = generate_title(["product", "manager"], random.Random(1))
        assert title.endswith("Product Manager")


class TestRequirements:
    def test_base_only(self):
        assert generate_requirements([]) == BASE_REQUIREMENTS

    def test_capped_at_six(self):
        requirements = generate_requirements(["react", "python", "aws", "ml"])
        assert len(requirements) == 6
        assert requirements[4].startswith("3+ years of experience with React")


class TestLocations:
    def test_remote_preference(self):
        locations = preferred_locations("remote role")
        assert all("Remote" in loc or loc in LOCATIONS[:5] for loc in locations)

    def test_new_york_preference(self):
        locations = preferred_locations("jobs in New York")
        assert locations
        assert all("New York" in loc or "Remote" in loc for loc in locations)


class TestGeneratePostings:
    def test_count_and_fields(self):
        postings = make_postings(count=4)
        assert len(postings) == 4
        for number, posting in enumerate(postings, start=1):
            assert posting.index == number
            assert posting.url.startswith("https://careers.")
            assert posting.url.endswith(f"/jobs/{number}")
            assert " " not in posting.url
            assert posting.source == "Indeed"
            assert posting.title == "Senior Backend Engineer"
            assert posting.company in posting.description
            assert 1 <= int(posting.posted_date.split()[0]) <= 14
            assert len(posting.requirements) <= 6

    def test_start_index_offsets_numbers(self):
        postings = generate_postings("python", SOURCE, 10, 2, random.Random(0))
        assert [p.index for p in postings] == [11, 12]

    def test_random_scores_without_resume(self):
        for posting in make_postings(count=20):
            assert 70 <= posting.match_score <= 99
            assert posting.resume_analysis is None
            assert posting.profile_analysis is None

    def test_resume_analysis_attached(self):
        profile = extract_profile("Led Python and Docker work, improved uptime 20% for 300 users")
        for posting in make_postings(count=10, profile=profile):
            assert posting.resume_analysis is not None
            assert 40 <= posting.match_score <= 99
            assert "python" in posting.resume_analysis.matching_skills

    def test_empty_resume_is_ignored(self):
        postings = make_postings(profile=extract_profile("   "))
        assert all(p.resume_analysis is None for p in postings)

    def test_profile_analysis_attached(self):
        postings = make_postings(profile_url="https://www.linkedin.com/in/jane-doe-123")
        assert all(p.profile_analysis is not None for p in postings)
        assert all(p.profile_analysis.score == 100 for p in postings)

    def test_seeded_generation_is_reproducible(self):
        first = [p.to_dict() for p in make_postings(seed=7)]
        second = [p.to_dict() for p in make_postings(seed=7)]
        assert first == second


class TestSearchKeywords:
    def test_substring_match(self):
        keywords = extract_search_keywords("Senior Python backend, remote")
        assert {"senior", "python", "backend", "remote"} <= set(keywords)

    def test_empty(self):
        assert extract_search_keywords("") == []
