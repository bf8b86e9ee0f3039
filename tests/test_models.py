"""Tests for data models."""

import dataclasses

import pytest

from job_finder.jobs.models import JobPosting
from job_finder.matching.models import MatchResult, ProfileCompletenessResult
from job_finder.profile.models import ExtractedProfile


class TestJobPosting:
    def test_job_id_deterministic(self):
        job = JobPosting(title="Software Engineer", company="Acme Inc", url="https://example.com/jobs/1", index=1)
        assert job.job_id == job.job_id

    def test_job_id_unique_per_index(self):
        job1 = JobPosting(title="Software Engineer", company="Acme Inc", url="https://example.com/jobs/1", index=1)
        job2 = JobPosting(title="Software Engineer", company="Acme Inc", url="https://example.com/jobs/1", index=2)
        assert job1.job_id != job2.job_id

    def test_to_dict(self):
        job = JobPosting(
            title="Software Engineer",
            company="Acme Inc",
            url="https://example.com",
            source="Indeed",
            resume_analysis=MatchResult(score=70, matching_skills=("python",)),
        )
        d = job.to_dict()
        assert d["title"] == "Software Engineer"
        assert d["source"] == "Indeed"
        assert d["resume_analysis"]["matching_skills"] == ["python"]
        assert d["profile_analysis"] is None
        assert "job_id" in d


class TestResults:
    def test_results_are_immutable(self):
        result = MatchResult(score=10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.score = 20

    def test_profile_result_defaults(self):
        result = ProfileCompletenessResult()
        assert result.score == 50
        assert result.to_dict()["summary_feedback"] == []


class TestExtractedProfile:
    def test_to_summary_string(self):
        profile = ExtractedProfile(
            raw_text="...",
            skills=("python", "docker"),
            metrics=("40%",),
        )
        summary = profile.to_summary_string()
        assert "Skills: python, docker" in summary
        assert "Metrics: 40%" in summary

    def test_empty_profile_summary(self):
        assert ExtractedProfile().to_summary_string() == ""

    def test_to_dict_omits_raw_text(self):
        assert "raw_text" not in ExtractedProfile(raw_text="secret").to_dict()
