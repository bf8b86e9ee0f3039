"""Tests for resume parsing."""

import os
import tempfile

import pytest

from job_finder.profile.resume_parser import extract_profile, parse_resume
from job_finder.utils.text_processing import Vocabulary, extract_skills

SAMPLE_RESUME = """Jane Smith
jane.smith@email.com

Professional Background:
Led a team of 5 engineers building Python services on Docker.
Cut latency by 40% and saved $120,000. Served 3000 users over 4 years.

Education:
Bachelor of Science, State University
AWS Certified Solutions Architect
"""


@pytest.fixture
def sample_resume_txt():
    """Create a sample text resume file."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".txt", delete=False, encoding="utf-8") as f:
        f.write(SAMPLE_RESUME)
        path = f.name

    yield path
    os.unlink(path)


class TestExtractProfile:
    def test_skills_and_keywords(self):
        profile = extract_profile(SAMPLE_RESUME)
        assert "python" in profile.skills
        assert "docker" in profile.skills
        assert "aws" in profile.skills
        assert "led" in profile.keywords
        # skills come first, action verbs after
        assert profile.keywords.index("python") < profile.keywords.index("led")

    def test_metrics(self):
        profile = extract_profile(SAMPLE_RESUME)
        assert profile.metrics == ("40%", "$120,000", "3000 users", "4 years")

    def test_markers(self):
        profile = extract_profile(SAMPLE_RESUME)
        assert "bachelor" in profile.education
        assert "university" in profile.education
        assert "certified" in profile.education
        assert profile.certifications == ("aws certified",)
        assert profile.experience == ("professional background",)

    def test_raw_text_retained(self):
        profile = extract_profile(SAMPLE_RESUME)
        assert profile.raw_text == SAMPLE_RESUME

    def test_skills_follow_extract_skills(self):
        vocab = Vocabulary().with_overrides(skills=["elixir", "go"])
        profile = extract_profile("Wrote Elixir and Go services", vocab)
        assert profile.skills == tuple(extract_skills("Wrote Elixir and Go services", vocab))
        assert profile.skills == ("elixir", "go")

    def test_empty_text(self):
        profile = extract_profile("")
        assert profile.raw_text == ""
        assert profile.skills == ()
        assert profile.keywords == ()
        assert profile.metrics == ()
        assert profile.education == ()
        assert profile.certifications == ()
        assert profile.experience == ()
        assert profile.is_empty

    def test_none_text(self):
        assert extract_profile(None).raw_text == ""

    def test_case_insensitive(self):
        upper = extract_profile("I use REACT and React.js")
        lower = extract_profile("i use react and react.js")
        assert upper.skills == lower.skills

    def test_custom_vocabulary(self):
        vocab = Vocabulary(skills=("cobol",), action_verbs=("ported",))
        profile = extract_profile("Ported COBOL batch jobs", vocab)
        assert profile.skills == ("cobol",)
        assert profile.keywords == ("cobol", "ported")

    def test_deterministic(self):
        assert extract_profile(SAMPLE_RESUME) == extract_profile(SAMPLE_RESUME)


class TestParseResume:
    def test_parse_text_resume(self, sample_resume_txt):
        profile = parse_resume(sample_resume_txt)
        assert "python" in profile.skills
        assert len(profile.metrics) == 4

    def test_file_not_found(self):
        with pytest.raises(FileNotFoundError):
            parse_resume("/nonexistent/resume.txt")

    def test_unsupported_format(self):
        with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
            path = f.name
        try:
            with pytest.raises(ValueError, match="Unsupported"):
                parse_resume(path)
        finally:
            os.unlink(path)

    def test_empty_file_raises(self):
        with tempfile.NamedTemporaryFile(mode="w", suffix=".md", delete=False) as f:
            f.write("   \n")
            path = f.name
        try:
            with pytest.raises(ValueError, match="empty"):
                parse_resume(path)
        finally:
            os.unlink(path)
