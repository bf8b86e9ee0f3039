"""CLI entry point: analyze a resume against a job, or run a synthetic search."""

import argparse
import json
import logging
import random
import sys
from pathlib import Path

from job_finder.config import AppConfig, load_config, load_vocabulary, validate_config
from job_finder.matching.keyword_matcher import score_resume
from job_finder.matching.models import MatchResult, ProfileCompletenessResult
from job_finder.matching.profile_scorer import score_profile
from job_finder.profile.models import ExtractedProfile
from job_finder.profile.resume_parser import extract_profile, parse_resume
from job_finder.search import SearchRequest, run_search
from job_finder.utils.logging_config import setup_logging

logger = logging.getLogger("job_finder")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Job Finder - resume/job match scoring and synthetic job search",
    )
    parser.add_argument(
        "--config", default="config.yaml",
        help="Path to config file (default: config.yaml, optional)",
    )
    parser.add_argument("--resume", default="", help="Path to a .txt or .md resume")
    parser.add_argument("--description", default="", help="Job description text")
    parser.add_argument("--title", default="", help="Job title (analysis mode)")
    parser.add_argument(
        "--requirement", action="append", default=[],
        help="Job requirement line (repeatable, analysis mode)",
    )
    parser.add_argument("--profile-url", default="", help="LinkedIn profile URL")
    parser.add_argument(
        "--search", action="store_true",
        help="Run the synthetic job search instead of a single analysis",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for --search")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a report")
    return parser.parse_args(argv)


def load_app_config(config_path: str) -> AppConfig:
    """Load the config file if present, otherwise use defaults."""
    if Path(config_path).exists():
        return load_config(config_path)
    return AppConfig()


def print_analysis(
    profile: ExtractedProfile,
    match: MatchResult,
    completeness: ProfileCompletenessResult | None,
):
    print("\n=== Resume Match ===")
    print(f"Score: {match.score}/100 (keyword density {match.keyword_density}%)")
    print(match.summary)
    if profile.to_summary_string():
        print(f"\n{profile.to_summary_string()}")

    sections = [
        ("Matching skills", match.matching_skills),
        ("Missing skills", match.missing_skills),
        ("Missing keywords", match.missing_keywords),
    ]
    for label, terms in sections:
        if terms:
            print(f"{label}: {', '.join(terms)}")

    for label, lines in [
        ("Strengths", match.strengths),
        ("Improvements", match.improvements),
        ("Metric suggestions", match.metric_suggestions),
    ]:
        if lines:
            print(f"\n{label}:")
            for line in lines:
                print(f"  - {line}")

    if completeness:
        print("\n=== LinkedIn Profile ===")
        print(f"Score: {completeness.score}/100")
        print(completeness.summary)
        print(f"Suggested headline: {completeness.headline_suggestion}")
        for line in completeness.summary_feedback:
            print(f"  - {line}")
    print()


def print_search(result):
    print(f"\n=== {len(result.jobs)} jobs from {len(result.sources)} sources ===")
    for job in result.jobs:
        print(f"{job.match_score:>3}%  {job.title} - {job.company} ({job.location}) [{job.source}]")
    print()


def run_analysis(args: argparse.Namespace, vocabulary) -> int:
    if args.resume:
        profile = parse_resume(args.resume, vocabulary)
    else:
        profile = extract_profile("", vocabulary)

    match = score_resume(profile, args.title, args.description, args.requirement, vocabulary)
    completeness = None
    if args.profile_url.strip():
        completeness = score_profile(
            args.profile_url, args.title, args.description, args.requirement, match, vocabulary
        )

    if args.json:
        print(json.dumps({
            "profile": profile.to_dict(),
            "match": match.to_dict(),
            "profile_completeness": completeness.to_dict() if completeness else None,
        }, indent=2))
    else:
        print_analysis(profile, match, completeness)
    return 0


def run_search_command(args: argparse.Namespace, config: AppConfig, vocabulary) -> int:
    resume_text = parse_resume(args.resume, vocabulary).raw_text if args.resume else ""
    seed = args.seed if args.seed is not None else config.search.seed
    result = run_search(
        SearchRequest(args.description, resume_text, args.profile_url),
        config,
        random.Random(seed),
        vocabulary,
    )
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_search(result)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_app_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_dir, config.log_level)

    for warning in validate_config(config):
        logger.warning("Config: %s", warning)

    try:
        vocabulary = load_vocabulary(config.vocabulary_path)
        if args.search:
            return run_search_command(args, config, vocabulary)
        return run_analysis(args, vocabulary)
    except (FileNotFoundError, ValueError) as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
