"""Synthetic job posting generation.

Postings are assembled from fixed company, location, salary and role
tables. Randomness comes from an injected ``random.Random`` so a seeded
generator reproduces the same postings.
"""

import logging
import random
from typing import Optional

from job_finder.jobs.models import JobPosting, JobSource
from job_finder.matching.keyword_matcher import score_resume
from job_finder.matching.profile_scorer import score_profile
from job_finder.profile.models import ExtractedProfile
from job_finder.utils.text_processing import DEFAULT_VOCABULARY, Vocabulary, round_half_up

logger = logging.getLogger("job_finder.jobs.generator")

SEARCH_KEYWORDS = (
    "software", "engineer", "developer", "manager", "designer", "analyst",
    "data", "product", "marketing", "sales", "frontend", "backend", "fullstack",
    "react", "python", "javascript", "typescript", "java", "go", "rust",
    "machine learning", "ai", "ml", "devops", "cloud", "aws", "azure", "gcp",
    "senior", "junior", "lead", "principal", "staff", "remote", "hybrid",
)

COMPANIES = {
    "tech": ["Google", "Microsoft", "Apple", "Amazon", "Meta", "Netflix", "Spotify", "Airbnb",
             "Uber", "Stripe", "Shopify", "Salesforce", "Adobe", "Oracle", "IBM"],
    "startups": ["Notion", "Figma", "Canva", "Vercel", "Supabase", "Linear", "Retool", "Loom",
                 "Miro", "Airtable", "Webflow", "PostHog", "Datadog", "GitLab", "HashiCorp"],
    "finance": ["Goldman Sachs", "JP Morgan", "Morgan Stanley", "Citadel", "Two Sigma",
                "BlackRock", "Fidelity", "Charles Schwab", "Capital One", "American Express"],
    "healthcare": ["UnitedHealth", "CVS Health", "Anthem", "Cigna", "HCA Healthcare", "Pfizer",
                   "Johnson & Johnson", "Abbott", "Merck", "Bristol-Myers"],
    "consulting": ["McKinsey", "BCG", "Bain", "Deloitte", "PwC", "EY", "KPMG", "Accenture",
                   "Capgemini", "Cognizant"],
    "agencies": ["Robert Half", "Randstad", "ManpowerGroup", "Kelly Services", "Adecco",
                 "TEKsystems", "Insight Global", "Apex Group", "Kforce", "Hays"],
}
ALL_COMPANIES = [company for pool in COMPANIES.values() for company in pool]

LOCATIONS = [
    "San Francisco, CA", "New York, NY", "Seattle, WA", "Austin, TX", "Boston, MA",
    "Los Angeles, CA", "Chicago, IL", "Denver, CO", "Atlanta, GA", "Miami, FL",
    "Remote", "Hybrid - San Francisco", "Hybrid - New York", "Remote (US)", "Remote (Worldwide)",
]

JOB_TYPES = ["Full-time", "Contract", "Part-time", "Freelance", "Internship"]

SALARY_RANGES = [
    "$80,000 - $120,000", "$100,000 - $150,000", "$120,000 - $180,000",
    "$150,000 - $220,000", "$180,000 - $280,000", "$200,000 - $350,000",
    "$250,000 - $400,000", "Competitive", "DOE",
]

LEVELS = ["Junior", "Mid-Level", "Senior", "Staff", "Principal", "Lead", "Head of"]

ROLES = [
    "Software Engineer", "Full Stack Developer", "Frontend Engineer", "Backend Engineer",
    "Data Scientist", "Data Engineer", "ML Engineer", "DevOps Engineer", "Site Reliability Engineer",
    "Product Manager", "Engineering Manager", "Technical Program Manager", "Solutions Architect",
    "UI/UX Designer", "Product Designer", "Data Analyst", "Business Analyst", "Cloud Architect",
]

BASE_REQUIREMENTS = [
    "Bachelor's degree in Computer Science or related field",
    "Strong problem-solving and analytical skills",
    "Excellent communication and collaboration abilities",
    "Experience working in agile development environments",
]

# (trigger keywords, requirement lines)
TECH_REQUIREMENTS = [
    (("react", "frontend"), [
        "3+ years of experience with React and modern JavaScript",
        "Proficiency in TypeScript and CSS-in-JS solutions",
    ]),
    (("python", "backend"), [
        "Strong Python skills with experience in Django or FastAPI",
        "Database design experience with PostgreSQL or MongoDB",
    ]),
    (("aws", "cloud"), [
        "AWS certification or equivalent cloud platform experience",
        "Experience with infrastructure as code (Terraform, CloudFormation)",
    ]),
    (("ml", "data"), [
        "Experience with ML frameworks (PyTorch, TensorFlow, scikit-learn)",
        "Strong statistical analysis and data visualization skills",
    ]),
]
MAX_REQUIREMENTS = 6

PROFILE_TIPS = [
    "Update your headline to include key skills mentioned in this role.",
    "Add more detail to your current role description to match job requirements.",
    "Consider getting endorsements for skills relevant to this position.",
    "Your LinkedIn summary could better highlight your career trajectory for this role.",
    "Add relevant certifications or courses to strengthen your profile for this position.",
]


def extract_search_keywords(description: str) -> list[str]:
    description_lower = (description or "").lower()
    return [kw for kw in SEARCH_KEYWORDS if kw in description_lower]


def generate_title(keywords: list[str], rng: random.Random) -> str:
    """Pick a random level and role, then let search keywords override them."""
    role = rng.choice(ROLES)
    level = rng.choice(LEVELS)

    if "senior" in keywords:
        level = "Senior"
    if "junior" in keywords:
        level = "Junior"
    if "lead" in keywords:
        level = "Lead"
    if "frontend" in keywords:
        role = "Frontend Engineer"
    if "backend" in keywords:
        role = "Backend Engineer"
    if "fullstack" in keywords:
        role = "Full Stack Developer"
    if "data" in keywords:
        role = "Data Scientist" if rng.random() > 0.5 else "Data Engineer"
    if "ml" in keywords or "machine learning" in keywords:
        role = "ML Engineer"
    if "devops" in keywords:
        role = "DevOps Engineer"
    if "product" in keywords and "manager" in keywords:
        role = "Product Manager"
    if "designer" in keywords:
        role = "Product Designer"

    return f"{level} {role}"


def generate_requirements(keywords: list[str]) -> list[str]:
    requirements = list(BASE_REQUIREMENTS)
    for triggers, lines in TECH_REQUIREMENTS:
        if any(t in keywords for t in triggers):
            requirements.extend(lines)
    return requirements[:MAX_REQUIREMENTS]


def preferred_locations(description: str) -> list[str]:
    """Narrow the location pool by remote / city mentions in the search text."""
    description_lower = (description or "").lower()
    locations = list(LOCATIONS)
    if "remote" in description_lower:
        locations = [loc for loc in LOCATIONS if "remote" in loc.lower()]
        locations.extend(LOCATIONS[:5])
    if "san francisco" in description_lower or "sf" in description_lower:
        locations = [loc for loc in LOCATIONS if "San Francisco" in loc or "Remote" in loc]
    if "new york" in description_lower or "nyc" in description_lower:
        locations = [loc for loc in LOCATIONS if "New York" in loc or "Remote" in loc]
    return locations


def resume_tip(title: str, company: str, keywords: list[str], rng: random.Random) -> str:
    tips = [
        f"Consider highlighting your experience with {keywords[0] if keywords else 'relevant technologies'} "
        "more prominently in your summary.",
        f"Add quantifiable achievements related to {title.split(' ')[-1] or 'this role'} responsibilities.",
        f"Include specific projects that demonstrate your {' and '.join(keywords[:2]) or 'technical'} expertise.",
        "Tailor your skills section to emphasize the technologies mentioned in this job posting.",
        f"Consider adding a brief section about your experience with {company}'s industry or similar companies.",
    ]
    return rng.choice(tips)


def generate_postings(
    description: str,
    source: JobSource,
    start_index: int,
    count: int,
    rng: random.Random,
    profile: Optional[ExtractedProfile] = None,
    profile_url: str = "",
    vocabulary: Vocabulary = DEFAULT_VOCABULARY,
) -> list[JobPosting]:
    """Generate ``count`` postings for one source, scoring each against the resume."""
    keywords = extract_search_keywords(description)
    locations = preferred_locations(description)
    has_resume = profile is not None and not profile.is_empty
    has_profile_url = bool((profile_url or "").strip())

    postings = []
    for i in range(count):
        number = start_index + i + 1
        company = rng.choice(ALL_COMPANIES)
        title = generate_title(keywords, rng)
        location = rng.choice(locations)
        salary = rng.choice(SALARY_RANGES)
        job_type = rng.choice(JOB_TYPES)
        requirements = generate_requirements(keywords)
        job_description = (
            f"We are looking for a talented {title} to join our team at {company}. "
            "You will work on cutting-edge projects and collaborate with world-class engineers "
            "to build products that impact millions of users."
        )

        resume_analysis = None
        profile_analysis = None
        match_score = rng.randrange(30) + 70

        if has_resume:
            resume_analysis = score_resume(profile, title, job_description, requirements, vocabulary)
            match_score = round_half_up(resume_analysis.score * 0.7 + rng.random() * 30)
            match_score = max(40, min(99, match_score))

        if has_profile_url:
            profile_analysis = score_profile(
                profile_url, title, job_description, requirements, resume_analysis, vocabulary
            )

        slug = "".join(company.lower().split())
        postings.append(JobPosting(
            title=title,
            company=company,
            url=f"https://careers.{slug}.com/jobs/{number}",
            index=number,
            location=location,
            description=job_description,
            requirements=requirements,
            salary=salary,
            source=source.name,
            source_icon=source.icon,
            posted_date=f"{rng.randrange(14) + 1} days ago",
            job_type=job_type,
            match_score=match_score,
            resume_tip=resume_tip(title, company, keywords, rng),
            profile_tip=rng.choice(PROFILE_TIPS),
            resume_analysis=resume_analysis,
            profile_analysis=profile_analysis,
        ))

    logger.debug("Generated %d postings for %s", len(postings), source.name)
    return postings
