"""YAML config loading and validation."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from job_finder.utils.text_processing import DEFAULT_VOCABULARY, Vocabulary

VOCABULARY_TABLES = (
    "skills",
    "action_verbs",
    "job_terms",
    "education",
    "certifications",
    "experience",
    "metric_patterns",
)


@dataclass
class SearchConfig:
    max_results: int = 50
    delay_scale: float = 1.0  # 0 disables the simulated per-source delay
    seed: Optional[int] = None


@dataclass
class AppConfig:
    search: SearchConfig = field(default_factory=SearchConfig)
    vocabulary_path: str = ""
    log_dir: str = "logs"
    log_level: str = "INFO"


def load_config(config_path: str = "config.yaml") -> AppConfig:
    """Load configuration from YAML file."""
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(
            f"Config file not found: {config_path}\n"
            "Copy config.example.yaml to config.yaml and adjust your settings."
        )

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    config = AppConfig()

    # Search (env vars take precedence)
    search_raw = raw.get("search", {})
    config.search = SearchConfig(
        max_results=search_raw.get("max_results", 50),
        delay_scale=float(os.environ.get("JOB_FINDER_DELAY_SCALE", search_raw.get("delay_scale", 1.0))),
        seed=search_raw.get("seed"),
    )

    config.vocabulary_path = raw.get("vocabulary_path", "")
    config.log_dir = raw.get("log_dir", "logs")
    config.log_level = os.environ.get("JOB_FINDER_LOG_LEVEL", raw.get("log_level", "INFO"))

    return config


def validate_config(config: AppConfig) -> list[str]:
    """Return list of validation warnings (empty = OK)."""
    warnings = []

    if config.search.max_results <= 0:
        warnings.append("search.max_results must be positive - no postings will be generated")

    if config.search.delay_scale < 0:
        warnings.append("search.delay_scale is negative - simulated delays will be skipped")

    if config.vocabulary_path and not Path(config.vocabulary_path).exists():
        warnings.append(f"Vocabulary file not found: {config.vocabulary_path} - using built-in vocabulary")

    return warnings


def load_vocabulary(vocabulary_path: str = "") -> Vocabulary:
    """Load vocabulary overrides from YAML, falling back to the built-in tables.

    Each top-level key names a table (``skills``, ``action_verbs``, ...) and
    holds a list of terms; ``metric_patterns`` holds ``[pattern, ignore_case]``
    pairs. Tables not mentioned keep their defaults.
    """
    if not vocabulary_path:
        return DEFAULT_VOCABULARY

    path = Path(vocabulary_path)
    if not path.exists():
        return DEFAULT_VOCABULARY

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError(f"Invalid vocabulary file {vocabulary_path}: expected a mapping of tables")

    unknown = set(raw) - set(VOCABULARY_TABLES)
    if unknown:
        raise ValueError(f"Unknown vocabulary tables in {vocabulary_path}: {', '.join(sorted(unknown))}")

    for name, terms in raw.items():
        if not isinstance(terms, list):
            raise ValueError(f"Vocabulary table '{name}' must be a list")
        if name == "metric_patterns" and not all(
            isinstance(item, list) and len(item) == 2
            and isinstance(item[0], str) and isinstance(item[1], bool)
            for item in terms
        ):
            raise ValueError("Vocabulary table 'metric_patterns' must hold [pattern, ignore_case] pairs")

    return DEFAULT_VOCABULARY.with_overrides(**raw)
