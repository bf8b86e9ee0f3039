"""Shared FastAPI dependencies: app config and vocabulary."""

import random

from fastapi import Request

from job_finder.config import AppConfig
from job_finder.utils.text_processing import Vocabulary


def get_config(request: Request) -> AppConfig:
    return request.app.state.config


def get_vocabulary(request: Request) -> Vocabulary:
    return request.app.state.vocabulary


def get_rng(request: Request) -> random.Random:
    """Fresh random source per request, seeded from config when set."""
    return random.Random(request.app.state.config.search.seed)
