"""JSON and Server-Sent-Events API routes."""

import json
import random

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from job_finder.config import AppConfig
from job_finder.matching.keyword_matcher import score_resume
from job_finder.matching.profile_scorer import score_profile
from job_finder.profile.resume_parser import extract_profile
from job_finder.search import SearchRequest, run_search, stream_search
from job_finder.utils.text_processing import Vocabulary

from .dependencies import get_config, get_rng, get_vocabulary

router = APIRouter(prefix="/api")


class SearchPayload(BaseModel):
    job_description: str = ""
    resume_text: str = ""
    profile_url: str = ""

    def to_request(self) -> SearchRequest:
        return SearchRequest(
            job_description=self.job_description,
            resume_text=self.resume_text,
            profile_url=self.profile_url,
        )


class AnalyzePayload(BaseModel):
    resume_text: str = ""
    job_title: str = ""
    job_description: str = ""
    requirements: list[str] = Field(default_factory=list)
    profile_url: str = ""


@router.post("/search-jobs")
def search_jobs(
    payload: SearchPayload,
    config: AppConfig = Depends(get_config),
    vocabulary: Vocabulary = Depends(get_vocabulary),
    rng: random.Random = Depends(get_rng),
):
    result = run_search(payload.to_request(), config, rng, vocabulary)
    return result.to_dict()


async def _sse_frames(events):
    async for event in events:
        yield f"data: {json.dumps(event)}\n\n"


@router.post("/search-jobs-stream")
def search_jobs_stream(
    payload: SearchPayload,
    config: AppConfig = Depends(get_config),
    vocabulary: Vocabulary = Depends(get_vocabulary),
    rng: random.Random = Depends(get_rng),
):
    search_request = payload.to_request()
    # Reject bad input with a 400 before the stream starts
    search_request.validate()

    events = stream_search(search_request, config, rng, vocabulary)
    return StreamingResponse(
        _sse_frames(events),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/analyze")
def analyze(payload: AnalyzePayload, vocabulary: Vocabulary = Depends(get_vocabulary)):
    """Score one resume (and optional profile URL) against one posting."""
    profile = extract_profile(payload.resume_text, vocabulary)
    match = score_resume(
        profile, payload.job_title, payload.job_description, payload.requirements, vocabulary
    )
    completeness = None
    if payload.profile_url.strip():
        completeness = score_profile(
            payload.profile_url, payload.job_title, payload.job_description,
            payload.requirements, match, vocabulary,
        )
    return {
        "profile": profile.to_dict(),
        "match": match.to_dict(),
        "profile_completeness": completeness.to_dict() if completeness else None,
    }
