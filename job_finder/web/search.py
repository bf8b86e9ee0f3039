"""Search form routes: landing page, resume upload, results page."""

import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, UploadFile

from job_finder.config import AppConfig
from job_finder.profile.resume_parser import SUPPORTED_SUFFIXES
from job_finder.search import SearchRequest, run_search
from job_finder.utils.text_processing import Vocabulary

from .dependencies import get_config, get_rng, get_vocabulary

logger = logging.getLogger("job_finder.web.search")

router = APIRouter()


def _form_error(request: Request, message: str, job_description: str, profile_url: str):
    return request.app.state.templates.TemplateResponse("index.html", {
        "request": request,
        "job_description": job_description,
        "profile_url": profile_url,
        "flash_message": message,
        "flash_type": "error",
    }, status_code=400)


@router.get("/")
def landing(request: Request):
    return request.app.state.templates.TemplateResponse("index.html", {"request": request})


@router.post("/search")
def search(
    request: Request,
    job_description: str = Form(""),
    profile_url: str = Form(""),
    resume: Optional[UploadFile] = File(None),
    config: AppConfig = Depends(get_config),
    vocabulary: Vocabulary = Depends(get_vocabulary),
    rng: random.Random = Depends(get_rng),
):
    if not job_description.strip():
        return _form_error(request, "Please describe the job you are looking for.", job_description, profile_url)

    resume_text = ""
    if resume is not None and resume.filename:
        if not resume.filename.lower().endswith(SUPPORTED_SUFFIXES):
            return _form_error(
                request, "Please upload a TXT or MD resume.", job_description, profile_url
            )
        resume_text = resume.file.read().decode("utf-8", errors="replace")
        logger.info("Received resume '%s' (%d chars)", resume.filename, len(resume_text))

    result = run_search(
        SearchRequest(job_description, resume_text, profile_url), config, rng, vocabulary
    )

    return request.app.state.templates.TemplateResponse("results.html", {
        "request": request,
        "job_description": job_description,
        "result": result,
    })
