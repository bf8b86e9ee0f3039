"""FastAPI application factory."""

import logging
import os
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from jinja2 import Environment, FileSystemLoader

from job_finder.config import AppConfig, load_config, load_vocabulary, validate_config
from job_finder.search import SearchRequestError

from .api import router as api_router
from .search import router as search_router

logger = logging.getLogger("job_finder.web")

WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"


def _create_jinja_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=True,
    )


class _Templates:
    """Thin wrapper that mimics Jinja2Templates from starlette."""

    def __init__(self):
        self.env = _create_jinja_env()

    def TemplateResponse(self, name: str, context: dict, status_code: int = 200):
        from starlette.responses import HTMLResponse
        template = self.env.get_template(name)
        html = template.render(**context)
        return HTMLResponse(html, status_code=status_code)


def _default_config() -> AppConfig:
    config_path = os.environ.get("JOB_FINDER_CONFIG", "config.yaml")
    if Path(config_path).exists():
        return load_config(config_path)
    return AppConfig()


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    config = config or _default_config()
    for warning in validate_config(config):
        logger.warning("Config: %s", warning)

    app = FastAPI(title="Job Finder")
    app.state.config = config
    app.state.vocabulary = load_vocabulary(config.vocabulary_path)
    app.state.templates = _Templates()

    @app.exception_handler(SearchRequestError)
    async def search_request_error(request: Request, exc: SearchRequestError):
        return JSONResponse({"error": str(exc)}, status_code=400)

    app.include_router(search_router)
    app.include_router(api_router)

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
