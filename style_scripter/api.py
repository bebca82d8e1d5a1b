"""
FastAPI application exposing the style analysis pipeline.
"""

import asyncio
import logging
import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .config import config
from .errors import status_for_error
from .models import AnalysisRequest
from .pipeline import run_pipeline

# Configure logging
logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=config.app_name,
    version=config.app_version,
    description="Analyze a YouTube channel's storytelling style and write a new script in it",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    response = await call_next(request)
    response.headers["X-Process-Time"] = str(time.time() - start_time)
    return response


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@app.post("/api/analyze")
async def analyze_channel(request: Request):
    """
    Analyze a channel's style and write a script on the requested topic.

    The body is parsed by hand so malformed JSON and schema failures both
    produce the same generic 400 shape instead of FastAPI's validation detail.
    """
    try:
        body = await request.json()
    except ValueError:
        return error_response("Invalid JSON payload.", 400)

    try:
        analysis_request = AnalysisRequest.model_validate(body)
    except ValidationError as e:
        logger.info(f"Rejected analysis request: {e.error_count()} validation errors")
        return error_response("Please fill in every field with valid values.", 400)

    loop = asyncio.get_running_loop()
    try:
        result = await loop.run_in_executor(None, run_pipeline, analysis_request)
    except Exception as e:
        status_code, message = status_for_error(e)
        if status_code >= 500:
            logger.error(f"Pipeline failed: {e}", exc_info=True)
        else:
            logger.warning(f"Pipeline stopped with {status_code}: {message}")
        return error_response(message, status_code)

    return result.model_dump(by_alias=True)


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.app_name,
        "version": config.app_version,
        "description": "Channel Style Scripter API",
    }
