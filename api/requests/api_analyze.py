"""
Website analysis endpoints (JSON + SSE).
"""

from typing import Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from models.brand import AnalyzeRequest
from agents.exceptions import BrandKitError
from agents.tools.brand.website_analyzer import analyze_website
from api.requests.streaming import event_stream, progress_events
from utils.url_utils import is_valid_url, normalize_url
from setup_logging_optimized import get_logger

router = APIRouter(prefix="/api", tags=["analysis"])

logger = get_logger(__name__)


def _validated_url(request: AnalyzeRequest) -> Optional[JSONResponse]:
    if not request.url or not isinstance(request.url, str):
        return JSONResponse({"error": "URL is required"}, status_code=400)
    if not is_valid_url(request.url):
        return JSONResponse({"error": "Invalid URL provided"}, status_code=400)
    return None


@router.post("/analyze")
async def analyze(request: AnalyzeRequest):
    error = _validated_url(request)
    if error is not None:
        return error

    url = normalize_url(request.url)
    try:
        result = await analyze_website(url)
    except BrandKitError as e:
        logger.error(f"Analysis failed for {url}: {e}")
        return JSONResponse({"error": e.message}, status_code=500)
    except Exception as e:
        logger.exception(f"Unexpected analysis failure for {url}: {e}")
        return JSONResponse({"error": str(e) or "Failed to analyze website"}, status_code=500)

    return {"success": True, "data": result.to_dict()}


@router.post("/analyze-stream")
async def analyze_stream(request: AnalyzeRequest):
    error = _validated_url(request)
    if error is not None:
        return error

    url = normalize_url(request.url)
    return event_stream(progress_events(
        lambda on_progress: analyze_website(url, on_progress),
        lambda result: result.to_dict(),
        f"Analysis failed for {url}",
    ))
