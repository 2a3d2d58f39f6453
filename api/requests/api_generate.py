"""
Brand guidelines generation endpoints (JSON + SSE).
"""

from typing import Tuple, Optional

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from models.brand import GenerateRequest
from agents.domain.models import AnalysisResult
from agents.exceptions import BrandKitError
from agents.generation.brand_guidelines_generator import generate_brand_guidelines
from api.requests.streaming import event_stream, progress_events
from setup_logging_optimized import get_logger

router = APIRouter(prefix="/api", tags=["generation"])

logger = get_logger(__name__)


def _parse_analysis(request: GenerateRequest) -> Tuple[Optional[AnalysisResult], Optional[JSONResponse]]:
    data = request.analysisData
    if not data or not data.get("id"):
        return None, JSONResponse({"error": "Analysis data is required"}, status_code=400)
    try:
        return AnalysisResult.from_dict(data), None
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Rejected malformed analysis data: {e}")
        return None, JSONResponse({"error": "Invalid analysis data"}, status_code=400)


def _dump(brand_data) -> dict:
    return brand_data.model_dump(mode="json", by_alias=True)


@router.post("/generate")
async def generate(request: GenerateRequest):
    analysis, error = _parse_analysis(request)
    if error is not None:
        return error

    try:
        brand_data = await generate_brand_guidelines(analysis)
    except BrandKitError as e:
        logger.error(f"Generation failed for {analysis.url}: {e}")
        return JSONResponse({"error": e.message}, status_code=500)
    except Exception as e:
        logger.exception(f"Unexpected generation failure for {analysis.url}: {e}")
        return JSONResponse({"error": str(e) or "Failed to generate brand guidelines"}, status_code=500)

    return {"success": True, "data": _dump(brand_data)}


@router.post("/generate-stream")
async def generate_stream(request: GenerateRequest):
    analysis, error = _parse_analysis(request)
    if error is not None:
        return error

    return event_stream(progress_events(
        lambda on_progress: generate_brand_guidelines(analysis, on_progress),
        _dump,
        f"Generation failed for {analysis.url}",
    ))
