"""
Race Result Routes

Endpoints for parsing previous race results (HyResult pages, CSV exports).
"""

import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from app.config import settings
from app.features.results import (
    FetchError,
    HyResultFetcher,
    InvalidResultUrlError,
    ResultParserService,
    SourceKind,
)
from app.schemas.results import HyResultRequest, ParseRequest, RaceResultResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def get_result_service() -> ResultParserService:
    """Dependency: result parser with settings-driven fetcher."""
    fetcher = HyResultFetcher(
        timeout=settings.fetch_timeout,
        user_agent=settings.fetch_user_agent,
    )
    return ResultParserService(fetcher)


@router.post("/hyresult", response_model=RaceResultResponse)
async def parse_hyresult(
    request: HyResultRequest,
    service: ResultParserService = Depends(get_result_service),
):
    """Fetch a HyResult result page and extract station times."""
    try:
        result = await service.parse_url(request.url)
    except InvalidResultUrlError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except FetchError as e:
        raise HTTPException(
            status_code=502,
            detail={"error": "Failed to fetch HyResult page", "message": str(e)},
        )

    return RaceResultResponse.from_result(result)


@router.post("/parse", response_model=RaceResultResponse)
async def parse_document(
    request: ParseRequest,
    service: ResultParserService = Depends(get_result_service),
):
    """Parse an already-fetched HTML page or CSV text."""
    if request.source_kind is SourceKind.CSV:
        result = service.parse_csv(request.content)
    else:
        result = service.parse_html(request.content)
    return RaceResultResponse.from_result(result)


@router.post("/csv", response_model=RaceResultResponse)
async def upload_csv(
    file: UploadFile = File(...),
    service: ResultParserService = Depends(get_result_service),
):
    """Upload a CSV export and extract station times."""
    content = await file.read()

    if len(content) == 0:
        raise HTTPException(status_code=400, detail="File is empty")

    if len(content) > settings.max_upload_bytes:
        raise HTTPException(status_code=400, detail="File too large")

    text = content.decode("utf-8-sig", errors="replace")
    result = service.parse_csv(text)
    logger.info(
        f"Parsed CSV {file.filename}: {len(result.station_times)} stations"
    )
    return RaceResultResponse.from_result(result)
