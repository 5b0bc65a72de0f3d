from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import APIRouter, Body, File, Request, UploadFile
from starlette.concurrency import run_in_threadpool

from scamscope.api.normalize import coerce_body, extract_field
from scamscope.api.schemas import AnalysisResponse, PingResponse
from scamscope.api.uploads import staged_upload
from scamscope.core.errors import InputValidationError
from scamscope.core.results import AnalysisResult, analyze_behavior_table, analyze_text, analyze_url
from scamscope.core.tables import decode_table_bytes
from scamscope.observability.logging import log

router = APIRouter()


def _respond(result: AnalysisResult) -> AnalysisResponse:
    counts = {"alerts": len(result.alerts)} if result.alerts is not None else {"reasons": len(result.reasons or ())}
    log(
        event=f"{result.kind}_analyzed",
        score=result.score,
        riskLevel=result.risk.level,
        verdict=result.risk.verdict,
        **counts,
    )
    return AnalysisResponse(**result.to_dict())


async def _text_channel(request: Request, payload: Any, channel: str, field: str) -> AnalysisResponse:
    body = coerce_body(payload, request.headers.get("content-type", ""))
    text = extract_field(body, field)
    return _respond(analyze_text(text, channel=channel))


@router.get("/ping", response_model=PingResponse)
def ping():
    return PingResponse(ok=True, now=datetime.now(timezone.utc).isoformat())


@router.post("/api/analyze-text", response_model=AnalysisResponse, response_model_exclude_none=True)
async def analyze_text_route(request: Request, payload: Any = Body(None)):
    return await _text_channel(request, payload, "text", "text")


@router.post("/api/analyze-voice", response_model=AnalysisResponse, response_model_exclude_none=True)
async def analyze_voice_route(request: Request, payload: Any = Body(None)):
    """The client transcribes speech itself and posts the transcript."""
    return await _text_channel(request, payload, "voice", "transcript")


@router.post("/api/analyze-ocr-text", response_model=AnalysisResponse, response_model_exclude_none=True)
async def analyze_ocr_route(request: Request, payload: Any = Body(None)):
    return await _text_channel(request, payload, "ocr", "ocrText")


@router.post("/api/scan-url", response_model=AnalysisResponse, response_model_exclude_none=True)
async def scan_url_route(request: Request, payload: Any = Body(None)):
    body = coerce_body(payload, request.headers.get("content-type", ""))
    return _respond(analyze_url(extract_field(body, "url")))


def _score_upload(file: UploadFile) -> AnalysisResult:
    with staged_upload(file.file) as path:
        text = decode_table_bytes(path.read_bytes())
        return analyze_behavior_table(text)


@router.post("/api/behavior", response_model=AnalysisResponse, response_model_exclude_none=True)
async def behavior_route(file: Optional[UploadFile] = File(None)):
    if file is None:
        raise InputValidationError("file", "file required (csv)")
    try:
        result = await run_in_threadpool(_score_upload, file)
    finally:
        await file.close()
    return _respond(result)
