from fastapi import FastAPI
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from scamscope.api.routes import router
from scamscope.api.uploads import UploadTooLarge
from scamscope.core.errors import InputValidationError, TableParseError
from scamscope.observability.logging import log
from scamscope.settings import settings

app = FastAPI(title="Scamscope Risk Scoring API")

origins = [x.strip() for x in settings.CORS_ORIGINS.split(",") if x.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Scamscope is running. POST to /api/analyze-text, /api/analyze-voice, "
                   "/api/analyze-ocr-text, /api/scan-url or /api/behavior (multipart CSV).",
    }


@app.get("/health")
def health():
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# Error mapping: caller errors -> 400, unreadable tables -> 500 with detail.
# Neither produces a partial score.
# ---------------------------------------------------------------------------
@app.exception_handler(InputValidationError)
async def input_validation_handler(request: Request, exc: InputValidationError):
    log(event="input_rejected", path=request.url.path, field=exc.field)
    return JSONResponse(status_code=400, content={"error": str(exc)})


@app.exception_handler(TableParseError)
async def table_parse_handler(request: Request, exc: TableParseError):
    log(event="table_parse_failed", path=request.url.path, detail=exc.detail)
    return JSONResponse(status_code=500, content={"error": "CSV parse failed", "detail": exc.detail})


@app.exception_handler(UploadTooLarge)
async def upload_too_large_handler(request: Request, exc: UploadTooLarge):
    log(event="input_rejected", path=request.url.path, field="file", limit=exc.limit)
    return JSONResponse(status_code=413, content={"error": "file too large", "detail": str(exc)})


@app.exception_handler(Exception)
async def universal_exception_handler(request: Request, exc: Exception):
    log(event="route_exception", path=request.url.path, error=type(exc).__name__)
    return JSONResponse(status_code=500, content={"error": "internal error"})
