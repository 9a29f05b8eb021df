"""HTTP surface — /health, /analyze and the static front-end."""
import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.datastructures import UploadFile

from catalyzer.analysis import AnalysisError, ParseFailure
from catalyzer.constants import (
    APP_TITLE,
    APP_VERSION,
    BYTES_PER_MB,
    DEFAULT_MAX_UPLOAD_MB,
    MSG_ANALYSIS_ERROR_LOG,
    MSG_ANALYSIS_FAILED,
    MSG_HEALTH,
    MSG_IMAGE_TOO_LARGE,
    MSG_NO_IMAGE,
    MSG_NO_STATIC_DIR,
    MSG_PARSE_FAILED,
    MSG_UPLOAD_REJECTED,
    UPLOAD_DEFAULT_FILENAME,
    UPLOAD_FIELD,
    UPLOAD_FORM_OVERHEAD,
)
from catalyzer.detector import PazuzuDetector
from catalyzer.imaging import UploadedImage

logger = logging.getLogger(__name__)


def _error(status_code: int, body: AnalysisError) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.to_dict())


def _declared_length(request: Request) -> Optional[int]:
    try:
        return int(request.headers["content-length"])
    except (KeyError, ValueError):
        return None


def create_app(
    detector: PazuzuDetector,
    static_dir: Optional[Path] = None,
    max_upload_bytes: int = DEFAULT_MAX_UPLOAD_MB * BYTES_PER_MB,
) -> FastAPI:
    """Build the app around an already-constructed detector."""
    app = FastAPI(title=APP_TITLE, version=APP_VERSION)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "message": MSG_HEALTH}

    def _too_large(filename: str) -> JSONResponse:
        logger.warning(MSG_UPLOAD_REJECTED, filename, max_upload_bytes)
        return _error(
            status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            AnalysisError(error=MSG_IMAGE_TOO_LARGE % (max_upload_bytes // BYTES_PER_MB)),
        )

    @app.post("/analyze")
    async def analyze(request: Request):
        # Reject on the declared length before the multipart body is parsed.
        match _declared_length(request):
            case int() as length if length > max_upload_bytes + UPLOAD_FORM_OVERHEAD:
                return _too_large(UPLOAD_DEFAULT_FILENAME)
            case _:
                pass

        async with request.form() as form:
            match form.get(UPLOAD_FIELD):
                case UploadFile() as image if image.filename:
                    filename = image.filename
                    data = await image.read(max_upload_bytes + 1)
                case _:
                    return _error(status.HTTP_400_BAD_REQUEST, AnalysisError(error=MSG_NO_IMAGE))

        if len(data) > max_upload_bytes:
            return _too_large(filename)

        upload = UploadedImage(data=data, filename=filename, size=len(data))
        try:
            outcome = await detector.detect(upload)
        except Exception as exc:
            logger.exception(MSG_ANALYSIS_ERROR_LOG)
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                AnalysisError(error=MSG_ANALYSIS_FAILED, message=str(exc)),
            )

        match outcome:
            case ParseFailure(raw=raw):
                return _error(
                    status.HTTP_500_INTERNAL_SERVER_ERROR,
                    AnalysisError(error=MSG_PARSE_FAILED, raw=raw),
                )
            case result:
                return JSONResponse(content=result.to_dict())

    match static_dir:
        case Path() as d if d.is_dir():
            app.mount("/", StaticFiles(directory=d, html=True), name="static")
        case Path() as d:
            logger.warning(MSG_NO_STATIC_DIR, d)
        case None:
            pass

    return app
