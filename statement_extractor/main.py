# statement_extractor/main.py
import json
import logging
import sys

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .config import LOG_LEVEL
from .errors import InvalidInput, UpstreamFailure
from .extractor import Extractor
from .schema import ErrorResponse, ExtractionResult, ExtractRequest

# Console logger
logger = logging.getLogger("statement-extractor")
if not logger.handlers:
    logger.setLevel(LOG_LEVEL)
    _h = logging.StreamHandler(sys.stdout)
    _h.setFormatter(logging.Formatter("[%(asctime)s] %(levelname)s: %(message)s"))
    logger.addHandler(_h)

app = FastAPI(
    title="Bank Statement Transaction Extractor",
    description="Send scanned statement pages (base64 JPEG) and get back the opening balance and every transaction.",
    version="1.0.0",
)

def get_extractor() -> Extractor:
    return Extractor()

def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(ErrorResponse(error=message).model_dump(), status_code=status_code)

@app.get("/health", summary="Liveness probe")
def health():
    return {"status": "ok"}

@app.post(
    "/api/extract-transactions",
    response_model=ExtractionResult,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Extract transactions from statement page images",
    openapi_extra={"requestBody": {"required": True, "content": {"application/json": {"schema": ExtractRequest.model_json_schema()}}}},
)
async def extract_transactions(request: Request, extractor: Extractor = Depends(get_extractor)):
    try:
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidInput(f"Request body is not valid JSON: {e}") from e
        images = body.get("images") if isinstance(body, dict) else None

        run = await extractor.run(images)

        resp = JSONResponse(run.result.model_dump())
        resp.headers["X-Pages-Total"] = str(run.pages_total)
        resp.headers["X-Pages-Skipped"] = str(run.pages_skipped)
        return resp

    except InvalidInput as e:
        logger.warning(f"Rejected request: {e}")
        return _error(str(e), 400)
    except UpstreamFailure:
        logger.exception("Vision model call failed in /api/extract-transactions")
        return _error("Failed to extract transaction data", 500)
    except Exception:
        logger.exception("Error extracting transactions")
        return _error("Failed to extract transaction data", 500)
