"""
Number Words — FastAPI Server
==============================

RESTful API for spelling out dollar amounts in English words.

Endpoints:
    POST /api/numbertowords/convert    Convert an amount string to words
    GET  /health                       Health check / readiness probe

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    python api.py                         # Host/port from NUMBER_WORDS_* env

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from number_words import InvalidInput, NumberWordsConverter, __version__
from number_words.config import configure_logging, get_settings

load_dotenv()

logger = logging.getLogger(__name__)


# ─── Application Lifespan ────────────────────────────────────────────

_converter: NumberWordsConverter | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and create the shared converter on startup."""
    global _converter  # noqa: PLW0603
    configure_logging(get_settings().log_level)
    _converter = NumberWordsConverter()
    yield
    _converter = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Number Words API",
    description=(
        "Converts decimal amounts such as 123.45 into English words: "
        "ONE HUNDRED AND TWENTY-THREE DOLLARS AND FORTY-FIVE CENTS."
    ),
    version=__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────


class ConversionRequest(BaseModel):
    """Request body for the convert endpoint."""

    number: Optional[str] = Field(
        default=None,
        description="Decimal amount using '.' as the decimal separator.",
        json_schema_extra={"example": "123.45"},
    )


class ConversionResponse(BaseModel):
    """Result envelope shared by successful and failed conversions."""

    words: str = ""
    success: bool
    error_message: Optional[str] = Field(default=None, serialization_alias="errorMessage")

    model_config = {"json_schema_extra": {"example": {
        "words": "ONE HUNDRED AND TWENTY-THREE DOLLARS AND FORTY-FIVE CENTS",
        "success": True,
    }}}


class HealthResponse(BaseModel):
    status: str
    version: str


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_converter() -> NumberWordsConverter:
    if _converter is None:
        raise HTTPException(status_code=503, detail="Converter not initialised")
    return _converter


def _failure(status_code: int, message: str) -> JSONResponse:
    body = ConversionResponse(success=False, error_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


# ─── Error Handlers ──────────────────────────────────────────────────


@app.exception_handler(InvalidInput)
async def invalid_input_handler(request: Request, exc: InvalidInput) -> JSONResponse:
    logger.info("Rejected conversion request [%s]: %s", exc.code, exc.message)
    return _failure(400, exc.message)


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error while handling %s", request.url.path)
    return _failure(500, "An unexpected error occurred")


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/api/numbertowords/convert",
    summary="Convert a decimal amount to words",
    tags=["Conversion"],
    response_model_exclude_none=True,
    responses={
        400: {"description": "Input is empty, malformed, negative or too large"},
        500: {"description": "Unexpected internal failure"},
        503: {"description": "Converter not yet initialised"},
    },
)
def convert_number(request: ConversionRequest) -> ConversionResponse:
    """Spell out `number` as dollars and cents.

    - **"123.45"** → `ONE HUNDRED AND TWENTY-THREE DOLLARS AND FORTY-FIVE CENTS`
    - **".50"** → `FIFTY CENTS`
    - **"0"** → `ZERO DOLLARS`

    Amounts above 999,999,999,999.99 and negative amounts are rejected with 400.
    """
    if request.number is None or not request.number.strip():
        raise InvalidInput(InvalidInput.EMPTY_INPUT, "Number is required")

    words = _get_converter().convert(request.number)
    return ConversionResponse(words=words, success=True)


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Converter not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and version."""
    _get_converter()
    return HealthResponse(status="healthy", version=__version__)


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    uvicorn.run(app, host=settings.host, port=settings.port)
