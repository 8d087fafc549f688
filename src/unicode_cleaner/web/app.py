"""Unicode Cleaner Web App — FastAPI backend.

Endpoints:
  POST /api/highlight    → segments + invisible count for the live overlay
  POST /api/clean        → cleaned text + removal report
  POST /api/clean/batch  → clean several texts at once
  GET  /health           → liveness check polled by the launcher

Run with:
  uvicorn unicode_cleaner.web.app:app --reload --port 8000
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from unicode_cleaner import __version__
from unicode_cleaner.core.batch import clean_texts
from unicode_cleaner.core.cleaner import clean
from unicode_cleaner.core.highlighter import highlight
from unicode_cleaner.i18n import char_count_label, clean_message, invisible_label, t

# ---------------------------------------------------------------------------
# Configuration via environment variables
# ---------------------------------------------------------------------------

_ENV = os.environ.get("UNICODE_CLEANER_ENV", "dev")

_MAX_CHARS = int(os.environ.get("UNICODE_CLEANER_MAX_CHARS", "1000000"))

# CORS origins: "*" = all, otherwise a comma-separated list
_CORS_ORIGINS_RAW = os.environ.get("UNICODE_CLEANER_CORS_ORIGINS", "*")
_CORS_ORIGINS: list[str] = (
    ["*"]
    if _CORS_ORIGINS_RAW in ("*", "")
    else [o.strip() for o in _CORS_ORIGINS_RAW.split(",") if o.strip()]
)
# allow_credentials is incompatible with allow_origins=["*"]
_CORS_ALLOW_CREDENTIALS = "*" not in _CORS_ORIGINS

_logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# FastAPI application
# ---------------------------------------------------------------------------

app = FastAPI(
    title="Unicode Cleaner API",
    description="Поиск и удаление невидимых символов Unicode",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_credentials=_CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

_static_dir = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=str(_static_dir)), name="static")


@app.on_event("startup")
async def _log_startup() -> None:
    _logger.info(
        "Unicode Cleaner started — env=%s max_chars=%d cors=%s",
        _ENV,
        _MAX_CHARS,
        _CORS_ORIGINS_RAW,
    )


# ---------------------------------------------------------------------------
# Root
# ---------------------------------------------------------------------------


@app.get("/", include_in_schema=False)
async def root():
    index = _static_dir / "index.html"
    return HTMLResponse(index.read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Health check
# ---------------------------------------------------------------------------


@app.get("/health")
async def health():
    return {"status": "ok", "version": __version__}


# ---------------------------------------------------------------------------
# Highlight (called on every edit)
# ---------------------------------------------------------------------------


@app.post("/api/highlight")
async def highlight_text(request: Request):
    """Return the overlay segments and the live invisible-character counter."""
    text = _require_text(await _read_body(request))
    result = highlight(text)
    return {
        **result.to_dict(),
        "html": result.to_html(),
        "char_count": len(text),
        "char_label": char_count_label(len(text)),
        "label": invisible_label(result.invisible_count),
    }


# ---------------------------------------------------------------------------
# Clean (called on explicit user action)
# ---------------------------------------------------------------------------


@app.post("/api/clean")
async def clean_text(request: Request):
    """Return the cleaned text and the notification to show after copying it."""
    text = _require_text(await _read_body(request))
    result = clean(text)
    _logger.info(
        "clean: %d → %d chars, %d invisible",
        len(text),
        len(result.cleaned_text),
        result.removed_invisible_count,
    )
    return {
        **result.to_dict(),
        "char_count": len(result.cleaned_text),
        "char_label": char_count_label(len(result.cleaned_text)),
        "message": clean_message(result.removed_invisible_count),
    }


@app.post("/api/clean/batch")
async def clean_batch(request: Request):
    """Clean a list of texts; each result has the same shape as /api/clean."""
    body = await _read_body(request)
    texts = body.get("texts")
    if not isinstance(texts, list) or not all(isinstance(x, str) for x in texts):
        raise HTTPException(status_code=400, detail=t("error.texts_required"))
    for text in texts:
        _check_length(text)
    _check_length_total(sum(map(len, texts)))

    cleaned, counts = clean_texts(texts)
    results = [
        {"cleaned_text": c, "removed_invisible_count": n, "char_count": len(c)}
        for c, n in zip(cleaned, counts)
    ]
    total = sum(counts)
    return {
        "results": results,
        "total_removed_invisible_count": total,
        "message": clean_message(total),
    }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _read_body(request: Request) -> dict[str, Any]:
    try:
        body = await request.json()
    except ValueError:
        raise HTTPException(status_code=400, detail=t("error.invalid_json"))
    if not isinstance(body, dict):
        raise HTTPException(status_code=400, detail=t("error.invalid_json"))
    return body


def _require_text(body: dict[str, Any]) -> str:
    text = body.get("text")
    if not isinstance(text, str):
        raise HTTPException(status_code=400, detail=t("error.text_required"))
    _check_length(text)
    return text


def _check_length(text: str) -> None:
    if len(text) > _MAX_CHARS:
        raise HTTPException(status_code=413, detail=t("error.too_long", limit=_MAX_CHARS))


def _check_length_total(total: int) -> None:
    # The whole batch shares one budget, not one per text
    if total > _MAX_CHARS:
        raise HTTPException(status_code=413, detail=t("error.too_long", limit=_MAX_CHARS))
