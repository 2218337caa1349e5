"""
FastAPI routes for the fuzzy-locate test harness.

Serves the locate endpoint, a small HTML form mirroring the harness fields,
and the usual health and metrics endpoints.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException as StarletteHTTPException

from fuzzy_locate import __version__
from fuzzy_locate.api.middleware import RequestLoggingMiddleware
from fuzzy_locate.api.models import HealthResponse, LocateRequest, LocateResponse
from fuzzy_locate.config.settings import Settings, load_settings
from fuzzy_locate.core.alphabet import AlphabetCache
from fuzzy_locate.core.exceptions import InvalidParameter
from fuzzy_locate.harness import parse_fields, run_request
from fuzzy_locate.logging.setup import get_logger, setup_logging

# Initialize logging
setup_logging()
logger = get_logger(__name__)


_settings: Optional[Settings] = None
_cache: Optional[AlphabetCache] = None


def get_settings() -> Settings:
    """Get or load the settings instance."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def get_alphabet_cache() -> AlphabetCache:
    """Get or create the alphabet cache shared by API requests."""
    global _cache
    if _cache is None:
        _cache = AlphabetCache(maxsize=get_settings().cache_size)
    return _cache


def reset_state() -> None:
    """Drop cached settings and alphabet tables."""
    global _settings, _cache
    _settings = None
    _cache = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    settings = get_settings()
    logger.info(
        "Starting fuzzy-locate service",
        extra={
            "version": __version__,
            "threshold": settings.threshold,
            "distance": settings.distance,
            "max_bits": settings.max_bits,
        },
    )
    yield
    logger.info("Shutting down fuzzy-locate service")
    if _cache is not None:
        _cache.clear()


app = FastAPI(
    title="fuzzy-locate",
    description="Bitap fuzzy substring location with a location bias",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(RequestLoggingMiddleware)


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="ok", version=__version__)


@app.get("/metrics", tags=["Monitoring"])
async def metrics():
    """Prometheus metrics endpoint."""
    return Response(
        content=generate_latest(),
        media_type=CONTENT_TYPE_LATEST,
    )


@app.post("/api/locate", response_model=LocateResponse, tags=["Locate"])
def locate_endpoint(body: LocateRequest):
    """Locate the pattern in the sample text.

    Numeric fields are parsed and clamped before searching. Omitted
    distance and threshold fall back to the configured defaults.
    """
    settings = get_settings()
    request = parse_fields(
        body.sample,
        body.pattern,
        body.location,
        body.distance if body.distance is not None else str(int(settings.distance)),
        body.threshold if body.threshold is not None else str(settings.threshold),
        max_bits=settings.max_bits,
    )
    result = run_request(request, cache=get_alphabet_cache())

    return LocateResponse(index=result.index, score=result.score, label=result.label)


@app.exception_handler(InvalidParameter)
async def invalid_parameter_handler(request: Request, exc: InvalidParameter):
    """Report unparseable harness input as a validation error."""
    logger.info(
        "Rejected invalid parameter",
        extra={"event": "invalid_parameter", "field": exc.field},
    )
    return JSONResponse(
        status_code=422,
        content={
            "error": {
                "message": str(exc),
                "type": "invalid_parameter",
                "field": exc.field,
            }
        },
    )


# Registered on Starlette's class so routing 404/405 responses are covered too
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": {
                "message": exc.detail,
                "type": "invalid_request_error",
                "code": exc.status_code,
            }
        },
        headers=getattr(exc, "headers", None),
    )


# ============================================================================
# Web UI
# ============================================================================

UI_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>fuzzy-locate harness</title>
    <style>
        * { box-sizing: border-box; }
        body {
            font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif;
            max-width: 720px;
            margin: 0 auto;
            padding: 20px;
            background: #f5f7fa;
            color: #333;
        }
        h1 {
            color: #1a1a2e;
            border-bottom: 2px solid #4a90d9;
            padding-bottom: 10px;
        }
        .container {
            background: white;
            border-radius: 8px;
            padding: 24px;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
        }
        label {
            display: block;
            font-weight: 600;
            margin: 12px 0 6px;
            color: #444;
        }
        .input-group {
            display: flex;
            gap: 16px;
        }
        .input-group > div { flex: 1; }
        input, textarea {
            width: 100%;
            padding: 10px 12px;
            border: 1px solid #ddd;
            border-radius: 6px;
            font-size: 14px;
            font-family: inherit;
        }
        textarea { height: 120px; resize: vertical; }
        button {
            margin-top: 16px;
            background: #4a90d9;
            color: white;
            border: none;
            padding: 10px 24px;
            border-radius: 6px;
            font-size: 14px;
            cursor: pointer;
        }
        #result {
            margin-top: 16px;
            font-size: 18px;
            font-weight: 600;
        }
        #result.error { color: #c0392b; }
    </style>
</head>
<body>
    <h1>fuzzy-locate</h1>
    <div class="container">
        <label for="sample">Sample text</label>
        <textarea id="sample">the quick brown fox</textarea>

        <label for="pattern">Pattern</label>
        <input id="pattern" value="quikc">

        <div class="input-group">
            <div>
                <label for="location">Location</label>
                <input id="location" value="4">
            </div>
            <div>
                <label for="distance">Distance</label>
                <input id="distance" value="10">
            </div>
            <div>
                <label for="threshold">Threshold</label>
                <input id="threshold" value="0.5">
            </div>
        </div>

        <button onclick="runLocate()">Locate</button>
        <div id="result"></div>
    </div>

    <script>
        async function runLocate() {
            const body = {};
            for (const id of ["sample", "pattern", "location", "distance", "threshold"]) {
                body[id] = document.getElementById(id).value;
            }
            const result = document.getElementById("result");
            const response = await fetch("/api/locate", {
                method: "POST",
                headers: { "Content-Type": "application/json" },
                body: JSON.stringify(body),
            });
            const data = await response.json();
            if (response.ok) {
                result.className = "";
                result.textContent = data.label;
            } else {
                result.className = "error";
                result.textContent = data.error ? data.error.message : JSON.stringify(data.detail);
            }
        }
    </script>
</body>
</html>
"""


@app.get("/ui", response_class=HTMLResponse, tags=["UI"])
async def ui_page():
    """Serve the harness page: five inputs and one result label."""
    return UI_HTML
