"""API module for the fuzzy-locate harness service."""

from fuzzy_locate.api.routes import app
from fuzzy_locate.api.models import LocateRequest, LocateResponse

__all__ = [
    "app",
    "LocateRequest",
    "LocateResponse",
]
