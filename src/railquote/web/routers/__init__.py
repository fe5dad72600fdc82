"""API routers for the REST API."""

from railquote.web.routers.export import router as export_router
from railquote.web.routers.options import router as options_router
from railquote.web.routers.quote import router as quote_router
from railquote.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "options_router",
    "quote_router",
    "validate_router",
]
