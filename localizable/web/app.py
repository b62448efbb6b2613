"""FastAPI application exposing the search and convert workflows."""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..errors import (
    FormatError,
    LocalizableError,
    ProcessError,
    SearchCancelledError,
    SearchError,
    StorageError,
)
from ..services.workspace import Workspace
from .routes import api

logger = logging.getLogger(__name__)

# Most specific first
ERROR_STATUS = [
    (SearchCancelledError, 409),
    (FormatError, 400),
    (StorageError, 404),
    (SearchError, 502),
    (ProcessError, 502),
]


async def handle_localizable_error(request: Request, exc: LocalizableError) -> JSONResponse:
    """Turn a pipeline failure into a JSON error with a status message."""
    status_code = next(
        (code for kind, code in ERROR_STATUS if isinstance(exc, kind)),
        500,
    )
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": type(exc).__name__, "message": str(exc)},
    )


def create_app(workspace: Optional[Workspace] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Localizable Converter",
        description="Search and convert Localizable.strings files",
        version="0.1.0",
    )

    # Store services in app state
    app.state.workspace = workspace or Workspace.create()

    app.add_exception_handler(LocalizableError, handle_localizable_error)
    app.include_router(api.router, prefix="/api")

    return app


def main():
    """Entry point for the localizable-web command."""
    import argparse

    parser = argparse.ArgumentParser(description="Run the Localizable Converter API")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")

    args = parser.parse_args()

    print(f"Starting Localizable Converter at http://{args.host}:{args.port}")
    uvicorn.run(
        "localizable.web.app:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
