"""
HTTP request handling.

Exposes the palette pipeline as a single GET endpoint. Missing query
parameters answer 400; any pipeline failure answers 500 with the cause
logged, never returned.
"""

import httpx
from fastapi import FastAPI, Request, Response

from repo_palette.config import Settings
from repo_palette.exceptions import ValidationError
from repo_palette.logging import configure_logging, get_logger
from repo_palette.pipeline import build_palette
from repo_palette.types.request import RequestOptions

CORS_HEADERS = {
    "Access-Control-Allow-Headers": (
        "Origin, X-Requested-With, Content-Type, Accept, Access-Control-Allow-Origin"
    ),
    "Access-Control-Allow-Methods": "GET",
    "Access-Control-Max-Age": "8640",
    "Access-Control-Allow-Origin": "*",
    "Vary": "Origin",
}

logger = get_logger()


def create_app(
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """
    Create the palette application.

    Args:
        settings: Service settings (default: read from the environment)
        transport: Custom httpx transport for archive downloads

    Returns:
        FastAPI application
    """
    if settings is None:
        settings = Settings.from_env()

    configure_logging(level=settings.log_level)

    app = FastAPI(title="repo-palette", docs_url=None, redoc_url=None)
    app.state.settings = settings
    app.state.transport = transport

    @app.get("/")
    @app.get("/extract")
    async def palette(request: Request) -> Response:
        try:
            options = RequestOptions.from_query(request.query_params)
        except ValidationError as e:
            logger.info(e.message)
            return Response(status_code=400)

        try:
            svg = await build_palette(
                options,
                settings=request.app.state.settings,
                transport=request.app.state.transport,
            )
        except Exception:
            logger.exception(
                f"Palette failed for {options.owner}/{options.repo}@{options.branch}"
            )
            return Response(status_code=500)

        return Response(
            content=svg,
            status_code=200,
            media_type=request.app.state.settings.content_type,
            headers=CORS_HEADERS,
        )

    return app
