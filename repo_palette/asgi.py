"""ASGI entry point: ``uvicorn repo_palette.asgi:app``."""

from repo_palette.app import create_app

app = create_app()
