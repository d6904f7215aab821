"""
FastAPI/ASGI application entrypoint.

Run with: uvicorn chirpy.api_server.app:app --host 0.0.0.0 --port 8080
"""

from chirpy.api_server.server import create_app

app = create_app()

__all__ = ["app"]
