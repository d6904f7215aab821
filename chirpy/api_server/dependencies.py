"""
FastAPI dependencies: per-app shared objects stored on app.state by create_app().
"""

from __future__ import annotations

from fastapi import Request

from chirpy.metrics import HitCounter
from chirpy.moderation import ChirpValidator


def get_hit_counter(request: Request) -> HitCounter:
    """Dependency: the application's file server hit counter."""
    return request.app.state.hit_counter


def get_chirp_validator(request: Request) -> ChirpValidator:
    """Dependency: the application's chirp validator."""
    return request.app.state.chirp_validator
