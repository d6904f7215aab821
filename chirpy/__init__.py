"""
Chirpy — a small HTTP service for short messages ("chirps").

Serves the static web app under /app/, counts its visits, exposes an admin
metrics page, and validates and cleans chirps before they are posted.
"""

__version__ = "0.1.0"
