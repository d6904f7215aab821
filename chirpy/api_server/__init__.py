"""
API server package — the Chirpy HTTP interface.

Serves the static web app (counted by the hit counter), the health check,
chirp validation, and the admin metrics/reset endpoints.
"""
