"""API routes."""

from app.api.routes import users, scans, brokers, requests, exposures

__all__ = ["users", "scans", "brokers", "requests", "exposures"]
