"""Upstream sports data access."""

from .client import ApiFootballClient, UpstreamError, api_errors, current_season

__all__ = ["ApiFootballClient", "UpstreamError", "api_errors", "current_season"]
