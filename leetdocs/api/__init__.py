"""
LeetCode API Layer.

This package handles all communication with the site's REST and GraphQL endpoints.
"""

from .auth import LeetCodeAuthenticator
from .client import LeetCodeAPIClient
from .rate_limiter import RateLimiter

__all__ = ["LeetCodeAPIClient", "LeetCodeAuthenticator", "RateLimiter"]
