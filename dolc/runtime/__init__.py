"""dolc runtime: process lifecycle, rate limiting, and the HTTP service.

Usage:
    from dolc.runtime import initialize
    from dolc.runtime.serving import create_app

    initialize()
    app = create_app()
"""

from dolc.runtime.lifecycle import initialize, is_initialized, shutdown
from dolc.runtime.ratelimit import RateLimiter

__all__ = [
    "RateLimiter",
    "initialize",
    "is_initialized",
    "shutdown",
]
