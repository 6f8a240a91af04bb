"""
Domain utilities for the eTIMS service.

Cross-cutting request processing helpers that do not belong to adapters or
resource services.
"""

from .auth_middleware import require_auth

__all__ = [
    "require_auth",
]
