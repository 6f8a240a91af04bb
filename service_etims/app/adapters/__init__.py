"""
Adapters package for the eTIMS service.

Contains the HTTP client wrapper for the remote KRA eTIMS API. It
encapsulates:

- Base URL and request shapes
- Bearer token caching and lazy refresh
- Response normalization that maps to shared errors

Keep adapters thin and side-effect free outside of explicit calls.
"""

from .api_client import AccessToken, Credentials, EtimsApiClient, normalize_response

__all__ = [
    "AccessToken",
    "Credentials",
    "EtimsApiClient",
    "normalize_response",
]
