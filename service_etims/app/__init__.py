"""
KRA eTIMS integration service.

The SDK (``EtimsSDK``) can be used on its own; ``main.create_app`` wraps it
in a FastAPI front-end.
"""

from .sdk import EtimsSDK

__all__ = ["EtimsSDK"]
