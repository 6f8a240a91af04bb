"""
Shared utilities for the eTIMS integration layer.

This package aggregates common building blocks consumed by the SDK and the
HTTP front-end:

- config: Runtime configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and response envelopes
- base_service: FastAPI application scaffold

Do not import from service_* packages into shared/.
"""
