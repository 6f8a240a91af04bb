#!/usr/bin/env python3
"""
Start the eTIMS HTTP gateway and list the routes it serves.
"""

import argparse
from typing import List, Optional

from fastapi.routing import APIRoute

from service_etims.app.main import EtimsService
from shared.config import get_settings


def describe_routes(service: EtimsService) -> List[str]:
    """One ``METHOD /path - summary`` line per API route."""
    lines = []
    for route in service.app.routes:
        if not isinstance(route, APIRoute) or not route.path.startswith(service.api_prefix):
            continue
        summary = route.description.splitlines()[0] if route.description else ""
        for method in sorted(route.methods):
            lines.append(f"{method} {route.path} - {summary}" if summary else f"{method} {route.path}")
    return lines


def _parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Run the eTIMS HTTP gateway.")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Listen port")
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    args = _parse_args(argv)
    settings = get_settings().model_copy(update={"host": args.host, "port": args.port})
    service = EtimsService(settings)

    print(f"KRA eTIMS gateway running on {settings.host}:{settings.port}")
    print("Available endpoints:")
    for line in describe_routes(service):
        print(f"- {line}")

    try:
        service.run()
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
