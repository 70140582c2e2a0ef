#!/usr/bin/env python
"""
Run the Life Lessons API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode
"""

import argparse
import logging
import sys

import uvicorn

from shared.config import get_settings

logger = logging.getLogger("run_api")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run the Life Lessons API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    try:
        uvicorn.run(
            "api:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=args.reload or settings.reload,
            log_level=settings.log_level.lower(),
        )
    except SystemExit as e:
        # uvicorn exits non-zero when application startup fails
        if e.code:
            logger.error(f"Server failed to start (exit code {e.code})")
            return 1
        raise
    except Exception:
        logger.exception("Server failed to start")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
