#!/usr/bin/env python
"""
Serve the Grand Line Guide backend with uvicorn.

Usage:
    python run_api.py
    python run_api.py --reload --log-level debug
"""

import argparse
import logging

import uvicorn

from shared.config import get_settings

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Grand Line Guide backend")
    parser.add_argument("--host", help="Interface to bind (default: HOST setting)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: PORT setting)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


def main(argv=None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    log_level = args.log_level or settings.log_level

    # uvicorn only sets up its own loggers; application modules log through root
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level=log_level,
    )


if __name__ == "__main__":
    main()
