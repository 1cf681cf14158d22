#!/usr/bin/env python
"""
Start the DevHub API under uvicorn.

Usage:
    python run_api.py
    python run_api.py --reload           # Development mode
    python run_api.py --log-level debug
"""

import argparse
import uvicorn

from shared.config import get_settings

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Start the DevHub API server")
    parser.add_argument("--host", help="Interface to bind (default: HOST setting)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: PORT setting)")
    parser.add_argument("--reload", action="store_true", help="Restart on code changes")
    parser.add_argument("--workers", type=int, default=1, help="Worker processes (ignored with --reload)")
    parser.add_argument("--log-level", choices=LOG_LEVELS, help="Override the LOG_LEVEL setting")
    return parser


def main():
    args = build_parser().parse_args()
    settings = get_settings()
    reload = args.reload or settings.reload

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=reload,
        workers=None if reload else args.workers,
        log_level=args.log_level or settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
