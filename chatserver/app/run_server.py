#!/usr/bin/env python3
"""
Start the chat backend with uvicorn.

Usage:
    python -m chatserver.app.run_server                    # localhost:8000
    python -m chatserver.app.run_server --host 0.0.0.0     # reachable on the LAN
    python -m chatserver.app.run_server --port 8080 --reload
"""

import argparse
from pathlib import Path

import uvicorn

from chatserver.app.config.settings import settings


def main():
    parser = argparse.ArgumentParser(description=f'Start {settings.APP_NAME}')
    parser.add_argument(
        '--host',
        type=str,
        default='127.0.0.1',
        help='address to bind (default: 127.0.0.1, use 0.0.0.0 for LAN access)'
    )
    parser.add_argument(
        '--port',
        type=int,
        default=8000,
        help='port (default: 8000)'
    )
    parser.add_argument(
        '--reload',
        action='store_true',
        help='reload on code changes (development)'
    )

    args = parser.parse_args()

    current_dir = Path(__file__).parent

    print("=" * 60)
    print(f"{settings.APP_NAME}")
    print("=" * 60)
    print(f"Host:     {args.host}")
    print(f"Port:     {args.port}")
    print(f"Reload:   {'on' if args.reload else 'off'}")
    print(f"Database: {settings.SQLALCHEMY_DATABASE_URL}")
    print("=" * 60)

    uvicorn.run(
        "chatserver.app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        reload_dirs=[str(current_dir)] if args.reload else None,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
