"""
Task API CLI — Run and Probe the Service
=========================================

Usage:
    # Start the server (defaults: 0.0.0.0:8080, or TASKAPI_* env vars)
    python -m taskapi.cli serve
    python -m taskapi.cli serve --port 9000 --log-level debug

    # Check a running server
    python -m taskapi.cli health
    python -m taskapi.cli health --url http://localhost:9000
"""

from __future__ import annotations

import argparse
import sys
import urllib.error
import urllib.request

from taskapi.config import ServerConfig, LOG_LEVELS
from taskapi.logging_setup import setup_logging
from taskapi.server import HEALTH_MESSAGE

DEFAULT_URL = "http://localhost:8080"


# ─────────────────────────────────────────────────────────────
#  Commands
# ─────────────────────────────────────────────────────────────

def cmd_serve(args) -> int:
    """Run the Task API until interrupted."""
    config = ServerConfig.from_env().with_overrides(
        host=getattr(args, "host", None),
        port=getattr(args, "port", None),
        log_level=getattr(args, "log_level", None),
    )
    setup_logging(config.log_level)

    from taskapi.server import run_server
    run_server(config)
    return 0


def cmd_health(args) -> int:
    """Query /api/health on a running server."""
    base_url = (getattr(args, "url", None) or DEFAULT_URL).rstrip("/")
    url = f"{base_url}/api/health"

    try:
        with urllib.request.urlopen(url, timeout=5) as resp:
            body = resp.read().decode("utf-8")
    except (urllib.error.URLError, OSError) as e:
        print(f"✘ Cannot reach {url}: {e}")
        return 1

    if body.strip() == HEALTH_MESSAGE:
        print(f"✔ {body.strip()}")
        return 0

    print(f"✘ Unexpected health response: {body!r}")
    return 1


# ─────────────────────────────────────────────────────────────
#  Main
# ─────────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="taskapi",
        description="Task API — minimal task-tracking HTTP service",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  taskapi serve --port 8080\n"
            "  taskapi health --url http://localhost:8080\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # serve
    p_serve = subparsers.add_parser("serve", help="Start the HTTP server")
    p_serve.add_argument("--host", default=None, help="Bind address (default: 0.0.0.0)")
    p_serve.add_argument("--port", "-p", default=None, type=int,
                         help="Port number (default: 8080)")
    p_serve.add_argument("--log-level", default=None,
                         choices=sorted(LOG_LEVELS),
                         help="Log level (default: info)")

    # health
    p_health = subparsers.add_parser("health", help="Check a running server")
    p_health.add_argument("--url", default=DEFAULT_URL,
                          help=f"Base URL of the server (default: {DEFAULT_URL})")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "serve": cmd_serve,
        "health": cmd_health,
    }

    if args.command in commands:
        return commands[args.command](args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
