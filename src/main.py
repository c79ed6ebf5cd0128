#!/usr/bin/env python3
"""Main entry point for ChronoPeek."""

import logging
import sys
from pathlib import Path
import uvicorn

# Add src to path
sys.path.insert(0, str(Path(__file__).parent))

from config import settings
from cronexpr import CronError, next_n_runs, parse_cron
from cronexpr.describe import format_run, humanize

logger = logging.getLogger(__name__)


def setup_logging():
    """Configure logging from settings."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(settings.log_file) if settings.log_file else logging.NullHandler()
        ]
    )


def run_http_server():
    """Run the HTTP API server."""
    logger.info(f"Starting HTTP server on {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "api.http_server:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        log_level=settings.log_level.lower()
    )


def run_preview(expression: str, count: int) -> int:
    """Print the next runs of an expression. Returns the exit status."""
    try:
        cron = parse_cron(expression)
        runs = next_n_runs(cron, count, limit=settings.search_limit_minutes)
    except CronError as e:
        logger.error(f"{e.kind.value}: {e}")
        return 1

    for index, run in enumerate(runs, start=1):
        print(f"{index}. {format_run(run)}")
    summary = humanize(cron.source, runs)
    if summary:
        print(summary)
    return 0


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="ChronoPeek cron preview")
    parser.add_argument(
        "--mode",
        choices=["http", "preview"],
        default="http",
        help="Run the HTTP server or print a preview (default: http)"
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Cron expression to preview, e.g. '5 4 * * *'"
    )
    parser.add_argument(
        "--count",
        type=int,
        default=settings.default_run_count,
        help=f"Number of runs to preview (default: {settings.default_run_count})"
    )
    parser.add_argument(
        "--host",
        default=settings.api_host,
        help=f"HTTP server host (default: {settings.api_host})"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.api_port,
        help=f"HTTP server port (default: {settings.api_port})"
    )

    args = parser.parse_args()
    setup_logging()

    if args.mode == "preview":
        if not args.expression:
            parser.error("preview mode needs an expression")
        if args.count < 0:
            parser.error("--count must not be negative")
        sys.exit(run_preview(args.expression, args.count))

    # Update settings if provided
    settings.api_host = args.host
    settings.api_port = args.port

    try:
        run_http_server()
    except KeyboardInterrupt:
        logger.info("Shutting down ChronoPeek...")
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
