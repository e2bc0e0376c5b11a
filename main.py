"""Demo service — writes random log lines through the rotating file transport."""

import argparse
import dataclasses
import logging
import os
import random
import signal
import sys
import time
import uuid

from rotating_transport.config import load_config, load_yaml_config
from rotating_transport.errors import ConfigError, TransportInitError
from rotating_transport.transport import open_transport

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [log-rotation] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_running = True


def _signal_handler(sig, _frame):
    global _running
    logger.info("Shutdown signal received (signal %d), stopping...", sig)
    _running = False


LEVELS = ["info", "info", "info", "info", "debug", "warn", "error"]
SERVICES = ["auth-api", "order-svc", "payment-gw", "user-svc", "catalog-api"]
MESSAGES = {
    "info": [
        "Request processed successfully",
        "Health check passed",
        "Cache hit for user session",
        "Database query completed in 12ms",
    ],
    "debug": [
        "Entering request handler",
        "Token validation started",
    ],
    "warn": [
        "Slow query detected (>500ms)",
        "Connection pool nearing capacity",
    ],
    "error": [
        "Failed to connect to database",
        "Timeout waiting for upstream response",
    ],
}


def build_cli_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rotating log file demo")
    parser.add_argument("--config", default=None, help="Path to YAML config file")
    parser.add_argument(
        "--file", default=None,
        help="Active log file (default: ./logs/application.log unless configured)",
    )
    parser.add_argument(
        "--interval", type=float, default=0.05,
        help="Seconds between demo lines (default: 0.05)",
    )
    return parser


def main():
    signal.signal(signal.SIGINT, _signal_handler)
    signal.signal(signal.SIGTERM, _signal_handler)

    args = build_cli_parser().parse_args()
    try:
        config = load_config(load_yaml_config(args.config))
    except ConfigError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(2)

    if args.file:
        config = dataclasses.replace(config, file=args.file)
    elif not config.file and not config.app_name:
        config = dataclasses.replace(config, file=os.path.join("logs", "application.log"))

    logger.info(
        "Config: file=%s, app_name=%s, max_size=%d bytes, max_archives=%d",
        config.file, config.app_name, config.max_size_bytes, config.max_archive_count,
    )

    try:
        transport = open_transport(config)
    except TransportInitError as e:
        logger.error("Cannot start: %s", e)
        sys.exit(1)

    entries_written = 0
    with transport:
        while _running:
            level = random.choice(LEVELS)
            archived = transport.log(
                level,
                f"[{random.choice(SERVICES)}]",
                f"[{uuid.uuid4().hex[:8]}]",
                random.choice(MESSAGES[level]),
            )
            entries_written += 1
            if archived:
                logger.info("Rotated: %s (%d entries written so far)", archived, entries_written)
            time.sleep(args.interval)

    logger.info("Shut down cleanly. Total entries written: %d", entries_written)


if __name__ == "__main__":
    main()
