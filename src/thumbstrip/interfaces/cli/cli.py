from __future__ import annotations

import argparse
import asyncio
import json
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import structlog

from thumbstrip.domain.entities import InvalidVideoId, StoryboardOutcome
from thumbstrip.infrastructure.config import load_config
from thumbstrip.infrastructure.logging.setup import configure_logging, shutdown_logging
from thumbstrip.interfaces.composition import Container, build_container

log = structlog.get_logger(__name__)

EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_INVALID_ID = 2


def _parse_args(argv: Iterable[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="thumbstrip",
        description="Resolve YouTube storyboard (seekbar thumbnail) specs.",
    )
    parser.add_argument(
        "video_ids",
        nargs="+",
        metavar="VIDEO_ID",
        help="One or more video ids.",
    )

    # Config wiring flags (no business logic)
    parser.add_argument(
        "--config",
        default=None,
        help="Path to YAML config file.",
    )
    parser.add_argument(
        "--dotenv",
        default=None,
        help="Path to .env file.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Override InnerTube base URL.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override log level.",
    )
    parser.add_argument(
        "--log-format",
        default=None,
        choices=["json", "console"],
        help="Override log format.",
    )

    return parser.parse_args(argv)


async def _run(container: Container, video_ids: list[str]) -> int:
    exit_code = EXIT_OK
    for video_id in video_ids:
        try:
            result = await container.lookup.execute(video_id)
        except InvalidVideoId:
            log.error("invalid_video_id", video_id=video_id)
            return EXIT_INVALID_ID

        payload: dict[str, Any] = {"video_id": video_id, **result.to_dict()}
        print(json.dumps(payload), flush=True)
        if result.outcome is StoryboardOutcome.UNRESOLVED:
            exit_code = EXIT_UNRESOLVED
    return exit_code


def start(argv: Iterable[str] | None = None) -> int:
    """
    Process entrypoint.

    Loads config exactly once, configures logging, then resolves each id in order.
    """
    if argv is None:
        argv = sys.argv[1:]

    args = _parse_args(argv)

    cli_overrides: dict[str, Any] = {}
    if args.base_url:
        cli_overrides["innertube_base_url"] = args.base_url
    if args.log_level:
        cli_overrides["log_level"] = args.log_level
    if args.log_format:
        cli_overrides["log_format"] = args.log_format

    config = load_config(
        config_path=Path(args.config) if args.config else None,
        dotenv_path=Path(args.dotenv) if args.dotenv else None,
        cli_overrides=cli_overrides,
    )
    configure_logging(config)

    try:
        return asyncio.run(_run(build_container(config), list(args.video_ids)))
    finally:
        shutdown_logging()


if __name__ == "__main__":
    raise SystemExit(start())
